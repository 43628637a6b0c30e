"""Command-line entry point for publish decisions and workflow rendering."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import msgspec

from sitegate.build import BuildConfigError, GitHubOutputCollaborator, plan_build
from sitegate.github import GitHubContextError, descriptor_from_actions_env
from sitegate.logging import configure_logging, get_logger, log_warning
from sitegate.observability import PublishEventLogger
from sitegate.publish import (
    EventDescriptor,
    PublishConfig,
    PublishConfigError,
    PublishEventError,
    PublishTriggerController,
)
from sitegate.workflow import render_workflow, write_workflow

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sitegate", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    decide = commands.add_parser(
        "decide", help="Decide whether to build only or build and deploy"
    )
    decide.add_argument(
        "--event-kind", help="Event kind: 'push' or 'review_request'"
    )
    decide.add_argument("--branch", help="Branch pushed to or targeted")
    decide.add_argument(
        "--from-github",
        action="store_true",
        help="Describe the event from the GitHub Actions runner environment",
    )
    decide.add_argument(
        "--github-output",
        type=Path,
        default=None,
        help="Append the decision to this GitHub Actions step-output file",
    )

    workflow = commands.add_parser(
        "workflow", help="Render the GitHub Actions workflow"
    )
    workflow.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the workflow here instead of printing it",
    )
    workflow.add_argument(
        "--install-spec",
        required=True,
        help=(
            "pip requirement the decide job installs sitegate from, "
            "e.g. git+https://example.com/org/sitegate@v0.1.0"
        ),
    )
    workflow.add_argument(
        "--action",
        default=None,
        help="Override the site-building action reference",
    )
    return parser


def _describe(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> EventDescriptor:
    if args.from_github:
        if args.event_kind is not None or args.branch is not None:
            parser.error("--from-github cannot be combined with --event-kind/--branch")
        return descriptor_from_actions_env()
    if args.event_kind is None or args.branch is None:
        parser.error("--event-kind and --branch are required without --from-github")
    return EventDescriptor(origin_branch=args.branch, event_kind=args.event_kind)


def _decide(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    events = PublishEventLogger()
    source = "github-actions" if args.from_github else "cli"
    try:
        config = PublishConfig.from_env()
        event = _describe(args, parser)
        decision = PublishTriggerController(config).evaluate(event)
    except PublishEventError as exc:
        events.log_rejected(source, exc)
        print(f"Event rejected: {exc}", file=sys.stderr)
        return EXIT_REJECTED
    except (GitHubContextError, PublishConfigError) as exc:
        log_warning(logger, "cannot evaluate %s event: %s", source, exc)
        print(f"Cannot evaluate event: {exc}", file=sys.stderr)
        return EXIT_REJECTED

    events.log_decision(event, decision)
    invocation = plan_build(decision, config)

    if args.github_output is not None:
        collaborator = GitHubOutputCollaborator(args.github_output)
        try:
            collaborator.dispatch(invocation)
        except BuildConfigError as exc:
            print(f"Cannot write step outputs: {exc}", file=sys.stderr)
            return EXIT_REJECTED
        events.log_dispatched(invocation, str(args.github_output))

    payload = {**decision.as_dict(), "job": invocation.job_id}
    print(msgspec.json.encode(payload).decode("utf-8"))
    return EXIT_OK


def _workflow(args: argparse.Namespace) -> int:
    try:
        config = PublishConfig.from_env()
    except PublishConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_REJECTED

    if not args.install_spec.strip():
        print("Invalid configuration: --install-spec is empty", file=sys.stderr)
        return EXIT_REJECTED

    options = {"install_spec": args.install_spec}
    if args.action is not None:
        options["action"] = args.action
    if args.output is None:
        sys.stdout.write(render_workflow(config, **options))
    else:
        write_workflow(args.output, config, **options)
        print(f"workflow written to {args.output}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run the ``sitegate`` command line.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the event or configuration is
        rejected. Rejected events never fall back to a build mode.

    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    raw_level = os.environ.get("SITEGATE_LOG_LEVEL", "INFO")
    normalized, invalid = configure_logging(raw_level)
    if invalid:
        log_warning(
            logger,
            "Invalid SITEGATE_LOG_LEVEL %r, falling back to %s",
            raw_level,
            normalized,
        )

    if args.command == "decide":
        return _decide(args, parser)
    return _workflow(args)


if __name__ == "__main__":
    raise SystemExit(main())
