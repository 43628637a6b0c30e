"""Render the GitHub Actions workflow that runs sitegate.

The workflow has three jobs. ``decide`` evaluates the triggering event and
publishes the decision as step outputs; ``build`` and ``build_and_deploy``
run the site-building action and are gated on that decision, so exactly
one of them runs per event.
"""

from __future__ import annotations

import io
import shlex
import typing as typ

from ruamel.yaml import YAML

from sitegate.build.invocation import DEFAULT_DEPLOY_ACTION, BuildInvocation
from sitegate.publish.models import PublishMode

if typ.TYPE_CHECKING:
    from pathlib import Path

    from sitegate.publish.config import PublishConfig

RUNNER = "ubuntu-latest"
CHECKOUT_ACTION = "actions/checkout@main"
SETUP_PYTHON_ACTION = "actions/setup-python@v5"
PYTHON_VERSION = "3.12"
TOKEN_EXPRESSION = "${{ secrets.GITHUB_TOKEN }}"
DECIDE_STEP_ID = "decide"


def _checkout() -> dict[str, str]:
    return {"name": "Checkout", "uses": CHECKOUT_ACTION}


def _decide_job(config: PublishConfig, install_spec: str) -> dict[str, typ.Any]:
    outputs = {
        key: f"${{{{ steps.{DECIDE_STEP_ID}.outputs.{key} }}}}"
        for key in ("mode", "job", "deploy", "pages_branch")
    }
    return {
        "runs-on": RUNNER,
        "outputs": outputs,
        "steps": [
            _checkout(),
            {
                "name": "Set up Python",
                "uses": SETUP_PYTHON_ACTION,
                "with": {"python-version": PYTHON_VERSION},
            },
            {
                "name": "Install sitegate",
                "run": f"pip install {shlex.quote(install_spec)}",
            },
            {
                "name": "Decide",
                "id": DECIDE_STEP_ID,
                "run": (
                    "python -m sitegate.cli decide --from-github "
                    '--github-output "$GITHUB_OUTPUT"'
                ),
                "env": {
                    "SITEGATE_PUBLISH_BRANCH": config.publish_branch,
                    "SITEGATE_PAGES_BRANCH": config.pages_branch,
                    "SITEGATE_BUILD_DIR": config.build_dir,
                },
            },
        ],
    }


def _builder_job(
    invocation: BuildInvocation, step_name: str, action: str
) -> dict[str, typ.Any]:
    return {
        "needs": DECIDE_STEP_ID,
        "if": f"needs.{DECIDE_STEP_ID}.outputs.mode == '{invocation.mode}'",
        "runs-on": RUNNER,
        "steps": [
            _checkout(),
            {
                "name": step_name,
                "uses": action,
                "env": invocation.action_env(TOKEN_EXPRESSION),
            },
        ],
    }


def build_workflow(
    config: PublishConfig,
    *,
    install_spec: str,
    action: str = DEFAULT_DEPLOY_ACTION,
) -> dict[str, typ.Any]:
    """Return the workflow definition as a plain mapping.

    Parameters
    ----------
    config
        Branches and build directory baked into the workflow.
    install_spec
        Argument passed to ``pip install`` in the decide job, such as a
        pinned ``git+https://...@<tag>`` reference. There is no default
        because the job gates deployment.
    action
        Site-building action reference, ``owner/repo@version``.

    Returns
    -------
    dict[str, Any]
        Mapping ready to be dumped as workflow YAML.

    Raises
    ------
    ValueError
        If ``install_spec`` is blank.

    """
    if not install_spec.strip():
        msg = "install_spec must be a non-empty pip requirement"
        raise ValueError(msg)

    build_only = BuildInvocation(
        mode=PublishMode.BUILD_ONLY,
        build_dir=config.build_dir,
    )
    build_and_deploy = BuildInvocation(
        mode=PublishMode.BUILD_AND_DEPLOY,
        build_dir=config.build_dir,
        pages_branch=config.pages_branch,
    )
    return {
        "name": "Build site",
        "on": {
            "push": {"branches": [config.publish_branch]},
            "pull_request": {},
        },
        "jobs": {
            DECIDE_STEP_ID: _decide_job(config, install_spec),
            build_only.job_id: _builder_job(build_only, "Build only", action),
            build_and_deploy.job_id: _builder_job(
                build_and_deploy, "Build and deploy", action
            ),
        },
    }


def _yaml() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    yaml.sort_base_mapping_type_on_output = False
    return yaml


def render_workflow(
    config: PublishConfig, *, install_spec: str, **kwargs: str
) -> str:
    """Return the workflow as a YAML document.

    Keyword arguments are passed to :func:`build_workflow`.
    """
    stream = io.StringIO()
    _yaml().dump(
        build_workflow(config, install_spec=install_spec, **kwargs), stream
    )
    return stream.getvalue()


def write_workflow(
    path: Path, config: PublishConfig, *, install_spec: str, **kwargs: str
) -> None:
    """Write the rendered workflow to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        render_workflow(config, install_spec=install_spec, **kwargs),
        encoding="utf-8",
    )


__all__ = [
    "build_workflow",
    "render_workflow",
    "write_workflow",
]
