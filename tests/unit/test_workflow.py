"""Unit tests for workflow rendering."""

from __future__ import annotations

import typing as typ

import pytest
from ruamel.yaml import YAML

from sitegate.build import DEFAULT_DEPLOY_ACTION
from sitegate.publish import PublishConfig
from sitegate.workflow import build_workflow, render_workflow, write_workflow

INSTALL_SPEC = "git+https://example.com/org/sitegate@v0.1.0"

if typ.TYPE_CHECKING:
    from pathlib import Path


def _load(text: str) -> dict[str, typ.Any]:
    return YAML(typ="safe", pure=True).load(text)


@pytest.fixture
def workflow() -> dict[str, typ.Any]:
    """Workflow for the default branches."""
    return build_workflow(PublishConfig(), install_spec=INSTALL_SPEC)


def test_triggers_on_publishing_pushes_and_pull_requests(
    workflow: dict[str, typ.Any],
) -> None:
    """Pushes are limited to the publishing branch; all PRs are built."""
    assert workflow["on"] == {
        "push": {"branches": ["code"]},
        "pull_request": {},
    }


def test_has_decide_and_builder_jobs(workflow: dict[str, typ.Any]) -> None:
    """Jobs keep the builder names and depend on the decision."""
    jobs = workflow["jobs"]
    assert list(jobs) == ["decide", "build", "build_and_deploy"]
    assert jobs["build"]["needs"] == "decide"
    assert jobs["build_and_deploy"]["needs"] == "decide"


def test_builder_jobs_are_gated_on_mode(workflow: dict[str, typ.Any]) -> None:
    """Each builder job runs for exactly one mode."""
    jobs = workflow["jobs"]
    assert jobs["build"]["if"] == "needs.decide.outputs.mode == 'build_only'"
    assert (
        jobs["build_and_deploy"]["if"]
        == "needs.decide.outputs.mode == 'build_and_deploy'"
    )


def test_builder_steps_use_deploy_action(workflow: dict[str, typ.Any]) -> None:
    """Builder steps pass the action environment for their mode."""
    build_step = workflow["jobs"]["build"]["steps"][-1]
    deploy_step = workflow["jobs"]["build_and_deploy"]["steps"][-1]

    assert build_step["uses"] == DEFAULT_DEPLOY_ACTION
    assert build_step["env"] == {
        "BUILD_DIR": ".",
        "GITHUB_TOKEN": "${{ secrets.GITHUB_TOKEN }}",
        "BUILD_ONLY": "true",
    }
    assert deploy_step["env"] == {
        "BUILD_DIR": ".",
        "GITHUB_TOKEN": "${{ secrets.GITHUB_TOKEN }}",
        "PAGES_BRANCH": "master",
    }


def test_decide_step_receives_configuration() -> None:
    """The decide step runs the CLI with the configured branches."""
    workflow = build_workflow(
        PublishConfig(publish_branch="main", pages_branch="gh-pages"),
        install_spec=INSTALL_SPEC,
    )
    decide = workflow["jobs"]["decide"]
    step = decide["steps"][-1]

    assert step["id"] == "decide"
    assert "sitegate.cli decide --from-github" in step["run"]
    assert step["env"]["SITEGATE_PUBLISH_BRANCH"] == "main"
    assert step["env"]["SITEGATE_PAGES_BRANCH"] == "gh-pages"
    assert decide["outputs"]["mode"] == "${{ steps.decide.outputs.mode }}"


def test_render_round_trips_through_yaml() -> None:
    """Rendered YAML loads back to the same mapping."""
    config = PublishConfig(pages_branch="gh-pages")
    rendered = render_workflow(
        config, install_spec=INSTALL_SPEC, action="example/zola@v1"
    )

    loaded = _load(rendered)

    assert loaded == build_workflow(
        config, install_spec=INSTALL_SPEC, action="example/zola@v1"
    )
    assert rendered.startswith("name: Build site\n"), "keys must keep their order"


def test_write_workflow_creates_directories(tmp_path: Path) -> None:
    """write_workflow creates .github/workflows as needed."""
    target = tmp_path / ".github" / "workflows" / "site.yml"

    write_workflow(target, PublishConfig(), install_spec=INSTALL_SPEC)

    assert _load(target.read_text(encoding="utf-8"))["name"] == "Build site"


def test_decide_job_installs_from_given_requirement(
    workflow: dict[str, typ.Any],
) -> None:
    """The decide job installs sitegate from the supplied requirement."""
    install = workflow["jobs"]["decide"]["steps"][2]

    assert install["name"] == "Install sitegate"
    assert install["run"] == f"pip install {INSTALL_SPEC}"


def test_install_requirement_is_shell_quoted() -> None:
    """Requirements with shell metacharacters are quoted."""
    workflow = build_workflow(PublishConfig(), install_spec="sitegate>=0.1")

    install = workflow["jobs"]["decide"]["steps"][2]

    assert install["run"] == "pip install 'sitegate>=0.1'"


@pytest.mark.parametrize("install_spec", ["", "   "])
def test_blank_install_requirement_is_rejected(install_spec: str) -> None:
    """A workflow cannot be built without an install requirement."""
    with pytest.raises(ValueError, match="install_spec"):
        build_workflow(PublishConfig(), install_spec=install_spec)
