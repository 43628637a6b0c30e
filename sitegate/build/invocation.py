"""Translate publish decisions into site-building action invocations.

The external builder is ``shalzz/zola-deploy-action``. It renders the site
in ``BUILD_DIR`` and either stops (``BUILD_ONLY=true``) or pushes the output
to ``PAGES_BRANCH``. Jobs keep the names ``build`` and ``build_and_deploy``
so existing branch protection rules keep matching.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from sitegate.publish.models import PublishMode

from .errors import BuildConfigError

if typ.TYPE_CHECKING:
    from sitegate.publish.config import PublishConfig
    from sitegate.publish.models import PublishDecision

DEFAULT_DEPLOY_ACTION = "shalzz/zola-deploy-action@v0.16.1"

_JOB_IDS: dict[PublishMode, str] = {
    PublishMode.BUILD_ONLY: "build",
    PublishMode.BUILD_AND_DEPLOY: "build_and_deploy",
}


def job_id_for(mode: PublishMode) -> str:
    """Return the workflow job that runs ``mode``."""
    return _JOB_IDS[mode]


@dc.dataclass(frozen=True, slots=True)
class BuildInvocation:
    """A single call to the site-building action.

    Attributes
    ----------
    mode
        Mode taken from the publish decision.
    build_dir
        Site directory passed as ``BUILD_DIR``.
    pages_branch
        Output branch, set only for deploys.

    """

    mode: PublishMode
    build_dir: str
    pages_branch: str | None = None

    @property
    def deploys(self) -> bool:
        """Return True when the action will publish output."""
        return self.mode is PublishMode.BUILD_AND_DEPLOY

    @property
    def job_id(self) -> str:
        """Return the workflow job name for this invocation."""
        return job_id_for(self.mode)

    def outputs(self) -> dict[str, str]:
        """Return step outputs describing the invocation.

        Values are strings because GitHub Actions outputs are untyped.
        """
        return {
            "mode": str(self.mode),
            "job": self.job_id,
            "deploy": "true" if self.deploys else "false",
            "build_dir": self.build_dir,
            "pages_branch": self.pages_branch or "",
        }

    def action_env(self, token: str) -> dict[str, str]:
        """Return the environment the deploy action expects.

        Parameters
        ----------
        token
            Repository token the action uses to check out and push.

        Raises
        ------
        BuildConfigError
            If ``token`` is blank.

        """
        if not token.strip():
            raise BuildConfigError.empty_token()

        env = {"BUILD_DIR": self.build_dir, "GITHUB_TOKEN": token}
        if self.deploys:
            env["PAGES_BRANCH"] = typ.cast("str", self.pages_branch)
        else:
            env["BUILD_ONLY"] = "true"
        return env


def plan_build(decision: PublishDecision, config: PublishConfig) -> BuildInvocation:
    """Return the invocation that carries out ``decision``."""
    return BuildInvocation(
        mode=decision.mode,
        build_dir=config.build_dir,
        pages_branch=decision.deploy_target_branch,
    )
