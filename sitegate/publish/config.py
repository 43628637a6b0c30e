"""Branch configuration for the publish controller.

Usage
-----
Use the defaults (publish pushes to ``code`` into ``master``):

>>> config = PublishConfig()
>>> (config.publish_branch, config.pages_branch)
('code', 'master')

Or override a branch explicitly; ``PublishConfig.from_env()`` does the same
from ``SITEGATE_PUBLISH_BRANCH``, ``SITEGATE_PAGES_BRANCH`` and
``SITEGATE_BUILD_DIR``:

>>> PublishConfig(pages_branch="gh-pages").pages_branch
'gh-pages'

"""

from __future__ import annotations

import dataclasses as dc
import os

from sitegate.publish.errors import PublishConfigError

DEFAULT_PUBLISH_BRANCH = "code"
DEFAULT_PAGES_BRANCH = "master"
DEFAULT_BUILD_DIR = "."


@dc.dataclass(frozen=True, slots=True)
class PublishConfig:
    """Deployment-time constants used to gate publication.

    Attributes
    ----------
    publish_branch
        Branch whose pushes are built and deployed.
    pages_branch
        Branch that receives the generated site.
    build_dir
        Directory handed to the site builder, relative to the checkout.

    """

    publish_branch: str = DEFAULT_PUBLISH_BRANCH
    pages_branch: str = DEFAULT_PAGES_BRANCH
    build_dir: str = DEFAULT_BUILD_DIR

    def __post_init__(self) -> None:
        """Validate branch names once, at construction."""
        if not self.publish_branch.strip():
            raise PublishConfigError.empty_value("publish_branch")
        if not self.pages_branch.strip():
            raise PublishConfigError.empty_value("pages_branch")
        if self.publish_branch == self.pages_branch:
            raise PublishConfigError.branches_collide(self.publish_branch)

    @staticmethod
    def _read(env_var: str, default: str) -> str:
        """Read an optional variable, rejecting values that are set but blank."""
        raw = os.environ.get(env_var)
        if raw is None:
            return default
        value = raw.strip()
        if not value:
            raise PublishConfigError.empty_value(env_var)
        return value

    @classmethod
    def from_env(cls) -> PublishConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``SITEGATE_PUBLISH_BRANCH``: branch whose pushes deploy.
        - ``SITEGATE_PAGES_BRANCH``: branch receiving generated output.
        - ``SITEGATE_BUILD_DIR``: site directory passed to the builder.

        Returns
        -------
        PublishConfig
            Configuration with values from the environment or defaults.

        Raises
        ------
        PublishConfigError
            If a variable is blank or both branches are the same.

        """
        return cls(
            publish_branch=cls._read("SITEGATE_PUBLISH_BRANCH", DEFAULT_PUBLISH_BRANCH),
            pages_branch=cls._read("SITEGATE_PAGES_BRANCH", DEFAULT_PAGES_BRANCH),
            build_dir=cls._read("SITEGATE_BUILD_DIR", DEFAULT_BUILD_DIR),
        )
