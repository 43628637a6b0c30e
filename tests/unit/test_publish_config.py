"""Unit tests for PublishConfig."""

from __future__ import annotations

import pytest

from sitegate.publish import PublishConfig, PublishConfigError

_ENV_VARS = ("SITEGATE_PUBLISH_BRANCH", "SITEGATE_PAGES_BRANCH", "SITEGATE_BUILD_DIR")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove sitegate variables inherited from the test environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestPublishConfig:
    """Tests for PublishConfig construction."""

    def test_defaults(self) -> None:
        """Defaults publish pushes to code into master from the repo root."""
        config = PublishConfig()
        assert config.publish_branch == "code"
        assert config.pages_branch == "master"
        assert config.build_dir == "."

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            pytest.param({"publish_branch": ""}, "publish_branch", id="publish"),
            pytest.param({"pages_branch": "  "}, "pages_branch", id="pages"),
            pytest.param(
                {"publish_branch": "main", "pages_branch": "main"},
                "must differ",
                id="collide",
            ),
        ],
    )
    def test_invalid_branches(self, kwargs: dict[str, str], match: str) -> None:
        """Blank or identical branches are rejected."""
        with pytest.raises(PublishConfigError, match=match):
            PublishConfig(**kwargs)

    @pytest.mark.parametrize(
        ("env_vars", "expected"),
        [
            pytest.param({}, PublishConfig(), id="defaults"),
            pytest.param(
                {"SITEGATE_PAGES_BRANCH": "gh-pages"},
                PublishConfig(pages_branch="gh-pages"),
                id="pages_branch",
            ),
            pytest.param(
                {
                    "SITEGATE_PUBLISH_BRANCH": " main ",
                    "SITEGATE_PAGES_BRANCH": "gh-pages",
                    "SITEGATE_BUILD_DIR": "site",
                },
                PublishConfig(
                    publish_branch="main", pages_branch="gh-pages", build_dir="site"
                ),
                id="all",
            ),
        ],
    )
    def test_from_env(
        self,
        clean_env: pytest.MonkeyPatch,
        env_vars: dict[str, str],
        expected: PublishConfig,
    ) -> None:
        """from_env reads and strips environment variables."""
        for key, value in env_vars.items():
            clean_env.setenv(key, value)

        config = PublishConfig.from_env()

        assert config == expected, f"Expected {expected}, got {config}"

    def test_from_env_rejects_blank_values(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        """A variable that is set but blank is an error, not a default."""
        clean_env.setenv("SITEGATE_PAGES_BRANCH", "   ")

        with pytest.raises(PublishConfigError, match="SITEGATE_PAGES_BRANCH"):
            PublishConfig.from_env()

    def test_from_env_rejects_colliding_branches(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        """Deploying onto the publishing branch is refused."""
        clean_env.setenv("SITEGATE_PAGES_BRANCH", "code")

        with pytest.raises(PublishConfigError, match="must differ"):
            PublishConfig.from_env()
