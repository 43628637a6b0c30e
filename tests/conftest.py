"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os

import pytest

_ISOLATED_PREFIXES = ("GITHUB_", "SITEGATE_")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide runner and sitegate variables so defaults apply in every test."""
    for key in list(os.environ):
        if key.startswith(_ISOLATED_PREFIXES):
            monkeypatch.delenv(key)
