"""Run the usage examples in module docstrings."""

from __future__ import annotations

import doctest
import os
import types

import pytest

import sitegate.build.collaborator
import sitegate.common.refs
import sitegate.publish
import sitegate.publish.config


@pytest.mark.parametrize(
    "module",
    [
        pytest.param(sitegate.build.collaborator, id="build.collaborator"),
        pytest.param(sitegate.common.refs, id="common.refs"),
        pytest.param(sitegate.publish, id="publish"),
        pytest.param(sitegate.publish.config, id="publish.config"),
    ],
)
def test_module_examples_pass(module: types.ModuleType) -> None:
    """Docstring examples run cleanly and leave the environment untouched."""
    environ_before = dict(os.environ)

    result = doctest.testmod(module)

    assert result.attempted > 0, f"{module.__name__} has no examples"
    assert result.failed == 0, f"{result.failed} example(s) failed"
    assert dict(os.environ) == environ_before, "examples must not modify os.environ"
