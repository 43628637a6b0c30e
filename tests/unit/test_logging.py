"""Unit tests for femtologging integration helpers.

Run with:
    pytest tests/unit/test_logging.py
"""

from __future__ import annotations

import pytest

from sitegate.logging import (
    configure_logging,
    format_log_message,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)


class _FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("warning", ("WARNING", False), id="lowercase"),
        pytest.param(" debug ", ("DEBUG", False), id="padded"),
        pytest.param("TRACE", ("TRACE", False), id="trace"),
        pytest.param(None, ("INFO", True), id="none"),
        pytest.param("", ("INFO", True), id="empty"),
        pytest.param("verbose", ("INFO", True), id="unknown"),
    ],
)
def test_normalize_log_level(raw: str | None, expected: tuple[str, bool]) -> None:
    """Known levels are upper-cased; anything else falls back to INFO."""
    assert normalize_log_level(raw) == expected, (
        f"Expected {raw!r} to normalize to {expected}"
    )


def test_format_log_message_interpolates() -> None:
    """Percent formatting produces the expected message."""
    assert format_log_message("push to %s (%d)", "code", 1) == "push to code (1)"


def test_format_log_message_without_args_is_verbatim() -> None:
    """Templates are returned untouched when there is nothing to interpolate."""
    assert format_log_message("100% built") == "100% built"


@pytest.mark.parametrize(
    ("emit", "level"),
    [
        (log_debug, "DEBUG"),
        (log_info, "INFO"),
        (log_warning, "WARNING"),
        (log_error, "ERROR"),
    ],
)
def test_level_helpers(emit: object, level: str) -> None:
    """Each helper formats the message and logs at its level."""
    logger = _FakeLogger()

    emit(logger, "decided %s", "build_only")  # type: ignore[operator]

    assert logger.calls == [(level, "decided build_only", None, False)]


def test_log_warning_forwards_exc_info() -> None:
    """exc_info reaches the logger."""
    logger = _FakeLogger()
    exc = ValueError("boom")

    log_warning(logger, "rejected: %s", "merge", exc_info=exc)

    assert logger.calls == [("WARNING", "rejected: merge", exc, False)]


def test_log_exception_logs_message_verbatim() -> None:
    """log_exception does not interpolate its message."""
    logger = _FakeLogger()
    exc = RuntimeError("boom")

    log_exception(logger, "failed at 100%", exc)

    assert logger.calls == [("ERROR", "failed at 100%", exc, False)]


@pytest.mark.parametrize(
    ("raw", "expected_level", "expected_invalid"),
    [("debug", "DEBUG", False), ("nope", "INFO", True)],
)
def test_configure_logging(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected_level: str,
    expected_invalid: bool,  # noqa: FBT001
) -> None:
    """configure_logging passes the normalized level to femtologging."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("sitegate.logging.basicConfig", fake_basic_config)

    assert configure_logging(raw) == (expected_level, expected_invalid)
    assert captured == {"level": expected_level, "force": False}
