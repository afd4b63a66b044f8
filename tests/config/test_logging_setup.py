# topmark:header:start
#
#   project      : WarnBox
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for WarnBox's own logging: TRACE level, formatter and root setup."""

from __future__ import annotations

import logging as std_logging
from typing import TYPE_CHECKING

import pytest

from warnbox.config.logging import (
    DEBUG_LOG_FORMAT,
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    WarnBoxLogger,
    get_logger,
    setup_logging,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Put the session's TRACE-level setup back after a test reconfigures it."""
    yield
    setup_logging(level=TRACE_LEVEL)


def _record(level: int, msg: str) -> std_logging.LogRecord:
    return std_logging.LogRecord("warnbox.test", level, __file__, 1, msg, None, None)


def test_get_logger_returns_trace_capable_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Package loggers expose `trace()` and emit at the TRACE level."""
    logger = get_logger("warnbox.tests.trace_capable")
    caplog.set_level(TRACE_LEVEL, logger="warnbox.tests.trace_capable")

    assert isinstance(logger, WarnBoxLogger)
    logger.trace("repeat %d", 3)

    (record,) = [r for r in caplog.records if r.name == "warnbox.tests.trace_capable"]
    assert record.levelno == TRACE_LEVEL
    assert record.levelname == "TRACE"
    assert record.getMessage() == "repeat 3"


def test_trace_is_skipped_above_threshold(caplog: pytest.LogCaptureFixture) -> None:
    """Nothing is recorded when the logger sits above TRACE."""
    logger = get_logger("warnbox.tests.trace_quiet")
    caplog.set_level(std_logging.DEBUG, logger="warnbox.tests.trace_quiet")

    logger.trace("not recorded")

    assert not [r for r in caplog.records if r.name == "warnbox.tests.trace_quiet"]


def test_formatter_keeps_message_text() -> None:
    """Coloring wraps the formatted line; levels below TRACE stay plain."""
    formatter = ChalkFormatter(LOG_FORMAT)

    assert "[WARNING] slow render" in formatter.format(_record(std_logging.WARNING, "slow render"))
    assert formatter.format(_record(5, "below trace")) == "[Level 5] below trace"


def test_setup_logging_uses_environment_level(
    monkeypatch: pytest.MonkeyPatch,
    restore_root_logging: None,
) -> None:
    """``WARNBOX_LOG_LEVEL`` picks the root level and a single colored handler."""
    monkeypatch.setenv("WARNBOX_LOG_LEVEL", "info")

    setup_logging()

    root = std_logging.getLogger()
    assert root.level == std_logging.INFO
    assert len(root.handlers) == 1
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, ChalkFormatter)
    assert formatter._fmt == LOG_FORMAT


def test_setup_logging_defaults_to_critical(restore_root_logging: None) -> None:
    """Without an explicit or environment level only critical records pass."""
    setup_logging()

    assert std_logging.getLogger().level == std_logging.CRITICAL


def test_verbose_levels_use_detailed_format(restore_root_logging: None) -> None:
    """DEBUG and below include the logger name and line number."""
    setup_logging(level=std_logging.DEBUG)

    formatter = std_logging.getLogger().handlers[0].formatter
    assert formatter is not None
    assert formatter._fmt == DEBUG_LOG_FORMAT
