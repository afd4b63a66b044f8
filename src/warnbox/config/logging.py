# topmark:header:start
#
#   project      : WarnBox
#   file         : logging.py
#   file_relpath : src/warnbox/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox logging with a TRACE level.

WarnBox's own logging is kept apart from the diagnostic channels it intercepts:
the registry, installer and observer channel report through these loggers, never
through `warnbox.core.sinks`, so a failure while handling a warning cannot feed
back into the registry.

Per-occurrence chatter (repeat counts, individual deliveries) is logged at
TRACE; category lifecycle events at DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "WARNBOX_LOG_LEVEL"

logging.addLevelName(TRACE_LEVEL, "TRACE")


class WarnBoxLogger(logging.Logger):
    """Logger that adds `trace()` below DEBUG."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(WarnBoxLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Highest threshold first; the first one at or below the record level applies.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors whole log lines by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in its level's color."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level named by ``WARNBOX_LOG_LEVEL``, or None.

    Accepts a number or any registered level name (``TRACE`` included), in any
    case. Unknown names yield None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Route all logging to stderr through a `ChalkFormatter`.

    Replaces any handlers on the root logger.

    Args:
        level (int | None): Root level. When None, ``WARNBOX_LOG_LEVEL`` is
            consulted and CRITICAL is used if that is unset too.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))

    root: logging.Logger = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str) -> WarnBoxLogger:
    """Return the `WarnBoxLogger` called ``name``."""
    return cast("WarnBoxLogger", logging.getLogger(name))
