# topmark:header:start
#
#   project      : WarnBox
#   file         : native.py
#   file_relpath : src/warnbox/core/native.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lower-level warning sources that report through a single handler.

A native log source accepts one handler, called with the same argument shape as a
``console.warn`` call. The default source bridges Python's `warnings` module:
every displayed warning is still shown by the previous `warnings.showwarning`
hook and is additionally passed to the handler as ``"Category: message"``.

Python's warning filters still apply: a warning suppressed by a filter (or
deduplicated by the ``"default"`` action) never reaches the handler.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Protocol, TextIO

from warnbox.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)


class NativeLogSource(Protocol):
    """A warning source that can forward to one registered handler."""

    def set_warning_handler(self, handler: Callable[..., None] | None) -> None:
        """Register ``handler`` (replacing any previous one), or detach with None."""
        ...


class PyWarningsSource(NativeLogSource):
    """Bridge from `warnings.showwarning` to a warning handler."""

    def __init__(self) -> None:
        self._handler: Callable[..., None] | None = None
        self._previous: Callable[..., None] | None = None

    @property
    def attached(self) -> bool:
        """Return True while the bridge hook is installed."""
        return self._previous is not None

    def set_warning_handler(self, handler: Callable[..., None] | None) -> None:
        """Register ``handler`` or detach the bridge.

        Args:
            handler (Callable[..., None] | None): Receives ``"Category: message"``
                for every displayed warning; None restores the previous hook.
        """
        self._handler = handler
        if handler is not None and self._previous is None:
            self._previous = warnings.showwarning
            warnings.showwarning = self._showwarning
            logger.debug("Attached warnings.showwarning bridge")
        elif handler is None and self._previous is not None:
            if warnings.showwarning == self._showwarning:
                warnings.showwarning = self._previous
                logger.debug("Detached warnings.showwarning bridge")
            else:
                logger.warning(
                    "warnings.showwarning was replaced by %r; leaving it in place",
                    warnings.showwarning,
                )
            self._previous = None

    def _showwarning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        if self._previous is not None:
            self._previous(message, category, filename, lineno, file=file, line=line)
        handler: Callable[..., None] | None = self._handler
        if handler is not None:
            handler(f"{category.__name__}: {message}")
