# topmark:header:start
#
#   project      : WarnBox
#   file         : ignore.py
#   file_relpath : src/warnbox/core/ignore.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Developer-registered ignore patterns.

Patterns are literal, case-sensitive substrings of a rendered warning message;
there are no wildcard or regular expression semantics. The set only grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnbox.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)


class IgnorePatternSet:
    """Ordered, de-duplicated collection of ignore substrings."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: dict[str, None] = {}
        self.add(patterns)

    def add(self, patterns: Iterable[str]) -> int:
        """Append patterns to the set.

        Empty strings are dropped since they would match every message.

        Args:
            patterns (Iterable[str]): Substrings to ignore.

        Returns:
            int: Number of patterns that were not already present.
        """
        added: int = 0
        for pattern in patterns:
            if not pattern:
                logger.debug("Dropping empty ignore pattern")
                continue
            if pattern not in self._patterns:
                self._patterns[pattern] = None
                added += 1
        return added

    def matches(self, message: str) -> bool:
        """Return True if any pattern is a substring of ``message``."""
        return any(pattern in message for pattern in self._patterns)

    def as_tuple(self) -> tuple[str, ...]:
        """Return the patterns in registration order."""
        return tuple(self._patterns)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._patterns))

    def __len__(self) -> int:
        return len(self._patterns)
