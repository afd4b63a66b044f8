# topmark:header:start
#
#   project      : WarnBox
#   file         : registry.py
#   file_relpath : src/warnbox/core/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide warning registry.

The registry maps category keys to occurrence data in first-occurrence order and
pushes a snapshot of the visible categories to its observers after every
mutation.

Typical usage:
    ```python
    from warnbox.core.category import WarningEvent
    from warnbox.core.registry import registry

    sub = registry.observe(lambda snapshot: print(snapshot))
    registry.add(WarningEvent(args=("Warning: %s is slow", "foo")))
    registry.add_ignore_patterns(["is slow"])  # hidden retroactively
    sub.release()
    ```

Notes:
    * The snapshot is ``None`` while the registry is disabled. Warnings are still
      tracked while disabled, so re-enabling shows them without new calls.
    * Snapshots are `MappingProxyType` views over a fresh dict of frozen
      [`CategoryView`][warnbox.core.registry.CategoryView] objects and cannot
      alter registry state.
    * Mutation and delivery are serialized under an `RLock`; a mutation issued by
      an observer on the delivering thread is deferred by the observer channel.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from warnbox.config.logging import get_logger
from warnbox.core.category import Category, WarningEvent, parse_category
from warnbox.core.ignore import IgnorePatternSet
from warnbox.core.observer import ObserverChannel, Subscription

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)


@dataclass(frozen=True)
class CategoryView:
    """Immutable view of one category as delivered to observers.

    Attributes:
        category: The category of the most recent occurrence.
        count: Number of occurrences since the category was created.
        stack: Call stack of the most recent occurrence, outermost frame first.
    """

    category: Category
    count: int
    stack: tuple[traceback.FrameSummary, ...] = ()

    @property
    def key(self) -> str:
        """Return the grouping key."""
        return self.category.key

    @property
    def message(self) -> str:
        """Return the rendered message of the most recent occurrence."""
        return self.category.message


Snapshot = Union["Mapping[str, CategoryView]", None]

CategoryRef = Union[Category, CategoryView, str]


@dataclass
class _Entry:
    category: Category
    count: int
    stack: tuple[traceback.FrameSummary, ...]

    def view(self) -> CategoryView:
        return CategoryView(category=self.category, count=self.count, stack=self.stack)


def capture_stack(frames_to_pop: int) -> tuple[traceback.FrameSummary, ...]:
    """Return the current call stack minus the innermost registry frames.

    Args:
        frames_to_pop (int): Additional frames to drop above the caller of
            `WarningRegistry.add`.

    Returns:
        tuple[traceback.FrameSummary, ...]: Stack frames, outermost first.
    """
    # Drop this function and `WarningRegistry.add`.
    stack: traceback.StackSummary = traceback.extract_stack()
    drop: int = 2 + max(frames_to_pop, 0)
    return tuple(stack[:-drop]) if drop < len(stack) else ()


def _key_of(ref: CategoryRef) -> str:
    if isinstance(ref, str):
        return ref
    return ref.key


class WarningRegistry:
    """Insertion-ordered store of warning categories with observer delivery.

    Args:
        disabled (bool): Initial value of the disabled flag.
        capture_stacks (bool): Record the call stack of each occurrence.
    """

    def __init__(self, *, disabled: bool = False, capture_stacks: bool = True) -> None:
        self._lock = RLock()
        self._entries: dict[str, _Entry] = {}
        self._disabled: bool = disabled
        self._ignore: IgnorePatternSet = IgnorePatternSet()
        self._capture_stacks: bool = capture_stacks
        self._channel: ObserverChannel[Snapshot] = ObserverChannel(self._compute_snapshot)

    # --- mutation -------------------------------------------------------------

    def add(self, event: WarningEvent) -> None:
        """Record one warning occurrence and notify observers.

        Malformed events (``None``, or ``args`` that is not a tuple or list) are
        ignored silently. A missing or non-integer ``frames_to_pop`` counts as 0.

        Args:
            event (WarningEvent): The warning call to record.
        """
        args: object = getattr(event, "args", None)
        if not isinstance(args, (tuple, list)):
            logger.debug("Ignoring malformed warning event: %r", event)
            return

        frames_to_pop: object = getattr(event, "frames_to_pop", 0)
        if not isinstance(frames_to_pop, int) or isinstance(frames_to_pop, bool):
            frames_to_pop = 0

        category: Category = parse_category(args)
        stack: tuple[traceback.FrameSummary, ...] = (
            capture_stack(frames_to_pop) if self._capture_stacks else ()
        )
        with self._lock:
            entry: _Entry | None = self._entries.get(category.key)
            if entry is None:
                self._entries[category.key] = _Entry(category=category, count=1, stack=stack)
                logger.debug("New warning category: %r", category.key)
            else:
                entry.category = category
                entry.count += 1
                entry.stack = stack
                logger.trace("Repeat warning category (%d): %r", entry.count, category.key)
            self._channel.notify()

    def delete(self, category: CategoryRef) -> None:
        """Remove a category if present and notify observers.

        Args:
            category (CategoryRef): The category, its view, or its key.
        """
        key: str = _key_of(category)
        with self._lock:
            if self._entries.pop(key, None) is not None:
                logger.debug("Dismissed warning category: %r", key)
            self._channel.notify()

    def clear(self) -> None:
        """Remove all categories and notify observers."""
        with self._lock:
            logger.debug("Clearing %d warning categories", len(self._entries))
            self._entries.clear()
            self._channel.notify()

    def set_disabled(self, value: bool) -> None:
        """Set the disabled flag and notify observers.

        Existing categories are kept; only the delivered snapshot changes.
        """
        with self._lock:
            self._disabled = bool(value)
            logger.debug("Warning registry %s", "disabled" if self._disabled else "enabled")
            self._channel.notify()

    def add_ignore_patterns(self, patterns: Iterable[str]) -> None:
        """Add ignore substrings and notify observers.

        Matching categories disappear from subsequent snapshots; their counts
        are unaffected.

        Args:
            patterns (Iterable[str]): Substrings of rendered messages to hide.
        """
        if isinstance(patterns, str):
            patterns = (patterns,)
        with self._lock:
            added: int = self._ignore.add(patterns)
            logger.debug("Added %d ignore pattern(s) (%d total)", added, len(self._ignore))
            self._channel.notify()

    # --- queries --------------------------------------------------------------

    def is_disabled(self) -> bool:
        """Return the disabled flag."""
        return self._disabled

    def ignore_patterns(self) -> tuple[str, ...]:
        """Return the registered ignore patterns in registration order."""
        with self._lock:
            return self._ignore.as_tuple()

    def categories(self) -> tuple[CategoryView, ...]:
        """Return every tracked category, including ignored ones.

        Unlike `snapshot()`, this ignores the disabled flag.
        """
        with self._lock:
            return tuple(entry.view() for entry in self._entries.values())

    def snapshot(self) -> Snapshot:
        """Return the visible snapshot, or ``None`` while disabled."""
        with self._lock:
            return self._compute_snapshot()

    def observe(self, callback: Callable[[Snapshot], object]) -> Subscription:
        """Subscribe to snapshots.

        The current snapshot is delivered synchronously before this returns.

        Args:
            callback (Callable[[Snapshot], object]): Receives each snapshot.

        Returns:
            Subscription: Handle whose `release()` stops delivery.
        """
        with self._lock:
            return self._channel.subscribe(callback)

    def _compute_snapshot(self) -> Snapshot:
        if self._disabled:
            return None
        return MappingProxyType(
            {
                key: entry.view()
                for key, entry in self._entries.items()
                if not self._ignore.matches(entry.category.message)
            }
        )


# Process-wide registry; lives until interpreter exit.
registry: WarningRegistry = WarningRegistry()
