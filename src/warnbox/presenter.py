# topmark:header:start
#
#   project      : WarnBox
#   file         : presenter.py
#   file_relpath : src/warnbox/presenter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Presenter connecting a display surface to the warning registry.

A `WarningPresenter` holds the latest snapshot for one display. It subscribes
when mounted, releases its subscription when unmounted, and turns the display's
dismiss actions into registry deletions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnbox.config.logging import get_logger
from warnbox.core.registry import registry as default_registry
from warnbox.rendering.text import render_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from warnbox.config.logging import WarnBoxLogger
    from warnbox.core.observer import Subscription
    from warnbox.core.registry import CategoryRef, Snapshot, WarningRegistry

logger: WarnBoxLogger = get_logger(__name__)


class WarningPresenter:
    """State holder for one warning display.

    Args:
        registry (WarningRegistry | None): Source registry (process registry by default).
        on_change (Callable[[Snapshot], None] | None): Called after each new snapshot.
    """

    def __init__(
        self,
        registry: WarningRegistry | None = None,
        *,
        on_change: Callable[[Snapshot], None] | None = None,
    ) -> None:
        self._registry: WarningRegistry = registry or default_registry
        self._on_change: Callable[[Snapshot], None] | None = on_change
        self._subscription: Subscription | None = None
        self.snapshot: Snapshot = None

    @property
    def mounted(self) -> bool:
        """Return True while subscribed to the registry."""
        return self._subscription is not None

    @property
    def visible(self) -> bool:
        """Return True when there is something to display."""
        return bool(self.snapshot)

    def mount(self) -> None:
        """Subscribe to the registry; the current snapshot arrives immediately."""
        if self._subscription is not None:
            return
        self._subscription = self._registry.observe(self._receive)

    def unmount(self) -> None:
        """Release the subscription; the last snapshot is kept."""
        if self._subscription is not None:
            self._subscription.release()
            self._subscription = None

    def dismiss(self, category: CategoryRef) -> None:
        """Remove one category from the registry."""
        self._registry.delete(category)

    def dismiss_all(self) -> None:
        """Remove every category from the registry."""
        self._registry.clear()

    def render(self, *, enable_color: bool = True, stack_limit: int = 0) -> str:
        """Render the latest snapshot as text."""
        return render_snapshot(self.snapshot, enable_color=enable_color, stack_limit=stack_limit)

    def _receive(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        logger.trace("Presenter received %s", "nothing" if snapshot is None else len(snapshot))
        if self._on_change is not None:
            self._on_change(snapshot)
