# topmark:header:start
#
#   project      : WarnBox
#   file         : api.py
#   file_relpath : src/warnbox/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public WarnBox API.

All functions operate on the process-wide registry, console and installer.

Typical usage:
    ```python
    import warnbox

    warnbox.install()
    warnbox.ignore_warnings(["Warning: componentWillReceiveProps"])

    sub = warnbox.observe(lambda snapshot: print(snapshot))
    warnbox.console.warn("Warning: %s is deprecated", "foo()")
    sub.release()

    warnbox.uninstall()
    ```

Warning:
    The registry is global state. In tests, pair `install()` with `uninstall()`
    and reset the registry with `clear()` to keep cases independent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnbox.core.installer import installer
from warnbox.core.registry import registry

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from warnbox.config.settings import WarnBoxSettings
    from warnbox.core.observer import Subscription
    from warnbox.core.registry import CategoryRef, Snapshot


def ignore_warnings(patterns: Iterable[str]) -> None:
    """Hide warnings whose rendered message contains any of ``patterns``.

    Patterns are literal, case-sensitive substrings; they only need to be part of
    the message. The change applies retroactively to categories already tracked.

    Args:
        patterns (Iterable[str]): Substrings to ignore.
    """
    registry.add_ignore_patterns(patterns)


def install(settings: WarnBoxSettings | None = None) -> None:
    """Intercept the process console and the `warnings` module (idempotent).

    Args:
        settings (WarnBoxSettings | None): Installer settings; read from the
            environment when None.
    """
    installer.install(settings)


def uninstall() -> None:
    """Restore the diagnostic channels as they were before `install()` (idempotent)."""
    installer.uninstall()


def is_installed() -> bool:
    """Return True while interception is installed."""
    return installer.is_installed


def is_disabled() -> bool:
    """Return True when warning display is disabled."""
    return registry.is_disabled()


def set_disabled(value: bool) -> None:
    """Enable or disable warning display; warnings are tracked either way."""
    registry.set_disabled(value)


def observe(callback: Callable[[Snapshot], object]) -> Subscription:
    """Subscribe to registry snapshots; the current one is delivered immediately.

    Args:
        callback (Callable[[Snapshot], object]): Receives a read-only mapping of
            category key to `CategoryView`, or None while disabled.

    Returns:
        Subscription: Handle whose `release()` stops delivery.
    """
    return registry.observe(callback)


def delete(category: CategoryRef) -> None:
    """Dismiss one category (by category, view or key)."""
    registry.delete(category)


def clear() -> None:
    """Dismiss every category."""
    registry.clear()


class WarnBox:
    """Stable facade mirroring the module-level functions.

    It holds no state; every call delegates to the process-wide objects.
    """

    @staticmethod
    def ignore_warnings(patterns: Iterable[str]) -> None:
        """Hide warnings whose message contains any of ``patterns``."""
        ignore_warnings(patterns)

    @staticmethod
    def install(settings: WarnBoxSettings | None = None) -> None:
        """Intercept the diagnostic channels (idempotent)."""
        install(settings)

    @staticmethod
    def uninstall() -> None:
        """Restore the diagnostic channels (idempotent)."""
        uninstall()

    @staticmethod
    def observe(callback: Callable[[Snapshot], object]) -> Subscription:
        """Subscribe to registry snapshots."""
        return observe(callback)
