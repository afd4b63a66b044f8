# topmark:header:start
#
#   project      : WarnBox
#   file         : installer.py
#   file_relpath : src/warnbox/core/installer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interception of the diagnostic channels.

[`InterceptionInstaller`][warnbox.core.installer.InterceptionInstaller] is a
two-state controller (uninstalled / installed). Installing wraps the console
host's active sink in an [`InterceptingSink`][warnbox.core.installer.InterceptingSink]
and attaches the native log source; uninstalling puts the exact previous sink
back and detaches the source. Both operations are no-ops when repeated, so an
already-wrapped sink is never wrapped twice.

What is captured:
    * every ``warn`` call;
    * ``error`` calls whose first argument is a string starting with the
      configured prefix (``"Warning: "`` by default);
    * every warning forwarded by the native log source.

The previous sink always receives the call first, so console output is preserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnbox.config.logging import get_logger
from warnbox.config.settings import SettingsError, WarnBoxSettings, settings_from_env
from warnbox.constants import CONSOLE_FRAMES_TO_POP, WARNING_PREFIX
from warnbox.core.category import WarningEvent
from warnbox.core.native import PyWarningsSource
from warnbox.core.platform import EnvironmentPlatform
from warnbox.core.registry import registry as default_registry
from warnbox.core.sinks import DiagnosticSink
from warnbox.core.sinks import console as default_console

if TYPE_CHECKING:
    from warnbox.config.logging import WarnBoxLogger
    from warnbox.core.native import NativeLogSource
    from warnbox.core.platform import PlatformLike
    from warnbox.core.registry import WarningRegistry
    from warnbox.core.sinks import ConsoleHost

logger: WarnBoxLogger = get_logger(__name__)


class InterceptingSink(DiagnosticSink):
    """Sink that forwards to a prior sink and records warnings in a registry.

    Args:
        prior (DiagnosticSink): The sink that was active before installation.
        registry (WarningRegistry): Receives captured warning events.
        error_prefix (str): Prefix an ``error`` message needs to be captured.
    """

    def __init__(
        self,
        prior: DiagnosticSink,
        registry: WarningRegistry,
        *,
        error_prefix: str = WARNING_PREFIX,
    ) -> None:
        self._prior: DiagnosticSink = prior
        self._registry: WarningRegistry = registry
        self._error_prefix: str = error_prefix

    @property
    def prior(self) -> DiagnosticSink:
        """Return the wrapped sink."""
        return self._prior

    @property
    def disabled(self) -> bool:
        """Live view of the registry's disabled flag."""
        return self._registry.is_disabled()

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._registry.set_disabled(value)

    def warn(self, *args: object) -> None:
        """Forward the call, then record it as a warning."""
        self._prior.warn(*args)
        self._registry.add(WarningEvent(args=args, frames_to_pop=CONSOLE_FRAMES_TO_POP))

    def error(self, *args: object) -> None:
        """Forward the call; record it only when it carries the warning prefix."""
        self._prior.error(*args)
        if args and isinstance(args[0], str) and args[0].startswith(self._error_prefix):
            self._registry.add(WarningEvent(args=args, frames_to_pop=CONSOLE_FRAMES_TO_POP))


class InterceptionInstaller:
    """One-shot controller redirecting diagnostic channels into a registry.

    Args:
        host (ConsoleHost | None): Console whose sink is wrapped (process console by default).
        registry (WarningRegistry | None): Target registry (process registry by default).
        native_source (NativeLogSource | None): Lower-level warning source
            (`warnings` bridge by default).
        platform (PlatformLike | None): Test-run detection (environment by default).
    """

    def __init__(
        self,
        *,
        host: ConsoleHost | None = None,
        registry: WarningRegistry | None = None,
        native_source: NativeLogSource | None = None,
        platform: PlatformLike | None = None,
    ) -> None:
        self._host: ConsoleHost = host or default_console
        self._registry: WarningRegistry = registry or default_registry
        self._native_source: NativeLogSource = native_source or PyWarningsSource()
        self._platform: PlatformLike = platform or EnvironmentPlatform()
        self._prior: DiagnosticSink | None = None
        self._sink: InterceptingSink | None = None

    @property
    def is_installed(self) -> bool:
        """Return True while the channels are intercepted."""
        return self._sink is not None

    @property
    def sink(self) -> InterceptingSink | None:
        """Return the installed intercepting sink, if any."""
        return self._sink

    @property
    def registry(self) -> WarningRegistry:
        """Return the target registry."""
        return self._registry

    def install(self, settings: WarnBoxSettings | None = None) -> None:
        """Start intercepting the diagnostic channels.

        Does nothing when already installed. The registry starts disabled when the
        settings ask for it or the prior sink carries `disabled = True`. Invalid
        environment settings are logged and replaced by defaults.

        Args:
            settings (WarnBoxSettings | None): Installer settings; read from the
                environment when None.
        """
        if self._sink is not None:
            logger.debug("Interception already installed; skipping")
            return
        if settings is None:
            try:
                settings = settings_from_env()
            except SettingsError as e:
                logger.warning("Ignoring invalid WARNBOX_* settings: %s", e)
                settings = WarnBoxSettings()

        prior: DiagnosticSink = self._host.get_sink()
        sink = InterceptingSink(prior, self._registry, error_prefix=settings.error_prefix)

        if settings.ignore_patterns:
            self._registry.add_ignore_patterns(settings.ignore_patterns)
        if settings.disabled or getattr(prior, "disabled", False) is True:
            self._registry.set_disabled(True)

        self._host.set_sink(sink)
        self._prior = prior
        self._sink = sink

        if self._platform.is_testing:
            logger.debug("Automated test run detected; disabling warning display")
            sink.disabled = True

        self._native_source.set_warning_handler(self._handle_native)
        logger.info("Installed warning interception around %r", prior)

    def uninstall(self) -> None:
        """Restore the diagnostic channels exactly as before `install()`.

        Does nothing when not installed.
        """
        if self._sink is None or self._prior is None:
            logger.debug("Interception not installed; skipping")
            return
        self._host.set_sink(self._prior)
        self._native_source.set_warning_handler(None)
        logger.info("Uninstalled warning interception; restored %r", self._prior)
        self._prior = None
        self._sink = None

    def _handle_native(self, *args: object) -> None:
        self._registry.add(WarningEvent(args=args, frames_to_pop=CONSOLE_FRAMES_TO_POP))


# Process-wide installer bound to the process console and registry.
installer: InterceptionInstaller = InterceptionInstaller()
