# topmark:header:start
#
#   project      : WarnBox
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the WarnBox test suite.

This file sets up global fixtures and the logging configuration for test runs.

Notes:
    Most tests work on **private** instances (`WarningRegistry()`,
    `ConsoleHost(RecordingSink())`, `FakeNativeSource()`) so they never touch the
    process-wide objects. Tests of the public `warnbox` API use the
    `process_state` fixture, which uninstalls interception, clears the process
    registry and re-enables it afterwards. Ignore patterns on the process registry
    only grow, so such tests use patterns unique to the test.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from warnbox.config import logging
from warnbox.core.installer import InterceptionInstaller
from warnbox.core.platform import StaticPlatform
from warnbox.core.registry import WarningRegistry
from warnbox.core.registry import registry as process_registry
from warnbox.core.sinks import ConsoleHost, RecordingSink

if TYPE_CHECKING:
    from collections.abc import Iterator

    from warnbox.core.registry import Snapshot

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


class FakeNativeSource:
    """In-memory native log source recording the registered handler."""

    def __init__(self) -> None:
        self.handler: Callable[..., None] | None = None
        self.history: list[Callable[..., None] | None] = []

    def set_warning_handler(self, handler: Callable[..., None] | None) -> None:
        """Record and store ``handler``."""
        self.handler = handler
        self.history.append(handler)

    def emit(self, *args: object) -> None:
        """Forward ``args`` to the registered handler, if any."""
        if self.handler is not None:
            self.handler(*args)


class SnapshotRecorder:
    """Observer callback collecting every delivered snapshot."""

    def __init__(self) -> None:
        self.snapshots: list[Snapshot] = []

    def __call__(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> Snapshot:
        """Return the most recent snapshot."""
        return self.snapshots[-1]

    def keys(self) -> list[str]:
        """Return the keys of the most recent snapshot (empty when disabled)."""
        return list(self.last or {})


@pytest.fixture(autouse=True)
def clean_warnbox_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ``WARNBOX_*`` variables out of test runs.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    for name in ("WARNBOX_LOG_LEVEL", "WARNBOX_DISABLED", "WARNBOX_IGNORE", "WARNBOX_TESTING"):
        monkeypatch.delenv(name, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during tests so failures come with full context.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def registry() -> WarningRegistry:
    """Return a private registry."""
    return WarningRegistry()


@pytest.fixture
def recorder() -> SnapshotRecorder:
    """Return a fresh snapshot recorder."""
    return SnapshotRecorder()


@pytest.fixture
def prior_sink() -> RecordingSink:
    """Return the sink that is active before interception."""
    return RecordingSink()


@pytest.fixture
def host(prior_sink: RecordingSink) -> ConsoleHost:
    """Return a private console host wrapping ``prior_sink``."""
    return ConsoleHost(prior_sink)


@pytest.fixture
def native() -> FakeNativeSource:
    """Return an in-memory native log source."""
    return FakeNativeSource()


@pytest.fixture
def installer(
    host: ConsoleHost,
    registry: WarningRegistry,
    native: FakeNativeSource,
) -> Iterator[InterceptionInstaller]:
    """Return an installer over private objects; uninstalled after the test."""
    inst = InterceptionInstaller(
        host=host,
        registry=registry,
        native_source=native,
        platform=StaticPlatform(is_testing=False),
    )
    yield inst
    inst.uninstall()


@pytest.fixture
def process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[WarningRegistry]:
    """Isolate tests that use the public API and its process-wide objects.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to mark the run as not under test,
            so `warnbox.install()` does not force the registry disabled.

    Yields:
        WarningRegistry: The process-wide registry, cleared and enabled.
    """
    import warnbox

    monkeypatch.setenv("WARNBOX_TESTING", "0")
    warnbox.uninstall()
    process_registry.clear()
    process_registry.set_disabled(False)
    yield process_registry
    warnbox.uninstall()
    process_registry.clear()
    process_registry.set_disabled(False)
