# topmark:header:start
#
#   project      : WarnBox
#   file         : platform.py
#   file_relpath : src/warnbox/core/platform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection of automated test runs.

The installer reads `PlatformLike.is_testing` once per install and forces the
registry disabled when it is true.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol

from warnbox.config.settings import SettingsError, parse_bool
from warnbox.constants import ENV_TESTING

if TYPE_CHECKING:
    from collections.abc import Mapping


class PlatformLike(Protocol):
    """Structural interface for the host platform."""

    @property
    def is_testing(self) -> bool:
        """Return True when the process runs under an automated test runner."""
        ...


class EnvironmentPlatform(PlatformLike):
    """Platform that inspects environment variables.

    ``WARNBOX_TESTING`` decides when set; otherwise the presence of
    ``PYTEST_CURRENT_TEST`` marks a pytest run.

    Args:
        environ (Mapping[str, str] | None): Environment to read (defaults to `os.environ`).
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ: Mapping[str, str] | None = environ

    @property
    def is_testing(self) -> bool:
        """Return True when the process runs under an automated test runner."""
        env: Mapping[str, str] = os.environ if self._environ is None else self._environ
        explicit: str | None = env.get(ENV_TESTING)
        if explicit is not None:
            try:
                return parse_bool(explicit)
            except SettingsError:
                return True
        return "PYTEST_CURRENT_TEST" in env


class StaticPlatform(PlatformLike):
    """Platform with a fixed answer, for embedding hosts and tests."""

    def __init__(self, *, is_testing: bool = False) -> None:
        self._is_testing: bool = is_testing

    @property
    def is_testing(self) -> bool:
        """Return the fixed answer."""
        return self._is_testing
