# topmark:header:start
#
#   project      : WarnBox
#   file         : __init__.py
#   file_relpath : src/warnbox/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox configuration: logging setup and installer settings."""

from __future__ import annotations

from warnbox.config.settings import (
    SettingsError,
    WarnBoxSettings,
    load_pyproject_settings,
    resolve_settings,
    settings_from_env,
)

__all__ = [
    "SettingsError",
    "WarnBoxSettings",
    "load_pyproject_settings",
    "resolve_settings",
    "settings_from_env",
]
