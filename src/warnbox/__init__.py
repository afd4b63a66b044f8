# topmark:header:start
#
#   project      : WarnBox
#   file         : __init__.py
#   file_relpath : src/warnbox/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox package.

WarnBox collects developer-facing warnings emitted while a program runs,
groups repeated occurrences of the same message template, hides ignored
patterns, and pushes the live set to observers for display.
"""

from __future__ import annotations

from warnbox.api import (
    WarnBox,
    clear,
    delete,
    ignore_warnings,
    install,
    is_disabled,
    is_installed,
    observe,
    set_disabled,
    uninstall,
)
from warnbox.core.sinks import console
from warnbox.presenter import WarningPresenter

__all__ = [
    "WarnBox",
    "WarningPresenter",
    "clear",
    "console",
    "delete",
    "ignore_warnings",
    "install",
    "is_disabled",
    "is_installed",
    "observe",
    "set_disabled",
    "uninstall",
]
