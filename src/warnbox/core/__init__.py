# topmark:header:start
#
#   project      : WarnBox
#   file         : __init__.py
#   file_relpath : src/warnbox/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning capture core: categories, ignore patterns, registry, observers, interception.

Data flow:
    ``console.warn(...)`` → `InterceptingSink` → `WarningEvent` →
    `WarningRegistry.add` → `parse_category` → `IgnorePatternSet` →
    `ObserverChannel` → observers.
"""

from __future__ import annotations

from warnbox.core.category import Category, Substitution, WarningEvent, parse_category
from warnbox.core.ignore import IgnorePatternSet
from warnbox.core.installer import InterceptingSink, InterceptionInstaller
from warnbox.core.observer import ObserverChannel, Subscription
from warnbox.core.registry import CategoryView, Snapshot, WarningRegistry
from warnbox.core.sinks import ConsoleHost, DiagnosticSink, RecordingSink, StreamSink

__all__ = [
    "Category",
    "CategoryView",
    "ConsoleHost",
    "DiagnosticSink",
    "IgnorePatternSet",
    "InterceptingSink",
    "InterceptionInstaller",
    "ObserverChannel",
    "RecordingSink",
    "Snapshot",
    "StreamSink",
    "Subscription",
    "Substitution",
    "WarningEvent",
    "WarningRegistry",
    "parse_category",
]
