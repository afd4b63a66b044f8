# topmark:header:start
#
#   project      : WarnBox
#   file         : __init__.py
#   file_relpath : src/warnbox/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of warning snapshots for terminals."""

from __future__ import annotations

from warnbox.rendering.text import render_row, render_snapshot, render_stack, render_summary

__all__ = [
    "render_row",
    "render_snapshot",
    "render_stack",
    "render_summary",
]
