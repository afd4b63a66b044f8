# topmark:header:start
#
#   project      : WarnBox
#   file         : text.py
#   file_relpath : src/warnbox/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text rendering of registry snapshots.

Each visible category renders as one row: the occurrence count in parentheses
when greater than one, followed by the rendered message. With color enabled,
interpolated values are emphasized using the substitution spans recorded by
[`parse_category`][warnbox.core.category.parse_category].
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from warnbox.core.registry import CategoryView, Snapshot


def highlight_substitutions(view: CategoryView) -> str:
    """Return the message with interpolated values in bold."""
    message: str = view.message
    parts: list[str] = []
    cursor: int = 0
    for sub in view.category.substitutions:
        parts.append(message[cursor : sub.offset])
        parts.append(chalk.bold(message[sub.offset : sub.offset + sub.length]))
        cursor = sub.offset + sub.length
    parts.append(message[cursor:])
    return "".join(parts)


def render_row(view: CategoryView, *, enable_color: bool = True) -> str:
    """Render one category as a single line.

    Args:
        view (CategoryView): The category to render.
        enable_color (bool): Emit ANSI styling.

    Returns:
        str: The rendered row.
    """
    count: str = f"({view.count}) " if view.count > 1 else ""
    if not enable_color:
        return f"{count}{view.message}"
    return f"{chalk.yellow_bright(count)}{chalk.yellow(highlight_substitutions(view))}"


def render_stack(view: CategoryView, *, limit: int | None = None) -> list[str]:
    """Render the stack of the most recent occurrence, innermost frame last.

    Args:
        view (CategoryView): The category whose stack is rendered.
        limit (int | None): Keep only the innermost ``limit`` frames.

    Returns:
        list[str]: One string per frame, without trailing newlines.
    """
    frames = list(view.stack)
    if limit is not None:
        frames = frames[-limit:] if limit > 0 else []
    formatted: list[str] = traceback.format_list(frames)
    return [line.rstrip("\n") for line in formatted]


def render_snapshot(
    snapshot: Snapshot,
    *,
    enable_color: bool = True,
    stack_limit: int = 0,
) -> str:
    """Render a snapshot as text.

    Args:
        snapshot (Snapshot): The snapshot delivered by the registry.
        enable_color (bool): Emit ANSI styling.
        stack_limit (int): Number of innermost stack frames to show per category.

    Returns:
        str: One row per visible category; empty for a disabled or empty snapshot.
    """
    if not snapshot:
        return ""
    lines: list[str] = []
    for view in snapshot.values():
        lines.append(render_row(view, enable_color=enable_color))
        if stack_limit > 0:
            lines.extend(render_stack(view, limit=stack_limit))
    return "\n".join(lines)


def render_summary(snapshot: Snapshot, *, enable_color: bool = True) -> str:
    """Render a one-line summary such as ``3 warnings (5 occurrences)``."""
    if snapshot is None:
        return "Warnings are disabled"
    n_categories: int = len(snapshot)
    n_occurrences: int = sum(view.count for view in snapshot.values())
    noun: str = "warning" if n_categories == 1 else "warnings"
    text: str = f"{n_categories} {noun} ({n_occurrences} occurrences)"
    if not enable_color:
        return text
    return chalk.bold(text) if n_categories else chalk.green(text)
