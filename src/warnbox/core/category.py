# topmark:header:start
#
#   project      : WarnBox
#   file         : category.py
#   file_relpath : src/warnbox/core/category.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning events and their grouping categories.

A warning call such as ``console.warn("Warning: %s is deprecated", "foo")`` is
captured as a [`WarningEvent`][warnbox.core.category.WarningEvent]. The
[`parse_category`][warnbox.core.category.parse_category] function turns the event
arguments into a [`Category`][warnbox.core.category.Category]: a grouping key
(the raw message template) and the rendered message of that occurrence.

Rules:
    * If the first argument is a string containing printf-style placeholders
      (``%s``, ``%d``, ``%i``, ``%f``, ``%r``), the key is the raw template and
      the message substitutes the following arguments positionally. ``%%`` is a
      literal percent sign. A placeholder without a matching argument is kept
      verbatim.
    * Arguments left over after the placeholders are appended to both key and
      message, separated by a single space.
    * Otherwise the key and the message are both the space-joined string forms
      of all arguments.
    * An empty argument tuple yields the empty category (``key == ""``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"%(?:%|[sdifr])")

EMPTY_CATEGORY_KEY: Final[str] = ""


@dataclass(frozen=True)
class WarningEvent:
    """A single raw warning call.

    Attributes:
        args: The positional arguments of the call (template first, then values).
        frames_to_pop: Number of wrapper frames between the true call site and the
            registry; only affects stack attribution.
    """

    args: tuple[object, ...]
    frames_to_pop: int = 0


@dataclass(frozen=True)
class Substitution:
    """Position of an interpolated value inside a rendered message."""

    offset: int
    length: int


@dataclass(frozen=True)
class Category:
    """Stable identity of a group of warning occurrences.

    Attributes:
        key: Grouping key; identical for calls sharing the same template.
        message: Rendered message of the occurrence this category was parsed from.
        substitutions: Spans of the interpolated values within ``message``.
    """

    key: str
    message: str
    substitutions: tuple[Substitution, ...] = ()


def stringify_safe(value: object, *, use_repr: bool = False) -> str:
    """Return a string form of ``value`` that never raises.

    Args:
        value (object): The value to convert.
        use_repr (bool): Use ``repr()`` instead of ``str()``.

    Returns:
        str: The converted value, or ``<unprintable TypeName>`` when conversion fails.
    """
    if isinstance(value, str) and not use_repr:
        return value
    try:
        return repr(value) if use_repr else str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _format_value(conversion: str, value: object) -> str:
    if conversion == "s":
        return stringify_safe(value)
    if conversion == "r":
        return stringify_safe(value, use_repr=True)
    try:
        return f"%{conversion}" % (value,)
    except (TypeError, ValueError):
        return stringify_safe(value)


def parse_category(args: Sequence[object]) -> Category:
    """Derive the grouping key and rendered message for a warning call.

    Args:
        args (Sequence[object]): Positional arguments of the warning call.

    Returns:
        Category: The parsed category for this occurrence.
    """
    if not args:
        return Category(key=EMPTY_CATEGORY_KEY, message="")

    first: object = args[0]
    placeholders: list[re.Match[str]] = (
        [m for m in PLACEHOLDER_RE.finditer(first) if m.group() != "%%"]
        if isinstance(first, str)
        else []
    )
    if not isinstance(first, str) or not placeholders:
        joined: str = " ".join(stringify_safe(a) for a in args)
        return Category(key=joined, message=joined)

    values: list[object] = list(args[1 : 1 + len(placeholders)])
    remaining: list[str] = [stringify_safe(a) for a in args[1 + len(placeholders) :]]

    parts: list[str] = []
    substitutions: list[Substitution] = []
    length: int = 0
    cursor: int = 0
    index: int = 0
    for match in PLACEHOLDER_RE.finditer(first):
        literal: str = first[cursor : match.start()]
        parts.append(literal)
        length += len(literal)
        cursor = match.end()

        token: str = match.group()
        if token == "%%":
            parts.append("%")
            length += 1
            continue
        if index < len(values):
            rendered: str = _format_value(token[1], values[index])
            substitutions.append(Substitution(offset=length, length=len(rendered)))
        else:
            rendered = token
        index += 1
        parts.append(rendered)
        length += len(rendered)
    parts.append(first[cursor:])

    key: str = " ".join([first, *remaining])
    message: str = " ".join(["".join(parts), *remaining])
    return Category(key=key, message=message, substitutions=tuple(substitutions))
