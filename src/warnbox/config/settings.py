# topmark:header:start
#
#   project      : WarnBox
#   file         : settings.py
#   file_relpath : src/warnbox/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Installer settings from `pyproject.toml` and the environment.

Sources:
    * ``[tool.warnbox]`` in ``pyproject.toml`` (parsed with `tomlkit`):

      ```toml
      [tool.warnbox]
      ignore = ["Warning: componentWillMount", "deprecated"]
      disabled = false
      ```

    * ``WARNBOX_DISABLED`` (``1``/``true``/``yes``/``on``) overrides ``disabled``.
    * ``WARNBOX_IGNORE`` holds comma-separated patterns, appended to the file's.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from warnbox.config.logging import get_logger
from warnbox.constants import ENV_DISABLED, ENV_IGNORE, TOOL_TABLE_NAME, WARNING_PREFIX

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSY: frozenset[str] = frozenset({"0", "false", "no", "off", ""})


class SettingsError(ValueError):
    """Raised when a settings source is unreadable or malformed."""


@dataclass(frozen=True)
class WarnBoxSettings:
    """Resolved installer settings.

    Attributes:
        ignore_patterns: Substrings of rendered messages to hide.
        disabled: Start with the registry disabled.
        error_prefix: Prefix an ``error`` message must carry to be captured.
    """

    ignore_patterns: tuple[str, ...] = ()
    disabled: bool = False
    error_prefix: str = WARNING_PREFIX

    def merged_with(self, other: WarnBoxSettings) -> WarnBoxSettings:
        """Return settings where ``other`` takes precedence.

        Ignore patterns are concatenated (``self`` first, duplicates dropped);
        ``disabled`` is true if either side requests it.
        """
        patterns: dict[str, None] = dict.fromkeys(self.ignore_patterns)
        patterns.update(dict.fromkeys(other.ignore_patterns))
        return replace(
            self,
            ignore_patterns=tuple(patterns),
            disabled=self.disabled or other.disabled,
            error_prefix=other.error_prefix,
        )


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        value (str): Raw value.

    Returns:
        bool: The parsed flag.

    Raises:
        SettingsError: If ``value`` is not a recognized boolean spelling.
    """
    v: str = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise SettingsError(f"Invalid boolean value: {value!r}")


def settings_from_env(environ: Mapping[str, str] | None = None) -> WarnBoxSettings:
    """Build settings from ``WARNBOX_*`` environment variables.

    Args:
        environ (Mapping[str, str] | None): Environment to read (defaults to `os.environ`).

    Returns:
        WarnBoxSettings: Settings carrying only what the environment specifies.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    disabled_raw: str | None = env.get(ENV_DISABLED)
    ignore_raw: str = env.get(ENV_IGNORE, "")
    patterns: tuple[str, ...] = tuple(p.strip() for p in ignore_raw.split(",") if p.strip())
    return WarnBoxSettings(
        ignore_patterns=patterns,
        disabled=parse_bool(disabled_raw) if disabled_raw is not None else False,
    )


def settings_from_table(table: Mapping[str, Any]) -> WarnBoxSettings:
    """Validate a ``[tool.warnbox]`` table.

    Args:
        table (Mapping[str, Any]): The unwrapped TOML table.

    Returns:
        WarnBoxSettings: The validated settings.

    Raises:
        SettingsError: If a value has the wrong type.
    """
    ignore: Any = table.get("ignore", [])
    if not isinstance(ignore, list) or not all(isinstance(p, str) for p in ignore):
        raise SettingsError(f"[tool.{TOOL_TABLE_NAME}] 'ignore' must be a list of strings")
    disabled: Any = table.get("disabled", False)
    if not isinstance(disabled, bool):
        raise SettingsError(f"[tool.{TOOL_TABLE_NAME}] 'disabled' must be a boolean")
    error_prefix: Any = table.get("error_prefix", WARNING_PREFIX)
    if not isinstance(error_prefix, str) or not error_prefix:
        raise SettingsError(f"[tool.{TOOL_TABLE_NAME}] 'error_prefix' must be a non-empty string")

    unknown: set[str] = set(table) - {"ignore", "disabled", "error_prefix"}
    if unknown:
        logger.warning(
            "Ignoring unknown [tool.%s] keys: %s", TOOL_TABLE_NAME, ", ".join(sorted(unknown))
        )
    return WarnBoxSettings(
        ignore_patterns=tuple(ignore),
        disabled=disabled,
        error_prefix=error_prefix,
    )


def load_pyproject_settings(path: Path) -> WarnBoxSettings:
    """Load settings from the ``[tool.warnbox]`` table of a TOML file.

    A file without the table yields default settings.

    Args:
        path (Path): Path to ``pyproject.toml``.

    Returns:
        WarnBoxSettings: The parsed settings.

    Raises:
        SettingsError: If the file cannot be read or parsed, or the table is malformed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise SettingsError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        raise SettingsError(f"Cannot parse {path}: {e}") from e

    data: Any = doc.unwrap()
    tool: Any = data.get("tool", {})
    table: Any = tool.get(TOOL_TABLE_NAME) if isinstance(tool, dict) else None
    if table is None:
        logger.debug("No [tool.%s] table in %s", TOOL_TABLE_NAME, path)
        return WarnBoxSettings()
    if not isinstance(table, dict):
        raise SettingsError(f"[tool.{TOOL_TABLE_NAME}] in {path} must be a table")
    logger.debug("Loaded [tool.%s] from %s", TOOL_TABLE_NAME, path)
    return settings_from_table(table)


def resolve_settings(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> WarnBoxSettings:
    """Resolve settings from an optional TOML file overlaid with the environment.

    Args:
        path (Path | None): Optional ``pyproject.toml``.
        environ (Mapping[str, str] | None): Environment to read (defaults to `os.environ`).

    Returns:
        WarnBoxSettings: The effective settings.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    base: WarnBoxSettings = load_pyproject_settings(path) if path is not None else WarnBoxSettings()
    from_env: WarnBoxSettings = settings_from_env(env)
    merged: WarnBoxSettings = base.merged_with(
        replace(from_env, error_prefix=base.error_prefix)
    )
    if ENV_DISABLED in env:
        # An explicit environment value wins over the file in both directions.
        merged = replace(merged, disabled=from_env.disabled)
    return merged


__all__ = [
    "SettingsError",
    "WarnBoxSettings",
    "load_pyproject_settings",
    "parse_bool",
    "resolve_settings",
    "settings_from_env",
    "settings_from_table",
]
