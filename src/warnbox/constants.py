# topmark:header:start
#
#   project      : WarnBox
#   file         : constants.py
#   file_relpath : src/warnbox/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

WARNBOX_VERSION: str = get_version("warnbox")

# `error` calls are only captured when the message starts with this prefix.
WARNING_PREFIX: str = "Warning: "

# Stack frames to drop so attribution starts at the caller of the diagnostic channel.
CONSOLE_FRAMES_TO_POP: int = 2

# Bound on notification rounds triggered from inside observer callbacks.
MAX_NOTIFY_ROUNDS: int = 8

PYPROJECT_TOML_NAME: str = "pyproject.toml"
TOOL_TABLE_NAME: str = "warnbox"

ENV_DISABLED: str = "WARNBOX_DISABLED"
ENV_IGNORE: str = "WARNBOX_IGNORE"
ENV_TESTING: str = "WARNBOX_TESTING"
