# topmark:header:start
#
#   project      : WarnBox
#   file         : errors.py
#   file_relpath : src/warnbox/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the WarnBox CLI.

Styling:
    Exceptions prefer the CLI console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from warnbox.cli.exit_codes import ExitCode


class WarnBoxError(click.ClickException):
    """Base class for all WarnBox CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the CLI console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class WarnBoxUsageError(WarnBoxError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WarnBoxConfigError(WarnBoxError):
    """Error for missing, invalid or malformed settings."""

    exit_code = ExitCode.CONFIG_ERROR
