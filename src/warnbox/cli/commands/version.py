# topmark:header:start
#
#   project      : WarnBox
#   file         : version.py
#   file_relpath : src/warnbox/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox `version` command.

Prints the current WarnBox version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from warnbox.constants import WARNBOX_VERSION

if TYPE_CHECKING:
    from warnbox.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of WarnBox.",
)
def version_command() -> None:
    """Show the current version of WarnBox."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(console.styled(WARNBOX_VERSION, bold=True))
