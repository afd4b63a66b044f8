# topmark:header:start
#
#   project      : WarnBox
#   file         : run.py
#   file_relpath : src/warnbox/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""WarnBox `run` command.

Runs a Python script with warning interception installed, then prints the
visible warning categories it produced.

Examples:
    ```bash
    warnbox run app.py --port 8000
    warnbox run --ignore "deprecated" --stack 3 app.py
    ```
"""

from __future__ import annotations

import runpy
import sys
import traceback
import warnings
from pathlib import Path
from typing import TYPE_CHECKING

import click

from warnbox.cli.errors import WarnBoxConfigError
from warnbox.cli.exit_codes import ExitCode
from warnbox.config.logging import get_logger
from warnbox.config.settings import SettingsError, WarnBoxSettings, resolve_settings
from warnbox.constants import PYPROJECT_TOML_NAME
from warnbox.core.installer import InterceptionInstaller
from warnbox.core.platform import StaticPlatform
from warnbox.core.registry import WarningRegistry
from warnbox.presenter import WarningPresenter
from warnbox.rendering.text import render_row, render_summary

if TYPE_CHECKING:
    from warnbox.cli.console import ClickConsole
    from warnbox.config.logging import WarnBoxLogger

logger: WarnBoxLogger = get_logger(__name__)


def _load_settings(config_path: Path | None, ignore: tuple[str, ...]) -> WarnBoxSettings:
    path: Path | None = config_path
    if path is None and Path(PYPROJECT_TOML_NAME).is_file():
        path = Path(PYPROJECT_TOML_NAME)
    try:
        settings: WarnBoxSettings = resolve_settings(path)
    except SettingsError as e:
        raise WarnBoxConfigError(str(e)) from e
    return settings.merged_with(
        WarnBoxSettings(ignore_patterns=ignore, error_prefix=settings.error_prefix)
    )


def _run_script(script: Path, script_args: tuple[str, ...], console: ClickConsole) -> int:
    """Execute ``script`` as ``__main__`` and return its exit status."""
    saved_argv: list[str] = sys.argv[:]
    sys.argv = [str(script), *script_args]
    try:
        runpy.run_path(str(script), run_name="__main__")
    except SystemExit as e:
        if e.code is None:
            return 0
        if isinstance(e.code, int):
            return e.code
        console.error(str(e.code))
        return 1
    except Exception:
        console.error(traceback.format_exc().rstrip("\n"))
        return 1
    finally:
        sys.argv = saved_argv
    return 0


@click.command(
    name="run",
    help="Run a Python script and report the warnings it emitted.",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--ignore",
    "ignore",
    multiple=True,
    help="Hide warnings containing this substring (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [tool.warnbox] table (defaults to ./pyproject.toml if present).",
)
@click.option(
    "--show-ignored",
    is_flag=True,
    default=False,
    help="Also list categories hidden by ignore patterns.",
)
@click.option(
    "--stack",
    "stack_limit",
    type=click.IntRange(min=0),
    default=0,
    help="Show up to N innermost stack frames per warning.",
)
@click.option(
    "--fail-on-warnings",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any visible warning was captured.",
)
@click.argument(
    "script",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument("script_args", nargs=-1, type=click.UNPROCESSED)
def run_command(
    *,
    script: Path,
    script_args: tuple[str, ...],
    ignore: tuple[str, ...],
    config_path: Path | None,
    show_ignored: bool,
    stack_limit: int,
    fail_on_warnings: bool,
) -> None:
    """Run SCRIPT with interception installed and print the captured warnings."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    settings: WarnBoxSettings = _load_settings(config_path, ignore)

    registry = WarningRegistry()
    # The CLI is the display; test-run detection must not hide the result.
    installer = InterceptionInstaller(registry=registry, platform=StaticPlatform(is_testing=False))
    presenter = WarningPresenter(registry)
    presenter.mount()

    with warnings.catch_warnings():
        warnings.simplefilter("default")
        installer.install(settings)
        try:
            status: int = _run_script(script, script_args, console)
        finally:
            installer.uninstall()
    presenter.unmount()
    logger.debug("Script %s exited with status %d", script, status)

    rendered: str = presenter.render(enable_color=console.enable_color, stack_limit=stack_limit)
    if rendered:
        console.print(rendered)
    if show_ignored and presenter.snapshot is not None:
        for view in registry.categories():
            if view.key not in presenter.snapshot:
                row: str = render_row(view, enable_color=False)
                console.print(console.styled(f"[ignored] {row}", dim=True))
    console.print(render_summary(presenter.snapshot, enable_color=console.enable_color))

    if status != 0:
        ctx.exit(ExitCode.FAILURE)
    if fail_on_warnings and presenter.visible:
        ctx.exit(ExitCode.FAILURE)
