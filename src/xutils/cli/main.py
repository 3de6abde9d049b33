# xutils:header:start
#
#   project      : Xutils
#   file         : main.py
#   file_relpath : src/xutils/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils command line interface.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``
  (``console``, ``settings``, ``color_enabled``, ``log_level``).
- Subcommands fetch the console from the context and stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from xutils.cli.commands.colors import colors_command
from xutils.cli.commands.echo import echo_command
from xutils.cli.commands.version import version_command
from xutils.cli.errors import XutilsConfigError
from xutils.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from xutils.config.logging import get_logger, setup_logging
from xutils.config.settings import ColorMode, load_settings
from xutils.console.console import ClickConsole
from xutils.errors import SettingsError

if TYPE_CHECKING:
    from xutils.config.settings import ConsoleSettings

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Initialize shared state (logging, settings & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Explicit config file from ``--config``.

    Raises:
        XutilsConfigError: If a configuration file contains an invalid value.
    """
    ctx.obj = ctx.obj or {}

    log_level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    try:
        settings: ConsoleSettings = load_settings(config_file=config_file)
    except SettingsError as exc:
        raise XutilsConfigError(str(exc)) from exc

    settings = settings.with_overrides(color_mode=ColorMode.NEVER if no_color else color_mode)
    ctx.obj["settings"] = settings

    enable_color = settings.color_enabled()
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    logger.debug(
        "Color output %s (mode=%s)",
        "enabled" if enable_color else "disabled",
        settings.color_mode.value,
    )

    ctx.obj["console"] = ClickConsole(
        enable_color=enable_color,
        default_foreground=settings.default_foreground,
        default_background=settings.default_background,
        newline=settings.newline,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Xutils CLI: render colored console markup and inspect the palette.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read console settings from this TOML file (xutils.toml or pyproject.toml layout).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
) -> None:
    """Entry point for the Xutils CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.colored_write_line(
            "Hint: use <c>xutils echo</c> '&lt;red&gt;text&lt;/red&gt;' to render markup."
        )
        console.print()
        console.print(ctx.get_help())


cli.add_command(echo_command)

cli.add_command(colors_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
