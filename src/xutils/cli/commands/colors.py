# xutils:header:start
#
#   project      : Xutils
#   file         : colors.py
#   file_relpath : src/xutils/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils `colors` command.

Lists the console palette with the markup alias of each color, rendered in
that color (or as a background with ``--background``).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from xutils.cli.cli_types import OutputFormat
from xutils.cli.options import output_format_option
from xutils.console.palette import ConsoleColor

if TYPE_CHECKING:
    from xutils.console.api import ColoredConsoleLike


@click.command(
    name="colors",
    help="List the available console colors and their markup aliases.",
)
@click.option(
    "--background",
    is_flag=True,
    default=False,
    help="Show each color as a background instead of a foreground.",
)
@output_format_option
def colors_command(*, background: bool, output_format: OutputFormat | None = None) -> None:
    """List the console palette.

    Args:
        background (bool): Render samples as backgrounds if True.
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ColoredConsoleLike = ctx.obj["console"]

    if output_format == OutputFormat.JSON:
        payload = [
            {"name": color.value, "alias": color.alias, "terminal": color.terminal_name}
            for color in ConsoleColor
        ]
        console.print(json.dumps(payload, indent=2))
        return

    width = max(len(color.value) for color in ConsoleColor)
    for color in ConsoleColor:
        tag = "bg" if background else "fg"
        console.colored_write_line(
            '{0}  <{1} c="{2}">{3}</{1}>',
            color.alias.rjust(2),
            tag,
            color.value,
            color.value.ljust(width),
        )
