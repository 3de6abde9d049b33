# xutils:header:start
#
#   project      : Xutils
#   file         : version.py
#   file_relpath : src/xutils/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils `version` command.

Prints the current Xutils version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from xutils.cli.cli_types import OutputFormat
from xutils.cli.options import output_format_option
from xutils.constants import XUTILS_VERSION

if TYPE_CHECKING:
    from xutils.console.api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Xutils.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Xutils.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": XUTILS_VERSION}))
    else:
        console.print(console.styled(XUTILS_VERSION, bold=True))
