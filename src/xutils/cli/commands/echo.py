# xutils:header:start
#
#   project      : Xutils
#   file         : echo.py
#   file_relpath : src/xutils/cli/commands/echo.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils `echo` command.

Renders colored-console markup to stdout::

    xutils echo '<green>ok</green> {0} files' 12
    xutils echo -n '<bg c="dr"><w> FAIL </w></bg>'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from xutils.cli.errors import XutilsMarkupError
from xutils.config.logging import get_logger
from xutils.errors import MarkupError

if TYPE_CHECKING:
    from xutils.console.api import ColoredConsoleLike

logger = get_logger(__name__)


@click.command(
    name="echo",
    help=(
        "Render TEXT with inline color tags. ARGS replace the {0}, {1}, ... placeholders. "
        "Write literal angle brackets as &lt; and &gt;."
    ),
)
@click.argument("text")
@click.argument("args", nargs=-1)
@click.option(
    "-n",
    "--no-newline",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not append a trailing newline.",
)
def echo_command(*, text: str, args: tuple[str, ...], no_newline: bool) -> None:
    """Render colored-console markup.

    Args:
        text (str): Markup text.
        args (tuple[str, ...]): Placeholder values.
        no_newline (bool): Suppress the trailing newline if True.

    Raises:
        XutilsMarkupError: If the markup is malformed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ColoredConsoleLike = ctx.obj["console"]

    logger.debug("echo: %r with %d argument(s)", text, len(args))
    try:
        if no_newline:
            console.colored_write(text, *args)
        else:
            console.colored_write_line(text, *args)
    except MarkupError as exc:
        raise XutilsMarkupError(str(exc)) from exc
