# xutils:header:start
#
#   project      : Xutils
#   file         : __init__.py
#   file_relpath : src/xutils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils package.

Xutils is a small collection of independent helpers. Its main component is a
colored console that renders inline markup tags (``<red>...</red>``,
``<bg c="blue">...</bg>``) to a terminal, plus utility helpers for strings,
dictionaries, enums, byte arrays, iterables and directories.
"""

from __future__ import annotations

from xutils.console.colored import ColoredConsole, colored_write, colored_write_line
from xutils.console.palette import ConsoleColor
from xutils.errors import MarkupError, XutilsError

__all__ = [
    "ColoredConsole",
    "ConsoleColor",
    "MarkupError",
    "XutilsError",
    "colored_write",
    "colored_write_line",
]
