# xutils:header:start
#
#   project      : Xutils
#   file         : palette.py
#   file_relpath : src/xutils/console/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""The 16-color console palette and color-name resolution.

Key types:
    - `ConsoleColor`: `str, Enum` whose value is the canonical lowercase
      color name (``"darkblue"``). Each member also carries a short alias
      (``"db"``) and the Click color name used for ANSI output
      (``"blue"``).
    - `resolve_color`: case-insensitive lookup by canonical name, alias or
      spelling variant (``grey`` / ``darkgrey``). Unknown names yield ``None``.

Design:
    `ConsoleColor` keeps `_value_` as the plain canonical name and stores the
    alias and terminal color separately, preserving Enum semantics (hashing,
    equality, ``repr``).

Example:
    ```python
    assert resolve_color("DR") is ConsoleColor.DARK_RED
    assert resolve_color("Red") is ConsoleColor.RED
    assert resolve_color("chartreuse") is None
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class ConsoleColor(str, Enum):
    """Console color palette.

    Dark variants map to the standard ANSI colors, bright variants to the
    high-intensity ANSI colors (``bright_*`` in Click).
    """

    _value_: str
    _alias: str
    _terminal_name: str

    def __new__(cls, text: str, alias: str, terminal_name: str) -> ConsoleColor:
        """Construct a palette member.

        Args:
            text (str): Canonical lowercase color name (stored in `_value_`).
            alias (str): Short 1-2 letter alias used in markup.
            terminal_name (str): Color name understood by `click.style`.

        Returns:
            ConsoleColor: The newly constructed enum member.
        """
        obj: ConsoleColor = str.__new__(cls, text)
        obj._value_ = text
        obj._alias = alias
        obj._terminal_name = terminal_name
        return obj

    BLACK = ("black", "k", "black")
    DARK_BLUE = ("darkblue", "db", "blue")
    DARK_GREEN = ("darkgreen", "dn", "green")
    DARK_CYAN = ("darkcyan", "dc", "cyan")
    DARK_RED = ("darkred", "dr", "red")
    DARK_MAGENTA = ("darkmagenta", "dm", "magenta")
    DARK_YELLOW = ("darkyellow", "dy", "yellow")
    GRAY = ("gray", "g", "white")
    DARK_GRAY = ("darkgray", "dg", "bright_black")
    BLUE = ("blue", "b", "bright_blue")
    GREEN = ("green", "n", "bright_green")
    CYAN = ("cyan", "c", "bright_cyan")
    RED = ("red", "r", "bright_red")
    MAGENTA = ("magenta", "m", "bright_magenta")
    YELLOW = ("yellow", "y", "bright_yellow")
    WHITE = ("white", "w", "bright_white")

    @property
    def value(self) -> str:
        """Return the canonical color name."""
        return self._value_

    @property
    def alias(self) -> str:
        """Return the short markup alias (e.g. ``"dr"``)."""
        return self._alias

    @property
    def terminal_name(self) -> str:
        """Return the color name passed to `click.style`."""
        return self._terminal_name


# Alternative spellings accepted on top of canonical names and aliases.
_SPELLING_VARIANTS: Final[dict[str, ConsoleColor]] = {
    "grey": ConsoleColor.GRAY,
    "darkgrey": ConsoleColor.DARK_GRAY,
}


def _build_lookup() -> dict[str, ConsoleColor]:
    table: dict[str, ConsoleColor] = {}
    for color in ConsoleColor:
        table[color.value] = color
        table[color.alias] = color
    table.update(_SPELLING_VARIANTS)
    return table


COLOR_LOOKUP: Final[dict[str, ConsoleColor]] = _build_lookup()


def resolve_color(name: str | None) -> ConsoleColor | None:
    """Return the palette color for ``name``, or ``None`` if unrecognized.

    Matching is case-insensitive and accepts canonical names, aliases, and the
    ``grey``/``darkgrey`` spellings. Surrounding whitespace is ignored.

    Args:
        name (str | None): Color name, alias, or ``None``.

    Returns:
        ConsoleColor | None: The matching color, or ``None``.
    """
    if name is None:
        return None
    return COLOR_LOOKUP.get(name.strip().lower())
