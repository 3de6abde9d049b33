# xutils:header:start
#
#   project      : Xutils
#   file         : api.py
#   file_relpath : src/xutils/console/api.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Framework-agnostic console interfaces.

Two small protocols are defined here:

- `ConsoleLike`: user-facing program output (separate from logging), used by
  the CLI commands.
- `ColorSink`: the output boundary of the markup renderer: a text target with
  gettable/settable foreground and background colors and a reset operation.

`ColoredConsoleLike` combines both and adds the markup-aware write methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from xutils.console.palette import ConsoleColor


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands.

    Implementations may use Click or plain stdlib streams. The purpose
    is to decouple program output from the logging subsystem.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ColorSink(Protocol):
    """Text target with mutable foreground/background colors.

    Color changes apply to text written afterwards. Implementations are not
    thread-safe: a single logical writer is assumed.
    """

    @property
    def foreground(self) -> ConsoleColor:
        """Current foreground color."""
        ...

    @foreground.setter
    def foreground(self, color: ConsoleColor) -> None: ...

    @property
    def background(self) -> ConsoleColor:
        """Current background color."""
        ...

    @background.setter
    def background(self, color: ConsoleColor) -> None: ...

    def write(self, text: str) -> None:
        """Write ``text`` in the current colors (no newline added)."""
        ...

    def reset_color(self) -> None:
        """Restore the sink's default foreground and background colors."""
        ...


class ColoredConsoleLike(ConsoleLike, ColorSink, Protocol):
    """Console that also renders colored-console markup."""

    def colored_write(self, text: str, *args: object) -> None:
        """Render markup ``text`` with ``{N}`` placeholders replaced by ``args``."""
        ...

    def colored_write_line(self, text: str, *args: object) -> None:
        """Like `colored_write`, followed by a newline."""
        ...
