# xutils:header:start
#
#   project      : Xutils
#   file         : console.py
#   file_relpath : src/xutils/console/console.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Console implementations for user-facing program output.

- `ClickConsole`: writes through Click, emitting ANSI colors when enabled.
  It is both a `ConsoleLike` (print/warn/error/styled) and a `ColorSink`
  for the markup renderer.
- `RecordingConsole`: in-memory `ColorSink` that records every written
  segment together with the colors in effect; useful in tests and for
  post-processing rendered output.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, NamedTuple, TextIO, TypedDict

import click

from xutils.console.palette import ConsoleColor
from xutils.console.renderer import render_markup


# This TypedDict is for documentation and type-checking on the *caller* side.
class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool
    blink: bool
    reverse: bool
    strikethrough: bool


class _ColorStateMixin(ABC):
    """Foreground/background bookkeeping shared by the console implementations."""

    default_foreground: ConsoleColor
    default_background: ConsoleColor
    newline: str
    _foreground: ConsoleColor
    _background: ConsoleColor

    def _init_colors(
        self,
        default_foreground: ConsoleColor,
        default_background: ConsoleColor,
        newline: str,
    ) -> None:
        self.default_foreground = default_foreground
        self.default_background = default_background
        self.newline = newline
        self._foreground = default_foreground
        self._background = default_background

    @property
    def foreground(self) -> ConsoleColor:
        """Current foreground color."""
        return self._foreground

    @foreground.setter
    def foreground(self, color: ConsoleColor) -> None:
        self._foreground = color

    @property
    def background(self) -> ConsoleColor:
        """Current background color."""
        return self._background

    @background.setter
    def background(self, color: ConsoleColor) -> None:
        self._background = color

    def reset_color(self) -> None:
        """Restore the default foreground and background colors."""
        self._foreground = self.default_foreground
        self._background = self.default_background

    @abstractmethod
    def write(self, text: str) -> None:
        """Write ``text`` in the current colors (no newline added)."""

    def colored_write(self, text: str, *args: object) -> None:
        """Render markup ``text`` using colors given by its tags.

        Args:
            text (str): Text optionally containing color tags and ``{N}`` placeholders.
            *args (object): Values replacing the equivalent placeholders.

        Raises:
            MarkupError: If the text (after substitution) is malformed.
        """
        render_markup(text, self, *args)

    def colored_write_line(self, text: str, *args: object) -> None:
        """Render markup ``text`` followed by the console's newline sequence."""
        render_markup(text, self, *args)
        self.write(self.newline)


class ClickConsole(_ColorStateMixin):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
            Otherwise, all output is plain text.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
        default_foreground (ConsoleColor): Foreground treated as the terminal default.
        default_background (ConsoleColor): Background treated as the terminal default.
        newline (str): Sequence written by `colored_write_line`.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error output.

    Notes:
        Text written while the colors equal the defaults is emitted unstyled,
        so the terminal's own default colors show through.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        default_foreground: ConsoleColor = ConsoleColor.GRAY,
        default_background: ConsoleColor = ConsoleColor.BLACK,
        newline: str = "\n",
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self._init_colors(default_foreground, default_background, newline)

    def write(self, text: str) -> None:
        """Write ``text`` to stdout in the current colors, without a newline."""
        if not text:
            return
        if self.enable_color:
            fg = None if self._foreground == self.default_foreground else self._foreground
            bg = None if self._background == self.default_background else self._background
            if fg is not None or bg is not None:
                text = click.style(
                    text,
                    fg=fg.terminal_name if fg is not None else None,
                    bg=bg.terminal_name if bg is not None else None,
                )
        click.echo(text, nl=False, file=self.out, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Subset of keyword arguments supported by click.style.
                Expected keys are defined in the StyleKwargs TypedDict.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


class Segment(NamedTuple):
    """A run of text written with one foreground/background pair."""

    text: str
    foreground: ConsoleColor
    background: ConsoleColor


class RecordingConsole(_ColorStateMixin):
    """In-memory color sink recording each write with its colors."""

    def __init__(
        self,
        *,
        default_foreground: ConsoleColor = ConsoleColor.GRAY,
        default_background: ConsoleColor = ConsoleColor.BLACK,
        newline: str = "\n",
    ) -> None:
        self._init_colors(default_foreground, default_background, newline)
        self.segments: list[Segment] = []

    def write(self, text: str) -> None:
        """Record ``text`` with the current colors."""
        if text:
            self.segments.append(Segment(text, self._foreground, self._background))

    @property
    def text(self) -> str:
        """All recorded text, without color information."""
        return "".join(s.text for s in self.segments)

    def clear(self) -> None:
        """Drop recorded segments (colors are left unchanged)."""
        self.segments.clear()
