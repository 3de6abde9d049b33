# xutils:header:start
#
#   project      : Xutils
#   file         : test_console.py
#   file_relpath : tests/console/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Console sinks and the `ColoredConsole` facade."""

from __future__ import annotations

import io

import click
import pytest

from xutils.config.settings import ColorMode, ConsoleSettings
from xutils.console import colored as colored_module
from xutils.console import console as console_module
from xutils.console.colored import (
    ColoredConsole,
    colored_write,
    colored_write_line,
    create_console,
)
from xutils.console.console import ClickConsole, RecordingConsole, Segment
from xutils.console.palette import ConsoleColor
from xutils.errors import MarkupError


def _click_console(*, enable_color: bool, **kwargs: object) -> tuple[ClickConsole, io.StringIO]:
    out = io.StringIO()
    console = ClickConsole(enable_color=enable_color, out=out, err=io.StringIO(), **kwargs)  # type: ignore[arg-type]
    return console, out


def test_click_console_plain_output_without_color() -> None:
    """With color disabled, tags only affect state: output is plain text."""
    console, out = _click_console(enable_color=False)
    console.colored_write_line('<r>error</r>: <bg c="y">{0}</bg>', "disk full")
    assert out.getvalue() == "error: disk full\n"


def test_click_console_emits_ansi_for_non_default_colors() -> None:
    """Colored segments are wrapped with click styles; default-colored text is not."""
    console, out = _click_console(enable_color=True)
    console.colored_write('a<r>b</r><bg c="db"><y>c</y></bg>')
    expected = (
        "a"
        + click.style("b", fg="bright_red")
        + click.style("c", fg="bright_yellow", bg="blue")
    )
    assert out.getvalue() == expected


def test_click_console_defaults_are_configurable() -> None:
    """Text in the configured default colors is written unstyled."""
    console, out = _click_console(
        enable_color=True,
        default_foreground=ConsoleColor.WHITE,
        default_background=ConsoleColor.DARK_BLUE,
    )
    console.colored_write("<w>x</w><g>y</g>")
    assert out.getvalue() == "x" + click.style("y", fg="white")


def test_click_console_custom_newline() -> None:
    """The line-terminated variant appends the configured newline once."""
    console, out = _click_console(enable_color=False, newline="\r\n")
    console.colored_write_line("<g>x</g>")
    assert out.getvalue() == "x\r\n"


def test_click_console_reset_color() -> None:
    """`reset_color` restores the defaults."""
    console, _ = _click_console(enable_color=False)
    console.foreground = ConsoleColor.RED
    console.background = ConsoleColor.WHITE
    console.reset_color()
    assert (console.foreground, console.background) == (ConsoleColor.GRAY, ConsoleColor.BLACK)


def test_click_console_styled_respects_enable_color() -> None:
    """`styled` is a no-op when color is disabled."""
    plain, _ = _click_console(enable_color=False)
    fancy, _ = _click_console(enable_color=True)
    assert plain.styled("x", bold=True) == "x"
    assert fancy.styled("x", bold=True) == click.style("x", bold=True)


def test_click_console_warn_and_error_go_to_err() -> None:
    """Warnings and errors are written to the error stream."""
    err = io.StringIO()
    out = io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)
    console.warn("careful")
    console.error("broken")
    assert err.getvalue() == "careful\nbroken\n"
    assert out.getvalue() == ""


def test_recording_console_ignores_empty_writes(recording: RecordingConsole) -> None:
    """Empty strings are not recorded as segments."""
    recording.write("")
    recording.write("x")
    assert recording.segments == [Segment("x", ConsoleColor.GRAY, ConsoleColor.BLACK)]


def test_colored_console_facade_write_line(recording: RecordingConsole) -> None:
    """`ColoredConsole.write_line` renders then appends the sink's newline."""
    ColoredConsole(recording).write_line("<c>{0}</c>", 42)
    assert recording.segments == [
        Segment("42", ConsoleColor.CYAN, ConsoleColor.BLACK),
        Segment("\n", ConsoleColor.GRAY, ConsoleColor.BLACK),
    ]


def test_colored_console_uses_settings_newline(recording: RecordingConsole) -> None:
    """Explicit settings override the sink's newline."""
    console = ColoredConsole(recording, settings=ConsoleSettings(newline="\r\n"))
    console.write_line("x")
    assert recording.text == "x\r\n"


def test_colored_console_reset_color(recording: RecordingConsole) -> None:
    """The facade forwards `reset_color` to its sink."""
    recording.foreground = ConsoleColor.RED
    ColoredConsole(recording).reset_color()
    assert recording.foreground is ConsoleColor.GRAY


def test_module_functions_accept_explicit_sink(recording: RecordingConsole) -> None:
    """`colored_write` and `colored_write_line` render to the given sink."""
    colored_write("<dr>a</dr>", sink=recording)
    colored_write_line("b{0}", "c", sink=recording)
    assert recording.text == "abc\n"
    assert recording.segments[0] == Segment("a", ConsoleColor.DARK_RED, ConsoleColor.BLACK)


def test_module_functions_propagate_markup_errors(recording: RecordingConsole) -> None:
    """Malformed markup raises and nothing is written."""
    with pytest.raises(MarkupError):
        colored_write_line("<red>unterminated", sink=recording)
    assert recording.segments == []


def test_create_console_applies_settings() -> None:
    """`create_console` maps settings onto a stdout `ClickConsole`."""
    settings = ConsoleSettings(
        default_foreground=ConsoleColor.WHITE,
        default_background=ConsoleColor.DARK_BLUE,
        newline="\r\n",
        color_mode=ColorMode.NEVER,
    )
    console = create_console(settings)
    assert console.enable_color is False
    assert console.default_foreground is ConsoleColor.WHITE
    assert console.foreground is ConsoleColor.WHITE
    assert console.background is ConsoleColor.DARK_BLUE
    assert console.newline == "\r\n"


def test_default_sink_is_shared(monkeypatch: pytest.MonkeyPatch) -> None:
    """The module-level sink is created once and reused."""
    monkeypatch.setattr(colored_module, "_default_sink", None)
    first = colored_module.default_sink()
    assert colored_module.default_sink() is first


def test_color_state_base_requires_write() -> None:
    """Console implementations must provide `write`."""

    class _NoWrite(console_module._ColorStateMixin):
        pass

    with pytest.raises(TypeError):
        _NoWrite()  # type: ignore[abstract]
