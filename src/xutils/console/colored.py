# xutils:header:start
#
#   project      : Xutils
#   file         : colored.py
#   file_relpath : src/xutils/console/colored.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""High-level colored console API.

Write text to the console using colors given by tags embedded in the text:

```python
from xutils import colored_write_line

colored_write_line("Build <green>passed</green> in {0}s", 12.4)
colored_write_line('<bg c="dr"><w> FAIL </w></bg> {0}', "test_io.py")
colored_write_line("Use &lt;red&gt; for errors")
```

`ColoredConsole` binds the writer to any `ColorSink`; the module-level
functions use a process-wide stdout console configured from
`xutils.config.settings.load_settings`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xutils.config.settings import ConsoleSettings, load_settings
from xutils.console.console import ClickConsole
from xutils.console.renderer import render_markup

if TYPE_CHECKING:
    from xutils.console.api import ColorSink

_default_sink: ColorSink | None = None


def create_console(settings: ConsoleSettings | None = None) -> ClickConsole:
    """Build a stdout `ClickConsole` from ``settings`` (loaded from disk when omitted)."""
    settings = settings or load_settings()
    return ClickConsole(
        enable_color=settings.color_enabled(),
        default_foreground=settings.default_foreground,
        default_background=settings.default_background,
        newline=settings.newline,
    )


def default_sink() -> ColorSink:
    """Return the shared stdout console, creating it on first use."""
    global _default_sink
    if _default_sink is None:
        _default_sink = create_console()
    return _default_sink


class ColoredConsole:
    """Markup writer bound to a color sink.

    Args:
        sink (ColorSink | None): Output target. Defaults to a stdout `ClickConsole`
            built from ``settings``.
        settings (ConsoleSettings | None): Settings used for the default sink and
            the newline sequence. Loaded from disk when omitted.
    """

    def __init__(
        self,
        sink: ColorSink | None = None,
        *,
        settings: ConsoleSettings | None = None,
    ) -> None:
        if sink is None:
            settings = settings or load_settings()
            sink = create_console(settings)
        self.sink = sink
        self.newline = settings.newline if settings else getattr(sink, "newline", "\n")

    def write(self, text: str, *args: object) -> None:
        """Render markup ``text``; ``{N}`` placeholders are replaced by ``args``.

        Raises:
            MarkupError: If the text (after substitution) is malformed.
        """
        render_markup(text, self.sink, *args)

    def write_line(self, text: str, *args: object) -> None:
        """Render markup ``text`` followed by a newline sequence."""
        render_markup(text, self.sink, *args)
        self.sink.write(self.newline)

    def reset_color(self) -> None:
        """Reset the sink to its default colors."""
        self.sink.reset_color()


def colored_write(text: str, *args: object, sink: ColorSink | None = None) -> None:
    """Render markup ``text`` to ``sink`` (the shared stdout console by default)."""
    ColoredConsole(sink or default_sink()).write(text, *args)


def colored_write_line(text: str, *args: object, sink: ColorSink | None = None) -> None:
    """Render markup ``text`` plus a newline to ``sink`` (shared stdout console by default)."""
    ColoredConsole(sink or default_sink()).write_line(text, *args)
