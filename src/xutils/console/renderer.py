# xutils:header:start
#
#   project      : Xutils
#   file         : renderer.py
#   file_relpath : src/xutils/console/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Recursive renderer for colored-console markup.

The renderer walks the node tree produced by `xutils.console.markup` and
passes an explicit `ColorState` down the recursion:

- before each text write, the state is applied to the sink;
- when an element finishes (normally or by exception), the sink is restored
  to the state in effect when the element started.

Tag semantics:
    - ``fg`` / ``fore`` / ``foreground``: set the foreground from attribute
      ``color`` (or ``c``). Without either attribute the current color is kept.
    - ``bg`` / ``back`` / ``background``: same, for the background.
    - any other tag name: looked up as a foreground color name (``<red>``,
      ``<dr>``). Unknown names are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from xutils.config.logging import get_logger
from xutils.console.markup import Element, Text, parse_markup, substitute_placeholders
from xutils.console.palette import ConsoleColor, resolve_color

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xutils.console.api import ColorSink
    from xutils.console.markup import Node

logger = get_logger(__name__)

FOREGROUND_TAGS: Final[frozenset[str]] = frozenset({"fg", "fore", "foreground"})
BACKGROUND_TAGS: Final[frozenset[str]] = frozenset({"bg", "back", "background"})
COLOR_ATTRIBUTES: Final[tuple[str, str]] = ("color", "c")


@dataclass(frozen=True)
class ColorState:
    """Foreground/background pair in effect for a region of output."""

    foreground: ConsoleColor
    background: ConsoleColor

    @classmethod
    def of(cls, sink: ColorSink) -> ColorState:
        """Capture the sink's current colors."""
        return cls(foreground=sink.foreground, background=sink.background)

    def apply_to(self, sink: ColorSink) -> None:
        """Set the sink's colors to this state (only where they differ)."""
        if sink.background != self.background:
            sink.background = self.background
        if sink.foreground != self.foreground:
            sink.foreground = self.foreground


def _lookup(name: str, tag: str) -> ConsoleColor | None:
    color = resolve_color(name)
    if color is None:
        logger.debug("Ignoring unknown color %r in <%s> tag", name, tag)
    return color


def element_state(element: Element, state: ColorState) -> ColorState:
    """Return the color state selected by ``element`` when entered from ``state``."""
    tag = element.name.lower()
    if tag in FOREGROUND_TAGS:
        name = element.attribute(*COLOR_ATTRIBUTES)
        color = _lookup(state.foreground.value if name is None else name, element.name)
        return state if color is None else replace(state, foreground=color)
    if tag in BACKGROUND_TAGS:
        name = element.attribute(*COLOR_ATTRIBUTES)
        color = _lookup(state.background.value if name is None else name, element.name)
        return state if color is None else replace(state, background=color)
    color = _lookup(element.name, element.name)
    return state if color is None else replace(state, foreground=color)


def render_nodes(nodes: Iterable[Node], sink: ColorSink, state: ColorState) -> None:
    """Render ``nodes`` to ``sink`` starting from color ``state``.

    On return (or on exception), the sink's colors equal ``state``.
    """
    for node in nodes:
        if isinstance(node, Text):
            state.apply_to(sink)
            sink.write(node.content)
            continue
        inner: ColorState = element_state(node, state)
        logger.trace("Entering <%s> with %s", node.name, inner)
        try:
            render_nodes(node.children, sink, inner)
        finally:
            state.apply_to(sink)


def render_markup(text: str, sink: ColorSink, *args: object) -> None:
    """Substitute placeholders, parse, and render ``text`` to ``sink``.

    Args:
        text (str): Markup text, optionally containing ``{0}``, ``{1}``... placeholders.
        sink (ColorSink): Output target with mutable foreground/background colors.
        *args (object): Values substituted for the placeholders before parsing.

    Raises:
        MarkupError: If the substituted text is malformed. Nothing is written.
    """
    nodes = parse_markup(substitute_placeholders(text, args))
    state = ColorState.of(sink)
    try:
        render_nodes(nodes, sink, state)
    finally:
        state.apply_to(sink)
