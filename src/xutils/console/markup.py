# xutils:header:start
#
#   project      : Xutils
#   file         : markup.py
#   file_relpath : src/xutils/console/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Markup document model and parser for the colored console.

Markup text is a sequence of literal text and XML-style tags, e.g.::

    Status: <green>ok</green> <bg c="dr"><w>3 errors</w></bg>

The text is wrapped in a synthetic root element and parsed as XML, then
converted into an immutable node tree of `Text` and `Element` nodes. The
whole document is parsed before any rendering happens, so malformed markup
never produces partial output.

Entity references are decoded by the XML parser: ``&lt;`` and ``&gt;`` become
literal ``<`` and ``>``, which is how callers embed angle brackets in text.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from xutils.config.logging import get_logger
from xutils.constants import MARKUP_ROOT_TAG
from xutils.errors import MarkupError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Text:
    """Literal text node."""

    content: str


@dataclass(frozen=True)
class Element:
    """Tag node with attributes and ordered children."""

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def attribute(self, *names: str) -> str | None:
        """Return the value of the first attribute in ``names`` that is present.

        Attribute names are matched exactly (XML attribute names are case-sensitive).
        """
        for name in names:
            value = self.attributes.get(name)
            if value is not None:
                return value
        return None


Node: TypeAlias = Text | Element


def substitute_placeholders(text: str, args: Sequence[object]) -> str:
    """Replace ``{0}``, ``{1}``, ... in ``text`` with ``str(args[i])``.

    Replacement is literal and runs in index order, so braces that do not name
    an argument index (``{name}``, ``{5}`` with fewer args) are left untouched.
    Substituted values are part of the markup and are parsed with it.
    """
    for index, arg in enumerate(args):
        text = text.replace(f"{{{index}}}", str(arg))
    return text


def _convert(elem: ET.Element) -> Element:
    children: list[Node] = []
    if elem.text:
        children.append(Text(elem.text))
    for child in elem:
        children.append(_convert(child))
        if child.tail:
            children.append(Text(child.tail))
    return Element(name=elem.tag, attributes=dict(elem.attrib), children=tuple(children))


def parse_markup(text: str) -> tuple[Node, ...]:
    """Parse markup ``text`` into a sequence of sibling nodes.

    Args:
        text (str): Markup text (placeholders already substituted).

    Returns:
        tuple[Node, ...]: The top-level nodes, in document order.

    Raises:
        MarkupError: If the text is not well-formed (unbalanced or invalid tags,
            bare ``&`` or ``<``, characters not allowed in XML).
    """
    start_tag = f"<{MARKUP_ROOT_TAG}>"
    try:
        root: ET.Element = ET.fromstring(f"{start_tag}{text}</{MARKUP_ROOT_TAG}>")
    except ET.ParseError as exc:
        line, column = getattr(exc, "position", (None, None))
        if line == 1 and column is not None:
            # Report columns relative to the caller's text, not the wrapper.
            column = max(0, column - len(start_tag))
        logger.debug("Malformed markup at line %s, column %s: %r", line, column, text)
        raise MarkupError(
            f"Malformed markup (line {line}, column {column}): {exc}",
            text=text,
            line=line,
            column=column,
        ) from exc
    return _convert(root).children
