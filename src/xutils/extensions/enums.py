# xutils:header:start
#
#   project      : Xutils
#   file         : enums.py
#   file_relpath : src/xutils/extensions/enums.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Enum helpers: name lookup and human-readable labels.

Members may expose ``description`` and ``display_name`` attributes (for
example through a custom ``__new__``, as `xutils.console.palette.ConsoleColor`
does for its alias). The helpers fall back to the member name.

Example:
    ```python
    class Level(Enum):
        LOW = 1
        HIGH = 2

        @property
        def description(self) -> str:
            return {1: "Below threshold", 2: "Above threshold"}[self.value]

    assert get_description(Level.HIGH) == "Above threshold"
    assert get_display_name(Level.LOW) == "LOW"
    assert enum_from_name(Level, "high", case_insensitive=True) is Level.HIGH
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member for ``key_name`` from ``enum_cls.__members__``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g., ``'OK'``). If ``None``, returns ``None``.
        case_insensitive (bool): If True, member names are compared case-insensitively.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    members: dict[str, Any] = dict(getattr(enum_cls, "__members__", {}))
    if not case_insensitive:
        return cast("_E | None", members.get(key_name))
    target = key_name.casefold()
    for name, member in members.items():
        if name.casefold() == target:
            return cast("_E", member)
    return None


def _text_attribute(member: Enum, *names: str) -> str | None:
    for name in names:
        value = getattr(member, name, None)
        if isinstance(value, str) and value:
            return value
    return None


def get_description(member: Enum) -> str:
    """Return ``member.description``, else ``member.display_name``, else the member name."""
    return _text_attribute(member, "description", "display_name") or member.name


def get_display_name(member: Enum) -> str:
    """Return ``member.display_name``, else ``member.label``, else the member name."""
    return _text_attribute(member, "display_name", "label") or member.name
