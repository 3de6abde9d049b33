# xutils:header:start
#
#   project      : Xutils
#   file         : test_enums.py
#   file_relpath : tests/extensions/test_enums.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Tests for `xutils.extensions.enums`."""

from __future__ import annotations

from enum import Enum

from xutils.console.palette import ConsoleColor
from xutils.extensions.enums import enum_from_name, get_description, get_display_name


class _Level(Enum):
    LOW = 1
    HIGH = 2
    NONE = 3

    @property
    def description(self) -> str:
        return {1: "Below threshold", 2: "Above threshold"}.get(self.value, "")

    @property
    def display_name(self) -> str:
        return "High" if self is _Level.HIGH else ""


class _Labelled(Enum):
    A = "a"

    @property
    def label(self) -> str:
        return "Letter A"


def test_enum_from_name() -> None:
    assert enum_from_name(_Level, "HIGH") is _Level.HIGH
    assert enum_from_name(_Level, "high") is None
    assert enum_from_name(_Level, "high", case_insensitive=True) is _Level.HIGH
    assert enum_from_name(ConsoleColor, "dark_red", case_insensitive=True) is ConsoleColor.DARK_RED
    assert enum_from_name(_Level, None) is None


def test_get_description_fallbacks() -> None:
    assert get_description(_Level.LOW) == "Below threshold"
    assert get_description(_Level.NONE) == "NONE"
    assert get_description(_Labelled.A) == "A"


def test_get_display_name_fallbacks() -> None:
    assert get_display_name(_Level.HIGH) == "High"
    assert get_display_name(_Level.LOW) == "LOW"
    assert get_display_name(_Labelled.A) == "Letter A"
