# xutils:header:start
#
#   project      : Xutils
#   file         : test_dicts.py
#   file_relpath : tests/extensions/test_dicts.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Tests for `xutils.extensions.dicts`."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import pytest

from xutils.extensions.dicts import add_or_set, as_dict, get_or_set, get_or_set_async, get_value


def test_add_or_set() -> None:
    data: dict[str, int] = {}
    add_or_set(data, "a", 1)
    add_or_set(data, "a", 2)
    assert data == {"a": 2}


def test_get_or_set_calls_factory_only_on_miss() -> None:
    calls: list[int] = []

    def factory() -> int:
        calls.append(1)
        return 42

    data: dict[str, int] = {"present": 1}
    assert get_or_set(data, "present", factory) == 1
    assert get_or_set(data, "missing", factory) == 42
    assert get_or_set(data, "missing", factory) == 42
    assert len(calls) == 1
    assert data == {"present": 1, "missing": 42}


def test_get_or_set_async() -> None:
    calls: list[str] = []

    async def factory() -> str:
        calls.append("x")
        return "value"

    async def scenario() -> tuple[str, str]:
        data: dict[int, str] = {}
        first = await get_or_set_async(data, 1, factory)
        second = await get_or_set_async(data, 1, factory)
        return first, second

    assert asyncio.run(scenario()) == ("value", "value")
    assert calls == ["x"]


def test_get_value() -> None:
    data = {"name": "x", "count": 3, "empty": None}
    assert get_value(data, "name") == "x"
    assert get_value(data, "count", int) == 3
    assert get_value(data, "missing") is None
    assert get_value(data, "missing", int, 7) == 7
    assert get_value(data, "empty", str, "default") == "default"


def test_get_value_type_mismatch() -> None:
    with pytest.raises(TypeError, match="expected int"):
        get_value({"count": "3"}, "count", int)


@dataclass
class _Point:
    x: int
    y: int


class _Plain:
    def __init__(self) -> None:
        self.name = "plain"
        self._hidden = True


def test_as_dict() -> None:
    assert as_dict(_Point(1, 2)) == {"x": 1, "y": 2}
    assert as_dict(_Plain()) == {"name": "plain"}


def test_as_dict_rejects_objects_without_attributes() -> None:
    with pytest.raises(TypeError):
        as_dict(3)
