# xutils:header:start
#
#   project      : Xutils
#   file         : dicts.py
#   file_relpath : src/xutils/extensions/dicts.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Dictionary helpers."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, TypeVar, overload

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, MutableMapping

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")


def add_or_set(mapping: MutableMapping[K, V], key: K, value: V) -> None:
    """Insert ``key`` or overwrite its current value."""
    mapping[key] = value


def get_or_set(mapping: MutableMapping[K, V], key: K, factory: Callable[[], V]) -> V:
    """Return ``mapping[key]``, storing ``factory()`` first when the key is missing.

    The factory is only called on a miss.
    """
    if key not in mapping:
        mapping[key] = factory()
    return mapping[key]


async def get_or_set_async(
    mapping: MutableMapping[K, V],
    key: K,
    factory: Callable[[], Awaitable[V]],
) -> V:
    """Async variant of `get_or_set`: awaits ``factory()`` only on a miss."""
    if key not in mapping:
        mapping[key] = await factory()
    return mapping[key]


@overload
def get_value(mapping: Mapping[str, Any], key: str) -> Any | None: ...
@overload
def get_value(mapping: Mapping[str, Any], key: str, expected_type: type[T]) -> T | None: ...
@overload
def get_value(
    mapping: Mapping[str, Any], key: str, expected_type: type[T], default: T
) -> T: ...
def get_value(
    mapping: Mapping[str, Any],
    key: str,
    expected_type: type[Any] | None = None,
    default: Any = None,
) -> Any:
    """Return ``mapping[key]``, or ``default`` when missing or None.

    Args:
        mapping (Mapping[str, Any]): Source mapping.
        key (str): Key to look up.
        expected_type (type | None): If given, the value must be an instance of it.
        default (Any): Value returned for missing keys and ``None`` values.

    Raises:
        TypeError: If the value is not an instance of ``expected_type``.
    """
    value = mapping.get(key)
    if value is None:
        return default
    if expected_type is not None and not isinstance(value, expected_type):
        raise TypeError(
            f"Value for {key!r} is {type(value).__name__}, expected {expected_type.__name__}"
        )
    return value


def as_dict(source: object) -> dict[str, Any]:
    """Return the public attributes of ``source`` as a shallow dict.

    Dataclass instances contribute their fields (in declaration order); other
    objects contribute the entries of ``vars()`` not starting with ``_``.

    Raises:
        TypeError: If ``source`` has neither dataclass fields nor a ``__dict__``.
    """
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        return {f.name: getattr(source, f.name) for f in dataclasses.fields(source)}
    return {name: value for name, value in vars(source).items() if not name.startswith("_")}
