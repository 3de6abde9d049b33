# xutils:header:start
#
#   project      : Xutils
#   file         : iterables.py
#   file_relpath : src/xutils/extensions/iterables.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Iterable helpers: fixed-size slices and duplicate detection."""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Iterator

T = TypeVar("T")


def slices(data: Iterable[T], size: int) -> Iterator[list[T]]:
    """Split ``data`` into consecutive lists of ``size`` items (the last may be shorter).

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"size must be > 0, got {size}")
    iterator = iter(data)
    while chunk := list(islice(iterator, size)):
        yield chunk


def duplicates(items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> Iterator[T]:
    """Yield every item whose key was already seen earlier in ``items``.

    An item occurring three times is yielded twice.

    Args:
        items (Iterable[T]): Items to scan.
        key (Callable[[T], Hashable] | None): Maps items to the value compared for
            equality. Defaults to the item itself.
    """
    seen: set[Any] = set()
    for item in items:
        marker = item if key is None else key(item)
        if marker in seen:
            yield item
        else:
            seen.add(marker)


def has_duplicates(items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> bool:
    """Return True if any two items of ``items`` share the same key."""
    return any(True for _ in duplicates(items, key))
