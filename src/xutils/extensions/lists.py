# xutils:header:start
#
#   project      : Xutils
#   file         : lists.py
#   file_relpath : src/xutils/extensions/lists.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""List helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, MutableSequence

T = TypeVar("T")


def resize(
    items: MutableSequence[T],
    size: int,
    factory: Callable[[MutableSequence[T]], T],
) -> None:
    """Grow or shrink ``items`` in place to exactly ``size`` elements.

    New elements are produced by ``factory(items)`` and appended at the end;
    surplus elements are removed from the end.

    Raises:
        ValueError: If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    while len(items) < size:
        items.append(factory(items))
    del items[size:]
