# xutils:header:start
#
#   project      : Xutils
#   file         : exceptions.py
#   file_relpath : src/xutils/extensions/exceptions.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Exception helpers for `ExceptionGroup` reporting."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def flatten_exceptions(error: BaseException) -> Iterator[BaseException]:
    """Yield the leaf exceptions of ``error``, descending into nested groups.

    A plain exception yields itself.
    """
    if isinstance(error, BaseExceptionGroup):
        for inner in error.exceptions:
            yield from flatten_exceptions(inner)
    else:
        yield error


def describe(error: BaseException) -> str:
    """Return ``"TypeName: message"`` for ``error``."""
    return f"{type(error).__name__}: {error}"


def get_all_messages(error: BaseException) -> str:
    """Collect the messages of an exception (group) into one text block.

    Lines, each terminated by a newline:

    1. the group's own message,
    2. the direct cause (``raise ... from cause``), if any,
    3. every leaf exception of the (nested) group.
    """
    message = error.message if isinstance(error, BaseExceptionGroup) else str(error)
    lines = [message]
    if error.__cause__ is not None:
        lines.append(describe(error.__cause__))
    if isinstance(error, BaseExceptionGroup):
        lines.extend(describe(inner) for inner in flatten_exceptions(error))
    return "".join(f"{line}\n" for line in lines)
