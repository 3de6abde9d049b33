# xutils:header:start
#
#   project      : Xutils
#   file         : sizes.py
#   file_relpath : src/xutils/extensions/sizes.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Human-readable byte sizes."""

from __future__ import annotations

from decimal import Decimal
from typing import Final

BYTE_SIZE_UNITS: Final[tuple[str, ...]] = ("B", "KB", "MB", "GB", "TB", "PB", "EB")


def to_byte_size(byte_count: int | float | Decimal) -> str:
    """Format a byte count using 1024-based units and one decimal place.

    Fractional inputs are truncated to whole bytes. The sign is preserved.

    Examples:
        >>> to_byte_size(0)
        '0 B'
        >>> to_byte_size(1536)
        '1.5 KB'
        >>> to_byte_size(-1048576)
        '-1 MB'
    """
    count = int(byte_count)
    if count == 0:
        return f"0 {BYTE_SIZE_UNITS[0]}"
    magnitude = abs(count)
    place = 0
    while place < len(BYTE_SIZE_UNITS) - 1 and magnitude >= 1024 ** (place + 1):
        place += 1
    value = round(magnitude / 1024**place, 1)
    if count < 0:
        value = -value
    return f"{value:g} {BYTE_SIZE_UNITS[place]}"
