# xutils:header:start
#
#   project      : Xutils
#   file         : byte_arrays.py
#   file_relpath : src/xutils/extensions/byte_arrays.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Byte array helpers."""

from __future__ import annotations

import base64
from typing import Final

import filetype

from xutils.config.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIME_TYPE: Final[str] = "application/octet-stream"


def detect_mime_type(data: bytes | bytearray) -> str:
    """Guess the MIME type of ``data`` from its magic numbers.

    Returns:
        str: The detected MIME type, or ``application/octet-stream``.
    """
    kind = filetype.guess(bytes(data)) if data else None
    if kind is None:
        logger.debug("No MIME type detected for %d byte(s)", len(data))
        return DEFAULT_MIME_TYPE
    return kind.mime


def to_data_url(data: bytes | bytearray, mime_type: str | None = None) -> str:
    """Encode ``data`` as a ``data:`` URL.

    Args:
        data (bytes | bytearray): Raw content.
        mime_type (str | None): MIME type to embed. Detected from the content when omitted.

    Returns:
        str: ``data:<mime>;base64,<payload>``.
    """
    mime = mime_type or detect_mime_type(data)
    payload = base64.b64encode(bytes(data)).decode("ascii")
    return f"data:{mime};base64,{payload}"
