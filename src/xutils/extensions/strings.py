# xutils:header:start
#
#   project      : Xutils
#   file         : strings.py
#   file_relpath : src/xutils/extensions/strings.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""String helpers: accent stripping, slugs, random tokens, hashing."""

from __future__ import annotations

import hashlib
import re
import secrets
import string
import unicodedata
from typing import Callable, Final

RANDOM_ALPHABET: Final[str] = string.ascii_lowercase + string.digits

_SLUG_DISALLOWED_RE: re.Pattern[str] = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE: re.Pattern[str] = re.compile(r"\s+")


def unaccent(text: str) -> str:
    """Remove diacritics (``"Crème brûlée"`` -> ``"Creme brulee"``)."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def slugify(text: str) -> str:
    """Return a URL slug: unaccented, lowercase, ``[a-z0-9-]`` only.

    Runs of whitespace become a single hyphen; leading/trailing whitespace is dropped.

    Example:
        >>> slugify("  Crème Brûlée: 2 servings ")
        'creme-brulee-2-servings'
    """
    slug = unaccent(text).lower()
    slug = _SLUG_DISALLOWED_RE.sub("", slug)
    return _WHITESPACE_RE.sub("-", slug.strip())


def generate_random_string(length: int) -> str:
    """Return ``length`` random characters from ``[a-z0-9]``.

    Raises:
        ValueError: If ``length`` is negative.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return "".join(secrets.choice(RANDOM_ALPHABET) for _ in range(length))


def md5_hash(text: str) -> str:
    """Return the lowercase hex MD5 digest of ``text`` encoded as ASCII.

    Non-ASCII characters are encoded as ``?`` before hashing.
    """
    data = text.encode("ascii", errors="replace")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def when_blank(text: str | None, factory: Callable[[], str]) -> str:
    """Return ``text``, or ``factory()`` when it is None, empty or whitespace-only."""
    if text is None or not text.strip():
        return factory()
    return text
