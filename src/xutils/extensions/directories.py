# xutils:header:start
#
#   project      : Xutils
#   file         : directories.py
#   file_relpath : src/xutils/extensions/directories.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Directory helpers built on `pathlib`."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from xutils.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def get_or_create_subdirectory(directory: Path, name: str) -> Path:
    """Return the subdirectory of ``directory`` named ``name``, creating it if needed.

    An existing subdirectory matches case-insensitively, so ``"Data"`` finds
    ``data/`` even on case-sensitive filesystems.
    """
    target = name.casefold()
    for child in directory.iterdir():
        if child.is_dir() and child.name.casefold() == target:
            return child
    created = directory / name
    created.mkdir()
    logger.debug("Created directory %s", created)
    return created


def clear(directory: Path) -> Path:
    """Delete every file and subdirectory inside ``directory``; keep ``directory`` itself.

    Symlinks are removed, never followed.

    Returns:
        Path: ``directory``, for chaining.
    """
    for child in directory.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
    logger.debug("Cleared directory %s", directory)
    return directory
