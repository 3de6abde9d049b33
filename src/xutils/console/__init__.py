# xutils:header:start
#
#   project      : Xutils
#   file         : __init__.py
#   file_relpath : src/xutils/console/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Colored console: markup parsing, color palette, sinks and rendering."""

from __future__ import annotations
