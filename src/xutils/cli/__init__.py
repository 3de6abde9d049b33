# xutils:header:start
#
#   project      : Xutils
#   file         : __init__.py
#   file_relpath : src/xutils/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Click-based command line interface for Xutils."""

from __future__ import annotations
