# xutils:header:start
#
#   project      : Xutils
#   file         : __init__.py
#   file_relpath : src/xutils/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils CLI subcommands."""

from __future__ import annotations
