# xutils:header:start
#
#   project      : Xutils
#   file         : __init__.py
#   file_relpath : src/xutils/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Configuration layer for Xutils: logging setup and console settings."""

from __future__ import annotations
