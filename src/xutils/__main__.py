# xutils:header:start
#
#   project      : Xutils
#   file         : __main__.py
#   file_relpath : src/xutils/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Run the Xutils CLI with ``python -m xutils``."""

from __future__ import annotations

from xutils.cli.main import cli

if __name__ == "__main__":
    cli()
