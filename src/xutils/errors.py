# xutils:header:start
#
#   project      : Xutils
#   file         : errors.py
#   file_relpath : src/xutils/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Library exceptions for Xutils.

These are raised by the library layer (markup parsing, settings). The CLI
maps them onto `click.ClickException` subclasses in `xutils.cli.errors`.
"""

from __future__ import annotations


class XutilsError(Exception):
    """Base class for all Xutils library errors."""


class MarkupError(XutilsError, ValueError):
    """Raised when colored-console markup cannot be parsed.

    Attributes:
        text (str): The markup text (after placeholder substitution) that failed.
        line (int | None): 1-based line of the error, when the parser reports it.
        column (int | None): 0-based column of the error, when the parser reports it.
    """

    def __init__(
        self,
        message: str,
        *,
        text: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.line = line
        self.column = column


class SettingsError(XutilsError, ValueError):
    """Raised when a configuration value is invalid (e.g. an unknown color name)."""
