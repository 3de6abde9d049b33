# xutils:header:start
#
#   project      : Xutils
#   file         : errors.py
#   file_relpath : src/xutils/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Exceptions for the Xutils CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`xutils.errors`) are translated
    into these at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from xutils.cli.exit_codes import ExitCode


class XutilsCliError(click.ClickException):
    """Base class for all Xutils CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class XutilsUsageError(XutilsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class XutilsMarkupError(XutilsCliError):
    """Error for malformed colored-console markup."""

    exit_code = ExitCode.MARKUP_ERROR


class XutilsConfigError(XutilsCliError):
    """Error for configuration errors (invalid values in config files)."""

    exit_code = ExitCode.CONFIG_ERROR
