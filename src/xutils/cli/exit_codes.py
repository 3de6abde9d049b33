# xutils:header:start
#
#   project      : Xutils
#   file         : exit_codes.py
#   file_relpath : src/xutils/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Exit codes for the Xutils CLI.

Xutils aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Xutils CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        MARKUP_ERROR: Malformed colored-console markup. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Invalid configuration value. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    MARKUP_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG
