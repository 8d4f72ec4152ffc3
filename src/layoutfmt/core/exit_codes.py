# topmark:header:start
#
#   project      : LayoutFmt
#   file         : exit_codes.py
#   file_relpath : src/layoutfmt/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for LayoutFmt.

LayoutFmt aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `WOULD_CHANGE=2`,
which `layoutfmt check` uses to signal that formatting would alter the input. Click usage
errors also exit with 2, so tests should check the output alongside the exit code.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LayoutFmt CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: ``check``: the formatted output differs from the input.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed syntax tree document. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid, unknown or rejected option. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
