# topmark:header:start
#
#   project      : LayoutFmt
#   file         : errors.py
#   file_relpath : src/layoutfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LayoutFmt CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes (see `layoutfmt.core.exit_codes.ExitCode`).

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from layoutfmt.core.exit_codes import ExitCode


class LayoutfmtError(click.ClickException):
    """Base class for all LayoutFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LayoutfmtUsageError(LayoutfmtError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LayoutfmtConfigError(LayoutfmtError):
    """Error for invalid, unknown, rejected or conflicting options, and unreadable manifests."""

    exit_code = ExitCode.CONFIG_ERROR


class LayoutfmtDataError(LayoutfmtError):
    """Error for malformed syntax tree documents."""

    exit_code = ExitCode.DATA_ERROR


class LayoutfmtFileNotFoundError(LayoutfmtError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LayoutfmtIOError(LayoutfmtError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
