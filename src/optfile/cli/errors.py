# topmark:header:start
#
#   project      : OptFile
#   file         : errors.py
#   file_relpath : src/optfile/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the OptFile CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. Library exceptions are translated into them by
[`optfile.cli.cmd_common.translate_errors`][].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from optfile.cli.exit_codes import ExitCode


class OptfileCliError(click.ClickException):
    """Base class for all OptFile CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class OptfileUsageError(OptfileCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class OptfileConfigError(OptfileCliError):
    """Error for malformed option files or registries, and missing sections."""

    exit_code = ExitCode.CONFIG_ERROR


class OptfileFileNotFoundError(OptfileCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class OptfileFileExistsError(OptfileCliError):
    """Error when refusing to overwrite an existing file."""

    exit_code = ExitCode.IO_ERROR


class OptfilePermissionDeniedError(OptfileCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class OptfileIOError(OptfileCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class OptfileEncodingError(OptfileCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
