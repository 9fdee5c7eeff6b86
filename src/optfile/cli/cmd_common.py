# topmark:header:start
#
#   project      : OptFile
#   file         : cmd_common.py
#   file_relpath : src/optfile/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by multiple CLI commands: loading the
option registry, parsing option files, and translating library exceptions
into CLI errors with the right exit codes.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from optfile.cli.errors import (
    OptfileConfigError,
    OptfileEncodingError,
    OptfileFileExistsError,
    OptfileFileNotFoundError,
    OptfileIOError,
    OptfilePermissionDeniedError,
)
from optfile.core.errors import OptionFileError
from optfile.core.logging import get_logger
from optfile.file import OptionFile
from optfile.registry import OptionRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from optfile.cli.console import ClickConsole

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the ``optfile`` group."""
    console: ClickConsole = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``>0`` verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise library and filesystem errors as CLI errors.

    Exit code mapping:
        - OptionFileError → CONFIG_ERROR
        - FileNotFoundError → FILE_NOT_FOUND
        - FileExistsError → IO_ERROR
        - PermissionError → PERMISSION_DENIED
        - UnicodeDecodeError → ENCODING_ERROR
        - other OSError → IO_ERROR
    """
    try:
        yield
    except OptionFileError as exc:
        raise OptfileConfigError(str(exc)) from exc
    except FileNotFoundError as exc:
        raise OptfileFileNotFoundError(f"File not found: {exc.filename}") from exc
    except FileExistsError as exc:
        raise OptfileFileExistsError(f"File already exists: {exc.filename}") from exc
    except PermissionError as exc:
        raise OptfilePermissionDeniedError(f"Permission denied: {exc.filename}") from exc
    except UnicodeDecodeError as exc:
        raise OptfileEncodingError(f"Cannot decode file as UTF-8: {exc}") from exc
    except OSError as exc:
        raise OptfileIOError(f"I/O error: {exc}") from exc


def load_registry(registry_path: Path | None) -> OptionRegistry:
    """Load the option registry named on the command line.

    Without a path, returns a non-strict registry accepting every key as a
    plain string option.
    """
    if registry_path is None:
        logger.debug("No registry given; accepting all options")
        return OptionRegistry(strict=False)
    with translate_errors():
        return OptionRegistry.load_toml(registry_path)


def parse_option_file(
    path: Path,
    registry: OptionRegistry,
    *,
    ignore_unknown: bool,
) -> OptionFile:
    """Read and parse the option file at ``path``.

    Raises:
        OptfileCliError: Translated from any read or parse failure.
    """
    option_file = OptionFile(path, ignore_unknown_options=ignore_unknown)
    with translate_errors():
        option_file.parse(registry)
    return option_file
