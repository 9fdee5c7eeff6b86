# topmark:header:start
#
#   project      : OptFile
#   file         : options.py
#   file_relpath : src/optfile/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, registry and section
selection, output format) and their resolution logic, so commands and groups
can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from optfile.cli.cli_types import EnumChoiceParam
from optfile.cli.errors import OptfileUsageError
from optfile.core.formats import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        int: ``verbose_count`` when positive, ``-1`` when quiet, else ``0``.

    Raises:
        OptfileUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise OptfileUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def registry_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``--registry`` and ``--ignore-unknown`` options to a command.

    Without ``--registry`` every key is accepted as a plain string option.
    """
    f = click.option(
        "--ignore-unknown",
        "ignore_unknown",
        is_flag=True,
        default=False,
        help="Skip options not defined in the registry instead of failing.",
    )(f)
    f = click.option(
        "--registry",
        "registry_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="TOML file declaring the valid options ([options.<name>] tables).",
    )(f)
    return f


def section_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a repeatable ``-s/--section`` option (highest priority first)."""
    return click.option(
        "-s",
        "--section",
        "sections",
        multiple=True,
        help="Section to consult; repeat for a precedence list, highest priority first.",
    )(f)


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a ``--format`` option choosing between text and JSON output."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
