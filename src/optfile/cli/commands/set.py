# topmark:header:start
#
#   project      : OptFile
#   file         : set.py
#   file_relpath : src/optfile/cli/commands/set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile `set` command.

Sets one option in a section and rewrites the file. An existing file is parsed
first, so its other options are kept; comments and options skipped as unknown
are not preserved. A missing file is created. Arguments that would not parse
back as written (line breaks, or ``#`` in the key or value) are rejected.
"""

from __future__ import annotations

from pathlib import Path

import click

from optfile.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_registry,
    parse_option_file,
    translate_errors,
)
from optfile.cli.errors import OptfileConfigError, OptfileUsageError
from optfile.cli.options import registry_options
from optfile.file import OptionFile, WriteOutcome
from optfile.options import normalize_option_token


# Characters that would split or truncate the rendered ``key=value`` line.
_LINE_BREAKS: tuple[str, ...] = ("\n", "\r")
_COMMENT_CHAR: str = "#"


def _check_writable(section: str, key: str, value: str) -> None:
    """Reject arguments that would not parse back as written.

    Raises:
        OptfileUsageError: If any argument holds a line break, the key or value
            holds ``#``, or the key holds ``=``.
    """
    for label, text in (("SECTION", section), ("KEY", key), ("VALUE", value)):
        if any(ch in text for ch in _LINE_BREAKS):
            raise OptfileUsageError(f"{label} must not contain line breaks")
    if _COMMENT_CHAR in key or "=" in key:
        raise OptfileUsageError(f"KEY must not contain '{_COMMENT_CHAR}' or '='")
    if _COMMENT_CHAR in value:
        raise OptfileUsageError(
            f"VALUE must not contain '{_COMMENT_CHAR}'; it starts a comment in option files"
        )


@click.command(
    name="set",
    help=(
        "Set option KEY to VALUE in SECTION of the option file at PATH. "
        "Use an empty SECTION ('') for the default section."
    ),
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("section")
@click.argument("key")
@click.argument("value")
@registry_options
@click.pass_context
def set_command(
    ctx: click.Context,
    *,
    path: Path,
    section: str,
    key: str,
    value: str,
    registry_path: Path | None,
    ignore_unknown: bool,
) -> None:
    """Set option KEY to VALUE in SECTION."""
    console = get_console(ctx)
    registry = load_registry(registry_path)

    name, _, _ = normalize_option_token(key)
    _check_writable(section, key, value)
    if registry.find_option(name) is None:
        raise OptfileConfigError(f"Unknown option {name!r}")

    option_file = OptionFile(path, ignore_unknown_options=ignore_unknown)
    existed: bool = option_file.exists()
    if existed:
        option_file = parse_option_file(path, registry, ignore_unknown=ignore_unknown)

    option_file.set_option_value(section, name, value)
    with translate_errors():
        outcome = option_file.write(overwrite=existed)

    if outcome is WriteOutcome.WRITTEN and get_effective_verbosity(ctx) > 0:
        label = f"[{section}] " if section else ""
        console.print(f"Set {label}{name}={value} in {option_file.path}")
