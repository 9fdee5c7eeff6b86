# topmark:header:start
#
#   project      : OptFile
#   file         : get.py
#   file_relpath : src/optfile/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile `get` command.

Prints the value of one option, looked up through the selected sections.
Exits with ``FAILURE`` (1) when the option is not set in any of them.
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
from optfile.cli.exit_codes import ExitCode
from optfile.cli.options import registry_options, section_options
from optfile.options import normalize_option_token


@click.command(
    name="get",
    help=(
        "Print the value of option KEY from the option file at PATH. "
        "Sections given with -s are consulted in order, then the default section."
    ),
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("key")
@section_options
@registry_options
@click.pass_context
def get_command(
    ctx: click.Context,
    *,
    path: Path,
    key: str,
    sections: tuple[str, ...],
    registry_path: Path | None,
    ignore_unknown: bool,
) -> None:
    """Print the value of option KEY."""
    console = get_console(ctx)
    registry = load_registry(registry_path)
    option_file = parse_option_file(path, registry, ignore_unknown=ignore_unknown)

    with translate_errors():
        option_file.use_section(*sections)

    name, _, _ = normalize_option_token(key)
    value, found = option_file.option_value(name)
    if not found:
        if get_effective_verbosity(ctx) >= 0:
            console.error(f"Option {name!r} is not set in {option_file.path}")
        ctx.exit(ExitCode.FAILURE)
    console.print(value)
