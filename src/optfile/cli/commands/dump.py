# topmark:header:start
#
#   project      : OptFile
#   file         : dump.py
#   file_relpath : src/optfile/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile `dump` command.

Without ``-s``, prints the whole parsed file: normalized option-file text, or a
JSON object mapping section names to their options. With ``-s``, prints the
effective options of the selected sections merged by precedence.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from optfile.cli.cmd_common import (
    get_console,
    load_registry,
    parse_option_file,
    translate_errors,
)
from optfile.cli.options import format_option, registry_options, section_options
from optfile.core.formats import OutputFormat


@click.command(
    name="dump",
    help="Print the parsed contents of the option file at PATH.",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@section_options
@registry_options
@format_option
@click.pass_context
def dump_command(
    ctx: click.Context,
    *,
    path: Path,
    sections: tuple[str, ...],
    registry_path: Path | None,
    ignore_unknown: bool,
    output_format: OutputFormat,
) -> None:
    """Print the parsed contents of the option file at PATH."""
    console = get_console(ctx)
    registry = load_registry(registry_path)
    option_file = parse_option_file(path, registry, ignore_unknown=ignore_unknown)

    if sections:
        with translate_errors():
            option_file.use_section(*sections)
        merged: dict[str, str] = option_file.selected_values()
        if output_format == OutputFormat.JSON:
            console.print(json.dumps(merged, indent=2))
        else:
            for key, value in merged.items():
                console.print(f"{key}={value}")
        return

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(option_file.to_dict(), indent=2))
    else:
        console.print(option_file.render(), nl=False)
