# topmark:header:start
#
#   project      : OptFile
#   file         : sections.py
#   file_relpath : src/optfile/cli/commands/sections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile `sections` command.

Lists the sections of an option file in file order, with their option counts.
The default section (options before any header) is listed as ``(default)``
when it holds options.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from optfile.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_registry,
    parse_option_file,
)
from optfile.cli.options import format_option, registry_options
from optfile.core.formats import OutputFormat

DEFAULT_SECTION_LABEL: str = "(default)"


@click.command(
    name="sections",
    help="List the sections of an option file.",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@registry_options
@format_option
@click.pass_context
def sections_command(
    ctx: click.Context,
    *,
    path: Path,
    registry_path: Path | None,
    ignore_unknown: bool,
    output_format: OutputFormat,
) -> None:
    """List the sections of the option file at PATH."""
    console = get_console(ctx)
    registry = load_registry(registry_path)
    option_file = parse_option_file(path, registry, ignore_unknown=ignore_unknown)

    # The implicit default section is only interesting when it holds options.
    sections = [s for s in option_file.sections if s.values or not s.is_default]

    if output_format == OutputFormat.JSON:
        payload = [{"name": s.name, "options": len(s.values)} for s in sections]
        console.print(json.dumps(payload))
        return

    quiet: bool = get_effective_verbosity(ctx) < 0
    for section in sections:
        label = DEFAULT_SECTION_LABEL if section.is_default else section.name
        if quiet:
            console.print(label)
            continue
        count = len(section.values)
        suffix = "option" if count == 1 else "options"
        console.print(f"{console.styled(label, bold=True)}  {count} {suffix}")
