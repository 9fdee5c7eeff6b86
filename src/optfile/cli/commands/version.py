# topmark:header:start
#
#   project      : OptFile
#   file         : version.py
#   file_relpath : src/optfile/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile `version` command.

Prints the current OptFile version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from optfile.cli.cmd_common import get_console
from optfile.cli.options import format_option
from optfile.constants import OPTFILE_VERSION
from optfile.core.formats import OutputFormat


@click.command(
    name="version",
    help="Show the current version of OptFile.",
)
@format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of OptFile."""
    console = get_console(ctx)
    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": OPTFILE_VERSION}))
    else:
        console.print(console.styled(OPTFILE_VERSION, bold=True))
