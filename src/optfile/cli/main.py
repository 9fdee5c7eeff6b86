# topmark:header:start
#
#   project      : OptFile
#   file         : main.py
#   file_relpath : src/optfile/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``optfile`` command.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

import click

from optfile.cli.commands.dump import dump_command
from optfile.cli.commands.get import get_command
from optfile.cli.commands.sections import sections_command
from optfile.cli.commands.set import set_command
from optfile.cli.commands.version import version_command
from optfile.cli.console import ClickConsole
from optfile.cli.options import common_verbose_options, resolve_verbosity
from optfile.core.logging import resolve_env_log_level, setup_logging


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color = not no_color
    ctx.color = False if no_color else None
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Inspect and edit INI-style option files.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, default=False, help="Disable color output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the OptFile CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(sections_command)

cli.add_command(get_command)

cli.add_command(set_command)

cli.add_command(dump_command)

if __name__ == "__main__":
    cli()
