# topmark:header:start
#
#   project      : OptFile
#   file         : __init__.py
#   file_relpath : src/optfile/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile CLI package.

This package groups all Click command definitions and supporting utilities
for the OptFile command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        optfile = "optfile.cli.main:cli"

All subcommands live in [`optfile.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
