# topmark:header:start
#
#   project      : OptFile
#   file         : __init__.py
#   file_relpath : src/optfile/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``optfile`` CLI."""

from __future__ import annotations
