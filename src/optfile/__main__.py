# topmark:header:start
#
#   project      : OptFile
#   file         : __main__.py
#   file_relpath : src/optfile/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running OptFile via ``python -m optfile``.

Delegates to [`optfile.cli.main.cli`][], the same entry point as the
``optfile`` console script.

Examples:
    Print the effective ``port`` of the ``[client]`` section::

        python -m optfile get ~/.my.cnf port -s client
"""

from __future__ import annotations

from optfile.cli.main import cli

if __name__ == "__main__":
    cli()
