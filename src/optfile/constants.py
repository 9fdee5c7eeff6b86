# topmark:header:start
#
#   project      : OptFile
#   file         : constants.py
#   file_relpath : src/optfile/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

OPTFILE_VERSION: str = get_version("optfile")

# Name of the implicit section holding options that precede any header.
DEFAULT_SECTION: str = ""

# Prefix marking an option token whose key may be unknown without failing.
LOOSE_PREFIX: str = "loose-"

# Value stored for a bare boolean option (presence means enabled).
BOOL_ENABLED_VALUE: str = "1"

# Case-insensitive values that read as false for boolean options.
FALSE_VALUES: frozenset[str] = frozenset({"", "0", "false", "off"})

# Permission bits used when creating option files (subject to the umask).
FILE_MODE: int = 0o666

LOG_LEVEL_ENV_VAR: str = "OPTFILE_LOG_LEVEL"
