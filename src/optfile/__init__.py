# topmark:header:start
#
#   project      : OptFile
#   file         : __init__.py
#   file_relpath : src/optfile/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OptFile package.

OptFile reads and writes INI-style option files (the ``my.cnf`` dialect):
ordered ``[sections]`` holding ``key=value`` options, lookups through a
caller-chosen precedence of sections, and in-memory edits written back to
disk. A small click CLI wraps the library for inspection and editing.
"""

from __future__ import annotations

from optfile.config import Config, MappingSource
from optfile.core.errors import (
    MissingSectionError,
    NotParsedError,
    OptionFileError,
    OptionMissingValueError,
    OptionNotDefinedError,
)
from optfile.file import OptionFile, Section, WriteOutcome
from optfile.options import Option, OptionType, normalize_option_token
from optfile.registry import OptionRegistry

__all__: list[str] = [
    "Config",
    "MappingSource",
    "MissingSectionError",
    "NotParsedError",
    "Option",
    "OptionFile",
    "OptionFileError",
    "OptionMissingValueError",
    "OptionNotDefinedError",
    "OptionRegistry",
    "OptionType",
    "Section",
    "WriteOutcome",
    "normalize_option_token",
]
