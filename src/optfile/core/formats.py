# topmark:header:start
#
#   project      : OptFile
#   file         : formats.py
#   file_relpath : src/optfile/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used by OptFile frontends.

Machine formats (JSON) are stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; for ``dump`` this is the option-file
            serialization itself.
        JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
