# topmark:header:start
#
#   project      : OptFile
#   file         : __init__.py
#   file_relpath : src/optfile/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across OptFile.

The ``optfile.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (library, CLI, tests) without pulling in
user-interface concerns.

Included modules:

- ``errors``
  The exception hierarchy raised by the option-file model and its
  collaborators.

- ``logging``
  Logger class with a ``TRACE`` level and a colored formatter.

- ``enum_mixins``
  Typing-friendly Enum helpers (keyed enums with labels and aliases).

- ``formats``
  The output format vocabulary shared by CLI commands.
"""

from __future__ import annotations
