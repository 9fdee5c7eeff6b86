# topmark:header:start
#
#   project      : OptFile
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the OptFile test suite.

Provides a shared option registry mirroring a small ``my.cnf`` vocabulary and a
helper fixture for writing dedented option files under ``tmp_path``.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from optfile.options import Option, OptionType
from optfile.registry import OptionRegistry

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

REGISTRY_TOML: str = """
[options.port]
type = "string"
require_value = true
default = "3306"
description = "TCP port"

[options.skip-grant]
type = "bool"

[options.user]
type = "string"

[options.host]
type = "string"
default = "localhost"

[options.compress]
type = "bool"
"""


@pytest.fixture
def registry() -> OptionRegistry:
    """Strict registry defining ``port``, ``skip-grant``, ``user``, ``host`` and ``compress``."""
    return OptionRegistry(
        [
            Option("port", OptionType.STRING, require_value=True, default="3306"),
            Option("skip-grant", OptionType.BOOL),
            Option("user", OptionType.STRING),
            Option("host", OptionType.STRING, default="localhost"),
            Option("compress", OptionType.BOOL),
        ]
    )


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """The same registry as ``registry``, as a TOML file."""
    path = tmp_path / "options.toml"
    path.write_text(REGISTRY_TOML, encoding="utf-8")
    return path


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing dedented ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write
