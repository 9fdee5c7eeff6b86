# topmark:header:start
#
#   project      : OptFile
#   file         : test_registry.py
#   file_relpath : tests/options/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `OptionRegistry`, including TOML loading via tomlkit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from optfile.core.errors import DuplicateOptionError, RegistryLoadError
from optfile.options import Option, OptionType
from optfile.registry import OptionRegistry

if TYPE_CHECKING:
    from pathlib import Path


def test_find_option_normalizes_names() -> None:
    """Underscores and dashes are interchangeable in names."""
    registry = OptionRegistry([Option("skip_grant", OptionType.BOOL)])

    option = registry.find_option("skip-grant")
    assert option is not None
    assert option.name == "skip-grant"
    assert registry.find_option("skip_grant") is option
    assert "skip_grant" in registry
    assert "other" not in registry
    assert registry.find_option("other") is None


def test_duplicate_option_is_rejected() -> None:
    """Registering the same normalized name twice fails."""
    registry = OptionRegistry([Option("ssl-ca")])
    with pytest.raises(DuplicateOptionError):
        registry.add_option(Option("ssl_ca"))


def test_non_strict_registry_accepts_anything() -> None:
    """A non-strict registry synthesizes plain string options."""
    registry = OptionRegistry([Option("compress", OptionType.BOOL)], strict=False)

    declared = registry.find_option("compress")
    assert declared is not None
    assert declared.is_bool

    synthesized = registry.find_option("whatever_key")
    assert synthesized == Option("whatever-key")
    assert registry.find_option("") is None
    assert len(registry) == 1


def test_iteration_keeps_registration_order() -> None:
    """Iteration yields options in the order they were added."""
    registry = OptionRegistry()
    registry.add_options(Option("b"), Option("a"), Option("c"))
    assert [o.name for o in registry] == ["b", "a", "c"]


def test_from_toml_text(registry_file: Path) -> None:
    """The TOML format declares types, value requirements, defaults and descriptions."""
    registry = OptionRegistry.load_toml(registry_file)

    assert [o.name for o in registry] == ["port", "skip-grant", "user", "host", "compress"]
    port = registry.find_option("port")
    assert port == Option(
        "port", OptionType.STRING, require_value=True, default="3306", description="TCP port"
    )
    skip = registry.find_option("skip-grant")
    assert skip is not None
    assert skip.is_bool
    assert registry.strict


def test_from_toml_text_without_options_table() -> None:
    """A document without `[options]` yields an empty registry."""
    registry = OptionRegistry.from_toml_text('title = "nothing here"\n')
    assert len(registry) == 0


@pytest.mark.parametrize(
    ("text", "fragment"),
    [
        ("[options\n", "Invalid TOML"),
        ('options = "x"\n', "must be a table"),
        ("[options]\nport = 1\n", "must be a table"),
        ('[options.port]\ntype = "integer"\n', "unknown type"),
        ("[options.port]\nrequire_value = \"yes\"\n", "must be a boolean"),
        ("[options.port]\ndefault = 3306\n", "must be a string"),
    ],
)
def test_malformed_registry_documents(text: str, fragment: str) -> None:
    """Malformed documents raise RegistryLoadError naming the problem."""
    with pytest.raises(RegistryLoadError, match=fragment):
        OptionRegistry.from_toml_text(text, source="test.toml")


def test_unknown_entry_keys_are_warned_about(caplog: pytest.LogCaptureFixture) -> None:
    """Unrecognized keys inside an option table are ignored with a warning."""
    caplog.set_level(logging.WARNING, logger="optfile")
    registry = OptionRegistry.from_toml_text('[options.port]\nunit = "tcp"\n', source="t.toml")

    assert "port" in registry
    assert any("unit" in r.getMessage() for r in caplog.records)


def test_load_toml_missing_file(tmp_path: Path) -> None:
    """Filesystem errors propagate as OSError."""
    with pytest.raises(FileNotFoundError):
        OptionRegistry.load_toml(tmp_path / "absent.toml")
