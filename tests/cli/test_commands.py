# topmark:header:start
#
#   project      : OptFile
#   file         : test_commands.py
#   file_relpath : tests/cli/test_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `get`, `set`, `sections` and `dump` against real files."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from optfile.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from tests.cli.conftest import RunCli

pytestmark = pytest.mark.cli

CONTENT: str = """
user=top

[client]
user=client-user
port=1

[prod]
port=3306
skip-grant
"""


@pytest.fixture
def cnf(write_file: Callable[[str, str], Path]) -> Path:
    """An option file with a default section, ``[client]`` and ``[prod]``."""
    return write_file("my.cnf", CONTENT)


def test_get_from_default_section(run_cli: RunCli, cnf: Path) -> None:
    """Without -s only the default section is consulted."""
    result = run_cli(["get", str(cnf), "user"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "top\n"


def test_get_with_section_precedence(run_cli: RunCli, cnf: Path) -> None:
    """Sections given first win; the default section is the fallback."""
    result = run_cli(["get", str(cnf), "port", "-s", "prod", "-s", "client"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "3306\n"

    result = run_cli(["get", str(cnf), "user", "-s", "prod"])
    assert result.output == "top\n"


def test_get_normalizes_key(run_cli: RunCli, cnf: Path, registry_file: Path) -> None:
    """Keys may be given with underscores."""
    result = run_cli(
        ["get", str(cnf), "skip_grant", "-s", "prod", "--registry", str(registry_file)]
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "1\n"


def test_get_missing_option_fails(run_cli: RunCli, cnf: Path) -> None:
    """An unset option exits with FAILURE."""
    result = run_cli(["get", str(cnf), "host"])
    assert result.exit_code == ExitCode.FAILURE
    assert "not set" in result.output


def test_get_missing_section_is_config_error(run_cli: RunCli, cnf: Path) -> None:
    """Selecting an absent section is reported as a configuration error."""
    result = run_cli(["get", str(cnf), "port", "-s", "staging"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "missing section: staging" in result.output


def test_get_missing_file(run_cli: RunCli, tmp_path: Path) -> None:
    """A missing option file maps to FILE_NOT_FOUND."""
    result = run_cli(["get", str(tmp_path / "absent.cnf"), "port"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


def test_strict_registry_rejects_unknown_options(
    run_cli: RunCli, write_file: Callable[[str, str], Path], registry_file: Path
) -> None:
    """With --registry, unknown keys fail unless --ignore-unknown is given."""
    path = write_file("my.cnf", "user=root\nbogus=1\n")

    result = run_cli(["get", str(path), "user", "--registry", str(registry_file)])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "bogus" in result.output
    assert "line 2" in result.output

    result = run_cli(
        ["get", str(path), "user", "--registry", str(registry_file), "--ignore-unknown"]
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "root\n"


def test_malformed_registry_is_config_error(
    run_cli: RunCli, cnf: Path, tmp_path: Path
) -> None:
    """A broken registry file maps to CONFIG_ERROR."""
    bad = tmp_path / "bad.toml"
    bad.write_text("[options\n", encoding="utf-8")
    result = run_cli(["get", str(cnf), "user", "--registry", str(bad)])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def test_set_creates_file(run_cli: RunCli, tmp_path: Path) -> None:
    """`set` on a missing path creates the file."""
    path = tmp_path / "new.cnf"
    result = run_cli(["set", str(path), "client", "user", "root"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert path.read_text(encoding="utf-8") == "[client]\nuser=root\n"


def test_set_updates_existing_file(run_cli: RunCli, cnf: Path, registry_file: Path) -> None:
    """`set` keeps other options and overwrites the file."""
    result = run_cli(
        ["-v", "set", str(cnf), "prod", "port", "3307", "--registry", str(registry_file)]
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Set [prod] port=3307" in result.output

    assert cnf.read_text(encoding="utf-8") == (
        "user=top\n\n[client]\nuser=client-user\nport=1\n\n[prod]\nport=3307\nskip-grant=1\n"
    )


def test_set_default_section(run_cli: RunCli, tmp_path: Path) -> None:
    """An empty SECTION argument targets the default section."""
    path = tmp_path / "new.cnf"
    result = run_cli(["set", str(path), "", "user", "root"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert path.read_text(encoding="utf-8") == "user=root\n"


def test_set_rejects_unregistered_key(
    run_cli: RunCli, tmp_path: Path, registry_file: Path
) -> None:
    """With --registry, `set` refuses keys the registry does not define."""
    path = tmp_path / "new.cnf"
    result = run_cli(["set", str(path), "client", "bogus", "1", "--registry", str(registry_file)])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert not path.exists()


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("user", "a\nb"),
        ("user", "root\r[admin]"),
        ("user", "ro#ot"),
        ("us#er", "root"),
        ("user=x", "root"),
    ],
)
def test_set_rejects_values_that_do_not_round_trip(
    run_cli: RunCli, tmp_path: Path, key: str, value: str
) -> None:
    """`set` refuses arguments that would parse back differently."""
    path = tmp_path / "new.cnf"
    result = run_cli(["set", str(path), "client", key, value])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert not path.exists()


def test_set_rejects_line_break_in_section(run_cli: RunCli, cnf: Path) -> None:
    """A section name with a line break would inject lines; the file is untouched."""
    before = cnf.read_text(encoding="utf-8")
    result = run_cli(["set", str(cnf), "prod\nuser=x", "port", "1"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert cnf.read_text(encoding="utf-8") == before


def test_sections_text_and_json(run_cli: RunCli, cnf: Path) -> None:
    """`sections` lists sections in file order."""
    result = run_cli(["--no-color", "sections", str(cnf)])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.splitlines() == [
        "(default)  1 option",
        "client  2 options",
        "prod  2 options",
    ]

    result = run_cli(["sections", str(cnf), "--format", "json"])
    assert json.loads(result.output) == [
        {"name": "", "options": 1},
        {"name": "client", "options": 2},
        {"name": "prod", "options": 2},
    ]


def test_sections_quiet_lists_names_only(run_cli: RunCli, cnf: Path) -> None:
    """With -q only section names are printed."""
    result = run_cli(["-q", "sections", str(cnf)])
    assert result.output.splitlines() == ["(default)", "client", "prod"]


def test_dump_text_normalizes_file(
    run_cli: RunCli, write_file: Callable[[str, str], Path], registry_file: Path
) -> None:
    """`dump` prints the serialized form: comments dropped, booleans explicit."""
    path = write_file("my.cnf", "# hi\n  [prod]\nport = 3306 # main\nskip-grant\n")
    result = run_cli(["dump", str(path), "--registry", str(registry_file)])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "[prod]\nport=3306\nskip-grant=1\n"


def test_dump_json(run_cli: RunCli, cnf: Path, registry_file: Path) -> None:
    """`dump --format json` maps section names to options."""
    result = run_cli(["dump", str(cnf), "--format", "json", "--registry", str(registry_file)])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output) == {
        "": {"user": "top"},
        "client": {"user": "client-user", "port": "1"},
        "prod": {"port": "3306", "skip-grant": "1"},
    }


def test_dump_selected_sections(
    run_cli: RunCli, cnf: Path, registry_file: Path
) -> None:
    """With -s, `dump` prints the effective merged options."""
    result = run_cli(
        ["dump", str(cnf), "-s", "prod", "-s", "client", "--format", "json"]
        + ["--registry", str(registry_file)]
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert json.loads(result.output) == {
        "user": "client-user",
        "port": "3306",
        "skip-grant": "1",
    }
