# topmark:header:start
#
#   project      : OptFile
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

Exposes a ``run_cli`` fixture that invokes the Click CLI through
`click.testing.CliRunner`, and restores the root logger afterwards because the
``optfile`` group reconfigures logging on every invocation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import pytest
from click.testing import CliRunner, Result

from optfile.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class RunCli(Protocol):
    """Signature of the ``run_cli`` fixture."""

    def __call__(self, argv: Sequence[str]) -> Result: ...


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch) -> RunCli:
    """Return a helper invoking the CLI with the given argument vector.

    The environment's ``OPTFILE_LOG_LEVEL`` is cleared so log output never
    mixes with program output.
    """
    monkeypatch.delenv("OPTFILE_LOG_LEVEL", raising=False)

    def _run(argv: Sequence[str]) -> Result:
        return CliRunner().invoke(cli, list(argv))

    return _run
