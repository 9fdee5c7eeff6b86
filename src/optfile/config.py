# topmark:header:start
#
#   project      : OptFile
#   file         : config.py
#   file_relpath : src/optfile/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered option resolution across several value sources.

A [`Config`][optfile.config.Config] combines an option registry with an
ordered stack of [`OptionValuer`][optfile.options.OptionValuer] sources, such
as parsed [`OptionFile`][optfile.file.OptionFile]s and a
[`MappingSource`][optfile.config.MappingSource] of explicit overrides. Sources
added later take precedence; an option no source supplies falls back to its
registered default.

Example:
    ```python
    cfg = Config(registry, global_file, user_file)
    cfg.add_source(MappingSource({"port": "3307"}))
    cfg.get_int("port")  # 3307
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from optfile.constants import FALSE_VALUES
from optfile.core.errors import OptionNotDefinedError, OptionValueError
from optfile.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from optfile.core.logging import OptfileLogger
    from optfile.options import Option, OptionLookup, OptionValuer

logger: OptfileLogger = get_logger(__name__)


class MappingSource:
    """Value source backed by a plain mapping of option name to value."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def option_value(self, name: str) -> tuple[str, bool]:
        """Return ``(value, found)`` for ``name``."""
        if name in self.values:
            return self.values[name], True
        return "", False

    def __repr__(self) -> str:
        return f"MappingSource({self.values!r})"


class Config:
    """Option values resolved across a stack of sources.

    Args:
        registry (OptionLookup): Definitions of the valid options.
        *sources (OptionValuer): Initial sources, lowest priority first.
    """

    def __init__(self, registry: OptionLookup, *sources: OptionValuer) -> None:
        self.registry = registry
        self._sources: list[OptionValuer] = list(sources)

    @property
    def sources(self) -> tuple[OptionValuer, ...]:
        """The sources, lowest priority first."""
        return tuple(self._sources)

    def add_source(self, source: OptionValuer) -> None:
        """Add ``source`` on top of the existing ones (highest priority)."""
        self._sources.append(source)

    def find_option(self, name: str) -> Option | None:
        """Return the registered definition for ``name``, or None."""
        return self.registry.find_option(name)

    def _require_option(self, name: str) -> Option:
        option = self.registry.find_option(name)
        if option is None:
            raise OptionNotDefinedError(name)
        return option

    def _lookup(self, name: str) -> tuple[str, OptionValuer | None]:
        for source in reversed(self._sources):
            value, found = source.option_value(name)
            if found:
                return value, source
        return "", None

    def supplied(self, name: str) -> bool:
        """Return True if any source provides a value for ``name``."""
        self._require_option(name)
        return self._lookup(name)[1] is not None

    def get(self, name: str) -> str:
        """Return the effective value of ``name``.

        Raises:
            OptionNotDefinedError: If ``name`` is not a registered option.
        """
        option = self._require_option(name)
        value, source = self._lookup(name)
        if source is None:
            logger.trace("Option %r not supplied; using default %r", name, option.default)
            return option.default
        logger.trace("Option %r = %r from %r", name, value, source)
        return value

    def get_bool(self, name: str) -> bool:
        """Return the value of ``name`` interpreted as a boolean.

        ``""``, ``"0"``, ``"false"`` and ``"off"`` (any case) are false;
        anything else is true.
        """
        return self.get(name).strip().lower() not in FALSE_VALUES

    def get_int(self, name: str) -> int:
        """Return the value of ``name`` as an integer.

        Raises:
            OptionValueError: If the value is not an integer.
        """
        value = self.get(name)
        try:
            return int(value.strip())
        except ValueError as exc:
            raise OptionValueError(name, value, "int") from exc
