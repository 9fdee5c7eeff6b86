# topmark:header:start
#
#   project      : OptFile
#   file         : registry.py
#   file_relpath : src/optfile/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of option definitions.

[`OptionRegistry`][optfile.registry.OptionRegistry] is the concrete
[`OptionLookup`][optfile.options.OptionLookup] used by option files and by
[`optfile.config.Config`][]. Definitions are registered in code or loaded from
a TOML document with `tomlkit`:

```toml
[options.port]
type = "string"
require_value = true
default = "3306"
description = "TCP port"

[options.skip-grant]
type = "bool"
```

Option names are normalized the same way option-file keys are (underscores
become dashes), so a registry entry ``skip_grant`` matches a ``skip-grant``
line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from optfile.core.errors import DuplicateOptionError, RegistryLoadError
from optfile.core.logging import get_logger
from optfile.options import Option, OptionType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from optfile.core.logging import OptfileLogger

logger: OptfileLogger = get_logger(__name__)

# Top-level TOML table holding option definitions.
OPTIONS_TABLE: str = "options"

_STRING_FIELDS: tuple[str, ...] = ("type", "default", "description")
_BOOL_FIELDS: tuple[str, ...] = ("require_value",)


def _norm_name(name: str) -> str:
    return name.strip().replace("_", "-")


class OptionRegistry:
    """Ordered collection of option definitions, keyed by normalized name.

    Args:
        options (Iterable[Option]): Initial definitions.
        strict (bool): When False, ``find_option`` synthesizes a value-optional
            ``STRING`` option for any undeclared name instead of returning None.
    """

    def __init__(self, options: Iterable[Option] = (), *, strict: bool = True) -> None:
        self._options: dict[str, Option] = {}
        self.strict = strict
        self.add_options(*options)

    def add_option(self, option: Option) -> None:
        """Register ``option``.

        Raises:
            DuplicateOptionError: If an option with the same normalized name exists.
        """
        name = _norm_name(option.name)
        if name in self._options:
            raise DuplicateOptionError(name)
        if name != option.name:
            option = Option(
                name=name,
                type=option.type,
                require_value=option.require_value,
                default=option.default,
                description=option.description,
            )
        self._options[name] = option

    def add_options(self, *options: Option) -> None:
        """Register several options, in order."""
        for option in options:
            self.add_option(option)

    def find_option(self, name: str) -> Option | None:
        """Return the definition for ``name``.

        Undeclared names return None in strict mode, or a synthesized plain
        string option otherwise.
        """
        option = self._options.get(_norm_name(name))
        if option is None and not self.strict and name:
            return Option(name=_norm_name(name))
        return option

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _norm_name(name) in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"OptionRegistry({len(self)} options, strict={self.strict})"

    @classmethod
    def from_toml_text(cls, text: str, *, source: str = "<string>") -> OptionRegistry:
        """Build a registry from TOML text.

        Args:
            text (str): The TOML document.
            source (str): Label used in error messages (usually the file path).

        Returns:
            OptionRegistry: A strict registry holding the declared options, in
            document order.

        Raises:
            RegistryLoadError: If the document is not valid TOML or an entry is malformed.
        """
        try:
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except TomlkitParseError as exc:
            logger.error("Error decoding TOML from %s: %s", source, exc)
            raise RegistryLoadError(f"Invalid TOML in {source}: {exc}") from exc

        data: dict[str, Any] = doc.unwrap()
        table_any: Any = data.get(OPTIONS_TABLE, {})
        if not isinstance(table_any, dict):
            raise RegistryLoadError(f"{source}: [{OPTIONS_TABLE}] must be a table")
        table = cast("dict[str, Any]", table_any)

        registry = cls()
        for name, entry in table.items():
            registry.add_option(_option_from_table(name, entry, source))
        logger.debug("Loaded %d option definitions from %s", len(registry), source)
        return registry

    @classmethod
    def load_toml(cls, path: Path) -> OptionRegistry:
        """Load a registry from a TOML file.

        Raises:
            OSError: If the file cannot be read.
            RegistryLoadError: If the document is malformed.
        """
        text: str = path.read_text(encoding="utf-8")
        return cls.from_toml_text(text, source=str(path))


def _option_from_table(name: str, entry: object, source: str) -> Option:
    """Convert one ``[options.<name>]`` table into an Option."""
    if not isinstance(entry, dict):
        raise RegistryLoadError(f"{source}: option {name!r} must be a table")
    fields = cast("dict[str, Any]", entry)

    for key in _STRING_FIELDS:
        if key in fields and not isinstance(fields[key], str):
            raise RegistryLoadError(f"{source}: option {name!r}: {key!r} must be a string")
    for key in _BOOL_FIELDS:
        if key in fields and not isinstance(fields[key], bool):
            raise RegistryLoadError(f"{source}: option {name!r}: {key!r} must be a boolean")
    unknown = sorted(set(fields) - set(_STRING_FIELDS) - set(_BOOL_FIELDS))
    if unknown:
        logger.warning("%s: option %r: ignoring unknown keys %s", source, name, unknown)

    type_token: str = fields.get("type", OptionType.STRING.value)
    option_type = OptionType.parse(type_token)
    if option_type is None:
        raise RegistryLoadError(f"{source}: option {name!r}: unknown type {type_token!r}")

    return Option(
        name=name,
        type=option_type,
        require_value=fields.get("require_value", False),
        default=fields.get("default", ""),
        description=fields.get("description", ""),
    )
