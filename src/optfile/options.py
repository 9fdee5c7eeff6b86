# topmark:header:start
#
#   project      : OptFile
#   file         : options.py
#   file_relpath : src/optfile/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option descriptors and option-token normalization.

An [`Option`][optfile.options.Option] describes one configurable key: its type
and whether a value is mandatory. Option files consult a lookup of these
descriptors (see [`OptionLookup`][optfile.options.OptionLookup], implemented by
[`optfile.registry.OptionRegistry`][]) while parsing, and expose their own
values through the [`OptionValuer`][optfile.options.OptionValuer] protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from optfile.constants import LOOSE_PREFIX
from optfile.core.enum_mixins import KeyedStrEnum


class OptionType(KeyedStrEnum):
    """Value type of an option."""

    STRING = ("string", "String value", ("str", "text"))
    BOOL = ("bool", "Boolean flag", ("boolean", "flag"))


@dataclass(frozen=True)
class Option:
    """Definition of a single option.

    Attributes:
        name (str): Normalized option name (dashes, no ``loose-`` prefix).
        type (OptionType): The option's value type.
        require_value (bool): Whether a bare ``name`` line (no value) is an error.
        default (str): Value used by [`optfile.config.Config`][] when no source supplies one.
        description (str): Human-readable help text.
    """

    name: str
    type: OptionType = OptionType.STRING
    require_value: bool = False
    default: str = ""
    description: str = ""

    @property
    def is_bool(self) -> bool:
        """Whether the option is boolean-typed."""
        return self.type is OptionType.BOOL


class OptionLookup(Protocol):
    """Source of option definitions consulted while parsing."""

    def find_option(self, name: str) -> Option | None:
        """Return the definition for ``name``, or None if it is not defined."""
        ...


class OptionValuer(Protocol):
    """Anything that can supply raw option values by name."""

    def option_value(self, name: str) -> tuple[str, bool]:
        """Return ``(value, found)`` for option ``name``."""
        ...


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def normalize_option_token(token: str) -> tuple[str, str, bool]:
    """Split a raw option token into ``(key, value, loose)``.

    The token is split on the first ``=``. The key is trimmed and underscores
    are converted to dashes, so ``skip_grant`` and ``skip-grant`` name the same
    option. A token is loose when it has no ``=`` (a bare key with an implied
    empty value) or when its key carries the ``loose-`` prefix, which is
    removed. An unknown key in a loose token is skipped instead of rejected.
    The value is trimmed and one pair of matching surrounding quotes is removed.

    Args:
        token (str): The option text of a line, comment already removed.

    Returns:
        tuple[str, str, bool]: The normalized key, the value (empty when the
        token has no value), and the loose flag.

    Example:
        >>> normalize_option_token(" loose_ssl_ca = '/etc/ca.pem' ")
        ('ssl-ca', '/etc/ca.pem', True)
    """
    raw_key, sep, raw_value = token.partition("=")
    key = raw_key.strip().replace("_", "-")
    loose = not sep
    if key.startswith(LOOSE_PREFIX):
        key = key[len(LOOSE_PREFIX) :]
        loose = True
    value = _unquote(raw_value.strip())
    return key, value, loose
