# topmark:header:start
#
#   project      : OptFile
#   file         : errors.py
#   file_relpath : src/optfile/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the OptFile library.

Recoverable problems with option files and option definitions derive from
[`OptionFileError`][optfile.core.errors.OptionFileError]. Filesystem failures
are left as the builtin ``OSError`` subclasses raised by the OS layer, with the
single addition of [`ShortWriteError`][optfile.core.errors.ShortWriteError].

[`NotParsedError`][optfile.core.errors.NotParsedError] is not an
``OptionFileError``: it signals misuse of the API (a lookup on a file that was
never parsed), not a problem with the file's contents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class OptionFileError(Exception):
    """Base class for all OptFile errors about option files and definitions."""


class OptionNotDefinedError(OptionFileError):
    """An option key is not known to the option-definition lookup.

    Attributes:
        name (str): The normalized option key.
        source (str): Where the key was encountered (``"<path> line <n>"``),
            or an empty string when not tied to a file location.
    """

    def __init__(self, name: str, source: str = "") -> None:
        self.name = name
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Unknown option {name!r}{where}")


class OptionMissingValueError(OptionFileError):
    """An option that requires a value was given without one.

    Attributes:
        name (str): The option name.
        source (str): Where the option was encountered (``"<path> line <n>"``).
    """

    def __init__(self, name: str, source: str) -> None:
        self.name = name
        self.source = source
        super().__init__(f"Option {name!r} requires a value ({source})")


class MissingSectionError(OptionFileError):
    """One or more requested sections do not exist in the option file.

    Raised by ``OptionFile.use_section`` *after* the precedence for the sections
    that were found has been installed.

    Attributes:
        path (Path): The option file's absolute path.
        names (tuple[str, ...]): The missing section names, in request order.
    """

    def __init__(self, path: Path, names: Iterable[str]) -> None:
        self.path = path
        self.names = tuple(names)
        super().__init__(f"File {path} missing section: {', '.join(self.names)}")


class OptionValueError(OptionFileError, ValueError):
    """An option value cannot be converted to the requested type."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Option {name!r}: cannot convert {value!r} to {expected}")


class DuplicateOptionError(OptionFileError):
    """An option with the same name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Option {name!r} is already defined")


class RegistryLoadError(OptionFileError):
    """An option-definition registry document is malformed."""


class ShortWriteError(OSError):
    """Fewer bytes were written than the serialized content holds."""

    def __init__(self, path: Path, written: int, expected: int) -> None:
        self.written = written
        self.expected = expected
        super().__init__(f"Short write to {path}: wrote {written} of {expected} bytes")


class NotParsedError(RuntimeError):
    """An option lookup was attempted on a file that has not been parsed.

    This is a programming error in the caller, not a property of the file.
    """

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Call to option_value({name!r}) on unparsed file {path}")
