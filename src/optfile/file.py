# topmark:header:start
#
#   project      : OptFile
#   file         : file.py
#   file_relpath : src/optfile/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""INI-style option files.

An [`OptionFile`][optfile.file.OptionFile] holds the ordered
[`Section`][optfile.file.Section]s of one file on disk. Lines may contain
``[section]`` headers, ``option=value`` pairs, bare ``option`` names (usually
booleans) and ``#`` comments. Options that precede any header belong to the
default section, whose name is ``""``.

Typical lifecycle:

```python
f = OptionFile("~/.my.cnf")
f.parse(registry)            # reads the file first if needed
f.use_section("client", "mysql")
value, found = f.option_value("port")
f.set_option_value("client", "port", "3307")
f.write(overwrite=True)
```

Instances are single-owner objects; they do no locking.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from optfile.constants import BOOL_ENABLED_VALUE, DEFAULT_SECTION, FILE_MODE
from optfile.core.errors import (
    MissingSectionError,
    NotParsedError,
    OptionMissingValueError,
    OptionNotDefinedError,
    ShortWriteError,
)
from optfile.core.logging import get_logger
from optfile.options import normalize_option_token

if TYPE_CHECKING:
    from optfile.core.logging import OptfileLogger
    from optfile.options import OptionLookup

logger: OptfileLogger = get_logger(__name__)


@dataclass
class Section:
    """A labeled section of an option file.

    Attributes:
        name (str): Section name; ``""`` for options preceding any header.
        values (dict[str, str]): Option values in insertion order.
    """

    name: str
    values: dict[str, str] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        """Whether this is the nameless default section."""
        return self.name == DEFAULT_SECTION

    def render_lines(self) -> list[str]:
        """Return the section's serialized lines (header unless default, then pairs)."""
        lines: list[str] = [] if self.is_default else [f"[{self.name}]"]
        lines.extend(f"{key}={value}" for key, value in self.values.items())
        return lines


class WriteOutcome(str, Enum):
    """Result of [`OptionFile.write`][optfile.file.OptionFile.write]."""

    WRITTEN = "written"
    SKIPPED_EMPTY = "skipped_empty"


def _header_name(line: str) -> str:
    """Return the section name of a header line starting with ``[``."""
    end = line.rfind("]")
    return line[1:end] if end > 0 else line[1:]


class OptionFile:
    """An INI-style option file.

    The path fragments are joined and normalized to an absolute path once, at
    construction; it does not matter whether the directory and file name are
    passed separately or together. Symlinks are not resolved.

    Args:
        *paths (str | os.PathLike[str]): Path fragments to join.
        ignore_unknown_options (bool): Skip, rather than reject, keys unknown
            to the option lookup while parsing.

    Attributes:
        dir (Path): Absolute directory holding the file.
        name (str): Base file name.
        ignore_unknown_options (bool): See above.
    """

    def __init__(
        self,
        *paths: str | os.PathLike[str],
        ignore_unknown_options: bool = False,
    ) -> None:
        joined: str = os.path.join(*(os.path.expanduser(os.fspath(p)) for p in paths or (".",)))
        full = Path(os.path.abspath(joined))
        self.dir: Path = full.parent
        self.name: str = full.name
        self.ignore_unknown_options: bool = ignore_unknown_options

        self._sections: list[Section] = []
        self._section_index: dict[str, Section] = {}
        self._selected: list[str] = []
        self._contents: str = ""
        self._read: bool = False
        self._parsed: bool = False

    def __repr__(self) -> str:
        state = "parsed" if self._parsed else "read" if self._read else "unread"
        return f"OptionFile({str(self.path)!r}, {state}, {len(self._sections)} sections)"

    # --- Path identity ---

    @property
    def path(self) -> Path:
        """The file's full absolute path."""
        return self.dir / self.name

    def exists(self) -> bool:
        """Return True if the file exists and is visible to the current user."""
        try:
            self.path.stat()
        except OSError:
            return False
        return True

    # --- State views ---

    @property
    def has_read_contents(self) -> bool:
        """Whether raw contents have been loaded (or written)."""
        return self._read

    @property
    def has_parsed(self) -> bool:
        """Whether the contents have been parsed into sections (or written)."""
        return self._parsed

    @property
    def contents(self) -> str:
        """The raw text last read from or written to disk."""
        return self._contents

    @property
    def sections(self) -> tuple[Section, ...]:
        """Sections in the order they were first encountered."""
        return tuple(self._sections)

    @property
    def selected(self) -> tuple[str, ...]:
        """Current lookup precedence, highest priority first."""
        return tuple(self._selected)

    def section(self, name: str) -> Section | None:
        """Return the section called ``name``, or None."""
        return self._section_index.get(name)

    def section_names(self) -> list[str]:
        """Return the section names in order."""
        return [s.name for s in self._sections]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return ``{section name: {key: value}}`` in section order."""
        return {s.name: dict(s.values) for s in self._sections}

    # --- Reading and parsing ---

    def read(self) -> None:
        """Load the contents of the option file without parsing them.

        Line endings are kept as stored on disk.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        with open(self.path, encoding="utf-8", newline="") as fh:
            self._contents = fh.read()
        self._read = True
        logger.debug("Read %d characters from %s", len(self._contents), self.path)

    def parse(self, lookup: OptionLookup) -> None:
        """Parse the file contents into sections.

        The contents are read first if that has not happened yet. Sections
        created with ``set_option_value`` before the first parse are kept and
        the file's sections are merged into them; values from the file win for
        keys set in both. Parsing an already-parsed file discards its sections
        (including unwritten ``set_option_value`` edits) and parses the cached
        contents again.

        Args:
            lookup (OptionLookup): Source of option definitions, so the valid
                options and their value rules are known.

        Raises:
            OSError: If the file has to be read and cannot be.
            OptionNotDefinedError: If a key is unknown to ``lookup``, the token
                is not loose and unknown options are not ignored.
            OptionMissingValueError: If a value-requiring option has no value.
        """
        if not self._read:
            self.read()

        if self._parsed:
            logger.debug("Re-parsing %s; discarding %d sections", self.path, len(self._sections))
            self._sections = []
            self._section_index = {}
            self._selected = []
            self._parsed = False
        elif self._sections:
            logger.debug("Merging %s into %d pending sections", self.path, len(self._sections))

        self._ensure_default_section()
        section: Section = self._section_index[DEFAULT_SECTION]

        for line_number, raw in enumerate(self._contents.split("\n"), start=1):
            line = raw.removesuffix("\r").lstrip()
            if not line:
                continue
            if line[0] == "[":
                section = self._get_or_create_section(_header_name(line))
                logger.trace("%s line %d: section [%s]", self.path, line_number, section.name)
                continue

            token, _, _comment = line.partition("#")
            if not token.strip():
                continue
            key, value, loose = normalize_option_token(token)
            source = f"{self.path} line {line_number}"

            option = lookup.find_option(key)
            if option is None:
                if loose or self.ignore_unknown_options:
                    logger.trace("%s: skipping unknown option %r", source, key)
                    continue
                raise OptionNotDefinedError(key, source)
            if value == "":
                if option.require_value:
                    raise OptionMissingValueError(option.name, source)
                if option.is_bool:
                    # A bare boolean option means it is being enabled.
                    value = BOOL_ENABLED_VALUE

            section.values[key] = value

        self._parsed = True
        self._selected = [DEFAULT_SECTION]
        logger.debug("Parsed %s: %d sections", self.path, len(self._sections))

    # --- Selection and lookup ---

    def use_section(self, *names: str) -> None:
        """Change which section(s) ``option_value`` consults.

        Sections listed first take precedence over later ones. The default
        section ``""`` is appended at the end unless it was listed explicitly,
        so it is always checked and need not be passed.

        Args:
            *names (str): Section names, highest priority first. Duplicates
                are ignored after their first occurrence.

        Raises:
            MissingSectionError: If any name is not a section of this file.
                The precedence of the names that were found is installed
                regardless.
        """
        not_found: list[str] = []
        seen: set[str] = set()
        selected: list[str] = []

        for name in names:
            if name in seen:
                continue
            seen.add(name)
            if name in self._section_index:
                selected.append(name)
            else:
                not_found.append(name)
        if DEFAULT_SECTION not in seen:
            selected.append(DEFAULT_SECTION)

        self._selected = selected
        if not_found:
            raise MissingSectionError(self.path, not_found)

    def option_value(self, name: str) -> tuple[str, bool]:
        """Return the value of option ``name`` from the selected sections.

        Only the previously selected sections are consulted, or the default
        section if ``use_section`` was never called. This makes option files
        usable as an [`OptionValuer`][optfile.options.OptionValuer].

        Returns:
            tuple[str, bool]: ``(value, True)`` from the highest-priority section
            defining ``name``, else ``("", False)``.

        Raises:
            NotParsedError: If the file has not been parsed, which indicates a
                bug in the caller.
        """
        if not self._parsed:
            raise NotParsedError(name, self.path)
        for section_name in self._selected:
            section = self._section_index.get(section_name)
            if section is None:
                continue
            if name in section.values:
                return section.values[name], True
        return "", False

    def selected_values(self) -> dict[str, str]:
        """Return the effective value of every option in the selected sections.

        Raises:
            NotParsedError: If the file has not been parsed.
        """
        if not self._parsed:
            raise NotParsedError("*", self.path)
        merged: dict[str, str] = {}
        for section_name in reversed(self._selected):
            section = self._section_index.get(section_name)
            if section is not None:
                merged.update(section.values)
        return merged

    # --- Mutation and writing ---

    def set_option_value(self, section_name: str, name: str, value: str) -> None:
        """Set an option value in the named section, creating the section if needed.

        Nothing is validated against any option definitions, and nothing is
        persisted until ``write`` is called.
        """
        self._get_or_create_section(section_name).values[name] = value

    def render(self) -> str:
        """Serialize the sections to option-file text.

        The default section comes first, without a header. Every other section
        follows in order, preceded by its ``[name]`` header and separated from
        the previous one by a blank line. Empty default sections are omitted.

        Returns:
            str: The serialized text ending in a newline, or ``""`` when every
            section is empty.
        """
        if all(not s.values for s in self._sections):
            return ""

        default = self._section_index.get(DEFAULT_SECTION)
        ordered: list[Section] = [default] if default is not None and default.values else []
        ordered.extend(s for s in self._sections if not s.is_default)

        blocks: list[str] = ["\n".join(s.render_lines()) for s in ordered]
        return "\n\n".join(blocks) + "\n"

    def write(self, overwrite: bool = False) -> WriteOutcome:
        """Write the file's sections to disk.

        Args:
            overwrite (bool): Truncate an existing file if True; otherwise fail
                if the file already exists.

        Returns:
            WriteOutcome: ``SKIPPED_EMPTY`` if there was nothing to write (the
            file is left untouched), else ``WRITTEN``.

        Raises:
            FileExistsError: If ``overwrite`` is False and the file exists.
            ShortWriteError: If not all bytes could be written.
            OSError: For any other failure opening, writing or closing the file.
        """
        text: str = self.render()
        if not text:
            logger.info("Skipping write to %s due to empty configuration", self.path)
            return WriteOutcome.SKIPPED_EMPTY

        data: bytes = text.encode("utf-8")
        flags: int = os.O_WRONLY | os.O_CREAT | (os.O_TRUNC if overwrite else os.O_EXCL)
        fd: int = os.open(self.path, flags, FILE_MODE)
        try:
            written: int = os.write(fd, data)
        finally:
            os.close(fd)
        if written < len(data):
            raise ShortWriteError(self.path, written, len(data))

        self._contents = text
        self._read = True
        self._parsed = True
        self._ensure_default_section()
        if not self._selected:
            self._selected = [DEFAULT_SECTION]
        logger.debug("Wrote %d bytes to %s", written, self.path)
        return WriteOutcome.WRITTEN

    def _get_or_create_section(self, name: str) -> Section:
        section = self._section_index.get(name)
        if section is None:
            section = Section(name)
            self._sections.append(section)
            self._section_index[name] = section
        return section

    def _ensure_default_section(self) -> None:
        if DEFAULT_SECTION not in self._section_index:
            section = Section(DEFAULT_SECTION)
            self._sections.insert(0, section)
            self._section_index[DEFAULT_SECTION] = section
