# -*- coding: utf-8 -*-
"""
Section File

Reads and writes INI-style language files: an ordered list of named sections,
each an ordered list of ``key = value`` lines. Comments and blank lines are
kept so that saving a loaded file does not disturb translator formatting.

Keys that would not read back unchanged (edge whitespace, '=', or a leading
'[', '#', ';' or '"') and values with edge whitespace or a leading '"' are
written in double quotes, with backslash escapes for '\\' and '"'.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import langrepo_config as config
from langrepo_exceptions import (
    FileOperationError, IniParseError, ResourceNotFoundError, SaveError
)
from langrepo_logger import get_logger
from parser.patterns import IniPatterns

logger = get_logger("parser.ini_file")

PathLike = Union[str, Path]


@dataclass
class IniLine:
    """A single line of a section. Lines without a key are kept verbatim."""
    key: Optional[str] = None
    value: str = ""
    raw: str = ""

    def render(self) -> str:
        if self.key is None:
            return self.raw
        key = quote(self.key) if key_needs_quotes(self.key) else self.key
        value = quote(self.value) if value_needs_quotes(self.value) else self.value
        return f"{key} = {value}"


class IniSection:
    """
    An ordered group of lines under one ``[name]`` header.

    Keys are case-sensitive. When a key appears more than once the first
    occurrence is the one read and updated.
    """

    def __init__(self, name: str):
        self._name = name
        self._lines: List[IniLine] = []
        self._by_key: Dict[str, IniLine] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def lines(self) -> Tuple[IniLine, ...]:
        return tuple(self._lines)

    def _append(self, line: IniLine) -> None:
        self._lines.append(line)
        if line.key is not None and line.key not in self._by_key:
            self._by_key[line.key] = line

    def exists(self, key: str) -> bool:
        return key in self._by_key

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        line = self._by_key.get(key)
        return line.value if line is not None else default

    def set(self, key: str, value: str) -> None:
        """Update the value of ``key`` in place, or append a new line."""
        line = self._by_key.get(key)
        if line is not None:
            line.value = value
        else:
            self._append(IniLine(key=key, value=value))

    def delete(self, key: str) -> bool:
        if key not in self._by_key:
            return False
        self._lines = [line for line in self._lines if line.key != key]
        del self._by_key[key]
        return True

    def keys(self) -> List[str]:
        return list(self._by_key)

    def to_map(self) -> Dict[str, str]:
        return {key: line.value for key, line in self._by_key.items()}

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"IniSection(name={self._name!r}, keys={len(self._by_key)})"


class IniFile:
    """
    In-memory section file.

    Lines found before the first header belong to the anonymous section,
    whose name is the empty string.
    """

    def __init__(self):
        self._sections: List[IniSection] = []

    # =========================================================================
    # READING
    # =========================================================================

    def load(self, path: PathLike) -> None:
        """
        Load a section file from disk, replacing the current contents.

        Raises:
            ResourceNotFoundError: The file does not exist
            FileOperationError: The file could not be read
            IniParseError: The file is not valid UTF-8 or has a broken header
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise ResourceNotFoundError(f"Section file not found: {path}", file_path=str(path)) from e
        except OSError as e:
            raise FileOperationError(f"Could not read section file: {e}", file_path=str(path), operation='read') from e

        self.load_text(decode_text(data, str(path)))
        logger.debug(f"Loaded {len(self._sections)} sections from {path}")

    def load_from_vfs(self, vfs, path: PathLike) -> None:
        """Same as load(), but ``path`` is resolved through a VFS."""
        self.load_text(decode_text(vfs.read_bytes(path), str(path)))
        logger.debug(f"Loaded {len(self._sections)} sections from VFS path {path}")

    def load_text(self, text: str) -> None:
        """Parse section file text, replacing the current contents."""
        sections: List[IniSection] = []
        current: Optional[IniSection] = None

        for line_number, line in enumerate(text.splitlines(), start=1):
            header = IniPatterns.SECTION_HEADER.match(line)
            if header:
                current = IniSection(header.group(1).strip())
                sections.append(current)
                continue

            if IniPatterns.BROKEN_SECTION_HEADER.match(line):
                raise IniParseError("Unterminated section header", line_number=line_number, line_content=line)

            if current is None:
                current = IniSection("")
                sections.append(current)

            current._append(_parse_line(line))

        self._sections = sections

    # =========================================================================
    # SECTIONS
    # =========================================================================

    def sections(self) -> Tuple[IniSection, ...]:
        return tuple(self._sections)

    def get_section(self, name: str) -> Optional[IniSection]:
        for section in self._sections:
            if section.name == name:
                return section
        return None

    def get_or_create_section(self, name: str) -> IniSection:
        section = self.get_section(name)
        if section is None:
            section = IniSection(name)
            self._sections.append(section)
        return section

    # =========================================================================
    # WRITING
    # =========================================================================

    def to_text(self) -> str:
        out: List[str] = []
        for section in self._sections:
            if section.name:
                if out and out[-1].strip():
                    out.append("")
                out.append(f"[{section.name}]")
            out.extend(line.render() for line in section.lines)
        return "\n".join(out) + "\n" if out else ""

    def save(self, path: PathLike) -> None:
        """
        Write the section file to disk, creating parent directories.

        Raises:
            SaveError: The file could not be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_text(), encoding=config.LANG_FILE_ENCODING, newline="\n")
        except OSError as e:
            raise SaveError(f"Could not write section file: {e}", file_path=str(path)) from e
        logger.debug(f"Saved {len(self._sections)} sections to {path}")

    def __repr__(self) -> str:
        return f"IniFile(sections={[s.name for s in self._sections]})"


def decode_text(data: bytes, source: str = "") -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise IniParseError(f"{source or 'Section file'} is not valid UTF-8: {e}") from e


# =============================================================================
# QUOTING
# =============================================================================

def quote(text: str) -> str:
    """Wrap text in double quotes, escaping backslashes and quotes."""
    return '"' + text.replace('\\', '\\\\').replace('"', '\\"') + '"'


def unquote(text: str) -> str:
    """Inverse of quote() for the text between the quotes."""
    return IniPatterns.ESCAPED_CHAR.sub(lambda m: m.group(1), text)


def key_needs_quotes(key: str) -> bool:
    """True if a bare key would not read back as the same key."""
    return (not key
            or key != key.strip()
            or key.startswith(IniPatterns.KEY_RESERVED_START)
            or '=' in key)


def value_needs_quotes(value: str) -> bool:
    """True if a bare value would lose edge whitespace or its quotes on read."""
    return value != value.strip() or value.startswith('"')


def _read_value(value: str) -> str:
    match = IniPatterns.QUOTED.match(value)
    return unquote(match.group(1)) if match else value


def _parse_line(line: str) -> IniLine:
    if IniPatterns.is_ignorable(line):
        return IniLine(raw=line)

    match = IniPatterns.QUOTED_KEY_VALUE.match(line)
    if match:
        return IniLine(key=unquote(match.group(1)), value=_read_value(match.group(2)), raw=line)

    match = IniPatterns.KEY_VALUE.match(line)
    if not match or not match.group(1).strip():
        return IniLine(raw=line)
    return IniLine(key=match.group(1).strip(), value=_read_value(match.group(2)), raw=line)
