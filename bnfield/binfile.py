"""Reader for the sectioned binary container used by zkey and wtns files.

Layout: a four character file type, a little-endian u32 version, a u32
section count, then for every section a u32 section id, a u64 byte length
and the section body.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


@dataclass(frozen=True)
class _Section:
    start: int
    size: int


class BinFile:
    """A parsed container held in memory, with a read cursor."""

    def __init__(self, data, file_type: str, max_version: int) -> None:
        self._data = bytes(data)
        self.size = len(self._data)
        self._pos = 0
        self._reading: Optional[_Section] = None

        self.type = self._take(4).decode("latin-1")
        if self.type != file_type:
            raise ValueError(
                f"Invalid file type. It should be {file_type} and it is {self.type}"
            )

        self.version = self.read_u32le()
        if self.version > max_version:
            raise ValueError(
                f"Invalid version. It should be <={max_version} and it is {self.version}"
            )

        self._sections: dict[int, list[_Section]] = {}
        n_sections = self.read_u32le()
        for _ in range(n_sections):
            section_type = self.read_u32le()
            section_size = self.read_u64le()
            if self._pos + section_size > self.size:
                raise ValueError(
                    f"Section {section_type} of {section_size} bytes runs past the end of the data"
                )
            self._sections.setdefault(section_type, []).append(
                _Section(self._pos, section_size)
            )
            self._pos += section_size

        self._pos = 0

    def __repr__(self) -> str:
        return f"BinFile(type={self.type!r}, version={self.version}, size={self.size})"

    def _take(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        end = self._pos + length
        if end > self.size:
            raise ValueError(
                f"unexpected end of data: need {length} bytes at offset {self._pos}"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def _section(self, section_id: int, section_pos: int) -> _Section:
        try:
            sections = self._sections[section_id]
        except KeyError:
            raise KeyError(f"Section does not exist: {section_id}") from None
        if section_pos >= len(sections):
            raise IndexError(
                f"Section pos too big. There are {len(sections)} and it's trying "
                f"to access section: {section_pos}"
            )
        return sections[section_pos]

    def start_read_section(self, section_id: int, section_pos: int = 0) -> None:
        """Move the cursor to the start of a section and begin reading it."""
        section = self._section(section_id, section_pos)
        if self._reading is not None:
            raise RuntimeError("Already reading a section")
        self._pos = section.start
        self._reading = section

    def end_read_section(self, check: bool = True) -> None:
        """Finish reading; with ``check``, the whole section must have been consumed."""
        if self._reading is None:
            raise RuntimeError("No section is being read")
        if check and self._pos - self._reading.start != self._reading.size:
            raise ValueError("Invalid section size")
        self._reading = None

    def get_section_data(self, section_id: int, section_pos: int = 0) -> bytes:
        section = self._section(section_id, section_pos)
        return self._data[section.start:section.start + section.size]

    def get_section_size(self, section_id: int, section_pos: int = 0) -> int:
        return self._section(section_id, section_pos).size

    def read_u32le(self) -> int:
        return _U32.unpack(self._take(4))[0]

    def read_u64le(self) -> int:
        return _U64.unpack(self._take(8))[0]

    def read(self, length: int) -> bytes:
        return self._take(length)


def open_existing(
    filename: Union[str, PathLike], file_type: str, max_version: int
) -> BinFile:
    """Read ``filename`` whole and parse it as a container of ``file_type``."""
    return BinFile(Path(filename).read_bytes(), file_type, max_version)