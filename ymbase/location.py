"""File information, positions and regions inside source files."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "INVALID_FILE_ID",
    "MAX_LINE",
    "MAX_COLUMN",
    "FileInfo",
    "FileLineColumn",
    "FileLoc",
    "FileRegion",
]

INVALID_FILE_ID = 0xFFFF
MAX_LINE = 0x100000 - 1
MAX_COLUMN = 0x1000 - 1

_COLUMN_BITS = 12
_COLUMN_MASK = 0xFFF


@dataclass(frozen=True)
class FileInfo:
    """Identifies a file by a 16-bit number; the default id marks it invalid."""

    id: int = INVALID_FILE_ID

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"file id must be an integer, not {type(self.id).__name__}")
        if not 0 <= self.id <= INVALID_FILE_ID:
            raise ValueError(f"file id out of range: {self.id}")

    def is_valid(self) -> bool:
        """Return True when this refers to an actual file."""
        return self.id != INVALID_FILE_ID


class FileLineColumn:
    """A line number and column packed into 32 bits (20 for the line, 12 for the column)."""

    __slots__ = ("_packed",)

    def __init__(self, line: int = 0, column: int = 0) -> None:
        if not 0 <= line <= MAX_LINE:
            raise ValueError(f"line out of range: {line}")
        if not 0 <= column <= MAX_COLUMN:
            raise ValueError(f"column out of range: {column}")
        self._packed = (line << _COLUMN_BITS) | (column & _COLUMN_MASK)

    def line(self) -> int:
        """Return the line number."""
        return self._packed >> _COLUMN_BITS

    def column(self) -> int:
        """Return the column."""
        return self._packed & _COLUMN_MASK

    @property
    def packed(self) -> int:
        """The 32-bit packed representation."""
        return self._packed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileLineColumn):
            return NotImplemented
        return self._packed == other._packed

    def __hash__(self) -> int:
        return hash(self._packed)

    def __repr__(self) -> str:
        return f"FileLineColumn(line={self.line()}, column={self.column()})"


class FileLoc:
    """A position in a file: file information, line and column."""

    __slots__ = ("_file_info", "_line_column")

    def __init__(
        self,
        file_info: FileInfo | None = None,
        line: int = 0,
        column: int = 0,
    ) -> None:
        self._file_info = FileInfo() if file_info is None else file_info
        self._line_column = FileLineColumn(line, column)

    @property
    def file_info(self) -> FileInfo:
        """The file this position lies in."""
        return self._file_info

    def is_valid(self) -> bool:
        """Return True when the position refers to an actual file."""
        return self._file_info.is_valid()

    def line(self) -> int:
        """Return the line number."""
        return self._line_column.line()

    def column(self) -> int:
        """Return the column."""
        return self._line_column.column()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileLoc):
            return NotImplemented
        return (
            self._file_info == other._file_info
            and self._line_column == other._line_column
        )

    def __hash__(self) -> int:
        return hash((self._file_info, self._line_column))

    def __repr__(self) -> str:
        return (
            f"FileLoc(file_info={self._file_info!r}, "
            f"line={self.line()}, column={self.column()})"
        )


class FileRegion:
    """A region between two file positions.

    Without an end file the region lies in the start file.
    """

    __slots__ = ("_start_info", "_end_info", "_start_lc", "_end_lc")

    def __init__(
        self,
        start_file_info: FileInfo | None = None,
        start_line: int = 0,
        start_column: int = 0,
        end_file_info: FileInfo | None = None,
        end_line: int = 0,
        end_column: int = 0,
    ) -> None:
        self._start_info = FileInfo() if start_file_info is None else start_file_info
        self._end_info = self._start_info if end_file_info is None else end_file_info
        self._start_lc = FileLineColumn(start_line, start_column)
        self._end_lc = FileLineColumn(end_line, end_column)

    @classmethod
    def from_loc(cls, loc: FileLoc) -> FileRegion:
        """Return the region made of the single position ``loc``."""
        return cls.span(loc, loc)

    @classmethod
    def span(cls, start: FileLoc | FileRegion, end: FileLoc | FileRegion) -> FileRegion:
        """Return the region from the start of ``start`` to the end of ``end``."""
        if isinstance(start, FileRegion):
            start = start.start_loc()
        if isinstance(end, FileRegion):
            end = end.end_loc()
        if not isinstance(start, FileLoc) or not isinstance(end, FileLoc):
            raise TypeError("span() takes FileLoc or FileRegion arguments")
        return cls(
            start.file_info,
            start.line(),
            start.column(),
            end.file_info,
            end.line(),
            end.column(),
        )

    def is_valid(self) -> bool:
        """Return True when the region starts in an actual file."""
        return self._start_info.is_valid()

    @property
    def start_file_info(self) -> FileInfo:
        """The file the region starts in."""
        return self._start_info

    @property
    def end_file_info(self) -> FileInfo:
        """The file the region ends in."""
        return self._end_info

    def start_loc(self) -> FileLoc:
        """Return the first position of the region."""
        return FileLoc(self._start_info, self.start_line(), self.start_column())

    def end_loc(self) -> FileLoc:
        """Return the last position of the region."""
        return FileLoc(self._end_info, self.end_line(), self.end_column())

    def start_line(self) -> int:
        """Return the first line."""
        return self._start_lc.line()

    def start_column(self) -> int:
        """Return the first column."""
        return self._start_lc.column()

    def end_line(self) -> int:
        """Return the last line."""
        return self._end_lc.line()

    def end_column(self) -> int:
        """Return the last column."""
        return self._end_lc.column()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileRegion):
            return NotImplemented
        return (
            self._start_info == other._start_info
            and self._end_info == other._end_info
            and self._start_lc == other._start_lc
            and self._end_lc == other._end_lc
        )

    def __hash__(self) -> int:
        return hash((self._start_info, self._end_info, self._start_lc, self._end_lc))

    def __repr__(self) -> str:
        return f"FileRegion(start={self.start_loc()!r}, end={self.end_loc()!r})"