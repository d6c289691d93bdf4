"""SAUCE record data structure and byte layout."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from ansi_textmode.core.constants import DEFAULT_FONT_NAME


SAUCE_ID = b"SAUCE"
SAUCE_VERSION = b"00"
COMNT_ID = b"COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64
MAX_COMMENTS = 255
EOF_MARKER = 0x1A


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


class FileType(IntEnum):
    """SAUCE file types for CHARACTER data type."""
    NONE = 0
    ANSI = 1
    ANSIMATION = 2
    RIP = 3
    PCBOARD = 4
    AVATAR = 5
    HTML = 6
    SOURCE = 7
    TUNDRA = 8


class FieldKind(Enum):
    TEXT = "text"    # space padded, trailing padding trimmed
    ZSTRING = "zstring"  # NUL padded
    UINT = "uint"    # little-endian unsigned


@dataclass(frozen=True)
class SauceField:
    """One fixed-offset field of the 128-byte record."""
    offset: int
    size: int
    kind: FieldKind

    @property
    def end(self) -> int:
        return self.offset + self.size


# Layout of the 128-byte record, shared by the reader and the writer.
FIELDS: dict[str, SauceField] = {
    "id": SauceField(0, 5, FieldKind.TEXT),
    "version": SauceField(5, 2, FieldKind.TEXT),
    "title": SauceField(7, 35, FieldKind.TEXT),
    "author": SauceField(42, 20, FieldKind.TEXT),
    "group": SauceField(62, 20, FieldKind.TEXT),
    "date": SauceField(82, 8, FieldKind.TEXT),
    "filesize": SauceField(90, 4, FieldKind.UINT),
    "data_type": SauceField(94, 1, FieldKind.UINT),
    "file_type": SauceField(95, 1, FieldKind.UINT),
    "tinfo1": SauceField(96, 2, FieldKind.UINT),
    "tinfo2": SauceField(98, 2, FieldKind.UINT),
    "comments": SauceField(104, 1, FieldKind.UINT),
    "flags": SauceField(105, 1, FieldKind.UINT),
    "font_name": SauceField(106, 22, FieldKind.ZSTRING),
}

# TFlags bits
ICE_COLORS_FLAG = 0x01
LETTER_SPACING_SHIFT = 1
LETTER_SPACING_MASK = 0x03
LETTER_SPACING_8PX = 1
LETTER_SPACING_9PX = 2


def comment_block_size(count: int) -> int:
    """Size of a ``COMNT`` block holding ``count`` lines."""
    return len(COMNT_ID) + count * COMMENT_LINE_SIZE


@dataclass
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    SAUCE is a metadata format used by the BBS/ANSI art scene to embed
    information about artwork in files. See: https://www.acid.org/info/sauce/sauce.htm

    ``present`` is False for the stand-in record returned when a file has
    no SAUCE trailer; ``filesize`` then covers the whole input.
    """
    columns: int = 0
    rows: int = 0
    title: str = ""
    author: str = ""
    group: str = ""
    date: str = ""
    filesize: int = 0
    data_type: DataType = DataType.NONE
    file_type: int = 0
    ice_colors: bool = False
    use_9px_font: bool = False
    font_name: str = DEFAULT_FONT_NAME
    comments: list[str] = field(default_factory=list)
    present: bool = True

    @classmethod
    def absent(cls, filesize: int) -> "SauceRecord":
        """Record standing in for a file without a SAUCE trailer."""
        return cls(filesize=filesize, present=False)

    def __bool__(self) -> bool:
        return self.present

    @property
    def trailer_size(self) -> int:
        """Bytes taken by the record and its comment block."""
        if not self.present:
            return 0
        size = SAUCE_RECORD_SIZE
        if self.comments:
            size += comment_block_size(len(self.comments))
        return size

    def __str__(self) -> str:
        """Human-readable representation."""
        if not self.present:
            return "(No SAUCE metadata)"
        parts = []
        if self.title:
            parts.append(f"Title: {self.title}")
        if self.author:
            parts.append(f"Author: {self.author}")
        if self.group:
            parts.append(f"Group: {self.group}")
        if self.date:
            parts.append(f"Date: {self.date}")
        parts.append(f"Size: {self.columns}x{self.rows}")
        parts.append(f"Font: {self.font_name}")
        return "\n".join(parts)
