"""Document - a complete text-mode artwork with its metadata."""

from dataclasses import dataclass, field, replace
from datetime import date as _date
from typing import TYPE_CHECKING, Iterator

from ansi_textmode.core.cell import Cell
from ansi_textmode.core.constants import (
    DEFAULT_COLUMNS,
    DEFAULT_FONT_NAME,
    DEFAULT_ROWS,
    EGA_PALETTE,
    RGB,
)
from ansi_textmode.errors import SizeMismatchError

if TYPE_CHECKING:
    from ansi_textmode.sauce.record import SauceRecord


def current_date() -> str:
    """Today's date as a SAUCE ``YYYYMMDD`` string."""
    return _date.today().strftime("%Y%m%d")


def blank_grid(columns: int, rows: int) -> list[Cell]:
    """A fresh grid of blank cells."""
    return [Cell() for _ in range(columns * rows)]


@dataclass
class Document:
    """
    A fixed-size grid of glyph cells plus descriptive metadata.

    ``data`` is row-major: the cell at ``(x, y)`` lives at
    ``y * columns + x``. An empty grid is filled with blank cells; any
    other grid must hold exactly ``columns * rows`` cells.
    """
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    data: list[Cell] = field(default_factory=list)
    title: str = ""
    author: str = ""
    group: str = ""
    date: str = ""
    palette: list[RGB] = field(default_factory=lambda: list(EGA_PALETTE))
    font_name: str = DEFAULT_FONT_NAME
    ice_colors: bool = False
    use_9px_font: bool = False
    comments: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"Document needs positive dimensions, got {self.columns}x{self.rows}"
            )
        expected = self.columns * self.rows
        if not self.data:
            self.data = blank_grid(self.columns, self.rows)
        elif len(self.data) != expected:
            raise SizeMismatchError(
                f"Grid holds {len(self.data)} cells, expected "
                f"{self.columns}x{self.rows}={expected}",
                {"data": len(self.data)},
            )
        if not self.date:
            self.date = current_date()

    @classmethod
    def from_sauce(cls, sauce: "SauceRecord", data: list[Cell]) -> "Document":
        """Fold a parsed SAUCE record and a decoded grid into a document."""
        return cls(
            columns=sauce.columns,
            rows=sauce.rows,
            data=data,
            title=sauce.title,
            author=sauce.author,
            group=sauce.group,
            date=sauce.date,
            font_name=sauce.font_name,
            ice_colors=sauce.ice_colors,
            use_9px_font=sauce.use_9px_font,
            comments=list(sauce.comments),
        )

    def with_grid(self, columns: int, rows: int, data: list[Cell]) -> "Document":
        """Copy of this document's metadata around a different grid."""
        return replace(
            self,
            columns=columns,
            rows=rows,
            data=data,
            palette=list(self.palette),
            comments=list(self.comments),
        )

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise IndexError(f"({x}, {y}) out of bounds ({self.columns}x{self.rows})")
        return y * self.columns + x

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        return self.data[self.index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        self.data[self.index(x, y)] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        x, y = pos
        self.set(x, y, cell)

    def iter_rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for y in range(self.rows):
            yield self.data[y * self.columns:(y + 1) * self.columns]

    def to_dict(self) -> dict:
        """Plain-data form suitable for JSON."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "title": self.title,
            "author": self.author,
            "group": self.group,
            "date": self.date,
            "palette": [list(rgb) for rgb in self.palette],
            "font_name": self.font_name,
            "ice_colors": self.ice_colors,
            "use_9px_font": self.use_9px_font,
            "comments": list(self.comments),
            "data": [cell.to_dict() for cell in self.data],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        return cls(
            columns=data["columns"],
            rows=data["rows"],
            data=[Cell.from_dict(cell) for cell in data.get("data", [])],
            title=data.get("title", ""),
            author=data.get("author", ""),
            group=data.get("group", ""),
            date=data.get("date", ""),
            palette=[tuple(rgb) for rgb in data.get("palette", EGA_PALETTE)],
            font_name=data.get("font_name", DEFAULT_FONT_NAME),
            ice_colors=data.get("ice_colors", False),
            use_9px_font=data.get("use_9px_font", False),
            comments=list(data.get("comments", [])),
        )


def new_document(
    columns: int = DEFAULT_COLUMNS,
    rows: int = DEFAULT_ROWS,
    data: list[Cell] | None = None,
    **metadata,
) -> Document:
    """
    Create a document, filling a blank grid when ``data`` is missing or
    does not hold ``columns * rows`` cells.

    Keyword arguments are passed through as document metadata
    (``title``, ``author``, ``font_name``, ...).
    """
    if data is None or len(data) != columns * rows:
        data = blank_grid(columns, rows)
    return Document(columns=columns, rows=rows, data=data, **metadata)
