"""Run-length transfer encoding of a whole document.

Each cell attribute (glyph code, foreground, background) is compressed as
its own channel of ``(value, run_length)`` pairs, where ``run_length`` counts
the repeats *after* the first value::

    [32, 32, 32, 32, 65]  ->  [(32, 3), (65, 0)]

RGB overrides, when any cell has one, travel in two more channels that are
omitted otherwise.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from ansi_textmode.core.cell import Cell
from ansi_textmode.core.constants import DEFAULT_FONT_NAME, EGA_PALETTE, RGB
from ansi_textmode.core.document import Document
from ansi_textmode.errors import SizeMismatchError

logger = logging.getLogger(__name__)

Run = tuple[Any, int]


class _RunAccumulator:
    """Collects runs for one channel during a single compression pass."""

    __slots__ = ("runs", "_value", "_repeat", "_open")

    def __init__(self) -> None:
        self.runs: list[Run] = []
        self._value: Any = None
        self._repeat = 0
        self._open = False

    def push(self, value: Any) -> None:
        if self._open and value == self._value:
            self._repeat += 1
            return
        self.flush()
        self._value = value
        self._repeat = 0
        self._open = True

    def flush(self) -> None:
        if self._open:
            self.runs.append((self._value, self._repeat))
            self._open = False


def expand_runs(runs: Iterable[Run]) -> list[Any]:
    """Expand ``(value, n)`` pairs into ``n + 1`` copies each."""
    values: list[Any] = []
    for value, repeat in runs:
        values.extend([value] * (repeat + 1))
    return values


@dataclass
class CompressedData:
    """The per-channel run lists."""
    code: list[Run] = field(default_factory=list)
    fg: list[Run] = field(default_factory=list)
    bg: list[Run] = field(default_factory=list)
    fg_rgb: list[Run] | None = None
    bg_rgb: list[Run] | None = None

    def channels(self) -> dict[str, list[Run]]:
        channels = {"code": self.code, "fg": self.fg, "bg": self.bg}
        if self.fg_rgb is not None:
            channels["fg_rgb"] = self.fg_rgb
        if self.bg_rgb is not None:
            channels["bg_rgb"] = self.bg_rgb
        return channels

    def to_dict(self) -> dict:
        return {
            name: [[_plain(value), repeat] for value, repeat in runs]
            for name, runs in self.channels().items()
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompressedData":
        def runs(name: str) -> list[Run] | None:
            if data.get(name) is None:
                return None
            return [(_tuple(value), repeat) for value, repeat in data[name]]

        return cls(
            code=runs("code") or [],
            fg=runs("fg") or [],
            bg=runs("bg") or [],
            fg_rgb=runs("fg_rgb"),
            bg_rgb=runs("bg_rgb"),
        )


def _plain(value: Any) -> Any:
    return list(value) if isinstance(value, tuple) else value


def _tuple(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


@dataclass
class CompressedDocument:
    """A document whose grid has been replaced by run-length channels."""
    columns: int
    rows: int
    compressed_data: CompressedData
    title: str = ""
    author: str = ""
    group: str = ""
    date: str = ""
    palette: list[RGB] = field(default_factory=lambda: list(EGA_PALETTE))
    font_name: str = DEFAULT_FONT_NAME
    ice_colors: bool = False
    use_9px_font: bool = False
    comments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain-data form suitable for a JSON message."""
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
            "compressed_data": self.compressed_data.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompressedDocument":
        return cls(
            columns=data["columns"],
            rows=data["rows"],
            compressed_data=CompressedData.from_dict(data["compressed_data"]),
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


def compress(doc: Document) -> CompressedDocument:
    """Run-length encode the code, fg and bg channels of a document."""
    code, fg, bg = _RunAccumulator(), _RunAccumulator(), _RunAccumulator()
    fg_rgb, bg_rgb = _RunAccumulator(), _RunAccumulator()
    has_rgb = any(c.fg_rgb is not None or c.bg_rgb is not None for c in doc.data)

    for cell in doc.data:
        code.push(cell.code)
        fg.push(cell.fg)
        bg.push(cell.bg)
        if has_rgb:
            fg_rgb.push(cell.fg_rgb)
            bg_rgb.push(cell.bg_rgb)

    for channel in (code, fg, bg, fg_rgb, bg_rgb):
        channel.flush()

    compressed = CompressedData(
        code=code.runs,
        fg=fg.runs,
        bg=bg.runs,
        fg_rgb=fg_rgb.runs if has_rgb else None,
        bg_rgb=bg_rgb.runs if has_rgb else None,
    )
    logger.debug(
        "Compressed %d cells into %d/%d/%d runs",
        len(doc.data), len(code.runs), len(fg.runs), len(bg.runs),
    )
    return CompressedDocument(
        columns=doc.columns,
        rows=doc.rows,
        compressed_data=compressed,
        title=doc.title,
        author=doc.author,
        group=doc.group,
        date=doc.date,
        palette=list(doc.palette),
        font_name=doc.font_name,
        ice_colors=doc.ice_colors,
        use_9px_font=doc.use_9px_font,
        comments=list(doc.comments),
    )


def decompress(doc: Union[CompressedDocument, Document]) -> Document:
    """
    Expand a compressed document back into cells.

    A plain :class:`Document` is returned unchanged, so calling this on
    an already expanded value is harmless.

    Raises:
        SizeMismatchError: if the channels expand to different lengths or
            their length is not ``columns * rows``, or when the dimensions
            are not positive.
    """
    if isinstance(doc, Document):
        return doc

    channels = {
        name: expand_runs(runs)
        for name, runs in doc.compressed_data.channels().items()
    }
    lengths = {name: len(values) for name, values in channels.items()}
    expected = doc.columns * doc.rows
    if doc.columns < 1 or doc.rows < 1:
        raise SizeMismatchError(
            f"Compressed document has no cells: {doc.columns}x{doc.rows}",
            lengths,
        )
    if len(set(lengths.values())) != 1:
        raise SizeMismatchError(f"Channel lengths disagree: {lengths}", lengths)
    if lengths["code"] != expected:
        raise SizeMismatchError(
            f"Channels hold {lengths['code']} cells, expected "
            f"{doc.columns}x{doc.rows}={expected}",
            lengths,
        )

    fg_rgbs = channels.get("fg_rgb", [None] * expected)
    bg_rgbs = channels.get("bg_rgb", [None] * expected)
    data = [
        Cell(code=code, fg=fg, bg=bg, fg_rgb=fg_rgb, bg_rgb=bg_rgb)
        for code, fg, bg, fg_rgb, bg_rgb in zip(
            channels["code"], channels["fg"], channels["bg"], fg_rgbs, bg_rgbs
        )
    ]
    return Document(
        columns=doc.columns,
        rows=doc.rows,
        data=data,
        title=doc.title,
        author=doc.author,
        group=doc.group,
        date=doc.date,
        palette=list(doc.palette),
        font_name=doc.font_name,
        ice_colors=doc.ice_colors,
        use_9px_font=doc.use_9px_font,
        comments=list(doc.comments),
    )


def load_document(data: dict) -> Document:
    """Build a document from a message payload, compressed or not."""
    if "compressed_data" in data:
        return decompress(CompressedDocument.from_dict(data))
    return Document.from_dict(data)
