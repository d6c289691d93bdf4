"""Load text-mode art files."""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from ansi_textmode.codec.binary import bytes_to_cells
from ansi_textmode.core.constants import DEFAULT_BIN_COLUMNS
from ansi_textmode.core.document import Document
from ansi_textmode.sauce.reader import parse_sauce
from ansi_textmode.sauce.record import SauceRecord

logger = logging.getLogger(__name__)


@dataclass
class Textmode:
    """A raw art file split into its SAUCE record and format body."""
    sauce: SauceRecord
    body: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "Textmode":
        """
        Split raw file bytes.

        The body is the first ``sauce.filesize`` bytes, never reaching
        into the trailer.
        """
        sauce = parse_sauce(data)
        end = min(sauce.filesize, len(data) - sauce.trailer_size)
        return cls(sauce=sauce, body=data[:max(end, 0)])


def read_file(path: str | Path) -> Textmode:
    """Read a file from disk and split off its SAUCE record."""
    path = Path(path)
    with open(path, 'rb') as f:
        data = f.read()
    textmode = Textmode.from_bytes(data)
    logger.debug(
        "Read %s: %d bytes, body %d bytes, SAUCE %s",
        path.name, len(data), len(textmode.body),
        "present" if textmode.sauce else "absent",
    )
    return textmode


def load_bin(path: str | Path, columns: int | None = None) -> Document:
    """
    Load a BinaryText (``.bin``) file.

    The width comes from ``columns``, then the SAUCE record, then the
    160-column default. The height follows from the body size.
    """
    textmode = read_file(path)
    width = columns or textmode.sauce.columns or DEFAULT_BIN_COLUMNS
    rows = max(1, len(textmode.body) // (width * 2))
    data = bytes_to_cells(textmode.body, width, rows)
    if not textmode.sauce:
        return Document(columns=width, rows=rows, data=data)
    return Document.from_sauce(replace(textmode.sauce, columns=width, rows=rows), data)
