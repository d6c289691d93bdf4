"""
ansi-textmode: Python library for text-mode art documents

Binary-level contracts of BBS-era text-mode artwork.

Quick Start:
    >>> import ansi_textmode as tm
    >>> doc = tm.new_document(80, 25, title="Hello")
    >>> doc = tm.rotate(tm.flip_x(doc))
    >>> packed = tm.compress(doc)
    >>> tm.decompress(packed).data == doc.data
    True

Features:
    - SAUCE metadata reading and writing, including COMNT blocks
    - Run-length transfer compression of a whole document
    - Resize, flip and rotate with box-drawing glyph remapping
    - CP437 <-> Unicode conversion
"""

__version__ = "0.1.0"

# Core types
from ansi_textmode.core.cell import Cell
from ansi_textmode.core.document import Document, new_document

# Errors
from ansi_textmode.errors import (
    FormatError,
    SizeMismatchError,
    TextmodeError,
    TruncatedInputError,
)

# SAUCE metadata
from ansi_textmode.sauce.record import DataType, FileType, SauceRecord
from ansi_textmode.sauce.reader import parse_sauce
from ansi_textmode.sauce.writer import (
    add_sauce_bytes,
    add_sauce_for_ans,
    add_sauce_for_bin,
    add_sauce_for_xbin,
)

# Codecs
from ansi_textmode.codec.cp437 import legacy_to_unicode, unicode_to_legacy
from ansi_textmode.codec.compression import CompressedDocument, compress, decompress

# Transforms
from ansi_textmode.transform.geometry import flip_x, flip_y, resize, rotate

# I/O
from ansi_textmode.io.reader import Textmode, load_bin, read_file
from ansi_textmode.io.writer import save_bin

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Document",
    "new_document",
    # Errors
    "TextmodeError",
    "FormatError",
    "SizeMismatchError",
    "TruncatedInputError",
    # SAUCE
    "SauceRecord",
    "DataType",
    "FileType",
    "parse_sauce",
    "add_sauce_bytes",
    "add_sauce_for_ans",
    "add_sauce_for_bin",
    "add_sauce_for_xbin",
    # Codecs
    "legacy_to_unicode",
    "unicode_to_legacy",
    "CompressedDocument",
    "compress",
    "decompress",
    # Transforms
    "resize",
    "flip_x",
    "flip_y",
    "rotate",
    # I/O
    "Textmode",
    "read_file",
    "load_bin",
    "save_bin",
]
