"""Encoding/decoding for text-mode documents."""

from ansi_textmode.codec.cp437 import (
    cp437_to_unicode,
    legacy_to_unicode,
    unicode_to_cp437,
    unicode_to_legacy,
)
from ansi_textmode.codec.binary import bytes_to_cells, cells_to_bytes
from ansi_textmode.codec.compression import (
    CompressedData,
    CompressedDocument,
    compress,
    decompress,
    load_document,
)

__all__ = [
    "cp437_to_unicode",
    "unicode_to_cp437",
    "legacy_to_unicode",
    "unicode_to_legacy",
    "bytes_to_cells",
    "cells_to_bytes",
    "CompressedData",
    "CompressedDocument",
    "compress",
    "decompress",
    "load_document",
]
