"""SAUCE record writing."""

import logging
from typing import TYPE_CHECKING

from ansi_textmode.core.document import current_date
from ansi_textmode.sauce.record import (
    COMMENT_LINE_SIZE,
    COMNT_ID,
    EOF_MARKER,
    FIELDS,
    ICE_COLORS_FLAG,
    LETTER_SPACING_8PX,
    LETTER_SPACING_9PX,
    LETTER_SPACING_SHIFT,
    MAX_COMMENTS,
    SAUCE_ID,
    SAUCE_RECORD_SIZE,
    SAUCE_VERSION,
    DataType,
    FieldKind,
    FileType,
)

if TYPE_CHECKING:
    from ansi_textmode.core.document import Document

logger = logging.getLogger(__name__)


def _pad(text: str, size: int, fill: bytes = b" ") -> bytes:
    return text.encode("latin-1", errors="replace")[:size].ljust(size, fill)


def write_field(record: bytearray, name: str, value: str | int | bytes) -> None:
    """Encode one named field into a 128-byte record buffer."""
    spec = FIELDS[name]
    if isinstance(value, bytes):
        raw = value[:spec.size].ljust(spec.size, b" ")
    elif spec.kind is FieldKind.UINT:
        raw = int(value).to_bytes(spec.size, "little")
    elif spec.kind is FieldKind.ZSTRING:
        raw = _pad(value, spec.size, b"\x00")
    else:
        raw = _pad(value, spec.size)
    record[spec.offset:spec.end] = raw


def comments_to_bytes(comments: list[str]) -> bytes:
    """Build a ``COMNT`` block with one space-padded 64-byte line each."""
    block = bytearray(COMNT_ID)
    for comment in comments:
        block.extend(_pad(comment, COMMENT_LINE_SIZE))
    return bytes(block)


def sauce_to_bytes(
    doc: "Document",
    data_type: DataType,
    file_type: int,
    filesize: int,
    comment_count: int,
) -> bytes:
    """Serialize the 128-byte record for a document."""
    record = bytearray(SAUCE_RECORD_SIZE)
    write_field(record, "id", SAUCE_ID)
    write_field(record, "version", SAUCE_VERSION)
    write_field(record, "title", doc.title)
    write_field(record, "author", doc.author)
    write_field(record, "group", doc.group)
    write_field(record, "date", current_date())
    write_field(record, "filesize", filesize)
    write_field(record, "data_type", data_type)

    if data_type == DataType.BINARYTEXT:
        write_field(record, "file_type", (doc.columns // 2) & 0xFF)
    else:
        write_field(record, "file_type", file_type)
        write_field(record, "tinfo1", doc.columns)
        write_field(record, "tinfo2", doc.rows)

    write_field(record, "comments", comment_count)

    # XBin carries its own font and palette
    if data_type != DataType.XBIN:
        flags = ICE_COLORS_FLAG if doc.ice_colors else 0
        spacing = LETTER_SPACING_9PX if doc.use_9px_font else LETTER_SPACING_8PX
        flags |= spacing << LETTER_SPACING_SHIFT
        write_field(record, "flags", flags)
        if doc.font_name:
            write_field(record, "font_name", doc.font_name)

    return bytes(record)


def add_sauce_bytes(
    doc: "Document",
    data_type: DataType,
    file_type: int,
    body: bytes,
) -> bytes:
    """
    Append an EOF marker and a SAUCE trailer to a format body.

    The record's date is today's date, not the document's, and its
    filesize is ``len(body)``. A ``COMNT`` block precedes the record when
    the document has comments (at most 255 are kept).
    """
    comments = doc.comments
    if len(comments) > MAX_COMMENTS:
        logger.warning(
            "Dropping %d comment lines past the SAUCE limit of %d",
            len(comments) - MAX_COMMENTS, MAX_COMMENTS,
        )
        comments = comments[:MAX_COMMENTS]

    result = bytearray(body)
    result.append(EOF_MARKER)
    if comments:
        result.extend(comments_to_bytes(comments))
    result.extend(sauce_to_bytes(doc, data_type, file_type, len(body), len(comments)))
    return bytes(result)


def add_sauce_for_ans(doc: "Document", body: bytes) -> bytes:
    return add_sauce_bytes(doc, DataType.CHARACTER, FileType.ANSI, body)


def add_sauce_for_bin(doc: "Document", body: bytes) -> bytes:
    return add_sauce_bytes(doc, DataType.BINARYTEXT, FileType.NONE, body)


def add_sauce_for_xbin(doc: "Document", body: bytes) -> bytes:
    return add_sauce_bytes(doc, DataType.XBIN, FileType.NONE, body)
