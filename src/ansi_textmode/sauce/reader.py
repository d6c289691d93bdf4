"""SAUCE record parsing."""

import logging
from pathlib import Path

from ansi_textmode.core.constants import DEFAULT_FONT_NAME
from ansi_textmode.errors import FormatError, TruncatedInputError
from ansi_textmode.sauce.record import (
    COMMENT_LINE_SIZE,
    COMNT_ID,
    FIELDS,
    ICE_COLORS_FLAG,
    LETTER_SPACING_9PX,
    LETTER_SPACING_MASK,
    LETTER_SPACING_SHIFT,
    SAUCE_ID,
    SAUCE_RECORD_SIZE,
    SAUCE_VERSION,
    DataType,
    FieldKind,
    SauceRecord,
    comment_block_size,
)

logger = logging.getLogger(__name__)


def _trim(raw: bytes) -> str:
    return raw.rstrip(b"\x00 ").decode("latin-1")


def raw_field(record: bytes, name: str) -> bytes:
    spec = FIELDS[name]
    return record[spec.offset:spec.end]


def read_field(record: bytes, name: str) -> str | int:
    """Decode one named field from a 128-byte record."""
    kind = FIELDS[name].kind
    raw = raw_field(record, name)
    if kind is FieldKind.UINT:
        return int.from_bytes(raw, "little")
    if kind is FieldKind.ZSTRING:
        return raw.replace(b"\x00", b"").decode("latin-1").strip()
    return _trim(raw)


def _data_type(value: int) -> DataType:
    try:
        return DataType(value)
    except ValueError:
        return DataType.NONE


def _locate_record(data: bytes) -> bytes:
    if len(data) < SAUCE_RECORD_SIZE:
        raise TruncatedInputError(
            f"{len(data)} bytes is too short for a SAUCE record"
        )
    return data[-SAUCE_RECORD_SIZE:]


def _read_comments(data: bytes, count: int) -> list[str]:
    block_size = comment_block_size(count)
    start = len(data) - SAUCE_RECORD_SIZE - block_size
    if start < 0:
        raise FormatError(
            f"SAUCE record announces {count} comment lines but the file "
            f"is too short to hold them"
        )
    block = data[start:start + block_size]
    if block[:len(COMNT_ID)] != COMNT_ID:
        raise FormatError("Error parsing SAUCE record: missing COMNT block")
    lines = []
    for i in range(count):
        offset = len(COMNT_ID) + i * COMMENT_LINE_SIZE
        lines.append(_trim(block[offset:offset + COMMENT_LINE_SIZE]))
    return lines


def parse_sauce(data: bytes) -> SauceRecord:
    """
    Parse the SAUCE record at the end of a file's bytes.

    Input without a trailer (too short, or no ``SAUCE00`` signature)
    yields ``SauceRecord.absent(len(data))``.

    Raises:
        FormatError: if the record announces comments but the ``COMNT``
            block in front of it is missing.
    """
    try:
        record = _locate_record(data)
    except TruncatedInputError as e:
        logger.debug("No SAUCE record: %s", e)
        return SauceRecord.absent(len(data))

    if raw_field(record, "id") != SAUCE_ID or \
            raw_field(record, "version") != SAUCE_VERSION:
        logger.debug("No SAUCE signature in last %d bytes", SAUCE_RECORD_SIZE)
        return SauceRecord.absent(len(data))

    filesize = read_field(record, "filesize")
    data_type = read_field(record, "data_type")
    if data_type == DataType.BINARYTEXT:
        columns = read_field(record, "file_type") * 2
        rows = filesize // columns // 2 if columns else 0
    else:
        columns = read_field(record, "tinfo1")
        rows = read_field(record, "tinfo2")

    count = read_field(record, "comments")
    comments = _read_comments(data, count) if count else []

    flags = read_field(record, "flags")
    letter_spacing = (flags >> LETTER_SPACING_SHIFT) & LETTER_SPACING_MASK
    font_name = read_field(record, "font_name") or DEFAULT_FONT_NAME

    if filesize == 0:
        filesize = SAUCE_RECORD_SIZE
        if count:
            filesize += comment_block_size(count)

    sauce = SauceRecord(
        columns=columns,
        rows=rows,
        title=read_field(record, "title"),
        author=read_field(record, "author"),
        group=read_field(record, "group"),
        date=read_field(record, "date"),
        filesize=filesize,
        data_type=_data_type(data_type),
        file_type=read_field(record, "file_type"),
        ice_colors=bool(flags & ICE_COLORS_FLAG),
        use_9px_font=letter_spacing == LETTER_SPACING_9PX,
        font_name=font_name,
        comments=comments,
    )
    logger.debug(
        "Parsed SAUCE record: %dx%d, %d comment lines, font %r",
        columns, rows, count, font_name,
    )
    return sauce


def parse_sauce_file(path: str | Path) -> SauceRecord:
    """Parse the SAUCE record of a file on disk."""
    with open(path, "rb") as f:
        return parse_sauce(f.read())
