"""Tests for SAUCE record reading and writing."""

from pathlib import Path

import pytest

from ansi_textmode.core.document import Document, current_date
from ansi_textmode.errors import FormatError
from ansi_textmode.sauce import (
    DataType,
    FileType,
    SauceRecord,
    add_sauce_bytes,
    add_sauce_for_ans,
    add_sauce_for_bin,
    add_sauce_for_xbin,
    parse_sauce,
    parse_sauce_file,
)
from ansi_textmode.sauce.record import FIELDS, SAUCE_RECORD_SIZE


def _record(**fields) -> bytearray:
    """Hand-built 128-byte record with the given raw field values."""
    record = bytearray(SAUCE_RECORD_SIZE)
    record[0:7] = b"SAUCE00"
    for name, value in fields.items():
        spec = FIELDS[name]
        if isinstance(value, int):
            value = value.to_bytes(spec.size, "little")
        record[spec.offset:spec.offset + len(value)] = value
    return record


class TestParseWithoutRecord:

    def test_short_input(self) -> None:
        sauce = parse_sauce(b"hello")
        assert sauce.present is False
        assert not sauce
        assert sauce.filesize == 5
        assert sauce.columns == 0
        assert sauce.rows == 0
        assert sauce.title == ""
        assert sauce.comments == []
        assert sauce.font_name == "IBM VGA"

    def test_empty_input(self) -> None:
        assert parse_sauce(b"").filesize == 0

    def test_no_signature(self) -> None:
        data = b"x" * 300
        sauce = parse_sauce(data)
        assert sauce.present is False
        assert sauce.filesize == 300

    def test_wrong_version(self) -> None:
        record = _record()
        record[5:7] = b"01"
        assert parse_sauce(bytes(record)).present is False

    def test_absent_differs_from_empty_record(self) -> None:
        empty = parse_sauce(bytes(_record(filesize=4)))
        assert empty.present is True
        assert empty
        assert SauceRecord.absent(4) != empty


class TestParse:

    def test_fields(self) -> None:
        record = _record(
            title=b"Title".ljust(35),
            author=b"Author".ljust(20),
            group=b"Group\x00\x00",
            date=b"19970401",
            filesize=1234,
            data_type=DataType.CHARACTER,
            file_type=FileType.ANSI,
            tinfo1=80,
            tinfo2=50,
            flags=0x01 | (2 << 1),
            font_name=b"IBM VGA50\x00\x00",
        )
        sauce = parse_sauce(b"body" + bytes(record))
        assert sauce.title == "Title"
        assert sauce.author == "Author"
        assert sauce.group == "Group"
        assert sauce.date == "19970401"
        assert sauce.filesize == 1234
        assert sauce.data_type == DataType.CHARACTER
        assert sauce.file_type == FileType.ANSI
        assert (sauce.columns, sauce.rows) == (80, 50)
        assert sauce.ice_colors is True
        assert sauce.use_9px_font is True
        assert sauce.font_name == "IBM VGA50"

    def test_8px_letter_spacing(self) -> None:
        sauce = parse_sauce(bytes(_record(filesize=1, flags=1 << 1)))
        assert sauce.use_9px_font is False
        assert sauce.ice_colors is False

    def test_latin1_text(self) -> None:
        sauce = parse_sauce(bytes(_record(filesize=1, author=b"J\xf6rg")))
        assert sauce.author == "Jörg"

    def test_blank_font_name_defaults(self) -> None:
        sauce = parse_sauce(bytes(_record(filesize=1)))
        assert sauce.font_name == "IBM VGA"

    def test_binary_text_dimensions(self) -> None:
        record = _record(filesize=160 * 25 * 2, data_type=DataType.BINARYTEXT, file_type=80)
        sauce = parse_sauce(bytes(record))
        assert sauce.columns == 160
        assert sauce.rows == 25

    def test_binary_text_zero_width(self) -> None:
        record = _record(filesize=100, data_type=DataType.BINARYTEXT, file_type=0)
        sauce = parse_sauce(bytes(record))
        assert (sauce.columns, sauce.rows) == (0, 0)

    def test_zero_filesize_without_comments(self) -> None:
        sauce = parse_sauce(b"body" + bytes(_record()))
        assert sauce.filesize == 128

    def test_zero_filesize_with_comments(self) -> None:
        block = b"COMNT" + b"note".ljust(64)
        sauce = parse_sauce(block + bytes(_record(comments=1)))
        assert sauce.filesize == 128 + 5 + 64
        assert sauce.comments == ["note"]

    def test_comments(self) -> None:
        block = b"COMNT" + b"first".ljust(64) + b"second line".ljust(64, b"\x00")
        sauce = parse_sauce(b"body" + block + bytes(_record(filesize=4, comments=2)))
        assert sauce.comments == ["first", "second line"]

    def test_missing_comment_block(self) -> None:
        data = b"x" * 200 + bytes(_record(filesize=200, comments=1))
        with pytest.raises(FormatError):
            parse_sauce(data)

    def test_comment_block_past_start_of_file(self) -> None:
        with pytest.raises(FormatError):
            parse_sauce(b"COMNT" + bytes(_record(comments=3)))

    def test_format_error_is_value_error(self) -> None:
        assert issubclass(FormatError, ValueError)

    def test_parse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "art.ans"
        path.write_bytes(add_sauce_for_ans(Document(columns=80, rows=50, group="grp"), b"body"))
        sauce = parse_sauce_file(path)
        assert sauce.group == "grp"
        assert (sauce.columns, sauce.rows) == (80, 50)
        assert sauce.filesize == 4

    def test_parse_file_without_record(self, tmp_path: Path) -> None:
        path = tmp_path / "plain.txt"
        path.write_bytes(b"plain")
        assert not parse_sauce_file(str(path))


class TestWrite:

    def test_layout(self) -> None:
        doc = Document(columns=80, rows=25, title="T", author="A", group="G")
        body = b"\x1b[0mhello"
        out = add_sauce_for_ans(doc, body)
        assert out[:len(body)] == body
        assert out[len(body)] == 0x1A
        record = out[-128:]
        assert len(out) == len(body) + 1 + 128
        assert record[0:7] == b"SAUCE00"
        assert record[7:42] == b"T".ljust(35)
        assert record[42:62] == b"A".ljust(20)
        assert record[62:82] == b"G".ljust(20)
        assert record[82:90] == current_date().encode()
        assert int.from_bytes(record[90:94], "little") == len(body)
        assert record[94] == DataType.CHARACTER
        assert record[95] == FileType.ANSI
        assert int.from_bytes(record[96:98], "little") == 80
        assert int.from_bytes(record[98:100], "little") == 25
        assert record[104] == 0
        assert record[106:128] == b"IBM VGA".ljust(22, b"\x00")

    def test_writes_current_date_not_document_date(self) -> None:
        doc = Document(columns=1, rows=1, date="19900101")
        sauce = parse_sauce(add_sauce_for_ans(doc, b"x"))
        assert sauce.date == current_date()

    def test_long_text_truncated(self) -> None:
        doc = Document(columns=1, rows=1, title="x" * 50, font_name="f" * 30)
        out = add_sauce_for_ans(doc, b"")
        assert len(out) == 1 + 128
        sauce = parse_sauce(out)
        assert sauce.title == "x" * 35
        assert sauce.font_name == "f" * 22

    def test_round_trip_with_comment(self) -> None:
        doc = Document(columns=90, rows=30, comments=["hello"])
        sauce = parse_sauce(add_sauce_for_ans(doc, b"body bytes"))
        assert sauce.columns == 90
        assert sauce.rows == 30
        assert sauce.comments == ["hello"]
        assert sauce.filesize == len(b"body bytes")

    def test_comment_block_layout(self) -> None:
        doc = Document(columns=1, rows=1, comments=["a", "b"])
        out = add_sauce_for_ans(doc, b"")
        block = out[1:1 + 5 + 2 * 64]
        assert block[:5] == b"COMNT"
        assert block[5:69] == b"a".ljust(64)
        assert out[-128:][104] == 2

    def test_flags(self) -> None:
        doc = Document(columns=1, rows=1, ice_colors=True, use_9px_font=True)
        out = add_sauce_for_ans(doc, b"")
        assert out[-128:][105] == 0b101
        sauce = parse_sauce(out)
        assert sauce.ice_colors is True
        assert sauce.use_9px_font is True

    def test_8px_flags(self) -> None:
        out = add_sauce_for_ans(Document(columns=1, rows=1), b"")
        assert out[-128:][105] == 0b010

    def test_binary_text(self) -> None:
        doc = Document(columns=160, rows=2)
        body = bytes(160 * 2 * 2)
        out = add_sauce_for_bin(doc, body)
        record = out[-128:]
        assert record[94] == DataType.BINARYTEXT
        assert record[95] == 80
        assert record[96:100] == bytes(4)
        sauce = parse_sauce(out)
        assert (sauce.columns, sauce.rows) == (160, 2)

    def test_xbin_skips_flags_and_font(self) -> None:
        doc = Document(columns=80, rows=25, ice_colors=True)
        record = add_sauce_for_xbin(doc, b"XBIN")[-128:]
        assert record[94] == DataType.XBIN
        assert record[105] == 0
        assert record[106:128] == bytes(22)
        assert int.from_bytes(record[96:98], "little") == 80

    def test_generic_entry_point(self) -> None:
        doc = Document(columns=40, rows=10)
        out = add_sauce_bytes(doc, DataType.CHARACTER, FileType.NONE, b"text")
        sauce = parse_sauce(out)
        assert sauce.file_type == 0
        assert (sauce.columns, sauce.rows) == (40, 10)
