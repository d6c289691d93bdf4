"""Tests for the CP437 <-> Unicode table."""

import pytest

from ansi_textmode.codec.cp437 import (
    cp437_to_unicode,
    legacy_to_unicode,
    unicode_to_cp437,
    unicode_to_legacy,
)

NBSP = "\u00A0"


class TestLegacyToUnicode:

    def test_box_drawing(self) -> None:
        assert legacy_to_unicode(201) == "╔"
        assert legacy_to_unicode(219) == "█"
        assert legacy_to_unicode(176) == "░"

    def test_control_codes_are_symbols(self) -> None:
        assert legacy_to_unicode(1) == "☺"
        assert legacy_to_unicode(31) == "▼"
        assert legacy_to_unicode(127) == "⌂"

    def test_ascii_unchanged(self) -> None:
        for code in range(32, 127):
            assert legacy_to_unicode(code) == chr(code)

    def test_code_points(self) -> None:
        assert legacy_to_unicode(0xE6) == "\u00B5"
        assert legacy_to_unicode(0x9E) == "\u20A7"
        assert legacy_to_unicode(0xF9) == "\u2219"
        assert legacy_to_unicode(0xFA) == "\u00B7"

    def test_zero_and_255_are_nbsp(self) -> None:
        assert legacy_to_unicode(0) == NBSP
        assert legacy_to_unicode(255) == NBSP
        assert legacy_to_unicode(0) == legacy_to_unicode(255)


class TestUnicodeToLegacy:

    @pytest.mark.parametrize("code", range(1, 256))
    def test_round_trip(self, code: int) -> None:
        assert unicode_to_legacy(legacy_to_unicode(code)) == code

    def test_nbsp_maps_to_255(self) -> None:
        assert unicode_to_legacy(NBSP) == 255
        assert unicode_to_legacy(0xA0) == 255

    def test_accepts_code_points(self) -> None:
        assert unicode_to_legacy(0x2554) == 201
        assert unicode_to_legacy(ord("A")) == 65

    def test_unknown_ascii_passes_through(self) -> None:
        assert unicode_to_legacy("\x01") == 1
        assert unicode_to_legacy("\x7f") == 127
        assert unicode_to_legacy(0) == 0

    def test_unknown_non_ascii_is_zero(self) -> None:
        assert unicode_to_legacy("€") == 0
        assert unicode_to_legacy(0x1F600) == 0
        assert unicode_to_legacy("é") == 130


class TestStrings:

    def test_decode(self) -> None:
        assert cp437_to_unicode(b"\xc9\xcd\xbb") == "╔═╗"

    def test_encode(self) -> None:
        assert unicode_to_cp437("╚═╝ ok") == b"\xc8\xcd\xbc ok"

    def test_bytes_round_trip(self) -> None:
        data = bytes(range(1, 256))
        assert unicode_to_cp437(cp437_to_unicode(data)) == data
