"""CP437 (IBM PC) character set conversion."""

from ansi_textmode.core.constants import CP437_TO_UNICODE


# Build reverse mapping. ASCII is a fixed point and code 0 is left out so
# that NBSP maps back to 255 only.
UNICODE_TO_CP437: dict[str, int] = {
    char: idx
    for idx, char in enumerate(CP437_TO_UNICODE)
    if idx and not 0x20 <= idx <= 0x7E
}


def legacy_to_unicode(code: int) -> str:
    """Unicode character shown for a CP437 glyph code."""
    if 0 <= code < len(CP437_TO_UNICODE):
        return CP437_TO_UNICODE[code]
    return chr(code)


def unicode_to_legacy(char: str | int) -> int:
    """
    CP437 glyph code for a Unicode character or code point.

    Characters outside the table pass through when they are ASCII
    (0-127) and become 0 otherwise.
    """
    if isinstance(char, int):
        if not 0 <= char <= 0x10FFFF:
            return 0
        char = chr(char)
    if char in UNICODE_TO_CP437:
        return UNICODE_TO_CP437[char]
    codepoint = ord(char)
    return codepoint if codepoint <= 127 else 0


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to Unicode string."""
    return ''.join(CP437_TO_UNICODE[b] for b in data)


def unicode_to_cp437(text: str) -> bytes:
    """Convert Unicode string to CP437 bytes."""
    return bytes(unicode_to_legacy(char) for char in text)
