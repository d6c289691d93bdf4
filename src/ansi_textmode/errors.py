"""Exceptions raised while decoding text-mode documents."""


class TextmodeError(Exception):
    """Base class for all ansi-textmode errors."""


class FormatError(TextmodeError, ValueError):
    """A signature or block layout did not match what the format requires.

    Raised for a SAUCE record that announces comments but is not preceded
    by a valid ``COMNT`` block. The file should be rejected.
    """


class SizeMismatchError(TextmodeError, ValueError):
    """Decompressed channels disagree in length or with ``columns * rows``."""

    def __init__(self, message: str, lengths: dict[str, int] | None = None) -> None:
        super().__init__(message)
        self.lengths = lengths or {}


class TruncatedInputError(TextmodeError):
    """Input is too short to hold a SAUCE record.

    Never escapes :func:`~ansi_textmode.sauce.parse_sauce`, which treats it
    as "no metadata present".
    """
