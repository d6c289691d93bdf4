"""Cell - atomic unit of a text-mode grid."""

from dataclasses import dataclass, replace

from ansi_textmode.core.constants import BLANK_CODE, DEFAULT_BG, DEFAULT_FG, RGB


@dataclass(slots=True)
class Cell:
    """
    A single glyph cell.

    ``code`` is a CP437 glyph code, ``fg`` and ``bg`` are palette indices.
    ``fg_rgb`` / ``bg_rgb`` are only set when the color does not come from
    one of the 16 palette slots.
    """
    code: int = BLANK_CODE
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    fg_rgb: RGB | None = None
    bg_rgb: RGB | None = None

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return replace(self)

    def with_code(self, code: int) -> "Cell":
        """Copy of this cell showing a different glyph."""
        return replace(self, code=code)

    def is_default(self) -> bool:
        """Check if this cell is the blank cell."""
        return (
            self.code == BLANK_CODE
            and self.fg == DEFAULT_FG
            and self.bg == DEFAULT_BG
            and self.fg_rgb is None
            and self.bg_rgb is None
        )

    @property
    def attribute(self) -> int:
        """Packed attribute byte, background in the high nibble."""
        return ((self.bg & 0x0F) << 4) | (self.fg & 0x0F)

    def to_dict(self) -> dict:
        data: dict = {"code": self.code, "fg": self.fg, "bg": self.bg}
        if self.fg_rgb is not None:
            data["fg_rgb"] = list(self.fg_rgb)
        if self.bg_rgb is not None:
            data["bg_rgb"] = list(self.bg_rgb)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Cell":
        fg_rgb = data.get("fg_rgb")
        bg_rgb = data.get("bg_rgb")
        return cls(
            code=data["code"],
            fg=data["fg"],
            bg=data["bg"],
            fg_rgb=tuple(fg_rgb) if fg_rgb is not None else None,
            bg_rgb=tuple(bg_rgb) if bg_rgb is not None else None,
        )
