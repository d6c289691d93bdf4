"""Geometry transforms over a document's grid."""

from ansi_textmode.transform.geometry import flip_x, flip_y, resize, rotate
from ansi_textmode.transform.glyphs import flip_code_x, flip_code_y, rotate_code

__all__ = [
    "resize",
    "flip_x",
    "flip_y",
    "rotate",
    "flip_code_x",
    "flip_code_y",
    "rotate_code",
]
