"""Glyph substitutions that keep CP437 art looking right after a transform.

Each table maps a glyph code to the glyph that looks like its mirror image
(or quarter turn). Codes missing from a table are drawn the same way after
the transform and are returned unchanged.
"""

from ansi_textmode.core.constants import LEFT_HALF, LOWER_HALF, RIGHT_HALF, UPPER_HALF


def _mirror_pairs(*pairs: tuple[int, int]) -> dict[int, int]:
    table: dict[int, int] = {}
    for a, b in pairs:
        table[a] = b
        table[b] = a
    return table


# Left/right mirror images
FLIP_X_CODES: dict[int, int] = _mirror_pairs(
    (40, 41),    # ( )
    (47, 92),    # / \
    (60, 62),    # < >
    (91, 93),    # [ ]
    (123, 125),  # { }
    (169, 170),  # ⌐ ¬
    (174, 175),  # « »
    (180, 195),  # ┤ ├
    (181, 198),  # ╡ ╞
    (182, 199),  # ╢ ╟
    (183, 214),  # ╖ ╓
    (185, 204),  # ╣ ╠
    (187, 201),  # ╗ ╔
    (188, 200),  # ╝ ╚
    (189, 211),  # ╜ ╙
    (190, 212),  # ╛ ╘
    (191, 218),  # ┐ ┌
    (192, 217),  # └ ┘
    (LEFT_HALF, RIGHT_HALF),
    (242, 243),  # ≥ ≤
)

# Top/bottom mirror images
FLIP_Y_CODES: dict[int, int] = _mirror_pairs(
    (183, 189),  # ╖ ╜
    (184, 190),  # ╕ ╛
    (187, 188),  # ╗ ╝
    (191, 217),  # ┐ ┘
    (192, 218),  # └ ┌
    (193, 194),  # ┴ ┬
    (200, 201),  # ╚ ╔
    (202, 203),  # ╩ ╦
    (207, 209),  # ╧ ╤
    (208, 210),  # ╨ ╥
    (211, 214),  # ╙ ╓
    (212, 213),  # ╘ ╒
    (LOWER_HALF, UPPER_HALF),
)

# Clockwise quarter turn. Only the half blocks are covered; line drawing
# glyphs keep their code.
ROTATE_CODES: dict[int, int] = {
    LOWER_HALF: LEFT_HALF,
    LEFT_HALF: UPPER_HALF,
    UPPER_HALF: RIGHT_HALF,
    RIGHT_HALF: LOWER_HALF,
}


def flip_code_x(code: int) -> int:
    return FLIP_X_CODES.get(code, code)


def flip_code_y(code: int) -> int:
    return FLIP_Y_CODES.get(code, code)


def rotate_code(code: int) -> int:
    return ROTATE_CODES.get(code, code)
