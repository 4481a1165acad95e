"""Mapping between PieceColor and the one-byte codes stored in board cells."""

from .pieces import PieceColor

# Board cell byte -> PieceColor
COLOR_CODES = {color.value: color for color in PieceColor}

# The seven tetromino colors. WALL, EMPTY and TRACER are board markers.
PIECE_COLORS = frozenset({
    PieceColor.RED,
    PieceColor.GREEN,
    PieceColor.BLUE,
    PieceColor.YELLOW,
    PieceColor.CYAN,
    PieceColor.MAGENTA,
    PieceColor.ORANGE,
})


def color_to_code(color: PieceColor) -> int:
    return int(color)


def code_to_color(code: int) -> PieceColor | None:
    """Convert a board cell byte to a PieceColor, or None if unknown."""
    return COLOR_CODES.get(code)


def is_piece_color(color: PieceColor) -> bool:
    return color in PIECE_COLORS
