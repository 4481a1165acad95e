"""Tetromino definitions and rotation tables.

Each piece stores four hand-authored views, one per orientation, as
offsets from a pivot cell. Views are looked up, never computed by rotating
coordinates: the I piece in particular uses the extended offsets
(EE, SS, SBE, ESE) so the bar stays centred without a fractional pivot.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import IntEnum

from .offsets import Offset, xy

logger = logging.getLogger(__name__)


class Orientation(IntEnum):
    """Rotation state. Values index the clockwise cycle Up -> Right -> Down -> Left."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class PieceColor(IntEnum):
    # Values are the one-byte codes used for board cells.
    WALL = 0
    EMPTY = 1
    RED = 2
    GREEN = 3
    BLUE = 4
    YELLOW = 5
    CYAN = 6
    MAGENTA = 7
    ORANGE = 8
    TRACER = 9


class PieceType(IntEnum):
    O = 0
    T = 1
    I = 2
    L = 3
    J = 4
    S = 5
    Z = 6


PIECE_NAMES = {pt: pt.name for pt in PieceType}

PieceView = tuple[Offset, Offset, Offset, Offset]


@dataclass(frozen=True)
class PieceShape:
    """Color and the four fixed views of a tetromino."""

    color: PieceColor
    up: PieceView
    right: PieceView
    down: PieceView
    left: PieceView

    def view(self, orientation: Orientation) -> PieceView:
        if orientation == Orientation.UP:
            return self.up
        if orientation == Orientation.RIGHT:
            return self.right
        if orientation == Orientation.DOWN:
            return self.down
        return self.left


@dataclass
class Piece:
    """A falling tetromino: a catalog shape plus its current orientation.

    Only ``orientation`` changes during play.
    """

    shape: PieceShape
    orientation: Orientation = Orientation.UP

    @property
    def color(self) -> PieceColor:
        return self.shape.color

    def view(self) -> PieceView:
        """Offsets occupied in the current orientation."""
        return self.shape.view(self.orientation)

    def rotate_left(self):
        """Step back one state in the cycle (Up -> Left -> Down -> Right -> Up)."""
        previous = self.orientation
        self.orientation = Orientation((self.orientation - 1) % 4)
        logger.debug(
            "%s piece rotated left: %s -> %s",
            self.color.name, previous.name, self.orientation.name,
        )

    def rotate_right(self):
        """Step forward one state in the cycle (Up -> Right -> Down -> Left -> Up)."""
        previous = self.orientation
        self.orientation = Orientation((self.orientation + 1) % 4)
        logger.debug(
            "%s piece rotated right: %s -> %s",
            self.color.name, previous.name, self.orientation.name,
        )

    def clone(self) -> Piece:
        """Independent copy sharing no mutable state with this piece."""
        return dataclasses.replace(self)

    # ── Cell geometry ───────────────────────────────────────────────────────

    def cells(self, x: int, y: int) -> list[tuple[int, int]]:
        """Absolute (x, y) cells of the current view with the pivot at (x, y)."""
        cells = []
        for offset in self.view():
            dx, dy = xy(offset)
            cells.append((x + dx, y + dy))
        return cells

    def width(self) -> int:
        """Column span of the current view."""
        xs = [xy(o)[0] for o in self.view()]
        return max(xs) - min(xs) + 1

    def height(self) -> int:
        """Row span of the current view."""
        ys = [xy(o)[1] for o in self.view()]
        return max(ys) - min(ys) + 1

    def to_ascii(self, filled: str = "#", empty: str = ".") -> str:
        """Render the current view on the 4x4 offset grid (NW corner at -1, -1)."""
        occupied = {xy(o) for o in self.view()}
        lines = []
        for dy in range(-1, 3):
            lines.append(
                "".join(filled if (dx, dy) in occupied else empty for dx in range(-1, 3))
            )
        return "\n".join(lines)


C = Offset.CENTER
N = Offset.NORTH
NW = Offset.NORTH_WEST
W = Offset.WEST
SW = Offset.SOUTH_WEST
S = Offset.SOUTH
SE = Offset.SOUTH_EAST
E = Offset.EAST
NE = Offset.NORTH_EAST
EE = Offset.EAST_EAST
SS = Offset.SOUTH_SOUTH
SBE = Offset.SOUTH_BY_SOUTH_EAST
ESE = Offset.EAST_BY_SOUTH_EAST

# Indexed by PieceType. Views are [up, right, down, left].
PIECES: tuple[PieceShape, ...] = (
    # O
    PieceShape(
        color=PieceColor.YELLOW,
        up=(N, NE, C, E),
        right=(N, NE, C, E),
        down=(N, NE, C, E),
        left=(N, NE, C, E),
    ),
    # T
    PieceShape(
        color=PieceColor.MAGENTA,
        up=(C, W, E, N),
        right=(C, E, N, S),
        down=(C, W, E, S),
        left=(C, W, N, S),
    ),
    # I
    PieceShape(
        color=PieceColor.CYAN,
        up=(W, C, E, EE),
        right=(NE, E, SE, SBE),
        down=(SW, S, SE, ESE),
        left=(N, C, S, SS),
    ),
    # L
    PieceShape(
        color=PieceColor.ORANGE,
        up=(W, C, E, NE),
        right=(N, C, S, SE),
        down=(C, E, W, SW),
        left=(NW, N, C, S),
    ),
    # J
    PieceShape(
        color=PieceColor.BLUE,
        up=(C, E, W, NW),
        right=(NE, N, C, S),
        down=(W, C, E, SE),
        left=(N, C, S, SW),
    ),
    # S
    PieceShape(
        color=PieceColor.GREEN,
        up=(W, C, N, NE),
        right=(N, C, E, SE),
        down=(SW, S, C, E),
        left=(NW, W, C, S),
    ),
    # Z
    PieceShape(
        color=PieceColor.RED,
        up=(NW, N, C, E),
        right=(S, C, E, NE),
        down=(W, C, S, SE),
        left=(SW, W, C, N),
    ),
)


def spawn(piece: PieceType | int | str) -> Piece:
    """New piece of the given catalog shape in the Up orientation.

    Accepts a PieceType, a catalog index (0-6) or a letter ("T", "t").
    Raises KeyError for an unknown letter, ValueError for an index outside
    0-6 and TypeError for anything else (floats, bools).
    """
    if isinstance(piece, str):
        piece_type = PieceType[piece.upper()]
    elif isinstance(piece, int) and not isinstance(piece, bool):
        piece_type = PieceType(piece)
    else:
        raise TypeError(f"expected PieceType, int or str, got {type(piece).__name__}")
    logger.debug("Spawned %s piece", piece_type.name)
    return Piece(PIECES[piece_type])
