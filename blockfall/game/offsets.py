"""Relative cell offsets around a piece's pivot.

Only the positions that some piece view actually uses are named:

    NW | N  | NE  |
    W  | C  | E   | EE
    SW | S  | SE  | ESE
       | SS | SBE |

x increases eastward (right), y increases southward (down).
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import numpy as np


class Offset(Enum):
    CENTER = "C"
    NORTH = "N"
    NORTH_WEST = "NW"
    WEST = "W"
    SOUTH_WEST = "SW"
    SOUTH = "S"
    SOUTH_EAST = "SE"
    EAST = "E"
    NORTH_EAST = "NE"
    EAST_EAST = "EE"
    SOUTH_SOUTH = "SS"
    SOUTH_BY_SOUTH_EAST = "SBE"
    EAST_BY_SOUTH_EAST = "ESE"


# (dx, dy) for every offset. Must stay in sync with the piece tables.
OFFSET_XY: dict[Offset, tuple[int, int]] = {
    Offset.CENTER: (0, 0),
    Offset.NORTH: (0, -1),
    Offset.NORTH_WEST: (-1, -1),
    Offset.WEST: (-1, 0),
    Offset.SOUTH_WEST: (-1, 1),
    Offset.SOUTH: (0, 1),
    Offset.SOUTH_EAST: (1, 1),
    Offset.EAST: (1, 0),
    Offset.NORTH_EAST: (1, -1),
    Offset.EAST_EAST: (2, 0),
    Offset.SOUTH_SOUTH: (0, 2),
    Offset.SOUTH_BY_SOUTH_EAST: (1, 2),
    Offset.EAST_BY_SOUTH_EAST: (2, 1),
}


def xy(offset: Offset) -> tuple[int, int]:
    """Get the (dx, dy) displacement of an offset from the pivot."""
    return OFFSET_XY[offset]


def offsets_array(view: Sequence[Offset]) -> np.ndarray:
    """Convert a sequence of offsets to an (n, 2) int8 array of (dx, dy) rows.

    Row order follows the input order.
    """
    arr = np.zeros((len(view), 2), dtype=np.int8)
    for i, offset in enumerate(view):
        arr[i] = OFFSET_XY[offset]
    return arr
