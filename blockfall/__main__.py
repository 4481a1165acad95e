"""Entry point: python -m blockfall

Prints the piece catalog: color and ASCII view of each orientation, or the
view reached after a sequence of rotations.
"""

import argparse
import logging

from .game.color_codes import color_to_code
from .game.pieces import PIECE_NAMES, Orientation, PieceType, spawn

logger = logging.getLogger(__name__)

# Default configuration
CONFIG = {
    "pieces": [PIECE_NAMES[pt] for pt in PieceType],
    "filled_glyph": "#",
    "empty_glyph": ".",
    "log_format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    "log_datefmt": "%H:%M:%S",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="blockfall", description="Inspect tetromino views and rotations."
    )
    parser.add_argument(
        "pieces",
        nargs="*",
        type=str.upper,
        metavar="PIECE",
        help="Pieces to show (O T I L J S Z). Default: all.",
    )
    parser.add_argument(
        "--rotate",
        action="append",
        choices=["left", "right"],
        default=[],
        help="Rotation to apply before printing; repeatable.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    for name in args.pieces:
        if name not in CONFIG["pieces"]:
            parser.error(f"unknown piece: {name}")
    return args


def describe(name: str, rotations: list[str]) -> str:
    """Text block for one piece."""
    piece = spawn(name)
    header = f"{name} color={piece.color.name} code={color_to_code(piece.color)}"
    blocks = [header]
    if rotations:
        for direction in rotations:
            if direction == "left":
                piece.rotate_left()
            else:
                piece.rotate_right()
        blocks.append(f"[{piece.orientation.name}]")
        blocks.append(piece.to_ascii(CONFIG["filled_glyph"], CONFIG["empty_glyph"]))
        return "\n".join(blocks)

    for orientation in Orientation:
        piece.orientation = orientation
        blocks.append(f"[{orientation.name}]")
        blocks.append(piece.to_ascii(CONFIG["filled_glyph"], CONFIG["empty_glyph"]))
    return "\n".join(blocks)


def main(argv=None):
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=CONFIG["log_format"],
        datefmt=CONFIG["log_datefmt"],
    )

    names = args.pieces or CONFIG["pieces"]
    logger.debug("Showing pieces %s with rotations %s", names, args.rotate)
    print("\n\n".join(describe(name, args.rotate) for name in names))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
