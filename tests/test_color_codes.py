"""Tests for PieceColor byte codes."""

import pytest

from blockfall.game.color_codes import (
    PIECE_COLORS,
    code_to_color,
    color_to_code,
    is_piece_color,
)
from blockfall.game.pieces import PIECES, PieceColor


class TestPieceColor:
    def test_declared_order(self):
        assert [c.name for c in PieceColor] == [
            "WALL", "EMPTY", "RED", "GREEN", "BLUE",
            "YELLOW", "CYAN", "MAGENTA", "ORANGE", "TRACER",
        ]

    def test_codes(self):
        assert color_to_code(PieceColor.WALL) == 0
        assert color_to_code(PieceColor.EMPTY) == 1
        assert color_to_code(PieceColor.MAGENTA) == 7
        assert color_to_code(PieceColor.TRACER) == 9


class TestCodeToColor:
    @pytest.mark.parametrize("color", list(PieceColor), ids=lambda c: c.name)
    def test_known_codes(self, color):
        assert code_to_color(color_to_code(color)) is color

    def test_unknown_code(self):
        assert code_to_color(10) is None
        assert code_to_color(255) is None


class TestPieceColors:
    def test_seven_piece_colors(self):
        assert len(PIECE_COLORS) == 7

    def test_markers_are_not_piece_colors(self):
        assert not is_piece_color(PieceColor.WALL)
        assert not is_piece_color(PieceColor.EMPTY)
        assert not is_piece_color(PieceColor.TRACER)

    def test_catalog_uses_each_piece_color_once(self):
        colors = [p.color for p in PIECES]
        assert set(colors) == PIECE_COLORS
        assert all(is_piece_color(c) for c in colors)
