"""Tests for picross.ui.colors – the board palette and tile tinting."""

from __future__ import annotations

import pytest

from picross.ui.colors import BoardColors, blend_hex

HEX_TILE_COLORS = [
    BoardColors.TILE_HIDDEN,
    BoardColors.TILE_REVEALED_EMPTY,
    BoardColors.TILE_REVEALED_FILLED,
    BoardColors.TILE_MARK,
]


def _channels(color: str):
    return [int(color[i:i + 2], 16) for i in (1, 3, 5)]


# ===========================================================================
# BoardColors – tile palette
# ===========================================================================

class TestBoardColors:
    @pytest.mark.parametrize("color", HEX_TILE_COLORS)
    def test_tile_colors_are_hex(self, color: str):
        assert color.startswith("#")
        assert len(color) == 7

    def test_filled_tiles_are_black(self):
        assert BoardColors.TILE_REVEALED_FILLED == "#000000"

    def test_mark_is_white(self):
        assert BoardColors.TILE_MARK == "#ffffff"

    def test_revealed_tiles_are_distinguishable(self):
        assert BoardColors.TILE_REVEALED_EMPTY != BoardColors.TILE_REVEALED_FILLED
        assert BoardColors.TILE_HIDDEN != BoardColors.TILE_REVEALED_EMPTY

    def test_card_bg_is_rgba(self):
        assert BoardColors.CARD_BG.startswith("rgba(")


# ===========================================================================
# blend_hex – tinting palette colors
# ===========================================================================

class TestBlendHex:
    def test_endpoints(self):
        assert blend_hex(BoardColors.TILE_HIDDEN, "#FFFFFF", 0.0) == BoardColors.TILE_HIDDEN.upper()
        assert blend_hex(BoardColors.TILE_HIDDEN, "#FFFFFF", 1.0) == "#FFFFFF"

    def test_whitening_never_darkens_a_channel(self):
        tinted = blend_hex(BoardColors.TILE_HIDDEN, "#FFFFFF", 0.2)
        for before, after in zip(_channels(BoardColors.TILE_HIDDEN), _channels(tinted)):
            assert after >= before

    def test_black_tile_tint(self):
        # 255 * 0.2 = 51 -> 0x33
        assert blend_hex(BoardColors.TILE_REVEALED_FILLED, "#FFFFFF", 0.2) == "#333333"

    def test_factor_is_clamped(self):
        assert blend_hex("#000000", "#FFFFFF", -0.5) == "#000000"
        assert blend_hex("#000000", "#FFFFFF", 3.0) == "#FFFFFF"

    @pytest.mark.parametrize("color", [BoardColors.CARD_BG, BoardColors.CARD_BORDER, "#fff", ""])
    def test_non_hex_colors_pass_through(self, color: str):
        assert blend_hex(color, "#FFFFFF", 0.5) == color
