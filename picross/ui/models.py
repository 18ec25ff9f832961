"""Presentation helpers shared by the widgets; free of Qt so they can be tested directly."""

from __future__ import annotations

from enum import Enum

from picross.core.board import Cell
from picross.core.session import Winstate
from picross.ui.colors import BoardColors, blend_hex


class TileVisual(Enum):
    HIDDEN_MARKED = "hidden_marked"
    HIDDEN = "hidden"
    REVEALED_EMPTY = "revealed_empty"
    REVEALED_FILLED = "revealed_filled"


def tile_visual(cell: Cell) -> TileVisual:
    """Pick how a tile is drawn. A revealed cell ignores its mark."""
    if cell.hidden:
        return TileVisual.HIDDEN_MARKED if cell.marked else TileVisual.HIDDEN
    return TileVisual.REVEALED_FILLED if cell.filled else TileVisual.REVEALED_EMPTY


TILE_BACKGROUNDS = {
    TileVisual.HIDDEN_MARKED: BoardColors.TILE_HIDDEN,
    TileVisual.HIDDEN: BoardColors.TILE_HIDDEN,
    TileVisual.REVEALED_EMPTY: BoardColors.TILE_REVEALED_EMPTY,
    TileVisual.REVEALED_FILLED: BoardColors.TILE_REVEALED_FILLED,
}


HOVER_TINT = 0.2


def tile_hover(visual: TileVisual, interactive: bool) -> str:
    """Background under the pointer: hidden tiles lighten while the game is on, others keep their color."""
    background = TILE_BACKGROUNDS[visual]
    if interactive and visual in (TileVisual.HIDDEN, TileVisual.HIDDEN_MARKED):
        return blend_hex(background, "#FFFFFF", HOVER_TINT)
    return background


def tile_text(visual: TileVisual) -> str:
    return "X" if visual is TileVisual.HIDDEN_MARKED else ""


def winstate_text(winstate: Winstate) -> str:
    if winstate is Winstate.WON:
        return "You won!"
    if winstate is Winstate.LOST:
        return "You lost!"
    return "Game in progress..."


def max_clue_count(line_length: int) -> int:
    """Longest possible clue for a line: alternating filled and empty cells."""
    return (line_length + 1) // 2
