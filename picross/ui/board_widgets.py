"""Playfield widgets: tiles, clue panels and the board view that lays them out."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from picross.core.board import Board, Cell
from picross.ui.colors import BoardColors
from picross.ui.models import (
    TILE_BACKGROUNDS,
    TileVisual,
    max_clue_count,
    tile_hover,
    tile_text,
    tile_visual,
)

TILE_SPACING = 2
CLUE_STEP = 20


class TileWidget(QLabel):
    """One grid square. Left click reveals, right click toggles the mark."""

    def __init__(
        self,
        cell_id: int,
        size: int,
        *,
        on_reveal: Callable[[int], None],
        on_mark: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._cell_id = cell_id
        self._on_reveal = on_reveal
        self._on_mark = on_mark
        self._visual: Optional[TileVisual] = None
        self._interactive = True
        self.setFixedSize(size, size)
        self.setAlignment(Qt.AlignCenter)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    @property
    def cell_id(self) -> int:
        return self._cell_id

    def set_cell(self, cell: Cell, interactive: bool) -> None:
        visual = tile_visual(cell)
        if visual is self._visual and interactive == self._interactive:
            return
        self._visual = visual
        self._interactive = interactive
        background = TILE_BACKGROUNDS[visual]
        hover = tile_hover(visual, interactive)
        self.setText(tile_text(visual))
        self.setCursor(Qt.PointingHandCursor if interactive else Qt.ArrowCursor)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {background};
                color: {BoardColors.TILE_MARK};
                border-radius: 4px;
                font-size: 25px;
                font-weight: 700;
            }}
            QLabel:hover {{ background: {hover}; }}
            """
        )

    def mousePressEvent(self, event) -> None:
        if not self._interactive:
            super().mousePressEvent(event)
            return
        if event.button() == Qt.MouseButton.LeftButton:
            self._on_reveal(self._cell_id)
        elif event.button() == Qt.MouseButton.RightButton:
            self._on_mark(self._cell_id)
        else:
            super().mousePressEvent(event)


def _clue_label(value: int, width: int, height: int) -> QLabel:
    label = QLabel(str(value))
    label.setAlignment(Qt.AlignCenter)
    label.setFixedSize(width, height)
    label.setStyleSheet(f"color: {BoardColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 600;")
    return label


class ColumnCluePanel(QWidget):
    """Clues above the grid; each column's numbers sit against the bottom edge."""

    def __init__(self, clues: List[List[int]], tile_size: int, line_length: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(TILE_SPACING)
        height = max_clue_count(line_length) * CLUE_STEP
        for column_clues in clues:
            strip = QFrame()
            strip.setFixedSize(tile_size, height)
            strip.setStyleSheet(f"background: {BoardColors.CLUE_BG}; border-radius: 4px;")
            strip_layout = QVBoxLayout(strip)
            strip_layout.setContentsMargins(0, 0, 0, 0)
            strip_layout.setSpacing(0)
            strip_layout.addStretch(1)
            for value in column_clues:
                strip_layout.addWidget(_clue_label(value, tile_size, CLUE_STEP), 0, Qt.AlignHCenter)
            layout.addWidget(strip)


class RowCluePanel(QWidget):
    """Clues left of the grid; each row's numbers sit against the right edge."""

    def __init__(self, clues: List[List[int]], tile_size: int, line_length: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(TILE_SPACING)
        width = max_clue_count(line_length) * CLUE_STEP
        for row_clues in clues:
            strip = QFrame()
            strip.setFixedSize(width, tile_size)
            strip.setStyleSheet(f"background: {BoardColors.CLUE_BG}; border-radius: 4px;")
            strip_layout = QHBoxLayout(strip)
            strip_layout.setContentsMargins(0, 0, 0, 0)
            strip_layout.setSpacing(0)
            strip_layout.addStretch(1)
            for value in row_clues:
                strip_layout.addWidget(_clue_label(value, CLUE_STEP, tile_size), 0, Qt.AlignVCenter)
            layout.addWidget(strip)


class BoardView(QWidget):
    """Grid of tiles framed by the column and row clue panels.

    The widget tree is rebuilt only when a different board is shown; otherwise
    ``refresh`` restyles the existing tiles.
    """

    def __init__(
        self,
        tile_size: int,
        *,
        on_reveal: Callable[[int], None],
        on_mark: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._tile_size = tile_size
        self._on_reveal = on_reveal
        self._on_mark = on_mark
        self._board: Optional[Board] = None
        self._tiles: List[TileWidget] = []
        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(TILE_SPACING * 2)

    def show_board(self, board: Board, interactive: bool) -> None:
        if board is not self._board:
            self._rebuild(board)
        for tile, cell in zip(self._tiles, board.cells):
            tile.set_cell(cell, interactive)

    def _rebuild(self, board: Board) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._board = board
        self._tiles = []

        grid = QWidget()
        grid_layout = QGridLayout(grid)
        grid_layout.setContentsMargins(0, 0, 0, 0)
        grid_layout.setSpacing(TILE_SPACING)
        for row in range(board.height):
            for column in range(board.width):
                tile = TileWidget(
                    board.index(row, column),
                    self._tile_size,
                    on_reveal=self._on_reveal,
                    on_mark=self._on_mark,
                )
                grid_layout.addWidget(tile, row, column)
                self._tiles.append(tile)

        columns = ColumnCluePanel(board.column_clues, self._tile_size, board.height)
        rows = RowCluePanel(board.row_clues, self._tile_size, board.width)
        self._layout.addWidget(columns, 0, 1, Qt.AlignBottom | Qt.AlignLeft)
        self._layout.addWidget(rows, 1, 0, Qt.AlignRight | Qt.AlignTop)
        self._layout.addWidget(grid, 1, 1)
