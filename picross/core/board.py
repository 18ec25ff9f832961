from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from picross.core.errors import OutOfRangeError

logger = logging.getLogger(__name__)


def pair_to_index(row: int, column: int, width: int) -> int:
    return row * width + column


@dataclass
class Cell:
    """One square of the grid."""

    filled: bool = False
    hidden: bool = True
    marked: bool = False


def line_clues(line: Sequence[bool]) -> List[int]:
    """Return the lengths of the runs of filled cells along *line*, in scan order."""
    clues: List[int] = []
    run = 0
    last = len(line) - 1
    for position, filled in enumerate(line):
        if filled:
            run += 1
            if position == last:
                clues.append(run)
        elif run > 0:
            clues.append(run)
            run = 0
    return clues


def compute_clues(
    cells: Sequence[Cell], width: int, height: int
) -> Tuple[List[List[int]], List[List[int]]]:
    """Return ``(column_clues, row_clues)`` for a row-major cell sequence."""
    column_clues = [
        line_clues([cells[pair_to_index(row, column, width)].filled for row in range(height)])
        for column in range(width)
    ]
    row_clues = [
        line_clues([cells[pair_to_index(row, column, width)].filled for column in range(width)])
        for row in range(height)
    ]
    return column_clues, row_clues


@dataclass
class Board:
    """Puzzle ground truth plus the player's per-cell visibility and marks."""

    width: int
    height: int
    filled_count: int
    cells: List[Cell]
    column_clues: List[List[int]] = field(default_factory=list)
    row_clues: List[List[int]] = field(default_factory=list)

    @classmethod
    def from_pattern(cls, rows: Sequence[Sequence[bool]]) -> "Board":
        """Build a board whose filled cells follow *rows* (top to bottom)."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        if width < 1 or height < 1:
            raise ValueError("pattern must have at least one row and one column")
        if any(len(row) != width for row in rows):
            raise ValueError("pattern rows must all have the same length")
        cells = [Cell(filled=bool(value)) for row in rows for value in row]
        column_clues, row_clues = compute_clues(cells, width, height)
        return cls(
            width=width,
            height=height,
            filled_count=sum(1 for cell in cells if cell.filled),
            cells=cells,
            column_clues=column_clues,
            row_clues=row_clues,
        )

    @property
    def size(self) -> int:
        return self.width * self.height

    def index(self, row: int, column: int) -> int:
        return pair_to_index(row, column, self.width)

    def cell(self, cell_id: int) -> Cell:
        """Return the cell with row-major id *cell_id*."""
        if not 0 <= cell_id < len(self.cells):
            raise OutOfRangeError(f"cell id {cell_id} outside 0..{len(self.cells) - 1}")
        return self.cells[cell_id]

    def row(self, row: int) -> List[Cell]:
        start = row * self.width
        return self.cells[start:start + self.width]

    def column(self, column: int) -> List[Cell]:
        return self.cells[column::self.width]

    def filled_ids(self) -> List[int]:
        return [cell_id for cell_id, cell in enumerate(self.cells) if cell.filled]


class BoardFactory:
    """Builds boards with a uniformly random set of filled cells.

    The factory owns its own ``random.Random``; pass *seed* for reproducible
    boards, otherwise it is seeded from the OS entropy source.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def build(self, width: int, height: int, filled_count: int) -> Board:
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        if not 0 <= filled_count <= width * height:
            raise ValueError(
                f"filled count {filled_count} outside 0..{width * height} for a {width}x{height} board"
            )

        cells = [Cell() for _ in range(width * height)]
        ids = list(range(width * height))
        self._rng.shuffle(ids)
        for cell_id in ids[:filled_count]:
            cells[cell_id].filled = True

        column_clues, row_clues = compute_clues(cells, width, height)
        logger.debug("Built %dx%d board with %d filled cells", width, height, filled_count)
        return Board(
            width=width,
            height=height,
            filled_count=filled_count,
            cells=cells,
            column_clues=column_clues,
            row_clues=row_clues,
        )
