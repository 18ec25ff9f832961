"""Tests for picross.core.board – board generation and clue computation."""

from __future__ import annotations

import pytest

from picross.core.board import (
    Board,
    BoardFactory,
    Cell,
    compute_clues,
    line_clues,
    pair_to_index,
)
from picross.core.errors import OutOfRangeError

F, E = True, False


def _expand(clues: list[int], length: int) -> list[bool]:
    """Lay out *clues* with a single gap between runs, padded with empty cells."""
    line: list[bool] = []
    for i, run in enumerate(clues):
        if i:
            line.append(False)
        line.extend([True] * run)
    return line + [False] * (length - len(line))


def _runs_match(line: list[bool], clues: list[int]) -> bool:
    runs = []
    current = 0
    for filled in line + [False]:
        if filled:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    return runs == clues


# ---------------------------------------------------------------------------
# line_clues
# ---------------------------------------------------------------------------

class TestLineClues:
    def test_empty_line(self):
        assert line_clues([E, E, E]) == []

    def test_full_line(self):
        assert line_clues([F, F, F, F]) == [4]

    def test_zero_length_line(self):
        assert line_clues([]) == []

    def test_single_filled(self):
        assert line_clues([F]) == [1]

    def test_single_empty(self):
        assert line_clues([E]) == []

    def test_mixed_pattern(self):
        assert line_clues([F, F, E, F, E, F, F, F]) == [2, 1, 3]

    def test_leading_and_trailing_empty(self):
        assert line_clues([E, F, F, E, E, F, E]) == [2, 1]

    def test_run_at_end(self):
        assert line_clues([E, E, F]) == [1]

    def test_alternating(self):
        assert line_clues([F, E, F, E, F]) == [1, 1, 1]

    def test_no_zero_entries(self):
        assert 0 not in line_clues([E, F, E, E, F, F, E])


# ---------------------------------------------------------------------------
# compute_clues / pair_to_index
# ---------------------------------------------------------------------------

class TestComputeClues:
    def test_pair_to_index_row_major(self):
        assert pair_to_index(0, 0, 4) == 0
        assert pair_to_index(0, 3, 4) == 3
        assert pair_to_index(2, 1, 4) == 9

    def test_columns_scan_top_to_bottom(self):
        # 2 wide, 3 tall
        pattern = [F, E,
                   E, E,
                   F, F]
        cells = [Cell(filled=v) for v in pattern]
        columns, rows = compute_clues(cells, 2, 3)
        assert columns == [[1, 1], [1]]
        assert rows == [[1], [], [2]]

    def test_column_zero_pattern(self):
        column = [F, F, E, F, E, F, F, F]
        board = Board.from_pattern([[v, E] for v in column])
        assert board.column_clues[0] == [2, 1, 3]
        assert board.column_clues[1] == []


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------

class TestBoard:
    @pytest.fixture()
    def board(self) -> Board:
        return Board.from_pattern([
            [F, E, F],
            [E, F, F],
        ])

    def test_dimensions(self, board: Board):
        assert board.width == 3
        assert board.height == 2
        assert board.size == 6
        assert len(board.cells) == 6

    def test_filled_count(self, board: Board):
        assert board.filled_count == 4
        assert board.filled_ids() == [0, 2, 4, 5]

    def test_clues(self, board: Board):
        assert board.row_clues == [[1, 1], [2]]
        assert board.column_clues == [[1], [1], [2]]

    def test_cells_start_hidden_and_unmarked(self, board: Board):
        assert all(c.hidden and not c.marked for c in board.cells)

    def test_index(self, board: Board):
        assert board.index(1, 2) == 5

    def test_cell_lookup(self, board: Board):
        assert board.cell(4) is board.cells[4]

    @pytest.mark.parametrize("cell_id", [-1, 6, 100])
    def test_cell_out_of_range(self, board: Board, cell_id: int):
        with pytest.raises(OutOfRangeError):
            board.cell(cell_id)

    def test_out_of_range_is_index_error(self, board: Board):
        with pytest.raises(IndexError):
            board.cell(6)

    def test_row_and_column(self, board: Board):
        assert [c.filled for c in board.row(1)] == [E, F, F]
        assert [c.filled for c in board.column(2)] == [F, F]

    def test_from_pattern_rejects_ragged_rows(self):
        with pytest.raises(ValueError):
            Board.from_pattern([[F, E], [F]])

    def test_from_pattern_rejects_empty(self):
        with pytest.raises(ValueError):
            Board.from_pattern([])


# ---------------------------------------------------------------------------
# BoardFactory – concrete scenarios
# ---------------------------------------------------------------------------

class TestBoardFactoryScenarios:
    def test_no_filled_cells(self):
        board = BoardFactory(seed=1).build(3, 3, 0)
        assert all(not c.filled for c in board.cells)
        assert board.row_clues == [[], [], []]
        assert board.column_clues == [[], [], []]

    def test_all_filled_cells(self):
        board = BoardFactory(seed=1).build(3, 3, 9)
        assert all(c.filled for c in board.cells)
        assert board.row_clues == [[3], [3], [3]]
        assert board.column_clues == [[3], [3], [3]]

    def test_fresh_cells_are_hidden_and_unmarked(self):
        board = BoardFactory(seed=2).build(4, 5, 7)
        assert all(c.hidden and not c.marked for c in board.cells)

    def test_single_cell_board(self):
        board = BoardFactory(seed=3).build(1, 1, 1)
        assert board.row_clues == [[1]]
        assert board.column_clues == [[1]]

    def test_same_seed_same_board(self):
        a = BoardFactory(seed=42).build(6, 4, 10)
        b = BoardFactory(seed=42).build(6, 4, 10)
        assert a.filled_ids() == b.filled_ids()

    def test_successive_builds_differ(self):
        factory = BoardFactory(seed=42)
        boards = [factory.build(10, 10, 50).filled_ids() for _ in range(5)]
        assert len({tuple(ids) for ids in boards}) > 1

    @pytest.mark.parametrize(
        "width,height,filled",
        [(0, 3, 0), (3, 0, 0), (2, 2, 5), (2, 2, -1)],
    )
    def test_invalid_arguments(self, width: int, height: int, filled: int):
        with pytest.raises(ValueError):
            BoardFactory(seed=0).build(width, height, filled)


# ---------------------------------------------------------------------------
# BoardFactory – invariants over many boards
# ---------------------------------------------------------------------------

SHAPES = [(1, 1, 0), (1, 8, 3), (8, 1, 5), (5, 5, 12), (10, 10, 65), (7, 3, 21), (12, 9, 40)]


class TestBoardInvariants:
    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("width,height,filled", SHAPES)
    def test_cell_and_filled_counts(self, seed: int, width: int, height: int, filled: int):
        board = BoardFactory(seed=seed).build(width, height, filled)
        assert len(board.cells) == width * height
        assert sum(c.filled for c in board.cells) == filled
        assert board.filled_count == filled

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("width,height,filled", SHAPES)
    def test_clue_sums_equal_filled_count(self, seed: int, width: int, height: int, filled: int):
        board = BoardFactory(seed=seed).build(width, height, filled)
        assert len(board.column_clues) == width
        assert len(board.row_clues) == height
        assert sum(map(sum, board.column_clues)) == filled
        assert sum(map(sum, board.row_clues)) == filled

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("width,height,filled", SHAPES)
    def test_clues_describe_each_line(self, seed: int, width: int, height: int, filled: int):
        board = BoardFactory(seed=seed).build(width, height, filled)
        for r in range(height):
            line = [c.filled for c in board.row(r)]
            clues = board.row_clues[r]
            assert 0 not in clues
            assert _runs_match(line, clues)
            assert sum(_expand(clues, width)) == sum(line)
            assert len(_expand(clues, width)) == width
        for c in range(width):
            line = [cell.filled for cell in board.column(c)]
            clues = board.column_clues[c]
            assert 0 not in clues
            assert _runs_match(line, clues)
            assert len(_expand(clues, height)) == height
