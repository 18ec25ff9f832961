from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from picross.core.board import Board

logger = logging.getLogger(__name__)


class Winstate(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class MenuInputs:
    """Text the player typed on the menu screen, kept verbatim until START."""

    width_input: str
    height_input: str
    filled_count_input: str
    started: bool = False
    error: Optional[str] = None


@dataclass
class GameSession:
    """The current board, its outcome so far, and the pending menu inputs."""

    board: Board
    menu: MenuInputs
    winstate: Winstate = Winstate.IN_PROGRESS

    @property
    def is_over(self) -> bool:
        return self.winstate is not Winstate.IN_PROGRESS

    def wincheck(self) -> Winstate:
        """Recompute ``winstate`` from cell visibility.

        Won when exactly the filled cells are revealed; the whole board is
        then uncovered. Lost as soon as any empty cell is revealed. Marks are
        never consulted, so calling this again without changes is a no-op.
        """
        cells = self.board.cells
        previous = self.winstate
        if all(cell.filled != cell.hidden for cell in cells):
            self.winstate = Winstate.WON
            for cell in cells:
                cell.hidden = False
                cell.marked = False
        elif any(not cell.filled and not cell.hidden for cell in cells):
            self.winstate = Winstate.LOST
        else:
            self.winstate = Winstate.IN_PROGRESS

        if self.winstate is not previous:
            logger.info("Game state changed: %s -> %s", previous.value, self.winstate.value)
        return self.winstate
