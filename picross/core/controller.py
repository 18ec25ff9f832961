from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional, Tuple

from picross.core.board import BoardFactory
from picross.core.commands import (
    Command,
    GotoMenu,
    InputFilledCount,
    InputHeight,
    InputWidth,
    Mark,
    Reset,
    Reveal,
    StartPressed,
)
from picross.core.errors import InvalidInputError, OutOfRangeError
from picross.core.session import GameSession, MenuInputs, Winstate
from picross.core.settings import Settings, load_settings

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+", re.ASCII)

MAX_SIDE = 100


def _parse_count(label: str, text: str) -> int:
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        raise InvalidInputError(f"{label} must be a non-negative whole number, got {text!r}")
    return int(stripped)


def parse_menu_inputs(menu: MenuInputs) -> Tuple[int, int, int]:
    """Parse the menu text fields into ``(width, height, filled_count)``."""
    width = _parse_count("Width", menu.width_input)
    height = _parse_count("Height", menu.height_input)
    filled_count = _parse_count("Filled boxes", menu.filled_count_input)
    if width < 1 or height < 1:
        raise InvalidInputError("Width and height must be at least 1")
    if width > MAX_SIDE or height > MAX_SIDE:
        raise InvalidInputError(f"Width and height must be at most {MAX_SIDE}")
    if filled_count > width * height:
        raise InvalidInputError(
            f"Filled boxes must be at most {width * height} on a {width}x{height} board"
        )
    return width, height, filled_count


class Controller:
    """Applies player commands to a :class:`GameSession`.

    ``apply`` returns the session the front-end should keep; it is the same
    object except after ``GotoMenu``, which starts over with a fresh one.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        factory: Optional[BoardFactory] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._factory = factory or BoardFactory()

    @property
    def settings(self) -> Settings:
        return self._settings

    def new_session(self) -> GameSession:
        s = self._settings
        return GameSession(
            board=self._factory.build(s.width, s.height, s.filled_count),
            menu=MenuInputs(
                width_input=str(s.width),
                height_input=str(s.height),
                filled_count_input=str(s.filled_count),
            ),
        )

    def apply(self, session: GameSession, command: Command) -> GameSession:
        if isinstance(command, Reveal):
            self._reveal(session, command.id)
        elif isinstance(command, Mark):
            self._mark(session, command.id)
        elif isinstance(command, Reset):
            self._reset(session)
        elif isinstance(command, GotoMenu):
            return self.new_session()
        elif isinstance(command, StartPressed):
            self._start(session)
        elif isinstance(command, InputWidth):
            session.menu.width_input = command.text
        elif isinstance(command, InputHeight):
            session.menu.height_input = command.text
        elif isinstance(command, InputFilledCount):
            session.menu.filled_count_input = command.text
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return session

    def _reveal(self, session: GameSession, cell_id: int) -> None:
        if session.is_over:
            return
        try:
            cell = session.board.cell(cell_id)
        except OutOfRangeError as e:
            logger.warning("Ignoring reveal: %s", e)
            return
        cell.hidden = False
        cell.marked = False
        session.wincheck()

    def _mark(self, session: GameSession, cell_id: int) -> None:
        if session.is_over:
            return
        try:
            cell = session.board.cell(cell_id)
        except OutOfRangeError as e:
            logger.warning("Ignoring mark: %s", e)
            return
        if cell.hidden:
            cell.marked = not cell.marked
        session.wincheck()

    def _reset(self, session: GameSession) -> None:
        board = session.board
        session.board = self._factory.build(board.width, board.height, board.filled_count)
        session.winstate = Winstate.IN_PROGRESS
        logger.info(
            "Reset to a new %dx%d board with %d filled cells",
            board.width,
            board.height,
            board.filled_count,
        )

    def _start(self, session: GameSession) -> None:
        try:
            width, height, filled_count = parse_menu_inputs(session.menu)
        except InvalidInputError as e:
            logger.warning("Rejected menu input: %s", e)
            session.menu.error = str(e)
            return
        session.board = self._factory.build(width, height, filled_count)
        session.winstate = Winstate.IN_PROGRESS
        session.menu.started = True
        session.menu.error = None
        logger.info("Started a %dx%d game with %d filled cells", width, height, filled_count)


@lru_cache(maxsize=None)
def default_controller() -> Controller:
    return Controller(settings=load_settings())


def new_session() -> GameSession:
    return default_controller().new_session()


def apply(session: GameSession, command: Command) -> GameSession:
    return default_controller().apply(session, command)
