"""Player commands understood by :class:`picross.core.controller.Controller`."""

from __future__ import annotations

from dataclasses import dataclass


class Command:
    """Base class for every command a front-end can send."""


@dataclass(frozen=True)
class Reveal(Command):
    id: int


@dataclass(frozen=True)
class Mark(Command):
    id: int


@dataclass(frozen=True)
class Reset(Command):
    pass


@dataclass(frozen=True)
class GotoMenu(Command):
    pass


@dataclass(frozen=True)
class StartPressed(Command):
    pass


@dataclass(frozen=True)
class InputWidth(Command):
    text: str


@dataclass(frozen=True)
class InputHeight(Command):
    text: str


@dataclass(frozen=True)
class InputFilledCount(Command):
    text: str
