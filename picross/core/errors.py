"""Exceptions raised by the puzzle core."""


class PicrossError(Exception):
    """Base class for puzzle core errors."""


class InvalidInputError(PicrossError, ValueError):
    """Menu input is not a usable board description."""


class OutOfRangeError(PicrossError, IndexError):
    """A cell id outside ``[0, width * height)`` was requested."""
