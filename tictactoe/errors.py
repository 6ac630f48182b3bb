"""
Errors raised by the TicTacToe engine.
All of them are recoverable: the console re-prompts and the game goes on.
"""


class GameError(Exception):
    """Base class for rejected input and illegal game actions."""


class InvalidCoordinate(GameError):
    """A human coordinate outside 1..N."""


class CellOccupied(GameError):
    """The selected cell already holds a mark."""


class MalformedCommand(GameError):
    """A console command or player label that cannot be parsed."""
