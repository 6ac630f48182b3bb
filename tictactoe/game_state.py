"""
Game state types for the NxN TicTacToe engine.
Marks on the board, match outcomes, and cell coordinates.
"""

from enum import Enum
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = GameConfig.EMPTY_SYMBOL
    X = GameConfig.X_SYMBOL
    O = GameConfig.O_SYMBOL

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.value


class Outcome(Enum):
    """State of a match after a move."""
    RUNNING = "Game not finished"
    DRAW = "Draw"
    X_WIN = "X wins"
    O_WIN = "O wins"

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        """Get the winning outcome for a mark."""
        if mark == Mark.X:
            return cls.X_WIN
        if mark == Mark.O:
            return cls.O_WIN
        raise ValueError("EMPTY cannot win")

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.RUNNING

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Cell:
    """
    A cell on the board.

    Coordinates are 0-indexed. Humans type them 1-indexed,
    use from_user() / to_user() at that boundary.
    """
    row: int
    col: int

    @classmethod
    def from_user(cls, row: int, col: int) -> "Cell":
        """Create a cell from 1-indexed coordinates."""
        return cls(row - 1, col - 1)

    def to_user(self) -> tuple:
        """Get the 1-indexed (row, col) pair."""
        return self.row + 1, self.col + 1
