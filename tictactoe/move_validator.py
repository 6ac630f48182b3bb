"""
Move validator for the NxN TicTacToe engine.
Checks human input before anything touches the board.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .errors import GameError, InvalidCoordinate, CellOccupied, MalformedCommand


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error_type: Optional[type] = None

    def raise_for_error(self):
        """Raise the matching GameError if the move was rejected."""
        if not self.is_valid:
            raise (self.error_type or GameError)(self.error_message)


class MoveValidator:
    """
    Validates human moves.

    Rules:
    1. Coordinates are 1-indexed and must be within 1..N
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (1..N).
            col: Column to place the mark (1..N).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (1 <= row <= board.size and 1 <= col <= board.size):
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.OUT_OF_RANGE_MESSAGE.format(size=board.size),
                error_type=InvalidCoordinate
            )

        if not board.is_empty(row - 1, col - 1):
            return ValidationResult(
                is_valid=False,
                error_message=GameConfig.OCCUPIED_MESSAGE,
                error_type=CellOccupied
            )

        return ValidationResult(is_valid=True)

    def parse_coordinates(self, text: str) -> Tuple[int, int]:
        """
        Parse "row col" typed by a human.

        Args:
            text: The raw input line.

        Returns:
            (row, col), still 1-indexed and not range checked.
        """
        parts = text.split()
        if len(parts) < 2:
            raise MalformedCommand(GameConfig.NOT_NUMBERS_MESSAGE)
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            raise MalformedCommand(GameConfig.NOT_NUMBERS_MESSAGE) from None
