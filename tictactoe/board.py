"""
Board for the NxN TicTacToe engine.
Owns the grid of marks and nothing else.
"""

from contextlib import contextmanager
from typing import List

from .game_state import Mark, Cell


class Board:
    """
    An NxN grid of marks.

    The size is fixed when the board is created. clear() is the only
    way to reuse a board for another match.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self.size = size
        self.grid: List[List[Mark]] = [
            [Mark.EMPTY for _ in range(size)] for _ in range(size)
        ]

    def get(self, row: int, col: int) -> Mark:
        return self.grid[row][col]

    def set(self, row: int, col: int, mark: Mark):
        self.grid[row][col] = mark

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row][col] == Mark.EMPTY

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        for row in self.grid:
            for mark in row:
                if mark == Mark.EMPTY:
                    return False
        return True

    def clear(self):
        """Reset every cell to EMPTY."""
        for row in range(self.size):
            for col in range(self.size):
                self.grid[row][col] = Mark.EMPTY

    def get_empty_cells(self) -> List[Cell]:
        """
        Get all empty cells on the board.

        Returns:
            List of cells in row-major order.
        """
        empty = []
        for row in range(self.size):
            for col in range(self.size):
                if self.grid[row][col] == Mark.EMPTY:
                    empty.append(Cell(row, col))
        return empty

    @contextmanager
    def tentative(self, row: int, col: int, mark: Mark):
        """
        Place a mark for the duration of a with-block.

        The cell is set back to EMPTY however the block exits.
        Only use on empty cells.
        """
        self.grid[row][col] = mark
        try:
            yield Cell(row, col)
        finally:
            self.grid[row][col] = Mark.EMPTY

    def render(self) -> str:
        """
        Get the board as text.

        Example (3x3):
            ---------
            | X O   |
            |   X   |
            |     O |
            ---------
        """
        rule = "-" * (self.size * self.size)
        lines = [rule]
        for row in self.grid:
            lines.append("| " + "".join(f"{mark.symbol} " for mark in row) + "|")
        lines.append(rule)
        return "\n".join(lines)
