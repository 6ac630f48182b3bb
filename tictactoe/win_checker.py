"""
Win checker for the NxN TicTacToe engine.
Checks the lines through the last move for a win or a near-win.
"""

from typing import Optional, List

from .board import Board
from .game_state import Mark, Cell, Outcome


class WinChecker:
    """
    Checks lines on an NxN board.

    Win condition: a whole row, column or diagonal of the same mark.
    A line can only become complete through the move that was just
    played, so only the lines through that cell are looked at.
    """

    def __init__(self, board: Board):
        self.board = board

    def lines_through(self, cell: Cell) -> List[List[Cell]]:
        """
        Get every line that passes through a cell.

        Args:
            cell: The cell.

        Returns:
            Lines in the order row, column, main diagonal (if the cell
            is on it), anti-diagonal (if the cell is on it).
        """
        n = self.board.size
        lines = [
            [Cell(cell.row, col) for col in range(n)],
            [Cell(row, cell.col) for row in range(n)],
        ]
        if cell.row == cell.col:
            lines.append([Cell(i, i) for i in range(n)])
        if cell.row == n - 1 - cell.col:
            lines.append([Cell(i, n - 1 - i) for i in range(n)])
        return lines

    def _is_complete(self, line: List[Cell], mark: Mark) -> bool:
        for cell in line:
            if self.board.get(cell.row, cell.col) != mark:
                return False
        return True

    def detect_win(self, cell: Cell, mark: Mark) -> bool:
        """
        Check if a line through the cell is filled with the mark.

        Args:
            cell: The most recently played cell.
            mark: The mark to look for.

        Returns:
            True on the first complete line, False if there is none.
        """
        return self.get_winning_line(cell, mark) is not None

    def get_winning_line(self, cell: Cell, mark: Mark) -> Optional[List[Cell]]:
        """
        Get the winning line through a cell if there is one.

        Args:
            cell: The most recently played cell.
            mark: The mark to look for.

        Returns:
            The winning line as a list of cells, or None.
        """
        for line in self.lines_through(cell):
            if self._is_complete(line, mark):
                return line
        return None

    def find_completing_cell(self, mark: Mark, cell: Cell) -> Optional[Cell]:
        """
        Find the empty cell that would complete a line through a cell.

        A line qualifies when N-1 of its cells hold the mark and the
        remaining one is empty. An opposing mark anywhere on the line
        keeps the count below N-1.

        Args:
            mark: The mark that would complete the line.
            cell: The cell whose lines are scanned.

        Returns:
            The empty cell of the first qualifying line, or None.
        """
        n = self.board.size
        for line in self.lines_through(cell):
            count = 0
            empty_cell = None
            for line_cell in line:
                current = self.board.get(line_cell.row, line_cell.col)
                if current == mark:
                    count += 1
                elif current == Mark.EMPTY:
                    empty_cell = line_cell
            if count == n - 1 and empty_cell is not None:
                return empty_cell
        return None

    def check_outcome(self, cell: Cell, mark: Mark) -> Outcome:
        """
        Get the outcome after a mark was played at a cell.

        Args:
            cell: The cell that was just played.
            mark: The mark that was placed there.

        Returns:
            A win for the mark, DRAW on a full board, RUNNING otherwise.
        """
        if self.detect_win(cell, mark):
            return Outcome.win_for(mark)
        if self.board.is_full():
            return Outcome.DRAW
        return Outcome.RUNNING
