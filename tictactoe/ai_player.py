"""
AI players for the NxN TicTacToe engine.
Three difficulty levels: random, heuristic and full Minimax search.
"""

import random
from typing import Optional, List

from .board import Board
from .config import GameConfig
from .errors import MalformedCommand
from .game_state import Mark, Cell
from .win_checker import WinChecker


class AIPlayer:
    """
    Base class for the computer opponents.

    Every level looks at the board, the move history and the mark it
    plays, and returns one empty cell. The board is left exactly as
    it was given.
    """

    level = None

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            rng: Random number generator (default: seeded from GameConfig)
        """
        self.rng = rng if rng is not None else random.Random(GameConfig.RANDOM_SEED)

    def get_best_move(self, board: Board, history: List[Cell], mark: Mark) -> Optional[Cell]:
        """
        Get the move for the current position.

        Args:
            board: Current board.
            history: Cells played so far, oldest first.
            mark: The mark the AI plays.

        Returns:
            The chosen cell, or None if the board is full.
        """
        raise NotImplementedError

    def random_move(self, board: Board) -> Optional[Cell]:
        """Pick any empty cell, uniformly."""
        empty_cells = board.get_empty_cells()
        if not empty_cells:
            return None
        return self.rng.choice(empty_cells)


class RandomAI(AIPlayer):
    """The "easy" level: plays anywhere."""

    level = "easy"

    def get_best_move(self, board: Board, history: List[Cell], mark: Mark) -> Optional[Cell]:
        return self.random_move(board)


class MediumAI(AIPlayer):
    """
    The "medium" level: a greedy look at the last two moves.

    1. Finish a line through our own previous move (history[-2]).
    2. Block a line through the opponent's last move (history[-1]).
    3. Otherwise play randomly.

    Threats that don't pass through those two cells go unnoticed,
    and the lines of our own previous move are the only ones we try
    to finish.
    """

    level = "medium"

    def get_best_move(self, board: Board, history: List[Cell], mark: Mark) -> Optional[Cell]:
        if not history:
            return self.random_move(board)

        checker = WinChecker(board)

        if len(history) >= 2:
            winning_cell = checker.find_completing_cell(mark, history[-2])
            if winning_cell is not None:
                if GameConfig.DEBUG_MODE:
                    print(f"AI completes a line at {winning_cell}")
                return winning_cell

        blocking_cell = checker.find_completing_cell(mark.opposite(), history[-1])
        if blocking_cell is not None:
            if GameConfig.DEBUG_MODE:
                print(f"AI blocks a line at {blocking_cell}")
            return blocking_cell

        return self.random_move(board)


class HardAI(AIPlayer):
    """
    The "hard" level: plays using the Minimax algorithm.

    Searches the whole game tree on every call, with no pruning,
    caching or depth limit. Fine for 3x3, exponential beyond that.
    """

    level = "hard"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board, history: List[Cell], mark: Mark) -> Optional[Cell]:
        self.positions_evaluated = 0
        checker = WinChecker(board)

        best_score = float('-inf')
        best_move = None

        for cell in board.get_empty_cells():
            with board.tentative(cell.row, cell.col, mark):
                score = self._minimax(board, checker, cell, mark, mark, is_maximizing=False)

            # Strict comparison keeps the first cell reaching the best score
            if score > best_score:
                best_score = score
                best_move = cell

        if GameConfig.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: Board,
        checker: WinChecker,
        last_cell: Cell,
        last_mark: Mark,
        player: Mark,
        is_maximizing: bool
    ) -> int:
        """
        Minimax algorithm.

        Args:
            board: Board with last_mark just placed at last_cell.
            checker: Win checker bound to the board.
            last_cell: The cell that was just played.
            last_mark: The mark that was just played.
            player: The mark we are choosing a move for.
            is_maximizing: True if it's the player's turn next.

        Returns:
            1 if the player wins, -1 if the opponent wins, 0 for a draw.
        """
        self.positions_evaluated += 1

        if checker.detect_win(last_cell, last_mark):
            return 1 if last_mark == player else -1
        if board.is_full():
            return 0

        if is_maximizing:
            max_score = float('-inf')
            for cell in board.get_empty_cells():
                with board.tentative(cell.row, cell.col, player):
                    score = self._minimax(board, checker, cell, player, player, False)
                max_score = max(max_score, score)
            return max_score
        else:
            opponent = player.opposite()
            min_score = float('inf')
            for cell in board.get_empty_cells():
                with board.tentative(cell.row, cell.col, opponent):
                    score = self._minimax(board, checker, cell, opponent, player, True)
                min_score = min(min_score, score)
            return min_score


AI_LEVELS = {
    RandomAI.level: RandomAI,
    MediumAI.level: MediumAI,
    HardAI.level: HardAI,
}


def create_ai(level: str, rng: Optional[random.Random] = None) -> AIPlayer:
    """
    Create the AI for a difficulty level.

    Args:
        level: "easy", "medium" or "hard".
        rng: Random number generator shared with the game.

    Returns:
        The AI player.
    """
    if level not in AI_LEVELS:
        raise MalformedCommand(f"Unknown AI level: {level!r}")
    return AI_LEVELS[level](rng)
