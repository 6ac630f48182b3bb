"""
Game loop for the NxN TicTacToe engine.
Alternates turns between two participants and detects the end of a match.
"""

import random
from typing import Callable, Dict, List, Optional, Tuple

from .ai_player import AIPlayer, create_ai
from .board import Board
from .config import GameConfig
from .errors import GameError, CellOccupied, MalformedCommand
from .game_state import Mark, Cell, Outcome
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Game:
    """
    A TicTacToe match between two participants.

    Each participant is "user" (a human) or an AI level ("easy",
    "medium", "hard"). The first participant plays X and moves first.

    Game flow:
    1. start_match() clears the board
    2. The current participant picks a cell (human input or AI)
    3. The cell is applied and the outcome is computed
    4. If the game is still running, mark and participant switch
    5. Repeat until someone wins or it's a draw
    """

    def __init__(self, board_size: int = GameConfig.BOARD_SIZE, rng: Optional[random.Random] = None):
        """
        Initialize a game with an empty board.

        Args:
            board_size: N for an NxN board.
            rng: Random number generator for the AI (default: seeded from GameConfig)
        """
        self.board = Board(board_size)
        self.win_checker = WinChecker(self.board)
        self.validator = MoveValidator()
        self.rng = rng if rng is not None else random.Random(GameConfig.RANDOM_SEED)

        self.history: List[Cell] = []
        self.mark = Mark.X
        self.participants: Tuple[Optional[str], Optional[str]] = (None, None)
        self._current_index = 0
        self.outcome = Outcome.RUNNING

        self._ai_players: Dict[str, AIPlayer] = {}

    @property
    def current_participant(self) -> Optional[str]:
        return self.participants[self._current_index]

    @property
    def is_human_turn(self) -> bool:
        return self.current_participant == GameConfig.HUMAN

    def start_match(self, participant_a: str, participant_b: str) -> str:
        """
        Start a new match.

        Args:
            participant_a: Plays X and moves first.
            participant_b: Plays O.

        Returns:
            The rendered (empty) board.
        """
        for participant in (participant_a, participant_b):
            if participant not in GameConfig.PARTICIPANTS:
                raise MalformedCommand(f"Unknown participant: {participant!r}")

        self.participants = (participant_a, participant_b)
        self.clear_board()
        return self.render()

    def clear_board(self):
        """Reset the board, history, mark and turn for a new match."""
        self.board.clear()
        self.history.clear()
        self.mark = Mark.X
        self._current_index = 0
        self.outcome = Outcome.RUNNING

    def submit_human_move(self, row: int, col: int) -> Outcome:
        """
        Play a human move.

        Args:
            row: Row (1..N).
            col: Column (1..N).

        Returns:
            The outcome after the move.

        Raises:
            InvalidCoordinate: if row or col is outside 1..N.
            CellOccupied: if the cell already holds a mark.
        """
        self._check_running()
        self.validator.validate_move(self.board, row, col).raise_for_error()
        return self.apply_move(Cell.from_user(row, col))

    def compute_ai_move(self) -> Optional[Cell]:
        """
        Ask the current participant's AI for a move.

        A label that is not an AI level plays as the first one, "easy".

        Returns:
            The chosen cell (not applied yet), or None on a full board.
        """
        return self.current_ai().get_best_move(self.board, self.history, self.mark)

    def current_ai(self) -> AIPlayer:
        """Get the AI for the current participant."""
        level = self.current_participant
        if level not in GameConfig.AI_LEVELS:
            level = GameConfig.AI_LEVELS[0]
        if level not in self._ai_players:
            self._ai_players[level] = create_ai(level, self.rng)
        return self._ai_players[level]

    def apply_move(self, cell: Cell) -> Outcome:
        """
        Place the current mark at a cell and advance the game.

        Args:
            cell: An empty cell (0-indexed).

        Returns:
            The outcome after the move.
        """
        self._check_running()
        if not self.board.is_empty(cell.row, cell.col):
            raise CellOccupied(GameConfig.OCCUPIED_MESSAGE)

        self.board.set(cell.row, cell.col, self.mark)
        self.history.append(cell)

        self.outcome = self.win_checker.check_outcome(cell, self.mark)
        if not self.outcome.is_terminal:
            self.switch_move()

        return self.outcome

    def switch_move(self):
        """Hand the turn to the other participant."""
        self.mark = self.mark.opposite()
        self._current_index = 1 - self._current_index

    def play_turn(
        self,
        get_user_cell: Callable[["Game"], Tuple[int, int]],
        output: Callable[[str], None] = print
    ) -> Outcome:
        """
        Play one ply for whoever's turn it is.

        Args:
            get_user_cell: Returns a valid 1-indexed (row, col) for a human.
            output: Where to send AI announcements.

        Returns:
            The outcome after the move.
        """
        if self.is_human_turn:
            row, col = get_user_cell(self)
            return self.submit_human_move(row, col)

        output(GameConfig.AI_MOVE_MESSAGE.format(level=self.current_ai().level))
        cell = self.compute_ai_move()
        return self.apply_move(cell)

    def run_match(
        self,
        participant_a: str,
        participant_b: str,
        get_user_cell: Callable[["Game"], Tuple[int, int]],
        output: Callable[[str], None] = print
    ) -> Outcome:
        """
        Play a whole match.

        Args:
            participant_a: Plays X and moves first.
            participant_b: Plays O.
            get_user_cell: Returns a valid 1-indexed (row, col) for a human.
            output: Receives the board after every move, and AI announcements.

        Returns:
            The final outcome.
        """
        output(self.start_match(participant_a, participant_b))

        while not self.outcome.is_terminal:
            self.play_turn(get_user_cell, output)
            output(self.render())

        return self.outcome

    def render(self) -> str:
        return self.board.render()

    def _check_running(self):
        if self.outcome.is_terminal:
            raise GameError(f"Game is already over: {self.outcome.message}")
