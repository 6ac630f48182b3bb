"""
NxN TicTacToe engine.
Handles the board, rules, and three levels of AI opponent.
"""

__version__ = "1.0.0"

from .game_state import Mark, Outcome, Cell
from .board import Board
from .win_checker import WinChecker
from .move_validator import MoveValidator
from .ai_player import AIPlayer, RandomAI, MediumAI, HardAI, create_ai
from .game import Game
