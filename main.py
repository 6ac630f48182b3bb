"""
Console front end for the NxN TicTacToe engine.

Commands:
    start <player> <player>   where <player> is user, easy, medium or hard
    exit

Run this script to play TicTacToe in the terminal!
"""

import argparse
import random
from typing import Callable, Optional, Tuple

from tictactoe.commands import parse_command
from tictactoe.config import GameConfig
from tictactoe.errors import GameError
from tictactoe.game import Game


def read_human_move(
    game: Game,
    input_fn: Callable[[], str] = input,
    output: Callable[[str], None] = print
) -> Tuple[int, int]:
    """
    Ask the human for coordinates until they name a free cell.

    Args:
        game: The running game.
        input_fn: Reads one line of input.
        output: Prints one message.

    Returns:
        (row, col), 1-indexed.
    """
    while True:
        output(GameConfig.COORDINATES_PROMPT)
        try:
            row, col = game.validator.parse_coordinates(input_fn())
            game.validator.validate_move(game.board, row, col).raise_for_error()
        except GameError as e:
            output(str(e))
            continue
        return row, col


def run_console(
    game: Game,
    input_fn: Callable[[], str] = input,
    output: Callable[[str], None] = print
):
    """
    Main command loop.

    Args:
        game: The game to play matches on.
        input_fn: Reads one line of input.
        output: Prints one message.
    """
    def get_user_cell(g: Game) -> Tuple[int, int]:
        return read_human_move(g, input_fn, output)

    while True:
        output(GameConfig.COMMAND_PROMPT)
        try:
            command = parse_command(input_fn())
        except GameError as e:
            output(str(e))
            continue

        if command.name == "exit":
            return

        outcome = game.run_match(
            command.participant_a,
            command.participant_b,
            get_user_cell,
            output
        )
        output(outcome.message)


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="NxN TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        default=GameConfig.BOARD_SIZE,
        help=f"Board size N for an NxN board (default: {GameConfig.BOARD_SIZE})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.RANDOM_SEED,
        help="Random seed for the easy and medium AI"
    )

    args = parser.parse_args(argv)

    if args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    game = Game(args.size, rng=random.Random(args.seed))

    try:
        run_console(game, input, print)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
