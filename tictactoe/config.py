"""
Game configuration for the NxN TicTacToe engine.
All the settings for board size, players, and console messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the defaults!
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid. Any size >= 1 works, but the
    # "hard" AI searches the whole game tree, so keep it small.
    BOARD_SIZE = 3
    MIN_BOARD_SIZE = 1

    # Symbols used when rendering the board
    EMPTY_SYMBOL = " "
    X_SYMBOL = "X"
    O_SYMBOL = "O"

    # ==================== PLAYER SETTINGS ====================
    HUMAN = "user"
    AI_LEVELS = ["easy", "medium", "hard"]
    PARTICIPANTS = [HUMAN] + AI_LEVELS

    # Seed for the random AI (None = different game every run)
    RANDOM_SEED = None

    # ==================== CONSOLE SETTINGS ====================
    PARTICIPANT_GROUP = "(" + "|".join(PARTICIPANTS) + ")"
    COMMAND_PATTERN = f"(start {PARTICIPANT_GROUP} {PARTICIPANT_GROUP})|(exit)"

    COMMAND_PROMPT = "Input command:"
    COORDINATES_PROMPT = "Enter the coordinates:"
    BAD_COMMAND_MESSAGE = "Bad parameters!"
    NOT_NUMBERS_MESSAGE = "You should enter numbers!"
    OUT_OF_RANGE_MESSAGE = "Coordinates should be from 1 to {size}!"
    OCCUPIED_MESSAGE = "This cell is occupied! Choose another one!"
    AI_MOVE_MESSAGE = 'Making move level "{level}"'

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
