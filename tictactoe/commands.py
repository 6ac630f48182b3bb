"""
Console commands for the NxN TicTacToe engine.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig
from .errors import MalformedCommand

COMMAND_RE = re.compile(GameConfig.COMMAND_PATTERN)


@dataclass
class Command:
    """A parsed console command: "start <a> <b>" or "exit"."""
    name: str
    participant_a: Optional[str] = None
    participant_b: Optional[str] = None


def parse_command(text: str) -> Command:
    """
    Parse a line typed at the command prompt.

    Args:
        text: The raw input line.

    Returns:
        The parsed command.

    Raises:
        MalformedCommand: if the line is not a known command.
    """
    if not COMMAND_RE.fullmatch(text.strip()):
        raise MalformedCommand(GameConfig.BAD_COMMAND_MESSAGE)

    parts = text.split()
    if parts[0] == "exit":
        return Command("exit")
    return Command("start", parts[1], parts[2])
