"""
Command parsing for the terminal front end.

A move is a space separated line in one of the following forms:
    n 5 5     start a new game with 5 rows and 5 columns
    r 0 1     reveal the cell at row 0 column 1
    f 2 4     toggle a flag on row 2 column 4
    q 1 3     toggle a question mark on row 1 column 3
    debug     show the board with every cell uncovered
    quit      leave the game
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class CommandKind(Enum):
    """Verbs understood by the command line driver."""

    QUIT = auto()
    DEBUG = auto()
    NEW = auto()
    REVEAL = auto()
    FLAG = auto()
    QUESTION = auto()


MOVE_VERBS = {
    "r": CommandKind.REVEAL,
    "f": CommandKind.FLAG,
    "q": CommandKind.QUESTION,
}


class CommandError(ValueError):
    """Raised when a command line cannot be turned into a Command."""


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        kind: What to do.
        row: Row index, or number of rows for NEW.
        col: Column index, or number of columns for NEW.
    """

    kind: CommandKind
    row: Optional[int] = None
    col: Optional[int] = None


# ============================================================================
# Parsing
# ============================================================================

def parse_index(token: str) -> int:
    """Parse a non-negative integer token."""
    if not (token.isascii() and token.isdigit()):
        raise CommandError(f"invalid index given {token}")
    return int(token)


def check_index_bounds(index: int, max_index: int) -> None:
    """Ensure ``index`` lies in ``0..max_index``."""
    if not 0 <= index < max_index:
        raise CommandError(
            f"the index {index} is out of the range 0..{max_index}"
        )


def parse_command(line: str, dimensions: Tuple[int, int]) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input line.
        dimensions: (rows, columns) of the current board, used to
            bounds-check move coordinates.

    Returns:
        The parsed command.

    Raises:
        CommandError: If the verb is unknown, the arity is wrong, or an
            index is malformed or off the board.
    """
    tokens = line.split()
    if not tokens:
        raise CommandError(f"invalid command {line.strip()}")

    verb = tokens[0]
    if verb == "quit" and len(tokens) == 1:
        return Command(CommandKind.QUIT)
    if verb == "debug" and len(tokens) == 1:
        return Command(CommandKind.DEBUG)
    if verb == "n" and len(tokens) == 3:
        return Command(
            CommandKind.NEW, parse_index(tokens[1]), parse_index(tokens[2])
        )
    if verb in MOVE_VERBS and len(tokens) == 3:
        row = parse_index(tokens[1])
        col = parse_index(tokens[2])
        check_index_bounds(row, dimensions[0])
        check_index_bounds(col, dimensions[1])
        return Command(MOVE_VERBS[verb], row, col)

    raise CommandError(f"invalid command {line.strip()}")
