"""
Command line driver for playing Minesweeper over stdin/stdout.

Reads one command per line, applies it to the board and redraws the
board until the game is won, lost, or the player quits.
"""
import logging
import random
import sys
from typing import Optional, TextIO

from ..board import Board, BoardError, GameState, new_board
from ..cell import CellMarker
from .commands import Command, CommandError, CommandKind, parse_command
from .render import render_board, render_debug

logger = logging.getLogger(__name__)

PROMPT = "make a move: "
LOST_MESSAGE = "you hit a mine!"
WON_MESSAGE = "you win!!"


# ============================================================================
# Command Line Driver
# ============================================================================

class CommandLineDriver:
    """
    Play a game of Minesweeper through text streams.

    The driver owns the current board and replaces it wholesale when a
    new game is requested.
    """

    def __init__(
        self,
        board: Board,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        show_indices: bool = False,
    ) -> None:
        """
        Initialize the driver.

        Args:
            board: Board to start playing on.
            stdin: Stream commands are read from (default: sys.stdin).
            stdout: Stream output is written to (default: sys.stdout).
            rng: Random generator used to lay out new games.
            show_indices: Draw row and column indices around the board.
        """
        self.board = board
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng
        self.show_indices = show_indices

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        if not text.endswith("\n"):
            self.stdout.write("\n")

    def _read_line(self) -> Optional[str]:
        """Prompt for and read one line, or None at end of input."""
        self._write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def _draw(self) -> None:
        self._write(render_board(self.board, self.show_indices))

    def _draw_debug(self) -> None:
        self._write(render_debug(self.board, self.show_indices))

    def apply(self, command: Command) -> None:
        """
        Apply a parsed command other than QUIT to the board.

        Raises:
            BoardError: If a NEW command asks for an invalid board size.
        """
        logger.debug("Applying %s", command)
        if command.kind == CommandKind.DEBUG:
            self._draw_debug()
        elif command.kind == CommandKind.NEW:
            self.board = new_board(command.row, command.col, rng=self.rng)
            logger.info(
                "Started %dx%d game with %d mines",
                command.row, command.col, self.board.total_mines,
            )
        elif command.kind == CommandKind.REVEAL:
            self.board.reveal_cell(command.row, command.col)
        elif command.kind == CommandKind.FLAG:
            self.board.toggle_mark(command.row, command.col, CellMarker.FLAGGED)
        elif command.kind == CommandKind.QUESTION:
            self.board.toggle_mark(
                command.row, command.col, CellMarker.QUESTIONED
            )

    def run(self) -> GameState:
        """
        Run the read/apply/draw loop.

        Returns:
            State of the board when the loop ended. PLAYING means the
            player quit or input ran out.
        """
        self._draw()
        while True:
            line = self._read_line()
            if line is None:
                logger.info("End of input, leaving game")
                break

            try:
                command = parse_command(line, self.board.dimensions)
                if command.kind == CommandKind.QUIT:
                    break
                self.apply(command)
            except (CommandError, BoardError) as exc:
                logger.debug("Rejected input %r: %s", line, exc)
                self._write(str(exc))
                continue

            if self.board.is_game_lost():
                self._write(LOST_MESSAGE)
                self._draw_debug()
                break
            if self.board.is_game_won():
                self._write(WON_MESSAGE)
                self._draw_debug()
                break
            self._draw()

        state = self.board.game_state
        logger.info("Game finished in state %s", state.name)
        return state
