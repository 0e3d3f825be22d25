"""
Text rendering of a board for the terminal.
"""
from typing import Callable, List

from ..board import Board


def _render(
    board: Board, glyph: Callable[[int, int], str], show_indices: bool
) -> str:
    """Compose per-cell glyphs into one line per row."""
    rows, columns = board.dimensions
    row_width = len(str(rows - 1))
    lines: List[str] = []

    if show_indices:
        header = "".join(f" {col % 10}" for col in range(columns))
        lines.append(" " * row_width + header + "\n")

    for row in range(rows):
        prefix = f"{row:>{row_width}}" if show_indices else ""
        cells = "".join(f" {glyph(row, col)}" for col in range(columns))
        lines.append(prefix + cells + "\n")

    return "".join(lines)


def render_board(board: Board, show_indices: bool = False) -> str:
    """
    Render the board as the player sees it.

    Args:
        board: Board to draw.
        show_indices: Prefix rows and head columns with their index
            (last digit for columns).

    Returns:
        Board text, each cell preceded by a space, one row per line.
    """
    return _render(board, board.glyph, show_indices)


def render_debug(board: Board, show_indices: bool = False) -> str:
    """Render mines and adjacency counts regardless of visibility."""
    return _render(board, board.debug_glyph, show_indices)
