"""
Minesweeper game module.

Provides the board engine (cells, mine layout, reveal propagation,
marking and win/loss evaluation) and the front ends built on it.
"""
from .cell import Cell, CellKind, CellMarker, CellState
from .board import (
    Board,
    BoardConfig,
    BoardError,
    GameState,
    InvalidDimensionsError,
    OutOfBoundsError,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    mines_for_size,
    new_board,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "CellMarker",
    "CellState",
    "Board",
    "BoardConfig",
    "BoardError",
    "GameState",
    "InvalidDimensionsError",
    "OutOfBoundsError",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "mines_for_size",
    "new_board",
    "MinesweeperEnv",
]
