"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
marking and win/loss evaluation.

Cells are stored in a flat row-major list; the cell at (row, col)
lives at index ``row * columns + col``.
"""
import random
from dataclasses import dataclass, field, InitVar
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell, CellKind, CellMarker


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Share of cells holding a mine, in percent
MINE_DENSITY_PERCENT = 15


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Exceptions
# ============================================================================

class BoardError(ValueError):
    """Base class for errors raised by the board engine."""


class InvalidDimensionsError(BoardError):
    """Raised when a board is requested with unusable dimensions."""


class OutOfBoundsError(BoardError, IndexError):
    """Raised when a cell position lies outside the board."""


def mines_for_size(rows: int, columns: int) -> int:
    """
    Number of mines laid on a board of the given size.

    Equals rows * columns * 0.15 rounded half away from zero, computed
    in integer arithmetic so that exact halves always round up.
    """
    return (rows * columns * MINE_DENSITY_PERCENT + 50) // 100


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
    """

    rows: int = 9
    columns: int = 9

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for value in (self.rows, self.columns):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionsError(
                    f"Board dimensions must be integers, got {value!r}"
                )
        if self.rows < 1 or self.columns < 1:
            raise InvalidDimensionsError(
                f"Board dimensions must be positive, got "
                f"{self.rows}x{self.columns}"
            )

    @property
    def total_mines(self) -> int:
        """Mines placed by a random layout of this size."""
        return mines_for_size(self.rows, self.columns)


# Preset board sizes
BEGINNER = BoardConfig(9, 9)
INTERMEDIATE = BoardConfig(16, 16)
EXPERT = BoardConfig(16, 30)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The board is fully laid out on construction: mines are placed and
    adjacency counts computed before the instance is returned. Pass
    ``mines`` to place mines at explicit positions instead of at random.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(
        default=None, repr=False, compare=False
    )
    mines: InitVar[Optional[Iterable[Position]]] = None
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)
    _mine_indices: List[int] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Lay out the board after dataclass creation."""
        self._init_grid()
        if mines is None:
            indices = self._random_mine_indices()
        else:
            indices = self._explicit_mine_indices(mines)
        self._place_mines(indices)
        self._calculate_adjacent_mines()

    @classmethod
    def with_mines(
        cls, rows: int, columns: int, mines: Iterable[Position]
    ) -> "Board":
        """Build a board with mines at the given (row, col) positions."""
        return cls(BoardConfig(rows, columns), mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._cells = [
            Cell() for _ in range(self.config.rows * self.config.columns)
        ]

    def _random_mine_indices(self) -> List[int]:
        """Shuffle every cell index and keep the first ``total_mines``."""
        shuffler = self.rng if self.rng is not None else random
        indices = list(range(len(self._cells)))
        shuffler.shuffle(indices)
        return indices[:self.config.total_mines]

    def _explicit_mine_indices(
        self, mines: Iterable[Position]
    ) -> List[int]:
        """Validate caller supplied mine positions."""
        indices = []
        for row, col in mines:
            index = self._index(row, col)
            if index in indices:
                raise BoardError(f"Duplicate mine position ({row}, {col})")
            indices.append(index)
        return indices

    def _place_mines(self, indices: List[int]) -> None:
        """Turn the cells at the given indices into mines."""
        for index in indices:
            self._cells[index].kind = CellKind.MINE
        self._mine_indices = sorted(indices)

    def _calculate_adjacent_mines(self) -> None:
        """Add one to the count of every neighbor of every mine."""
        for index in self._mine_indices:
            for neighbor in self._neighbor_indices(index):
                self._cells[neighbor].adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def _index(self, row: int, col: int) -> int:
        """Flat index of (row, col), raising if it lies off the board."""
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise OutOfBoundsError(
                    f"Position ({row!r}, {col!r}) must be integer indices"
                )
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(
                f"Position ({row}, {col}) is outside the "
                f"{self.config.rows}x{self.config.columns} board"
            )
        return row * self.config.columns + col

    def _position(self, index: int) -> Position:
        """(row, col) of a flat index."""
        return divmod(index, self.config.columns)

    def _neighbor_indices(self, index: int) -> List[int]:
        """Flat indices of the up to eight cells around ``index``."""
        row, col = self._position(index)
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append(new_row * self.config.columns + new_col)
        return neighbors

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        index = self._index(row, col)
        return [self._position(n) for n in self._neighbor_indices(index)]

    # ========================================================================
    # Reveal Propagation (Mid-level)
    # ========================================================================

    def _connected_lone_indices(self, origin: int) -> Set[int]:
        """
        Flood fill over lone cells starting at ``origin``.

        Two cells are connected when they are grid neighbors and both
        are lone. Returns an empty set if the origin itself is not lone.
        """
        if not self._cells[origin].is_lone:
            return set()

        connected: Set[int] = set()
        to_visit = [origin]
        while to_visit:
            index = to_visit.pop()
            if index in connected:
                continue
            connected.add(index)
            for neighbor in self._neighbor_indices(index):
                if neighbor not in connected and self._cells[neighbor].is_lone:
                    to_visit.append(neighbor)
        return connected

    def _reveal_connected_cells(self, origin: int) -> None:
        """Reveal the lone region around ``origin`` and its fringe."""
        connected = self._connected_lone_indices(origin)

        perimeter: Set[int] = set()
        for index in connected:
            perimeter.update(self._neighbor_indices(index))

        # Perimeter cells are never lone, so nothing here cascades further
        for index in connected | perimeter:
            self._cells[index].reveal()

    def connected_lone_cells(self, row: int, col: int) -> List[Position]:
        """
        Positions of the lone cells connected to (row, col).

        Returns:
            Sorted (row, col) tuples, empty if (row, col) is not lone.
        """
        connected = self._connected_lone_indices(self._index(row, col))
        return [self._position(index) for index in sorted(connected)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        Any marker on the cell is discarded. If the cell is empty with
        no adjacent mines, the whole connected lone region plus one
        layer of bordering cells is revealed as well.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the cell was revealed, False if it already was.
        """
        index = self._index(row, col)
        cell = self._cells[index]
        if not cell.reveal():
            return False
        if cell.is_lone:
            self._reveal_connected_cells(index)
        return True

    def flag_cell(self, row: int, col: int) -> bool:
        """Flag a cell. Ignored if the cell is revealed."""
        return self.get_cell(row, col).mark(CellMarker.FLAGGED)

    def question_cell(self, row: int, col: int) -> bool:
        """Question-mark a cell. Ignored if the cell is revealed."""
        return self.get_cell(row, col).mark(CellMarker.QUESTIONED)

    def unmark_cell(self, row: int, col: int) -> bool:
        """Clear any marker from a cell. Ignored if the cell is revealed."""
        return self.get_cell(row, col).unmark()

    def toggle_mark(self, row: int, col: int, marker: CellMarker) -> bool:
        """
        Toggle a marker on a cell.

        A marked cell (with either marker) is returned to hidden; an
        unmarked hidden cell receives ``marker``.

        Args:
            row: Row index.
            col: Column index.
            marker: Marker to place when the cell is unmarked.

        Returns:
            True if the cell changed, False if it is revealed.
        """
        return self.get_cell(row, col).toggle_mark(marker)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Board size as (rows, columns)."""
        return self.config.rows, self.config.columns

    @property
    def total_mines(self) -> int:
        """Number of mines on the board."""
        return len(self._mine_indices)

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, in row-major order."""
        return [self._position(index) for index in self._mine_indices]

    def is_game_lost(self) -> bool:
        """True once any mine has been revealed."""
        return any(self._cells[i].is_revealed for i in self._mine_indices)

    def is_game_won(self) -> bool:
        """True when every mine is flagged. Vacuously true with no mines."""
        return all(self._cells[i].is_flagged for i in self._mine_indices)

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.is_game_lost():
            return GameState.LOST
        if self.is_game_won():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(1 for cell in self._cells if cell.is_revealed)

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising OutOfBoundsError if invalid."""
        return self._cells[self._index(row, col)]

    def glyph(self, row: int, col: int) -> str:
        """Player-facing symbol of the cell at (row, col)."""
        return self.get_cell(row, col).glyph()

    def debug_glyph(self, row: int, col: int) -> str:
        """Content symbol of the cell at (row, col), ignoring visibility."""
        return self.get_cell(row, col).debug_glyph()

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                -3 = question-marked
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.array(
            [cell.to_observation() for cell in self._cells], dtype=np.int8
        )
        return obs.reshape(self.config.rows, self.config.columns)

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that are not yet revealed.

        Returns:
            List of (row, col) positions that can still be played.
        """
        return [
            self._position(index)
            for index, cell in enumerate(self._cells)
            if not cell.is_revealed
        ]


def new_board(
    rows: int,
    columns: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Lay out a new board with randomly placed mines.

    Args:
        rows: Number of rows, at least 1.
        columns: Number of columns, at least 1.
        seed: Seed for a private random generator. Ignored if ``rng``
            is given.
        rng: Random generator used to shuffle mine positions.

    Returns:
        A fully laid out board.

    Raises:
        InvalidDimensionsError: If either dimension is not positive.
    """
    config = BoardConfig(rows, columns)
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return Board(config, rng=rng)
