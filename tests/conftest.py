"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellKind, new_board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 12 mines."""
    return new_board(9, 9, seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.with_mines(3, 3, [(0, 0)])


@pytest.fixture
def walled_board() -> Board:
    """3x5 board split by a column of mines down the middle."""
    return Board.with_mines(3, 5, [(0, 2), (1, 2), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.with_mines(5, 5, [])


@pytest.fixture
def four_by_four_board() -> Board:
    """Randomly laid out 4x4 board."""
    return new_board(4, 4, seed=7)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellKind.MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration used by environment tests."""
    return BoardConfig(3, 3)
