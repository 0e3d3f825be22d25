"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/revealed/marked) and content (mine/empty plus adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """What a cell contains. Fixed once the board is laid out."""

    MINE = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    MARKED = auto()


class CellMarker(Enum):
    """Marker a player can place on a non-revealed cell."""

    FLAGGED = auto()
    QUESTIONED = auto()


# Glyphs used when drawing cells in a terminal
MINE_GLYPH = "●"  # black circle
HIDDEN_GLYPH = "□"  # white square
FLAG_GLYPH = "⚑"  # black flag
QUESTION_GLYPH = "?"
REVEALED_GLYPH = "0"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        kind: Whether this cell holds a mine or is empty.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or marked).
        marker: Which marker is placed; None unless state is MARKED.
    """

    kind: CellKind = CellKind.EMPTY
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    marker: Optional[CellMarker] = None

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any marker on it.

        Returns:
            True if the cell was revealed, False if it already was.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        self.marker = None
        return True

    def mark(self, marker: CellMarker) -> bool:
        """
        Place a marker on this cell, replacing any existing one.

        Returns:
            True if the cell changed, False if it is revealed or already
            carries this marker.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.marker == marker:
            return False
        self.state = CellState.MARKED
        self.marker = marker
        return True

    def unmark(self) -> bool:
        """
        Return a marked cell to hidden.

        Returns:
            True if a marker was removed, False otherwise.
        """
        if self.state != CellState.MARKED:
            return False
        self.state = CellState.HIDDEN
        self.marker = None
        return True

    def toggle_mark(self, marker: CellMarker) -> bool:
        """
        Clear the marker if the cell has any, otherwise place `marker`.

        Returns:
            True if the cell changed, False if it is revealed.
        """
        if self.state == CellState.MARKED:
            return self.unmark()
        return self.mark(marker)

    @property
    def is_mine(self) -> bool:
        """Check if cell contains a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_lone(self) -> bool:
        """Check if cell is empty and touches no mines."""
        return self.kind == CellKind.EMPTY and self.adjacent_mines == 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell carries any marker."""
        return self.state == CellState.MARKED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.marker == CellMarker.FLAGGED

    @property
    def is_questioned(self) -> bool:
        """Check if cell is question-marked."""
        return self.marker == CellMarker.QUESTIONED

    def glyph(self) -> str:
        """
        Symbol shown to the player for this cell.

        Returns:
            One of the hidden, flag or question glyphs for non-revealed
            cells; for revealed cells the mine glyph, "0" for no adjacent
            mines, or the digit 1-8.
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_GLYPH
        if self.state == CellState.MARKED:
            if self.marker == CellMarker.FLAGGED:
                return FLAG_GLYPH
            return QUESTION_GLYPH
        if self.is_mine:
            return MINE_GLYPH
        if self.adjacent_mines > 0:
            return str(self.adjacent_mines)
        return REVEALED_GLYPH

    def debug_glyph(self) -> str:
        """Symbol showing the cell's content regardless of visibility."""
        if self.is_mine:
            return MINE_GLYPH
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Question-marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.MARKED:
            return -2 if self.marker == CellMarker.FLAGGED else -3
        if self.is_mine:
            return 9
        return self.adjacent_mines
