"""
Cell module for the Minefield engine.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from dataclasses import dataclass, replace
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; transitions return a new cell, or the same
    cell when the transition is not allowed.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def revealed(self) -> "Cell":
        """
        Return this cell revealed.

        Returns:
            A revealed copy, or self if already revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return self
        return replace(self, state=CellState.REVEALED)

    def with_flag_toggled(self) -> "Cell":
        """
        Return this cell with its flag toggled.

        Returns:
            A flagged/unflagged copy, or self if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return self
        if self.state == CellState.HIDDEN:
            return replace(self, state=CellState.FLAGGED)
        return replace(self, state=CellState.HIDDEN)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
