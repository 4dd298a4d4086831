"""
Board module for the Minefield engine.

Implements the immutable grid of cells and the neighbor query every
other algorithm is built on.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]
Grid = Tuple[Tuple[Cell, ...], ...]


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable rectangular grid of cells.

    Boards compare by value. Operations that change cells return a new
    board sharing every untouched row with the original.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        cells: Row-major tuple of row tuples.
    """

    rows: int
    cols: int
    cells: Grid

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_position(self, row: int, col: int) -> None:
        """
        Ensure a position lies on the board.

        Raises:
            IndexError: If the position is out of bounds.
        """
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside the "
                f"{self.rows}x{self.cols} board"
            )

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        self.check_position(row, col)
        return self.cells[row][col]

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising IndexError if invalid."""
        return self[row, col]

    def with_cells(self, updates: Dict[Position, Cell]) -> "Board":
        """
        Return a board with the given cells replaced.

        Args:
            updates: Mapping of (row, col) to the new cell.

        Returns:
            New board, or self when there is nothing to update.
        """
        if not updates:
            return self
        rows: List[Tuple[Cell, ...]] = list(self.cells)
        by_row: Dict[int, Dict[int, Cell]] = {}
        for (row, col), cell in updates.items():
            self.check_position(row, col)
            by_row.setdefault(row, {})[col] = cell
        for row, changed in by_row.items():
            rows[row] = tuple(
                changed.get(col, cell) for col, cell in enumerate(rows[row])
            )
        return Board(self.rows, self.cols, tuple(rows))

    # ========================================================================
    # Counts (High-level)
    # ========================================================================

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(cell.is_revealed for row in self.cells for cell in row)

    @property
    def flagged_count(self) -> int:
        """Number of flagged cells."""
        return sum(cell.is_flagged for row in self.cells for cell in row)

    @property
    def mine_count(self) -> int:
        """Number of cells holding a mine."""
        return sum(cell.is_mine for row in self.cells for cell in row)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self.cells[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [
            (row, col) for row, col in self.positions()
            if self.cells[row][col].is_hidden
        ]


# ============================================================================
# Construction and Neighbors
# ============================================================================

def make_empty_board(rows: int, cols: int) -> Board:
    """
    Create a blank board: no mines, nothing revealed or flagged.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if rows < 1 or cols < 1:
        raise ValueError("Board dimensions must be positive")
    blank = Cell()
    return Board(rows, cols, tuple((blank,) * cols for _ in range(rows)))


def neighbors(board: Board, row: int, col: int) -> List[Position]:
    """
    Get the in-bounds neighbors of a cell, diagonals included.

    Args:
        board: Board to query.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        Up to 8 (row, col) tuples in row-major order; fewer at edges.
    """
    board.check_position(row, col)
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if board.is_valid_position(new_row, new_col):
                result.append((new_row, new_col))
    return result
