"""
Mine placement and adjacency counting.

Mines are placed lazily on the first reveal so that the clicked cell
and its neighbors are always safe.
"""
from dataclasses import replace
from typing import List, Optional, Set

import numpy as np

from .board import Board, Position, neighbors


def _exclusion_zone(
    board: Board, safe_row: int, safe_col: int
) -> Set[Position]:
    """The safe cell plus its in-bounds neighbors."""
    zone = set(neighbors(board, safe_row, safe_col))
    zone.add((safe_row, safe_col))
    return zone


def _mine_candidates(
    board: Board, safe_row: int, safe_col: int
) -> List[Position]:
    """Positions eligible for a mine, in row-major order."""
    excluded = _exclusion_zone(board, safe_row, safe_col)
    return [pos for pos in board.positions() if pos not in excluded]


def place_mines(
    board: Board,
    mine_count: int,
    safe_row: int,
    safe_col: int,
    rng: Optional[np.random.Generator] = None,
) -> Board:
    """
    Randomly place mines, keeping the safe cell and its neighbors clear.

    Positions are drawn uniformly without replacement from every cell
    outside the 3x3 exclusion zone. Any mines already on the board are
    replaced; adjacency counts are left untouched.

    Args:
        board: Board to place mines on.
        mine_count: Exact number of mines to place.
        safe_row: Row of the first revealed cell.
        safe_col: Column of the first revealed cell.
        rng: Random source; a fresh default generator when omitted.

    Returns:
        New board with exactly ``mine_count`` mines.

    Raises:
        IndexError: If the safe cell is outside the board.
        ValueError: If ``mine_count`` is negative or exceeds the number
            of eligible cells.
    """
    candidates = _mine_candidates(board, safe_row, safe_col)
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    if mine_count > len(candidates):
        raise ValueError(
            f"Too many mines ({mine_count}) for a {board.rows}x{board.cols} "
            f"board with safe cell ({safe_row}, {safe_col}); "
            f"max {len(candidates)}"
        )

    rng = rng if rng is not None else np.random.default_rng()
    chosen = rng.choice(len(candidates), size=mine_count, replace=False)
    mine_positions = {candidates[index] for index in chosen}

    updates = {}
    for row, col in board.positions():
        cell = board.cells[row][col]
        is_mine = (row, col) in mine_positions
        if cell.is_mine != is_mine:
            updates[(row, col)] = replace(cell, is_mine=is_mine)
    return board.with_cells(updates)


def compute_adjacent(board: Board) -> Board:
    """
    Fill in adjacent mine counts from the current mine layout.

    Mine cells get a count of 0. Must run once, right after placement.
    """
    updates = {}
    for row, col in board.positions():
        cell = board.cells[row][col]
        if cell.is_mine:
            count = 0
        else:
            count = sum(
                board.cells[n_row][n_col].is_mine
                for n_row, n_col in neighbors(board, row, col)
            )
        if cell.adjacent_mines != count:
            updates[(row, col)] = replace(cell, adjacent_mines=count)
    return board.with_cells(updates)
