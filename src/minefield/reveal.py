"""
Reveal engine: flood-fill reveal, flagging, chord reveal and the
board-level win/loss helpers.

All functions take a board and return a board. An illegal move returns
the input board itself.
"""
from collections import deque
from dataclasses import replace
from typing import Deque, Dict, Optional

from .board import Board, Position, neighbors
from .cell import Cell, CellState


# ============================================================================
# Reveal
# ============================================================================

def reveal_cell(board: Board, row: int, col: int) -> Board:
    """
    Reveal a cell, flood-filling across connected zero-count cells.

    Breadth-first: every newly revealed non-mine cell with no adjacent
    mines reveals and enqueues its hidden, unflagged neighbors. Numbered
    cells are revealed but stop the fill. Flagged cells are never
    revealed. Revealing a mine succeeds; detecting the loss is up to
    the caller.

    Args:
        board: Board to reveal on.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        New board, or the input board if the cell is revealed or flagged.

    Raises:
        IndexError: If the position is outside the board.
    """
    cell = board[row, col]
    if not cell.is_hidden:
        return board

    updates: Dict[Position, Cell] = {(row, col): cell.revealed()}
    queue: Deque[Position] = deque([(row, col)])

    while queue:
        current_row, current_col = queue.popleft()
        current = updates[(current_row, current_col)]
        if current.is_mine or current.adjacent_mines != 0:
            continue
        for position in neighbors(board, current_row, current_col):
            if position in updates:
                continue
            neighbor = board.cells[position[0]][position[1]]
            if neighbor.is_hidden:
                updates[position] = neighbor.revealed()
                queue.append(position)

    return board.with_cells(updates)


def toggle_flag(board: Board, row: int, col: int) -> Board:
    """
    Toggle the flag on an unrevealed cell.

    Returns:
        New board, or the input board if the cell is revealed.

    Raises:
        IndexError: If the position is outside the board.
    """
    cell = board[row, col]
    toggled = cell.with_flag_toggled()
    if toggled is cell:
        return board
    return board.with_cells({(row, col): toggled})


def count_adjacent_flags(board: Board, row: int, col: int) -> int:
    """Count flagged cells adjacent to position."""
    return sum(
        board.cells[n_row][n_col].is_flagged
        for n_row, n_col in neighbors(board, row, col)
    )


def chord_reveal(board: Board, row: int, col: int) -> Board:
    """
    Reveal every unflagged neighbor of a satisfied numbered cell.

    Applies only to a revealed cell with a non-zero count whose flagged
    neighbors number exactly its count. Each neighbor goes through
    reveal_cell, so flood fill applies.

    Returns:
        New board, or the input board if the chord does not apply.

    Raises:
        IndexError: If the position is outside the board.
    """
    cell = board[row, col]
    if not cell.is_revealed or cell.adjacent_mines == 0:
        return board
    if count_adjacent_flags(board, row, col) != cell.adjacent_mines:
        return board

    result = board
    for n_row, n_col in neighbors(board, row, col):
        result = reveal_cell(result, n_row, n_col)
    return result


# ============================================================================
# Terminal Conditions
# ============================================================================

def check_win(board: Board, total_mines: int) -> bool:
    """Check if every non-mine cell is revealed. Flags are irrelevant."""
    return board.revealed_count == board.total_cells - total_mines


def reveal_all_mines(board: Board) -> Board:
    """Reveal every mine, flagged or not. Called on loss."""
    updates: Dict[Position, Cell] = {}
    for row, col in board.positions():
        cell = board.cells[row][col]
        if cell.is_mine and not cell.is_revealed:
            updates[(row, col)] = replace(cell, state=CellState.REVEALED)
    return board.with_cells(updates)


def first_revealed_mine(board: Board) -> Optional[Position]:
    """Return the first revealed mine in row-major order, or None."""
    for row, col in board.positions():
        cell = board.cells[row][col]
        if cell.is_mine and cell.is_revealed:
            return row, col
    return None
