"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    Cell,
    Difficulty,
    GameState,
    GameStatus,
    compute_adjacent,
    make_empty_board,
    make_initial_state,
)


def build_board(layout: List[str]) -> Board:
    """Build a board from rows of '*' (mine) and '.' (safe), with counts."""
    board = make_empty_board(len(layout), len(layout[0]))
    mines = {
        (row, col): Cell(is_mine=True)
        for row, line in enumerate(layout)
        for col, char in enumerate(line)
        if char == "*"
    }
    return compute_adjacent(board.with_cells(mines))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    """Factory building a generated board from a text layout."""
    return build_board


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return make_empty_board(5, 5)


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return build_board([
        "*..",
        "...",
        "...",
    ])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board split by a vertical wall of mines in column 2."""
    return build_board([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


@pytest.fixture
def beginner_layout() -> Board:
    """9x9 board with 10 mines: (0, 0) and the whole bottom row."""
    return build_board([
        "*........",
        ".........",
        ".........",
        ".........",
        ".........",
        ".........",
        ".........",
        ".........",
        "*********",
    ])


# ============================================================================
# State Fixtures
# ============================================================================

@pytest.fixture
def idle_state() -> GameState:
    """Fresh beginner game."""
    return make_initial_state(Difficulty.BEGINNER)


@pytest.fixture
def playing_state(beginner_layout: Board) -> GameState:
    """Beginner game in progress on the known layout, nothing revealed."""
    return GameState(
        board=beginner_layout,
        status=GameStatus.PLAYING,
        difficulty=Difficulty.BEGINNER,
        mines_placed=True,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source."""
    return np.random.default_rng(1234)


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
    return Cell(is_mine=True)
