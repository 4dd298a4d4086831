"""
Minefield: a pure, immutable Minesweeper board engine.

Provides the grid model, mine generation, flood-fill reveal engine and
the game state machine, plus a Gymnasium environment for agents.
"""
from .cell import Cell, CellState
from .config import (
    Difficulty,
    DifficultyConfig,
    DIFFICULTIES,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    get_difficulty,
)
from .board import Board, make_empty_board, neighbors
from .generator import place_mines, compute_adjacent
from .reveal import (
    reveal_cell,
    toggle_flag,
    chord_reveal,
    check_win,
    reveal_all_mines,
)
from .state import (
    GameStatus,
    GameState,
    Move,
    MoveKind,
    make_initial_state,
    reveal,
    flag,
    chord,
    new_game,
    set_difficulty,
    tick,
    apply_move,
)
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "Cell",
    "CellState",
    "Difficulty",
    "DifficultyConfig",
    "DIFFICULTIES",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "get_difficulty",
    "Board",
    "make_empty_board",
    "neighbors",
    "place_mines",
    "compute_adjacent",
    "reveal_cell",
    "toggle_flag",
    "chord_reveal",
    "check_win",
    "reveal_all_mines",
    "GameStatus",
    "GameState",
    "Move",
    "MoveKind",
    "make_initial_state",
    "reveal",
    "flag",
    "chord",
    "new_game",
    "set_difficulty",
    "tick",
    "apply_move",
    "MinesweeperEnv",
    "render_ansi",
]
