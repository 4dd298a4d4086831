"""
Game state machine for the Minefield engine.

Every move is a pure function ``(state, ...) -> state``. Rejected moves
return the input state object unchanged; only out-of-range coordinates
raise.

Lifecycle::

    idle --reveal/flag--> playing --+--> won
                                    +--> lost
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

import numpy as np

from .board import Board, Position, make_empty_board
from .config import Difficulty, DifficultyConfig, get_difficulty
from .generator import compute_adjacent, place_mines
from .reveal import (
    check_win,
    chord_reveal,
    first_revealed_mine,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(str, Enum):
    """Possible states of the game."""

    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


TERMINAL_STATUSES = frozenset({GameStatus.WON, GameStatus.LOST})


# ============================================================================
# Game State
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    Authoritative snapshot of one game.

    Attributes:
        board: Current board.
        status: Lifecycle status.
        difficulty: Difficulty the game was started with.
        flag_count: Flags placed, never clamped to the mine count.
        elapsed: Seconds counted by the external timer via tick().
        start_time: Caller-supplied timestamp of the first move, if any.
        losing_cell: Mine that ended the game, or None.
        mines_placed: Whether the first reveal has generated the layout.
    """

    board: Board
    status: GameStatus = GameStatus.IDLE
    difficulty: Difficulty = Difficulty.BEGINNER
    flag_count: int = 0
    elapsed: int = 0
    start_time: Optional[float] = None
    losing_cell: Optional[Position] = None
    mines_placed: bool = False

    @property
    def config(self) -> DifficultyConfig:
        """Board dimensions and mine count for this game."""
        return get_difficulty(self.difficulty)

    @property
    def is_terminal(self) -> bool:
        """Check if the game is won or lost."""
        return self.status in TERMINAL_STATUSES

    @property
    def is_playing(self) -> bool:
        """Check if game is in progress."""
        return self.status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.config.num_mines - self.flag_count


def make_initial_state(
    difficulty: Union[Difficulty, str] = Difficulty.BEGINNER,
) -> GameState:
    """
    Create a fresh idle game with a blank, unmined board.

    Raises:
        ValueError: If the difficulty is unknown.
    """
    config = get_difficulty(difficulty)
    return GameState(
        board=make_empty_board(config.rows, config.cols),
        difficulty=Difficulty(difficulty),
    )


# ============================================================================
# Moves
# ============================================================================

def reveal(
    state: GameState,
    row: int,
    col: int,
    rng: Optional[np.random.Generator] = None,
    now: Optional[float] = None,
) -> GameState:
    """
    Reveal a cell.

    The first reveal places mines around a safe 3x3 block centred on the
    target. Revealing a mine loses the game and exposes every mine.

    Args:
        state: Current state.
        row: Row index to reveal.
        col: Column index to reveal.
        rng: Random source for mine placement.
        now: Timestamp recorded as start_time when the game starts.

    Returns:
        New state, or the input state if the move is rejected.

    Raises:
        IndexError: If the position is outside the board.
    """
    cell = state.board[row, col]
    if state.is_terminal or not cell.is_hidden:
        logger.debug(
            "Rejected reveal at (%d, %d) in %s", row, col, state.status.value
        )
        return state

    board = state.board
    status = state.status
    start_time = state.start_time
    mines_placed = state.mines_placed

    if not mines_placed:
        board = place_mines(board, state.config.num_mines, row, col, rng=rng)
        board = compute_adjacent(board)
        mines_placed = True
        logger.debug(
            "Placed %d mines around safe cell (%d, %d)",
            state.config.num_mines, row, col,
        )
    if status == GameStatus.IDLE:
        status = GameStatus.PLAYING
        start_time = now

    board = reveal_cell(board, row, col)
    started = replace(
        state,
        board=board,
        status=status,
        start_time=start_time,
        mines_placed=mines_placed,
    )

    if board[row, col].is_mine:
        logger.debug("Mine revealed at (%d, %d); game lost", row, col)
        return replace(
            started,
            board=reveal_all_mines(board),
            status=GameStatus.LOST,
            losing_cell=(row, col),
        )
    return _check_won(started)


def flag(
    state: GameState,
    row: int,
    col: int,
    now: Optional[float] = None,
) -> GameState:
    """
    Toggle a flag and adjust flag_count by one.

    Flagging from idle starts the game but does not place mines.

    Returns:
        New state, or the input state if the move is rejected.

    Raises:
        IndexError: If the position is outside the board.
    """
    cell = state.board[row, col]
    if state.is_terminal or cell.is_revealed:
        logger.debug(
            "Rejected flag at (%d, %d) in %s", row, col, state.status.value
        )
        return state

    board = toggle_flag(state.board, row, col)
    delta = 1 if board[row, col].is_flagged else -1
    if state.status == GameStatus.IDLE:
        return replace(
            state,
            board=board,
            flag_count=state.flag_count + delta,
            status=GameStatus.PLAYING,
            start_time=now,
        )
    return replace(state, board=board, flag_count=state.flag_count + delta)


def chord(state: GameState, row: int, col: int) -> GameState:
    """
    Chord-reveal around a satisfied numbered cell.

    If any mine ends up revealed the game is lost, with losing_cell set
    to the first revealed mine in row-major order.

    Returns:
        New state, or the input state if the move is rejected or the
        chord does not apply.

    Raises:
        IndexError: If the position is outside the board.
    """
    state.board.check_position(row, col)
    if state.status != GameStatus.PLAYING:
        return state

    board = chord_reveal(state.board, row, col)
    if board is state.board:
        return state

    mine = first_revealed_mine(board)
    if mine is not None:
        logger.debug("Chord at (%d, %d) hit mine %s; game lost", row, col, mine)
        return replace(
            state,
            board=reveal_all_mines(board),
            status=GameStatus.LOST,
            losing_cell=mine,
        )
    return _check_won(replace(state, board=board))


def new_game(
    state: GameState,
    difficulty: Optional[Union[Difficulty, str]] = None,
) -> GameState:
    """Start over, keeping the current difficulty unless one is given."""
    return make_initial_state(
        state.difficulty if difficulty is None else difficulty
    )


def set_difficulty(
    state: GameState, difficulty: Union[Difficulty, str]
) -> GameState:
    """Switch difficulty, discarding the current game."""
    return make_initial_state(difficulty)


def tick(state: GameState) -> GameState:
    """Advance elapsed by one second while playing; no-op otherwise."""
    if state.status != GameStatus.PLAYING:
        return state
    return replace(state, elapsed=state.elapsed + 1)


def _check_won(state: GameState) -> GameState:
    """Move to WON if every non-mine cell is revealed."""
    if check_win(state.board, state.config.num_mines):
        logger.debug("All safe cells revealed; game won")
        return replace(state, status=GameStatus.WON)
    return state


# ============================================================================
# Move Dispatch
# ============================================================================

class MoveKind(str, Enum):
    """Kinds of move a caller can issue."""

    REVEAL = "reveal"
    FLAG = "flag"
    CHORD = "chord"
    NEW_GAME = "new_game"
    SET_DIFFICULTY = "set_difficulty"
    TICK = "tick"


CELL_MOVES = frozenset({MoveKind.REVEAL, MoveKind.FLAG, MoveKind.CHORD})


@dataclass(frozen=True)
class Move:
    """A single move request."""

    kind: MoveKind
    row: Optional[int] = None
    col: Optional[int] = None
    difficulty: Optional[Union[Difficulty, str]] = None


def apply_move(
    state: GameState,
    move: Move,
    rng: Optional[np.random.Generator] = None,
    now: Optional[float] = None,
) -> GameState:
    """
    Apply a move to a state.

    Args:
        state: Current state.
        move: Move to apply.
        rng: Random source forwarded to reveal.
        now: Timestamp forwarded to reveal and flag.

    Returns:
        Resulting state.

    Raises:
        ValueError: If a cell move lacks coordinates or a difficulty
            change lacks a difficulty.
        IndexError: If the coordinates are outside the board.
    """
    kind = MoveKind(move.kind)
    if kind in CELL_MOVES and (move.row is None or move.col is None):
        raise ValueError(f"{kind.value} move requires row and col")

    if kind == MoveKind.REVEAL:
        return reveal(state, move.row, move.col, rng=rng, now=now)
    if kind == MoveKind.FLAG:
        return flag(state, move.row, move.col, now=now)
    if kind == MoveKind.CHORD:
        return chord(state, move.row, move.col)
    if kind == MoveKind.NEW_GAME:
        return new_game(state, move.difficulty)
    if kind == MoveKind.SET_DIFFICULTY:
        if move.difficulty is None:
            raise ValueError("set_difficulty move requires a difficulty")
        return set_difficulty(state, move.difficulty)
    return tick(state)
