"""
Gymnasium environment wrapper for the Minefield engine.

Lets agents play games through the state machine with a standard RL
interface.
"""
import logging
from typing import Any, Dict, Optional, Tuple, SupportsFloat, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import Difficulty
from .state import GameState, make_initial_state, reveal


logger = logging.getLogger(__name__)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.BEGINNER,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Difficulty preset (default: beginner 9x9, 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.state: GameState = make_initial_state(difficulty)
        self.config = self.state.config
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.state = make_initial_state(self.state.difficulty)
        self._steps = 0
        return self.state.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.state.board.get_observation()
        terminated = self.state.is_terminal

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.cols, int(action) % self.config.cols

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Apply a reveal and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        previous = self.state
        self.state = reveal(previous, row, col, rng=self.np_random)

        if self.state is previous:
            logger.debug("Invalid action at (%d, %d)", row, col)
            return -0.1
        if self.state.is_won:
            return 10.0
        if self.state.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.state.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": self.state.status.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.state)
        if self.render_mode == "human":
            print(render_ansi(self.state))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.state.board.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(state: GameState) -> str:
    """Render board as ASCII string."""
    obs = state.board.get_observation()
    symbols = {-1: ".", -2: "F", 9: "*", 0: " "}

    lines = []
    for row in range(state.board.rows):
        lines.append(
            "".join(
                symbols.get(int(val), str(val)) + " " for val in obs[row]
            )
        )
    return "\n".join(lines)
