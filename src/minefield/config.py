"""
Difficulty configuration for the Minefield engine.

Provides the fixed table of board sizes and mine counts a game can be
started with.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


# ============================================================================
# Constants
# ============================================================================

# The first reveal keeps a 3x3 block mine-free.
EXCLUSION_ZONE_SIZE = 9


class Difficulty(str, Enum):
    """Named difficulty levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


@dataclass(frozen=True)
class DifficultyConfig:
    """
    Board dimensions and mine count for a difficulty level.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - EXCLUSION_ZONE_SIZE
        if self.num_mines > max(max_mines, 0):
            raise ValueError(f"Too many mines (max {max(max_mines, 0)})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = DifficultyConfig(9, 9, 10)
INTERMEDIATE = DifficultyConfig(16, 16, 40)
EXPERT = DifficultyConfig(16, 30, 99)

DIFFICULTIES: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.BEGINNER: BEGINNER,
    Difficulty.INTERMEDIATE: INTERMEDIATE,
    Difficulty.EXPERT: EXPERT,
}


def get_difficulty(name: Union[Difficulty, str]) -> DifficultyConfig:
    """
    Look up a difficulty preset by name.

    Args:
        name: A Difficulty member or its string value (e.g. "expert").

    Returns:
        The matching DifficultyConfig.

    Raises:
        ValueError: If the name is not a known difficulty.
    """
    try:
        return DIFFICULTIES[Difficulty(name)]
    except ValueError:
        known = ", ".join(level.value for level in Difficulty)
        raise ValueError(
            f"Unknown difficulty {name!r} (expected one of: {known})"
        ) from None
