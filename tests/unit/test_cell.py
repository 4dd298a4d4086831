"""
Unit tests for Cell class.

Tests immutable cell transitions and observation conversion.
"""
import dataclasses

import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden and unflagged."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_revealed is False
        assert cell.is_flagged is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0

    def test_cell_is_frozen(self, hidden_cell: Cell) -> None:
        """Cells cannot be mutated in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            hidden_cell.is_mine = True


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal transition."""

    def test_revealed_returns_revealed_copy(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell gives a new revealed cell."""
        result = hidden_cell.revealed()
        assert result.is_revealed is True
        assert hidden_cell.is_hidden is True

    def test_reveal_keeps_content(self) -> None:
        """Revealing keeps mine flag and count."""
        cell = Cell(is_mine=False, adjacent_mines=4).revealed()
        assert cell.adjacent_mines == 4
        assert cell.is_mine is False

    def test_reveal_already_revealed_is_noop(self, hidden_cell: Cell) -> None:
        """Revealing twice returns the same cell."""
        revealed = hidden_cell.revealed()
        assert revealed.revealed() is revealed

    def test_reveal_flagged_cell_is_noop(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        flagged = hidden_cell.with_flag_toggled()
        assert flagged.revealed() is flagged


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flag transition."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell changes its state."""
        flagged = hidden_cell.with_flag_toggled()
        assert flagged.state == CellState.FLAGGED
        assert flagged.is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice returns an equal hidden cell."""
        result = hidden_cell.with_flag_toggled().with_flag_toggled()
        assert result.is_hidden is True
        assert result == hidden_cell

    def test_flag_revealed_cell_is_noop(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        revealed = hidden_cell.revealed()
        assert revealed.with_flag_toggled() is revealed


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for agents."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """Hidden mines do not leak through the observation."""
        assert mine_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        assert hidden_cell.with_flag_toggled().to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count).revealed()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        assert mine_cell.revealed().to_observation() == 9
