"""Tests for grid and level models."""

import pytest
from pydantic import ValidationError

from letterloom.engine import Cell, Difficulty, Grid, Level, MultiplierTile


class TestGrid:
    """Grid construction and cell access."""

    def test_letters_from_string(self):
        """A string of letters is split and uppercased."""
        grid = Grid(letters="catxx" + "x" * 20)
        assert grid.letters[:3] == ["C", "A", "T"]
        assert len(grid.letters) == 25

    def test_wrong_letter_count(self):
        """A grid must have exactly size * size letters."""
        with pytest.raises(ValidationError):
            Grid(letters="CAT")

    def test_non_letter_rejected(self):
        """Only A-Z are allowed."""
        with pytest.raises(ValidationError):
            Grid(size=3, letters="CA1XXXXXX")

    def test_duplicate_multiplier_index(self):
        """Multiplier indices must be unique."""
        with pytest.raises(ValidationError):
            Grid(
                letters="X" * 25,
                multipliers=[MultiplierTile(index=3, factor=2), MultiplierTile(index=3, factor=3)],
            )

    def test_multiplier_out_of_range(self):
        """Multiplier indices must be inside the grid."""
        with pytest.raises(ValidationError):
            Grid(letters="X" * 25, multipliers=[MultiplierTile(index=25, factor=2)])

    def test_invalid_factor(self):
        """Only 2x and 3x tiles exist."""
        with pytest.raises(ValidationError):
            MultiplierTile(index=0, factor=4)

    def test_cells_row_major(self):
        """Cells carry row, column, index and multiplier."""
        grid = Grid(size=3, letters="CATOREDOG", multipliers=[MultiplierTile(index=4, factor=3)])
        cells = grid.cells

        assert cells[5] == Cell(letter="E", row=1, col=2, index=5)
        assert cells[4].multiplier == 3
        assert cells[0].multiplier == 1
        assert grid.cell_at_position(2, 2).letter == "G"

    def test_cell_at_out_of_range(self):
        grid = Grid(size=3, letters="CATOREDOG")
        with pytest.raises(IndexError):
            grid.cell_at(9)
        with pytest.raises(IndexError):
            grid.cell_at_position(0, 3)

    def test_word_for_indices(self):
        grid = Grid(size=3, letters="CATOREDOG")
        assert grid.word_for([0, 1, 4, 2]) == "CART"

    def test_with_multipliers_copies(self):
        """Attaching multipliers leaves the original grid untouched."""
        grid = Grid(letters="X" * 25)
        bonus = grid.with_multipliers([MultiplierTile(index=7, factor=2)])

        assert grid.multipliers == []
        assert bonus.multiplier_map == {7: 2}
        assert bonus.letters == grid.letters


class TestLevel:
    """Level records and serialization."""

    def make_level(self, **overrides):
        fields = dict(
            id=12,
            difficulty="medium",
            grid=Grid(letters="CATXX" + "X" * 20, multipliers=[MultiplierTile(index=1, factor=3)]),
            target_score=1650,
            is_premium=False,
            valid_words={"cat"},
        )
        fields.update(overrides)
        return Level(**fields)

    def test_words_uppercased(self):
        level = self.make_level()
        assert level.valid_words == frozenset({"CAT"})
        assert level.difficulty is Difficulty.MEDIUM

    def test_level_is_frozen(self):
        """Accepted levels cannot be mutated."""
        level = self.make_level()
        with pytest.raises(ValidationError):
            level.target_score = 0

    def test_multiplier_tiles_from_grid(self):
        level = self.make_level()
        assert level.multiplier_tiles == [MultiplierTile(index=1, factor=3)]

    def test_record_format(self):
        """Records use the content-store field names."""
        record = self.make_level(time_limit=90).to_record()

        assert record["id"] == 12
        assert record["difficulty"] == "medium"
        assert record["letters"][:3] == ["C", "A", "T"]
        assert record["targetScore"] == 1650
        assert record["timeLimit"] == 90
        assert record["isPremium"] is False
        assert record["validWords"] == ["CAT"]
        assert record["multiplierPositions"] == [{"index": 1, "factor": 3}]

    def test_untimed_record_omits_time_limit(self):
        record = self.make_level().to_record()
        assert "timeLimit" not in record

    def test_from_record(self):
        """A record rebuilds an equal level."""
        level = self.make_level(time_limit=90, is_premium=True)
        assert Level.from_record(level.to_record()) == level

    def test_from_record_reads_multiplier_positions(self):
        """Bonus tiles are read from the multiplierPositions key."""
        record = {
            "id": 3,
            "difficulty": "easy",
            "letters": list("CATXX" + "X" * 20),
            "targetScore": 650,
            "isPremium": False,
            "validWords": ["CAT"],
            "multiplierPositions": [{"index": 2, "factor": 2}],
        }
        level = Level.from_record(record)
        assert level.grid.multiplier_map == {2: 2}
