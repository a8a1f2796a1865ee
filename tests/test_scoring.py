"""Tests for word scoring."""

from letterloom.engine import (
    BASE_SCORE_PER_LETTER,
    LENGTH_BONUSES,
    LETTER_SCORES,
    Cell,
    calculate_stars,
    score_path,
)


def make_path(word, multipliers=None):
    """Cells along row 0 spelling `word`, with optional {position: factor}."""
    multipliers = multipliers or {}
    return [
        Cell(letter=letter, row=0, col=i, index=i, multiplier=multipliers.get(i, 1))
        for i, letter in enumerate(word)
    ]


CAT_VALUES = {"C": 3, "A": 1, "T": 1}


class TestScorePath:
    """Letter values, tile multipliers and length bonuses."""

    def test_plain_word(self):
        """(3 + 1 + 1) * 1.0 * 10 = 50."""
        score = score_path(make_path("CAT"), CAT_VALUES, {3: 1.0}, 10)
        assert score == 50

    def test_multiplier_tile(self):
        """A 2x tile on A: (3 + 1*2 + 1) * 1.0 * 10 = 60."""
        score = score_path(make_path("CAT", {1: 2}), CAT_VALUES, {3: 1.0}, 10)
        assert score == 60

    def test_length_bonus(self):
        """Length 4 scores 1.5x by default."""
        path = make_path("CART")
        raw = sum(LETTER_SCORES[c] for c in "CART")
        assert score_path(path) == int(raw * 1.5 * BASE_SCORE_PER_LETTER)

    def test_missing_length_uses_one(self):
        assert score_path(make_path("CAT"), CAT_VALUES, {}, 1) == 5

    def test_unknown_letter_scores_one(self):
        assert score_path(make_path("CAT"), {}, {}, 1) == 3

    def test_result_floored(self):
        """Fractional bonuses round down."""
        assert score_path(make_path("AAA"), {"A": 1}, {3: 1.55}, 1) == 4

    def test_deterministic(self):
        path = make_path("PUZZLE", {2: 3})
        assert score_path(path) == score_path(path)

    def test_longer_paths_never_score_less(self):
        """With equal letters, score does not drop as length grows."""
        scores = [score_path(make_path("E" * n)) for n in range(3, 9)]
        assert scores == sorted(scores)

    def test_default_tables(self):
        assert LENGTH_BONUSES[8] == 4.0
        assert LETTER_SCORES["Q"] == 10
        assert set(LETTER_SCORES) == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class TestCalculateStars:
    """Stars earned against the target score."""

    def test_thresholds(self):
        assert calculate_stars(0, 100) == 0
        assert calculate_stars(99, 100) == 0
        assert calculate_stars(100, 100) == 1
        assert calculate_stars(150, 100) == 2
        assert calculate_stars(199, 100) == 2
        assert calculate_stars(200, 100) == 3

    def test_zero_target(self):
        assert calculate_stars(0, 0) == 3
