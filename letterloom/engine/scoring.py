"""Word scoring."""

import math
from typing import Dict, Mapping, Sequence

from .models import Cell


# Point value of each letter
LETTER_SCORES: Dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10,
}

# Whole-word bonus by word length; unlisted lengths score 1x
LENGTH_BONUSES: Dict[int, float] = {
    4: 1.5,
    5: 2.0,
    6: 2.5,
    7: 3.0,
    8: 4.0,
}

BASE_SCORE_PER_LETTER = 10


def score_path(
    path: Sequence[Cell],
    letter_values: Mapping[str, int] = LETTER_SCORES,
    length_bonuses: Mapping[int, float] = LENGTH_BONUSES,
    base_multiplier: int = BASE_SCORE_PER_LETTER,
) -> int:
    """
    Score a path of cells.

    Each letter's value is multiplied by its tile multiplier, the sum is
    multiplied by the length bonus and the base multiplier, and the result
    is floored.

    Args:
        path: Cells of the word in order
        letter_values: Point value per letter (missing letters score 1)
        length_bonuses: Multiplier per word length (missing lengths use 1.0)
        base_multiplier: Flat multiplier applied to every word

    Returns:
        The integer score
    """
    raw = sum(letter_values.get(cell.letter, 1) * cell.multiplier for cell in path)
    bonus = length_bonuses.get(len(path), 1.0)
    return math.floor(raw * bonus * base_multiplier)


def calculate_stars(score: int, target_score: int) -> int:
    """Stars earned: 1 at the target, 2 at 1.5x, 3 at 2x."""
    if target_score <= 0:
        return 3
    ratio = score / target_score
    if ratio >= 2:
        return 3
    if ratio >= 1.5:
        return 2
    if ratio >= 1:
        return 1
    return 0
