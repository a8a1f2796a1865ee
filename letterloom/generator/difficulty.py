"""Per-difficulty generation parameters."""

import math
from typing import Dict

from ..engine.models import Difficulty, GRID_SIZE
from .models import DifficultySettings


# Harder levels get fewer vowels, fewer bonus tiles and a lower word floor
DIFFICULTY_SETTINGS: Dict[Difficulty, DifficultySettings] = {
    Difficulty.EASY: DifficultySettings(vowel_ratio=0.5, min_words=20, multiplier_count=3),
    Difficulty.MEDIUM: DifficultySettings(vowel_ratio=0.4, min_words=15, multiplier_count=2),
    Difficulty.HARD: DifficultySettings(vowel_ratio=0.35, min_words=12, multiplier_count=2),
    Difficulty.EXPERT: DifficultySettings(vowel_ratio=0.3, min_words=10, multiplier_count=1),
}


def vowel_quota(
    difficulty: Difficulty,
    size: int = GRID_SIZE,
    settings: Dict[Difficulty, DifficultySettings] = DIFFICULTY_SETTINGS,
) -> int:
    """Number of cells forced to hold a vowel."""
    return math.floor(size * size * settings[difficulty].vowel_ratio)


def min_word_count(
    difficulty: Difficulty,
    settings: Dict[Difficulty, DifficultySettings] = DIFFICULTY_SETTINGS,
) -> int:
    return settings[difficulty].min_words


def difficulty_for_level(level_number: int) -> Difficulty:
    """Difficulty band of a level number in the standard 60-level run."""
    if level_number <= 10:
        return Difficulty.EASY
    if level_number <= 30:
        return Difficulty.MEDIUM
    if level_number <= 50:
        return Difficulty.HARD
    return Difficulty.EXPERT
