"""Build-time level generation for LetterLoom."""

from .models import (
    DifficultySettings,
    LevelSpec,
    Rejection,
    LevelReport,
    BuildFailure,
    BuildConfig,
    BuildResult,
    LevelAudit,
)
from .difficulty import DIFFICULTY_SETTINGS, vowel_quota, min_word_count, difficulty_for_level
from .grid_generator import GridGenerator, LETTER_FREQUENCIES, VOWELS
from .schedule import default_schedule
from .builder import LevelBuilder

__all__ = [
    "DifficultySettings",
    "LevelSpec",
    "Rejection",
    "LevelReport",
    "BuildFailure",
    "BuildConfig",
    "BuildResult",
    "LevelAudit",
    "DIFFICULTY_SETTINGS",
    "vowel_quota",
    "min_word_count",
    "difficulty_for_level",
    "GridGenerator",
    "LETTER_FREQUENCIES",
    "VOWELS",
    "default_schedule",
    "LevelBuilder",
]
