"""Level engine: dictionary, word finder, content filter, scoring and validation."""

from .models import (
    Difficulty,
    Cell,
    MultiplierTile,
    Grid,
    Level,
    WordEntry,
    FilterResult,
    PathValidation,
    GRID_SIZE,
    MIN_WORD_LENGTH,
    MAX_WORD_LENGTH,
)
from .errors import LevelBuildError, DictionaryLoadError, GenerationExhausted
from .dictionary import Dictionary, load_dictionary
from .adjacency import are_adjacent, is_valid_path, neighbor_table, render_grid
from .finder import find_words, find_words_with_paths
from .content_filter import ContentFilter, load_content_filter
from .scoring import score_path, calculate_stars, LETTER_SCORES, LENGTH_BONUSES, BASE_SCORE_PER_LETTER
from .validate import validate_path, get_hint_word

__all__ = [
    # Models
    "Difficulty",
    "Cell",
    "MultiplierTile",
    "Grid",
    "Level",
    "WordEntry",
    "FilterResult",
    "PathValidation",
    "GRID_SIZE",
    "MIN_WORD_LENGTH",
    "MAX_WORD_LENGTH",
    # Errors
    "LevelBuildError",
    "DictionaryLoadError",
    "GenerationExhausted",
    # Dictionary
    "Dictionary",
    "load_dictionary",
    # Geometry
    "are_adjacent",
    "is_valid_path",
    "neighbor_table",
    "render_grid",
    # Search
    "find_words",
    "find_words_with_paths",
    # Content filter
    "ContentFilter",
    "load_content_filter",
    # Scoring
    "score_path",
    "calculate_stars",
    "LETTER_SCORES",
    "LENGTH_BONUSES",
    "BASE_SCORE_PER_LETTER",
    # Runtime validation
    "validate_path",
    "get_hint_word",
]
