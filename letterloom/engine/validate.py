"""
Runtime validation of player-submitted paths.

A submitted path is checked against the level's frozen word list only; the
word finder is never run during play.
"""

from typing import Iterable, List, Optional, Sequence

from .adjacency import is_valid_path
from .models import Cell, Level, MIN_WORD_LENGTH, PathValidation
from .scoring import score_path


def _resolve_on_grid(path: Sequence[Cell], level: Level) -> Optional[List[Cell]]:
    """Map submitted cells onto the level's own cells, or None if any disagree."""
    grid = level.grid
    resolved: List[Cell] = []
    for cell in path:
        if not 0 <= cell.index < len(grid.letters):
            return None
        own = grid.cell_at(cell.index)
        if (own.letter, own.row, own.col) != (cell.letter.upper(), cell.row, cell.col):
            return None
        resolved.append(own)
    return resolved


def validate_path(path: Sequence[Cell], level: Level) -> PathValidation:
    """
    Check a submitted path against a frozen level.

    Multipliers are taken from the level's grid, not from the submitted cells.

    Returns:
        PathValidation with the word, its score and, when invalid, the reason
    """
    word = "".join(cell.letter for cell in path).upper()

    if len(path) < MIN_WORD_LENGTH:
        return PathValidation(valid=False, word=word, reason="TOO_SHORT")

    cells = _resolve_on_grid(path, level)
    if cells is None:
        return PathValidation(valid=False, word=word, reason="NOT_ON_GRID")

    if len({cell.index for cell in cells}) != len(cells):
        return PathValidation(valid=False, word=word, reason="REPEATED_CELL")

    if not is_valid_path(cells):
        return PathValidation(valid=False, word=word, reason="NOT_ADJACENT")

    if word not in level.valid_words:
        return PathValidation(valid=False, word=word, reason="NOT_IN_WORD_LIST")

    return PathValidation(valid=True, word=word, score=score_path(cells))


def get_hint_word(level: Level, found_words: Iterable[str]) -> Optional[str]:
    """Longest valid word not yet found, ties broken alphabetically."""
    found = {w.upper() for w in found_words}
    unused = [w for w in level.valid_words if w not in found]
    if not unused:
        return None
    return min(unused, key=lambda w: (-len(w), w))
