"""
Word discovery over the grid-adjacency graph.

Depth-first backtracking from every cell. The visited set is an integer
bitmask over the cell indices and the walk is cut as soon as the current
letters are no longer a prefix of any dictionary word, which never drops a
word that could still be reached.
"""

from typing import Dict, List, Optional, Set, Tuple

from .adjacency import neighbor_table
from .dictionary import Dictionary
from .models import Grid, MAX_WORD_LENGTH, MIN_WORD_LENGTH


class _SearchComplete(Exception):
    """Raised inside the walk once an early-exit target is met."""


def _walk(
    grid: Grid,
    dictionary: Dictionary,
    min_len: int,
    max_len: int,
    stop_after: Optional[int],
    found: Dict[str, Tuple[int, ...]],
) -> None:
    letters = grid.letters
    neighbors = neighbor_table(grid.size)
    path: List[int] = []

    def extend(index: int, prefix: str, visited: int) -> None:
        prefix += letters[index]
        if not dictionary.is_prefix(prefix):
            return

        path.append(index)
        if len(prefix) >= min_len and prefix not in found and dictionary.is_valid_word(prefix):
            found[prefix] = tuple(path)
            if stop_after is not None and len(found) >= stop_after:
                raise _SearchComplete

        if len(prefix) < max_len:
            visited |= 1 << index
            for nxt in neighbors[index]:
                if not visited & (1 << nxt):
                    extend(nxt, prefix, visited)
        path.pop()

    try:
        for start in range(len(letters)):
            extend(start, "", 0)
    except _SearchComplete:
        pass


def find_words_with_paths(
    grid: Grid,
    dictionary: Dictionary,
    min_len: int = MIN_WORD_LENGTH,
    max_len: int = MAX_WORD_LENGTH,
    stop_after: Optional[int] = None,
) -> Dict[str, Tuple[int, ...]]:
    """
    Find every word spellable on the grid, with one path of cell indices each.

    Args:
        grid: The letter grid to search
        dictionary: Word oracle
        min_len: Shortest word to record
        max_len: Longest path to explore
        stop_after: Stop once this many distinct words are found (early-exit
            mode). None explores the whole bounded search tree.

    Returns:
        Map of uppercase word to the first path found spelling it
    """
    found: Dict[str, Tuple[int, ...]] = {}
    if stop_after is not None and stop_after <= 0:
        return found
    _walk(grid, dictionary, min_len, max_len, stop_after, found)
    return found


def find_words(
    grid: Grid,
    dictionary: Dictionary,
    min_len: int = MIN_WORD_LENGTH,
    max_len: int = MAX_WORD_LENGTH,
    stop_after: Optional[int] = None,
) -> Set[str]:
    """
    Find the distinct words spellable on the grid.

    With `stop_after=None` (exhaustive mode) the result is complete for the
    grid. An early-exit result is only good for screening candidates and must
    never be frozen into a level.
    """
    return set(find_words_with_paths(grid, dictionary, min_len, max_len, stop_after))
