"""Grid geometry: adjacency, path checks and text rendering."""

from functools import lru_cache
from typing import List, Sequence, Set, Tuple

from .models import Cell, Grid


DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    ( 0, -1),          ( 0, 1),
    ( 1, -1), ( 1, 0), ( 1, 1),
)


def are_adjacent(a: Cell, b: Cell) -> bool:
    """True if two cells touch horizontally, vertically or diagonally."""
    return max(abs(a.row - b.row), abs(a.col - b.col)) == 1


def is_valid_path(path: Sequence[Cell]) -> bool:
    """True if consecutive cells are adjacent and no cell is used twice."""
    seen: Set[int] = set()
    for i, cell in enumerate(path):
        if cell.index in seen:
            return False
        seen.add(cell.index)
        if i and not are_adjacent(path[i - 1], cell):
            return False
    return True


@lru_cache(maxsize=None)
def neighbor_table(size: int) -> Tuple[Tuple[int, ...], ...]:
    """Neighbour indices of every cell on a size x size board, row-major."""
    table: List[Tuple[int, ...]] = []
    for index in range(size * size):
        row, col = divmod(index, size)
        table.append(tuple(
            (row + dr) * size + (col + dc)
            for dr, dc in DIRECTIONS
            if 0 <= row + dr < size and 0 <= col + dc < size
        ))
    return tuple(table)


def render_grid(grid: Grid) -> str:
    """
    Render the grid to a string, one row per line.

    Multiplier tiles carry their factor after the letter (e.g. `A2`).
    """
    factors = grid.multiplier_map
    lines = []
    for row in range(grid.size):
        tokens = []
        for col in range(grid.size):
            index = row * grid.size + col
            factor = factors.get(index)
            tokens.append(f"{grid.letters[index]}{factor if factor else ' '}")
        lines.append(' '.join(tokens).rstrip())
    return '\n'.join(lines)
