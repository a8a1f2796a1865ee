"""Data models for the level engine."""

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Literal, Optional, Sequence, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


GRID_SIZE = 5
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 8


class Difficulty(str, Enum):
    """Closed set of level difficulties."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class Cell(BaseModel):
    """A single lettered position on the grid."""
    model_config = ConfigDict(frozen=True)

    letter: str = Field(..., pattern=r'^[A-Z]$')
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    index: int = Field(..., ge=0)
    multiplier: int = Field(1, ge=1, le=3)


class MultiplierTile(BaseModel):
    """A bonus tile multiplying the letter value of the cell it sits on."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    factor: Literal[2, 3] = 2


class Grid(BaseModel):
    """
    An N x N letter board stored in row-major order.

    Multiplier tiles are optional: the builder searches bare letter grids and
    only attaches multipliers once a grid has been accepted.
    """
    model_config = ConfigDict(frozen=True)

    size: int = Field(GRID_SIZE, ge=1)
    letters: List[str]
    multipliers: List[MultiplierTile] = Field(default_factory=list)

    @field_validator("letters", mode="before")
    @classmethod
    def _uppercase_letters(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = list(value)
        return [str(letter).upper() for letter in value]

    @model_validator(mode="after")
    def _check_shape(self) -> "Grid":
        cell_count = self.size * self.size
        if len(self.letters) != cell_count:
            raise ValueError(
                f"Grid of size {self.size} needs {cell_count} letters, got {len(self.letters)}"
            )
        for i, letter in enumerate(self.letters):
            if len(letter) != 1 or not ("A" <= letter <= "Z"):
                raise ValueError(f"Invalid letter '{letter}' at index {i}")

        seen: Set[int] = set()
        for tile in self.multipliers:
            if tile.index >= cell_count:
                raise ValueError(f"Multiplier index {tile.index} outside grid of {cell_count} cells")
            if tile.index in seen:
                raise ValueError(f"Duplicate multiplier tile at index {tile.index}")
            seen.add(tile.index)
        return self

    @property
    def multiplier_map(self) -> Dict[int, int]:
        """Map of cell index to multiplier factor."""
        return {tile.index: tile.factor for tile in self.multipliers}

    @property
    def cells(self) -> List[Cell]:
        """All cells in row-major order, annotated with their multipliers."""
        factors = self.multiplier_map
        return [
            Cell(
                letter=letter,
                row=i // self.size,
                col=i % self.size,
                index=i,
                multiplier=factors.get(i, 1),
            )
            for i, letter in enumerate(self.letters)
        ]

    def cell_at(self, index: int) -> Cell:
        """Get the cell at a row-major index."""
        if not 0 <= index < len(self.letters):
            raise IndexError(f"Cell index {index} out of range")
        return Cell(
            letter=self.letters[index],
            row=index // self.size,
            col=index % self.size,
            index=index,
            multiplier=self.multiplier_map.get(index, 1),
        )

    def cell_at_position(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Position ({row}, {col}) outside {self.size}x{self.size} grid")
        return self.cell_at(row * self.size + col)

    def path_from_indices(self, indices: Sequence[int]) -> List[Cell]:
        """Build a path of cells from row-major indices."""
        return [self.cell_at(i) for i in indices]

    def word_for(self, indices: Sequence[int]) -> str:
        """Concatenate the letters at the given indices."""
        return "".join(self.letters[i] for i in indices)

    def with_multipliers(self, multipliers: List[MultiplierTile]) -> "Grid":
        """Return a copy of this grid carrying the given multiplier tiles."""
        return Grid(size=self.size, letters=self.letters, multipliers=multipliers)


class Level(BaseModel):
    """
    A frozen, pre-validated level.

    `valid_words` is the complete set of words reachable on `grid`, minus
    anything the content filter refused.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)
    difficulty: Difficulty
    grid: Grid
    target_score: int = Field(..., ge=0)
    time_limit: Optional[int] = Field(None, gt=0)
    is_premium: bool = False
    valid_words: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("valid_words", mode="before")
    @classmethod
    def _uppercase_words(cls, value: Any) -> Any:
        return frozenset(str(word).upper() for word in value)

    @property
    def multiplier_tiles(self) -> List[MultiplierTile]:
        return list(self.grid.multipliers)

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the content-store record format."""
        record: Dict[str, Any] = {
            "id": self.id,
            "difficulty": self.difficulty.value,
            "letters": list(self.grid.letters),
            "targetScore": self.target_score,
        }
        if self.time_limit is not None:
            record["timeLimit"] = self.time_limit
        record["isPremium"] = self.is_premium
        record["validWords"] = sorted(self.valid_words)
        record["multiplierPositions"] = [
            {"index": tile.index, "factor": tile.factor} for tile in self.grid.multipliers
        ]
        return record

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Level":
        """Rebuild a level from a content-store record."""
        letters = record["letters"]
        size = int(round(len(letters) ** 0.5))
        grid = Grid(
            size=size,
            letters=letters,
            multipliers=[MultiplierTile(**tile) for tile in record.get("multiplierPositions", [])],
        )
        return cls(
            id=record["id"],
            difficulty=record["difficulty"],
            grid=grid,
            target_score=record["targetScore"],
            time_limit=record.get("timeLimit"),
            is_premium=record.get("isPremium", False),
            valid_words=record.get("validWords", []),
        )


class WordEntry(BaseModel):
    """A word a player has found during a session."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., pattern=r'^[A-Z]+$')
    path: List[Cell]
    score: int = Field(..., ge=0)


class FilterResult(BaseModel):
    """Partition of a word set by the content filter."""
    accepted: Set[str] = Field(default_factory=set)
    rejected: Set[str] = Field(default_factory=set)
    flagged: Set[str] = Field(default_factory=set)


RejectReason = Literal["TOO_SHORT", "NOT_ON_GRID", "REPEATED_CELL", "NOT_ADJACENT", "NOT_IN_WORD_LIST"]


class PathValidation(BaseModel):
    """Result of checking a submitted path against a level."""
    valid: bool
    word: str = ""
    score: int = 0
    reason: Optional[RejectReason] = None
