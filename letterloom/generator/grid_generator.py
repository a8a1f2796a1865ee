import random
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import Difficulty, Grid, GRID_SIZE, MultiplierTile
from .difficulty import DIFFICULTY_SETTINGS, vowel_quota
from .models import DifficultySettings


# Approximate English letter frequencies, in percent
LETTER_FREQUENCIES: Dict[str, float] = {
    "A": 8.2, "B": 1.5, "C": 2.8, "D": 4.3, "E": 12.7, "F": 2.2, "G": 2.0,
    "H": 6.1, "I": 7.0, "J": 0.15, "K": 0.77, "L": 4.0, "M": 2.4, "N": 6.7,
    "O": 7.5, "P": 1.9, "Q": 0.095, "R": 6.0, "S": 6.3, "T": 9.1, "U": 2.8,
    "V": 0.98, "W": 2.4, "X": 0.15, "Y": 2.0, "Z": 0.074,
}

FREQUENCY_TOTAL = sum(LETTER_FREQUENCIES.values())

VOWELS: List[str] = ["A", "E", "I", "O", "U"]


class GridGenerator(BaseModel):
    """
    Produces candidate letter grids for a difficulty.

    Letters are a forced vowel quota plus frequency-weighted draws, shuffled
    so the vowels are spread over the board. Multiplier tiles are generated
    separately so an accepted grid can receive them after the word search.

    Attributes:
        seed: Optional random seed for reproducibility
        size: Side length of the square grid
        settings: Parameters per difficulty
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    size: int = Field(default=GRID_SIZE, ge=3)
    settings: Dict[Difficulty, DifficultySettings] = Field(
        default_factory=lambda: dict(DIFFICULTY_SETTINGS)
    )
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def random_letter(self) -> str:
        """Draw one letter by cumulative-sum sampling over LETTER_FREQUENCIES."""
        target = self._rng.random() * FREQUENCY_TOTAL
        cumulative = 0.0
        for letter, frequency in LETTER_FREQUENCIES.items():
            cumulative += frequency
            if target <= cumulative:
                return letter
        return "E"

    def generate_letters(self, difficulty: Difficulty) -> List[str]:
        """
        Generate the row-major letters of a grid.

        The first `vowel_quota` draws are uniform vowels, the rest follow
        LETTER_FREQUENCIES; the whole sequence is then Fisher-Yates shuffled.
        """
        vowel_count = vowel_quota(difficulty, self.size, self.settings)
        letters = [
            self._rng.choice(VOWELS) if i < vowel_count else self.random_letter()
            for i in range(self.cell_count)
        ]

        for i in range(len(letters) - 1, 0, -1):
            j = self._rng.randint(0, i)
            letters[i], letters[j] = letters[j], letters[i]

        return letters

    def generate_multipliers(self, difficulty: Difficulty) -> List[MultiplierTile]:
        """
        Pick distinct cells for bonus tiles.

        The first tile is 3x with probability `triple_chance`, the rest are 2x.
        """
        settings = self.settings[difficulty]
        count = min(settings.multiplier_count, self.cell_count)
        indices = self._rng.sample(range(self.cell_count), count)

        tiles = []
        for i, index in enumerate(indices):
            factor = 3 if i == 0 and self._rng.random() < settings.triple_chance else 2
            tiles.append(MultiplierTile(index=index, factor=factor))
        return tiles

    def generate(self, difficulty: Difficulty, with_multipliers: bool = True) -> Grid:
        """Generate a complete grid, optionally with its multiplier tiles."""
        letters = self.generate_letters(difficulty)
        multipliers = self.generate_multipliers(difficulty) if with_multipliers else []
        return Grid(size=self.size, letters=letters, multipliers=multipliers)
