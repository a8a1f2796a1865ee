"""
Play session for a single level.

Tracks the words a player has found and their running score. Every
submission goes through the runtime validation adapter; nothing here
searches the grid.
"""

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import Cell, Level, WordEntry
from ..engine.scoring import calculate_stars
from ..engine.validate import get_hint_word, validate_path


SubmitReason = Literal[
    "TOO_SHORT", "NOT_ON_GRID", "REPEATED_CELL", "NOT_ADJACENT", "NOT_IN_WORD_LIST", "ALREADY_FOUND"
]


class SubmissionResult(BaseModel):
    """Outcome of one submitted path."""
    accepted: bool
    word: str = ""
    score: int = 0
    reason: Optional[SubmitReason] = None
    entry: Optional[WordEntry] = None


class PlaySession(BaseModel):
    """
    Manages one player's progress through a level.

    Attributes:
        level: The frozen level being played
        found_words: Words found so far, in order
        score: Running score
        hints_remaining: Hints the player can still use
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    level: Level
    found_words: List[WordEntry] = Field(default_factory=list)
    score: int = 0
    hints_remaining: int = Field(default=3, ge=0)

    @property
    def found_texts(self) -> List[str]:
        return [entry.text for entry in self.found_words]

    @property
    def remaining_words(self) -> int:
        """Number of valid words not yet found."""
        return len(self.level.valid_words) - len(self.found_words)

    @property
    def target_reached(self) -> bool:
        return self.score >= self.level.target_score

    @property
    def stars(self) -> int:
        return calculate_stars(self.score, self.level.target_score)

    def submit(self, path: Sequence[Cell]) -> SubmissionResult:
        """
        Submit a traced path.

        Args:
            path: Cells selected by the player, in order

        Returns:
            SubmissionResult; accepted words are recorded and scored
        """
        validation = validate_path(path, self.level)
        if not validation.valid:
            return SubmissionResult(accepted=False, word=validation.word, reason=validation.reason)

        if validation.word in self.found_texts:
            return SubmissionResult(accepted=False, word=validation.word, reason="ALREADY_FOUND")

        entry = WordEntry(
            text=validation.word,
            path=self.level.grid.path_from_indices([cell.index for cell in path]),
            score=validation.score,
        )
        self.found_words.append(entry)
        self.score += entry.score
        return SubmissionResult(accepted=True, word=entry.text, score=entry.score, entry=entry)

    def hint(self) -> Optional[str]:
        """
        Use a hint: the longest word not yet found.

        Returns None, without spending a hint, when none are left or every
        word has been found.
        """
        if self.hints_remaining <= 0:
            return None
        word = get_hint_word(self.level, self.found_texts)
        if word is not None:
            self.hints_remaining -= 1
        return word

    def get_state(self) -> dict:
        """Session state as a dictionary, for logging and persistence."""
        return {
            "level_id": self.level.id,
            "score": self.score,
            "target_score": self.level.target_score,
            "stars": self.stars,
            "found_words": self.found_texts,
            "remaining_words": self.remaining_words,
            "hints_remaining": self.hints_remaining,
        }
