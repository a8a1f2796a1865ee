"""Denylist / flaglist gate applied to a grid's word set."""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dictionary import DATA_DIR, Dictionary, read_word_file
from .finder import find_words
from .models import FilterResult, Grid

logger = logging.getLogger(__name__)

DEFAULT_DENYLIST_FILE = DATA_DIR / "denylist.txt"
DEFAULT_FLAGLIST_FILE = DATA_DIR / "flaglist.txt"


class ContentFilter(BaseModel):
    """
    Partitions words into accepted, rejected and flagged.

    Rejected words must never be playable. Flagged words stay playable and
    are logged for review. Deciding what to do with a grid that contains a
    rejected word is the builder's job.
    """
    model_config = ConfigDict(frozen=True)

    denylist: FrozenSet[str] = Field(default_factory=frozenset)
    flaglist: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("denylist", "flaglist", mode="before")
    @classmethod
    def _uppercase(cls, value: Iterable[str]) -> FrozenSet[str]:
        return frozenset(str(word).strip().upper() for word in value if str(word).strip())

    @classmethod
    def from_files(
        cls,
        denylist_path: Optional[str | Path] = None,
        flaglist_path: Optional[str | Path] = None,
    ) -> "ContentFilter":
        """
        Load both lists from word-per-line files (bundled lists when omitted).

        Raises:
            DictionaryLoadError: If either file cannot be read
        """
        return cls(
            denylist=read_word_file(denylist_path or DEFAULT_DENYLIST_FILE),
            flaglist=read_word_file(flaglist_path or DEFAULT_FLAGLIST_FILE),
        )

    def filter(self, words: Iterable[str]) -> FilterResult:
        """Split `words` into accepted (including flagged), rejected and flagged."""
        result = FilterResult()
        for word in words:
            word = word.upper()
            if word in self.denylist:
                result.rejected.add(word)
                continue
            if word in self.flaglist:
                result.flagged.add(word)
            result.accepted.add(word)

        if result.flagged:
            logger.info("Flagged for review: %s", ", ".join(sorted(result.flagged)))
        return result

    def forbidden_on(self, grid: Grid) -> Set[str]:
        """
        Denylisted words traceable on `grid`.

        Searched against the denylist itself, so a forbidden word is found
        whether or not the game dictionary contains it.
        """
        denied = Dictionary.from_words(self.denylist)
        if not len(denied):
            return set()
        return find_words(grid, denied)


def load_content_filter(
    denylist_path: Optional[str | Path] = None,
    flaglist_path: Optional[str | Path] = None,
) -> ContentFilter:
    """Load the content filter, defaulting to the bundled lists."""
    return ContentFilter.from_files(denylist_path, flaglist_path)
