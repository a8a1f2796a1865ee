"""
Word list oracle used by the word finder at build time.

The runtime never consults this module: played paths are checked against the
word list frozen into each level.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

from .errors import DictionaryLoadError
from .models import MAX_WORD_LENGTH, MIN_WORD_LENGTH

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDS_FILE = DATA_DIR / "words.txt"


def read_word_file(path: str | Path) -> List[str]:
    """
    Read a word-per-line file, skipping blank lines and '#' comments.

    Raises:
        DictionaryLoadError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise DictionaryLoadError(path, str(e)) from e

    return [
        line.strip()
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    ]


def _is_legal(word: str) -> bool:
    return MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH and word.isascii() and word.isalpha()


class Dictionary:
    """
    Immutable set of accepted words, plus every prefix of those words.

    Words are stored uppercase; lookups are case-insensitive. The prefix set
    lets the word finder abandon a branch as soon as no word can extend it.
    """

    __slots__ = ("_words", "_prefixes")

    def __init__(self, words: Iterable[str]):
        self._words: FrozenSet[str] = frozenset(
            w.strip().upper() for w in words if _is_legal(w.strip())
        )
        prefixes = set()
        for word in self._words:
            for i in range(1, len(word) + 1):
                prefixes.add(word[:i])
        self._prefixes: FrozenSet[str] = frozenset(prefixes)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        """Build a dictionary keeping only 3-8 letter alphabetic entries."""
        return cls(words)

    @classmethod
    def from_file(cls, path: str | Path) -> "Dictionary":
        """
        Load a dictionary from a word-per-line file.

        Raises:
            DictionaryLoadError: If the file cannot be read or holds no legal words
        """
        dictionary = cls.from_words(read_word_file(path))
        if not len(dictionary):
            raise DictionaryLoadError(path, "no 3-8 letter words found")
        logger.debug("Loaded %d words from %s", len(dictionary), path)
        return dictionary

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def is_valid_word(self, word: str) -> bool:
        """Return True if `word` is an accepted word of legal length."""
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            return False
        return word.upper() in self._words

    def is_prefix(self, prefix: str) -> bool:
        """Return True if some accepted word starts with `prefix`."""
        return prefix.upper() in self._prefixes

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def load_dictionary(path: Optional[str | Path] = None) -> Dictionary:
    """Load the dictionary at `path`, or the bundled word list when omitted."""
    return Dictionary.from_file(path or DEFAULT_WORDS_FILE)
