"""LetterLoom: level generation and word discovery for a 5x5 word-path game."""

__version__ = "0.1.0"
