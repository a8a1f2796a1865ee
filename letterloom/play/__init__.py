"""Runtime collaborators: level store and play session."""

from .store import LevelStore, save_levels
from .session import PlaySession, SubmissionResult

__all__ = [
    "LevelStore",
    "save_levels",
    "PlaySession",
    "SubmissionResult",
]
