"""Exceptions raised by the build-time side of the engine."""

from typing import List, Optional


class LevelBuildError(RuntimeError):
    """Base class for failures that must stop a level build."""


class DictionaryLoadError(LevelBuildError):
    """A word list (dictionary, denylist or flaglist) could not be loaded."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load word list '{path}': {reason}")


class GenerationExhausted(LevelBuildError):
    """
    The builder ran out of attempts without accepting a grid.

    Attributes:
        level_id: Id of the level that could not be built
        difficulty: Difficulty the level was requested at
        attempts: Number of candidate grids tried
        rejections: Rejection records collected along the way
    """

    def __init__(
        self,
        level_id: int,
        difficulty: str,
        attempts: int,
        rejections: Optional[List] = None,
    ):
        self.level_id = level_id
        self.difficulty = difficulty
        self.attempts = attempts
        self.rejections = list(rejections or [])
        super().__init__(
            f"Level {level_id} ({difficulty}): no acceptable grid after {attempts} attempts"
        )
