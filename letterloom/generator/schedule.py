"""The standard 60-level run."""

import math
from typing import List

from ..engine.models import Difficulty
from .models import LevelSpec


BASE_TARGET_SCORE = 500

# (first id, last id, difficulty, target scale, premium from id, timed)
_BANDS = [
    (1, 10, Difficulty.EASY, 1.0, None, False),
    (11, 30, Difficulty.MEDIUM, 1.5, 21, False),
    (31, 50, Difficulty.HARD, 2.0, 31, True),
    (51, 60, Difficulty.EXPERT, 2.5, 51, True),
]


def target_score_for(level_id: int, scale: float) -> int:
    return math.floor(BASE_TARGET_SCORE * scale * (1 + level_id * 0.1))


def time_limit_for(level_id: int) -> int:
    """Seconds allowed on a timed level; shrinks by two per level."""
    return 180 - level_id * 2


def default_schedule() -> List[LevelSpec]:
    """
    Build specs for levels 1-60.

    Easy levels are free and untimed, medium levels turn premium from 21,
    hard and expert levels are premium and timed.
    """
    specs: List[LevelSpec] = []
    for first, last, difficulty, scale, premium_from, timed in _BANDS:
        for level_id in range(first, last + 1):
            specs.append(LevelSpec(
                id=level_id,
                difficulty=difficulty,
                target_score=target_score_for(level_id, scale),
                time_limit=time_limit_for(level_id) if timed else None,
                is_premium=premium_from is not None and level_id >= premium_from,
            ))
    return specs
