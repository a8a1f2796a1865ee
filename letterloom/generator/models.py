"""
Pydantic models for the build-time generator.

Configuration, per-level build specs, rejection records and build results.
The orchestration itself lives in `builder.py`.
"""

from collections import defaultdict
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import Difficulty, Level


RejectionCode = Literal["TOO_FEW_WORDS", "FORBIDDEN_WORD", "FILTERED_BELOW_MINIMUM"]
AuditStatus = Literal["PASS", "WARNING", "FAIL"]


class DifficultySettings(BaseModel):
    """Generation and acceptance parameters for one difficulty."""
    model_config = ConfigDict(frozen=True)

    vowel_ratio: float = Field(..., ge=0, le=1)
    min_words: int = Field(..., ge=1)
    multiplier_count: int = Field(..., ge=0)
    triple_chance: float = Field(0.3, ge=0, le=1)


class LevelSpec(BaseModel):
    """What the build tooling asks for: one level to generate."""
    id: int = Field(..., ge=1)
    difficulty: Difficulty
    target_score: int = Field(..., ge=0)
    time_limit: Optional[int] = Field(None, gt=0)
    is_premium: bool = False


class Rejection(BaseModel):
    """Why a candidate grid was discarded."""
    code: RejectionCode
    message: str
    attempt: int = Field(..., ge=1)
    words: List[str] = Field(default_factory=list)


class LevelReport(BaseModel):
    """Build statistics for one accepted level."""
    id: int
    difficulty: Difficulty
    attempts: int
    word_count: int
    flagged: List[str] = Field(default_factory=list)
    rejections: List[Rejection] = Field(default_factory=list)


class BuildFailure(BaseModel):
    """A level the builder could not produce."""
    id: int
    difficulty: Difficulty
    attempts: int
    message: str


class BuildConfig(BaseModel):
    """Configuration for a build run, usually loaded from YAML."""
    seed: Optional[int] = None
    max_attempts: int = Field(100, ge=1)
    early_exit: bool = False
    dictionary: Optional[str] = None
    denylist: Optional[str] = None
    flaglist: Optional[str] = None
    levels: Optional[List[LevelSpec]] = None


class BuildResult(BaseModel):
    """Result of a batch build."""
    config: Optional[BuildConfig] = None
    levels: List[Level] = Field(default_factory=list)
    reports: List[LevelReport] = Field(default_factory=list)
    failures: List[BuildFailure] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def to_records(self) -> List[Dict]:
        """Content-store records of every accepted level, in id order."""
        return [level.to_record() for level in sorted(self.levels, key=lambda l: l.id)]

    def summary_by_difficulty(self) -> Dict[str, Dict[str, int]]:
        """Level count and average word count per difficulty."""
        totals: Dict[str, List[int]] = defaultdict(list)
        for level in self.levels:
            totals[level.difficulty.value].append(len(level.valid_words))
        return {
            difficulty: {"count": len(counts), "avg_words": sum(counts) // len(counts)}
            for difficulty, counts in totals.items()
        }


class LevelAudit(BaseModel):
    """Result of re-solving a persisted level."""
    level_id: int
    difficulty: Difficulty
    word_count: int
    status: AuditStatus
    issues: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    extra: List[str] = Field(default_factory=list)
    top_words: List[str] = Field(default_factory=list)
