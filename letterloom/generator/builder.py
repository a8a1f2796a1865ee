import logging
import math
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..engine.content_filter import ContentFilter, load_content_filter
from ..engine.dictionary import Dictionary, load_dictionary
from ..engine.errors import GenerationExhausted
from ..engine.finder import find_words
from ..engine.models import Difficulty, GRID_SIZE, Level
from .difficulty import DIFFICULTY_SETTINGS
from .grid_generator import GridGenerator
from .models import (
    BuildConfig,
    BuildFailure,
    BuildResult,
    DifficultySettings,
    LevelReport,
    LevelSpec,
    Rejection,
)
from .schedule import default_schedule

logger = logging.getLogger(__name__)

# Early-exit screening stops once this multiple of the minimum is found
EARLY_EXIT_FACTOR = 1.5


class LevelBuilder(BaseModel):
    """
    Generates, solves and freezes levels.

    Each level runs its own Generating -> Searching -> (Rejected | Accepted)
    loop. A candidate grid is discarded when it has too few words, when any
    word on it is on the denylist (the whole grid goes, since the word would
    still be spellable), or when filtering leaves too few words. Accepted
    grids are always solved in exhaustive mode before being frozen.

    Attributes:
        dictionary: Word oracle used for the search
        content_filter: Denylist / flaglist gate
        settings: Parameters per difficulty
        max_attempts: Candidate grids tried per level before giving up
        early_exit: Screen candidates with a bounded search first
        seed: Base seed; each level derives its own so levels are independent
        size: Side length of generated grids
        grid_generator: Generator shared by every level instead of a per-level one
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary
    content_filter: ContentFilter = Field(default_factory=ContentFilter)
    settings: Dict[Difficulty, DifficultySettings] = Field(
        default_factory=lambda: dict(DIFFICULTY_SETTINGS)
    )
    max_attempts: int = Field(default=100, ge=1)
    early_exit: bool = False
    seed: Optional[int] = None
    size: int = Field(default=GRID_SIZE, ge=3)
    grid_generator: Optional[GridGenerator] = None

    @classmethod
    def create(cls, config: Optional[BuildConfig] = None, **config_kwargs) -> "LevelBuilder":
        """
        Factory method to create a builder from a build configuration.

        Loads the dictionary and content lists named in the config, or the
        bundled ones.

        Raises:
            DictionaryLoadError: If a word list cannot be loaded
        """
        if config is None:
            config = BuildConfig(**config_kwargs)

        return cls(
            dictionary=load_dictionary(config.dictionary),
            content_filter=load_content_filter(config.denylist, config.flaglist),
            max_attempts=config.max_attempts,
            early_exit=config.early_exit,
            seed=config.seed,
        )

    def level_seed(self, level_id: int) -> Optional[int]:
        """Seed for one level's generator, or None for unseeded runs."""
        if self.seed is None:
            return None
        return self.seed * 1000 + level_id

    def _generator_for(self, level_id: int) -> GridGenerator:
        if self.grid_generator is not None:
            return self.grid_generator
        return GridGenerator(seed=self.level_seed(level_id), size=self.size, settings=self.settings)

    def build_level_with_report(self, spec: LevelSpec) -> Tuple[Level, LevelReport]:
        """
        Build one level and report how it went.

        Raises:
            GenerationExhausted: If no grid was accepted within max_attempts
        """
        settings = self.settings[spec.difficulty]
        min_words = settings.min_words
        generator = self._generator_for(spec.id)
        rejections: List[Rejection] = []

        for attempt in range(1, self.max_attempts + 1):
            grid = generator.generate(spec.difficulty, with_multipliers=False)

            if self.early_exit:
                stop_after = math.ceil(min_words * EARLY_EXIT_FACTOR)
                screened = find_words(grid, self.dictionary, stop_after=stop_after)
                if len(screened) < min_words:
                    rejections.append(Rejection(
                        code="TOO_FEW_WORDS",
                        message=f"{len(screened)} words (need {min_words})",
                        attempt=attempt,
                    ))
                    logger.debug("Level %d attempt %d: %s", spec.id, attempt, rejections[-1].message)
                    continue

            words = find_words(grid, self.dictionary)
            if len(words) < min_words:
                rejections.append(Rejection(
                    code="TOO_FEW_WORDS",
                    message=f"{len(words)} words (need {min_words})",
                    attempt=attempt,
                ))
                logger.debug("Level %d attempt %d: %s", spec.id, attempt, rejections[-1].message)
                continue

            filtered = self.content_filter.filter(words)
            forbidden_words = filtered.rejected | self.content_filter.forbidden_on(grid)
            if forbidden_words:
                forbidden = sorted(forbidden_words)
                rejections.append(Rejection(
                    code="FORBIDDEN_WORD",
                    message=f"Grid spells forbidden word(s): {', '.join(forbidden)}",
                    attempt=attempt,
                    words=forbidden,
                ))
                logger.debug("Level %d attempt %d: forbidden word on grid", spec.id, attempt)
                continue

            if len(filtered.accepted) < min_words:
                rejections.append(Rejection(
                    code="FILTERED_BELOW_MINIMUM",
                    message=f"{len(filtered.accepted)} words after filtering (need {min_words})",
                    attempt=attempt,
                ))
                logger.debug("Level %d attempt %d: %s", spec.id, attempt, rejections[-1].message)
                continue

            grid = grid.with_multipliers(generator.generate_multipliers(spec.difficulty))
            level = Level(
                id=spec.id,
                difficulty=spec.difficulty,
                grid=grid,
                target_score=spec.target_score,
                time_limit=spec.time_limit,
                is_premium=spec.is_premium,
                valid_words=filtered.accepted,
            )
            report = LevelReport(
                id=spec.id,
                difficulty=spec.difficulty,
                attempts=attempt,
                word_count=len(level.valid_words),
                flagged=sorted(filtered.flagged),
                rejections=rejections,
            )
            logger.info(
                "Level %d (%s): %d words on attempt %d",
                spec.id, spec.difficulty.value, report.word_count, attempt,
            )
            return level, report

        logger.error(
            "Level %d (%s): no acceptable grid after %d attempts",
            spec.id, spec.difficulty.value, self.max_attempts,
        )
        raise GenerationExhausted(
            level_id=spec.id,
            difficulty=spec.difficulty.value,
            attempts=self.max_attempts,
            rejections=rejections,
        )

    def build_level(self, spec: LevelSpec) -> Level:
        """
        Build one level.

        Raises:
            GenerationExhausted: If no grid was accepted within max_attempts
        """
        level, _ = self.build_level_with_report(spec)
        return level

    def build_all(
        self,
        specs: Optional[Iterable[LevelSpec]] = None,
        fail_fast: bool = True,
        on_level: Optional[Callable[[LevelReport], None]] = None,
    ) -> BuildResult:
        """
        Build a batch of levels.

        Args:
            specs: Levels to build (defaults to the standard 60-level run)
            fail_fast: Re-raise the first GenerationExhausted instead of
                recording it and moving on
            on_level: Optional callback called after each accepted level

        Returns:
            BuildResult with the accepted levels, their reports and any failures

        Raises:
            GenerationExhausted: In fail-fast mode, for the first level that
                could not be built
        """
        specs = list(specs) if specs is not None else default_schedule()
        started_at = datetime.now()
        result = BuildResult(started_at=started_at.isoformat())

        for spec in specs:
            try:
                level, report = self.build_level_with_report(spec)
            except GenerationExhausted as e:
                if fail_fast:
                    raise
                result.failures.append(BuildFailure(
                    id=spec.id,
                    difficulty=spec.difficulty,
                    attempts=e.attempts,
                    message=str(e),
                ))
                continue

            result.levels.append(level)
            result.reports.append(report)
            if on_level:
                on_level(report)

        ended_at = datetime.now()
        result.ended_at = ended_at.isoformat()
        result.duration_seconds = (ended_at - started_at).total_seconds()
        return result
