"""Read-only access to a persisted level set."""

import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

from ..engine.models import Level


def save_levels(levels: Iterable[Level], path: str | Path, **metadata) -> Path:
    """
    Write levels to a JSON level-set file.

    Args:
        levels: Levels to persist
        path: Destination file
        **metadata: Extra top-level keys (e.g. generated_at, seed)

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = dict(metadata)
    data["levels"] = [level.to_record() for level in sorted(levels, key=lambda l: l.id)]

    with open(path, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return path


class LevelStore:
    """Levels keyed by id, loaded once and never modified."""

    def __init__(self, levels: Iterable[Level]):
        self._levels: Dict[int, Level] = {}
        for level in levels:
            if level.id in self._levels:
                raise ValueError(f"Duplicate level id {level.id}")
            self._levels[level.id] = level

    @classmethod
    def load(cls, path: str | Path) -> "LevelStore":
        """
        Load a level-set file written by `save_levels`.

        Accepts either `{"levels": [...]}` or a bare list of records.
        """
        with open(path) as f:
            data = json.load(f)

        records = data["levels"] if isinstance(data, dict) else data
        return cls(Level.from_record(record) for record in records)

    def get(self, level_id: int) -> Optional[Level]:
        return self._levels.get(level_id)

    def __getitem__(self, level_id: int) -> Level:
        return self._levels[level_id]

    def __contains__(self, level_id: object) -> bool:
        return level_id in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels[i] for i in sorted(self._levels))
