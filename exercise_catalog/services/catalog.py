from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from exercise_catalog.errors import ExerciseNotFound
from exercise_catalog.models.exercise import Exercise

logger = logging.getLogger(__name__)


class CatalogStore:
    """Ordered, immutable set of exercises with O(1) lookup by id.

    Duplicate ids keep their first occurrence; later ones are dropped and
    listed in ``duplicate_ids`` for the integrity report.
    """

    def __init__(self, exercises: Iterable[Exercise]) -> None:
        by_id: Dict[str, Exercise] = {}
        ordered: List[Exercise] = []
        duplicates: List[str] = []
        dropped = 0
        for ex in exercises:
            if ex.id in by_id:
                dropped += 1
                if ex.id not in duplicates:
                    duplicates.append(ex.id)
                logger.warning("Duplicate exercise id %s (%r); keeping first occurrence", ex.id, ex.name)
                continue
            by_id[ex.id] = ex
            ordered.append(ex)
        self._by_id = by_id
        self._exercises: Tuple[Exercise, ...] = tuple(ordered)
        self.duplicate_ids: Tuple[str, ...] = tuple(duplicates)
        self.dropped_duplicates = dropped

    def get_by_id(self, exercise_id: str) -> Exercise:
        try:
            return self._by_id[exercise_id]
        except (KeyError, TypeError):
            raise ExerciseNotFound(exercise_id) from None

    def contains(self, exercise_id: str) -> bool:
        return isinstance(exercise_id, str) and exercise_id in self._by_id

    def all(self) -> Tuple[Exercise, ...]:
        return self._exercises

    def __contains__(self, exercise_id: object) -> bool:
        return isinstance(exercise_id, str) and self.contains(exercise_id)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)
