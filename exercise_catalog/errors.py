from __future__ import annotations

from typing import List, Optional


class CatalogError(RuntimeError):
    pass


class DataLoadError(CatalogError):
    """The catalog source could not be turned into a non-empty catalog."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load exercise catalog from {source}: {reason}")
        self.source = source
        self.reason = reason


class RecordValidationError(CatalogError):
    """A single raw record failed schema validation.

    Never propagated out of a load: the record is logged and skipped.
    """

    def __init__(self, index: int, record_id: Optional[str], errors: List[str]) -> None:
        label = record_id or "<no id>"
        super().__init__(f"Invalid exercise at index {index} ({label}): {'; '.join(errors)}")
        self.index = index
        self.record_id = record_id
        self.errors = errors


class ExerciseNotFound(CatalogError, KeyError):
    def __init__(self, exercise_id: str) -> None:
        super().__init__(f"Exercise not found: {exercise_id}")
        self.exercise_id = exercise_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


NotFound = ExerciseNotFound


class InvalidParameter(CatalogError, ValueError):
    pass
