"""In-memory exercise catalog service.

Build one ``ExerciseCatalogService`` at startup with ``load_catalog`` and hand
it to whatever serves requests. Everything it owns is built before the
constructor returns and never changes afterwards, so any number of threads
may call the query methods concurrently without locking.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from exercise_catalog.config import get_settings
from exercise_catalog.errors import InvalidParameter
from exercise_catalog.models.catalog_io import (
    AlternativesRequest,
    CatalogStats,
    IdsRequest,
    IntegrityReport,
    RejectedRecord,
    SearchFilter,
    SearchResult,
    ValidationResult,
)
from exercise_catalog.models.exercise import Exercise
from exercise_catalog.services import alternatives, integrity, metadata, search, validation
from exercise_catalog.services.catalog import CatalogStore
from exercise_catalog.services.indexes import CatalogIndexes
from exercise_catalog.services.loader import Source, load_exercises, validate_records

logger = logging.getLogger(__name__)

FilterInput = Union[SearchFilter, Mapping[str, Any], None]
M = TypeVar("M", bound=BaseModel)


class ExerciseCatalogService:
    def __init__(self, exercises: Sequence[Exercise], rejected: Sequence[RejectedRecord] = ()) -> None:
        self.store = CatalogStore(exercises)
        self.indexes = CatalogIndexes.from_store(self.store)
        self._rejected = tuple(rejected)

    @classmethod
    def from_source(cls, source: Source) -> "ExerciseCatalogService":
        result = load_exercises(source)
        return cls(result.exercises, result.rejected)

    @classmethod
    def from_records(cls, raw_records: Sequence[Any]) -> "ExerciseCatalogService":
        result = validate_records(raw_records)
        return cls(result.exercises, result.rejected)

    # --- queries -----------------------------------------------------------

    def search_exercises(self, flt: FilterInput = None, **params: Any) -> SearchResult:
        return search.search(self.store, self.indexes, _coerce_filter(flt, params))

    def get_exercise_by_id(self, exercise_id: str) -> Exercise:
        return self.store.get_by_id(exercise_id)

    def filter_by_equipment(self, equipment: str, limit: Optional[int] = None, offset: int = 0) -> SearchResult:
        return self.search_exercises(equipment=equipment, limit=limit, offset=offset)

    def filter_by_category(self, category: str, limit: Optional[int] = None, offset: int = 0) -> SearchResult:
        return self.search_exercises(category=category, limit=limit, offset=offset)

    def get_all_exercises(self, limit: Optional[int] = None, offset: int = 0) -> SearchResult:
        return self.search_exercises(limit=limit, offset=offset)

    def find_alternatives(
        self,
        exercise_id: str,
        target_muscles: Optional[Sequence[str]] = None,
        equipment: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Exercise]:
        req = _validated(AlternativesRequest, {
            "exercise_id": exercise_id,
            "target_muscles": target_muscles,
            "equipment": equipment,
            "limit": limit,
        })
        return alternatives.find_alternatives(
            self.store, self.indexes, req.exercise_id, req.target_muscles, req.equipment, req.limit
        )

    def validate_ids(self, ids: Sequence[object]) -> ValidationResult:
        req = _validated(IdsRequest, {"ids": ids})
        return validation.validate_ids(self.store, req.ids)

    # --- metadata ----------------------------------------------------------

    def get_categories(self) -> List[str]:
        return metadata.get_categories(self.indexes)

    def get_equipment_types(self) -> List[str]:
        return metadata.get_equipment_types(self.indexes)

    def get_muscle_groups(self) -> List[str]:
        return metadata.get_muscle_groups(self.indexes)

    def get_body_parts(self) -> List[str]:
        return metadata.get_body_parts(self.indexes)

    def get_apple_categories(self) -> List[str]:
        return metadata.get_apple_categories(self.indexes)

    def get_stats(self) -> CatalogStats:
        return metadata.get_stats(self.store, self.indexes)

    def check_integrity(self) -> IntegrityReport:
        return integrity.check_integrity(self.store, self._rejected)

    def __len__(self) -> int:
        return len(self.store)


def _coerce_filter(flt: FilterInput, params: Mapping[str, Any]) -> SearchFilter:
    if isinstance(flt, SearchFilter) and not params:
        return flt
    data: dict = {}
    if isinstance(flt, SearchFilter):
        data.update(flt.model_dump(exclude_unset=True))
    elif flt is not None:
        data.update(flt)
    data.update(params)
    return _validated(SearchFilter, data)


def _validated(model: Type[M], data: Mapping[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidParameter(f"Invalid {model.__name__} parameters: {exc.error_count()} error(s): {exc}") from exc


def load_catalog(source: Optional[Source] = None) -> ExerciseCatalogService:
    """Load, validate and index the catalog; raises ``DataLoadError`` on failure."""
    if source is None:
        source = get_settings().catalog_path
    service = ExerciseCatalogService.from_source(source)
    logger.info(
        "Exercise catalog ready: %d exercises, %d categories, %d equipment types",
        len(service), len(service.indexes.keys("category")), len(service.indexes.keys("equipment")),
    )
    return service
