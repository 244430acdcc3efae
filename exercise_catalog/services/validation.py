from __future__ import annotations

from typing import Iterable

from exercise_catalog.models.catalog_io import ValidationResult
from exercise_catalog.models.exercise import is_valid_uuid
from .catalog import CatalogStore


def validate_ids(store: CatalogStore, ids: Iterable[object]) -> ValidationResult:
    """Split ``ids`` into known and unknown exercise ids, keeping input order.

    Malformed ids land in ``invalid``; nothing here raises.
    """
    result = ValidationResult()
    for eid in ids:
        if is_valid_uuid(eid) and store.contains(eid):  # type: ignore[arg-type]
            result.valid.append(eid)  # type: ignore[arg-type]
        else:
            result.invalid.append(eid if isinstance(eid, str) else str(eid))
    return result
