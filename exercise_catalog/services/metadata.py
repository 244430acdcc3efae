from __future__ import annotations

from typing import Dict, Iterable, List

from exercise_catalog.models.catalog_io import CatalogStats
from .catalog import CatalogStore
from .indexes import APPLE_CATEGORY, BODY_PART, CATEGORY, EQUIPMENT, MUSCLE, CatalogIndexes
from .text import normalize_text


def sorted_labels(indexes: CatalogIndexes, field: str) -> List[str]:
    return sorted(indexes.labels(field))


def get_categories(indexes: CatalogIndexes) -> List[str]:
    return sorted_labels(indexes, CATEGORY)


def get_equipment_types(indexes: CatalogIndexes) -> List[str]:
    return sorted_labels(indexes, EQUIPMENT)


def get_muscle_groups(indexes: CatalogIndexes) -> List[str]:
    return sorted_labels(indexes, MUSCLE)


def get_body_parts(indexes: CatalogIndexes) -> List[str]:
    return sorted_labels(indexes, BODY_PART)


def get_apple_categories(indexes: CatalogIndexes) -> List[str]:
    return sorted_labels(indexes, APPLE_CATEGORY)


def get_stats(store: CatalogStore, indexes: CatalogIndexes) -> CatalogStats:
    exercises = store.all()
    n = len(exercises)
    primary = _distinct_labels(m for ex in exercises for m in ex.primary_muscles)
    secondary = _distinct_labels(m for ex in exercises for m in ex.secondary_muscles)
    steps = sum(len(ex.instructions) for ex in exercises)
    images = sum(len(ex.images) for ex in exercises)
    return CatalogStats(
        total_exercises=n,
        categories=len(indexes.keys(CATEGORY)),
        equipment_types=len(indexes.keys(EQUIPMENT)),
        muscle_groups=len(indexes.keys(MUSCLE)),
        body_parts=len(indexes.keys(BODY_PART)),
        apple_categories=len(indexes.keys(APPLE_CATEGORY)),
        primary_muscles=sorted(primary),
        secondary_muscles=sorted(secondary),
        average_instruction_steps=steps / n if n else 0.0,
        average_image_count=images / n if n else 0.0,
    )


def _distinct_labels(values: Iterable[str]) -> List[str]:
    # one label per normalized key, first spelling wins, same as the muscle index
    labels: Dict[str, str] = {}
    for value in values:
        labels.setdefault(normalize_text(value), value)
    return list(labels.values())
