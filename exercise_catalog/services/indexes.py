from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List

from exercise_catalog.models.exercise import Exercise
from .catalog import CatalogStore
from .text import normalize_text

logger = logging.getLogger(__name__)

EQUIPMENT = "equipment"
CATEGORY = "category"
BODY_PART = "body_part"
APPLE_CATEGORY = "apple_category"
MUSCLE = "muscle"

_FIELD_VALUES: Dict[str, Callable[[Exercise], Iterable[str]]] = {
    EQUIPMENT: lambda ex: (ex.equipment,),
    CATEGORY: lambda ex: (ex.category,),
    BODY_PART: lambda ex: (ex.body_part,),
    APPLE_CATEGORY: lambda ex: (ex.apple_category,),
    MUSCLE: lambda ex: ex.muscles,
}

FIELDS = tuple(_FIELD_VALUES)


class CatalogIndexes:
    """Secondary indexes: normalized field value -> exercise ids in catalog order."""

    def __init__(self) -> None:
        self._ids: Dict[str, Dict[str, List[str]]] = {f: {} for f in FIELDS}
        self._labels: Dict[str, Dict[str, str]] = {f: {} for f in FIELDS}

    @classmethod
    def from_store(cls, store: CatalogStore) -> "CatalogIndexes":
        idx = cls()
        idx.build(store)
        return idx

    def build(self, store: CatalogStore) -> None:
        for f in FIELDS:
            self._ids[f].clear()
            self._labels[f].clear()

        for ex in store:
            for f, values in _FIELD_VALUES.items():
                ids = self._ids[f]
                labels = self._labels[f]
                for value in values(ex):
                    key = normalize_text(value)
                    bucket = ids.setdefault(key, [])
                    # a muscle listed as both primary and secondary indexes once
                    if bucket and bucket[-1] == ex.id:
                        continue
                    bucket.append(ex.id)
                    labels.setdefault(key, value)

        logger.debug(
            "Built catalog indexes: %s",
            ", ".join(f"{f}={len(self._ids[f])}" for f in FIELDS),
        )

    def _field(self, field: str) -> Dict[str, List[str]]:
        try:
            return self._ids[field]
        except KeyError:
            raise ValueError(f"Unknown index field: {field}") from None

    def ids_for(self, field: str, value: str) -> List[str]:
        return list(self._field(field).get(normalize_text(value), ()))

    def keys(self, field: str) -> List[str]:
        return list(self._field(field).keys())

    def labels(self, field: str) -> List[str]:
        self._field(field)
        return list(self._labels[field].values())

    def items(self, field: str) -> Iterator[tuple[str, List[str]]]:
        return iter(self._field(field).items())

    def iter_ids(self) -> Iterator[str]:
        for f in FIELDS:
            for ids in self._ids[f].values():
                yield from ids
