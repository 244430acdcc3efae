from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from exercise_catalog.config import get_settings
from exercise_catalog.models.exercise import Exercise
from .catalog import CatalogStore
from .indexes import EQUIPMENT, MUSCLE, CatalogIndexes
from .text import normalize_text

PRIMARY_PRIMARY = 10
PRIMARY_SECONDARY = 5
SECONDARY_PRIMARY = 5
SECONDARY_SECONDARY = 3
SAME_BODY_PART = 5
SAME_CATEGORY = 3
SAME_EQUIPMENT = 2


def _norm_set(values: Sequence[str]) -> Set[str]:
    return {normalize_text(v) for v in values}


def similarity_score(reference: Exercise, candidate: Exercise) -> int:
    """Weighted muscle and attribute overlap between two exercises."""
    cand_primary = _norm_set(candidate.primary_muscles)
    cand_secondary = _norm_set(candidate.secondary_muscles)

    score = 0
    for muscle in _norm_set(reference.primary_muscles):
        if muscle in cand_primary:
            score += PRIMARY_PRIMARY
        if muscle in cand_secondary:
            score += PRIMARY_SECONDARY
    for muscle in _norm_set(reference.secondary_muscles):
        if muscle in cand_primary:
            score += SECONDARY_PRIMARY
        if muscle in cand_secondary:
            score += SECONDARY_SECONDARY

    if normalize_text(candidate.body_part) == normalize_text(reference.body_part):
        score += SAME_BODY_PART
    if normalize_text(candidate.category) == normalize_text(reference.category):
        score += SAME_CATEGORY
    if normalize_text(candidate.equipment) == normalize_text(reference.equipment):
        score += SAME_EQUIPMENT
    return score


def _ids_sharing_muscles(indexes: CatalogIndexes, targets: Sequence[str]) -> Set[str]:
    wanted = [normalize_text(m) for m in targets if m.strip()]
    out: Set[str] = set()
    for key, ids in indexes.items(MUSCLE):
        if any(t in key for t in wanted):
            out.update(ids)
    return out


def clamp_limit(limit: Optional[int]) -> int:
    settings = get_settings()
    if limit is None:
        return settings.DEFAULT_ALTERNATIVES_LIMIT
    return max(1, min(settings.MAX_ALTERNATIVES_LIMIT, int(limit)))


def find_alternatives(
    store: CatalogStore,
    indexes: CatalogIndexes,
    exercise_id: str,
    target_muscles: Optional[Sequence[str]] = None,
    equipment: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Exercise]:
    reference = store.get_by_id(exercise_id)
    limit = clamp_limit(limit)

    if isinstance(target_muscles, str):
        target_muscles = [target_muscles]
    targets = [m for m in (target_muscles or []) if m.strip()] or list(reference.primary_muscles)
    allowed = _ids_sharing_muscles(indexes, targets)
    allowed.discard(reference.id)
    if equipment and equipment.strip():
        allowed &= set(indexes.ids_for(EQUIPMENT, equipment))
    if not allowed:
        return []

    scored: List[Tuple[int, Exercise]] = [
        (similarity_score(reference, ex), ex) for ex in store if ex.id in allowed
    ]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [ex for _, ex in scored[:limit]]
