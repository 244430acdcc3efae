from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set, Tuple

from exercise_catalog.config import get_settings
from exercise_catalog.models.catalog_io import SearchFilter, SearchResult
from exercise_catalog.models.exercise import Exercise
from .catalog import CatalogStore
from .indexes import APPLE_CATEGORY, BODY_PART, CATEGORY, EQUIPMENT, CatalogIndexes
from .text import name_similarity, normalize_text, query_words

# Relevance weights for the whole query
NAME_EXACT = 100.0
NAME_CONTAINS = 50.0
NAME_FUZZY_MAX = 60.0
CATEGORY_HIT = 30.0
EQUIPMENT_HIT = 25.0
BODY_PART_HIT = 20.0
MUSCLE_HIT = 20.0
INSTRUCTION_HIT = 10.0

# Per-word bonuses for multi-word queries
WORD_NAME = 10.0
WORD_CATEGORY = 5.0
WORD_EQUIPMENT = 3.0
WORD_BODY_PART = 2.0
WORD_MUSCLE = 2.0
WORD_INSTRUCTION = 2.0


def _any_contains(haystack: Iterable[str], needle: str) -> bool:
    return any(needle in normalize_text(item) for item in haystack)


def relevance_score(exercise: Exercise, query: str, fuzzy_threshold: Optional[float] = None) -> float:
    """Deterministic additive relevance of ``exercise`` for ``query``; 0 means no match."""
    q = normalize_text(query)
    if not q:
        return 0.0
    if fuzzy_threshold is None:
        fuzzy_threshold = get_settings().FUZZY_NAME_THRESHOLD

    name = normalize_text(exercise.name)
    category = normalize_text(exercise.category)
    equipment = normalize_text(exercise.equipment)
    body_part = normalize_text(exercise.body_part)

    score = 0.0
    if name == q:
        score += NAME_EXACT
    elif q in name:
        score += NAME_CONTAINS
    else:
        similarity = name_similarity(q, name)
        if similarity > fuzzy_threshold:
            score += similarity * NAME_FUZZY_MAX

    if q in category:
        score += CATEGORY_HIT
    if q in equipment:
        score += EQUIPMENT_HIT
    if q in body_part:
        score += BODY_PART_HIT
    if _any_contains(exercise.muscles, q):
        score += MUSCLE_HIT
    if _any_contains(exercise.instructions, q):
        score += INSTRUCTION_HIT

    if " " in q:
        for word in query_words(q):
            if word in name:
                score += WORD_NAME
            if word in category:
                score += WORD_CATEGORY
            if word in equipment:
                score += WORD_EQUIPMENT
            if word in body_part:
                score += WORD_BODY_PART
            if _any_contains(exercise.muscles, word):
                score += WORD_MUSCLE
            if _any_contains(exercise.instructions, word):
                score += WORD_INSTRUCTION
    return score


def _indexed_candidates(store: CatalogStore, indexes: CatalogIndexes, flt: SearchFilter) -> List[Exercise]:
    lists: List[List[str]] = []
    for field, value in (
        (EQUIPMENT, flt.equipment),
        (CATEGORY, flt.category),
        (BODY_PART, flt.body_part),
        (APPLE_CATEGORY, flt.apple_category),
    ):
        if value is not None:
            lists.append(indexes.ids_for(field, value))

    if not lists:
        return list(store.all())

    # Index lists are in catalog order; walk the shortest and check membership in the rest.
    lists.sort(key=len)
    base, rest = lists[0], [set(ids) for ids in lists[1:]]
    return [store.get_by_id(eid) for eid in base if all(eid in s for s in rest)]


def _muscle_match(muscles: Sequence[str], wanted: Sequence[str]) -> bool:
    return any(_any_contains(muscles, normalize_text(m)) for m in wanted)


def _has_tags(exercise: Exercise, wanted: Set[str]) -> bool:
    have = {normalize_text(t) for t in exercise.tags}
    return wanted <= have


def filter_candidates(store: CatalogStore, indexes: CatalogIndexes, flt: SearchFilter) -> List[Exercise]:
    candidates = _indexed_candidates(store, indexes, flt)
    if flt.primary_muscles:
        candidates = [ex for ex in candidates if _muscle_match(ex.primary_muscles, flt.primary_muscles)]
    if flt.secondary_muscles:
        candidates = [ex for ex in candidates if _muscle_match(ex.secondary_muscles, flt.secondary_muscles)]
    if flt.tags:
        wanted = {normalize_text(t) for t in flt.tags}
        candidates = [ex for ex in candidates if _has_tags(ex, wanted)]
    return candidates


def rank(candidates: Sequence[Exercise], query: str) -> List[Exercise]:
    """Drop non-matching candidates and order by relevance, ties in catalog order.

    Exact name matches sort ahead of everything else regardless of score.
    """
    threshold = get_settings().FUZZY_NAME_THRESHOLD
    q = normalize_text(query)
    scored: List[Tuple[Tuple[bool, float], Exercise]] = []
    for ex in candidates:
        s = relevance_score(ex, q, threshold)
        if s > 0:
            scored.append(((normalize_text(ex.name) == q, s), ex))
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [ex for _, ex in scored]


def paginate(exercises: Sequence[Exercise], limit: int, offset: int) -> SearchResult:
    total = len(exercises)
    page = list(exercises[offset:offset + limit])
    return SearchResult(
        exercises=page,
        total=total,
        limit=limit,
        offset=offset,
        has_more=offset + len(page) < total,
    )


def search(store: CatalogStore, indexes: CatalogIndexes, flt: SearchFilter) -> SearchResult:
    candidates = filter_candidates(store, indexes, flt)
    if flt.query:
        candidates = rank(candidates, flt.query)
    return paginate(candidates, flt.limit, flt.offset)
