from __future__ import annotations

import re
from typing import List

from rapidfuzz.distance import Levenshtein

_WS = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, trim and collapse internal whitespace."""
    return _WS.sub(" ", text.strip().lower())


def query_words(query: str, min_length: int = 3) -> List[str]:
    return [w for w in normalize_text(query).split(" ") if len(w) >= min_length]


def name_similarity(query: str, target: str) -> float:
    """Normalized edit-distance similarity in [0, 1]; 1.0 means identical."""
    return Levenshtein.normalized_similarity(normalize_text(query), normalize_text(target))
