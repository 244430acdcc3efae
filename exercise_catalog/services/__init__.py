from .catalog import CatalogStore
from .indexes import CatalogIndexes
from .loader import LoadResult, load_exercises, read_source, validate_records
from .search import relevance_score, search as search_catalog
from .alternatives import find_alternatives, similarity_score
from .validation import validate_ids
from .integrity import check_integrity

__all__ = [
    "CatalogStore",
    "CatalogIndexes",
    "LoadResult",
    "load_exercises",
    "read_source",
    "validate_records",
    "relevance_score",
    "search_catalog",
    "find_alternatives",
    "similarity_score",
    "validate_ids",
    "check_integrity",
]
