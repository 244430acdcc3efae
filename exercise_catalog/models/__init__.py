from .exercise import Exercise, is_valid_uuid
from .catalog_io import (
    SearchFilter,
    AlternativesRequest,
    IdsRequest,
    SearchResult,
    ValidationResult,
    CatalogStats,
    RejectedRecord,
    IntegritySummary,
    IntegrityReport,
)

__all__ = [
    "Exercise",
    "is_valid_uuid",
    "SearchFilter",
    "AlternativesRequest",
    "IdsRequest",
    "SearchResult",
    "ValidationResult",
    "CatalogStats",
    "RejectedRecord",
    "IntegritySummary",
    "IntegrityReport",
]
