from __future__ import annotations

from typing import Sequence

from exercise_catalog.models.catalog_io import IntegrityReport, IntegritySummary, RejectedRecord
from .catalog import CatalogStore


def check_integrity(store: CatalogStore, rejected: Sequence[RejectedRecord] = ()) -> IntegrityReport:
    """Report what the load dropped: duplicate ids and records that failed validation."""
    summary = IntegritySummary(duplicates=len(store.duplicate_ids), rejected=len(rejected))
    return IntegrityReport(
        is_valid=summary.duplicates == 0 and summary.rejected == 0,
        total_checked=len(store) + store.dropped_duplicates + len(rejected),
        duplicate_ids=list(store.duplicate_ids),
        rejected=list(rejected),
        summary=summary,
    )
