"""Manifest-to-catalog reconciliation core."""

from __future__ import annotations

from .contracts import (
    AbortReason,
    Aborted,
    Completed,
    ManifestRow,
    Match,
    Outcome,
    ReconciliationPlan,
    RowResult,
    SkippedRow,
    UpdateRecord,
)
from .dates import DATE_PATTERNS, ResolvedDate, classify_date, localize, resolve_date
from .errors import DateParseError, ReconciliationError
from .matching import MAX_SCORE, match_payloads
from .pipeline import ReconciliationPipeline, submit_updates
from .sequence import assign_flight_numbers, find_duplicate_flight_numbers, next_flight_number
from .sites import LAUNCHPAD_SITES, resolve_launchpad, site_by_id, time_zone_for

__all__ = [
    "DATE_PATTERNS",
    "LAUNCHPAD_SITES",
    "MAX_SCORE",
    "AbortReason",
    "Aborted",
    "Completed",
    "DateParseError",
    "ManifestRow",
    "Match",
    "Outcome",
    "ReconciliationError",
    "ReconciliationPipeline",
    "ReconciliationPlan",
    "ResolvedDate",
    "RowResult",
    "SkippedRow",
    "UpdateRecord",
    "assign_flight_numbers",
    "classify_date",
    "find_duplicate_flight_numbers",
    "localize",
    "match_payloads",
    "next_flight_number",
    "resolve_date",
    "resolve_launchpad",
    "site_by_id",
    "submit_updates",
    "time_zone_for",
]
