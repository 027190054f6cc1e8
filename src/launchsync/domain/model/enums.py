"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Precision(StrEnum):
    """Coarsest known unit of a manifest date."""

    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    QUARTER = "quarter"
    HALF = "half"
    YEAR = "year"


class UpdateStatus(StrEnum):
    """What happened when an update was applied to the launch store."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    FAILED = "failed"
