"""Errors raised by the reconciliation core."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for reconciliation failures."""


class DateParseError(ReconciliationError, ValueError):
    """Raised when a manifest date matches none of the known formats."""

    def __init__(self, raw: str, reason: str = "matches no known date pattern") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Unrecognised manifest date {raw!r}: {reason}")
