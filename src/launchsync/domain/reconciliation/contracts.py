"""Value types passed between reconciliation stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from launchsync.domain.model import UpdateStatus

if TYPE_CHECKING:
    from launchsync.domain.model import Precision


@dataclass(frozen=True, slots=True)
class ManifestRow:
    """One manifest row; ``position`` is its zero-based index in manifest order."""

    position: int
    raw_date: str
    payload_label: str
    launchpad_label: str


@dataclass(frozen=True, slots=True)
class Match:
    """A catalogued payload paired with the manifest row that names it."""

    payload_id: str
    site_id: str | None
    row: ManifestRow


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateRecord:
    """Field-set merged into the launch identified by ``payload_id``."""

    payload_id: str
    flight_number: int
    launch_year: str
    launch_date_unix: int
    launch_date_utc: str
    launch_date_local: str
    is_tentative: bool
    tentative_max_precision: Precision
    tbd: bool
    site_id: str | None
    site_name: str | None
    site_name_long: str | None

    def fields(self) -> dict[str, object]:
        return {
            "flight_number": self.flight_number,
            "launch_year": self.launch_year,
            "launch_date_unix": self.launch_date_unix,
            "launch_date_utc": self.launch_date_utc,
            "launch_date_local": self.launch_date_local,
            "is_tentative": self.is_tentative,
            "tentative_max_precision": self.tentative_max_precision.value,
            "tbd": self.tbd,
            "site_id": self.site_id,
            "site_name": self.site_name,
            "site_name_long": self.site_name_long,
        }


@dataclass(frozen=True, slots=True)
class SkippedRow:
    """A match dropped before update planning (unparseable date)."""

    payload_id: str
    row: ManifestRow
    reason: str


@dataclass(slots=True)
class ReconciliationPlan:
    """Updates derived from one manifest snapshot, before anything is written."""

    updates: tuple[UpdateRecord, ...] = ()
    skipped: tuple[SkippedRow, ...] = ()
    duplicates: tuple[int, ...] = ()

    @property
    def is_consistent(self) -> bool:
        return not self.duplicates


@dataclass(frozen=True, slots=True)
class RowResult:
    payload_id: str
    status: UpdateStatus
    error: str | None = None

    @property
    def updated(self) -> bool:
        return self.status is UpdateStatus.UPDATED


class AbortReason(StrEnum):
    DUPLICATE_FLIGHT_NUMBER = "duplicate_flight_number"


@dataclass(slots=True, kw_only=True)
class Aborted:
    """Run stopped before any update was submitted."""

    reason: AbortReason
    duplicates: tuple[int, ...] = ()
    skipped: tuple[SkippedRow, ...] = ()
    kind: Literal["aborted"] = "aborted"


@dataclass(slots=True, kw_only=True)
class Completed:
    """Every planned update was submitted; ``results`` holds one entry per update."""

    results: tuple[RowResult, ...] = ()
    skipped: tuple[SkippedRow, ...] = ()
    kind: Literal["completed"] = "completed"

    @property
    def failed(self) -> tuple[RowResult, ...]:
        return tuple(
            result for result in self.results if result.status is UpdateStatus.FAILED
        )

    @property
    def updated(self) -> tuple[RowResult, ...]:
        return tuple(result for result in self.results if result.updated)


type Outcome = Aborted | Completed
