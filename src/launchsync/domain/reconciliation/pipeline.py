"""Reconcile manifest rows against the upcoming launch catalog.

Planning (matching, date and site resolution, flight numbering and the
duplicate check) is synchronous. Submission gathers one coroutine per update
and reports once all of them have finished. Submissions overlap only when the
submitter awaits real I/O; the SQLAlchemy submitter works on one blocking
session, so its updates run one after another on the event loop. A plan with
duplicate flight numbers is never submitted.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from launchsync.domain.model import Launch, LaunchSite, UpdateStatus

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
from .dates import ResolvedDate, localize, resolve_date
from .errors import DateParseError
from .matching import match_payloads
from .sequence import assign_flight_numbers, find_duplicate_flight_numbers
from .sites import resolve_launchpad, time_zone_for

if TYPE_CHECKING:
    from launchsync.domain.ports.persistence import UpdateSubmitter

log = logging.getLogger(__name__)

type MatchPayloads = Callable[[Iterable[Launch], Sequence[ManifestRow]], list[Match]]
type ResolveDate = Callable[[str], ResolvedDate]
type ResolveLaunchpad = Callable[[str], LaunchSite | None]
type TimeZoneFor = Callable[[str | None], str]


@dataclass(slots=True)
class ReconciliationPipeline:
    """Turn one manifest snapshot into flight-numbered launch updates."""

    match: MatchPayloads = match_payloads
    resolve_date: ResolveDate = resolve_date
    resolve_launchpad: ResolveLaunchpad = resolve_launchpad
    time_zone_for: TimeZoneFor = time_zone_for

    def plan(
        self,
        launches: Iterable[Launch],
        rows: Sequence[ManifestRow],
        *,
        base_flight_number: int,
    ) -> ReconciliationPlan:
        matches = self.match(launches, rows)

        resolved: list[tuple[Match, ResolvedDate]] = []
        skipped: list[SkippedRow] = []
        for match in matches:
            try:
                resolved_date = self.resolve_date(match.row.raw_date)
            except DateParseError as exc:
                log.warning(
                    "Skipping %s (manifest row %d): %s",
                    match.payload_id,
                    match.row.position,
                    exc,
                )
                skipped.append(
                    SkippedRow(payload_id=match.payload_id, row=match.row, reason=str(exc))
                )
                continue
            resolved.append((match, resolved_date))

        flight_numbers = assign_flight_numbers(
            base_flight_number, (match for match, _ in resolved)
        )
        updates = tuple(
            self._build_update(match, resolved_date, flight_numbers[match])
            for match, resolved_date in resolved
        )
        duplicates = find_duplicate_flight_numbers(update.flight_number for update in updates)
        return ReconciliationPlan(updates=updates, skipped=tuple(skipped), duplicates=duplicates)

    def run(
        self,
        launches: Iterable[Launch],
        rows: Sequence[ManifestRow],
        *,
        base_flight_number: int,
        submit: UpdateSubmitter,
    ) -> Outcome:
        plan = self.plan(launches, rows, base_flight_number=base_flight_number)
        return self.execute(plan, submit=submit)

    def execute(self, plan: ReconciliationPlan, *, submit: UpdateSubmitter) -> Outcome:
        """Submit a consistent plan; abort without writing anything otherwise."""

        if not plan.is_consistent:
            log.error("Duplicate flight numbers found: %s", ", ".join(map(str, plan.duplicates)))
            return Aborted(
                reason=AbortReason.DUPLICATE_FLIGHT_NUMBER,
                duplicates=plan.duplicates,
                skipped=plan.skipped,
            )
        results = asyncio.run(submit_updates(plan.updates, submit))
        return Completed(results=results, skipped=plan.skipped)

    def _build_update(
        self,
        match: Match,
        resolved_date: ResolvedDate,
        flight_number: int,
    ) -> UpdateRecord:
        site = self.resolve_launchpad(match.row.launchpad_label)
        # Local time follows the site already on record, not the manifest's pad.
        local_time = localize(resolved_date.instant, self.time_zone_for(match.site_id))
        update = UpdateRecord(
            payload_id=match.payload_id,
            flight_number=flight_number,
            launch_year=resolved_date.year,
            launch_date_unix=resolved_date.unix,
            launch_date_utc=resolved_date.iso_utc,
            launch_date_local=local_time,
            is_tentative=resolved_date.is_tentative,
            tentative_max_precision=resolved_date.precision,
            tbd=resolved_date.tbd,
            site_id=site.site_id if site else None,
            site_name=site.name if site else None,
            site_name_long=site.name_long if site else None,
        )
        log.debug("%s : %s -> %s", match.payload_id, match.row.payload_label, update)
        return update


async def submit_updates(
    updates: Sequence[UpdateRecord],
    submit: UpdateSubmitter,
) -> tuple[RowResult, ...]:
    """Submit every update concurrently and collect one result per update."""

    outcomes = await asyncio.gather(
        *(submit(update) for update in updates),
        return_exceptions=True,
    )

    results: list[RowResult] = []
    for update, outcome in zip(updates, outcomes, strict=True):
        if isinstance(outcome, Exception):
            log.error("Update for %s failed: %s", update.payload_id, outcome, exc_info=outcome)
            results.append(
                RowResult(
                    payload_id=update.payload_id,
                    status=UpdateStatus.FAILED,
                    error=str(outcome),
                )
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome is UpdateStatus.UPDATED:
            log.info("%s UPDATED", update.payload_id)
        else:
            log.info("%s %s", update.payload_id, outcome.value)
        results.append(RowResult(payload_id=update.payload_id, status=outcome))
    return tuple(results)
