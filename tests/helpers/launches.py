"""Builders for launches and manifest rows used across tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchsync.domain.model import Launch, UpdateStatus
from launchsync.domain.reconciliation import ManifestRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from launchsync.domain.reconciliation import UpdateRecord


def make_launch(
    payload_id: str,
    *,
    flight_number: int | None = None,
    upcoming: bool = True,
    site_id: str | None = None,
) -> Launch:
    return Launch(
        payload_id=payload_id,
        flight_number=flight_number,
        upcoming=upcoming,
        site_id=site_id,
    )


def make_rows(*entries: tuple[str, str, str]) -> list[ManifestRow]:
    """Build manifest rows from ``(date, payload, launchpad)`` triples in order."""

    return [
        ManifestRow(position=position, raw_date=date, payload_label=payload, launchpad_label=pad)
        for position, (date, payload, pad) in enumerate(entries)
    ]


class RecordingSubmitter:
    """Update submitter that records every call and can fail chosen payloads."""

    def __init__(
        self,
        *,
        failing: Iterable[str] = (),
        status: UpdateStatus = UpdateStatus.UPDATED,
    ) -> None:
        self.failing = frozenset(failing)
        self.status = status
        self.submitted: list[UpdateRecord] = []

    async def __call__(self, update: UpdateRecord) -> UpdateStatus:
        self.submitted.append(update)
        if update.payload_id in self.failing:
            raise RuntimeError(f"store rejected {update.payload_id}")
        return self.status
