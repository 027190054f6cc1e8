"""Translate scraped manifest payloads into domain rows."""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchsync.domain.reconciliation.contracts import ManifestRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import ManifestRowPayload


def translate_rows(payloads: Iterable[ManifestRowPayload]) -> list[ManifestRow]:
    """Carry each payload's manifest position over to its domain row."""

    return [
        ManifestRow(
            position=payload.position,
            raw_date=payload.date,
            payload_label=payload.payload,
            launchpad_label=payload.launchpad,
        )
        for payload in payloads
    ]
