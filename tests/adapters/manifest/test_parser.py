"""Parsing checks for the manifest wiki table."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from launchsync.adapters.manifest import ManifestParseError, parse_manifest_table, translate_rows
from launchsync.config.manifest import DEFAULT_TABLE_SELECTOR
from launchsync.domain.reconciliation import ReconciliationPipeline
from tests.helpers.launches import make_launch

if TYPE_CHECKING:
    from launchsync.config.manifest import ManifestConfig


def _table(*rows: str) -> str:
    return f"<html><body><table id='manifest'>{''.join(rows)}</table></body></html>"


def _row(*cells: str) -> str:
    return "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"


def test_default_selector_reads_the_manifest_table(
    manifest_html: str,
    manifest_config: ManifestConfig,
) -> None:
    config = replace(manifest_config, table_selector=DEFAULT_TABLE_SELECTOR)

    payloads = parse_manifest_table(manifest_html, config=config)

    assert [payload.position for payload in payloads] == [0, 1, 2, 3]
    assert [(payload.date, payload.payload, payload.launchpad) for payload in payloads] == [
        ("2020 Nov 4 [14:10]", "Starlink-5 (v1.0)", "SLC-40"),
        ("2020 Nov 14", "Crew-1", "LC-39A"),
        ("2020 early Dec", "SXM-7", "SLC-40 / LC-39A"),
        ("2021 Q1", "Transporter-1", "SLC-40"),
    ]


def test_rows_without_tbody_are_read(manifest_config: ManifestConfig) -> None:
    html = _table(
        "<tr><th>Date</th></tr>",
        _row("2020 Nov 22", "F9", "", "Starlink-15", "LEO", "SpaceX", "SLC-40"),
    )

    payloads = parse_manifest_table(html, config=manifest_config)

    assert [payload.payload for payload in payloads] == ["Starlink-15"]


def test_short_and_blank_rows_are_skipped(
    manifest_config: ManifestConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    html = _table(
        _row("2020 Nov 22", "F9", "", "Starlink-15"),
        _row("", "F9", "", "Starlink-16", "LEO", "SpaceX", "SLC-40"),
        _row("2020 Dec", "F9", "", "SXM-7", "GTO", "SiriusXM", "SLC-40"),
    )

    with caplog.at_level(logging.WARNING):
        payloads = parse_manifest_table(html, config=manifest_config)

    assert [(payload.position, payload.payload) for payload in payloads] == [(2, "SXM-7")]
    assert "expected 7 cells, found 4" in caplog.text


def test_missing_table_raises(manifest_config: ManifestConfig) -> None:
    with pytest.raises(ManifestParseError, match="table#manifest"):
        parse_manifest_table("<html><body><p>moved</p></body></html>", config=manifest_config)


def test_skipped_rows_keep_their_manifest_position(manifest_config: ManifestConfig) -> None:
    html = _table(
        "<tr><th>Date</th></tr>",
        _row("2020 Nov 22", "F9", "", "Starlink-15", "LEO", "SpaceX", "SLC-40"),
        _row("2020 Nov 25", "F9", "", "", "LEO", "SpaceX", "SLC-40"),
        _row("2020 Dec", "F9", "", "SXM-7", "GTO", "SiriusXM", "SLC-40"),
    )

    rows = translate_rows(parse_manifest_table(html, config=manifest_config))

    assert [(row.position, row.payload_label) for row in rows] == [
        (0, "Starlink-15"),
        (2, "SXM-7"),
    ]
    (update,) = ReconciliationPipeline().plan(
        [make_launch("SXM-7")], rows, base_flight_number=100
    ).updates
    assert update.flight_number == 102
