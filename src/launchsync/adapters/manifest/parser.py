"""Extract manifest rows from the wiki HTML."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup
from pydantic import ValidationError

from .schema import ManifestRowPayload

if TYPE_CHECKING:
    from bs4 import Tag

    from launchsync.config.manifest import ManifestConfig

log = getLogger(__name__)


class ManifestParseError(ValueError):
    """Raised when the manifest table cannot be located in the page."""


def parse_manifest_table(html: str, *, config: ManifestConfig) -> list[ManifestRowPayload]:
    """Return the usable rows of the manifest table in document order.

    Header rows (no ``td`` cells) are ignored. Rows that are too short or lack a
    date or payload are logged and skipped, but still use up their manifest
    position so later rows keep their place in the launch order.
    """

    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one(config.table_selector)
    if table is None:
        raise ManifestParseError(
            f"Manifest table not found using selector {config.table_selector!r}"
        )

    payloads: list[ManifestRowPayload] = []
    data_rows = (row for row in _table_rows(table) if row.find_all("td"))
    for index, row in enumerate(data_rows):
        cells = row.find_all("td")
        if len(cells) < config.required_cells:
            log.warning(
                "Skipping manifest row %d: expected %d cells, found %d",
                index,
                config.required_cells,
                len(cells),
            )
            continue
        try:
            payload = ManifestRowPayload(
                position=index,
                date=cells[config.date_column].get_text(" ", strip=True),
                payload=cells[config.payload_column].get_text(" ", strip=True),
                launchpad=cells[config.launchpad_column].get_text(" ", strip=True),
            )
        except ValidationError as exc:
            log.warning("Skipping manifest row %d: %s", index, exc.errors()[0]["msg"])
            continue
        payloads.append(payload)

    log.info("Parsed %d manifest rows", len(payloads))
    return payloads


def _table_rows(table: Tag) -> list[Tag]:
    body_rows = table.select(":scope > tbody > tr")
    if body_rows:
        return body_rows
    return table.select(":scope > tr")
