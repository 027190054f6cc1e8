"""Manifest row fetcher entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchsync.config.manifest import get_manifest_config

from .client import ManifestClient
from .parser import parse_manifest_table
from .translator import translate_rows

if TYPE_CHECKING:
    from launchsync.config.manifest import ManifestConfig
    from launchsync.domain.ports.fetching import ManifestFetcher
    from launchsync.domain.reconciliation.contracts import ManifestRow


def fetch_manifest_rows(
    *,
    config: ManifestConfig,
    client: ManifestClient | None = None,
) -> list[ManifestRow]:
    """Download the manifest page and return its rows in manifest order."""

    active_client = client or ManifestClient(config=config)
    html = active_client.fetch_html()
    return translate_rows(parse_manifest_table(html, config=config))


def build_http_manifest_fetcher(
    config: ManifestConfig | None = None,
    *,
    client: ManifestClient | None = None,
) -> ManifestFetcher:
    effective_config = config or get_manifest_config()

    def fetcher() -> list[ManifestRow]:
        return fetch_manifest_rows(config=effective_config, client=client)

    return fetcher
