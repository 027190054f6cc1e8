"""HTTP client for the launch manifest page."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from launchsync.config.manifest import ManifestConfig

log = getLogger(__name__)


class ManifestFetchError(RuntimeError):
    """Raised when the manifest page cannot be retrieved."""


class ManifestClient:
    """Low-level HTTP client for the manifest page."""

    def __init__(
        self,
        *,
        config: ManifestConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def fetch_html(self) -> str:
        return asyncio.run(self._fetch_html_async())

    async def _fetch_html_async(self) -> str:
        log.info("Fetching manifest from %s", self._config.url)
        async with httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            headers={"User-Agent": self._config.user_agent},
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(self._config.url)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise ManifestFetchError(
                    f"Failed to fetch manifest from {self._config.url}: {exc}"
                ) from exc
        return response.text
