"""Launch manifest source configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass

from launchsync import __version__

from .env import optional_env_float, require_env_vars

DEFAULT_MANIFEST_URL = "https://www.reddit.com/r/spacex/wiki/launches/manifest"
DEFAULT_MANIFEST_TIMEOUT_SECONDS = 30.0
DEFAULT_TABLE_SELECTOR = "body > div.content > div > div > table:nth-child(6)"


@dataclass(frozen=True, slots=True)
class ManifestConfig:
    """Where the manifest lives and how its table is laid out."""

    url: str
    user_agent: str
    timeout_seconds: float = DEFAULT_MANIFEST_TIMEOUT_SECONDS
    table_selector: str = DEFAULT_TABLE_SELECTOR
    date_column: int = 0
    payload_column: int = 3
    launchpad_column: int = 6

    @property
    def required_cells(self) -> int:
        return max(self.date_column, self.payload_column, self.launchpad_column) + 1


def get_manifest_config() -> ManifestConfig:
    values = require_env_vars(("LAUNCHSYNC_CONTACT",))
    user_agent = f"launchsync/{__version__} ({values['LAUNCHSYNC_CONTACT']})"
    return ManifestConfig(
        url=os.getenv("LAUNCHSYNC_MANIFEST_URL") or DEFAULT_MANIFEST_URL,
        user_agent=user_agent,
        timeout_seconds=optional_env_float(
            "LAUNCHSYNC_MANIFEST_TIMEOUT", DEFAULT_MANIFEST_TIMEOUT_SECONDS
        ),
        table_selector=os.getenv("LAUNCHSYNC_MANIFEST_TABLE") or DEFAULT_TABLE_SELECTOR,
    )
