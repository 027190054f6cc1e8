"""Public interface for the manifest adapter."""

from __future__ import annotations

from .client import ManifestClient, ManifestFetchError
from .fetcher import build_http_manifest_fetcher, fetch_manifest_rows
from .parser import ManifestParseError, parse_manifest_table
from .schema import ManifestRowPayload
from .translator import translate_rows

__all__ = [
    "ManifestClient",
    "ManifestFetchError",
    "ManifestParseError",
    "ManifestRowPayload",
    "build_http_manifest_fetcher",
    "fetch_manifest_rows",
    "parse_manifest_table",
    "translate_rows",
]
