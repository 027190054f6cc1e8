"""Shared fixtures for manifest adapter tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parents[2] / "data" / "manifest"


@pytest.fixture
def manifest_html() -> str:
    return (FIXTURES / "manifest.html").read_text()
