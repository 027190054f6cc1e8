"""Pydantic models describing cells scraped from the manifest table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _collapse_whitespace(value: object) -> object:
    if isinstance(value, str):
        return " ".join(value.split())
    return value


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ManifestRowPayload(ManifestBaseModel):
    """Raw text of the cells the reconciliation needs from one table row.

    ``position`` is the zero-based index of the row among the table's data
    rows, counted before any row is skipped.
    """

    position: int = Field(ge=0)
    date: str = Field(min_length=1)
    payload: str = Field(min_length=1)
    launchpad: str = ""

    _normalize_cells = field_validator("date", "payload", "launchpad", mode="before")(
        _collapse_whitespace
    )
