"""Launch catalog entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LaunchSite:
    site_id: str
    name: str
    name_long: str


@dataclass(eq=False, kw_only=True)
class Launch:
    """A catalogued launch, identified by the id of its primary payload.

    ``flight_number`` is the launch ordinal across flown and upcoming launches.
    The date fields mirror what the manifest reconciliation writes.
    """

    payload_id: str
    flight_number: int | None = None
    upcoming: bool = True
    site_id: str | None = None
    site_name: str | None = None
    site_name_long: str | None = None
    launch_year: str | None = None
    launch_date_unix: int | None = None
    launch_date_utc: str | None = None
    launch_date_local: str | None = None
    is_tentative: bool | None = None
    tentative_max_precision: str | None = None
    tbd: bool | None = None
    id: int | None = None

    def __repr__(self) -> str:
        return f"Launch(payload_id={self.payload_id!r}, flight_number={self.flight_number})"
