from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest
from sqlalchemy.exc import IntegrityError

from launchsync.adapters.sqlalchemy import SqlAlchemyLaunchRepository, SqlAlchemyUpdateSubmitter
from launchsync.domain.model import Precision, UpdateStatus
from launchsync.domain.reconciliation import UpdateRecord
from tests.helpers.launches import make_launch

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def _update(payload_id: str, *, flight_number: int = 88) -> UpdateRecord:
    return UpdateRecord(
        payload_id=payload_id,
        flight_number=flight_number,
        launch_year="2020",
        launch_date_unix=1604499000,
        launch_date_utc="2020-11-04T14:10:00.000Z",
        launch_date_local="2020-11-04T09:10:00-05:00",
        is_tentative=False,
        tentative_max_precision=Precision.HOUR,
        tbd=False,
        site_id="ccafs_slc_40",
        site_name="CCAFS SLC 40",
        site_name_long="Cape Canaveral Air Force Station Space Launch Complex 40",
    )


def test_add_and_get_by_payload_id(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    repository.add(make_launch("Crew-1", site_id="ksc_lc_39a"))
    sqlite_session.commit()

    stored = repository.get_by_payload_id("Crew-1")

    assert stored is not None
    assert stored.site_id == "ksc_lc_39a"
    assert stored.upcoming is True
    assert repository.get_by_payload_id("Crew-2") is None


def test_payload_id_is_unique(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    repository.add(make_launch("Crew-1"))
    repository.add(make_launch("Crew-1"))

    with pytest.raises(IntegrityError):
        sqlite_session.flush()


def test_list_upcoming_orders_by_flight_number(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    repository.add(make_launch("Unnumbered"))
    repository.add(make_launch("Later", flight_number=95))
    repository.add(make_launch("Flown", flight_number=80, upcoming=False))
    repository.add(make_launch("Sooner", flight_number=90))
    sqlite_session.commit()

    upcoming = repository.list_upcoming()

    assert [launch.payload_id for launch in upcoming] == ["Sooner", "Later", "Unnumbered"]


def test_latest_flown_flight_number(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    assert repository.latest_flown_flight_number() is None

    repository.add(make_launch("Old", flight_number=86, upcoming=False))
    repository.add(make_launch("Recent", flight_number=87, upcoming=False))
    repository.add(make_launch("Next", flight_number=120))
    sqlite_session.commit()

    assert repository.latest_flown_flight_number() == 87


def test_apply_update_reports_status(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    repository.add(make_launch("Starlink-5", site_id="ccafs_slc_40"))
    sqlite_session.commit()

    assert repository.apply_update(_update("Starlink-5")) is UpdateStatus.UPDATED
    assert repository.apply_update(_update("Starlink-5")) is UpdateStatus.UNCHANGED
    assert repository.apply_update(_update("Starlink-99")) is UpdateStatus.NOT_FOUND

    stored = repository.get_by_payload_id("Starlink-5")
    assert stored is not None
    assert stored.flight_number == 88
    assert stored.tentative_max_precision == "hour"
    assert stored.launch_date_local == "2020-11-04T09:10:00-05:00"


def test_update_submitter_persists_changes(sqlite_session: Session) -> None:
    repository = SqlAlchemyLaunchRepository(sqlite_session)
    repository.add(make_launch("Starlink-5"))
    sqlite_session.commit()
    submitter = SqlAlchemyUpdateSubmitter(sqlite_session, repository)

    status = asyncio.run(submitter(_update("Starlink-5", flight_number=91)))
    sqlite_session.commit()
    sqlite_session.expire_all()

    assert status is UpdateStatus.UPDATED
    stored = repository.get_by_payload_id("Starlink-5")
    assert stored is not None
    assert stored.flight_number == 91
