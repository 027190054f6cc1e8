"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from sqlalchemy import func, select

from launchsync.adapters.sqlalchemy.mappings import launch_table
from launchsync.domain.model import Launch, UpdateStatus

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from launchsync.domain.reconciliation.contracts import UpdateRecord

log = logging.getLogger(__name__)


class SqlAlchemyLaunchRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Launch) -> None:
        self.session.add(entity)

    def get_by_payload_id(self, payload_id: str) -> Launch | None:
        stmt = select(Launch).where(launch_table.c.payload_id == payload_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def list_upcoming(self) -> list[Launch]:
        stmt = (
            select(Launch)
            .where(launch_table.c.upcoming.is_(True))
            .order_by(launch_table.c.flight_number.asc().nulls_last(), launch_table.c.id)
        )
        return list(self.session.execute(stmt).scalars())

    def latest_flown_flight_number(self) -> int | None:
        stmt = select(func.max(launch_table.c.flight_number)).where(
            launch_table.c.upcoming.is_(False)
        )
        return cast("int | None", self.session.execute(stmt).scalar_one_or_none())

    def apply_update(self, update: UpdateRecord) -> UpdateStatus:
        launch = self.get_by_payload_id(update.payload_id)
        if launch is None:
            log.warning("No launch found for payload %s", update.payload_id)
            return UpdateStatus.NOT_FOUND

        changed = False
        for name, value in update.fields().items():
            if getattr(launch, name) != value:
                setattr(launch, name, value)
                changed = True
        if not changed:
            return UpdateStatus.UNCHANGED
        self.session.flush()
        return UpdateStatus.UPDATED


class SqlAlchemyUpdateSubmitter:
    """Apply each update inside its own SAVEPOINT so one failure leaves the others intact."""

    def __init__(self, session: Session, repository: SqlAlchemyLaunchRepository) -> None:
        self.session = session
        self.repository = repository

    async def __call__(self, update: UpdateRecord) -> UpdateStatus:
        with self.session.begin_nested():
            return self.repository.apply_update(update)


if TYPE_CHECKING:
    from launchsync.domain.ports.persistence import LaunchRepository, UpdateSubmitter

    _session_stub = cast("Session", object())
    _repo_check: LaunchRepository = SqlAlchemyLaunchRepository(_session_stub)
    _submitter_check: UpdateSubmitter = SqlAlchemyUpdateSubmitter(
        _session_stub, SqlAlchemyLaunchRepository(_session_stub)
    )
