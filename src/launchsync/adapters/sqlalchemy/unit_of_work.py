"""Session lifecycle for the SQLAlchemy-backed launch catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from launchsync.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from launchsync.adapters.sqlalchemy.repositories import (
    SqlAlchemyLaunchRepository,
    SqlAlchemyUpdateSubmitter,
)
from launchsync.config import get_database_config
from launchsync.domain.ports.unit_of_work import LaunchRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the launch store is used before ``startup()`` or out of order."""


@dataclass(slots=True)
class _StoreState:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self.sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.sessions = None

    def session_factory(self) -> sessionmaker[Session]:
        if self.sessions is None:
            raise StartupError(
                "Launch store not started. Call launchsync.adapters.sqlalchemy.startup() "
                "before opening a unit of work."
            )
        return self.sessions


_STATE = _StoreState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> Engine:
    """Bind the launch store to an engine, creating the schema if needed.

    Without ``engine`` the engine is built from ``database_uri`` or, failing
    that, from the configured database URI. Rebinding an already started store
    requires ``force=True``. Returns the bound engine.
    """

    if _STATE.engine is not None and not force:
        raise StartupError("Launch store already started. Pass force=True to rebind it.")

    bound = engine or create_engine(database_uri or get_database_config().uri, future=True)
    start_mappers()
    create_all_tables(bound)
    _STATE.bind(bound)
    log.debug("Launch store bound to %s", bound.url)
    return bound


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the bound engine and forget it."""

    _STATE.reset()


class SqlAlchemyLaunchUnitOfWork:
    """One session over the launch catalog; entered once per reconciliation or seed."""

    def __init__(self) -> None:
        self._sessions = _STATE.session_factory()
        self._session: Session | None = None
        self._repositories: LaunchRepositories | None = None

    def __enter__(self) -> SqlAlchemyLaunchUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self._sessions()
        self._repositories = LaunchRepositories(
            launches=SqlAlchemyLaunchRepository(self._session)
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def repositories(self) -> LaunchRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def update_submitter(self) -> SqlAlchemyUpdateSubmitter:
        session = self.session
        return SqlAlchemyUpdateSubmitter(session, SqlAlchemyLaunchRepository(session))


if TYPE_CHECKING:
    from launchsync.domain.ports.unit_of_work import LaunchUnitOfWork

    _uow_check: LaunchUnitOfWork = SqlAlchemyLaunchUnitOfWork()
