from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from launchsync.adapters.sqlalchemy import create_all_tables, start_mappers
from launchsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLaunchUnitOfWork,
    shutdown,
    startup,
)
from launchsync.config.manifest import ManifestConfig

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyLaunchUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyLaunchUnitOfWork:
        return SqlAlchemyLaunchUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def manifest_config() -> ManifestConfig:
    return ManifestConfig(
        url="https://manifest.test/launches",
        user_agent="launchsync-tests/0.0 (tests@example.com)",
        timeout_seconds=5.0,
        table_selector="table#manifest",
    )
