"""SQLAlchemy mapping metadata for the launch catalog."""

from __future__ import annotations

import logging
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, Table, orm
from sqlalchemy.orm import configure_mappers

from launchsync.domain.model import Launch

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

launch_table = Table(
    "launch",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("payload_id", String, nullable=False, unique=True),
    Column("flight_number", Integer, nullable=True, index=True),
    Column("upcoming", Boolean, nullable=False, default=True, index=True),
    Column("site_id", String, nullable=True),
    Column("site_name", String, nullable=True),
    Column("site_name_long", String, nullable=True),
    Column("launch_year", String(4), nullable=True),
    Column("launch_date_unix", BigInteger, nullable=True),
    Column("launch_date_utc", String, nullable=True),
    Column("launch_date_local", String, nullable=True),
    Column("is_tentative", Boolean, nullable=True),
    Column("tentative_max_precision", String, nullable=True),
    Column("tbd", Boolean, nullable=True),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Launch, launch_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
