"""SQLAlchemy adapter package for launchsync."""

from __future__ import annotations

from .mappings import create_all_tables, launch_table, mapper_registry, start_mappers
from .repositories import SqlAlchemyLaunchRepository, SqlAlchemyUpdateSubmitter
from .unit_of_work import (
    SqlAlchemyLaunchUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyLaunchRepository",
    "SqlAlchemyLaunchUnitOfWork",
    "SqlAlchemyUpdateSubmitter",
    "StartupError",
    "create_all_tables",
    "is_started",
    "launch_table",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
