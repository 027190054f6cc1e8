"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ManifestFetcher
from .persistence import LaunchRepository, Repository, UpdateSubmitter
from .unit_of_work import (
    LaunchRepositories,
    LaunchUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "LaunchRepositories",
    "LaunchRepository",
    "LaunchUnitOfWork",
    "ManifestFetcher",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
    "UpdateSubmitter",
]
