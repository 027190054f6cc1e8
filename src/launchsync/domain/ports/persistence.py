"""Ports for persisting the launch catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from launchsync.domain.model import Launch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from launchsync.domain.model import UpdateStatus
    from launchsync.domain.reconciliation.contracts import UpdateRecord


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class LaunchRepository(Repository[Launch], Protocol):
    """Persistence contract for catalogued launches."""

    def get_by_payload_id(self, payload_id: str) -> Launch | None: ...

    def list_upcoming(self) -> Sequence[Launch]: ...

    def latest_flown_flight_number(self) -> int | None: ...

    def apply_update(self, update: UpdateRecord) -> UpdateStatus: ...


@runtime_checkable
class UpdateSubmitter(Protocol):
    """Submit one update to the store; calls may run concurrently."""

    async def __call__(self, update: UpdateRecord) -> UpdateStatus: ...
