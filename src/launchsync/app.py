"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.adapters.manifest import build_http_manifest_fetcher
from launchsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLaunchUnitOfWork,
    is_started,
    startup,
)
from launchsync.domain.model import Launch
from launchsync.domain.ports.unit_of_work import LaunchUnitOfWork
from launchsync.domain.reconciliation import (
    ReconciliationPipeline,
    next_flight_number,
    site_by_id,
)

if TYPE_CHECKING:
    from launchsync.domain.ports.fetching import ManifestFetcher
    from launchsync.domain.reconciliation import Outcome, ReconciliationPlan

UnitOfWorkFactory = Callable[[], LaunchUnitOfWork]


log = getLogger(__name__)


class LaunchAlreadyExistsError(ValueError):
    """Raised when registering a payload id that is already catalogued."""


@dataclass(slots=True)
class ReconcileResult:
    """Summary of one manifest reconciliation."""

    fetched: int
    upcoming: int
    base_flight_number: int
    plan: ReconciliationPlan
    outcome: Outcome | None = None

    @property
    def dry_run(self) -> bool:
        return self.outcome is None


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyLaunchUnitOfWork


def reconcile_manifest(
    *,
    fetcher: ManifestFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    pipeline: ReconciliationPipeline | None = None,
    dry_run: bool = False,
) -> ReconcileResult:
    """Reconcile the launch manifest against the upcoming launches in the store."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    effective_fetcher = fetcher or build_http_manifest_fetcher()
    effective_pipeline = pipeline or ReconciliationPipeline()

    rows = list(effective_fetcher())
    log.info("Fetched %d manifest rows", len(rows))

    with effective_uow() as uow:
        launches = uow.repositories.launches
        upcoming = launches.list_upcoming()
        base_flight_number = next_flight_number(launches.latest_flown_flight_number())
        log.info(
            "Reconciling %d upcoming launches from flight number %d (dry_run=%s)",
            len(upcoming),
            base_flight_number,
            dry_run,
        )

        plan = effective_pipeline.plan(upcoming, rows, base_flight_number=base_flight_number)
        result = ReconcileResult(
            fetched=len(rows),
            upcoming=len(upcoming),
            base_flight_number=base_flight_number,
            plan=plan,
        )
        if dry_run:
            return result

        result.outcome = effective_pipeline.execute(plan, submit=uow.update_submitter())
        if result.outcome.kind == "completed":
            uow.commit()

    return result


def register_launch(
    *,
    payload_id: str,
    flight_number: int | None = None,
    upcoming: bool = True,
    site_id: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Launch:
    """Add a launch to the catalog, filling site names for known sites."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    site = site_by_id(site_id) if site_id else None
    launch = Launch(
        payload_id=payload_id,
        flight_number=flight_number,
        upcoming=upcoming,
        site_id=site_id,
        site_name=site.name if site else None,
        site_name_long=site.name_long if site else None,
    )

    with effective_uow() as uow:
        launches = uow.repositories.launches
        if launches.get_by_payload_id(payload_id) is not None:
            raise LaunchAlreadyExistsError(f"Launch for payload {payload_id!r} already exists")
        launches.add(launch)
        uow.commit()

    log.info("Registered launch %s (flight_number=%s)", payload_id, flight_number)
    return launch
