from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from launchsync.app import reconcile_manifest, register_launch
from launchsync.config import configure_logging
from launchsync.domain.reconciliation import (
    DateParseError,
    localize,
    resolve_date,
    time_zone_for,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from launchsync.app import ReconcileResult

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_ABORTED = 3
EXIT_SUBMISSION_FAILED = 4


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile the launch manifest")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Update upcoming launches from the manifest",
    )
    reconcile.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan updates and report them without writing to the store",
    )

    resolve = subparsers.add_parser("resolve-date", help="Resolve a single manifest date")
    resolve.add_argument("raw_date", type=str, help='Manifest date text, e.g. "2020 Nov 4 [14:10]"')
    resolve.add_argument(
        "--site",
        type=str,
        help="Launch site id used for the local time (defaults to America/Chicago)",
    )

    launch = subparsers.add_parser("launch", help="Launch catalog commands")
    launch_sub = launch.add_subparsers(dest="launch_command", required=True)
    launch_add = launch_sub.add_parser("add", help="Add a launch to the catalog")
    launch_add.add_argument(
        "--payload-id",
        type=str,
        required=True,
        help="Primary payload id identifying the launch",
    )
    launch_add.add_argument(
        "--flight-number",
        type=int,
        help="Flight number, if already known",
    )
    launch_add.add_argument(
        "--flown",
        action="store_true",
        help="Mark the launch as already flown (not upcoming)",
    )
    launch_add.add_argument(
        "--site-id",
        type=str,
        help="Launch site id, e.g. ccafs_slc_40",
    )

    args = parser.parse_args(list(argv))
    if getattr(args, "flight_number", None) is not None and args.flight_number < 1:
        raise ValueError("Flight number must be positive")
    return args


def _report_reconcile(result: ReconcileResult) -> int:
    plan = result.plan
    for update in plan.updates:
        log.info(
            "%s -> flight %d, %s (%s), site=%s",
            update.payload_id,
            update.flight_number,
            update.launch_date_utc,
            update.tentative_max_precision,
            update.site_id,
        )
    for skipped in plan.skipped:
        log.warning("Skipped %s: %s", skipped.payload_id, skipped.reason)

    outcome = result.outcome
    if outcome is None:
        log.info("Dry run: %d updates planned, nothing written", len(plan.updates))
        return EXIT_ABORTED if plan.duplicates else EXIT_OK
    if outcome.kind == "aborted":
        log.error("Reconciliation aborted (%s): %s", outcome.reason, outcome.duplicates)
        return EXIT_ABORTED
    log.info(
        "Reconciliation finished: fetched=%s, submitted=%s, updated=%s, failed=%s",
        result.fetched,
        len(outcome.results),
        len(outcome.updated),
        len(outcome.failed),
    )
    return EXIT_SUBMISSION_FAILED if outcome.failed else EXIT_OK


def _print_resolved_date(raw_date: str, site_id: str | None) -> None:
    resolved = resolve_date(raw_date)
    print(f"precision: {resolved.precision}")  # noqa: T201
    print(f"launch_date_utc: {resolved.iso_utc}")  # noqa: T201
    print(f"launch_date_unix: {resolved.unix}")  # noqa: T201
    print(f"launch_date_local: {localize(resolved.instant, time_zone_for(site_id))}")  # noqa: T201
    print(f"launch_year: {resolved.year}")  # noqa: T201
    print(f"is_tentative: {str(resolved.is_tentative).lower()}")  # noqa: T201
    print(f"tbd: {str(resolved.tbd).lower()}")  # noqa: T201


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(EXIT_USAGE)

    configure_logging(verbose=parsed_args.verbose)

    exit_code = EXIT_OK
    try:
        if parsed_args.command == "reconcile":
            result = reconcile_manifest(dry_run=parsed_args.dry_run)
            exit_code = _report_reconcile(result)
        elif parsed_args.command == "resolve-date":
            try:
                _print_resolved_date(parsed_args.raw_date, parsed_args.site)
            except DateParseError:
                log.exception("Could not resolve date")
                exit_code = EXIT_USAGE
        elif parsed_args.command == "launch" and parsed_args.launch_command == "add":
            launch = register_launch(
                payload_id=parsed_args.payload_id,
                flight_number=parsed_args.flight_number,
                upcoming=not parsed_args.flown,
                site_id=parsed_args.site_id,
            )
            log.info("Added launch %s", launch.payload_id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(EXIT_ERROR)

    if exit_code != EXIT_OK:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
