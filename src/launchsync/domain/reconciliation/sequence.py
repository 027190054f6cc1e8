"""Flight number assignment from manifest order."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .contracts import Match


def next_flight_number(latest_flown: int | None) -> int:
    """First flight number available to upcoming launches."""

    return 1 if latest_flown is None else latest_flown + 1


def assign_flight_numbers(base: int, matches: Iterable[Match]) -> dict[Match, int]:
    """Number each match by the manifest position of its row, offset by ``base``."""

    return {match: base + match.row.position for match in matches}


def find_duplicate_flight_numbers(numbers: Iterable[int]) -> tuple[int, ...]:
    counts = Counter(numbers)
    return tuple(sorted(number for number, count in counts.items() if count > 1))
