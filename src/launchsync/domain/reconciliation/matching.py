"""Fuzzy pairing of catalogued payload ids with manifest payload labels.

A pair is accepted only at the maximum partial-ratio score, i.e. when the
normalised payload id occurs verbatim inside the normalised label (or the
other way round). Anything below the maximum is rejected, so payloads that
differ only by a suffix (``SSO-A`` and ``SSO-B``) never cross-match.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Final

from rapidfuzz import fuzz, utils

from .contracts import Match

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from launchsync.domain.model import Launch

    from .contracts import ManifestRow

log = logging.getLogger(__name__)

MAX_SCORE: Final[float] = 100.0


def payload_score(payload_id: str, payload_label: str) -> float:
    return fuzz.partial_ratio(payload_id, payload_label, processor=utils.default_process)


def match_payloads(launches: Iterable[Launch], rows: Sequence[ManifestRow]) -> list[Match]:
    """Pair every launch with each manifest row naming its payload.

    Output order follows the launches first and the manifest second. A payload
    matching several rows yields one match per row.
    """

    matches: list[Match] = []
    for launch in launches:
        for row in rows:
            if payload_score(launch.payload_id, row.payload_label) == MAX_SCORE:
                matches.append(Match(payload_id=launch.payload_id, site_id=launch.site_id, row=row))

    counts = Counter(match.payload_id for match in matches)
    for payload_id, count in counts.items():
        if count > 1:
            log.warning(
                "Payload %s matches %d manifest rows; the last submitted update wins",
                payload_id,
                count,
            )
    log.info("Matched %d manifest rows against catalogued payloads", len(matches))
    return matches
