"""Launchpad labels, canonical launch sites and their time zones."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from launchsync.domain.model import LaunchSite

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

CCAFS_SLC_40: Final = LaunchSite(
    site_id="ccafs_slc_40",
    name="CCAFS SLC 40",
    name_long="Cape Canaveral Air Force Station Space Launch Complex 40",
)
KSC_LC_39A: Final = LaunchSite(
    site_id="ksc_lc_39a",
    name="KSC LC 39A",
    name_long="Kennedy Space Center Historic Launch Complex 39A",
)
VAFB_SLC_4E: Final = LaunchSite(
    site_id="vafb_slc_4e",
    name="VAFB SLC 4E",
    name_long="Vandenberg Air Force Base Space Launch Complex 4E",
)
STLS: Final = LaunchSite(
    site_id="stls",
    name="STLS",
    name_long="SpaceX South Texas Launch Site",
)

# Shared-pad labels resolve to the pad named first.
LAUNCHPAD_SITES: Final[Mapping[str, LaunchSite]] = MappingProxyType(
    {
        "SLC-40": CCAFS_SLC_40,
        "SLC-40 / LC-39A": CCAFS_SLC_40,
        "SLC-40 / BC": CCAFS_SLC_40,
        "LC-39A": KSC_LC_39A,
        "LC-39A / BC": KSC_LC_39A,
        "LC-39A / SLC-40": KSC_LC_39A,
        "SLC-4E": VAFB_SLC_4E,
        "BC": STLS,
        "BC / LC-39A": STLS,
        "BC / SLC-40": STLS,
    }
)

EASTERN_TIME_ZONE: Final[str] = "America/New_York"
PACIFIC_TIME_ZONE: Final[str] = "America/Los_Angeles"
DEFAULT_TIME_ZONE: Final[str] = "America/Chicago"

_TIME_ZONE_BY_SITE: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ccafs_slc_40": EASTERN_TIME_ZONE,
        "ksc_lc_39a": EASTERN_TIME_ZONE,
        "ccafs_lc_13": EASTERN_TIME_ZONE,
        "vafb_slc_4e": PACIFIC_TIME_ZONE,
        "vafb_slc_4w": PACIFIC_TIME_ZONE,
    }
)


def resolve_launchpad(label: str) -> LaunchSite | None:
    """Return the canonical site for a manifest launchpad label, if known."""

    site = LAUNCHPAD_SITES.get(label.strip())
    if site is None:
        log.debug("Unknown launchpad label %r; leaving site unset", label)
    return site


def time_zone_for(site_id: str | None) -> str:
    """IANA zone used for local launch times at ``site_id``."""

    if site_id is None:
        return DEFAULT_TIME_ZONE
    return _TIME_ZONE_BY_SITE.get(site_id, DEFAULT_TIME_ZONE)


def site_by_id(site_id: str) -> LaunchSite | None:
    for site in LAUNCHPAD_SITES.values():
        if site.site_id == site_id:
            return site
    return None
