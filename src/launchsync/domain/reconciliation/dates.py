"""Manifest date classification and resolution.

Manifest dates come in several precisions, from ``2020`` up to
``2020 Nov 4 [14:10]``. Resolution happens in two steps:

- classify the raw text against ``DATE_PATTERNS`` (first match wins) to learn
  the precision and the tentative/tbd flags
- strip qualifiers from the text and parse it with ``parse_manifest_date``,
  which tries ``DATE_FORMATS`` in order and resolves to the first instant
  consistent with the known precision, in UTC
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final
from zoneinfo import ZoneInfo

from launchsync.domain.model import Precision

from .errors import DateParseError

UTC_OFFSET_SUFFIX: Final[str] = "+0000"

_MONTH = r"[a-z]{3,9}"


def _pattern(body: str) -> re.Pattern[str]:
    return re.compile(rf"^{body}$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class DatePattern:
    name: str
    regex: re.Pattern[str]
    precision: Precision
    is_tentative: bool
    tbd: bool

    def matches(self, text: str) -> bool:
        return self.regex.match(text) is not None


# Order matters: "2020 TBD" also fits the plain month pattern, and
# "2020 Nov TBD" must not fall through to the day pattern.
DATE_PATTERNS: Final[tuple[DatePattern, ...]] = (
    DatePattern("quarter", _pattern(r"\d{4}\s+Q[1-4]"), Precision.QUARTER, True, True),
    DatePattern("half", _pattern(r"\d{4}\s+H[12]"), Precision.HALF, True, True),
    DatePattern("year_tbd", _pattern(r"\d{4}\s+TBD"), Precision.YEAR, True, True),
    DatePattern("year", _pattern(r"\d{4}"), Precision.YEAR, True, True),
    DatePattern("month_tbd", _pattern(rf"\d{{4}}\s+{_MONTH}\s+TBD"), Precision.MONTH, True, True),
    DatePattern(
        "month_vague",
        _pattern(rf"\d{{4}}\s+(early|mid|late)\s+{_MONTH}"),
        Precision.MONTH,
        True,
        True,
    ),
    DatePattern("month", _pattern(rf"\d{{4}}\s+{_MONTH}"), Precision.MONTH, True, True),
    DatePattern("day", _pattern(rf"\d{{4}}\s+{_MONTH}\s+\d{{1,2}}"), Precision.DAY, True, False),
    DatePattern(
        "hour",
        _pattern(rf"\d{{4}}\s+{_MONTH}\s+\d{{1,2}}\s+(\[\d{{2}}:\d{{2}}\]|\d{{2}}:\d{{2}})"),
        Precision.HOUR,
        False,
        False,
    ),
)

DATE_FORMATS: Final[tuple[str, ...]] = (
    "%Y %b %d %H:%M %z",
    "%Y %B %d %H:%M %z",
    "%Y %b %d %z",
    "%Y %B %d %z",
    "%Y %b %z",
    "%Y %B %z",
    "quarter",
    "%Y %z",
)

_QUARTER_TEXT = re.compile(r"^(?P<year>\d{4}) (?P<quarter>[1-4]) (?P<offset>[+-]\d{4})$")
_VAGUE_QUALIFIER = re.compile(r"\b(early|mid|late)\b", re.IGNORECASE)
_TBD_TOKEN = re.compile(r"\bTBD\b", re.IGNORECASE)
_QUARTER_TOKEN = re.compile(r"\bQ([1-4])\b", re.IGNORECASE)
_HALF_TOKEN = re.compile(r"\bH([12])\b", re.IGNORECASE)
# Halves reuse the quarter parser: H1 starts with Q1, H2 with Q3.
_HALF_TO_QUARTER: Final[dict[str, str]] = {"1": "1", "2": "3"}


@dataclass(frozen=True, slots=True)
class ResolvedDate:
    precision: Precision
    instant: datetime
    is_tentative: bool
    tbd: bool

    @property
    def unix(self) -> int:
        return int(self.instant.timestamp())

    @property
    def iso_utc(self) -> str:
        utc = self.instant.astimezone(UTC)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @property
    def year(self) -> str:
        return f"{self.instant.astimezone(UTC).year:04d}"


def classify_date(raw: str) -> DatePattern:
    """Return the first pattern in ``DATE_PATTERNS`` matching ``raw``."""

    text = raw.strip()
    for pattern in DATE_PATTERNS:
        if pattern.matches(text):
            return pattern
    raise DateParseError(raw)


def resolve_date(raw: str) -> ResolvedDate:
    """Classify and parse a manifest date into a UTC instant plus certainty flags."""

    pattern = classify_date(raw)
    instant = parse_manifest_date(f"{clean_manifest_date(raw)} {UTC_OFFSET_SUFFIX}")
    return ResolvedDate(
        precision=pattern.precision,
        instant=instant,
        is_tentative=pattern.is_tentative,
        tbd=pattern.tbd,
    )


def clean_manifest_date(raw: str) -> str:
    """Drop qualifiers the parser cannot handle and normalise quarter/half tokens."""

    text = _VAGUE_QUALIFIER.sub("", raw)
    text = _TBD_TOKEN.sub("", text)
    text = text.replace("[", "").replace("]", "")
    text = _QUARTER_TOKEN.sub(r"\1", text)
    text = _HALF_TOKEN.sub(lambda match: _HALF_TO_QUARTER[match.group(1)], text)
    return " ".join(text.split())


def parse_manifest_date(text: str) -> datetime:
    """Parse ``text`` with the first matching entry of ``DATE_FORMATS``."""

    for date_format in DATE_FORMATS:
        parsed = _try_format(text, date_format)
        if parsed is not None:
            return parsed.astimezone(UTC)
    raise DateParseError(text, "matches no known date format")


def _try_format(text: str, date_format: str) -> datetime | None:
    if date_format == "quarter":
        return _parse_quarter(text)
    try:
        return datetime.strptime(text, date_format)  # noqa: DTZ007
    except ValueError:
        return None


def _parse_quarter(text: str) -> datetime | None:
    match = _QUARTER_TEXT.match(text)
    if match is None:
        return None
    start = datetime.strptime(f"{match['year']} {match['offset']}", "%Y %z")
    quarter = int(match["quarter"])
    return start.replace(month=3 * (quarter - 1) + 1)


def localize(instant: datetime, zone: str) -> str:
    """Render ``instant`` as an ISO-8601 timestamp in the given IANA zone."""

    return instant.astimezone(ZoneInfo(zone)).isoformat()
