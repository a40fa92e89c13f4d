"""
Derived display fields.

Pure functions over stored values, recomputed for every response and never
persisted.
"""

import math
from datetime import datetime, timezone
from typing import Optional

SECONDS_PER_DAY = 24 * 60 * 60

# (exclusive upper bound, label); anything above the last bound is executive
SALARY_BANDS = (
    (50_000, "Entry Level"),
    (100_000, "Mid Level"),
    (200_000, "Senior Level"),
)
EXECUTIVE_BAND = "Executive Level"

STATUS_COLORS = {
    "applied": "blue",
    "shortlisted": "green",
    "rejected": "red",
}
DEFAULT_STATUS_COLOR = "gray"


def salary_band(salary: float) -> str:
    for upper, label in SALARY_BANDS:
        if salary < upper:
            return label
    return EXECUTIVE_BAND


def file_extension(file_url: str) -> str:
    """
    Lowercased extension of the last path segment of a URL or path.

    Query strings and fragments are ignored. Returns "unknown" when the
    segment has no dot, ends with one, or only starts with one (".bashrc").
    """
    path = (file_url or "").split("#", 1)[0].split("?", 1)[0].rstrip("/")
    segment = path.rsplit("/", 1)[-1]

    dot = segment.rfind(".")
    if dot <= 0 or dot == len(segment) - 1:
        return "unknown"
    return segment[dot + 1:].lower()


def status_color(status: Optional[str]) -> str:
    # accepts ApplicationStatus members as well as raw strings
    value = getattr(status, "value", status)
    return STATUS_COLORS.get(value, DEFAULT_STATUS_COLOR)


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def days_old(applied_at: datetime, now: Optional[datetime] = None) -> int:
    """Whole days since applied_at, rounded up."""
    now = _as_utc(now or datetime.now(timezone.utc))
    elapsed = abs((now - _as_utc(applied_at)).total_seconds())
    return math.ceil(elapsed / SECONDS_PER_DAY)
