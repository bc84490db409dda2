from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Any, Iterator, Optional, Tuple

from ..core.constants import MINUTES_PER_HOUR


def parse_hhmm(value: Optional[str]) -> Tuple[int, int]:
    """Split an "HH:MM" wall-clock string into (hours, minutes).

    Missing or unparseable components become 0 instead of raising, so a
    half-filled shift form degrades to zero minutes.
    """
    if not value:
        return 0, 0
    parts = str(value).split(":")
    return _as_int(parts[0]), _as_int(parts[1] if len(parts) > 1 else None)


def _as_int(part: Optional[str]) -> int:
    if part is None or not part.strip():
        return 0
    try:
        return int(part)
    except ValueError:
        return 0


def minutes_since_midnight(value: Optional[str]) -> int:
    hours, minutes = parse_hhmm(value)
    return hours * MINUTES_PER_HOUR + minutes


def at_wall_clock(day: date, value: Optional[str]) -> datetime:
    """Build a fresh datetime for "HH:MM" on the given calendar day.

    Out-of-range values roll over into the next day rather than raising.
    """
    hours, minutes = parse_hhmm(value)
    return datetime(day.year, day.month, day.day) + timedelta(hours=hours, minutes=minutes)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iter_month_days(year: int, month: int) -> Iterator[date]:
    for day in range(1, days_in_month(year, month) + 1):
        yield date(year, month, day)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def to_datetime(value: Any) -> Optional[datetime]:
    """Coerce a stored timestamp into a naive wall-clock datetime.

    Accepts datetime, date (midnight) or an ISO-8601 string. Aware values
    (``...Z`` from the document store) are converted to the server's local
    time first, since shift times are local wall-clock readings. Naive
    values are taken as local already. Returns None for anything unreadable.
    """
    parsed = _parse_timestamp(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.replace(tzinfo=None)


def to_date(value: Any) -> Optional[date]:
    """Calendar date of a stored day stamp, read in its own offset.

    Attendance and holiday days are saved as UTC midnights, so ``...Z``
    keeps its UTC date whatever the local timezone is.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = _parse_timestamp(value)
    return parsed.date() if parsed else None


def format_duration(milliseconds: float) -> str:
    """Format a duration as "Xh Ym Zs"."""
    total_seconds = int(milliseconds // 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours}h {minutes}m {seconds}s"
