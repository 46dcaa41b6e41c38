from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone

from zoneinfo import ZoneInfo

# Default application timezone aligned with frontend
DEFAULT_TIMEZONE_NAME = "America/Sao_Paulo"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def local_today(now: datetime, tz: ZoneInfo | None = DEFAULT_TZ) -> date:
    """Return the calendar day of `now` in `tz`.

    Naive datetimes are assumed to already be local.
    """
    if tz is None or now.tzinfo is None:
        return now.date()
    return now.astimezone(tz).date()


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming DEFAULT_TZ for naive values."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=DEFAULT_TZ)
    return dt.astimezone(timezone.utc)


def format_br_date(d: date | datetime | None) -> str:
    """Return 'dd/mm/yyyy' (pt-BR)."""
    if d is None:
        return ""
    return d.strftime("%d/%m/%Y")
