from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional

from ..core.constants import DATE_QUERY_PATTERN

_DATE_QUERY_RE = re.compile(DATE_QUERY_PATTERN)


def parse_query_date(value: Optional[str], *, today: Optional[date] = None) -> date:
    """Parse a ``?date=`` query value, falling back to today.

    Single-digit months and days are accepted (2024-3-7).
    """

    today = today or now_local().date()
    if not value or not _DATE_QUERY_RE.fullmatch(value.strip()):
        return today
    year, month, day = (int(part) for part in value.strip().split("-"))
    try:
        return date(year, month, day)
    except ValueError:
        return today


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
