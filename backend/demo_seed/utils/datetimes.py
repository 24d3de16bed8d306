"""Timezone helpers shared by the generators and the persistence layer.

Every timestamp written by the seeder is timezone-aware UTC. SQLite hands
values back without tzinfo, so rows read from the database go through
:func:`as_utc` before they are compared with freshly generated values.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def at_utc(day: date, moment: time = time.min) -> datetime:
    """Combine ``day`` and ``moment`` into an aware UTC datetime."""
    return datetime.combine(day, moment.replace(tzinfo=None), tzinfo=timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def end_of_day_utc(day: date) -> datetime:
    return at_utc(day, time.max)
