"""Week boundary helpers for the team calendar.

The "best of the week" highlight is keyed by the timestamp of the week
boundary: Sunday at midnight, in the timezone of the reference moment. Writers
computing ``week_start`` and stores searching for the current highlight must
both go through :func:`start_of_week`, because lookups compare timestamps for
exact equality.
"""

from __future__ import annotations

from datetime import datetime, timedelta

__all__ = ["start_of_week", "week_key"]


def start_of_week(moment: datetime) -> datetime:
    """Return the most recent Sunday midnight at or before ``moment``.

    Args:
        moment: Reference timestamp, naive or timezone-aware.

    Returns:
        Timestamp with the same ``tzinfo`` and every time component zeroed.

    >>> start_of_week(datetime(2024, 6, 5, 15, 30, 12, 500))
    datetime.datetime(2024, 6, 2, 0, 0)
    >>> start_of_week(datetime(2024, 6, 2, 0, 0))
    datetime.datetime(2024, 6, 2, 0, 0)
    >>> start_of_week(datetime(2024, 6, 8, 23, 59, 59))
    datetime.datetime(2024, 6, 2, 0, 0)
    """

    days_since_sunday = (moment.weekday() + 1) % 7
    boundary = moment - timedelta(days=days_since_sunday)
    return boundary.replace(hour=0, minute=0, second=0, microsecond=0)


def week_key(moment: datetime) -> tuple[int, int]:
    """Return the ISO ``(year, week)`` pair containing ``moment``.

    Integral alternative to timestamp equality. ISO weeks start on Monday, so
    Sundays belong to a different key than :func:`start_of_week` suggests;
    stores do not use it for lookups.

    >>> week_key(datetime(2024, 6, 5))
    (2024, 23)
    >>> week_key(datetime(2024, 12, 30))
    (2025, 1)
    """

    iso = moment.isocalendar()
    return iso[0], iso[1]
