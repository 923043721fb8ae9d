from __future__ import annotations

import doctest
from datetime import datetime, timedelta, timezone

import pytest

import lions_team.domain.calendar as calendar_module
from lions_team.domain.calendar import start_of_week, week_key


def test_calendar_doctests() -> None:
    results = doctest.testmod(calendar_module)
    assert results.failed == 0


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2024, 6, 2, 0, 0, tzinfo=timezone.utc), datetime(2024, 6, 2, tzinfo=timezone.utc)),
        (datetime(2024, 6, 2, 23, 59, 59, 999999, tzinfo=timezone.utc), datetime(2024, 6, 2, tzinfo=timezone.utc)),
        (datetime(2024, 6, 3, 0, 0, 1, tzinfo=timezone.utc), datetime(2024, 6, 2, tzinfo=timezone.utc)),
        (datetime(2024, 6, 8, 23, 59, tzinfo=timezone.utc), datetime(2024, 6, 2, tzinfo=timezone.utc)),
        (datetime(2024, 6, 9, 0, 0, tzinfo=timezone.utc), datetime(2024, 6, 9, tzinfo=timezone.utc)),
        (datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc), datetime(2024, 12, 29, tzinfo=timezone.utc)),
    ],
)
def test_start_of_week_is_previous_sunday_midnight(moment: datetime, expected: datetime) -> None:
    boundary = start_of_week(moment)
    assert boundary == expected
    assert boundary.weekday() == 6


def test_start_of_week_keeps_timezone() -> None:
    sao_paulo = timezone(timedelta(hours=-3))
    boundary = start_of_week(datetime(2024, 6, 5, 1, 0, tzinfo=sao_paulo))
    assert boundary.tzinfo is sao_paulo
    assert boundary == datetime(2024, 6, 2, tzinfo=sao_paulo)


def test_start_of_week_is_idempotent() -> None:
    boundary = start_of_week(datetime(2024, 6, 5, 12, tzinfo=timezone.utc))
    assert start_of_week(boundary) == boundary


def test_week_key_differs_from_sunday_boundary_on_sundays() -> None:
    sunday = datetime(2024, 6, 9, 10, 0)
    monday = datetime(2024, 6, 10, 10, 0)
    assert start_of_week(sunday) == start_of_week(monday)
    assert week_key(sunday) != week_key(monday)
