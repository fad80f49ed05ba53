from __future__ import annotations

import pytest

from panchanga.core.time import (
    CivilDate,
    Location,
    days_in_month,
    dms_to_hours,
    hours_since_local_midnight,
    local_midnight_ut,
    to_dms,
    weekday_index,
)
from panchanga.exceptions import InvalidDateError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, (0, 0, 0)),
        (6.5, (6, 30, 0)),
        (8.499999, (8, 30, 0)),
        (23.9999999, (24, 0, 0)),
        (12.25 + 15 / 3600, (12, 15, 15)),
        (27.75, (27, 45, 0)),
    ],
)
def test_to_dms_rounds_and_carries(value: float, expected: tuple[int, int, int]) -> None:
    assert to_dms(value) == expected


def test_dms_to_hours_inverts_to_dms() -> None:
    assert dms_to_hours((12, 15, 36)) == pytest.approx(12.26)


@pytest.mark.parametrize(
    ("year", "month", "day", "calendar", "expected"),
    [
        (2025, 1, 29, "gregorian", 3),  # Wednesday
        (2000, 1, 1, "gregorian", 6),  # Saturday
        (1582, 10, 15, "gregorian", 5),  # Friday
        (1582, 10, 4, "julian", 4),  # Thursday
        (2024, 2, 29, "gregorian", 4),  # Thursday
    ],
)
def test_weekday_index(year: int, month: int, day: int, calendar: str, expected: int) -> None:
    assert weekday_index(year, month, day, calendar) == expected


def test_days_in_month_leap_rules() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(1900, 2) == 28
    assert days_in_month(1900, 2, "julian") == 29
    assert days_in_month(2000, 2) == 29
    assert days_in_month(2023, 4) == 30


def test_civil_date_validation() -> None:
    with pytest.raises(InvalidDateError):
        CivilDate(2025, 13, 1)
    with pytest.raises(InvalidDateError):
        CivilDate(2023, 2, 29)
    with pytest.raises(InvalidDateError):
        CivilDate(2025, 1, 1, calendar="lunar")  # type: ignore[arg-type]
    with pytest.raises(InvalidDateError):
        CivilDate(2025, 1, 1, hour=24, minute=0)


def test_civil_date_normalises_calendar_tag() -> None:
    date = CivilDate(2025, 1, 1, calendar="Julian")  # type: ignore[arg-type]
    assert date.calendar == "julian"


def test_civil_date_parse_with_time() -> None:
    date = CivilDate.parse("2025-01-29T07:45")
    assert (date.year, date.month, date.day, date.hour, date.minute) == (2025, 1, 29, 7, 45)
    assert date.has_time
    assert date.fractional_hour == pytest.approx(7.75)
    assert date.isoformat() == "2025-01-29T07:45"


def test_civil_date_parse_rejects_garbage() -> None:
    with pytest.raises(InvalidDateError):
        CivilDate.parse("29/01/2025")


def test_with_year_clamps_leap_day() -> None:
    assert CivilDate(2028, 2, 29).with_year(2027) == CivilDate(2027, 2, 28)
    assert CivilDate(2024, 12, 20).with_year(2025) == CivilDate(2025, 12, 20)


def test_date_only_drops_time() -> None:
    date = CivilDate(2025, 1, 29, 10, 30)
    assert not date.date_only().has_time
    assert date.date_only().fractional_hour == 0.0


def test_location_bounds() -> None:
    with pytest.raises(ValueError):
        Location(latitude=91.0, longitude=0.0)
    with pytest.raises(ValueError):
        Location(latitude=0.0, longitude=0.0, tz_offset=15.0)


def test_local_midnight_and_hours() -> None:
    jd = 2460704.5  # 2025-01-29 00:00 UT
    midnight = local_midnight_ut(jd, 5.5)
    assert midnight == pytest.approx(jd - 5.5 / 24.0)
    assert hours_since_local_midnight(jd + 0.25, jd, 5.5) == pytest.approx(11.5)


def test_hours_past_midnight_are_not_folded() -> None:
    jd = 2460704.5
    assert hours_since_local_midnight(jd + 1.2, jd, 0.0) == pytest.approx(28.8)


def test_negative_drift_is_lifted() -> None:
    jd = 2460704.5
    assert hours_since_local_midnight(jd - 0.01, jd, 0.0) == pytest.approx(24.0 - 0.24)
