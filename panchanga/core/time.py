"""Civil date, location and clock-time helpers.

Julian Days are the engine's native time unit.  The helpers here sit on the
civil side of that boundary: validated calendar dates, fixed-offset
locations, clock hours relative to local midnight and ``[h, m, s]``
rendering with rollover.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Final, Literal

from ..exceptions import InvalidDateError

__all__ = [
    "CALENDARS",
    "CalendarTag",
    "CivilDate",
    "Location",
    "days_in_month",
    "dms_to_hours",
    "hours_since_local_midnight",
    "is_leap_year",
    "local_midnight_ut",
    "to_dms",
    "weekday_index",
]

CalendarTag = Literal["gregorian", "julian"]
CALENDARS: Final[tuple[str, ...]] = ("gregorian", "julian")

_SAKAMOTO_OFFSETS: Final[tuple[int, ...]] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_MONTH_LENGTHS: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int, calendar: str = "gregorian") -> bool:
    if calendar == "julian":
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int, calendar: str = "gregorian") -> int:
    """Return the number of days in ``month`` of ``year``."""

    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year, calendar):
        return 29
    return _MONTH_LENGTHS[month - 1]


@dataclass(frozen=True, slots=True)
class CivilDate:
    """Calendar date with an optional local clock time.

    ``calendar`` only matters when the date is converted to a Julian Day.
    ``hour`` and ``minute`` are ``None`` when the caller did not supply a
    time; conversion then uses local midnight.
    """

    year: int
    month: int
    day: int
    hour: int | None = None
    minute: int | None = None
    calendar: CalendarTag = "gregorian"

    def __post_init__(self) -> None:
        calendar = str(self.calendar).strip().lower()
        if calendar not in CALENDARS:
            raise InvalidDateError(f"unknown calendar '{self.calendar}'")
        object.__setattr__(self, "calendar", calendar)
        limit = days_in_month(self.year, self.month, calendar)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(
                f"day must be in 1..{limit} for {self.year}-{self.month:02d}, got {self.day}"
            )
        if self.hour is not None and not 0 <= self.hour <= 23:
            raise InvalidDateError(f"hour must be in 0..23, got {self.hour}")
        if self.minute is not None and not 0 <= self.minute <= 59:
            raise InvalidDateError(f"minute must be in 0..59, got {self.minute}")

    @property
    def has_time(self) -> bool:
        return self.hour is not None and self.minute is not None

    @property
    def fractional_hour(self) -> float:
        """Clock time as decimal hours (``0.0`` when no time was supplied)."""

        return float(self.hour or 0) + float(self.minute or 0) / 60.0

    def date_only(self) -> "CivilDate":
        return replace(self, hour=None, minute=None)

    def with_year(self, year: int) -> "CivilDate":
        """Return the same month/day in ``year``, clamping Feb 29 when needed."""

        day = min(self.day, days_in_month(year, self.month, self.calendar))
        return replace(self, year=year, day=day)

    def sort_key(self) -> tuple[int, int, int, float]:
        return (self.year, self.month, self.day, self.fractional_hour)

    def weekday(self) -> int:
        return weekday_index(self.year, self.month, self.day, self.calendar)

    def isoformat(self) -> str:
        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if self.has_time:
            text += f"T{self.hour:02d}:{self.minute:02d}"
        return text

    @classmethod
    def parse(cls, value: str, *, calendar: str = "gregorian") -> "CivilDate":
        """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM``."""

        text = value.strip()
        date_part, _, time_part = text.replace(" ", "T").partition("T")
        try:
            year, month, day = (int(token) for token in date_part.split("-"))
            hour = minute = None
            if time_part:
                hh, _, mm = time_part.partition(":")
                hour, minute = int(hh), int(mm or 0)
        except ValueError as exc:
            raise InvalidDateError(f"cannot parse date '{value}'") from exc
        return cls(year, month, day, hour, minute, calendar)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Location:
    """Observer position with a fixed UTC offset in hours (east positive)."""

    latitude: float
    longitude: float
    tz_offset: float = 0.0

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be within [-180, 180], got {self.longitude}")
        if not -14.0 <= self.tz_offset <= 14.0:
            raise ValueError(f"tz_offset must be within [-14, 14], got {self.tz_offset}")


def to_dms(value: float) -> tuple[int, int, int]:
    """Split decimal ``value`` into ``(whole, minutes, seconds)``.

    Seconds are rounded and a rounded ``60`` rolls over into the next minute
    (and hour), so ``8.499999`` renders as ``(8, 30, 0)`` rather than
    ``(8, 29, 60)``.
    """

    whole = math.floor(value)
    minutes_total = (value - whole) * 60.0
    minutes = math.floor(minutes_total)
    seconds = int(round((minutes_total - minutes) * 60.0))
    if seconds == 60:
        seconds = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        whole += 1
    return int(whole), int(minutes), seconds


def dms_to_hours(parts: tuple[int, int, int]) -> float:
    hours, minutes, seconds = parts
    return hours + minutes / 60.0 + seconds / 3600.0


def local_midnight_ut(jd_ut: float, tz_offset: float) -> float:
    """Return the 00:00 UT day start of ``jd_ut`` shifted by ``tz_offset`` hours.

    The baseline follows the instant's UT date.  For eastern offsets an
    instant shortly after local midnight still falls on the previous UT
    date, so clock hours measured from it read past ``24``.
    """

    return math.floor(jd_ut - 0.5) + 0.5 - tz_offset / 24.0


def hours_since_local_midnight(jd_ut: float, anchor_jd: float, tz_offset: float) -> float:
    """Clock hours from the midnight baseline of ``anchor_jd`` to ``jd_ut``.

    Negative drift is lifted by whole days; results past ``24`` are kept and
    mean the event falls on a later calendar day.
    """

    hours = (jd_ut - local_midnight_ut(anchor_jd, tz_offset)) * 24.0
    while hours < 0.0:
        hours += 24.0
    return hours


def weekday_index(year: int, month: int, day: int, calendar: str = "gregorian") -> int:
    """Return the weekday with ``0`` for Sunday (Sakamoto's method)."""

    y = year - 1 if month < 3 else year
    if calendar == "julian":
        total = y + y // 4 + 5
    else:
        total = y + y // 4 - y // 100 + y // 400
    return (total + _SAKAMOTO_OFFSETS[month - 1] + day) % 7
