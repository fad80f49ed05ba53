from __future__ import annotations

import math
from dataclasses import dataclass, field

from panchanga.core.angles import normalize_degrees
from panchanga.core.time import CivilDate, Location
from panchanga.ephemeris.provider import RiseSetEvent

J2000 = 2451545.0
SUN_RATE = 0.9856474
MOON_RATE = 13.1763965

CHENNAI = Location(latitude=13.0827, longitude=80.2707, tz_offset=5.5)


def gregorian_to_jd(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """Meeus chapter 7 conversion for Gregorian dates."""

    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
        + hour / 24.0
    )


def jd_to_gregorian(jd: float) -> tuple[int, int, int]:
    z = math.floor(jd + 0.5)
    alpha = math.floor((z - 1867216.25) / 36524.25)
    a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = int(b - d - math.floor(30.6001 * e))
    month = int(e - 1 if e < 14 else e - 13)
    year = int(c - 4716 if month > 2 else c - 4715)
    return year, month, day


@dataclass
class LinearSky:
    """Synthetic provider: Sun and Moon move uniformly, the ayanamsa is fixed.

    Rise/set hours are local clock hours after the search start; ``None``
    makes the event fail to occur.
    """

    sun_rate: float = SUN_RATE
    moon_rate: float = MOON_RATE
    sun_epoch: float = 280.46
    moon_epoch: float = 218.32
    ayanamsa_deg: float = 24.0
    sunrise_hours: float | None = 6.0
    sunset_hours: float | None = 18.0
    moonrise_hours: float | None = 9.5
    moonset_hours: float | None = 21.25
    calls: dict[str, int] = field(default_factory=dict)

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def solar_longitude(self, jd_ut: float) -> float:
        self._count("solar_longitude")
        return normalize_degrees(self.sun_epoch + self.sun_rate * (jd_ut - J2000))

    def lunar_longitude(self, jd_ut: float) -> float:
        self._count("lunar_longitude")
        return normalize_degrees(self.moon_epoch + self.moon_rate * (jd_ut - J2000))

    def lunar_latitude(self, jd_ut: float) -> float:
        return 5.0 * math.sin(math.radians(self.lunar_longitude(jd_ut)))

    def ayanamsa(self, jd_ut: float, mode: str) -> float:
        self._count(f"ayanamsa:{mode}")
        return self.ayanamsa_deg

    def rise_set(self, jd_ut: float, body, event, location: Location) -> RiseSetEvent:
        self._count(f"rise_set:{body}:{event}")
        hours = {
            ("sun", "rise"): self.sunrise_hours,
            ("sun", "set"): self.sunset_hours,
            ("moon", "rise"): self.moonrise_hours,
            ("moon", "set"): self.moonset_hours,
        }[(body, event)]
        if hours is None:
            return RiseSetEvent(body, event, None, status=-2, message="event does not occur")
        return RiseSetEvent(body, event, jd_ut + hours / 24.0)

    def civil_to_jd(self, date: CivilDate) -> float:
        return gregorian_to_jd(date.year, date.month, date.day, date.fractional_hour)

    def jd_to_civil(self, jd_ut: float, calendar: str = "gregorian") -> CivilDate:
        return CivilDate(*jd_to_gregorian(jd_ut), calendar=calendar)

    def phase_at(self, jd_ut: float) -> float:
        return normalize_degrees(
            self.moon_epoch - self.sun_epoch + (self.moon_rate - self.sun_rate) * (jd_ut - J2000)
        )

    @property
    def phase_rate(self) -> float:
        return self.moon_rate - self.sun_rate
