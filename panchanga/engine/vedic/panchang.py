"""Tithi, nakshatra, yoga, karana and vaara calculators.

Each calculator samples the ephemeris provider at the anchor instant and
reports the current division together with the local clock time at which
it ends.  End times are hours since the baseline from
:func:`~panchanga.core.time.local_midnight_ut` and may exceed ``24`` when
the division closes on a later calendar day.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from ...core.angles import normalize_degrees
from ...core.time import CivilDate, Location, hours_since_local_midnight, to_dms
from ...ephemeris.provider import (
    EphemerisProvider,
    lunar_phase,
    sidereal_lunar_longitude,
    sidereal_solar_longitude,
)
from ...ephemeris.refinement import (
    MINUTES_PER_DAY,
    BoundaryCrossing,
    cyclic_index,
    interpolate_crossing,
    step_bisect_crossing,
)
from ...ephemeris.sidereal import DEFAULT_SIDEREAL_MODE
from .names import (
    karana_name,
    nakshatra_name,
    paksha_for_tithi,
    tithi_name,
    vaara_name,
    yoga_name,
)

__all__ = [
    "TITHI_ARC_DEGREES",
    "NAKSHATRA_ARC_DEGREES",
    "YOGA_ARC_DEGREES",
    "KARANA_ARC_DEGREES",
    "ClockTime",
    "KaranaResult",
    "NakshatraResult",
    "TithiResult",
    "Vaara",
    "YogaResult",
    "calculate_karana",
    "calculate_nakshatra",
    "calculate_tithi",
    "calculate_yoga",
    "vaara_for_date",
]

TITHI_ARC_DEGREES: float = 360.0 / 30.0
NAKSHATRA_ARC_DEGREES: float = 360.0 / 27.0
YOGA_ARC_DEGREES: float = 360.0 / 27.0
KARANA_ARC_DEGREES: float = TITHI_ARC_DEGREES / 2.0

ClockTime = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class TithiResult:
    """Lunar day at the anchor instant and the moment it ends."""

    number: int
    name: str
    paksha: str
    end_time: ClockTime
    end_jd: float
    status: str = "ok"


@dataclass(frozen=True, slots=True)
class NakshatraResult:
    number: int
    name: str
    end_time: ClockTime
    end_jd: float


@dataclass(frozen=True, slots=True)
class YogaResult:
    number: int
    name: str
    end_time: ClockTime
    end_jd: float


@dataclass(frozen=True, slots=True)
class KaranaResult:
    number: int
    name: str


@dataclass(frozen=True, slots=True)
class Vaara:
    """Weekday with ``number`` counted from ``0`` (Sunday)."""

    number: int
    name: str


def _end_time(crossing: BoundaryCrossing, anchor_jd: float, location: Location) -> ClockTime:
    hours = hours_since_local_midnight(crossing.julian_day, anchor_jd, location.tz_offset)
    return to_dms(hours)


def calculate_tithi(
    provider: EphemerisProvider,
    jd_ut: float,
    location: Location,
    *,
    step_minutes: float = 30.0,
    tolerance_minutes: float = 1.0,
    max_iterations: int = 40,
    max_span_days: float = 2.0,
) -> TithiResult:
    """Return the tithi at ``jd_ut`` and the local clock time it ends."""

    crossing = step_bisect_crossing(
        partial(lunar_phase, provider),
        jd_ut,
        divisions=30,
        step_days=step_minutes / MINUTES_PER_DAY,
        tolerance_days=tolerance_minutes / MINUTES_PER_DAY,
        max_iterations=max_iterations,
        max_span_days=max_span_days,
    )
    return TithiResult(
        number=crossing.index,
        name=tithi_name(crossing.index),
        paksha=paksha_for_tithi(crossing.index),
        end_time=_end_time(crossing, jd_ut, location),
        end_jd=crossing.julian_day,
        status=crossing.status,
    )


def calculate_nakshatra(
    provider: EphemerisProvider,
    jd_ut: float,
    location: Location,
    *,
    mode: str = DEFAULT_SIDEREAL_MODE,
) -> NakshatraResult:
    """Lunar mansion from the sidereal Moon, with an interpolated end time."""

    crossing = interpolate_crossing(
        partial(sidereal_lunar_longitude, provider, mode=mode), jd_ut, divisions=27
    )
    return NakshatraResult(
        number=crossing.index,
        name=nakshatra_name(crossing.index),
        end_time=_end_time(crossing, jd_ut, location),
        end_jd=crossing.julian_day,
    )


def calculate_yoga(
    provider: EphemerisProvider,
    jd_ut: float,
    location: Location,
    *,
    mode: str = DEFAULT_SIDEREAL_MODE,
) -> YogaResult:
    """Yoga from the sum of sidereal Moon and Sun longitudes."""

    def _longitude_sum(jd: float) -> float:
        return normalize_degrees(
            sidereal_lunar_longitude(provider, jd, mode)
            + sidereal_solar_longitude(provider, jd, mode)
        )

    crossing = interpolate_crossing(_longitude_sum, jd_ut, divisions=27)
    return YogaResult(
        number=crossing.index,
        name=yoga_name(crossing.index),
        end_time=_end_time(crossing, jd_ut, location),
        end_jd=crossing.julian_day,
    )


def calculate_karana(provider: EphemerisProvider, jd_ut: float) -> KaranaResult:
    number = cyclic_index(lunar_phase(provider, jd_ut), 60)
    return KaranaResult(number=number, name=karana_name(number))


def vaara_for_date(date: CivilDate) -> Vaara:
    weekday = date.weekday()
    return Vaara(number=weekday, name=vaara_name(weekday))
