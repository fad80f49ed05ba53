"""Lunar month (masa) resolution from bracketing new moons."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import partial

from ...ephemeris.provider import EphemerisProvider, lunar_phase, sidereal_solar_longitude
from ...ephemeris.refinement import cyclic_index, locate_new_moon
from ...ephemeris.sidereal import DEFAULT_SIDEREAL_MODE
from ..vedic.names import masa_name, raasi_name

LOG = logging.getLogger(__name__)

__all__ = [
    "MasaResult",
    "masa_from_raasis",
    "raasi",
    "raasi_from_longitude",
    "resolve_masa",
]


@dataclass(frozen=True, slots=True)
class MasaResult:
    """Lunar month running at a given sunrise.

    ``raasi`` is the sidereal solar sign (1..12) at the preceding new moon;
    the new-moon Julian Days are kept for callers that want to display the
    month span.
    """

    number: int
    name: str
    is_adhika: bool
    raasi: int = 0
    last_new_moon_jd: float = 0.0
    next_new_moon_jd: float = 0.0

    @property
    def raasi_name(self) -> str:
        return raasi_name(self.raasi)


def raasi_from_longitude(sidereal_longitude: float) -> int:
    """Return ``ceil(longitude / 30)`` as a sign index in 1..12.

    The first point of Mesha (exactly 0°) counts as sign 1.
    """

    return min(max(math.ceil(sidereal_longitude / 30.0), 1), 12)


def raasi(provider: EphemerisProvider, jd_ut: float, *, mode: str = DEFAULT_SIDEREAL_MODE) -> int:
    """Sidereal sign index (1..12) occupied by the Sun at ``jd_ut``."""

    return raasi_from_longitude(sidereal_solar_longitude(provider, jd_ut, mode))


def masa_from_raasis(this_raasi: int, next_raasi: int) -> tuple[int, bool]:
    """Month number and adhika flag from the Sun's sign at both new moons.

    A month is adhika (intercalary) when the Sun does not change sign between
    its opening and closing new moons.
    """

    number = this_raasi + 1
    if number > 12:
        number %= 12
    return number, this_raasi == next_raasi


def resolve_masa(
    provider: EphemerisProvider,
    sunrise_jd: float,
    *,
    mode: str = DEFAULT_SIDEREAL_MODE,
) -> MasaResult:
    """Resolve the lunar month containing ``sunrise_jd``."""

    phase_fn = partial(lunar_phase, provider)
    tithi = cyclic_index(phase_fn(sunrise_jd), 30)
    last_new_moon = locate_new_moon(phase_fn, sunrise_jd, tithi, -1)
    next_new_moon = locate_new_moon(phase_fn, sunrise_jd, tithi, 1)

    this_raasi = raasi(provider, last_new_moon, mode=mode)
    next_raasi = raasi(provider, next_new_moon, mode=mode)
    number, adhika = masa_from_raasis(this_raasi, next_raasi)
    if adhika:
        LOG.debug("Adhika masa %s at JD %.5f (raasi %d)", masa_name(number), sunrise_jd, this_raasi)
    return MasaResult(
        number=number,
        name=masa_name(number),
        is_adhika=adhika,
        raasi=this_raasi,
        last_new_moon_jd=last_new_moon,
        next_new_moon_jd=next_new_moon,
    )
