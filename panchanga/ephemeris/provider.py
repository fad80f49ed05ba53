"""Ephemeris provider contract consumed by the Panchanga engine.

The engine never talks to :mod:`swisseph` directly.  It asks an
:class:`EphemerisProvider` for longitudes, the sidereal offset and rise/set
instants, which keeps every numerical routine testable against a synthetic
sky.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from ..core.angles import normalize_degrees
from ..core.time import CivilDate, Location

__all__ = [
    "Body",
    "EphemerisProvider",
    "RiseSetEvent",
    "RiseSetKind",
    "lunar_phase",
    "sidereal_lunar_longitude",
    "sidereal_solar_longitude",
]

Body = Literal["sun", "moon"]
RiseSetKind = Literal["rise", "set"]


@dataclass(frozen=True, slots=True)
class RiseSetEvent:
    """Outcome of a rise/set query.

    ``julian_day`` is ``None`` when the event does not occur within the
    search horizon (circumpolar bodies, polar day or night) or the backend
    reported an error; ``status`` then carries the backend code.
    """

    body: str
    event: str
    julian_day: float | None
    status: int = 0
    message: str = ""

    @property
    def occurs(self) -> bool:
        return self.julian_day is not None


@runtime_checkable
class EphemerisProvider(Protocol):
    """Source of geocentric positions and rise/set instants (JD in UT)."""

    def solar_longitude(self, jd_ut: float) -> float:
        """Tropical solar longitude in ``[0, 360)``; ``0`` when unavailable."""

    def lunar_longitude(self, jd_ut: float) -> float:
        """Tropical lunar longitude in ``[0, 360)``; ``0`` when unavailable."""

    def lunar_latitude(self, jd_ut: float) -> float:
        """Lunar ecliptic latitude; ``0`` when unavailable."""

    def ayanamsa(self, jd_ut: float, mode: str) -> float:
        """Sidereal offset for ``mode`` at ``jd_ut``."""

    def rise_set(
        self, jd_ut: float, body: Body, event: RiseSetKind, location: Location
    ) -> RiseSetEvent:
        """First ``event`` of ``body`` at or after ``jd_ut``."""

    def civil_to_jd(self, date: CivilDate) -> float:
        """Julian Day of ``date`` (clock time read as UT)."""

    def jd_to_civil(self, jd_ut: float, calendar: str = "gregorian") -> CivilDate:
        """Calendar date containing ``jd_ut``."""


def lunar_phase(provider: EphemerisProvider, jd_ut: float) -> float:
    """Elongation of the Moon from the Sun in ``[0, 360)``."""

    return normalize_degrees(provider.lunar_longitude(jd_ut) - provider.solar_longitude(jd_ut))


def sidereal_solar_longitude(provider: EphemerisProvider, jd_ut: float, mode: str) -> float:
    return normalize_degrees(provider.solar_longitude(jd_ut) - provider.ayanamsa(jd_ut, mode))


def sidereal_lunar_longitude(provider: EphemerisProvider, jd_ut: float, mode: str) -> float:
    return normalize_degrees(provider.lunar_longitude(jd_ut) - provider.ayanamsa(jd_ut, mode))
