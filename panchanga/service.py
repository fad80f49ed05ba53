"""Orchestration of the Panchanga limbs for a civil date and location."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date as _date
from typing import Any, Mapping

from .config.settings import Settings, default_settings
from .core.time import CivilDate, Location, dms_to_hours, to_dms
from .engine.lunar.calendar import MasaResult, resolve_masa
from .engine.vedic.panchang import (
    ClockTime,
    KaranaResult,
    NakshatraResult,
    TithiResult,
    Vaara,
    YogaResult,
    calculate_karana,
    calculate_nakshatra,
    calculate_tithi,
    calculate_yoga,
    vaara_for_date,
)
from .engine.vedic.refine import NO_OP_NOTES, NoOpRefiner, RefinementMeta, Refiner
from .engine.vedic.search import MatchingDate, SearchTarget, find_matching_dates
from .ephemeris.provider import Body, EphemerisProvider, RiseSetKind
from .exceptions import EphemerisComputationError

LOG = logging.getLogger(__name__)

__all__ = ["PanchangaResult", "PanchangaService", "ZERO_TIME", "matching_date_to_dict"]

ZERO_TIME: ClockTime = (0, 0, 0)


@dataclass(frozen=True, slots=True)
class PanchangaResult:
    """Full Panchanga for one civil date, time and location."""

    date: CivilDate
    location: Location
    tithi: TithiResult
    nakshatra: NakshatraResult
    yoga: YogaResult
    karana: KaranaResult
    masa: MasaResult
    vaara: Vaara
    sunrise: ClockTime
    sunset: ClockTime
    moonrise: ClockTime
    moonset: ClockTime
    day_duration: ClockTime
    refinement: RefinementMeta | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "calendar": self.date.calendar,
            "location": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
                "tz_offset": self.location.tz_offset,
            },
            "tithi": {
                "number": self.tithi.number,
                "name": self.tithi.name,
                "paksha": self.tithi.paksha,
                "end_time": list(self.tithi.end_time),
            },
            "nakshatra": {
                "number": self.nakshatra.number,
                "name": self.nakshatra.name,
                "end_time": list(self.nakshatra.end_time),
            },
            "yoga": {
                "number": self.yoga.number,
                "name": self.yoga.name,
                "end_time": list(self.yoga.end_time),
            },
            "karana": {"number": self.karana.number, "name": self.karana.name},
            "masa": {
                "number": self.masa.number,
                "name": self.masa.name,
                "is_adhika": self.masa.is_adhika,
                "raasi": {"number": self.masa.raasi, "name": self.masa.raasi_name},
            },
            "vaara": {"number": self.vaara.number, "name": self.vaara.name},
            "sunrise": list(self.sunrise),
            "sunset": list(self.sunset),
            "moonrise": list(self.moonrise),
            "moonset": list(self.moonset),
            "day_duration": list(self.day_duration),
            "refinement": (
                {"applied": self.refinement.applied, "notes": self.refinement.notes}
                if self.refinement
                else None
            ),
        }


class PanchangaService:
    """Compute Panchangas and recurring dates against an ephemeris provider.

    Parameters
    ----------
    provider:
        Source of positions and rise/set instants.
    settings:
        Solver, search and sidereal-mode configuration; defaults when omitted.
    refiner:
        Post-processing hook applied to every result; :class:`NoOpRefiner`
        when omitted.
    """

    def __init__(
        self,
        provider: EphemerisProvider,
        *,
        settings: Settings | None = None,
        refiner: Refiner | None = None,
    ) -> None:
        self.provider = provider
        self.settings = settings or default_settings()
        self.refiner = refiner or NoOpRefiner()

    @property
    def sidereal_mode(self) -> str:
        return self.settings.ephemeris.ayanamsa

    # -------------------- rise / set --------------------

    def _rise_set(self, date_jd: float, body: Body, event: RiseSetKind, location: Location):
        # searched from local midnight of the civil date
        start = date_jd - location.tz_offset / 24.0
        return self.provider.rise_set(start, body, event, location)

    def _sun_event_jd(self, date_jd: float, event: RiseSetKind, location: Location) -> float:
        outcome = self._rise_set(date_jd, "sun", event, location)
        if outcome.julian_day is None:
            raise EphemerisComputationError(
                f"Sun{event} calculation failed for JD {date_jd:.5f} "
                f"(lat {location.latitude}, lon {location.longitude}): "
                f"{outcome.message or outcome.status}"
            )
        return outcome.julian_day

    def _moon_event_clock(self, date_jd: float, event: RiseSetKind, location: Location) -> ClockTime:
        outcome = self._rise_set(date_jd, "moon", event, location)
        if outcome.julian_day is None:
            LOG.warning("Moon%s does not occur for JD %.5f", event, date_jd)
            return ZERO_TIME
        return self._local_clock(date_jd, outcome.julian_day, location)

    @staticmethod
    def _local_clock(date_jd: float, event_jd: float, location: Location) -> ClockTime:
        return to_dms((event_jd - date_jd) * 24.0 + location.tz_offset)

    def sunrise_jd(self, date_jd: float, location: Location) -> float:
        """UT Julian Day of the first sunrise after local midnight of ``date_jd``."""

        return self._sun_event_jd(date_jd, "rise", location)

    def sunrise(self, date_jd: float, location: Location) -> ClockTime:
        return self._local_clock(date_jd, self.sunrise_jd(date_jd, location), location)

    def sunset(self, date_jd: float, location: Location) -> ClockTime:
        return self._local_clock(date_jd, self._sun_event_jd(date_jd, "set", location), location)

    def moonrise(self, date_jd: float, location: Location) -> ClockTime:
        """Local moonrise, or ``(0, 0, 0)`` when the Moon does not rise."""

        return self._moon_event_clock(date_jd, "rise", location)

    def moonset(self, date_jd: float, location: Location) -> ClockTime:
        """Local moonset, or ``(0, 0, 0)`` when the Moon does not set."""

        return self._moon_event_clock(date_jd, "set", location)

    @staticmethod
    def day_duration(sunrise: ClockTime, sunset: ClockTime) -> ClockTime:
        """Sunset minus sunrise as ``[h, m, s]``.

        The sunset searched from local midnight can precede sunrise at high
        latitudes; the difference is then taken across midnight.
        """

        hours = dms_to_hours(sunset) - dms_to_hours(sunrise)
        if hours < 0.0:
            hours += 24.0
        return to_dms(hours)

    # -------------------- orchestration --------------------

    def masa(self, date_jd: float, location: Location, *, sunrise_jd: float | None = None) -> MasaResult:
        """Lunar month at sunrise; pass ``sunrise_jd`` when it is already known."""

        if sunrise_jd is None:
            sunrise_jd = self.sunrise_jd(date_jd, location)
        return resolve_masa(self.provider, sunrise_jd, mode=self.sidereal_mode)

    def compute_panchanga(self, date: CivilDate, location: Location) -> PanchangaResult:
        """Return the full Panchanga for ``date`` at ``location``.

        Tithi, nakshatra, yoga and karana are evaluated at the supplied local
        time (local midnight when no time is given).  Masa and the rise/set
        times belong to the civil day as a whole.
        """

        solver = self.settings.solver
        date_jd = self.provider.civil_to_jd(date.date_only())
        local_jd = self.provider.civil_to_jd(date) if date.has_time else date_jd
        anchor = local_jd - location.tz_offset / 24.0

        tithi = calculate_tithi(
            self.provider,
            anchor,
            location,
            step_minutes=solver.step_minutes,
            tolerance_minutes=solver.tolerance_minutes,
            max_iterations=solver.max_iterations,
            max_span_days=solver.max_span_days,
        )
        if tithi.status != "ok":
            LOG.debug("Tithi boundary for %s resolved with status %s", date.isoformat(), tithi.status)

        sunrise_jd = self.sunrise_jd(date_jd, location)
        sunrise = self._local_clock(date_jd, sunrise_jd, location)
        sunset = self.sunset(date_jd, location)
        result = PanchangaResult(
            date=date,
            location=location,
            tithi=tithi,
            nakshatra=calculate_nakshatra(self.provider, anchor, location, mode=self.sidereal_mode),
            yoga=calculate_yoga(self.provider, anchor, location, mode=self.sidereal_mode),
            karana=calculate_karana(self.provider, anchor),
            masa=self.masa(date_jd, location, sunrise_jd=sunrise_jd),
            vaara=vaara_for_date(date),
            sunrise=sunrise,
            sunset=sunset,
            moonrise=self.moonrise(date_jd, location),
            moonset=self.moonset(date_jd, location),
            day_duration=self.day_duration(sunrise, sunset),
        )

        refined = self.refiner.refine(result)
        if refined.refinement is None:
            refined = replace(refined, refinement=RefinementMeta(applied=False, notes=NO_OP_NOTES))
        return refined

    def find_matching_dates(
        self,
        base_date: CivilDate,
        location: Location,
        range_years: int | None = None,
        *,
        current_year: int | None = None,
    ) -> list[MatchingDate]:
        """Dates around ``current_year`` repeating the base date's tithi and masa.

        ``current_year`` defaults to today's year; the base date only
        contributes the target combination and the primary month window.
        """

        search = self.settings.search
        span = search.default_range_years if range_years is None else int(range_years)
        if span < 0:
            raise ValueError("range_years must be non-negative")
        year = current_year if current_year is not None else _date.today().year

        base = self.compute_panchanga(base_date, location)
        target = SearchTarget.from_result(base)
        LOG.info(
            "Searching %d..%d for tithi %d (%s) in masa %d",
            year - span,
            year + span,
            target.tithi,
            target.paksha,
            target.masa,
        )
        return find_matching_dates(
            lambda candidate: self.compute_panchanga(candidate, location),
            target,
            base_date,
            range_years=span,
            current_year=year,
            month_padding=search.month_padding,
            max_workers=search.max_workers,
        )


def matching_date_to_dict(match: MatchingDate) -> Mapping[str, Any]:
    return {
        "date": match.date.isoformat(),
        "matched_date": match.matched_date.isoformat() if match.matched_date else None,
        "window": match.window,
        "fields": {
            "tithi": match.tithi,
            "paksha": match.paksha,
            "nakshatra": match.nakshatra,
            "yoga": match.yoga,
            "karana": match.karana,
            "masa": match.masa,
            "vaara": match.weekday,
        },
    }


