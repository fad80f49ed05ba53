"""Swiss Ephemeris backed implementation of :class:`EphemerisProvider`."""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, ClassVar

from ..core.angles import normalize_degrees
from ..core.time import CivilDate, Location
from ..exceptions import EphemerisUnavailableError, InvalidDateError
from ..observability.metrics import EPHEMERIS_READ_FAILURES, RISE_SET_MISSING
from .paths import resolve_ephe_path
from .provider import Body, RiseSetEvent, RiseSetKind
from .sidereal import DEFAULT_SIDEREAL_MODE, resolve_mode_code
from .swe import swe as _swe_proxy

LOG = logging.getLogger(__name__)

__all__ = ["SwissEphemerisProvider"]

DEFAULT_PRESSURE_HPA = 1013.25
DEFAULT_TEMPERATURE_C = 15.0


def _swe() -> Any:
    return _swe_proxy()


class SwissEphemerisProvider:
    """High level wrapper around :mod:`pyswisseph` for Panchanga queries.

    Longitude and latitude reads degrade to ``0.0`` with a logged warning
    when the backend raises.  Rise/set queries never raise for a missing
    event; they return a :class:`RiseSetEvent` whose ``julian_day`` is
    ``None`` and leave the policy to the caller.

    Swiss Ephemeris keeps the sidereal mode as process-wide state.  Every
    sidereal read here takes the mode as an argument and applies it under a
    lock immediately before the read, so no call depends on an earlier one
    having configured the library.
    """

    _SIDEREAL_LOCK: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        ephemeris_path: str | os.PathLike[str] | None = None,
        *,
        sidereal_mode: str = DEFAULT_SIDEREAL_MODE,
        pressure_hpa: float = DEFAULT_PRESSURE_HPA,
        temperature_c: float = DEFAULT_TEMPERATURE_C,
    ) -> None:
        swe = _swe()
        self.sidereal_mode = sidereal_mode
        self.pressure_hpa = float(pressure_hpa)
        self.temperature_c = float(temperature_c)
        self.ephemeris_path = resolve_ephe_path(ephemeris_path)
        if self.ephemeris_path is not None:
            swe.set_ephe_path(self.ephemeris_path)
            self._flags = int(swe.FLG_SWIEPH)
        else:
            LOG.info("No Swiss ephemeris files found; using the Moshier analytical theory")
            self._flags = int(swe.FLG_MOSEPH)
        # validates the mode eagerly
        resolve_mode_code(sidereal_mode, swe)

    @classmethod
    def from_settings(cls, settings: Any) -> "SwissEphemerisProvider":
        cfg = settings.ephemeris
        return cls(
            cfg.path,
            sidereal_mode=cfg.ayanamsa,
            pressure_hpa=cfg.pressure_hpa,
            temperature_c=cfg.temperature_c,
        )

    # -------------------- positions --------------------

    def _calc(self, jd_ut: float, body_code: int, quantity: str) -> tuple[float, ...] | None:
        try:
            xx, _ret_flag = _swe().calc_ut(jd_ut, body_code, self._flags)
        except EphemerisUnavailableError:
            raise
        except Exception as exc:
            EPHEMERIS_READ_FAILURES.labels(quantity=quantity).inc()
            LOG.warning("Swiss ephemeris %s read failed at JD %.6f: %s", quantity, jd_ut, exc)
            return None
        return tuple(xx)

    def solar_longitude(self, jd_ut: float) -> float:
        values = self._calc(jd_ut, _swe().SUN, "solar_longitude")
        return normalize_degrees(values[0]) if values else 0.0

    def lunar_longitude(self, jd_ut: float) -> float:
        values = self._calc(jd_ut, _swe().MOON, "lunar_longitude")
        return normalize_degrees(values[0]) if values else 0.0

    def lunar_latitude(self, jd_ut: float) -> float:
        values = self._calc(jd_ut, _swe().MOON, "lunar_latitude")
        return float(values[1]) if values else 0.0

    def ayanamsa(self, jd_ut: float, mode: str | None = None) -> float:
        """Return the ayanamsa for ``mode`` (default: the configured mode)."""

        swe = _swe()
        code = resolve_mode_code(mode or self.sidereal_mode, swe)
        with self._SIDEREAL_LOCK:
            swe.set_sid_mode(code, 0, 0)
            return float(swe.get_ayanamsa_ut(jd_ut))

    # -------------------- rise / set --------------------

    def rise_set(
        self, jd_ut: float, body: Body, event: RiseSetKind, location: Location
    ) -> RiseSetEvent:
        swe = _swe()
        body_code = {"sun": swe.SUN, "moon": swe.MOON}[body]
        rsmi = {"rise": swe.CALC_RISE, "set": swe.CALC_SET}[event]
        geopos = (float(location.longitude), float(location.latitude), 0.0)
        try:
            status, tret = swe.rise_trans(
                jd_ut,
                body_code,
                rsmi,
                geopos,
                self.pressure_hpa,
                self.temperature_c,
                self._flags,
            )
        except EphemerisUnavailableError:
            raise
        except Exception as exc:
            RISE_SET_MISSING.labels(body=body, event=event).inc()
            LOG.warning("%s%s computation failed at JD %.6f: %s", body, event, jd_ut, exc)
            return RiseSetEvent(body=body, event=event, julian_day=None, status=-1, message=str(exc))

        event_jd = float(tret[0]) if tret else 0.0
        if status != 0 or event_jd == 0.0:
            RISE_SET_MISSING.labels(body=body, event=event).inc()
            return RiseSetEvent(
                body=body,
                event=event,
                julian_day=None,
                status=int(status),
                message="event does not occur",
            )
        return RiseSetEvent(body=body, event=event, julian_day=event_jd, status=0)

    # -------------------- calendar conversion --------------------

    @staticmethod
    def _calendar_flag(calendar: str) -> int:
        swe = _swe()
        if calendar == "julian":
            return int(swe.JUL_CAL)
        if calendar == "gregorian":
            return int(swe.GREG_CAL)
        raise InvalidDateError(f"unknown calendar '{calendar}'")

    def civil_to_jd(self, date: CivilDate) -> float:
        return float(
            _swe().julday(
                date.year,
                date.month,
                date.day,
                date.fractional_hour,
                self._calendar_flag(date.calendar),
            )
        )

    def jd_to_civil(self, jd_ut: float, calendar: str = "gregorian") -> CivilDate:
        year, month, day, _hour = _swe().revjul(jd_ut, self._calendar_flag(calendar))
        return CivilDate(int(year), int(month), int(day), calendar=calendar)  # type: ignore[arg-type]
