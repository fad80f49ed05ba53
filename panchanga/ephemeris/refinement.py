"""Root finders for boundary crossings of cyclic angles.

All routines are pure: they take a sampling callable ``f(jd) -> degrees`` and
return immutable results.  The callable is usually backed by an
:class:`~panchanga.ephemeris.provider.EphemerisProvider` but tests drive the
solvers with synthetic linear or wobbling angle functions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Final, Sequence

from ..core.angles import FULL_CIRCLE, inverse_lagrange, normalize_degrees, unwrap
from ..observability.metrics import SOLVER_ITERATIONS

LOG = logging.getLogger(__name__)

__all__ = [
    "MINUTES_PER_DAY",
    "INTERPOLATION_OFFSETS",
    "NEW_MOON_OFFSETS",
    "BoundaryCrossing",
    "cyclic_index",
    "interpolate_crossing",
    "locate_new_moon",
    "step_bisect_crossing",
]

MINUTES_PER_DAY: Final[float] = 1_440.0

INTERPOLATION_OFFSETS: Final[tuple[float, ...]] = tuple(hour / 24.0 for hour in range(5))
"""Sampling offsets (days) for the 5-point estimator: 0h through 4h."""

NEW_MOON_OFFSETS: Final[tuple[float, ...]] = tuple(-2.0 + i / 4.0 for i in range(17))
"""Sampling offsets (days) for the new-moon locator: -2.0 through +2.0."""

AngleFunction = Callable[[float], float]


@dataclass(frozen=True, slots=True)
class BoundaryCrossing:
    """Moment a cyclic quantity leaves its current division.

    Attributes
    ----------
    index:
        1-based ordinal of the division occupied at the reference instant.
    target_deg:
        Degree value (``index * width``) whose crossing was located.
    julian_day:
        UT Julian Day of the crossing estimate.
    iterations:
        Bisection iterations (step solver) or ``0`` (interpolation).
    method:
        ``"step+bisection"`` or ``"lagrange"``.
    status:
        ``"ok"``; ``"max_iter"`` when bisection stopped at its iteration cap;
        ``"max_span"`` when no crossing was seen inside the stepping span;
        ``"clamped"`` when interpolation produced a negative or non-finite
        offset and the reference instant was returned instead.
    """

    index: int
    target_deg: float
    julian_day: float
    iterations: int
    method: str
    status: str


def cyclic_index(angle: float, divisions: int) -> int:
    """Return the 1-based division of ``angle`` on a circle cut into ``divisions``."""

    width = FULL_CIRCLE / divisions
    index = int(math.floor(normalize_degrees(angle) / width)) + 1
    return min(max(index, 1), divisions)


def step_bisect_crossing(
    angle_fn: AngleFunction,
    jd_ut: float,
    *,
    divisions: int = 30,
    step_days: float = 30.0 / MINUTES_PER_DAY,
    tolerance_days: float = 1.0 / MINUTES_PER_DAY,
    max_iterations: int = 40,
    max_span_days: float = 2.0,
) -> BoundaryCrossing:
    """Locate the next division boundary of ``angle_fn`` after ``jd_ut``.

    The angle is stepped forward in ``step_days`` increments until it reaches
    the end of the division occupied at ``jd_ut``.  The bracket between the
    last sample below the target and the first at or above it is then
    bisected to ``tolerance_days`` or ``max_iterations``, whichever comes
    first.  Samples that read below the reference value are taken to have
    wrapped past 360° and are lifted by a full turn.

    The returned Julian Day is always within ``[jd_ut, jd_ut + max_span_days)``.
    """

    reference = normalize_degrees(angle_fn(jd_ut))
    index = cyclic_index(reference, divisions)
    target = index * (FULL_CIRCLE / divisions)

    def _continuous(jd: float) -> float:
        value = normalize_degrees(angle_fn(jd))
        return value + FULL_CIRCLE if value < reference else value

    lo = jd_ut
    hi = jd_ut
    value_hi = reference
    step = 1
    while value_hi < target:
        candidate = jd_ut + step * step_days
        if candidate - jd_ut >= max_span_days:
            LOG.debug("No boundary within %.2f days of JD %.6f", max_span_days, jd_ut)
            return BoundaryCrossing(index, target, hi, 0, "step+bisection", "max_span")
        lo = hi
        hi = candidate
        value_hi = _continuous(hi)
        step += 1

    iterations = 0
    while hi - lo > tolerance_days and iterations < max_iterations:
        mid = 0.5 * (lo + hi)
        if _continuous(mid) >= target:
            hi = mid
        else:
            lo = mid
        iterations += 1

    SOLVER_ITERATIONS.labels(method="step+bisection").observe(iterations)
    status = "ok" if hi - lo <= tolerance_days else "max_iter"
    return BoundaryCrossing(index, target, hi, iterations, "step+bisection", status)


def interpolate_crossing(
    angle_fn: AngleFunction,
    jd_ut: float,
    *,
    divisions: int = 27,
    offsets: Sequence[float] = INTERPOLATION_OFFSETS,
) -> BoundaryCrossing:
    """Estimate the end of the current division by inverse interpolation.

    ``angle_fn`` is sampled at ``jd_ut + offset`` for each offset, the
    samples are unwrapped and the Lagrange polynomial through them is
    inverted at the division's upper edge.  A negative, non-finite or
    degenerate estimate collapses to the reference instant.
    """

    samples = [normalize_degrees(angle_fn(jd_ut + offset)) for offset in offsets]
    values = unwrap(samples)
    index = cyclic_index(samples[0], divisions)
    target = index * (FULL_CIRCLE / divisions)

    try:
        approx = inverse_lagrange(offsets, values, target)
    except ZeroDivisionError:
        LOG.warning("Degenerate samples at JD %.6f; interpolation skipped", jd_ut)
        approx = math.nan

    status = "ok"
    if not math.isfinite(approx) or approx < 0.0:
        approx = 0.0
        status = "clamped"
    return BoundaryCrossing(index, target, jd_ut + approx, 0, "lagrange", status)


def locate_new_moon(
    phase_fn: AngleFunction,
    jd_ut: float,
    tithi: int,
    direction: int,
    *,
    offsets: Sequence[float] = NEW_MOON_OFFSETS,
) -> float:
    """Return the Julian Day of the new moon before or after ``jd_ut``.

    ``tithi`` (1..30) at ``jd_ut`` sets a rough start: ``tithi`` days back for
    ``direction=-1`` and ``30 - tithi`` days ahead for ``direction=1``.  The
    lunar phase is sampled around that start, unwrapped and inverted at the
    360° conjunction.
    """

    if direction < 0:
        start = jd_ut - tithi
    elif direction > 0:
        start = jd_ut + (30 - tithi)
    else:
        start = jd_ut

    values = unwrap([normalize_degrees(phase_fn(start + offset)) for offset in offsets])
    if values[0] < FULL_CIRCLE / 2.0:
        # conjunction precedes the window; read it as the 0° crossing
        values = [value + FULL_CIRCLE for value in values]
    try:
        offset = inverse_lagrange(offsets, values, FULL_CIRCLE)
    except ZeroDivisionError:
        LOG.warning("Degenerate lunar phase samples near JD %.6f; using rough start", start)
        return start
    if not math.isfinite(offset):
        return start
    return start + offset
