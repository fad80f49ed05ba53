"""Angular utilities shared by the boundary solvers.

Every cyclic quantity the engine tracks (lunar phase, sidereal lunar
longitude, the yoga sum) lives on the ``[0, 360)`` circle.  Interpolating
across a 359°→1° wrap with raw values produces garbage, so the samples are
first *unwrapped* into a monotonic series and only then interpolated.
"""

from __future__ import annotations

import math
from typing import Final, Sequence

__all__ = [
    "EPSILON_DEG",
    "FULL_CIRCLE",
    "inverse_lagrange",
    "normalize_degrees",
    "unwrap",
]


EPSILON_DEG: Final[float] = 1e-9
FULL_CIRCLE: Final[float] = 360.0


def normalize_degrees(angle: float) -> float:
    """Return ``angle`` normalised to the ``[0, 360)`` interval.

    Values within ``1e-9`` of ``360`` are coerced to ``0`` so index
    arithmetic such as ``floor(angle / 12)`` never yields an out-of-range
    ordinal.
    """

    wrapped = float(angle) % FULL_CIRCLE
    if wrapped >= FULL_CIRCLE - EPSILON_DEG:
        return 0.0
    return wrapped


def unwrap(angles: Sequence[float]) -> list[float]:
    """Return ``angles`` as a non-decreasing series of continuous degrees.

    Whenever a sample falls below its (already shifted) predecessor it is
    lifted by whole turns until it no longer does; the lift carries forward
    to every later sample through the comparison.  The output of
    :func:`unwrap` is a fixed point of :func:`unwrap`.

    Parameters
    ----------
    angles:
        Finite degree values in sampling order.
    """

    result = [float(value) for value in angles]
    for index in range(1, len(result)):
        previous = result[index - 1]
        current = result[index]
        if current < previous:
            turns = math.ceil((previous - current) / FULL_CIRCLE)
            current += FULL_CIRCLE * max(turns, 1)
            if current < previous:
                current += FULL_CIRCLE
            result[index] = current
    return result


def inverse_lagrange(
    offsets: Sequence[float], values: Sequence[float], target: float
) -> float:
    """Return the offset at which the interpolated ``values`` reach ``target``.

    ``values`` play the role of the independent variable: the Lagrange
    polynomial through ``(values[i], offsets[i])`` is evaluated at
    ``target``.  Repeated entries in ``values`` divide by zero; callers
    sample far enough apart to avoid them.
    """

    if len(offsets) != len(values):
        raise ValueError("offsets and values must have the same length")
    total = 0.0
    for i, (offset_i, value_i) in enumerate(zip(offsets, values)):
        numer = 1.0
        denom = 1.0
        for j, value_j in enumerate(values):
            if j == i:
                continue
            numer *= target - value_j
            denom *= value_i - value_j
        total += numer * offset_i / denom
    return total
