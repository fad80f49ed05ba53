"""Angle and civil-time primitives shared by the engine."""

from .angles import FULL_CIRCLE, inverse_lagrange, normalize_degrees, unwrap
from .time import CivilDate, Location, to_dms, weekday_index

__all__ = [
    "FULL_CIRCLE",
    "CivilDate",
    "Location",
    "inverse_lagrange",
    "normalize_degrees",
    "to_dms",
    "unwrap",
    "weekday_index",
]
