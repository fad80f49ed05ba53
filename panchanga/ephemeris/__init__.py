"""Ephemeris provider contract, Swiss Ephemeris adapter and boundary solvers."""

from .provider import EphemerisProvider, RiseSetEvent
from .refinement import BoundaryCrossing, interpolate_crossing, locate_new_moon, step_bisect_crossing
from .swe import has_swe

__all__ = [
    "BoundaryCrossing",
    "EphemerisProvider",
    "RiseSetEvent",
    "has_swe",
    "interpolate_crossing",
    "locate_new_moon",
    "step_bisect_crossing",
]
