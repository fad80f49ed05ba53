from .sky import (
    CHENNAI,
    J2000,
    MOON_RATE,
    SUN_RATE,
    LinearSky,
    gregorian_to_jd,
    jd_to_gregorian,
)

__all__ = [
    "CHENNAI",
    "J2000",
    "MOON_RATE",
    "SUN_RATE",
    "LinearSky",
    "gregorian_to_jd",
    "jd_to_gregorian",
]
