"""Panchanga limbs and the recurring-date search."""

from .names import (
    karana_name,
    masa_name,
    nakshatra_name,
    paksha_for_tithi,
    tithi_name,
    vaara_name,
    yoga_name,
)
from .panchang import (
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
from .refine import NoOpRefiner, RefinementMeta, Refiner

__all__ = [
    "KaranaResult",
    "NakshatraResult",
    "NoOpRefiner",
    "RefinementMeta",
    "Refiner",
    "TithiResult",
    "Vaara",
    "YogaResult",
    "calculate_karana",
    "calculate_nakshatra",
    "calculate_tithi",
    "calculate_yoga",
    "karana_name",
    "masa_name",
    "nakshatra_name",
    "paksha_for_tithi",
    "tithi_name",
    "vaara_for_date",
    "vaara_name",
    "yoga_name",
]
