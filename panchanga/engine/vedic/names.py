"""Fixed name tables for the Panchanga limbs.

Every lookup takes a 1-based cycle position and falls back to a generic
label (``"Tithi 31"``) for out-of-range input instead of raising.
"""

from __future__ import annotations

from typing import Final, Sequence

__all__ = [
    "KARANA_FIXED",
    "KARANA_MOVABLE",
    "MASA_NAMES",
    "NAKSHATRA_NAMES",
    "RAASI_NAMES",
    "TITHI_NAMES",
    "VAARA_NAMES",
    "YOGA_NAMES",
    "karana_name",
    "masa_name",
    "nakshatra_name",
    "paksha_for_tithi",
    "raasi_name",
    "tithi_name",
    "vaara_name",
    "yoga_name",
]

_PAKSHA_TITHIS: Final[tuple[str, ...]] = (
    "Pratipad",
    "Dwitiya",
    "Tritiya",
    "Chaturthi",
    "Panchami",
    "Shashthi",
    "Saptami",
    "Ashtami",
    "Navami",
    "Dashami",
    "Ekadashi",
    "Dwadashi",
    "Trayodashi",
    "Chaturdashi",
)

TITHI_NAMES: Final[tuple[str, ...]] = (
    _PAKSHA_TITHIS + ("Purnima",) + _PAKSHA_TITHIS + ("Amavasya",)
)

NAKSHATRA_NAMES: Final[tuple[str, ...]] = (
    "Ashwini",
    "Bharani",
    "Krittika",
    "Rohini",
    "Mrigashira",
    "Ardra",
    "Punarvasu",
    "Pushya",
    "Ashlesha",
    "Magha",
    "Purva Phalguni",
    "Uttara Phalguni",
    "Hasta",
    "Chitra",
    "Swati",
    "Vishakha",
    "Anuradha",
    "Jyeshtha",
    "Mula",
    "Purva Ashadha",
    "Uttara Ashadha",
    "Shravana",
    "Dhanishta",
    "Shatabhisha",
    "Purva Bhadrapada",
    "Uttara Bhadrapada",
    "Revati",
)

YOGA_NAMES: Final[tuple[str, ...]] = (
    "Vishkambha",
    "Priti",
    "Ayushman",
    "Saubhagya",
    "Shobhana",
    "Atiganda",
    "Sukarma",
    "Dhriti",
    "Shula",
    "Ganda",
    "Vriddhi",
    "Dhruva",
    "Vyaghata",
    "Harshana",
    "Vajra",
    "Siddhi",
    "Vyatipata",
    "Variyan",
    "Parigha",
    "Shiva",
    "Siddha",
    "Sadhya",
    "Shubha",
    "Shukla",
    "Brahma",
    "Indra",
    "Vaidhriti",
)

# Seven movable karanas repeat through positions 1..56; 57..60 are fixed.
KARANA_MOVABLE: Final[tuple[str, ...]] = (
    "Bava",
    "Balava",
    "Kaulava",
    "Taitila",
    "Gara",
    "Vanija",
    "Vishti",
)
KARANA_FIXED: Final[tuple[str, ...]] = ("Shakuni", "Chatushpada", "Naga", "Kimstughna")

MASA_NAMES: Final[tuple[str, ...]] = (
    "Chaitra",
    "Vaisakha",
    "Jyeshtha",
    "Ashadha",
    "Shravana",
    "Bhadrapada",
    "Ashwin",
    "Kartik",
    "Margashirsha",
    "Pausha",
    "Magha",
    "Phalguna",
)

RAASI_NAMES: Final[tuple[str, ...]] = (
    "Mesha",
    "Vrishabha",
    "Mithuna",
    "Karka",
    "Simha",
    "Kanya",
    "Tula",
    "Vrischika",
    "Dhanu",
    "Makara",
    "Kumbha",
    "Meena",
)

# 0 = Sunday
VAARA_NAMES: Final[tuple[str, ...]] = (
    "Ravivara",
    "Somavara",
    "Mangalavara",
    "Budhavara",
    "Guruvara",
    "Shukravara",
    "Shanivara",
)


def _lookup(table: Sequence[str], number: int, label: str) -> str:
    if 1 <= number <= len(table):
        return table[number - 1]
    return f"{label} {number}"


def tithi_name(number: int) -> str:
    return _lookup(TITHI_NAMES, number, "Tithi")


def paksha_for_tithi(number: int) -> str:
    """``"Shukla"`` for tithis 1..15, ``"Krishna"`` otherwise."""

    return "Shukla" if number <= 15 else "Krishna"


def nakshatra_name(number: int) -> str:
    return _lookup(NAKSHATRA_NAMES, number, "Nakshatra")


def yoga_name(number: int) -> str:
    return _lookup(YOGA_NAMES, number, "Yoga")


def karana_name(number: int) -> str:
    """Return the karana for half-tithi position ``number`` (1..60)."""

    if 57 <= number <= 60:
        return KARANA_FIXED[number - 57]
    if 1 <= number <= 56:
        return KARANA_MOVABLE[(number - 1) % len(KARANA_MOVABLE)]
    return f"Karana {number}"


def masa_name(number: int) -> str:
    return _lookup(MASA_NAMES, number, "Masa")


def raasi_name(number: int) -> str:
    return _lookup(RAASI_NAMES, number, "Raasi")


def vaara_name(weekday: int) -> str:
    """Name for ``weekday`` counted from ``0`` (Sunday)."""

    if 0 <= weekday < len(VAARA_NAMES):
        return VAARA_NAMES[weekday]
    return f"Vaara {weekday}"
