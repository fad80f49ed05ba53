"""Sidereal (nirayana) mode names and their Swiss Ephemeris codes."""

from __future__ import annotations

from typing import Any, Final

__all__ = [
    "DEFAULT_SIDEREAL_MODE",
    "SUPPORTED_SIDEREAL_MODES",
    "normalize_mode_name",
    "resolve_mode_code",
]

DEFAULT_SIDEREAL_MODE: Final[str] = "lahiri"
SUPPORTED_SIDEREAL_MODES: Final[dict[str, str]] = {"lahiri": "SIDM_LAHIRI"}


def normalize_mode_name(value: str) -> str:
    """Return a canonical key for the provided ayanamsa name."""

    return value.strip().lower().replace("-", "_").replace("/", "_").replace(" ", "_")


def resolve_mode_code(name: str, swe_module: Any) -> int:
    """Return the ``SIDM_*`` constant for ``name`` from ``swe_module``."""

    key = normalize_mode_name(name)
    try:
        attr = SUPPORTED_SIDEREAL_MODES[key]
    except KeyError as exc:
        options = ", ".join(sorted(SUPPORTED_SIDEREAL_MODES))
        raise ValueError(f"Unsupported sidereal mode '{name}'. Options: {options}") from exc
    return int(getattr(swe_module, attr))
