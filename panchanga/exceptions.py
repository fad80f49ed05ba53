"""Exception hierarchy shared across the Panchanga engine."""

from __future__ import annotations

__all__ = [
    "PanchangaError",
    "EphemerisUnavailableError",
    "EphemerisComputationError",
    "InvalidDateError",
]


class PanchangaError(Exception):
    """Base class for engine failures."""


class EphemerisUnavailableError(PanchangaError, RuntimeError):
    """Raised when the Swiss Ephemeris bindings cannot be imported."""


class EphemerisComputationError(PanchangaError, RuntimeError):
    """Raised when a required solar rise/set event cannot be computed."""


class InvalidDateError(PanchangaError, ValueError):
    """Raised for civil dates that cannot be converted to Julian Days."""
