"""Lunation and lunar-month helpers."""

from .calendar import MasaResult, masa_from_raasis, raasi, resolve_masa

__all__ = ["MasaResult", "masa_from_raasis", "raasi", "resolve_masa"]
