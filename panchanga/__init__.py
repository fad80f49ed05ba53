"""Panchanga engine package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("panchanga-engine")
except PackageNotFoundError:  # pragma: no cover - metadata may be unavailable in source checkouts
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved package version."""

    return __version__


from .core.time import CivilDate, Location  # noqa: E402
from .exceptions import (  # noqa: E402
    EphemerisComputationError,
    EphemerisUnavailableError,
    InvalidDateError,
    PanchangaError,
)

__all__ = [
    "__version__",
    "get_version",
    "CivilDate",
    "Location",
    "PanchangaError",
    "EphemerisComputationError",
    "EphemerisUnavailableError",
    "InvalidDateError",
]
