"""Deferred import of the :mod:`swisseph` extension.

The engine and its tests run against synthetic providers, so pyswisseph is
only imported when a :class:`SwissEphemerisProvider` first touches it.
Search workers may race to that first touch; the import is serialised.
"""

from __future__ import annotations

import importlib
import importlib.util
import threading
from typing import Any

from ..exceptions import EphemerisUnavailableError

__all__ = ["swe", "backend_version", "has_swe", "reset_swe"]

_INSTALL_HINT = (
    "pyswisseph is required for Swiss Ephemeris calculations "
    "(pip install pyswisseph). Ephemeris files are optional; without them "
    "the Moshier theory is used."
)


class _SwissLoader:
    """Callable handle resolving to the imported :mod:`swisseph` module.

    ``swe()`` returns the module and ``swe.SUN`` forwards attribute access.
    """

    def __init__(self) -> None:
        self._module: Any | None = None
        self._lock = threading.Lock()

    def __call__(self) -> Any:
        module = self._module
        if module is not None:
            return module
        with self._lock:
            if self._module is None:
                try:
                    self._module = importlib.import_module("swisseph")
                except ImportError as exc:
                    raise EphemerisUnavailableError(_INSTALL_HINT) from exc
            return self._module

    def __getattr__(self, item: str) -> Any:
        if item.startswith("_"):
            raise AttributeError(item)
        return getattr(self(), item)

    @property
    def loaded(self) -> bool:
        return self._module is not None

    def forget(self) -> None:
        with self._lock:
            self._module = None


swe = _SwissLoader()


def reset_swe() -> None:
    """Drop the cached module; the next access imports it again."""

    swe.forget()


def has_swe() -> bool:
    """Return ``True`` when pyswisseph is imported or importable."""

    return swe.loaded or importlib.util.find_spec("swisseph") is not None


def backend_version() -> str | None:
    """Version string reported by the Swiss Ephemeris library, if installed."""

    if not has_swe():
        return None
    return str(getattr(swe(), "version", "unknown"))
