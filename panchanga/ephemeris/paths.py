"""Swiss ephemeris data directory discovery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

__all__ = [
    "DEFAULT_ENV_KEYS",
    "iter_candidate_paths",
    "resolve_ephe_path",
]

DEFAULT_ENV_KEYS: tuple[str, ...] = (
    "SE_EPHE_PATH",
    "SWE_EPH_PATH",
    "PANCHANGA_EPHE_PATH",
)
"""Environment variables checked (in order) for Swiss ephemeris paths."""

_DEFAULT_HINTS: tuple[Path, ...] = (
    Path.home() / ".sweph",
    Path("/usr/share/sweph"),
    Path("/usr/share/libswisseph"),
)


def _existing_dir(path: os.PathLike[str] | str | None) -> str | None:
    if not path:
        return None
    candidate = Path(path).expanduser()
    return str(candidate) if candidate.is_dir() else None


def iter_candidate_paths(
    configured: str | os.PathLike[str] | None = None,
    *,
    env_keys: Iterable[str] = DEFAULT_ENV_KEYS,
) -> Iterator[str]:
    """Yield existing ephemeris directories in priority order.

    The explicitly configured directory wins, then environment variables,
    then the usual system install locations.  Duplicates are suppressed.
    """

    seen: set[str] = set()
    raw: list[os.PathLike[str] | str | None] = [configured]
    raw.extend(os.environ.get(key) for key in env_keys)
    raw.extend(_DEFAULT_HINTS)
    for entry in raw:
        candidate = _existing_dir(entry)
        if candidate and candidate not in seen:
            seen.add(candidate)
            yield candidate


def resolve_ephe_path(configured: str | os.PathLike[str] | None = None) -> str | None:
    """Return the first usable ephemeris directory or ``None``.

    ``None`` means Swiss Ephemeris falls back to its built-in Moshier theory.
    """

    return next(iter_candidate_paths(configured), None)
