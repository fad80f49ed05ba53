"""Logging setup for the Panchanga CLI and embedding services."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["LOG_LEVEL_ENV", "configure_logging", "resolve_level"]

LOG_LEVEL_ENV = "LOG_LEVEL"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(value: str | int | None) -> int:
    """Translate ``value`` into a numeric :mod:`logging` level.

    Level names are matched case-insensitively and digit strings are read as
    numeric levels. Anything unrecognised resolves to :data:`logging.INFO`.
    """

    if isinstance(value, int):
        return value
    token = (value or "").strip()
    if not token:
        return logging.INFO
    if token.isdigit():
        return int(token)
    named = logging.getLevelName(token.upper())
    return named if isinstance(named, int) else logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Install the root handler used by Panchanga entry points.

    ``level`` overrides the ``LOG_LEVEL`` environment variable. Extra keyword
    arguments are forwarded to :func:`logging.basicConfig`. The effective
    level is returned.
    """

    effective = resolve_level(os.environ.get(LOG_LEVEL_ENV) if level is None else level)
    kwargs.setdefault("format", _FORMAT)
    kwargs.setdefault("datefmt", _DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)
    return effective
