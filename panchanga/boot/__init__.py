"""Bootstrap helpers for entry points."""

from .logging import configure_logging

__all__ = ["configure_logging"]
