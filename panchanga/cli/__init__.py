"""Command line interface for the Panchanga engine."""

from .app import app

__all__ = ["app"]
