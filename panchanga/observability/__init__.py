"""Prometheus collectors for the Panchanga engine."""

from .metrics import ensure_metrics_registered

__all__ = ["ensure_metrics_registered"]
