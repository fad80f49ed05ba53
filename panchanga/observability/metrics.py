"""Prometheus metric definitions shared across Panchanga components."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "EPHEMERIS_READ_FAILURES",
    "RISE_SET_MISSING",
    "SEARCH_DAYS_EVALUATED",
    "SEARCH_YEARS_WITHOUT_MATCH",
    "SOLVER_ITERATIONS",
    "ensure_metrics_registered",
]


EPHEMERIS_READ_FAILURES = Counter(
    "panchanga_ephemeris_read_failures_total",
    "Longitude/latitude reads that degraded to zero after a provider error.",
    ("quantity",),
    registry=None,
)

RISE_SET_MISSING = Counter(
    "panchanga_rise_set_missing_total",
    "Rise/set queries for which the event did not occur or failed.",
    ("body", "event"),
    registry=None,
)

SOLVER_ITERATIONS = Histogram(
    "panchanga_solver_iterations",
    "Iterations spent by the boundary solvers per call.",
    ("method",),
    buckets=(1, 5, 10, 20, 30, 40, 60, 100),
    registry=None,
)

SEARCH_DAYS_EVALUATED = Counter(
    "panchanga_search_days_evaluated_total",
    "Days evaluated by the matching-date search, by window.",
    ("window",),
    registry=None,
)

SEARCH_YEARS_WITHOUT_MATCH = Counter(
    "panchanga_search_years_without_match_total",
    "Years for which the matching-date search found no candidate.",
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield EPHEMERIS_READ_FAILURES
    yield RISE_SET_MISSING
    yield SOLVER_ITERATIONS
    yield SEARCH_DAYS_EVALUATED
    yield SEARCH_YEARS_WITHOUT_MATCH


def ensure_metrics_registered(registry: CollectorRegistry | None = None) -> None:
    """Register the engine collectors with ``registry`` (default global)."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # already registered under this name
            continue
