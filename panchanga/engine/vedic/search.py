"""Recurring-date search for a (tithi, paksha, masa) combination.

For each target year the search walks a primary window of months around
the base month and, failing that, the tail of the previous year and the
head of the following year.  The lunar year drifts roughly eleven days
against the solar one, so a recurrence occasionally slips across the
year boundary and out of the primary window.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Protocol

from ...core.time import CivilDate, days_in_month
from ...exceptions import EphemerisUnavailableError
from ...observability.metrics import SEARCH_DAYS_EVALUATED, SEARCH_YEARS_WITHOUT_MATCH

LOG = logging.getLogger(__name__)

__all__ = [
    "FALLBACK_NEXT_MONTHS",
    "FALLBACK_PREVIOUS_MONTHS",
    "MatchingDate",
    "SearchTarget",
    "find_matching_dates",
    "iter_window_dates",
    "primary_months",
    "search_year",
]

FALLBACK_PREVIOUS_MONTHS: tuple[int, ...] = (11, 12)
FALLBACK_NEXT_MONTHS: tuple[int, ...] = (1, 2)


class _Limb(Protocol):
    number: int


class _TithiLimb(_Limb, Protocol):
    paksha: str


class PanchangaLike(Protocol):
    """Subset of a computed Panchanga read by the search."""

    tithi: _TithiLimb
    nakshatra: _Limb
    yoga: _Limb
    karana: _Limb
    masa: _Limb
    vaara: _Limb


Evaluator = Callable[[CivilDate], PanchangaLike]


@dataclass(frozen=True, slots=True)
class SearchTarget:
    """Combination a candidate day must reproduce."""

    tithi: int
    paksha: str
    masa: int

    @classmethod
    def from_result(cls, result: PanchangaLike) -> "SearchTarget":
        return cls(tithi=result.tithi.number, paksha=result.tithi.paksha, masa=result.masa.number)

    def matches(self, result: PanchangaLike) -> bool:
        return (
            result.tithi.number == self.tithi
            and result.tithi.paksha == self.paksha
            and result.masa.number == self.masa
        )


@dataclass(frozen=True, slots=True)
class MatchingDate:
    """A day reproducing the target combination.

    ``date`` is reported under the target year.  For fallback-window hits it
    keeps the month and day of ``matched_date`` (the day actually
    evaluated) and only the year is rewritten; the field values are those
    computed for ``matched_date``.
    """

    date: CivilDate
    tithi: int
    paksha: str
    nakshatra: int
    yoga: int
    karana: int
    masa: int
    weekday: int
    window: str = "primary"
    matched_date: CivilDate | None = None


def primary_months(base_month: int, padding: int = 2) -> range:
    """Months ``base_month ± padding`` clamped to 1..12."""

    return range(max(1, base_month - padding), min(12, base_month + padding) + 1)


def iter_window_dates(
    year: int, months: Iterable[int], calendar: str = "gregorian"
) -> Iterator[CivilDate]:
    for month in months:
        for day in range(1, days_in_month(year, month, calendar) + 1):
            yield CivilDate(year, month, day, calendar=calendar)  # type: ignore[arg-type]


def _first_match(
    evaluate: Evaluator,
    target: SearchTarget,
    dates: Iterable[CivilDate],
    window: str,
) -> tuple[CivilDate, PanchangaLike] | None:
    for candidate in dates:
        SEARCH_DAYS_EVALUATED.labels(window=window).inc()
        try:
            result = evaluate(candidate)
        except EphemerisUnavailableError:
            raise
        except Exception as exc:
            LOG.warning("Skipping %s during search: %s", candidate.isoformat(), exc)
            continue
        if target.matches(result):
            return candidate, result
    return None


def search_year(
    evaluate: Evaluator,
    target: SearchTarget,
    year: int,
    base_month: int,
    *,
    calendar: str = "gregorian",
    month_padding: int = 2,
) -> MatchingDate | None:
    """Return the first day of ``year`` matching ``target``, if any."""

    windows: tuple[tuple[str, int, Iterable[int]], ...] = (
        ("primary", year, primary_months(base_month, month_padding)),
        ("previous_year", year - 1, FALLBACK_PREVIOUS_MONTHS),
        ("next_year", year + 1, FALLBACK_NEXT_MONTHS),
    )
    for window, scan_year, months in windows:
        hit = _first_match(evaluate, target, iter_window_dates(scan_year, months, calendar), window)
        if hit is None:
            continue
        matched, result = hit
        return MatchingDate(
            date=matched if scan_year == year else matched.with_year(year),
            tithi=target.tithi,
            paksha=target.paksha,
            nakshatra=result.nakshatra.number,
            yoga=result.yoga.number,
            karana=result.karana.number,
            masa=target.masa,
            weekday=result.vaara.number,
            window=window,
            matched_date=matched,
        )

    SEARCH_YEARS_WITHOUT_MATCH.inc()
    LOG.warning(
        "No date in %d matches tithi %d (%s) of masa %d",
        year,
        target.tithi,
        target.paksha,
        target.masa,
    )
    return None


def find_matching_dates(
    evaluate: Evaluator,
    target: SearchTarget,
    base_date: CivilDate,
    *,
    range_years: int,
    current_year: int,
    month_padding: int = 2,
    max_workers: int = 1,
) -> list[MatchingDate]:
    """Search ``current_year ± range_years`` for days matching ``target``.

    Years are independent, so with ``max_workers > 1`` one task per year is
    fanned out to a thread pool.  The result is sorted by date.
    """

    years = list(range(current_year - range_years, current_year + range_years + 1))

    def _scan(year: int) -> MatchingDate | None:
        return search_year(
            evaluate,
            target,
            year,
            base_date.month,
            calendar=base_date.calendar,
            month_padding=month_padding,
        )

    hits: list[MatchingDate | None]
    if max_workers > 1 and len(years) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(years))) as executor:
            futures = [executor.submit(_scan, year) for year in years]
            hits = [future.result() for future in futures]
    else:
        hits = [_scan(year) for year in years]

    matches = [hit for hit in hits if hit is not None]
    matches.sort(key=lambda item: item.date.sort_key())
    return matches
