from __future__ import annotations

import math

import pytest

from panchanga.core.angles import inverse_lagrange, normalize_degrees, unwrap
from panchanga.ephemeris.refinement import cyclic_index, step_bisect_crossing
from tests.helpers import J2000, LinearSky

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

WRAPPED_FLOATS = st.floats(
    min_value=-720.0,
    max_value=720.0,
    allow_nan=False,
    allow_infinity=False,
)
SERIES = st.lists(WRAPPED_FLOATS, min_size=1, max_size=20)
GAPS = st.lists(
    st.floats(min_value=0.5, max_value=40.0, allow_nan=False, allow_infinity=False),
    min_size=4,
    max_size=4,
)


@settings(deadline=None)
@given(angles=SERIES)
def test_unwrap_is_non_decreasing(angles: list[float]) -> None:
    result = unwrap(angles)
    assert all(b >= a for a, b in zip(result, result[1:]))


@settings(deadline=None)
@given(angles=SERIES)
def test_unwrap_only_adds_full_turns(angles: list[float]) -> None:
    for raw, lifted in zip(angles, unwrap(angles)):
        turns = (lifted - raw) / 360.0
        assert turns >= 0.0
        assert math.isclose(turns, round(turns), abs_tol=1e-9)


@settings(deadline=None)
@given(angles=SERIES)
def test_unwrap_is_idempotent(angles: list[float]) -> None:
    once = unwrap(angles)
    assert unwrap(once) == once


@settings(deadline=None)
@given(start=WRAPPED_FLOATS, gaps=GAPS, k=st.integers(min_value=0, max_value=4))
def test_inverse_lagrange_hits_samples(start: float, gaps: list[float], k: int) -> None:
    values = [start]
    for gap in gaps:
        values.append(values[-1] + gap)
    offsets = [i / 24.0 for i in range(5)]
    assert inverse_lagrange(offsets, values, values[k]) == pytest.approx(offsets[k], abs=1e-9)


@settings(deadline=None)
@given(angle=st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False))
def test_cyclic_index_in_range(angle: float) -> None:
    assert 1 <= cyclic_index(angle, 30) <= 30
    assert 1 <= cyclic_index(angle, 27) <= 27
    assert 0.0 <= normalize_degrees(angle) < 360.0


@settings(deadline=None, max_examples=50)
@given(days=st.floats(min_value=0.0, max_value=10_000.0, allow_nan=False, allow_infinity=False))
def test_tithi_boundary_stays_inside_span(days: float) -> None:
    sky = LinearSky()
    jd = J2000 + days
    crossing = step_bisect_crossing(sky.phase_at, jd)
    assert 1 <= crossing.index <= 30
    assert jd <= crossing.julian_day < jd + 2.0
    assert crossing.status == "ok"
