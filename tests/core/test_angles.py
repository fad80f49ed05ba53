from __future__ import annotations

import math

import pytest

from panchanga.core.angles import inverse_lagrange, normalize_degrees, unwrap


@pytest.mark.parametrize(
    ("angle", "expected"),
    [
        (0.0, 0.0),
        (360.0, 0.0),
        (-30.0, 330.0),
        (725.0, 5.0),
        (359.9999999999, 0.0),
        (-1e-20, 0.0),
        (-359.5, 0.5),
    ],
)
def test_normalize_degrees(angle: float, expected: float) -> None:
    assert normalize_degrees(angle) == pytest.approx(expected)


def test_unwrap_lifts_samples_after_wrap() -> None:
    assert unwrap([350.0, 355.0, 2.0, 9.0]) == [350.0, 355.0, 362.0, 369.0]


def test_unwrap_handles_multiple_wraps() -> None:
    result = unwrap([300.0, 10.0, 200.0, 20.0])
    assert result == [300.0, 370.0, 560.0, 740.0]


def test_unwrap_empty_and_single() -> None:
    assert unwrap([]) == []
    assert unwrap([42.0]) == [42.0]


def test_unwrap_keeps_equal_samples() -> None:
    assert unwrap([10.0, 10.0, 10.0]) == [10.0, 10.0, 10.0]


def test_unwrap_does_not_mutate_input() -> None:
    samples = [350.0, 1.0]
    unwrap(samples)
    assert samples == [350.0, 1.0]


def test_inverse_lagrange_linear_is_exact() -> None:
    offsets = [0.0, 1.0, 2.0, 3.0, 4.0]
    values = [10.0 + 13.0 * x for x in offsets]
    assert inverse_lagrange(offsets, values, 30.0) == pytest.approx(20.0 / 13.0, abs=1e-12)


def test_inverse_lagrange_quadratic_inverse() -> None:
    # x = sqrt(y) sampled on y; a cubic through four points tracks it closely
    values = [1.0, 4.0, 9.0, 16.0]
    offsets = [math.sqrt(v) for v in values]
    assert inverse_lagrange(offsets, values, 6.25) == pytest.approx(2.5, abs=0.05)


def test_inverse_lagrange_returns_sample_offset() -> None:
    offsets = [-0.5, 0.25, 1.0, 1.75]
    values = [3.0, 7.5, 11.0, 20.0]
    assert inverse_lagrange(offsets, values, 11.0) == pytest.approx(1.0, abs=1e-9)


def test_inverse_lagrange_repeated_values_divide_by_zero() -> None:
    with pytest.raises(ZeroDivisionError):
        inverse_lagrange([0.0, 1.0], [5.0, 5.0], 6.0)


def test_inverse_lagrange_length_mismatch() -> None:
    with pytest.raises(ValueError):
        inverse_lagrange([0.0, 1.0], [5.0], 6.0)


@pytest.mark.parametrize("angle", [-1e-20, -1e-12, -720.0, -0.0])
def test_normalize_degrees_never_negative(angle: float) -> None:
    assert 0.0 <= normalize_degrees(angle) < 360.0
