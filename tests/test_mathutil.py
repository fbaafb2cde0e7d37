import math
import random

import pytest

from katana import mathutil


@pytest.mark.parametrize("start,end", [(0.0, 10.0), (-3.0, 7.5), (4.0, -4.0)])
def test_lerp_endpoints(start, end):
    assert mathutil.lerp(start, end, 0) == start
    assert mathutil.lerp(start, end, 1) == end


def test_lerp_out_of_range_values_clamp_to_endpoints():
    assert mathutil.lerp(2.0, 8.0, -0.5) == 2.0
    assert mathutil.lerp(2.0, 8.0, 1.5) == 8.0


def test_lerp_is_monotonic_between_endpoints():
    results = [mathutil.lerp(1.0, 9.0, step / 10) for step in range(11)]
    assert results == sorted(results)
    assert all(1.0 <= r <= 9.0 for r in results)


def test_get_random_int_stays_in_inclusive_range():
    random.seed(1234)
    values = {mathutil.get_random_int(3, 6) for _ in range(500)}
    assert values == {3, 4, 5, 6}


def test_get_random_int_default_range():
    random.seed(99)
    for _ in range(100):
        value = mathutil.get_random_int()
        assert 0 <= value <= mathutil.RAND_MAX


def test_get_random_int_rejects_inverted_range():
    with pytest.raises(ValueError):
        mathutil.get_random_int(5, 1)


def test_get_random_float_between_zero_and_one():
    random.seed(7)
    for _ in range(200):
        value = mathutil.get_random_float()
        assert 0.0 <= value <= 1.0


@pytest.mark.parametrize(
    "low,high,value,expected",
    [(0, 1, 5, 1), (0, 1, -5, 0), (0.0, 1.0, 0.25, 0.25), (-10, 10, 3, 3)],
)
def test_clamp(low, high, value, expected):
    assert mathutil.clamp(low, high, value) == expected


@pytest.mark.parametrize(
    "low,high,value,expected",
    [(0, 10, 0, True), (0, 10, 10, True), (0, 10, 11, False), (0.0, 1.0, -0.1, False)],
)
def test_is_in_range(low, high, value, expected):
    assert mathutil.is_in_range(low, high, value) is expected


def test_to_radians_of_half_turn_is_pi():
    assert mathutil.to_radians(180) == pytest.approx(math.pi)


def test_to_degrees_of_pi_is_half_turn():
    assert mathutil.to_degrees(math.pi) == pytest.approx(180)


@pytest.mark.parametrize("degrees", [-720.0, -45.0, 0.0, 33.3, 90.0, 359.0])
def test_degree_radian_round_trip(degrees):
    assert mathutil.to_degrees(mathutil.to_radians(degrees)) == pytest.approx(degrees)


def test_to_radians_matches_pi_constants():
    assert mathutil.to_radians(90) == pytest.approx(mathutil.PI_OVER2)
    assert mathutil.to_radians(45) == pytest.approx(mathutil.PI_OVER4)
    assert mathutil.to_degrees(mathutil.PI) == pytest.approx(180)
    assert math.cos(mathutil.to_radians(45)) == pytest.approx(mathutil.NORMALIZE_PI_OVER4)