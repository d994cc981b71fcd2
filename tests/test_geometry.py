import math
import random

import pytest

from antcolony.geometry import (
    Vec2,
    circle_collision,
    direction_between,
    direction_from_angle,
    distance,
    out_of_bounds,
    random_float,
    vec_length,
)


def test_vec_length_of_pythagorean_triple():
    assert vec_length(Vec2(3.0, 4.0)) == pytest.approx(5.0)


def test_vec_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, 5.0)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert tuple(a) == (1.0, 2.0)


def test_vec_is_immutable():
    vec = Vec2(1.0, 1.0)
    with pytest.raises(AttributeError):
        vec.x = 2.0
    assert vec.x == 1.0
    assert vec == Vec2(1.0, 1.0)


def test_distance_is_symmetric_and_matches_length():
    a = Vec2(1.5, -2.0)
    b = Vec2(-4.0, 7.25)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(vec_length(b - a))
    assert distance(a, a) == 0.0


@pytest.mark.parametrize("angle", [0.0, 0.5, math.pi / 3, math.pi, 4.0, -1.2])
def test_direction_from_angle_is_unit(angle):
    vec = direction_from_angle(angle)
    assert vec_length(vec) == pytest.approx(1.0)
    assert math.atan2(vec.y, vec.x) == pytest.approx(math.atan2(math.sin(angle), math.cos(angle)))


def test_direction_from_angle_zero_points_along_x():
    vec = direction_from_angle(0.0)
    assert vec.x == pytest.approx(1.0)
    assert vec.y == pytest.approx(0.0)


def test_direction_between_is_unit_and_parallel():
    start = Vec2(2.0, 3.0)
    end = Vec2(10.0, -1.0)
    vec = direction_between(start, end)
    assert vec_length(vec) == pytest.approx(1.0)
    scaled = start + vec * distance(start, end)
    assert scaled.x == pytest.approx(end.x)
    assert scaled.y == pytest.approx(end.y)


def test_direction_between_same_point_raises():
    with pytest.raises(ValueError):
        direction_between(Vec2(1.0, 1.0), Vec2(1.0, 1.0))


def test_random_float_in_range_and_reproducible():
    first = [random_float(-2.0, 3.0, random.Random(42)) for _ in range(3)]
    second = [random_float(-2.0, 3.0, random.Random(42)) for _ in range(3)]
    assert first == second
    rng = random.Random(7)
    values = [random_float(-2.0, 3.0, rng) for _ in range(500)]
    assert all(-2.0 <= v <= 3.0 for v in values)
    assert len(set(values)) > 1


def test_random_float_without_rng_in_range():
    values = [random_float(0.0, 1.0) for _ in range(100)]
    assert all(0.0 <= v <= 1.0 for v in values)


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Vec2(0.0, 0.0), False),
        (Vec2(9.0, 4.0), False),
        (Vec2(10.0, 4.0), True),
        (Vec2(9.0, 5.0), True),
        (Vec2(-1.0, 0.0), True),
        (Vec2(0.0, -0.5), True),
    ],
)
def test_out_of_bounds(pos, expected):
    assert out_of_bounds(Vec2(10.0, 5.0), pos) is expected


def test_circle_collision_boundary_is_inclusive():
    center = Vec2(5.0, 5.0)
    point = Vec2(8.0, 9.0)
    radius = distance(point, center)
    assert circle_collision(point, center, radius) is True
    assert circle_collision(point, center, radius * 0.99) is False
    assert circle_collision(center, center, 0.0) is True