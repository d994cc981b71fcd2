"""Planar vector helpers used by the ant simulation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

_default_rng = random.Random()


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-dimensional vector or point."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


def vec_length(vec: Vec2) -> float:
    """Return the Euclidean length of ``vec``."""
    return math.hypot(vec.x, vec.y)


def direction_between(start: Vec2, end: Vec2) -> Vec2:
    """Return the unit vector pointing from ``start`` towards ``end``."""
    delta = end - start
    length = vec_length(delta)
    if length == 0:
        raise ValueError("cannot take the direction between coincident points")
    return Vec2(delta.x / length, delta.y / length)


def distance(start: Vec2, end: Vec2) -> float:
    """Return the Euclidean distance between two points."""
    return vec_length(end - start)


def direction_from_angle(angle: float) -> Vec2:
    """Return the unit vector for ``angle`` given in radians."""
    return Vec2(math.cos(angle), math.sin(angle))


def random_float(low: float, high: float, rng: random.Random | None = None) -> float:
    """Return a uniformly distributed float between ``low`` and ``high``."""
    return (rng or _default_rng).uniform(low, high)


def out_of_bounds(size_map: Vec2, pos: Vec2) -> bool:
    """Tell whether ``pos`` lies outside the grid of size ``size_map``."""
    return pos.x < 0 or pos.y < 0 or pos.x >= size_map.x or pos.y >= size_map.y


def circle_collision(point: Vec2, center: Vec2, radius: float) -> bool:
    """Tell whether ``point`` lies inside or on the circle."""
    return distance(point, center) <= radius