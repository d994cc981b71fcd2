"""Data types for the ants, the pheromone grid and the food sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from antcolony.geometry import Vec2


class Target(Enum):
    """What an ant is currently looking for."""

    HOME = 0
    FOOD = 1


@dataclass
class Ant:
    """A single ant moving over the map."""

    angle: float
    position: Vec2
    target: Target
    pheromone_supply: float


@dataclass
class Cell:
    """One square of the pheromone grid."""

    x: int
    y: int
    pheromone_food: float = 0.0
    pheromone_home: float = 0.0


@dataclass
class FoodSource:
    """A circular pile of food with a remaining count."""

    position: Vec2
    count_food: int
    radius: int


@dataclass(frozen=True)
class DirectionOption:
    """A candidate heading and the pheromone weight behind it."""

    angle: float
    weight: float