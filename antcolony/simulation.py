"""Pheromone-driven ant colony simulation on a rectangular grid."""

from __future__ import annotations

import math
import random

from antcolony.entities import Ant, Cell, DirectionOption, FoodSource, Target
from antcolony.geometry import (
    Vec2,
    circle_collision,
    direction_from_angle,
    distance,
    out_of_bounds,
    random_float,
)

_TAU = 2 * math.pi
_PROBE_OFFSETS = tuple(step * math.pi / 16 for step in range(-4, 5))
_PROBE_CELLS = 5
_STEER_THRESHOLD = 0.1
_WANDER_CHANCE = 0.05
_DEPOSIT_RADIUS = 2
_HOME_FALLOFF = 1000.0
_FOOD_FALLOFF = 500.0
_MIN_FACTOR = 0.1
_DEPOSIT_SCALE = 2.0
_SPLASH_SCALE = 0.5


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Simulation:
    """Ants that wander from a nest, find food and lay pheromone trails."""

    def __init__(
        self,
        width: int,
        height: int,
        size_cell: Vec2,
        count_ants: int,
        evaporation_rate: float,
        pheromone_deposit: float,
        speed_ant: float,
        radius_home: int,
        count_food_sources: int,
        radius_food_source: int,
        count_food_to_source: int,
        supply_pheromone: float,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.size_cell = size_cell
        self.count_ants = count_ants
        self.evaporation_rate = evaporation_rate
        self.pheromone_deposit = pheromone_deposit
        self.speed_ant = speed_ant
        self.radius_home = radius_home
        self.count_food_sources = count_food_sources
        self.radius_food_source = radius_food_source
        self.count_food_to_source = count_food_to_source
        self.supply_pheromone = float(supply_pheromone)
        self.rng = rng

        self.ants: list[Ant] = []
        self.grid: list[list[Cell]] = []
        self.food_sources: list[FoodSource] = []
        self.size_map = Vec2(width / size_cell.x, height / size_cell.y)
        self.home_position: Vec2 | None = None

    def _random(self, low: float, high: float) -> float:
        return random_float(low, high, self.rng)

    def _random_inner_point(self) -> Vec2:
        quarter_w = self.width // 4
        quarter_h = self.height // 4
        return Vec2(
            self._random(quarter_w, quarter_w * 3),
            self._random(quarter_h, quarter_h * 3),
        )

    def init(self) -> None:
        """Place the nest, the ants, the grid and the food sources."""
        self.home_position = self._random_inner_point()
        self.size_map = Vec2(self.width / self.size_cell.x, self.height / self.size_cell.y)
        self.ants = [
            Ant(self._random(0.0, _TAU), self.home_position, Target.FOOD, self.supply_pheromone)
            for _ in range(self.count_ants)
        ]
        rows = math.ceil(self.size_map.y)
        cols = math.ceil(self.size_map.x)
        self.grid = [[Cell(x, y) for x in range(cols)] for y in range(rows)]
        self.food_sources = [
            FoodSource(self._random_inner_point(), self.count_food_to_source, self.radius_food_source)
            for _ in range(self.count_food_sources)
        ]

    def _grid_pos(self, pos: Vec2) -> Vec2:
        return Vec2(
            math.floor(pos.x / self.size_cell.x),
            math.floor(pos.y / self.size_cell.y),
        )

    def _probe(self, ant: Ant) -> list[DirectionOption]:
        options = []
        reach = Vec2(self.size_cell.x * _PROBE_CELLS, self.size_cell.y * _PROBE_CELLS)
        for offset in _PROBE_OFFSETS:
            angle = ant.angle + offset
            heading = direction_from_angle(angle)
            sample = Vec2(ant.position.x + heading.x * reach.x, ant.position.y + heading.y * reach.y)
            grid_pos = self._grid_pos(sample)
            if out_of_bounds(self.size_map, grid_pos):
                continue
            cell = self.grid[int(grid_pos.y)][int(grid_pos.x)]
            level = cell.pheromone_food if ant.target is Target.FOOD else cell.pheromone_home
            options.append(DirectionOption(angle, level**2))
        return options

    def _steer(self, ant: Ant) -> None:
        best_angle = ant.angle
        best_weight = 0.0
        for option in self._probe(ant):
            if option.weight > best_weight:
                best_weight = option.weight
                best_angle = option.angle

        if best_weight > _STEER_THRESHOLD and self._random(0.0, 1.0) > _WANDER_CHANCE:
            ant.angle = best_angle
        else:
            ant.angle += self._random(-math.pi / 4, math.pi / 4)

        ant.angle = math.fmod(ant.angle, _TAU)
        if ant.angle < 0:
            ant.angle += _TAU

    def _splash(self, grid_x: int, grid_y: int, field: str, amount: float) -> None:
        for dy in range(-_DEPOSIT_RADIUS, _DEPOSIT_RADIUS + 1):
            for dx in range(-_DEPOSIT_RADIUS, _DEPOSIT_RADIUS + 1):
                x, y = grid_x + dx, grid_y + dy
                if out_of_bounds(self.size_map, Vec2(x, y)):
                    continue
                cell = self.grid[y][x]
                setattr(cell, field, _clamp(getattr(cell, field) + amount, 0.0, 1.0))

    def _turn_around(self, ant: Ant) -> None:
        ant.angle += math.pi + self._random(-math.pi / 8, math.pi / 8)

    def _forage(self, ant: Ant, cell: Cell, grid_x: int, grid_y: int) -> None:
        dist = distance(ant.position, self.home_position)
        factor = _clamp(1.0 - dist / _HOME_FALLOFF, _MIN_FACTOR, 1.0)
        amount = self.pheromone_deposit * factor * _DEPOSIT_SCALE
        cell.pheromone_home = _clamp(cell.pheromone_home + amount, 0.0, 1.0)

        source = next(
            (s for s in self.food_sources if circle_collision(ant.position, s.position, s.radius)),
            None,
        )
        if source is None:
            return
        ant.target = Target.HOME
        self._turn_around(ant)
        self._splash(grid_x, grid_y, "pheromone_home", amount * _SPLASH_SCALE)
        source.count_food -= 1
        if source.count_food <= 0:
            self.food_sources.remove(source)

    def _return_home(self, ant: Ant, cell: Cell, grid_x: int, grid_y: int) -> None:
        dist = distance(ant.position, self.home_position)
        factor = _clamp(dist / _FOOD_FALLOFF, _MIN_FACTOR, 1.0)
        amount = self.pheromone_deposit * factor * _DEPOSIT_SCALE
        cell.pheromone_food = _clamp(cell.pheromone_food + amount, 0.0, 1.0)

        if circle_collision(ant.position, self.home_position, self.radius_home):
            ant.target = Target.FOOD
            self._turn_around(ant)
            self._splash(grid_x, grid_y, "pheromone_food", amount * _SPLASH_SCALE)

    def _move(self, ant: Ant, dt: float) -> None:
        heading = direction_from_angle(ant.angle)
        next_pos = Vec2(
            ant.position.x + heading.x * dt * self.speed_ant,
            ant.position.y + heading.y * dt * self.speed_ant,
        )
        grid_pos = self._grid_pos(next_pos)
        if out_of_bounds(self.size_map, grid_pos):
            ant.angle += self._random(-math.pi / 2, math.pi / 2)
            return

        ant.position = next_pos
        grid_x, grid_y = int(grid_pos.x), int(grid_pos.y)
        cell = self.grid[grid_y][grid_x]
        if ant.target is Target.FOOD:
            self._forage(ant, cell, grid_x, grid_y)
        else:
            self._return_home(ant, cell, grid_x, grid_y)

    def update(self, dt: float) -> None:
        """Advance the simulation by ``dt`` seconds."""
        for row in self.grid:
            for cell in row:
                cell.pheromone_food *= self.evaporation_rate
                cell.pheromone_home *= self.evaporation_rate

        for ant in self.ants:
            self._steer(ant)
            self._move(ant, dt)