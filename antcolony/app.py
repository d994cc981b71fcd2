"""Window that runs and draws the ant colony simulation."""

from __future__ import annotations

import argparse

import pygame

from antcolony.entities import Ant, Cell, Target
from antcolony.geometry import Vec2
from antcolony.simulation import Simulation

WIDTH = 1280
HEIGHT = 720
TITLE = "Ants"
TARGET_FPS = 60

BLACK = (0, 0, 0, 255)
BLUE = (0, 121, 241, 255)
RED = (230, 41, 55, 255)
HOME_COLOR = (0, 255, 0, 255)
FOOD_COLOR = (255, 0, 0, 255)
TEXT_COLOR = (255, 255, 255, 255)

_VISIBLE_THRESHOLD = 0.05
_CELL_ALPHA = 127
_ANT_RADIUS = 2
_FONT_SIZE = 12


def cell_color(cell: Cell) -> tuple[int, int, int, int] | None:
    """Return the overlay colour of a cell, or None when it is too faint to draw."""
    if cell.pheromone_food < _VISIBLE_THRESHOLD and cell.pheromone_home < _VISIBLE_THRESHOLD:
        return None
    return (int(cell.pheromone_food * 255), int(cell.pheromone_home * 255), 0, _CELL_ALPHA)


def ant_color(ant: Ant) -> tuple[int, int, int, int]:
    """Return blue for ants seeking food and red for ants heading home."""
    return BLUE if ant.target is Target.FOOD else RED


def render(surface: pygame.Surface, simulation: Simulation, font: pygame.font.Font) -> None:
    """Draw the grid, ants, nest and food sources onto ``surface``."""
    surface.fill(BLACK)

    cell_w = int(simulation.size_cell.x)
    cell_h = int(simulation.size_cell.y)
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for row in simulation.grid:
        for cell in row:
            color = cell_color(cell)
            if color is None:
                continue
            overlay.fill(color, pygame.Rect(cell.x * cell_w, cell.y * cell_h, cell_w, cell_h))
    surface.blit(overlay, (0, 0))

    for ant in simulation.ants:
        pygame.draw.circle(
            surface, ant_color(ant), (int(ant.position.x), int(ant.position.y)), _ANT_RADIUS
        )

    home = simulation.home_position
    if home is not None:
        pygame.draw.circle(surface, HOME_COLOR, (int(home.x), int(home.y)), simulation.radius_home)

    for source in simulation.food_sources:
        center = (int(source.position.x), int(source.position.y))
        pygame.draw.circle(surface, FOOD_COLOR, center, source.radius)
        label = font.render(str(source.count_food), True, TEXT_COLOR)
        offset = source.radius // 2
        surface.blit(
            label, (int(source.position.x - offset), int(source.position.y - offset))
        )


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    parser = argparse.ArgumentParser(
        prog="antcolony", description="Watch an ant colony forage with pheromone trails."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, _FONT_SIZE)
        clock = pygame.time.Clock()

        simulation = Simulation(
            WIDTH, HEIGHT, Vec2(5, 5), 1000, 0.995, 0.1, 120.0, 30, 1, 20, 1000, 500
        )
        simulation.init()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            dt = clock.tick(TARGET_FPS) / 1000.0
            simulation.update(dt)
            render(screen, simulation, font)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0