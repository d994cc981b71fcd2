"""Ant colony foraging simulation with evaporating pheromone trails and a pygame view."""

__version__ = "0.1.0"
__all__ = ["geometry", "entities", "simulation", "app"]