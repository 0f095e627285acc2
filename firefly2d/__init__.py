"""Core pieces of a small 2D game engine: geometry, shared variables, workers, physics, GUI widgets, scenes, input and lights."""

__version__ = "0.1.0"