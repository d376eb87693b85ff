"""A small first-person aim trainer: game logic, pygame drawing and the main loop."""

__version__ = "0.1.0"