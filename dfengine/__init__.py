"""A small text-mode 2-D game engine: geometry, events, managers, sprites and game objects."""

__version__ = "0.1.0"