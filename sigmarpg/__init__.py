"""A small tile-based 2D RPG: game states, grid movement and sprite animation."""

__version__ = "1.0.0"