"""Small ASCII terminal games: Flappy Dragon variants and a basic dungeon crawler."""

__version__ = "0.1.0"