"""Headless game logic for a path-based tower defense game."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "bullets",
    "enemies",
    "enemy_manager",
    "towers",
    "gameplay",
    "maps",
    "session",
]