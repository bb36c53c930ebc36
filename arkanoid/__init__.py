"""Arkanoid: a single-ball brick breaker simulation with a gymnasium front end."""

__version__ = "0.1.0"

from arkanoid.config import ConfigError, GameConfig
from arkanoid.engine import ArkanoidEngine, WorldSnapshot
from arkanoid.state import GameStatus

__all__ = [
    "ArkanoidEngine",
    "ConfigError",
    "GameConfig",
    "GameStatus",
    "WorldSnapshot",
]
