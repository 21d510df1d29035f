"""Nova Defense: a frame-driven missile defense simulation.

The simulation core (config, motion, entities, spawner, engine) has no display
dependency beyond ``pygame.Vector2``; the pygame front end lives in
``novadefense.app`` and ``novadefense.render``.
"""

from loguru import logger

from .config import GameConfig
from .engine import GameSession, GameState
from .entities import ArenaSnapshot, City, EntityRegistry, Explosion, ExplosionPhase, Interceptor, Rocket, Tower

# Quiet when used as a library; the command-line entry point turns it back on
logger.disable("novadefense")

__all__ = [
    "ArenaSnapshot",
    "City",
    "EntityRegistry",
    "Explosion",
    "ExplosionPhase",
    "GameConfig",
    "GameSession",
    "GameState",
    "Interceptor",
    "Rocket",
    "Tower",
]
