from __future__ import annotations

import random
from typing import Optional

import pygame
from loguru import logger

from .config import GameConfig
from .entities import EntityRegistry, Rocket


class Spawner:
    """Drops a new rocket each time the accumulated frame time passes the spawn interval.

    The interval shortens and rockets get faster as the score climbs.
    """

    def __init__(self, config: GameConfig, rng: random.Random) -> None:
        self.config = config
        self.rng = rng
        self.accumulator = 0.0

    def reset(self) -> None:
        self.accumulator = 0.0

    def interval_for(self, score: int) -> float:
        config = self.config
        reduction = (score / config.spawn_score_step) * config.spawn_interval_step_ms
        return max(config.spawn_interval_floor_ms, config.spawn_interval_ms - reduction)

    def speed_for(self, score: int) -> float:
        config = self.config
        jitter = self.rng.random() * config.rocket_speed_jitter
        return config.rocket_base_speed + jitter + score / config.rocket_speed_score_divisor

    def tick(self, delta_ms: float, score: int, registry: EntityRegistry) -> Optional[Rocket]:
        self.accumulator += delta_ms
        if self.accumulator <= self.interval_for(score):
            return None
        self.accumulator = 0.0

        targets = registry.alive_targets()
        if not targets:
            logger.debug("Spawn skipped: no surviving targets")
            return None
        target = self.rng.choice(targets)
        origin = pygame.Vector2(self.rng.random() * self.config.width, 0)
        rocket = registry.add_rocket(origin, target.position, self.speed_for(score))
        logger.debug(f"Rocket {rocket.id} launched at {target.id} (speed {rocket.speed:.2f})")
        return rocket
