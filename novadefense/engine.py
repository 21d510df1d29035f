"""Per-frame simulation for Nova Defense.

A :class:`GameSession` owns everything that changes during a game: the entity
registry, the spawner, the score and the game state. The host calls
:meth:`GameSession.update` once per frame with the milliseconds since the
previous frame and :meth:`GameSession.fire_interceptor` whenever the player
clicks. Both run to completion before returning, so the renderer only ever
sees whole frames through :meth:`GameSession.snapshot`.

Frame order:

1. spawn (the spawner may add one rocket),
2. rockets move; a rocket reaching its target's height detonates there and
   flattens any city or tower on the impact point,
3. interceptors move; one at full progress detonates at its aim point,
4. explosions grow or shrink; rockets inside a blast are destroyed and scored,
5. win/loss check, win first.

Gameplay never raises. Firing with nothing able to shoot, or calling into a
session that is not playing, simply does nothing.
"""

from __future__ import annotations

import math
import random
from enum import Enum
from typing import Any, Dict, List, Optional

import pygame
from loguru import logger

from .config import GameConfig
from .entities import ArenaSnapshot, EntityRegistry, Interceptor, Tower
from .spawner import Spawner

Event = Dict[str, Any]


class GameState(Enum):
    START = "start"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameSession:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.config.validate()
        self.rng = rng if rng is not None else random.Random(seed)
        self.registry = EntityRegistry(self.config)
        self.spawner = Spawner(self.config, self.rng)
        self._score = 0
        self._state = GameState.START

    @property
    def score(self) -> int:
        return self._score

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def playing(self) -> bool:
        return self._state is GameState.PLAYING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Start a fresh game from START, WON or LOST; ignored while playing."""
        if self.playing:
            logger.debug("Reset ignored: a game is already running")
            return
        self.registry.reset()
        self.spawner.reset()
        self._score = 0
        previous = self._state
        self._state = GameState.PLAYING
        logger.info(f"Game reset ({previous.value} -> {self._state.value})")

    start = reset

    def snapshot(self) -> ArenaSnapshot:
        return self.registry.snapshot()

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def select_tower(self, x: float, y: float) -> Optional[Tower]:
        aim = pygame.Vector2(x, y)
        best_tower: Optional[Tower] = None
        best_distance = math.inf
        for tower in self.registry.towers:
            if not tower.can_fire:
                continue
            distance = tower.position.distance_to(aim)
            # Strict comparison keeps the first registered tower on ties
            if distance < best_distance:
                best_tower = tower
                best_distance = distance
        return best_tower

    def fire_interceptor(self, x: float, y: float) -> Optional[Interceptor]:
        if not self.playing:
            return None
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        tower = self.select_tower(x, y)
        if tower is None:
            logger.debug(f"Fire request at ({x:.0f}, {y:.0f}) dropped: no tower can fire")
            return None
        tower.ammo -= 1
        interceptor = self.registry.add_interceptor(tower.position, pygame.Vector2(x, y), self.config.interceptor_speed)
        logger.debug(f"{tower.id} fired {interceptor.id} at ({x:.0f}, {y:.0f}); {tower.ammo} left")
        return interceptor

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------
    def _clamp_delta(self, delta_ms: float) -> float:
        if not math.isfinite(delta_ms) or delta_ms < 0:
            return 0.0
        return min(delta_ms, self.config.max_frame_delta_ms)

    def update(self, delta_ms: float) -> List[Event]:
        if not self.playing:
            return []
        events: List[Event] = []
        delta_ms = self._clamp_delta(delta_ms)

        rocket = self.spawner.tick(delta_ms, self._score, self.registry)
        if rocket is not None:
            events.append({"type": "rocket_spawned", "id": rocket.id, "target": tuple(rocket.target)})

        self._update_rockets(events)
        self._update_interceptors(events)
        self._update_explosions(events)
        self._check_terminal(events)
        return events

    def _update_rockets(self, events: List[Event]) -> None:
        registry = self.registry
        config = self.config
        survivors = []
        for rocket in registry.rockets:
            rocket.advance()
            if not rocket.arrived:
                survivors.append(rocket)
                continue
            explosion = registry.add_explosion(rocket.target, config.rocket_blast_radius, config.rocket_blast_growth)
            destroyed = []
            for structure in registry.structures_near(rocket.target, config.impact_half_width):
                if not structure.destroyed:
                    structure.destroyed = True
                    destroyed.append(structure.id)
            if destroyed:
                logger.info(f"{rocket.id} hit {', '.join(destroyed)}")
            events.append(
                {
                    "type": "impact",
                    "rocket_id": rocket.id,
                    "explosion_id": explosion.id,
                    "position": tuple(rocket.target),
                    "destroyed": destroyed,
                }
            )
        registry.rockets = survivors

    def _update_interceptors(self, events: List[Event]) -> None:
        registry = self.registry
        config = self.config
        survivors = []
        for interceptor in registry.interceptors:
            interceptor.advance()
            if not interceptor.arrived:
                survivors.append(interceptor)
                continue
            explosion = registry.add_explosion(
                interceptor.target, config.interceptor_blast_radius, config.interceptor_blast_growth
            )
            events.append(
                {
                    "type": "detonation",
                    "interceptor_id": interceptor.id,
                    "explosion_id": explosion.id,
                    "position": tuple(interceptor.target),
                }
            )
        registry.interceptors = survivors

    def _update_explosions(self, events: List[Event]) -> None:
        registry = self.registry
        survivors = []
        for explosion in registry.explosions:
            if explosion.step():
                continue
            survivors.append(explosion)
            remaining = []
            for rocket in registry.rockets:
                if explosion.contains(rocket.position):
                    self._score += self.config.points_per_kill
                    logger.debug(f"{rocket.id} destroyed by {explosion.id}; score {self._score}")
                    events.append(
                        {
                            "type": "rocket_destroyed",
                            "rocket_id": rocket.id,
                            "explosion_id": explosion.id,
                            "points": self.config.points_per_kill,
                        }
                    )
                else:
                    remaining.append(rocket)
            registry.rockets = remaining
        registry.explosions = survivors

    def _check_terminal(self, events: List[Event]) -> None:
        # A win reached on the same frame the last tower falls still counts as a win
        if self._score >= self.config.win_score:
            self._transition(GameState.WON, events)
        elif self.registry.all_towers_destroyed:
            self._transition(GameState.LOST, events)

    def _transition(self, new_state: GameState, events: List[Event]) -> None:
        old_state = self._state
        self._state = new_state
        logger.info(f"Game state {old_state.value} -> {new_state.value} at score {self._score}")
        events.append({"type": "state_changed", "old": old_state, "new": new_state, "score": self._score})
