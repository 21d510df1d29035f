from __future__ import annotations

import copy
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple, Union

import pygame

from .config import GameConfig
from .motion import clamp, interceptor_step, rocket_step


@dataclass
class Rocket:
    id: str
    origin: pygame.Vector2
    position: pygame.Vector2
    target: pygame.Vector2
    speed: float
    progress: float = 0.0

    def advance(self) -> None:
        self.position, self.progress = rocket_step(self.position, self.target, self.speed, self.progress)

    @property
    def arrived(self) -> bool:
        return self.position.y >= self.target.y


@dataclass
class Interceptor:
    id: str
    start: pygame.Vector2
    position: pygame.Vector2
    target: pygame.Vector2
    speed: float
    progress: float = 0.0

    def advance(self) -> None:
        self.position, self.progress = interceptor_step(self.start, self.target, self.speed, self.progress)

    @property
    def arrived(self) -> bool:
        return self.progress >= 1


class ExplosionPhase(Enum):
    EXPANDING = "expanding"
    CONTRACTING = "contracting"


@dataclass
class Explosion:
    id: str
    center: pygame.Vector2
    max_radius: float
    growth_rate: float
    contraction_factor: float = 0.5
    radius: float = 0.0
    phase: ExplosionPhase = ExplosionPhase.EXPANDING

    def step(self) -> bool:
        """Grow or shrink by one frame. Returns True once the blast has collapsed."""
        if self.phase is ExplosionPhase.EXPANDING:
            self.radius = clamp(self.radius + self.growth_rate, 0.0, self.max_radius)
            if self.radius >= self.max_radius:
                self.phase = ExplosionPhase.CONTRACTING
            return False
        self.radius = clamp(self.radius - self.growth_rate * self.contraction_factor, 0.0, self.max_radius)
        return self.radius <= 0

    def contains(self, point: pygame.Vector2) -> bool:
        return self.center.distance_to(point) < self.radius


@dataclass
class City:
    id: str
    position: pygame.Vector2
    destroyed: bool = False


@dataclass
class Tower:
    id: str
    position: pygame.Vector2
    ammo: int
    max_ammo: int
    destroyed: bool = False

    @property
    def can_fire(self) -> bool:
        return not self.destroyed and self.ammo > 0


Structure = Union[City, Tower]


@dataclass(frozen=True)
class ArenaSnapshot:
    """Read-only copy of the registry handed to the renderer each frame."""

    rockets: Tuple[Rocket, ...]
    interceptors: Tuple[Interceptor, ...]
    explosions: Tuple[Explosion, ...]
    towers: Tuple[Tower, ...]
    cities: Tuple[City, ...]


@dataclass
class EntityRegistry:
    config: GameConfig = field(default_factory=GameConfig)
    rockets: List[Rocket] = field(init=False, default_factory=list)
    interceptors: List[Interceptor] = field(init=False, default_factory=list)
    explosions: List[Explosion] = field(init=False, default_factory=list)
    towers: List[Tower] = field(init=False, default_factory=list)
    cities: List[City] = field(init=False, default_factory=list)
    _counters: Dict[str, Iterator[int]] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.rockets = []
        self.interceptors = []
        self.explosions = []
        self._counters = {}
        self.towers = [
            Tower(self.next_id("tower"), pygame.Vector2(position), ammo, ammo)
            for position, ammo in zip(self.config.tower_positions, self.config.tower_ammo)
        ]
        self.cities = [City(self.next_id("city"), pygame.Vector2(position)) for position in self.config.city_positions]

    def next_id(self, kind: str) -> str:
        counter = self._counters.setdefault(kind, itertools.count())
        return f"{kind}-{next(counter)}"

    def alive_targets(self) -> List[Structure]:
        targets: List[Structure] = [city for city in self.cities if not city.destroyed]
        targets.extend(tower for tower in self.towers if not tower.destroyed)
        return targets

    def structures_near(self, point: pygame.Vector2, half_width: float) -> List[Structure]:
        structures: Sequence[Structure] = [*self.cities, *self.towers]
        return [
            structure
            for structure in structures
            if abs(structure.position.x - point.x) < half_width and abs(structure.position.y - point.y) < half_width
        ]

    def add_rocket(self, origin: pygame.Vector2, target: pygame.Vector2, speed: float) -> Rocket:
        rocket = Rocket(
            id=self.next_id("rocket"),
            origin=pygame.Vector2(origin),
            position=pygame.Vector2(origin),
            target=pygame.Vector2(target),
            speed=speed,
        )
        self.rockets.append(rocket)
        return rocket

    def add_interceptor(self, start: pygame.Vector2, target: pygame.Vector2, speed: float) -> Interceptor:
        interceptor = Interceptor(
            id=self.next_id("interceptor"),
            start=pygame.Vector2(start),
            position=pygame.Vector2(start),
            target=pygame.Vector2(target),
            speed=speed,
        )
        self.interceptors.append(interceptor)
        return interceptor

    def add_explosion(self, center: pygame.Vector2, max_radius: float, growth_rate: float) -> Explosion:
        explosion = Explosion(
            id=self.next_id("explosion"),
            center=pygame.Vector2(center),
            max_radius=max_radius,
            growth_rate=growth_rate,
            contraction_factor=self.config.contraction_factor,
        )
        self.explosions.append(explosion)
        return explosion

    @property
    def all_towers_destroyed(self) -> bool:
        return all(tower.destroyed for tower in self.towers)

    def snapshot(self) -> ArenaSnapshot:
        return ArenaSnapshot(
            rockets=tuple(copy.deepcopy(self.rockets)),
            interceptors=tuple(copy.deepcopy(self.interceptors)),
            explosions=tuple(copy.deepcopy(self.explosions)),
            towers=tuple(copy.deepcopy(self.towers)),
            cities=tuple(copy.deepcopy(self.cities)),
        )
