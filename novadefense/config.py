"""Arena constants and tunables for Nova Defense."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Logical arena; the front end scales this to the window
GAME_WIDTH = 800
GAME_HEIGHT = 600

WIN_SCORE = 1000
POINTS_PER_KILL = 20

TOWER_X_POSITIONS = (50, GAME_WIDTH // 2, GAME_WIDTH - 50)
TOWER_AMMO = (40, 80, 40)
TOWER_Y = GAME_HEIGHT - 40

CITY_X_POSITIONS = (150, 250, 350, 450, 550, 650)
CITY_Y = GAME_HEIGHT - 30

ROCKET_BLAST_RADIUS = 40.0
ROCKET_BLAST_GROWTH = 2.0
INTERCEPTOR_BLAST_RADIUS = 50.0
INTERCEPTOR_BLAST_GROWTH = 1.5
CONTRACTION_FACTOR = 0.5

IMPACT_HALF_WIDTH = 10.0
INTERCEPTOR_SPEED = 10.0
MOTION_EPSILON = 0.01

SPAWN_INTERVAL_MS = 2000.0
SPAWN_INTERVAL_FLOOR_MS = 500.0
# Interval shrinks by SPAWN_INTERVAL_STEP_MS for every SPAWN_SCORE_STEP points
SPAWN_INTERVAL_STEP_MS = 100.0
SPAWN_SCORE_STEP = 100.0

ROCKET_BASE_SPEED = 0.5
ROCKET_SPEED_JITTER = 0.5
ROCKET_SPEED_SCORE_DIVISOR = 2000.0

MAX_FRAME_DELTA_MS = 1000.0


@dataclass(frozen=True)
class GameConfig:
    """Tunables for a single game session.

    Defaults reproduce the arcade rules; tests shrink or stretch individual
    values (a tiny ``win_score``, a long spawn interval) to isolate one rule.
    """

    width: int = GAME_WIDTH
    height: int = GAME_HEIGHT
    win_score: int = WIN_SCORE
    points_per_kill: int = POINTS_PER_KILL
    tower_positions: Tuple[Tuple[float, float], ...] = tuple((x, TOWER_Y) for x in TOWER_X_POSITIONS)
    tower_ammo: Tuple[int, ...] = TOWER_AMMO
    city_positions: Tuple[Tuple[float, float], ...] = tuple((x, CITY_Y) for x in CITY_X_POSITIONS)
    rocket_blast_radius: float = ROCKET_BLAST_RADIUS
    rocket_blast_growth: float = ROCKET_BLAST_GROWTH
    interceptor_blast_radius: float = INTERCEPTOR_BLAST_RADIUS
    interceptor_blast_growth: float = INTERCEPTOR_BLAST_GROWTH
    contraction_factor: float = CONTRACTION_FACTOR
    impact_half_width: float = IMPACT_HALF_WIDTH
    interceptor_speed: float = INTERCEPTOR_SPEED
    spawn_interval_ms: float = SPAWN_INTERVAL_MS
    spawn_interval_floor_ms: float = SPAWN_INTERVAL_FLOOR_MS
    spawn_interval_step_ms: float = SPAWN_INTERVAL_STEP_MS
    spawn_score_step: float = SPAWN_SCORE_STEP
    rocket_base_speed: float = ROCKET_BASE_SPEED
    rocket_speed_jitter: float = ROCKET_SPEED_JITTER
    rocket_speed_score_divisor: float = ROCKET_SPEED_SCORE_DIVISOR
    max_frame_delta_ms: float = MAX_FRAME_DELTA_MS

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Arena dimensions must be positive")
        if self.win_score <= 0:
            raise ValueError("Win score must be positive")
        if self.points_per_kill <= 0:
            raise ValueError("Points per kill must be positive")
        if len(self.tower_positions) != len(self.tower_ammo):
            raise ValueError("Every tower needs an ammo allotment")
        if not self.tower_positions:
            raise ValueError("At least one tower is required")
        if any(ammo < 0 for ammo in self.tower_ammo):
            raise ValueError("Tower ammo cannot be negative")
        if self.rocket_blast_radius <= 0 or self.interceptor_blast_radius <= 0:
            raise ValueError("Blast radii must be positive")
        if self.rocket_blast_growth <= 0 or self.interceptor_blast_growth <= 0:
            raise ValueError("Blast growth rates must be positive")
        if self.contraction_factor <= 0:
            raise ValueError("Contraction factor must be positive")
        if self.interceptor_speed <= 0:
            raise ValueError("Interceptor speed must be positive")
        if self.spawn_interval_floor_ms <= 0 or self.spawn_interval_floor_ms > self.spawn_interval_ms:
            raise ValueError("Spawn floor must be positive and no larger than the base interval")
        if self.spawn_score_step <= 0 or self.rocket_speed_score_divisor <= 0:
            raise ValueError("Score scaling steps must be positive")
        if self.max_frame_delta_ms <= 0:
            raise ValueError("Frame delta cap must be positive")
