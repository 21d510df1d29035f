from __future__ import annotations

from typing import Tuple

import pygame

from .config import MOTION_EPSILON


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def rocket_step(
    position: pygame.Vector2,
    target: pygame.Vector2,
    speed: float,
    progress: float,
    epsilon: float = MOTION_EPSILON,
) -> Tuple[pygame.Vector2, float]:
    """Advance a rocket by one frame.

    Each frame closes ``speed / 100`` of the remaining gap divided by the
    remaining progress, so the share of the gap covered per frame grows as
    progress nears 1. Returns the new position and progress.
    """
    progress += speed / 100
    denominator = 1 - progress + epsilon
    if denominator <= 0:
        return pygame.Vector2(target), progress
    fraction = (speed / 100) / denominator
    if fraction >= 1:
        # Would overshoot; the rocket is on its target this frame
        return pygame.Vector2(target), progress
    return position + (target - position) * fraction, progress


def interceptor_step(
    start: pygame.Vector2,
    target: pygame.Vector2,
    speed: float,
    progress: float,
) -> Tuple[pygame.Vector2, float]:
    """Advance an interceptor along the straight line from ``start`` to ``target``."""
    distance = start.distance_to(target)
    if distance == 0:
        progress = 1.0
    else:
        progress = min(1.0, progress + speed / distance)
    return start.lerp(target, progress), progress
