"""Rocket and interceptor motion."""

from __future__ import annotations

import pygame
import pytest

from novadefense.motion import interceptor_step, rocket_step


def test_rocket_progress_advances_by_speed_over_100() -> None:
    position, progress = rocket_step(pygame.Vector2(0, 0), pygame.Vector2(0, 100), 1.0, 0.0)
    assert progress == pytest.approx(0.01)
    assert position.y == pytest.approx(1.0)
    assert position.x == pytest.approx(0.0)


def test_rocket_follows_straight_line_and_lands() -> None:
    origin = pygame.Vector2(0, 0)
    target = pygame.Vector2(200, 500)
    position = pygame.Vector2(origin)
    progress = 0.0
    frames = 0
    while position.y < target.y and frames < 200:
        position, progress = rocket_step(position, target, 1.0, progress)
        frames += 1
        # Stays on the origin-target line
        assert position.x * 500 == pytest.approx(position.y * 200, abs=1e-6)
    assert frames in (100, 101)
    assert position.x == pytest.approx(200)
    assert position.y == pytest.approx(500)


def test_rocket_closes_growing_share_of_remaining_gap() -> None:
    target = pygame.Vector2(0, 600)
    position = pygame.Vector2(0, 0)
    progress = 0.0
    shares = []
    for _ in range(50):
        new_position, progress = rocket_step(position, target, 1.0, progress)
        shares.append((new_position.y - position.y) / (target.y - position.y))
        position = new_position
    assert all(later > earlier for earlier, later in zip(shares, shares[1:]))


def test_rocket_lands_on_target_instead_of_overshooting() -> None:
    target = pygame.Vector2(150, 570)
    position, progress = rocket_step(pygame.Vector2(140, 500), target, 1.0, 0.995)
    assert position == target
    assert progress == pytest.approx(1.005)


def test_rocket_past_full_progress_stays_finite() -> None:
    target = pygame.Vector2(300, 560)
    position, progress = rocket_step(pygame.Vector2(300, 100), target, 0.8, 1.5)
    assert position == target
    assert progress > 1.5


def test_interceptor_moves_linearly() -> None:
    start = pygame.Vector2(400, 560)
    target = pygame.Vector2(400, 360)
    position, progress = interceptor_step(start, target, 10.0, 0.0)
    assert progress == pytest.approx(0.05)
    assert position.x == pytest.approx(400)
    assert position.y == pytest.approx(550)

    position, progress = interceptor_step(start, target, 10.0, progress)
    assert progress == pytest.approx(0.1)
    assert position.y == pytest.approx(540)


def test_interceptor_progress_caps_at_one() -> None:
    start = pygame.Vector2(0, 0)
    target = pygame.Vector2(3, 4)
    position, progress = interceptor_step(start, target, 10.0, 0.0)
    assert progress == 1.0
    assert position == target


def test_zero_distance_interceptor_arrives_immediately() -> None:
    point = pygame.Vector2(50, 560)
    position, progress = interceptor_step(point, pygame.Vector2(point), 10.0, 0.0)
    assert progress == 1.0
    assert position == point
