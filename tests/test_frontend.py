"""Pure helpers of the pygame front end: input mapping, CLI, tones and text."""

from __future__ import annotations

import pygame
import pytest

from novadefense.app import parse_args, to_arena
from novadefense.audio import CUES, SoundBoard, build_tone_buffer
from novadefense.engine import GameState
from novadefense.strings import STRINGS, text, toggle_language


def test_window_click_maps_to_arena() -> None:
    rect = pygame.Rect(0, 56, 800, 600)
    assert to_arena((400, 356), rect, (800, 600)) == pytest.approx((400, 300))


def test_scaled_window_click_maps_to_arena() -> None:
    rect = pygame.Rect(0, 84, 1200, 900)
    x, y = to_arena((600, 534), rect, (800, 600))
    assert x == pytest.approx(400)
    assert y == pytest.approx(300)


def test_click_outside_arena_is_ignored() -> None:
    rect = pygame.Rect(0, 56, 800, 600)
    assert to_arena((400, 10), rect, (800, 600)) is None
    assert to_arena((400, 700), rect, (800, 600)) is None


def test_cli_defaults() -> None:
    args = parse_args([])
    assert args.seed is None
    assert args.lang == "zh"
    assert args.scale == 1.0
    assert args.mute is False


def test_cli_options() -> None:
    args = parse_args(["--seed", "3", "--lang", "en", "--scale", "1.5", "--mute", "--log-level", "debug"])
    assert (args.seed, args.lang, args.scale, args.mute, args.log_level) == (3, "en", 1.5, True, "debug")


def test_cli_rejects_bad_scale() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--scale", "0"])


def test_tone_buffer_length_and_range() -> None:
    buffer = build_tone_buffer(((440, 0.1, 0.5, False), (0, 0.05, 1.0, False)), sample_rate=8000)
    assert len(buffer) == 800 + 400
    assert buffer[800:] == bytes([128] * 400)
    assert min(buffer[:800]) == 128 - 63
    assert max(buffer[:800]) == 128 + 63


def test_faded_tone_settles_toward_midpoint() -> None:
    buffer = build_tone_buffer(((1000, 0.1, 1.0, True),), sample_rate=8000)
    assert abs(buffer[0] - 128) == 127
    assert abs(buffer[-1] - 128) <= 2


def test_every_state_change_has_a_cue() -> None:
    for state in (GameState.WON, GameState.LOST):
        assert state.value in CUES


def test_muted_soundboard_ignores_events() -> None:
    board = SoundBoard(enabled=False)
    board.play("launch")
    board.play_events([{"type": "impact"}, {"type": "state_changed", "new": GameState.WON}])
    assert board.sounds == {}


def test_events_map_to_cues(monkeypatch: pytest.MonkeyPatch) -> None:
    board = SoundBoard(enabled=False)
    played = []
    monkeypatch.setattr(board, "play", played.append)
    board.play_events(
        [
            {"type": "rocket_spawned"},
            {"type": "detonation"},
            {"type": "rocket_destroyed", "points": 20},
            {"type": "rocket_destroyed", "points": 20},
            {"type": "impact"},
            {"type": "state_changed", "new": GameState.LOST},
        ]
    )
    assert played == ["detonation", "kill", "kill", "impact", "lost"]
    assert set(played) <= set(CUES)


def test_languages_share_keys() -> None:
    keys = {language: set(table) for language, table in STRINGS.items()}
    assert keys["zh"] == keys["en"]


def test_language_toggle_and_fallback() -> None:
    assert toggle_language("zh") == "en"
    assert toggle_language("en") == "zh"
    assert text("en", "win") == "Defense Successful!"
    assert text("fr", "title") == STRINGS["zh"]["title"]
