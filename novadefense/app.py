from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

import pygame
from loguru import logger

from .audio import SoundBoard
from .engine import GameSession, GameState
from .render import Renderer
from .strings import DEFAULT_LANGUAGE, STRINGS, text, toggle_language

FPS = 60

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


def to_arena(
    window_pos: Tuple[float, float],
    arena_rect: pygame.Rect,
    arena_size: Tuple[int, int],
) -> Optional[Tuple[float, float]]:
    """Map a window pixel to logical arena coordinates, or None outside the arena."""
    if arena_rect.width <= 0 or arena_rect.height <= 0:
        return None
    x, y = window_pos
    if not arena_rect.collidepoint(x, y):
        return None
    scale_x = arena_size[0] / arena_rect.width
    scale_y = arena_size[1] / arena_rect.height
    return (x - arena_rect.left) * scale_x, (y - arena_rect.top) * scale_y


class NovaDefenseApp:
    def __init__(
        self,
        session: GameSession,
        language: str = DEFAULT_LANGUAGE,
        scale: float = 1.0,
        fps: int = FPS,
        audio: bool = True,
    ) -> None:
        pygame.init()
        self.session = session
        self.language = language
        self.fps = fps
        arena_size = (session.config.width, session.config.height)
        self.renderer = Renderer(arena_size, scale)
        self.screen = pygame.display.set_mode(self.renderer.window_size)
        self.clock = pygame.time.Clock()
        self.sounds = SoundBoard(enabled=audio)
        self.running = True
        self._update_caption()

    def _update_caption(self) -> None:
        pygame.display.set_caption(text(self.language, "title"))

    def start_game(self) -> None:
        if self.session.state is GameState.PLAYING:
            return
        self.session.reset()
        self.sounds.play("start")

    def fire_at(self, window_pos: Tuple[float, float]) -> None:
        if self.session.state is not GameState.PLAYING:
            return
        point = to_arena(window_pos, self.renderer.arena_rect, self.renderer.arena_size)
        if point is None:
            return
        if self.session.fire_interceptor(*point) is not None:
            self.sounds.play("launch")

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in START_KEYS:
                self.start_game()
            elif event.key == pygame.K_l:
                self.language = toggle_language(self.language)
                self._update_caption()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.fire_at(event.pos)
        elif event.type == pygame.FINGERDOWN:
            width, height = self.screen.get_size()
            self.fire_at((event.x * width, event.y * height))

    def handle_input(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def step(self, delta_ms: float) -> List[dict]:
        events = self.session.update(delta_ms)
        self.sounds.play_events(events)
        return events

    def draw(self) -> None:
        session = self.session
        self.renderer.draw(
            self.screen,
            session.snapshot(),
            session.score,
            session.config.win_score,
            session.state,
            self.language,
        )

    def run(self) -> None:
        self.clock.tick(self.fps)
        delta_ms = 0.0
        while self.running:
            self.handle_input()
            self.step(delta_ms)
            self.draw()
            delta_ms = float(self.clock.tick(self.fps))
        pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Nova Defense: intercept falling rockets before they level the grid.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for rocket spawns (default: random)")
    parser.add_argument("--lang", choices=sorted(STRINGS), default=DEFAULT_LANGUAGE, help="Interface language")
    parser.add_argument("--scale", type=float, default=1.0, help="Window scale relative to the 800x600 arena")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--log-level", default="WARNING", help="Log level for stderr output")
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logger.enable("novadefense")
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    logger.info(f"Starting Nova Defense (seed={args.seed}, lang={args.lang})")
    session = GameSession(seed=args.seed)
    app = NovaDefenseApp(session, language=args.lang, scale=args.scale, fps=args.fps, audio=not args.mute)
    app.run()
