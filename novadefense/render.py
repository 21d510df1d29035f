from __future__ import annotations

from typing import Tuple

import pygame

from .engine import GameState
from .entities import ArenaSnapshot, City, Explosion, ExplosionPhase, Interceptor, Rocket, Tower
from .strings import TOWER_LABELS, text

BACKGROUND_COLOR = (5, 5, 5)
GROUND_COLOR = (26, 26, 26)
CITY_COLOR = (16, 185, 129)
TOWER_COLOR = (59, 130, 246)
ROCKET_COLOR = (239, 68, 68)
INTERCEPTOR_COLOR = (255, 255, 255)
UI_TEXT_COLOR = (230, 230, 230)
UI_MUTED_COLOR = (120, 120, 120)
SUCCESS_TEXT_COLOR = (52, 211, 153)
WARNING_TEXT_COLOR = (248, 113, 113)

HUD_HEIGHT = 56
FOOTER_HEIGHT = 72
FONT_NAMES = "notosanscjksc,notosanscjk,microsoftyahei,simhei,wenquanyimicrohei,consolas"


def explosion_alpha(explosion: Explosion) -> int:
    # Full strength while growing, fading with the radius while shrinking
    if explosion.max_radius <= 0:
        return 0
    strength = 0.7 if explosion.phase is ExplosionPhase.EXPANDING else explosion.radius / explosion.max_radius * 0.7
    return max(0, min(255, int(255 * strength)))


class Renderer:
    """Draws a session snapshot plus HUD and overlays; never touches the session itself."""

    def __init__(self, arena_size: Tuple[int, int], scale: float = 1.0) -> None:
        self.arena_size = arena_size
        self.scale = scale
        self.arena = pygame.Surface(arena_size)
        self.font = pygame.font.SysFont(FONT_NAMES, int(16 * scale))
        self.small_font = pygame.font.SysFont(FONT_NAMES, int(11 * scale))
        self.big_font = pygame.font.SysFont(FONT_NAMES, int(30 * scale), bold=True)
        self.title_font = pygame.font.SysFont(FONT_NAMES, int(46 * scale), bold=True)

    @property
    def window_size(self) -> Tuple[int, int]:
        width, height = self.arena_size
        return int(width * self.scale), int((height + HUD_HEIGHT + FOOTER_HEIGHT) * self.scale)

    @property
    def arena_rect(self) -> pygame.Rect:
        width, height = self.arena_size
        return pygame.Rect(0, int(HUD_HEIGHT * self.scale), int(width * self.scale), int(height * self.scale))

    # ------------------------------------------------------------------
    # Arena
    # ------------------------------------------------------------------
    def draw_city(self, surface: pygame.Surface, city: City) -> None:
        if city.destroyed:
            return
        x, y = city.position
        pygame.draw.rect(surface, CITY_COLOR, pygame.Rect(x - 15, y - 15, 30, 15))
        pygame.draw.rect(surface, CITY_COLOR, pygame.Rect(x - 10, y - 25, 20, 10))

    def draw_tower(self, surface: pygame.Surface, tower: Tower) -> None:
        if tower.destroyed:
            return
        x, y = tower.position
        pygame.draw.polygon(surface, TOWER_COLOR, [(x - 20, y), (x + 20, y), (x, y - 30)])
        label = self.small_font.render(str(tower.ammo), True, UI_TEXT_COLOR)
        surface.blit(label, label.get_rect(center=(x, y + 15)))

    def draw_rocket(self, surface: pygame.Surface, rocket: Rocket) -> None:
        pygame.draw.line(surface, ROCKET_COLOR, rocket.origin, rocket.position)
        pygame.draw.circle(surface, ROCKET_COLOR, rocket.position, 2)

    def draw_interceptor(self, surface: pygame.Surface, interceptor: Interceptor) -> None:
        pygame.draw.line(surface, INTERCEPTOR_COLOR, interceptor.start, interceptor.position)
        tx, ty = interceptor.target
        pygame.draw.line(surface, INTERCEPTOR_COLOR, (tx - 5, ty - 5), (tx + 5, ty + 5))
        pygame.draw.line(surface, INTERCEPTOR_COLOR, (tx + 5, ty - 5), (tx - 5, ty + 5))

    def draw_explosion(self, surface: pygame.Surface, explosion: Explosion) -> None:
        radius = int(explosion.radius)
        if radius <= 0:
            return
        blast = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(blast, (255, 255, 255, explosion_alpha(explosion)), (radius, radius), radius)
        surface.blit(blast, blast.get_rect(center=explosion.center))

    def draw_arena(self, snapshot: ArenaSnapshot) -> pygame.Surface:
        surface = self.arena
        width, height = self.arena_size
        surface.fill(BACKGROUND_COLOR)
        pygame.draw.rect(surface, GROUND_COLOR, pygame.Rect(0, height - 20, width, 20))
        for city in snapshot.cities:
            self.draw_city(surface, city)
        for tower in snapshot.towers:
            self.draw_tower(surface, tower)
        for rocket in snapshot.rockets:
            self.draw_rocket(surface, rocket)
        for interceptor in snapshot.interceptors:
            self.draw_interceptor(surface, interceptor)
        for explosion in snapshot.explosions:
            self.draw_explosion(surface, explosion)
        return surface

    # ------------------------------------------------------------------
    # Chrome
    # ------------------------------------------------------------------
    def draw_hud(self, screen: pygame.Surface, score: int, win_score: int, language: str) -> None:
        margin = int(12 * self.scale)
        label = self.small_font.render(text(language, "score").upper(), True, UI_MUTED_COLOR)
        value = self.font.render(f"{score:04d}", True, SUCCESS_TEXT_COLOR)
        screen.blit(label, (margin, margin))
        screen.blit(value, (margin, margin + label.get_height()))

        offset = margin + max(label.get_width(), value.get_width()) + 3 * margin
        label = self.small_font.render(text(language, "win_score").upper(), True, UI_MUTED_COLOR)
        value = self.font.render(str(win_score), True, UI_TEXT_COLOR)
        screen.blit(label, (offset, margin))
        screen.blit(value, (offset, margin + label.get_height()))

        title = self.font.render(text(language, "title"), True, UI_TEXT_COLOR)
        screen.blit(title, title.get_rect(topright=(screen.get_width() - margin, margin)))

    def draw_footer(self, screen: pygame.Surface, towers: Tuple[Tower, ...], language: str) -> None:
        top = self.arena_rect.bottom + int(16 * self.scale)
        column_width = screen.get_width() // max(1, len(towers))
        bar_height = max(2, int(4 * self.scale))
        for index, tower in enumerate(towers):
            left = index * column_width + int(16 * self.scale)
            bar_width = column_width - int(32 * self.scale)
            fill = int(bar_width * tower.ammo / tower.max_ammo) if tower.max_ammo else 0
            color = SUCCESS_TEXT_COLOR if index == len(towers) // 2 else TOWER_COLOR
            pygame.draw.rect(screen, (30, 30, 30), pygame.Rect(left, top, bar_width, bar_height))
            pygame.draw.rect(screen, color, pygame.Rect(left, top, fill, bar_height))
            name = TOWER_LABELS[index] if index < len(TOWER_LABELS) else tower.id
            caption = self.small_font.render(
                f"{name} {text(language, 'ammo')}: {tower.ammo}/{tower.max_ammo}", True, color
            )
            screen.blit(caption, (left, top + bar_height + int(6 * self.scale)))

    def draw_overlay(self, screen: pygame.Surface, state: GameState, score: int, language: str) -> None:
        if state is GameState.PLAYING:
            return
        rect = self.arena_rect
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 200))
        screen.blit(overlay, rect.topleft)

        if state is GameState.START:
            lines = [
                (self.title_font, text(language, "title"), UI_TEXT_COLOR),
                (self.font, text(language, "instructions"), UI_MUTED_COLOR),
                (self.font, text(language, "prompt"), SUCCESS_TEXT_COLOR),
            ]
        else:
            won = state is GameState.WON
            lines = [
                (self.big_font, text(language, "win" if won else "lose"), SUCCESS_TEXT_COLOR if won else WARNING_TEXT_COLOR),
                (self.small_font, text(language, "score").upper(), UI_MUTED_COLOR),
                (self.big_font, str(score), UI_TEXT_COLOR),
                (self.font, text(language, "restart"), UI_TEXT_COLOR),
            ]

        spacing = int(14 * self.scale)
        total_height = sum(font.size(line)[1] for font, line, _ in lines) + spacing * (len(lines) - 1)
        current_y = rect.centery - total_height // 2
        for font, line, color in lines:
            rendered = font.render(line, True, color)
            screen.blit(rendered, rendered.get_rect(midtop=(rect.centerx, current_y)))
            current_y += rendered.get_height() + spacing

    def draw(
        self,
        screen: pygame.Surface,
        snapshot: ArenaSnapshot,
        score: int,
        win_score: int,
        state: GameState,
        language: str,
    ) -> None:
        screen.fill((0, 0, 0))
        arena = self.draw_arena(snapshot)
        rect = self.arena_rect
        if rect.size != arena.get_size():
            arena = pygame.transform.smoothscale(arena, rect.size)
        screen.blit(arena, rect.topleft)
        self.draw_hud(screen, score, win_score, language)
        self.draw_footer(screen, snapshot.towers, language)
        self.draw_overlay(screen, state, score, language)
        pygame.display.flip()
