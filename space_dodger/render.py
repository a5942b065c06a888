"""Drawing of the playfield, HUD and overlays. Reads entity snapshots only."""

from __future__ import annotations

import pygame

from .config import (
    ACCENT_GAME_OVER,
    ACCENT_LEVEL,
    ACCENT_RECORD,
    ACCENT_SCORE,
    COL_BG_BOTTOM,
    COL_BG_TOP,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    GLOW_RADIUS,
    METEOR_COLOR,
    METEOR_GLOW,
    OVERLAY_COLOR,
    SHIP_COLOR,
    SHIP_DETAIL,
    STAR_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)
from .entities import EntitySnapshot, Rect
from .session import SessionState
from .utils import vertical_gradient, with_alpha


class Renderer:
    """Composes one frame onto a FIELD_WIDTH x FIELD_HEIGHT surface."""

    def __init__(self) -> None:
        self.font_big = pygame.font.SysFont(None, 64)
        self.font_mid = pygame.font.SysFont(None, 40)
        self.font_small = pygame.font.SysFont(None, 26)
        # Precompute gradient background
        self.bg_gradient = pygame.surfarray.make_surface(
            vertical_gradient(FIELD_WIDTH, FIELD_HEIGHT, COL_BG_TOP, COL_BG_BOTTOM)
        )
        self.overlay = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)
        self.overlay.fill(OVERLAY_COLOR)
        self._star_layer = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT), pygame.SRCALPHA)

    def draw(
        self,
        surf: pygame.Surface,
        snap: EntitySnapshot,
        state: SessionState,
        score: int,
        high_score: int,
        level: int,
    ) -> None:
        surf.blit(self.bg_gradient, (0, 0))
        self._draw_stars(surf, snap)
        if state is SessionState.PLAYING:
            self._draw_ship(surf, snap.player)
            for meteor in snap.obstacles:
                self._draw_meteor(surf, meteor)
            self._draw_hud(surf, score, high_score, level)
        else:
            surf.blit(self.overlay, (0, 0))
            self._draw_menu(surf, state, score, high_score)

    def _draw_stars(self, surf: pygame.Surface, snap: EntitySnapshot) -> None:
        layer = self._star_layer
        layer.fill((0, 0, 0, 0))
        for p in snap.particles:
            rect = pygame.Rect(int(p.x), int(p.y), max(1, int(p.size)), max(1, int(p.size)))
            layer.fill(with_alpha(STAR_COLOR, p.opacity), rect)
        surf.blit(layer, (0, 0))

    def _draw_ship(self, surf: pygame.Surface, player: Rect) -> None:
        x, y = int(player.x), int(player.y)
        pygame.draw.rect(surf, SHIP_COLOR, (x, y, int(player.width), int(player.height)))
        # Wing struts and fuselage
        pygame.draw.rect(surf, SHIP_DETAIL, (x + 5, y + 10, 5, 20))
        pygame.draw.rect(surf, SHIP_DETAIL, (x + 30, y + 10, 5, 20))
        pygame.draw.rect(surf, SHIP_DETAIL, (x + 15, y + 5, 10, 30))

    def _draw_meteor(self, surf: pygame.Surface, meteor: Rect) -> None:
        w, h = int(meteor.width), int(meteor.height)
        g = GLOW_RADIUS
        glow = pygame.Surface((w + 2 * g, h + 2 * g), pygame.SRCALPHA)
        pygame.draw.rect(glow, METEOR_GLOW, glow.get_rect(), border_radius=g)
        surf.blit(glow, (int(meteor.x) - g, int(meteor.y) - g))
        pygame.draw.rect(surf, METEOR_COLOR, (int(meteor.x), int(meteor.y), w, h))

    def _draw_hud(self, surf: pygame.Surface, score: int, high_score: int, level: int) -> None:
        items = (
            ("Score", score, ACCENT_SCORE),
            ("Record", high_score, ACCENT_RECORD),
            ("Level", level, ACCENT_LEVEL),
        )
        x = 16
        for label, value, color in items:
            text = self.font_small.render(f"{label}: {value}", True, color)
            surf.blit(text, (x, 12))
            x += text.get_width() + 24

    def _draw_menu(self, surf: pygame.Surface, state: SessionState, score: int, high_score: int) -> None:
        cx, cy = FIELD_WIDTH // 2, FIELD_HEIGHT // 2
        if state is SessionState.GAME_OVER:
            lines = [
                (self.font_big, "GAME OVER", ACCENT_GAME_OVER),
                (self.font_mid, f"Final score: {score}", ACCENT_SCORE),
                (self.font_small, f"Record: {high_score}", ACCENT_RECORD),
                (self.font_small, "Space/Enter to play again • R to reset", TEXT_DIM),
            ]
        else:
            lines = [
                (self.font_big, "SPACE DODGER", TEXT_COLOR),
                (self.font_mid, "Ready to play?", TEXT_COLOR),
                (self.font_small, "Keyboard: arrows or WASD to move", TEXT_DIM),
                (self.font_small, "Mouse/touch: press where you want to go", TEXT_DIM),
                (self.font_small, "Space/Enter to start • Esc to quit", TEXT_DIM),
            ]
        y = cy - 30 * len(lines)
        for font, msg, color in lines:
            text = font.render(msg, True, color)
            surf.blit(text, text.get_rect(midtop=(cx, y)))
            y += text.get_height() + 16
        hint = self.font_small.render("Difficulty rises every 500 points!", True, TEXT_DIM)
        surf.blit(hint, hint.get_rect(midbottom=(cx, FIELD_HEIGHT - 12)))
