"""Game loop, input translation, and rendering composition for Space Dodger."""

from __future__ import annotations

import logging
import random

import pygame

from .config import DISPLAY_SCALE, FIELD_HEIGHT, FIELD_WIDTH, FPS
from .controls import InputState, map_pointer
from .render import Renderer
from .session import GameSession, SessionState
from .ticker import Ticker

logger = logging.getLogger(__name__)

# pygame key names -> input identifiers understood by InputState
KEY_NAMES = {
    "left": "arrowleft",
    "right": "arrowright",
    "up": "arrowup",
    "down": "arrowdown",
    "a": "a",
    "d": "d",
    "w": "w",
    "s": "s",
}


class Game:
    """Top-level game controller: owns the window, input, session and draw."""

    def __init__(self, seed: int | None = None, scale: float = DISPLAY_SCALE) -> None:
        pygame.init()
        self.window_size = (int(FIELD_WIDTH * scale), int(FIELD_HEIGHT * scale))
        self.screen = pygame.display.set_mode(self.window_size, pygame.DOUBLEBUF)
        pygame.display.set_caption("Space Dodger")
        self.field = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT))
        self.ticker = Ticker(FPS)
        self.input = InputState()
        self.session = GameSession(random.Random(seed))
        self.session.add_listener(self._on_transition)
        self.renderer = Renderer()

    def _on_transition(self, old: SessionState, new: SessionState, session: GameSession) -> None:
        # Held keys or a stale pointer must not carry into the next run
        if new is not SessionState.PLAYING:
            self.input.clear()

    def start(self) -> None:
        if self.session.state is not SessionState.PLAYING:
            self.session.start()

    def reset(self) -> None:
        if self.session.state is SessionState.GAME_OVER:
            self.session.reset()

    def quit(self) -> None:
        self.ticker.stop()

    def _field_pos(self, pos: tuple[int, int]) -> tuple[float, float]:
        return map_pointer(pos, self.window_size)

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self.start()
            elif event.key == pygame.K_r:
                self.reset()
            elif event.key == pygame.K_ESCAPE:
                self.quit()
            else:
                name = KEY_NAMES.get(pygame.key.name(event.key))
                if name is not None:
                    self.input.key_down(name)
        elif event.type == pygame.KEYUP:
            name = KEY_NAMES.get(pygame.key.name(event.key))
            if name is not None:
                self.input.key_up(name)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.session.state is SessionState.PLAYING:
                self.input.pointer_down(*self._field_pos(event.pos))
        elif event.type == pygame.MOUSEMOTION:
            self.input.pointer_move(*self._field_pos(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.input.pointer_up()

    def update(self) -> None:
        self.session.tick(self.input)

    def draw(self) -> None:
        s = self.session
        self.renderer.draw(self.field, s.snapshot(), s.state, s.score, s.high_score, s.level)
        if self.window_size == self.field.get_size():
            self.screen.blit(self.field, (0, 0))
        else:
            pygame.transform.scale(self.field, self.window_size, self.screen)
        pygame.display.flip()

    def frame(self) -> None:
        for event in pygame.event.get():
            self.handle_input(event)
        # Update happens before render within the same frame
        self.update()
        self.draw()

    def run(self, max_frames: int | None = None) -> None:
        logger.info(f"Space Dodger running at {self.window_size[0]}x{self.window_size[1]}")
        try:
            self.ticker.run(self.frame, max_frames=max_frames)
        finally:
            pygame.quit()


def main(seed: int | None = None, scale: float = DISPLAY_SCALE) -> None:
    Game(seed=seed, scale=scale).run()
