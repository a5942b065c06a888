"""Fixed-rate frame loop with explicit cancellation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from .config import FPS

if TYPE_CHECKING:
    import pygame

logger = logging.getLogger(__name__)


class CancelToken:
    """One-shot flag checked by a loop before every iteration."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class Ticker:
    """Calls a frame callback at a fixed rate until its token is cancelled.

    At most one loop is scheduled at a time: starting again cancels the
    previous token first.
    """

    def __init__(self, fps: int = FPS, clock: pygame.time.Clock | None = None) -> None:
        self.fps = fps
        self._clock = clock
        self._token: CancelToken | None = None

    @property
    def running(self) -> bool:
        return self._token is not None and not self._token.cancelled

    def start(self) -> CancelToken:
        if self._token is not None:
            self._token.cancel()
        self._token = CancelToken()
        logger.debug("Ticker started")
        return self._token

    def stop(self) -> None:
        if self.running:
            logger.debug("Ticker stopped")
        if self._token is not None:
            self._token.cancel()

    def wait(self) -> float:
        """Sleep until the next frame is due; returns seconds elapsed."""
        if self._clock is None:
            from pygame.time import Clock

            self._clock = Clock()
        return self._clock.tick(self.fps) / 1000.0

    def run(self, frame: Callable[[], None], max_frames: int | None = None) -> int:
        """Drive frame() once per tick; returns the number of frames run."""
        token = self.start()
        frames = 0
        while not token.cancelled:
            frame()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                token.cancel()
            if token.cancelled:
                break
            self.wait()
        return frames
