"""Per-frame simulation step: ship movement, stars, meteor spawning and collisions."""

from __future__ import annotations

import logging
import random
from typing import NamedTuple

from .config import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    METEOR_SIZE,
    METEOR_SIZE_JITTER,
    POINTER_EASING,
    SCORE_PER_CLEAR,
)
from .controls import Direction, DirectionalKeys, InputIntent, PointerTarget
from .difficulty import meteor_speed, spawn_probability
from .entities import EntityStore, Particle, Rect
from .utils import clamp, overlaps, sign

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
    score_delta: int = 0
    terminal: bool = False


class SimulationEngine:
    """Advances an EntityStore by exactly one frame.

    The random source is injected so a seeded run replays identically.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def advance(self, store: EntityStore, intent: InputIntent, score: int) -> TickResult:
        self.move_player(store.player, intent)
        self.drift_particles(store.particles)
        self.maybe_spawn(store.obstacles, score)
        return self.advance_obstacles(store)

    def move_player(self, player: Rect, intent: InputIntent) -> None:
        max_x = FIELD_WIDTH - player.width
        max_y = FIELD_HEIGHT - player.height
        if isinstance(intent, PointerTarget):
            # Ease toward the pointer, capped at top speed
            diff_x = intent.x - player.width / 2 - player.x
            step = min(abs(diff_x) * POINTER_EASING, player.speed)
            player.x = clamp(player.x + sign(diff_x) * step, 0.0, max_x)
            return
        # Axes are clamped independently; diagonals are not normalized
        if Direction.LEFT in intent:
            player.x = max(0.0, player.x - player.speed)
        if Direction.RIGHT in intent:
            player.x = min(max_x, player.x + player.speed)
        if Direction.UP in intent:
            player.y = max(0.0, player.y - player.speed)
        if Direction.DOWN in intent:
            player.y = min(max_y, player.y + player.speed)

    def drift_particles(self, particles: list[Particle]) -> None:
        for p in particles:
            p.y += p.speed
            if p.y > FIELD_HEIGHT:
                p.y = 0.0
                p.x = self.rng.random() * FIELD_WIDTH

    def maybe_spawn(self, obstacles: list[Rect], score: int) -> Rect | None:
        """Append at most one meteor above the field."""
        if self.rng.random() >= spawn_probability(score):
            return None
        rng = self.rng
        meteor = Rect(
            x=rng.random() * (FIELD_WIDTH - METEOR_SIZE),
            y=-METEOR_SIZE,
            width=METEOR_SIZE + rng.random() * METEOR_SIZE_JITTER,
            height=METEOR_SIZE + rng.random() * METEOR_SIZE_JITTER,
        )
        meteor.speed = meteor_speed(score, rng)
        obstacles.append(meteor)
        logger.debug(f"Spawned meteor at x={meteor.x:.1f} speed={meteor.speed:.2f}")
        return meteor

    def advance_obstacles(self, store: EntityStore) -> TickResult:
        """Move meteors newest-first, cull those below the field, stop at the first hit."""
        obstacles = store.obstacles
        player = store.player
        score_delta = 0
        for i in range(len(obstacles) - 1, -1, -1):
            meteor = obstacles[i]
            meteor.y += meteor.speed
            if meteor.y > FIELD_HEIGHT:
                del obstacles[i]
                score_delta += SCORE_PER_CLEAR
                continue
            if overlaps(player, meteor):
                logger.debug(f"Collision with meteor {i} at ({meteor.x:.1f}, {meteor.y:.1f})")
                return TickResult(score_delta, True)
        return TickResult(score_delta, False)
