"""Game entities and the store that owns them.

Contains the ship/meteor rectangle, decorative background stars, and the
EntityStore the simulation engine mutates each frame.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from .config import (
    FIELD_HEIGHT,
    FIELD_WIDTH,
    PLAYER_BOTTOM_INSET,
    PLAYER_SIZE,
    PLAYER_SPEED,
    STAR_COUNT,
    STAR_MIN_OPACITY,
    STAR_MIN_SIZE,
    STAR_MIN_SPEED,
    STAR_OPACITY_RANGE,
    STAR_SIZE_RANGE,
    STAR_SPEED_RANGE,
)


@dataclass
class Rect:
    """Axis-aligned box with a vertical speed (px/frame)."""

    x: float
    y: float
    width: float
    height: float
    speed: float = 0.0


@dataclass
class Particle:
    """A background star. Purely decorative, never collides."""

    x: float
    y: float
    size: float
    speed: float
    opacity: float

    @classmethod
    def random(cls, rng: random.Random) -> Particle:
        return cls(
            x=rng.random() * FIELD_WIDTH,
            y=rng.random() * FIELD_HEIGHT,
            size=rng.random() * STAR_SIZE_RANGE + STAR_MIN_SIZE,
            speed=rng.random() * STAR_SPEED_RANGE + STAR_MIN_SPEED,
            opacity=rng.random() * STAR_OPACITY_RANGE + STAR_MIN_OPACITY,
        )


def spawn_player() -> Rect:
    """Return the ship at its canonical start position (bottom-center)."""
    return Rect(
        x=FIELD_WIDTH / 2 - PLAYER_SIZE / 2,
        y=FIELD_HEIGHT - PLAYER_SIZE - PLAYER_BOTTOM_INSET,
        width=PLAYER_SIZE,
        height=PLAYER_SIZE,
        speed=PLAYER_SPEED,
    )


def make_stars(rng: random.Random, count: int = STAR_COUNT) -> list[Particle]:
    return [Particle.random(rng) for _ in range(count)]


@dataclass(frozen=True)
class EntitySnapshot:
    """Read-only copy of the store handed to the renderer."""

    player: Rect
    obstacles: tuple[Rect, ...]
    particles: tuple[Particle, ...]


@dataclass
class EntityStore:
    """Owns the player, the active meteors and the background stars.

    Meteors and stars keep insertion order; the newest meteor is last.
    """

    player: Rect = field(default_factory=spawn_player)
    obstacles: list[Rect] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)

    def reset(self, rng: random.Random) -> None:
        """Put the ship back at the start, drop all meteors and re-seed stars."""
        self.player = spawn_player()
        self.obstacles.clear()
        self.reseed_particles(rng)

    def reseed_particles(self, rng: random.Random) -> None:
        self.particles = make_stars(rng)

    def snapshot(self) -> EntitySnapshot:
        return EntitySnapshot(
            player=replace(self.player),
            obstacles=tuple(replace(o) for o in self.obstacles),
            particles=tuple(replace(p) for p in self.particles),
        )
