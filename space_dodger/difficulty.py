"""Score-driven pacing: difficulty tier, spawn chance and meteor speed."""

from __future__ import annotations

import random

from .config import (
    INITIAL_METEOR_SPEED,
    METEOR_SPAWN_RATE,
    METEOR_SPEED_JITTER,
    METEOR_SPEED_STEP,
    SCORE_PER_TIER,
    SPAWN_RATE_STEP,
)


def difficulty_tier(score: int) -> int:
    """Tier 1 at score 0, one more every SCORE_PER_TIER points."""
    return score // SCORE_PER_TIER + 1


def spawn_probability(score: int) -> float:
    return METEOR_SPAWN_RATE + (difficulty_tier(score) - 1) * SPAWN_RATE_STEP


def base_meteor_speed(score: int) -> float:
    """Meteor speed for the tier, before the per-spawn jitter."""
    return INITIAL_METEOR_SPEED + (difficulty_tier(score) - 1) * METEOR_SPEED_STEP


def meteor_speed(score: int, rng: random.Random) -> float:
    """Tier speed plus a fresh uniform jitter in [0, METEOR_SPEED_JITTER)."""
    return base_meteor_speed(score) + rng.random() * METEOR_SPEED_JITTER
