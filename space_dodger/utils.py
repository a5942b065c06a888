"""Geometry and color utility functions used across the game."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def sign(value: float) -> float:
    """Return -1.0, 0.0 or 1.0 matching the sign of value."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def overlaps(a: Box, b: Box) -> bool:
    """True if the axis-aligned boxes a and b share interior area.

    Boxes whose edges merely touch do not overlap.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending top into bottom along y.

    The column-major layout matches what pygame.surfarray expects.
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    top_c = np.asarray(top, dtype=np.float32)[None, :]
    bot_c = np.asarray(bottom, dtype=np.float32)[None, :]
    rows = top_c * (1.0 - t) + bot_c * t  # (h, 3)
    c = np.clip(rows, 0, 255).astype(np.uint8)
    return np.broadcast_to(c[None, :, :], (w, h, 3)).copy()


def with_alpha(color: tuple[int, int, int], opacity: float) -> tuple[int, int, int, int]:
    """Attach an alpha channel derived from an opacity in [0,1]."""
    r, g, b = color
    return (r, g, b, int(clamp(opacity, 0.0, 1.0) * 255))
