"""Player movement intent: held direction keys or a pointer target."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import FIELD_HEIGHT, FIELD_WIDTH


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# Lowercase key identifiers accepted from the input layer
KEY_DIRECTIONS: dict[str, Direction] = {
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
}


@dataclass(frozen=True)
class DirectionalKeys:
    held: frozenset[Direction] = frozenset()

    def __contains__(self, direction: Direction) -> bool:
        return direction in self.held


@dataclass(frozen=True)
class PointerTarget:
    x: float
    y: float


InputIntent = Union[DirectionalKeys, PointerTarget]


def map_pointer(
    pos: tuple[float, float],
    display_size: tuple[float, float],
    origin: tuple[float, float] = (0.0, 0.0),
) -> tuple[float, float]:
    """Map a display position into playfield coordinates."""
    scale_x = FIELD_WIDTH / display_size[0]
    scale_y = FIELD_HEIGHT / display_size[1]
    return (pos[0] - origin[0]) * scale_x, (pos[1] - origin[1]) * scale_y


class InputState:
    """Current movement intent, written by event callbacks, read once per frame.

    Key identifiers are stored lowercase as delivered. A held pointer takes
    precedence over any held keys.
    """

    def __init__(self) -> None:
        self.keys: set[str] = set()
        self.pointer: PointerTarget | None = None

    def key_down(self, key: str) -> None:
        self.keys.add(key.lower())

    def key_up(self, key: str) -> None:
        self.keys.discard(key.lower())

    def pointer_down(self, x: float, y: float) -> None:
        self.pointer = PointerTarget(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        # Moves without a press do not steer
        if self.pointer is not None:
            self.pointer = PointerTarget(x, y)

    def pointer_up(self) -> None:
        self.pointer = None

    def clear(self) -> None:
        self.keys.clear()
        self.pointer = None

    def snapshot(self) -> InputIntent:
        """Return an immutable view of the intent for this frame."""
        if self.pointer is not None:
            return self.pointer
        held = frozenset(KEY_DIRECTIONS[k] for k in self.keys if k in KEY_DIRECTIONS)
        return DirectionalKeys(held)
