"""
Session state machine for Space Dodger.

States:
    IDLE: Waiting for the player to start
    PLAYING: Simulation runs once per frame
    GAME_OVER: A meteor hit the ship; final score and record are shown
"""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import Callable

from .controls import InputState
from .difficulty import difficulty_tier
from .engine import SimulationEngine, TickResult
from .entities import EntitySnapshot, EntityStore
from .ticker import CancelToken

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Session lifecycle states."""
    IDLE = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class InvalidTransitionError(Exception):
    """A session control was invoked in a state that does not allow it."""

    def __init__(self, state: SessionState, action: str) -> None:
        super().__init__(f"Cannot {action} while {state.name}")
        self.state = state
        self.action = action


Listener = Callable[[SessionState, SessionState, "GameSession"], None]


class GameSession:
    """
    Owns score, record and lifecycle state, and steps the engine while playing.

    The entity store is exclusively mutated here (through the engine);
    the renderer gets copies via snapshot().
    """

    # (from, action) -> to
    TRANSITIONS: dict[tuple[SessionState, str], SessionState] = {
        (SessionState.IDLE, "start"): SessionState.PLAYING,
        (SessionState.GAME_OVER, "start"): SessionState.PLAYING,  # Play again
        (SessionState.GAME_OVER, "reset"): SessionState.IDLE,
        (SessionState.PLAYING, "collide"): SessionState.GAME_OVER,
    }

    def __init__(self, rng: random.Random | None = None, engine: SimulationEngine | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.engine = engine if engine is not None else SimulationEngine(self.rng)
        self.store = EntityStore()
        self.store.reseed_particles(self.rng)
        self._state = SessionState.IDLE
        self._score = 0
        self._high_score = 0
        self._tick_token: CancelToken | None = None
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def level(self) -> int:
        return difficulty_tier(self._score)

    @property
    def game_over(self) -> bool:
        return self._state is SessionState.GAME_OVER

    @property
    def ticking(self) -> bool:
        """True while a simulation tick is scheduled."""
        return self._tick_token is not None and not self._tick_token.cancelled

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _require(self, action: str) -> SessionState:
        to_state = self.TRANSITIONS.get((self._state, action))
        if to_state is None:
            logger.warning(f"Invalid transition: {action} from {self._state.name}")
            raise InvalidTransitionError(self._state, action)
        return to_state

    def _transition(self, action: str) -> SessionState:
        to_state = self._require(action)
        old_state = self._state
        self._state = to_state
        logger.info(f"Session transition: {old_state.name} -> {to_state.name}")
        for listener in self._listeners:
            try:
                listener(old_state, to_state, self)
            except Exception as e:
                logger.error(f"Error in session listener: {e}")
        return to_state

    def _cancel_tick(self) -> None:
        if self._tick_token is not None:
            self._tick_token.cancel()
            self._tick_token = None

    def start(self) -> None:
        """Begin a fresh run from IDLE or GAME_OVER."""
        self._require("start")
        self._cancel_tick()
        self.store.reset(self.rng)
        self._score = 0
        self._tick_token = CancelToken()
        self._transition("start")

    def reset(self) -> None:
        """Return from GAME_OVER to IDLE, keeping the record."""
        self._require("reset")
        self._cancel_tick()
        self._score = 0
        self.store.obstacles.clear()
        self.store.reseed_particles(self.rng)
        self._transition("reset")

    def tick(self, input_state: InputState) -> TickResult:
        """Advance one frame. A no-op unless PLAYING."""
        if self._state is not SessionState.PLAYING or not self.ticking:
            return TickResult()
        intent = input_state.snapshot()
        result = self.engine.advance(self.store, intent, self._score)
        self._score += result.score_delta
        if result.terminal:
            self._cancel_tick()
            self._high_score = max(self._high_score, self._score)
            logger.info(f"Game over: score={self._score} record={self._high_score}")
            self._transition("collide")
        return result

    def snapshot(self) -> EntitySnapshot:
        return self.store.snapshot()
