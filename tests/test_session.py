import random
from dataclasses import replace

import pytest

from space_dodger.config import FIELD_HEIGHT, STAR_COUNT
from space_dodger.controls import InputState
from space_dodger.engine import TickResult
from space_dodger.entities import Rect, spawn_player
from space_dodger.session import GameSession, InvalidTransitionError, SessionState


def crash(session: GameSession, clears: int = 0) -> TickResult:
    """Place a meteor on the ship (plus some about to leave the field) and tick once."""
    p = session.store.player
    session.store.obstacles.append(Rect(p.x, p.y, 30, 30, 0))
    for i in range(clears):
        session.store.obstacles.append(Rect(i * 40, FIELD_HEIGHT, 30, 30, 1))
    return session.tick(InputState())


def test_starts_idle() -> None:
    s = GameSession(random.Random(1))
    assert s.state is SessionState.IDLE
    assert s.score == 0 and s.high_score == 0
    assert len(s.store.particles) == STAR_COUNT
    assert not s.ticking


def test_tick_is_noop_unless_playing() -> None:
    s = GameSession(random.Random(1))
    before = s.snapshot()
    assert s.tick(InputState()) == TickResult(0, False)
    assert s.snapshot() == before


def test_start_resets_run() -> None:
    s = GameSession(random.Random(2))
    s.start()
    assert s.state is SessionState.PLAYING
    assert s.score == 0
    assert s.store.player == spawn_player()
    assert s.store.obstacles == []
    assert s.ticking


def test_collision_ends_run_and_sets_record() -> None:
    s = GameSession(random.Random(3))
    s.start()
    result = crash(s, clears=3)
    assert result.terminal
    assert s.state is SessionState.GAME_OVER
    assert s.game_over
    assert s.score == 30
    assert s.high_score == 30
    assert not s.ticking


def test_game_over_freezes_world() -> None:
    s = GameSession(random.Random(4))
    s.start()
    crash(s)
    snap = s.snapshot()
    assert s.tick(InputState()) == TickResult(0, False)
    assert s.snapshot() == snap
    assert len(snap.obstacles) >= 1  # left as last rendered


def test_record_keeps_maximum() -> None:
    s = GameSession(random.Random(5))
    s.start()
    crash(s, clears=5)
    assert s.high_score == 50
    s.start()
    crash(s, clears=1)
    assert s.score == 10
    assert s.high_score == 50


def test_play_again_zeroes_score() -> None:
    s = GameSession(random.Random(6))
    s.start()
    crash(s, clears=4)
    assert s.score == 40
    s.start()
    assert s.state is SessionState.PLAYING
    assert s.score == 0
    assert s.level == 1


def test_reset_returns_to_idle_keeping_record() -> None:
    s = GameSession(random.Random(7))
    s.start()
    crash(s, clears=2)
    old_stars = list(s.store.particles)
    s.reset()
    assert s.state is SessionState.IDLE
    assert s.score == 0
    assert s.high_score == 20
    assert s.store.obstacles == []
    assert s.store.particles != old_stars


def test_reset_then_start_matches_first_start() -> None:
    s = GameSession(random.Random(8))
    s.start()
    first = (replace(s.store.player), list(s.store.obstacles), s.score)
    s.store.player.x = 0
    crash(s, clears=3)
    s.reset()
    s.start()
    assert (s.store.player, list(s.store.obstacles), s.score) == first


def test_reset_from_idle_rejected() -> None:
    s = GameSession(random.Random(9))
    with pytest.raises(InvalidTransitionError) as exc:
        s.reset()
    assert exc.value.state is SessionState.IDLE
    assert s.state is SessionState.IDLE


@pytest.mark.parametrize("action", ["start", "reset"])
def test_invalid_while_playing(action: str) -> None:
    s = GameSession(random.Random(10))
    s.start()
    s.store.player.x = 0
    with pytest.raises(InvalidTransitionError):
        getattr(s, action)()
    # The running game is untouched
    assert s.state is SessionState.PLAYING
    assert s.store.player.x == 0
    assert s.ticking


def test_listeners_see_transitions() -> None:
    s = GameSession(random.Random(11))
    seen: list[tuple[SessionState, SessionState]] = []
    s.add_listener(lambda old, new, session: seen.append((old, new)))
    s.start()
    crash(s)
    s.reset()
    assert seen == [
        (SessionState.IDLE, SessionState.PLAYING),
        (SessionState.PLAYING, SessionState.GAME_OVER),
        (SessionState.GAME_OVER, SessionState.IDLE),
    ]


def test_failing_listener_does_not_block_transition() -> None:
    s = GameSession(random.Random(12))

    def boom(old: SessionState, new: SessionState, session: GameSession) -> None:
        raise RuntimeError("listener failure")

    s.add_listener(boom)
    s.start()
    assert s.state is SessionState.PLAYING
    s.remove_listener(boom)
    s.remove_listener(boom)


def test_score_accumulates_while_playing() -> None:
    s = GameSession(random.Random(13))
    s.start()
    s.store.obstacles.append(Rect(0, FIELD_HEIGHT, 30, 30, 1))
    s.tick(InputState())
    assert s.score == 10
    assert s.state is SessionState.PLAYING


def test_level_follows_score() -> None:
    s = GameSession(random.Random(14))
    s.start()
    for i in range(50):
        s.store.obstacles.append(Rect(i * 10, FIELD_HEIGHT, 5, 5, 1))
    s.tick(InputState())
    assert s.score == 500
    assert s.level == 2
