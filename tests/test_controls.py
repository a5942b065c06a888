import pytest

from space_dodger.controls import (
    Direction,
    DirectionalKeys,
    InputState,
    PointerTarget,
    map_pointer,
)


def test_keys_map_to_directions() -> None:
    state = InputState()
    state.key_down("ArrowLeft")
    state.key_down("w")
    intent = state.snapshot()
    assert isinstance(intent, DirectionalKeys)
    assert intent.held == frozenset({Direction.LEFT, Direction.UP})


def test_unknown_keys_ignored() -> None:
    state = InputState()
    state.key_down("q")
    assert state.snapshot() == DirectionalKeys(frozenset())


def test_key_up_releases() -> None:
    state = InputState()
    state.key_down("d")
    state.key_up("d")
    state.key_up("d")  # releasing twice is harmless
    assert Direction.RIGHT not in state.snapshot()


def test_pointer_suppresses_keys() -> None:
    state = InputState()
    state.key_down("a")
    state.pointer_down(100, 200)
    assert state.snapshot() == PointerTarget(100, 200)
    state.pointer_up()
    assert state.snapshot() == DirectionalKeys(frozenset({Direction.LEFT}))


def test_pointer_move_requires_press() -> None:
    state = InputState()
    state.pointer_move(10, 10)
    assert isinstance(state.snapshot(), DirectionalKeys)
    state.pointer_down(10, 10)
    state.pointer_move(50, 60)
    assert state.snapshot() == PointerTarget(50, 60)


def test_snapshot_is_stable_after_later_input() -> None:
    state = InputState()
    state.key_down("s")
    intent = state.snapshot()
    state.key_up("s")
    state.key_down("a")
    assert intent.held == frozenset({Direction.DOWN})


def test_map_pointer_scales_to_field() -> None:
    # 400x300 display showing an 800x600 field
    assert map_pointer((200, 150), (400, 300)) == pytest.approx((400.0, 300.0))
    assert map_pointer((60, 40), (400, 300), origin=(10, 10)) == pytest.approx((100.0, 60.0))
