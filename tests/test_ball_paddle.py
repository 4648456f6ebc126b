import numpy as np
import pytest

from brickbreaker.ball_paddle import BallPaddleState, Direction


@pytest.fixture
def state(config, rng):
    return BallPaddleState(config, rng=rng)


def test_reset_serves_from_center_bottom(state):
    assert state.ball_pos == (400, 550)
    assert state.dx in (4, -4)
    assert state.dy == -4
    assert state.paddle_x == 340
    assert state.paddle_y == 585


def test_reset_restores_position_regardless_of_prior_state(state):
    state.x, state.y, state.dy = 13.0, 77.0, 4
    state.paddle_x = 0

    state.reset()

    assert state.ball_pos == (400, 550)
    assert state.dy == -4
    assert state.paddle_x == 340


def test_reset_with_explicit_field(state):
    state.reset(field_width=400, field_height=300)

    assert state.ball_pos == (200, 250)
    assert state.paddle_x == 140


def test_serve_direction_uses_both_signs(config):
    state = BallPaddleState(config, rng=np.random.default_rng(0))
    seen = set()
    for _ in range(64):
        state.reset()
        seen.add(state.dx)

    assert seen == {4, -4}


def test_paddle_moves_by_fixed_step(state):
    state.apply_paddle_input(Direction.RIGHT)
    assert state.paddle_x == 347

    state.apply_paddle_input(Direction.LEFT)
    state.apply_paddle_input(Direction.LEFT)
    assert state.paddle_x == 333

    state.apply_paddle_input(Direction.NONE)
    assert state.paddle_x == 333


def test_paddle_is_clamped_to_field(state, config):
    for _ in range(100):
        state.apply_paddle_input(Direction.RIGHT)
    assert state.paddle_x == config.paddle_max_x

    for _ in range(100):
        state.apply_paddle_input(Direction.LEFT)
    assert state.paddle_x == 0


def test_paddle_stays_in_bounds_for_any_input_sequence(state, config):
    rng = np.random.default_rng(7)
    directions = list(Direction)
    for _ in range(2000):
        if rng.random() < 0.2:
            state.set_paddle_from_pointer(float(rng.uniform(-50, 850)))
        else:
            state.apply_paddle_input(directions[rng.integers(len(directions))])
        assert 0 <= state.paddle_x <= config.field_width - config.paddle_width


def test_pointer_centers_paddle(state):
    assert state.set_paddle_from_pointer(500) is True
    assert state.paddle_x == 440


def test_pointer_near_edges_is_clamped(state, config):
    state.set_paddle_from_pointer(10)
    assert state.paddle_x == 0

    state.set_paddle_from_pointer(795)
    assert state.paddle_x == config.paddle_max_x


@pytest.mark.parametrize("pointer_x", [-5, 0, 800, 1200])
def test_pointer_outside_field_is_ignored(state, pointer_x):
    assert state.set_paddle_from_pointer(pointer_x) is False
    assert state.paddle_x == 340


def test_advance_moves_by_velocity(state):
    state.dx, state.dy = -4, -4
    state.advance()
    assert state.ball_pos == (396, 546)


def test_paddle_covers_is_inclusive(state):
    assert state.paddle_covers(340)
    assert state.paddle_covers(460)
    assert not state.paddle_covers(339.9)
    assert not state.paddle_covers(460.1)


def test_clamp_respects_explicit_field_width(state):
    state.set_paddle_from_pointer(395, field_width=400)
    assert state.paddle_x == 280

    for _ in range(10):
        state.apply_paddle_input(Direction.RIGHT, field_width=400)
    assert state.paddle_x == 280
