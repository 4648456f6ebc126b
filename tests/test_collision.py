import pytest

from brickbreaker.ball_paddle import BallPaddleState
from brickbreaker.collision import CollisionResolver, EventKind
from brickbreaker.config import GameConfig
from brickbreaker.grid import BrickGrid, BrickKind, BrickStatus


@pytest.fixture
def resolver(config):
    return CollisionResolver(config)


@pytest.fixture
def grid(config):
    return BrickGrid.create_grid(config)


@pytest.fixture
def ball(config, rng):
    return BallPaddleState(config, rng=rng)


def place(ball, x, y, dx, dy, paddle_x=None):
    ball.x, ball.y, ball.dx, ball.dy = x, y, dx, dy
    if paddle_x is not None:
        ball.paddle_x = paddle_x


def kinds(events):
    return [event.kind for event in events]


def test_special_brick_hit(resolver, grid, ball):
    place(ball, 75, 52, 4, -4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.BRICK_BROKEN]
    assert events[0].brick_kind is BrickKind.SPECIAL
    assert events[0].points == 20
    assert ball.dy == 4
    assert grid.brick_at(0, 0).status is BrickStatus.DESTROYED
    assert grid.count_alive() == 39


def test_normal_brick_hit(resolver, grid, ball):
    brick = grid.brick_at(2, 3)
    place(ball, brick.x + 10, brick.y + 10, -4, 4)

    events = resolver.resolve(ball, grid)

    assert events[0].brick_kind is BrickKind.NORMAL
    assert events[0].points == 10
    assert ball.dy == -4


def test_destroyed_brick_is_not_hit_again(resolver, grid, ball):
    grid.mark_destroyed(0, 0)
    place(ball, 75, 52, 4, -4)

    assert resolver.resolve(ball, grid) == []
    assert ball.dy == -4


def test_only_first_brick_in_column_major_order_is_hit():
    # Negative padding makes neighbouring columns overlap.
    config = GameConfig(brick_padding=-40)
    grid = BrickGrid.create_grid(config)
    ball = BallPaddleState(config)
    place(ball, 90, 52, 4, -4)
    assert grid.brick_at(0, 0).contains(90, 52) and grid.brick_at(1, 0).contains(90, 52)

    events = CollisionResolver(config).resolve(ball, grid)

    assert kinds(events) == [EventKind.BRICK_BROKEN]
    assert grid.brick_at(0, 0).status is BrickStatus.DESTROYED
    assert grid.brick_at(1, 0).status is BrickStatus.ALIVE
    assert ball.dy == 4


def test_right_wall_bounce(resolver, grid, ball):
    place(ball, 786, 300, 4, 4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.WALL_BOUNCED]
    assert ball.dx == -4


def test_left_wall_bounce(resolver, grid, ball):
    place(ball, 14, 300, -4, 4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.WALL_BOUNCED]
    assert ball.dx == 4


def test_top_wall_bounce(resolver, grid, ball):
    place(ball, 20, 14, 4, -4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.WALL_BOUNCED]
    assert ball.dy == 4


def test_corner_flips_both_components(resolver, grid, ball):
    place(ball, 14, 14, -4, -4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.WALL_BOUNCED, EventKind.WALL_BOUNCED]
    assert ball.velocity == (4, 4)


def test_no_bounce_when_next_position_is_inside(resolver, grid, ball):
    place(ball, 400, 300, 4, 4)

    assert resolver.resolve(ball, grid) == []
    assert ball.velocity == (4, 4)


def test_paddle_bounce(resolver, grid, ball):
    place(ball, 400, 585, 4, 4, paddle_x=340)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.PADDLE_BOUNCED]
    assert ball.dy == -4


@pytest.mark.parametrize("x", [340, 460])
def test_paddle_edges_catch_the_ball(resolver, grid, ball, x):
    place(ball, x, 585, 4, 4, paddle_x=340)

    assert kinds(resolver.resolve(ball, grid)) == [EventKind.PADDLE_BOUNCED]


def test_missed_ball_loses_a_life(resolver, grid, ball):
    place(ball, 100, 585, -4, 4, paddle_x=340)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.LIFE_LOST]
    assert ball.velocity == (-4, 4)


def test_last_brick_clears_the_board(resolver, grid, ball):
    for brick in grid:
        if (brick.col, brick.row) != (7, 4):
            grid.mark_destroyed(brick.col, brick.row)
    place(ball, 740, 212, 4, -4)

    events = resolver.resolve(ball, grid)

    assert kinds(events) == [EventKind.BRICK_BROKEN, EventKind.ALL_BRICKS_CLEARED]
    assert grid.count_alive() == 0
