"""Per-tick collision resolution between the ball, the walls, the paddle and
the brick grid.

Wall and paddle tests look one step ahead (``x + dx``, ``y + dy``) so the
bounce and the post-bounce move happen in the same tick. Brick tests use the
ball's current centre.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from brickbreaker.grid import BrickKind

logger = logging.getLogger(__name__)


class EventKind(enum.Enum):
    BRICK_BROKEN = "brick_broken"
    WALL_BOUNCED = "wall_bounced"
    PADDLE_BOUNCED = "paddle_bounced"
    LIFE_LOST = "life_lost"
    ALL_BRICKS_CLEARED = "all_bricks_cleared"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    brick_kind: Optional[BrickKind] = None
    points: int = 0

    @classmethod
    def brick_broken(cls, brick_kind, points):
        return cls(EventKind.BRICK_BROKEN, brick_kind=brick_kind, points=points)


WALL_BOUNCED = GameEvent(EventKind.WALL_BOUNCED)
PADDLE_BOUNCED = GameEvent(EventKind.PADDLE_BOUNCED)
LIFE_LOST = GameEvent(EventKind.LIFE_LOST)
ALL_BRICKS_CLEARED = GameEvent(EventKind.ALL_BRICKS_CLEARED)


class CollisionResolver:
    def __init__(self, config):
        self.config = config

    def resolve(self, ball_paddle, grid):
        """Flip velocities and destroy bricks for one tick.

        Returns the list of events in the order they happened. Life
        bookkeeping and ball re-serving are left to the state machine.
        """
        events = []
        events.extend(self._check_bricks(ball_paddle, grid))
        events.extend(self._check_walls(ball_paddle))
        return events

    def _check_bricks(self, ball, grid):
        for brick in grid:
            if not brick.alive or not brick.contains(ball.x, ball.y):
                continue

            ball.dy = -ball.dy
            grid.mark_destroyed(brick.col, brick.row)
            events = [GameEvent.brick_broken(brick.kind, self.config.brick_points(brick.kind))]
            # sfx: brick
            logger.debug("Brick (%d, %d) broken, kind=%s", brick.col, brick.row, brick.kind.value)

            if grid.count_alive() == 0:
                events.append(ALL_BRICKS_CLEARED)
            # Only one brick per tick; column-major order decides ties.
            return events
        return []

    def _check_walls(self, ball):
        cfg = self.config
        r = cfg.ball_radius
        events = []

        next_x = ball.x + ball.dx
        if next_x > cfg.field_width - r or next_x < r:
            ball.dx = -ball.dx
            events.append(WALL_BOUNCED)

        next_y = ball.y + ball.dy
        if next_y < r:
            ball.dy = -ball.dy
            events.append(WALL_BOUNCED)
        elif next_y > cfg.field_height - r:
            if ball.paddle_covers(ball.x):
                ball.dy = -ball.dy
                events.append(PADDLE_BOUNCED)
            else:
                events.append(LIFE_LOST)
        return events
