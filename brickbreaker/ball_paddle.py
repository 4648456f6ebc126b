import enum

import numpy as np


class Direction(enum.Enum):
    NONE = 0
    LEFT = -1
    RIGHT = 1


class BallPaddleState:
    """Ball position/velocity and the paddle's horizontal position.

    The ball's speed never changes; bounces only flip the sign of ``dx`` or
    ``dy``. The paddle is pinned to the bottom of the field and its ``x`` is
    always clamped to ``[0, field_width - paddle_width]``.
    """

    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

        self.x = 0.0
        self.y = 0.0
        self.dx = 0.0
        self.dy = 0.0
        self.paddle_x = 0.0

        self.reset()

    @property
    def paddle_y(self):
        return self.config.field_height - self.config.paddle_height

    @property
    def ball_pos(self):
        return (self.x, self.y)

    @property
    def velocity(self):
        return (self.dx, self.dy)

    def reset(self, field_width=None, field_height=None):
        field_width = self.config.field_width if field_width is None else field_width
        field_height = self.config.field_height if field_height is None else field_height

        self.x = field_width / 2
        self.y = field_height - self.config.serve_offset
        sign = 1 if self.rng.random() < 0.5 else -1
        self.dx = sign * self.config.ball_speed
        self.dy = -self.config.ball_speed
        self.paddle_x = (field_width - self.config.paddle_width) / 2

    def _clamp_paddle(self, x, field_width):
        if field_width == self.config.field_width:
            max_x = self.config.paddle_max_x
        else:
            max_x = field_width - self.config.paddle_width
        return min(max(x, 0.0), max_x)

    def apply_paddle_input(self, direction, field_width=None):
        field_width = self.config.field_width if field_width is None else field_width
        if direction is Direction.RIGHT:
            self.paddle_x += self.config.paddle_step
        elif direction is Direction.LEFT:
            self.paddle_x -= self.config.paddle_step
        self.paddle_x = self._clamp_paddle(self.paddle_x, field_width)

    def set_paddle_from_pointer(self, pointer_x, field_width=None):
        """Center the paddle under ``pointer_x``.

        Pointer positions outside the field are ignored. Returns True if the
        paddle was moved.
        """
        field_width = self.config.field_width if field_width is None else field_width
        if not 0 < pointer_x < field_width:
            return False
        self.paddle_x = self._clamp_paddle(pointer_x - self.config.paddle_width / 2, field_width)
        return True

    def advance(self):
        self.x += self.dx
        self.y += self.dy

    def paddle_covers(self, x):
        return self.paddle_x <= x <= self.paddle_x + self.config.paddle_width
