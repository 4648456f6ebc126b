"""Tuning constants for the brick breaker simulation.

Every size, speed and score used by the core lives on a single frozen
``GameConfig`` so that the grid, the ball/paddle state and the collision
resolver all read from the same place.
"""

from dataclasses import dataclass

from brickbreaker.grid import BrickKind

# --- Colors ---
COLOR_BG = (18, 18, 18)
COLOR_BALL = (3, 218, 198)
COLOR_PADDLE = (3, 218, 198)
COLOR_TEXT = (255, 255, 255)
COLOR_HINT = (160, 160, 170)
COLOR_OVERLAY = (0, 0, 0, 128)
BRICK_COLORS = {
    BrickKind.SPECIAL: (255, 64, 129),
    BrickKind.NORMAL: (3, 169, 244),
}


@dataclass(frozen=True)
class GameConfig:
    field_width: int = 800
    field_height: int = 600

    paddle_width: float = 120
    paddle_height: float = 15
    paddle_step: float = 7

    ball_radius: float = 12
    ball_speed: float = 4
    serve_offset: float = 50  # ball starts this far above the bottom edge

    brick_columns: int = 8
    brick_rows: int = 5
    brick_width: float = 80
    brick_height: float = 25
    brick_padding: float = 15
    brick_offset_left: float = 35
    brick_offset_top: float = 40
    special_rows: int = 2

    normal_points: int = 10
    special_points: int = 20
    starting_lives: int = 3

    def __post_init__(self):
        positive = {
            "field_width": self.field_width,
            "field_height": self.field_height,
            "paddle_width": self.paddle_width,
            "paddle_height": self.paddle_height,
            "ball_radius": self.ball_radius,
            "ball_speed": self.ball_speed,
            "brick_width": self.brick_width,
            "brick_height": self.brick_height,
            "starting_lives": self.starting_lives,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.brick_columns < 0 or self.brick_rows < 0:
            raise ValueError("brick grid dimensions must not be negative")
        if self.paddle_width > self.field_width:
            raise ValueError(
                f"paddle_width {self.paddle_width} exceeds field_width {self.field_width}"
            )

    @property
    def paddle_max_x(self):
        return self.field_width - self.paddle_width

    def brick_points(self, kind):
        if kind is BrickKind.SPECIAL:
            return self.special_points
        return self.normal_points


DEFAULT_CONFIG = GameConfig()
