"""Brick grid model.

Bricks are stored column-major (``columns[col][row]``) and iterated in that
order; the collision resolver relies on this order to pick the first brick
hit in a tick.
"""

import enum
from dataclasses import dataclass


class BrickKind(enum.Enum):
    NORMAL = "normal"
    SPECIAL = "special"


class BrickStatus(enum.Enum):
    ALIVE = 1
    DESTROYED = 0


@dataclass
class Brick:
    col: int
    row: int
    x: float
    y: float
    width: float
    height: float
    kind: BrickKind
    status: BrickStatus = BrickStatus.ALIVE

    @property
    def alive(self):
        return self.status is BrickStatus.ALIVE

    def contains(self, px, py):
        # Strict on every edge: a ball centre sitting on a border is not a hit.
        return self.x < px < self.x + self.width and self.y < py < self.y + self.height


class BrickGrid:
    def __init__(self, columns):
        self._columns = columns

    @classmethod
    def create_grid(cls, config, columns=None, rows=None):
        columns = config.brick_columns if columns is None else columns
        rows = config.brick_rows if rows is None else rows

        grid = []
        for c in range(columns):
            column = []
            for r in range(rows):
                kind = BrickKind.SPECIAL if r < config.special_rows else BrickKind.NORMAL
                column.append(Brick(
                    col=c,
                    row=r,
                    x=c * (config.brick_width + config.brick_padding) + config.brick_offset_left,
                    y=r * (config.brick_height + config.brick_padding) + config.brick_offset_top,
                    width=config.brick_width,
                    height=config.brick_height,
                    kind=kind,
                ))
            grid.append(column)
        return cls(grid)

    @property
    def columns(self):
        return len(self._columns)

    @property
    def rows(self):
        return len(self._columns[0]) if self._columns else 0

    def brick_at(self, col, row):
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise IndexError(f"no brick at column {col}, row {row}")
        return self._columns[col][row]

    def mark_destroyed(self, col, row):
        """Destroy the brick at ``(col, row)``.

        Returns False without touching anything if the brick is already
        destroyed; a destroyed brick never comes back.
        """
        brick = self.brick_at(col, row)
        if not brick.alive:
            return False
        brick.status = BrickStatus.DESTROYED
        return True

    def count_alive(self):
        return sum(1 for brick in self if brick.alive)

    def alive_bricks(self):
        return [brick for brick in self if brick.alive]

    def snapshot(self):
        return tuple(
            (brick.x, brick.y, brick.width, brick.height, brick.kind)
            for brick in self.alive_bricks()
        )

    def __iter__(self):
        for column in self._columns:
            yield from column

    def __len__(self):
        return self.columns * self.rows
