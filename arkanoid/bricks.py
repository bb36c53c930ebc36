from dataclasses import dataclass

import numpy as np

from arkanoid.geometry import boxes_overlap


@dataclass(frozen=True)
class Brick:
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float
    alive: bool = True


class BrickField:
    """The fixed grid of bricks, tracked as a row-major alive mask."""

    def __init__(self, config):
        self.config = config
        self.rows = config.brick_rows
        self.cols = config.brick_cols
        self.alive = None
        self.reset()

    def reset(self):
        self.alive = np.ones((self.rows, self.cols), dtype=bool)

    def remaining_count(self):
        return int(self.alive.sum())

    def is_alive(self, row, col):
        return bool(self.alive[row, col])

    def kill_at(self, row, col):
        """Mark a brick dead. Returns False if it was already dead."""
        was_alive = bool(self.alive[row, col])
        self.alive[row, col] = False
        return was_alive

    def box(self, row, col):
        c = self.config
        x = col * (c.brick_width + c.brick_padding) + c.brick_offset_x
        y = row * (c.brick_height + c.brick_padding) + c.brick_offset_y
        return x, y, c.brick_width, c.brick_height

    def brick(self, row, col):
        return Brick(row, col, *self.box(row, col), alive=self.is_alive(row, col))

    def bricks(self):
        return [self.brick(row, col) for row in range(self.rows) for col in range(self.cols)]

    def alive_cells(self):
        # np.nonzero walks a C-ordered array row by row
        rows, cols = np.nonzero(self.alive)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def first_overlap(self, cx, cy, radius):
        for row, col in self.alive_cells():
            if boxes_overlap(cx, cy, radius, *self.box(row, col)):
                return self.brick(row, col)
        return None
