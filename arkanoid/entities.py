import math
from dataclasses import dataclass

import numpy as np


@dataclass
class Ball:
    x: float
    y: float
    dx: float
    dy: float
    radius: float

    @property
    def speed(self):
        return math.hypot(self.dx, self.dy)

    def serve(self, x, y, dx, dy):
        """Move the ball back to a serve position without recreating it."""
        self.x, self.y = x, y
        self.dx, self.dy = dx, dy


@dataclass
class Paddle:
    x: float
    target_x: float
    y: float
    width: float
    height: float
    ease: float

    @property
    def center_x(self):
        return self.x + self.width / 2

    def ease_toward_target(self, play_width):
        # Exponential smoothing toward the pointer, then keep inside the field
        self.x += (self.target_x - self.x) * self.ease
        self.x = float(np.clip(self.x, 0, play_width - self.width))

    def place(self, x):
        self.x = x
        self.target_x = x
