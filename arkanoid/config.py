import dataclasses
import math
import numbers
from dataclasses import dataclass, fields


class ConfigError(ValueError):
    """Raised when a game configuration cannot produce a sane play field."""


@dataclass(frozen=True)
class GameConfig:
    """All tunable options of the simulation.

    Brick counts follow the grid as it is scanned: ``brick_rows`` rows of
    ``brick_cols`` bricks each.
    """

    # Play field
    play_width: float = 820
    play_height: float = 600

    # Ball
    ball_radius: float = 10
    initial_dx: float = 3.2
    initial_dy: float = -3.2

    # Paddle
    paddle_width: float = 110
    paddle_height: float = 12
    paddle_ease: float = 0.18

    # Bricks
    brick_rows: int = 5
    brick_cols: int = 9
    brick_width: float = 72
    brick_height: float = 22
    brick_padding: float = 10
    brick_offset_x: float = 46
    brick_offset_y: float = 56

    initial_lives: int = 3

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{f.name} must be a finite number, got {value!r}")
        for name in ("play_width", "play_height", "ball_radius", "paddle_width",
                     "paddle_height", "brick_width", "brick_height"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("brick_rows", "brick_cols", "initial_lives"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.brick_padding < 0 or self.brick_offset_x < 0 or self.brick_offset_y < 0:
            raise ConfigError("brick padding and offsets must not be negative")
        if not 0 < self.paddle_ease <= 1:
            raise ConfigError(f"paddle_ease must be in (0, 1], got {self.paddle_ease!r}")
        if self.initial_dx == 0 and self.initial_dy == 0:
            raise ConfigError("initial velocity must not be zero")
        if self.paddle_width > self.play_width:
            raise ConfigError(
                f"paddle_width {self.paddle_width} exceeds play_width {self.play_width}"
            )
        if 2 * self.ball_radius >= self.play_width:
            raise ConfigError("ball does not fit between the side walls")

        right = self.brick_offset_x + self.brick_cols * (self.brick_width + self.brick_padding) - self.brick_padding
        bottom = self.brick_offset_y + self.brick_rows * (self.brick_height + self.brick_padding) - self.brick_padding
        if right > self.play_width:
            raise ConfigError(
                f"brick grid is {right} wide but the play field is only {self.play_width}"
            )
        if bottom >= self.paddle_top:
            raise ConfigError(
                f"brick grid reaches y={bottom}, overlapping the paddle line at {self.paddle_top}"
            )

    @property
    def paddle_top(self):
        return self.play_height - self.paddle_height - 10

    @property
    def total_bricks(self):
        return self.brick_rows * self.brick_cols

    @classmethod
    def from_options(cls, options=None):
        """Build a config from a mapping of overrides, rejecting unknown names."""
        options = dict(options or {})
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
        return cls(**options)

    def replace(self, **options):
        return self.from_options({**dataclasses.asdict(self), **options})
