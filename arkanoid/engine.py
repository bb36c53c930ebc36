import dataclasses
import logging
import math
from dataclasses import dataclass

import numpy as np

from arkanoid.bricks import BrickField
from arkanoid.collisions import CollisionResolver
from arkanoid.config import GameConfig
from arkanoid.entities import Ball, Paddle
from arkanoid.particles import ParticleSystem
from arkanoid.state import GameState, GameStatus

logger = logging.getLogger(__name__)

SERVE_HEIGHT = 80


@dataclass(frozen=True)
class WorldSnapshot:
    """Everything a renderer needs to draw one frame."""
    frame: int
    ball: Ball
    paddle: Paddle
    bricks: tuple
    particles: tuple
    score: int
    lives: int
    status: GameStatus


class ArkanoidEngine:
    """Frame-by-frame brick-breaker simulation.

    The only way in from outside is ``set_paddle_target``; everything
    else is read through accessors that hand out copies. Terminal
    outcomes are reported by ``step`` and ``on_terminal`` and the world
    is reset on the same call, so no frame ever shows a cleared field.
    """

    def __init__(self, config=None, *, rng=None, on_terminal=None, **options):
        if config is None:
            config = GameConfig.from_options(options)
        elif options:
            config = config.replace(**options)
        self._config = config
        self.on_terminal = on_terminal

        rng = rng if rng is not None else np.random.default_rng()
        self._particles = ParticleSystem(rng)
        self._bricks = BrickField(config)
        self._resolver = CollisionResolver(config, self._bricks, self._particles)
        self._state = GameState(config.initial_lives)
        self._ball = Ball(0.0, 0.0, 0.0, 0.0, config.ball_radius)
        self._paddle = Paddle(
            x=0.0,
            target_x=0.0,
            y=config.paddle_top,
            width=config.paddle_width,
            height=config.paddle_height,
            ease=config.paddle_ease,
        )
        self._event = GameStatus.PLAYING
        self._frame = 0
        self.reset()

    # --- Lifecycle ---

    def reset(self, rng=None):
        if rng is not None:
            self._particles.rng = rng
        self._state.reset()
        self._bricks.reset()
        self._particles.clear()
        self._serve()
        self._paddle.place((self._config.play_width - self._config.paddle_width) / 2)
        self._event = GameStatus.PLAYING
        self._frame = 0

    def set_paddle_target(self, x):
        """Where the paddle's left edge should drift to."""
        x = float(x)
        if not math.isfinite(x):
            raise ValueError(f"paddle target must be finite, got {x!r}")
        self._paddle.target_x = x

    def step(self):
        self._event = GameStatus.PLAYING
        self._frame += 1
        ball = self._ball

        # Paddle first: contact tests use where it is this frame
        self._paddle.ease_toward_target(self._config.play_width)

        motion = self._resolver.resolve_motion(ball, self._paddle)
        if motion.missed:
            self._on_miss()
            return self._event

        ball.x, ball.y = motion.x, motion.y

        brick = self._resolver.resolve_bricks(ball)
        if brick is not None:
            status = self._state.record_brick(self._config.total_bricks)
            logger.debug("Brick (%d, %d) destroyed, score %d", brick.row, brick.col, self._state.score)
            if status is GameStatus.WON:
                self._finish(status)

        self._particles.advance()
        return self._event

    def _on_miss(self):
        status = self._state.record_miss()
        if status is GameStatus.LOST:
            self._finish(status)
            return
        logger.debug("Ball lost, %d lives left", self._state.lives)
        self._serve()

    def _serve(self):
        c = self._config
        self._ball.serve(c.play_width / 2, c.play_height - SERVE_HEIGHT, c.initial_dx, c.initial_dy)

    def _finish(self, status):
        logger.info("Game %s at frame %d with score %d", status.value, self._frame, self._state.score)
        if self.on_terminal is not None:
            self.on_terminal(status)
        self.reset()
        self._event = status

    # --- Read accessors ---

    @property
    def config(self):
        return self._config

    @property
    def ball(self):
        return dataclasses.replace(self._ball)

    @property
    def paddle(self):
        return dataclasses.replace(self._paddle)

    @property
    def bricks(self):
        return tuple(self._bricks.bricks())

    @property
    def particles(self):
        return tuple(dataclasses.replace(p) for p in self._particles)

    @property
    def score(self):
        return self._state.score

    @property
    def lives(self):
        return self._state.lives

    @property
    def status(self):
        return self._event

    @property
    def terminal_event(self):
        return self._event if self._event.terminal else None

    @property
    def frame(self):
        return self._frame

    @property
    def bricks_left(self):
        return self._bricks.remaining_count()

    def snapshot(self):
        return WorldSnapshot(
            frame=self._frame,
            ball=self.ball,
            paddle=self.paddle,
            bricks=self.bricks,
            particles=self.particles,
            score=self.score,
            lives=self.lives,
            status=self.status,
        )
