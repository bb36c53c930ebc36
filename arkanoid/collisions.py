import math
from dataclasses import dataclass

MAX_BOUNCE_ANGLE = 1.15  # radians, about 66 degrees
PADDLE_BAND = 10
MISS_MARGIN = 40


@dataclass
class Motion:
    """Where the ball wants to go this frame, and whether it fell out of play."""
    x: float
    y: float
    missed: bool = False


def paddle_bounce(ball, contact_x, paddle):
    """Redirect the ball upward by where it struck the paddle.

    The offset from the paddle centre maps linearly onto an angle in
    [-MAX_BOUNCE_ANGLE, MAX_BOUNCE_ANGLE]; speed is kept.
    """
    hit = (contact_x - paddle.center_x) / (paddle.width / 2)
    angle = hit * MAX_BOUNCE_ANGLE
    speed = math.hypot(ball.dx, ball.dy)
    ball.dx = speed * math.sin(angle)
    ball.dy = -abs(speed * math.cos(angle))


class CollisionResolver:
    """Contact detection and response for a single frame.

    A miss ends the frame. Bricks are only checked once the ball has been
    moved, and at most one brick breaks per frame.
    """

    def __init__(self, config, bricks, particles):
        self.config = config
        self.bricks = bricks
        self.particles = particles

    def resolve_motion(self, ball, paddle):
        c = self.config
        motion = Motion(ball.x + ball.dx, ball.y + ball.dy)

        # --- Walls ---
        if motion.x < ball.radius or motion.x > c.play_width - ball.radius:
            ball.dx = -ball.dx
            motion.x = ball.x + ball.dx
        if motion.y < ball.radius:
            ball.dy = -ball.dy
            motion.y = ball.y + ball.dy

        # --- Paddle ---
        bottom = motion.y + ball.radius
        if (
            paddle.y <= bottom <= paddle.y + paddle.height + PADDLE_BAND
            and paddle.x <= motion.x <= paddle.x + paddle.width
            and ball.dy > 0
        ):
            paddle_bounce(ball, motion.x, paddle)
            self.particles.spawn_burst(motion.x, paddle.y)

        # --- Bottom ---
        if motion.y > c.play_height + MISS_MARGIN:
            motion.missed = True

        return motion

    def resolve_bricks(self, ball):
        """Knock out the first brick the ball overlaps, scanning row-major."""
        brick = self.bricks.first_overlap(ball.x, ball.y, ball.radius)
        if brick is None:
            return None
        self.bricks.kill_at(brick.row, brick.col)
        ball.dy = -ball.dy
        self.particles.spawn_burst(ball.x, ball.y)
        return brick
