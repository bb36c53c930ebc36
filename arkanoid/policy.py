import numpy as np


def policy(env):
    # Strategy: while the ball falls, project it down to the paddle line, folding
    # the path back across the side walls, and park the paddle centre there.
    # While it rises, simply shadow its x so the paddle is never far behind.
    engine = env.engine
    config = engine.config
    ball = engine.ball

    target = ball.x
    if ball.dy > 0:
        frames = (config.paddle_top - ball.radius - ball.y) / ball.dy
        target = ball.x + ball.dx * max(frames, 0.0)

        # Fold the projection into the playable band [r, width - r]
        low, high = ball.radius, config.play_width - ball.radius
        span = high - low
        offset = (target - low) % (2 * span)
        target = low + (offset if offset <= span else 2 * span - offset)

    return np.array([target], dtype=np.float32)
