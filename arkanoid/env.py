import gymnasium as gym
from gymnasium.spaces import Box
import numpy as np

from arkanoid.engine import ArkanoidEngine
from arkanoid.render import Renderer
from arkanoid.state import GameStatus


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"], "render_fps": 60}

    user_guide = "Controls: move the pointer left and right; the paddle glides after it."
    game_description = (
        "A neon brick breaker. Bounce the ball off your paddle to clear all 45 bricks before your three lives run out."
    )
    auto_advance = True

    MAX_STEPS = 10000

    # Rewards
    REWARD_BRICK = 1.0
    REWARD_MISS = -1.0
    REWARD_WIN = 10.0
    REWARD_LOSS = -10.0

    def __init__(self, render_mode="rgb_array", **options):
        super().__init__()
        self.render_mode = render_mode

        self.engine = ArkanoidEngine(**options)
        config = self.engine.config
        self.WIDTH, self.HEIGHT = int(config.play_width), int(config.play_height)

        self.observation_space = Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        # Pointer x in play-field coordinates
        self.action_space = Box(
            low=0.0, high=float(config.play_width), shape=(1,), dtype=np.float32
        )

        self.renderer = Renderer(self.WIDTH, self.HEIGHT)
        self.steps = 0

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.engine.reset(rng=self.np_random)
        self.steps = 0
        return self._get_observation(), self._get_info()

    def step(self, action):
        pointer_x = float(np.asarray(action, dtype=np.float64).reshape(-1)[0])
        score_before, lives_before = self.engine.score, self.engine.lives

        # --- Input ---
        self.engine.set_paddle_target(pointer_x - self.engine.config.paddle_width / 2)

        # --- Simulation ---
        event = self.engine.step()
        self.steps += 1

        # Terminal frames have already been reset, so score deltas are meaningless there
        if event is GameStatus.WON:
            reward = self.REWARD_BRICK + self.REWARD_WIN
        elif event is GameStatus.LOST:
            reward = self.REWARD_MISS + self.REWARD_LOSS
        else:
            reward = (
                self.REWARD_BRICK * (self.engine.score - score_before)
                + self.REWARD_MISS * (lives_before - self.engine.lives)
            )

        terminated = event.terminal
        truncated = self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(event),
        )

    def render(self):
        if self.render_mode == "rgb_array":
            return self._get_observation()
        return None

    def _get_observation(self):
        self.renderer.draw(self.engine.snapshot())
        return self.renderer.to_array()

    def _get_info(self, event=GameStatus.PLAYING):
        return {
            "score": self.engine.score,
            "steps": self.steps,
            "lives": self.engine.lives,
            "bricks_left": self.engine.bricks_left,
            "terminal": event.value,
        }

    def close(self):
        self.renderer.close()

    def validate_implementation(self):
        '''
        Self-check of spaces and the reset/step contract.
        '''
        # Test action space
        assert self.action_space.shape == (1,)

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        print("✓ Implementation validated successfully")
