import os

import numpy as np
import pygame
import pygame.gfxdraw

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class Renderer:
    """Paints world snapshots onto an off-screen pygame surface."""

    # Colors
    COLOR_BG_TOP = (18, 28, 70)
    COLOR_BG_BOTTOM = (6, 8, 18)
    COLOR_PADDLE = (150, 190, 255)
    COLOR_PADDLE_SHINE = (210, 235, 255)
    COLOR_BALL = (160, 220, 255)
    COLOR_BALL_GLOW = (120, 200, 255, 70)
    COLOR_PARTICLE = (140, 210, 255)
    COLOR_HUD_BG = (10, 16, 40)
    COLOR_HUD_TEXT = (0, 183, 255)

    PARTICLE_FADE = 30

    def __init__(self, width, height):
        self.WIDTH, self.HEIGHT = int(width), int(height)

        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.WIDTH, self.HEIGHT))
        self.font = pygame.font.Font(None, 22)
        self.background = self._create_gradient_background()

    def draw(self, snapshot):
        self.screen.blit(self.background, (0, 0))
        self._render_game(snapshot)
        self._render_ui(snapshot)
        return self.screen

    def to_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _render_game(self, snapshot):
        # Bricks
        for brick in snapshot.bricks:
            if not brick.alive:
                continue
            rect = pygame.Rect(int(brick.x), int(brick.y), int(brick.width), int(brick.height))
            pygame.draw.rect(self.screen, self._brick_color(brick.row, brick.col), rect, border_radius=8)
            gloss = pygame.Rect(rect.x + 2, rect.y + 2, rect.width - 4, int(rect.height * 0.45))
            pygame.draw.rect(self.screen, self._brick_color(brick.row, brick.col, lightness=75), gloss, border_radius=7)

        # Paddle
        paddle = snapshot.paddle
        rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
        pygame.draw.rect(self.screen, self.COLOR_PADDLE, rect, border_radius=12)
        pygame.draw.rect(self.screen, self.COLOR_PADDLE_SHINE, (rect.x + 4, rect.y + 2, rect.width - 8, 4), border_radius=4)

        # Ball with glow
        ball = snapshot.ball
        cx, cy, r = int(ball.x), int(ball.y), int(ball.radius)
        glow = pygame.Surface((r * 4, r * 4), pygame.SRCALPHA)
        pygame.gfxdraw.filled_circle(glow, r * 2, r * 2, r + 4, self.COLOR_BALL_GLOW)
        self.screen.blit(glow, (cx - r * 2, cy - r * 2))
        pygame.gfxdraw.filled_circle(self.screen, cx, cy, r, self.COLOR_BALL)
        pygame.gfxdraw.aacircle(self.screen, cx, cy, r, self.COLOR_BALL)

        # Particles fade out over their last frames
        for p in snapshot.particles:
            alpha = int(255 * max(0.0, min(1.0, p.life / self.PARTICLE_FADE)))
            size = max(1, int(round(p.radius)))
            s = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            pygame.draw.circle(s, (*self.COLOR_PARTICLE, alpha), (size, size), size)
            self.screen.blit(s, (int(p.x) - size, int(p.y) - size))

    def _render_ui(self, snapshot):
        pygame.draw.rect(self.screen, self.COLOR_HUD_BG, (12, 10, 160, 28), border_radius=10)
        pygame.draw.rect(self.screen, self.COLOR_HUD_BG, (self.WIDTH - 172, 10, 160, 28), border_radius=10)

        score_text = self.font.render(f"Score: {snapshot.score}", True, self.COLOR_HUD_TEXT)
        self.screen.blit(score_text, (24, 16))
        lives_text = self.font.render(f"Lives: {snapshot.lives}", True, self.COLOR_HUD_TEXT)
        self.screen.blit(lives_text, (self.WIDTH - 154, 16))

    def _brick_color(self, row, col, lightness=58):
        color = pygame.Color(0, 0, 0)
        color.hsla = ((200 + row * 22 + col * 6) % 360, 95, lightness, 100)
        return color

    def _create_gradient_background(self):
        bg = pygame.Surface((self.WIDTH, self.HEIGHT))
        for y in range(self.HEIGHT):
            # Linear interpolation between top and bottom colors
            r = self.COLOR_BG_TOP[0] + (self.COLOR_BG_BOTTOM[0] - self.COLOR_BG_TOP[0]) * y / self.HEIGHT
            g = self.COLOR_BG_TOP[1] + (self.COLOR_BG_BOTTOM[1] - self.COLOR_BG_TOP[1]) * y / self.HEIGHT
            b = self.COLOR_BG_TOP[2] + (self.COLOR_BG_BOTTOM[2] - self.COLOR_BG_TOP[2]) * y / self.HEIGHT
            pygame.draw.line(bg, (int(r), int(g), int(b)), (0, y), (self.WIDTH, y))
        return bg

    def close(self):
        pygame.font.quit()
        pygame.quit()
