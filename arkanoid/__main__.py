import logging
import os
import sys

import pygame

from arkanoid.engine import ArkanoidEngine
from arkanoid.render import Renderer


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    # We need to unset the dummy driver if we want to see the window
    if os.environ.get("SDL_VIDEODRIVER") == "dummy":
        del os.environ["SDL_VIDEODRIVER"]

    engine = ArkanoidEngine()
    config = engine.config
    renderer = Renderer(config.play_width, config.play_height)

    play_screen = pygame.display.set_mode((renderer.WIDTH, renderer.HEIGHT))
    pygame.display.set_caption("Arkanoid")
    clock = pygame.time.Clock()

    running = True
    while running:
        # --- Pygame event handling ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                engine.set_paddle_target(event.pos[0] - config.paddle_width / 2)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                engine.reset()

        engine.step()

        # --- Rendering ---
        play_screen.blit(renderer.draw(engine.snapshot()), (0, 0))
        pygame.display.flip()

        # --- Frame rate ---
        clock.tick(60)

    print(f"Final Score: {engine.score}")
    renderer.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
