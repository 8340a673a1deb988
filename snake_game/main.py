#!/usr/bin/env python3
"""
Snake — Pygame implementation.

Controls
- Arrow keys / WASD: move
- Space / P: pause / resume
- R / Enter: restart
- Esc or window close: quit

Requirements
- Python 3.8+
- pygame 2.x, python-dotenv  ->  pip install -e .
"""
import logging

import pygame

from .config import LOG_LEVEL, RENDER_FPS, WINDOW_H, WINDOW_W
from .controls import EffectKind
from .persistence import HighScoreStore
from .render import Renderer
from .scheduler import TICK_EVENT, Scheduler
from .session import GameSession

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.display.set_caption("Snake — Arrows/WASD | Space: Pause | R: Restart | Esc: Quit")
    screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
    clock = pygame.time.Clock()
    renderer = Renderer(screen)

    session = GameSession(HighScoreStore(), Scheduler(TICK_EVENT))
    session.start()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if session.handle_key(event.key).kind is EffectKind.QUIT:
                        running = False
                elif event.type == TICK_EVENT:
                    session.tick()

            renderer.draw(session.state)
            pygame.display.flip()
            clock.tick(RENDER_FPS)  # logic is driven by TICK_EVENT
    finally:
        session.teardown()
        pygame.quit()


if __name__ == "__main__":
    main()
