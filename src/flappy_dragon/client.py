"""
client.py: The window run loop feeding ticks into the game engine.
"""

import logging
import random
from typing import Optional

import pygame

from .constants import RENDER_FPS, SPRITE_SHEET_PATH, WINDOW_SCALE
from .game_engine import GameEngine
from .pygame_renderer import PygameRenderer, translate_key
from .renderer import Key, TickContext

logger = logging.getLogger(__name__)


class FlappyClient:
    def __init__(self, sprite_sheet_path: str = SPRITE_SHEET_PATH,
                 seed: Optional[int] = None, fps: int = RENDER_FPS,
                 scale: int = WINDOW_SCALE):
        self.renderer = PygameRenderer(sprite_sheet_path, scale=scale)
        self.engine = GameEngine(rng=random.Random(seed))
        self.fps = fps
        self.clock = pygame.time.Clock()

    def _poll_input(self) -> tuple[Optional[Key], bool]:
        """Drains the event queue; returns the first game key and whether the window closed."""
        key = None
        closed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                closed = True
            elif key is None:
                key = translate_key(event)
        return key, closed

    def run(self):
        """The main client execution loop."""
        logger.info("Starting game loop at %d FPS", self.fps)
        running = True
        try:
            while running:
                frame_time_ms = self.clock.tick(self.fps)
                key, closed = self._poll_input()
                if closed:
                    break

                ctx = TickContext(self.renderer, float(frame_time_ms), key)
                self.engine.tick(ctx)
                self.renderer.present()
                running = not ctx.quitting
        finally:
            self.renderer.close()
        logger.info("Game closed")
