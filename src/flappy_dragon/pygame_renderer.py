"""
pygame_renderer.py: pygame implementation of the rendering/input boundary.

The text grid and the sprite layer share one 640x400 frame (8 px cells), so
grid row y and sprite pixel y * 8 line up. The frame is scaled to the window
on present().
"""

import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_COORD_TO_CONSOLE_COORD,
    SPRITE_LAYER_WIDTH, SPRITE_LAYER_HEIGHT, SPRITE_SHEET_REGIONS,
    WINDOW_TITLE, WINDOW_SCALE, BLACK, WHITE, TRANSPARENT
)
from .renderer import Color, Key, Layer, Rect, Renderer, StartupError

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_SPACE: Key.FLAP,
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
}


def translate_key(event: pygame.event.Event) -> Optional[Key]:
    """Maps a pygame event to a game key, or None if the game ignores it."""
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_BINDINGS.get(event.key)


def load_sprite_sheet(path: str,
                      regions: Sequence[Tuple[int, int, int, int]] = SPRITE_SHEET_REGIONS
                      ) -> List[pygame.Surface]:
    """Loads the sheet and cuts it into one surface per region."""
    if not os.path.isfile(path):
        raise StartupError(f"Sprite sheet not found: {path}")
    try:
        sheet = pygame.image.load(path)
    except pygame.error as e:
        raise StartupError(f"Could not load sprite sheet {path}: {e}") from e

    bounds = sheet.get_rect()
    sprites = []
    for region in regions:
        rect = pygame.Rect(region)
        if not bounds.contains(rect):
            raise StartupError(
                f"Sprite region {region} lies outside {path} ({bounds.width}x{bounds.height})")
        sprites.append(sheet.subsurface(rect))
    return sprites


def fit_font(cell: int) -> pygame.font.Font:
    """Largest default font whose line height fits one grid row."""
    for size in range(cell * 2, 1, -1):
        font = pygame.font.Font(None, size)
        if font.get_linesize() <= cell:
            return font
    return pygame.font.Font(None, 1)


class PygameRenderer(Renderer):
    """Owns the window, the font and the sprite sheet."""

    def __init__(self, sprite_sheet_path: str, scale: int = WINDOW_SCALE):
        pygame.init()
        self.cell = SPRITE_COORD_TO_CONSOLE_COORD
        try:
            self.screen = pygame.display.set_mode(
                (SPRITE_LAYER_WIDTH * scale, SPRITE_LAYER_HEIGHT * scale))
            pygame.display.set_caption(WINDOW_TITLE)
            self.sprites = [s.convert_alpha() for s in load_sprite_sheet(sprite_sheet_path)]
            self.font = fit_font(self.cell)
        except pygame.error as e:
            pygame.quit()
            raise StartupError(f"Could not set up the window: {e}") from e
        except StartupError:
            pygame.quit()
            raise

        self.frame_size = (SCREEN_WIDTH * self.cell, SCREEN_HEIGHT * self.cell)

        self.layers: Dict[Layer, pygame.Surface] = {
            Layer.TEXT: pygame.Surface(self.frame_size),
            Layer.SPRITE: pygame.Surface(self.frame_size, pygame.SRCALPHA),
        }
        self.sprite_queue: Dict[Layer, List[tuple]] = {layer: [] for layer in Layer}
        self._scaled_cache: Dict[tuple, pygame.Surface] = {}
        self.frame = pygame.Surface(self.frame_size)
        logger.info("Window created at %dx%d", *self.screen.get_size())

    # ---- Renderer ----

    def cls(self, layer: Layer):
        self.cls_bg(layer, BLACK if layer is Layer.TEXT else TRANSPARENT)

    def cls_bg(self, layer: Layer, color: Color):
        self.layers[layer].fill(color)
        self.sprite_queue[layer].clear()

    def add_sprite(self, layer: Layer, rect: Rect, z_order: int,
                   tint: Color, sprite_index: int):
        self.sprite_queue[layer].append((z_order, rect, tint, sprite_index))

    def print_centered(self, layer: Layer, y: int, text: str):
        surf = self.font.render(text, True, WHITE)
        x = (self.frame_size[0] - surf.get_width()) // 2
        self.layers[layer].blit(surf, (x, y * self.cell))

    def print_color(self, layer: Layer, x: int, y: int,
                    fg: Color, bg: Color, text: str):
        surf = self.font.render(text, True, fg, bg)
        self.layers[layer].blit(surf, (x * self.cell, y * self.cell))

    def present(self):
        self.frame.fill(BLACK)
        for layer in Layer:
            self._draw_sprites(layer)
            self.frame.blit(self.layers[layer], (0, 0))
        self.screen.blit(pygame.transform.scale(self.frame, self.screen.get_size()), (0, 0))
        pygame.display.flip()

    # ---- internals ----

    def _draw_sprites(self, layer: Layer):
        target = self.layers[layer]
        for z_order, rect, tint, index in sorted(self.sprite_queue[layer], key=lambda s: s[0]):
            target.blit(self._sprite_image(index, rect.width, rect.height, tint), (rect.x, rect.y))
        self.sprite_queue[layer].clear()

    def _sprite_image(self, index: int, width: int, height: int, tint: Color) -> pygame.Surface:
        key = (index, width, height, tuple(tint))
        image = self._scaled_cache.get(key)
        if image is None:
            image = pygame.transform.smoothscale(self.sprites[index], (width, height))
            if tuple(tint) != WHITE:
                image.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
            self._scaled_cache[key] = image
        return image

    def close(self):
        pygame.quit()
