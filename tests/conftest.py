import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_dragon.game_engine import GameEngine  # noqa: E402
from flappy_dragon.renderer import Renderer, TickContext  # noqa: E402


class RecordingRenderer(Renderer):
    """Keeps every draw call so tests can inspect a frame."""

    def __init__(self):
        self.calls = []

    def cls(self, layer):
        self.calls.append(("cls", layer))

    def cls_bg(self, layer, color):
        self.calls.append(("cls_bg", layer, color))

    def add_sprite(self, layer, rect, z_order, tint, sprite_index):
        self.calls.append(("sprite", layer, rect, z_order, tint, sprite_index))

    def print_centered(self, layer, y, text):
        self.calls.append(("centered", layer, y, text))

    def print_color(self, layer, x, y, fg, bg, text):
        self.calls.append(("color", layer, x, y, fg, bg, text))

    def present(self):
        self.calls.append(("present",))

    def sprites(self):
        return [c for c in self.calls if c[0] == "sprite"]

    def texts(self):
        return [c[-1] for c in self.calls if c[0] in ("centered", "color")]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def engine():
    return GameEngine(rng=random.Random(1234))


@pytest.fixture
def tick(engine, renderer):
    """Runs one engine tick and returns its context."""
    def _tick(frame_time_ms=0.0, key=None):
        ctx = TickContext(renderer, frame_time_ms, key)
        engine.tick(ctx)
        return ctx
    return _tick


@pytest.fixture
def sprite_sheet(tmp_path):
    """A blank sheet just large enough for every sprite region."""
    import pygame
    from flappy_dragon.constants import SPRITE_SHEET_REGIONS

    width = max(x + w for x, _, w, _ in SPRITE_SHEET_REGIONS)
    height = max(y + h for _, y, _, h in SPRITE_SHEET_REGIONS)
    path = tmp_path / "all.bmp"
    pygame.image.save(pygame.Surface((width, height)), str(path))
    return str(path)
