"""
renderer.py: The rendering/input boundary consumed by the game engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Color = Tuple[int, int, int, int]


class StartupError(RuntimeError):
    """The window or the sprite sheet could not be set up."""


class Layer(Enum):
    """Draw target: the text grid or the sprite layer drawn over it."""
    TEXT = 0
    SPRITE = 1


class Key(Enum):
    """The only inputs the game reacts to."""
    FLAP = "flap"
    PLAY = "play"
    QUIT = "quit"


@dataclass(frozen=True)
class Rect:
    """Pixel rectangle on the sprite layer."""
    x: int
    y: int
    width: int
    height: int


class Renderer(ABC):
    """Drawing primitives. Every call names the layer it draws on."""

    @abstractmethod
    def cls(self, layer: Layer):
        """Clear a layer to its default (black text grid, empty sprite layer)."""

    @abstractmethod
    def cls_bg(self, layer: Layer, color: Color):
        """Clear a layer to a background color."""

    @abstractmethod
    def add_sprite(self, layer: Layer, rect: Rect, z_order: int,
                   tint: Color, sprite_index: int):
        """Queue a sprite; higher z_order is drawn on top."""

    @abstractmethod
    def print_centered(self, layer: Layer, y: int, text: str):
        """Print white text horizontally centered on grid row y."""

    @abstractmethod
    def print_color(self, layer: Layer, x: int, y: int,
                    fg: Color, bg: Color, text: str):
        """Print colored text starting at grid cell (x, y)."""

    @abstractmethod
    def present(self):
        """Compose the layers and show the frame."""


@dataclass
class TickContext:
    """What the runtime hands the engine once per rendered frame."""
    renderer: Renderer
    frame_time_ms: float
    key: Optional[Key] = None
    quitting: bool = False              # Set by the engine to end the process
