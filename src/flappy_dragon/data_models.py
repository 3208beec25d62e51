"""
data_models.py: The player and obstacle entities and the game mode.
"""

import random
from dataclasses import dataclass
from enum import Enum

from .constants import (
    GRAVITY, MAX_FALL_VELOCITY, FLAP_VELOCITY, SCREEN_HEIGHT,
    PLAYER_START_X, PLAYER_START_Y, PLAYER_SPRITE_SIZE, PLAYER_ANIMATION_FRAMES,
    MIN_GAP_SIZE, MAX_GAP_SIZE, GAP_JITTER, OBSTACLE_SPRITE_INDEX,
    SPRITE_COORD_TO_CONSOLE_COORD, SPRITE_LAYER_HEIGHT, WHITE
)
from .renderer import Layer, Rect, Renderer

CELL = SPRITE_COORD_TO_CONSOLE_COORD


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


def gap_size(score: float) -> int:
    """Gap height for an obstacle spawned at the given score."""
    return max(MIN_GAP_SIZE, MAX_GAP_SIZE - int(score))


@dataclass
class Player:
    """The dragon. y grows downward; x is the distance flown."""
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0

    def advance(self):
        """One fixed physics step: gravity, fall, move right one cell."""
        self.velocity = min(self.velocity + GRAVITY, MAX_FALL_VELOCITY)
        self.y += int(self.velocity)
        self.x += 1
        if self.y < 0:
            self.y = 0

    def flap(self):
        self.velocity = FLAP_VELOCITY

    def render(self, renderer: Renderer, frame: int):
        renderer.cls(Layer.SPRITE)
        renderer.add_sprite(
            Layer.SPRITE,
            Rect(0, self.y * CELL - CELL, PLAYER_SPRITE_SIZE, PLAYER_SPRITE_SIZE),
            SPRITE_LAYER_HEIGHT - self.y,
            WHITE,
            frame % PLAYER_ANIMATION_FRAMES,
        )


@dataclass
class Obstacle:
    """A wall column with a gap of `size` rows centered on gap_y."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def create(cls, x: int, seed_gap_y: int, score: float,
               rng: random.Random) -> "Obstacle":
        gap_y = rng.randint(seed_gap_y - GAP_JITTER, seed_gap_y + GAP_JITTER)
        return cls(x=x, gap_y=gap_y, size=gap_size(score))

    @property
    def gap_top(self) -> int:
        return self.gap_y - self.size // 2

    @property
    def gap_bottom(self) -> int:
        return self.gap_y + self.size // 2

    def render(self, renderer: Renderer, player_x: int):
        screen_x = self.x - player_x
        rows = list(range(0, self.gap_top)) + list(range(self.gap_bottom, SCREEN_HEIGHT))
        for y in rows:
            renderer.add_sprite(
                Layer.SPRITE,
                Rect(screen_x * CELL, y * CELL, CELL, CELL),
                SPRITE_LAYER_HEIGHT - y,
                WHITE,
                OBSTACLE_SPRITE_INDEX,
            )

    def collides_with(self, player: Player) -> bool:
        # Exact column match: the player moves one cell per step, so this
        # column is visited on exactly one physics step.
        does_x_match = player.x == self.x - CELL // 2
        above_gap = player.y < self.gap_top
        below_gap = player.y > self.gap_bottom
        return does_x_match and (above_gap or below_gap)
