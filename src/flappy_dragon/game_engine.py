"""
game_engine.py: The tick-driven simulation and its mode state machine.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, SCORE_PER_OBSTACLE, FRAME_COUNTER_WRAP,
    WHITE, BLACK, NAVY
)
from .data_models import GameMode, Player, Obstacle
from .physics_core import PhysicsCore
from .renderer import Key, Layer, TickContext

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the whole game state and advances it once per rendered frame.
    Physics, spawning and scoring run on a fixed 75 ms step; input and
    drawing happen every tick.
    """
    rng: random.Random = field(default_factory=random.Random)
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    frame_time: float = 0.0
    frame: int = 0
    mode: GameMode = GameMode.MENU
    score: float = 0.0

    def __post_init__(self):
        if not self.obstacles:
            self.obstacles = [self._first_obstacle()]

    def _first_obstacle(self) -> Obstacle:
        return Obstacle.create(
            self.player.x + SCREEN_WIDTH, SCREEN_HEIGHT // 2, 0.0, self.rng)

    def tick(self, ctx: TickContext):
        if self.mode is GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode is GameMode.PLAYING:
            self.play(ctx)
        elif self.mode is GameMode.END:
            self.dead(ctx)
        else:
            raise AssertionError(f"Unhandled game mode: {self.mode}")

    def restart(self):
        """Start a fresh run, discarding everything from the previous one."""
        self.player = Player()
        self.frame_time = 0.0
        self.frame = 0
        self.score = 0.0
        self.obstacles = [self._first_obstacle()]
        self.mode = GameMode.PLAYING
        logger.info("New run started")

    def _handle_menu_keys(self, ctx: TickContext):
        if ctx.key is Key.PLAY:
            self.restart()
        elif ctx.key is Key.QUIT:
            logger.info("Quit requested from %s", self.mode.value)
            ctx.quitting = True

    def main_menu(self, ctx: TickContext):
        renderer = ctx.renderer
        renderer.cls(Layer.SPRITE)
        renderer.cls(Layer.TEXT)
        renderer.print_centered(Layer.TEXT, 5, "Welcome to Flappy Dragon")
        renderer.print_centered(Layer.TEXT, 8, "(P)lay Game")
        renderer.print_centered(Layer.TEXT, 9, "(Q)uit Game")
        self._handle_menu_keys(ctx)

    def dead(self, ctx: TickContext):
        renderer = ctx.renderer
        renderer.cls(Layer.SPRITE)
        renderer.cls(Layer.TEXT)
        renderer.print_centered(Layer.TEXT, 5, "You are dead!")
        renderer.print_centered(Layer.TEXT, 6, f"You earned {int(self.score)} points")
        renderer.print_centered(Layer.TEXT, 8, "(P)lay Game")
        renderer.print_centered(Layer.TEXT, 9, "(Q)uit Game")
        self._handle_menu_keys(ctx)

    def _physics_step(self):
        assert self.obstacles, "obstacle sequence is never empty during a run"
        self.frame = (self.frame + 1) % FRAME_COUNTER_WRAP
        self.player.advance()
        tail = self.obstacles[-1]
        obstacle = self.spawn_obstacle(self.player, tail.gap_y, self.score, self.rng)
        self.obstacles.append(obstacle)
        logger.debug("Spawned obstacle at x=%d gap_y=%d size=%d",
                     obstacle.x, obstacle.gap_y, obstacle.size)

    def play(self, ctx: TickContext):
        renderer = ctx.renderer
        renderer.cls_bg(Layer.TEXT, NAVY)

        # 1. Fixed-step physics and spawning
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self._physics_step()

        # 2. Input is sampled every tick
        if ctx.key is Key.FLAP:
            self.player.flap()
        self.player.render(renderer, self.frame)

        # 3. Score and retire the head obstacle once passed
        assert self.obstacles, "obstacle sequence is never empty during a run"
        if self.player.x > self.obstacles[0].x:
            self.score += SCORE_PER_OBSTACLE
            passed = self.obstacles.pop(0)
            logger.debug("Passed obstacle at x=%d, score %.2f", passed.x, self.score)

        # 4. Draw obstacles and test for a loss
        for obstacle in self.obstacles:
            obstacle.render(renderer, self.player.x)
        if self.check_collision(self.player, self.obstacles):
            self.mode = GameMode.END
            logger.info("Run over at x=%d y=%d with %d points",
                        self.player.x, self.player.y, int(self.score))

        # 5. HUD
        renderer.print_color(Layer.TEXT, 0, 0, WHITE, BLACK, "Press SPACE to flap.")
        renderer.print_color(Layer.TEXT, 0, 1, WHITE, BLACK, f"Score: {int(self.score)}")
