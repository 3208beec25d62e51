"""
physics_core.py: Shared obstacle placement and loss rules.
"""

import random
from typing import List

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPAWN_JITTER, SPAWN_MARGIN
)
from .data_models import Player, Obstacle


class PhysicsCore:
    """
    Rules the engine applies on top of the entities' own physics.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def spawn_center(self, last_gap_y: int, rng: random.Random) -> int:
        """Seed gap for the next obstacle, drifting from the tail's gap."""
        center = rng.randint(last_gap_y - SPAWN_JITTER, last_gap_y + SPAWN_JITTER)
        center = min(center, self.SCREEN_HEIGHT - SPAWN_MARGIN)
        return max(center, SPAWN_MARGIN)

    def spawn_obstacle(self, player: Player, last_gap_y: int, score: float,
                       rng: random.Random) -> Obstacle:
        """A new obstacle one screen width ahead of the player."""
        return Obstacle.create(
            player.x + SCREEN_WIDTH, self.spawn_center(last_gap_y, rng), score, rng)

    def out_of_bounds(self, player: Player) -> bool:
        return player.y > self.SCREEN_HEIGHT

    def check_collision(self, player: Player, obstacles: List[Obstacle]) -> bool:
        """True if the player fell off the bottom or hit any obstacle."""
        if self.out_of_bounds(player):
            return True
        return any(obstacle.collides_with(player) for obstacle in obstacles)
