import random

import pytest

from flappy_dragon.constants import FLAP_VELOCITY, MAX_FALL_VELOCITY, GRAVITY
from flappy_dragon.data_models import Obstacle, Player, gap_size
from flappy_dragon.renderer import Layer, Rect


def test_gravity_accelerates_until_cap():
    player = Player()
    previous = player.velocity
    for _ in range(30):
        player.advance()
        assert player.velocity <= MAX_FALL_VELOCITY
        if previous + GRAVITY < MAX_FALL_VELOCITY:
            assert player.velocity == pytest.approx(previous + GRAVITY)
        previous = player.velocity
    assert player.velocity == MAX_FALL_VELOCITY


def test_advance_moves_one_column_and_truncates_fall():
    player = Player(x=5, y=25, velocity=0.0)
    player.advance()
    assert (player.x, player.y) == (6, 25)     # 0.2 truncates to 0
    player.velocity = 1.7
    player.advance()
    assert (player.x, player.y) == (7, 26)


def test_flap_resets_velocity_regardless_of_prior_value():
    for velocity in (-2.0, -0.5, 0.0, 1.3, 2.0):
        player = Player(velocity=velocity)
        player.flap()
        assert player.velocity == FLAP_VELOCITY
        player.flap()
        assert player.velocity == FLAP_VELOCITY


def test_y_is_clamped_at_zero():
    player = Player(y=0)
    for _ in range(5):
        player.flap()
        player.advance()
        assert player.y == 0


def test_player_render_clears_sprite_layer_and_picks_animation_frame(renderer):
    Player(y=10).render(renderer, frame=6)
    assert renderer.calls[0] == ("cls", Layer.SPRITE)
    _, layer, rect, z_order, _, index = renderer.sprites()[0]
    assert layer is Layer.SPRITE
    assert rect == Rect(0, 72, 32, 32)
    assert z_order == 390
    assert index == 2


def test_gap_size_shrinks_with_score_and_floors_at_five():
    sizes = [gap_size(score / 10) for score in range(0, 400)]
    assert sizes[0] == 30
    assert all(a >= b for a, b in zip(sizes, sizes[1:]))
    assert min(sizes) == 5
    assert gap_size(24.99) == 6
    assert gap_size(1000.0) == 5


def test_create_picks_gap_near_seed():
    rng = random.Random(99)
    centers = {Obstacle.create(85, 25, 0.0, rng).gap_y for _ in range(500)}
    assert centers <= set(range(20, 31))
    assert {20, 30} <= centers


def test_create_sizes_gap_from_score():
    obstacle = Obstacle.create(100, 25, 3.7, random.Random(0))
    assert obstacle.x == 100
    assert obstacle.size == 27


@pytest.mark.parametrize("y, hit", [
    (0, True), (19, True), (20, False), (25, False), (30, False), (31, True), (49, True),
])
def test_collision_outside_gap_at_the_checked_column(y, hit):
    obstacle = Obstacle(x=85, gap_y=25, size=10)
    assert obstacle.collides_with(Player(x=81, y=y)) is hit


@pytest.mark.parametrize("x", [79, 80, 82, 85, 86])
def test_collision_is_a_single_column_window(x):
    # Only x == obstacle.x - 4 is tested; faster movement would skip it.
    obstacle = Obstacle(x=85, gap_y=25, size=10)
    assert not obstacle.collides_with(Player(x=x, y=0))


def test_obstacle_render_draws_both_walls(renderer):
    Obstacle(x=85, gap_y=25, size=10).render(renderer, player_x=5)
    sprites = renderer.sprites()
    rows = sorted(rect.y // 8 for _, _, rect, _, _, _ in sprites)
    assert rows == list(range(0, 20)) + list(range(30, 50))
    assert all(rect == Rect(640, rect.y, 8, 8) for _, _, rect, _, _, _ in sprites)
    assert all(index == 4 for *_, index in sprites)
