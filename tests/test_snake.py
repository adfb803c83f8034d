import random

import pytest

from miniatari.display import Canvas, Color
from miniatari.joystick import Direction
from miniatari.level import LevelTracker
from miniatari.snake import (
    BLOCK_SIZE,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    Point,
    SnakeGame,
)


@pytest.fixture
def game():
    return SnakeGame(rng=random.Random(1234))


def test_reset_places_snake_in_middle(game):
    assert game.length == 3
    assert game.segments == (Point(64, 32), Point(60, 32), Point(56, 32))
    assert game.direction is Direction.RIGHT
    assert not game.game_over
    assert game.food not in game.segments


def test_steer_refuses_reversal(game):
    assert game.steer(Direction.LEFT) is Direction.RIGHT
    assert game.steer(Direction.NONE) is Direction.RIGHT
    assert game.steer(Direction.UP) is Direction.UP
    assert game.steer(Direction.DOWN) is Direction.UP


def test_step_moves_head_and_body(game):
    before = game.segments
    game.food = Point(0, 0)
    game.step(Direction.NONE)
    assert game.head == Point(before[0].x + BLOCK_SIZE, before[0].y)
    assert game.segments[1:] == before[:-1]
    assert game.length == 3


def test_eating_grows_and_scores():
    level = LevelTracker()
    level.reset()
    game = SnakeGame(rng=random.Random(7), level=level)
    target = Point(game.head.x + BLOCK_SIZE, game.head.y)
    game.food = target
    game.step(Direction.NONE)
    assert game.length == 4
    assert level.score == 1
    assert game.head == target
    assert game.food not in game.segments


def test_wall_collision_ends_game(game):
    game.food = Point(0, 0)
    for _ in range(40):
        if game.game_over:
            break
        game.step(Direction.UP)
    assert game.game_over
    assert game.head.y >= BOARD_HEIGHT


def test_right_wall_ends_game(game):
    game.food = Point(0, 0)
    for _ in range(40):
        if game.game_over:
            break
        game.step(Direction.NONE)
    assert game.game_over
    assert game.head.x == BOARD_WIDTH


def test_step_after_game_over_is_ignored(game):
    game.food = Point(0, 0)
    while not game.game_over:
        game.step(Direction.NONE)
    head = game.head
    game.step(Direction.DOWN)
    assert game.head == head


def test_spawn_food_stays_on_free_grid_cells(game):
    for _ in range(200):
        food = game.spawn_food()
        assert food == game.food
        assert food.x % BLOCK_SIZE == 0 and food.y % BLOCK_SIZE == 0
        assert 0 <= food.x < BOARD_WIDTH
        assert 0 <= food.y < BOARD_HEIGHT
        assert food not in game.segments


def test_draw_paints_border_food_and_snake(game):
    canvas = Canvas()
    game.draw(canvas)
    assert canvas.updates == 1
    assert canvas.get_pixel(0, 0) is Color.WHITE
    assert canvas.get_pixel(BOARD_WIDTH - 1, BOARD_HEIGHT - 1) is Color.WHITE
    assert canvas.get_pixel(game.food.x, game.food.y) is Color.WHITE
    for segment in game.segments:
        assert canvas.get_pixel(segment.x + BLOCK_SIZE - 1, segment.y + BLOCK_SIZE - 1) is Color.WHITE
    assert canvas.get_pixel(2, 2) is Color.BLACK or Point(0, 0) == game.food