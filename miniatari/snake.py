"""The snake game: a snake on a block grid that grows when it eats."""

from __future__ import annotations

import random
from dataclasses import dataclass

from miniatari.display import Canvas, Color
from miniatari.joystick import Direction
from miniatari.level import LevelTracker

SNAKE_MAX_LENGTH = 128
BOARD_WIDTH = 128
BOARD_HEIGHT = 64
BLOCK_SIZE = 4
START_LENGTH = 3
START_X = 64
START_Y = 32

_BYTE_MASK = 0xFF

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (0, -BLOCK_SIZE),
    Direction.DOWN: (0, BLOCK_SIZE),
    Direction.LEFT: (-BLOCK_SIZE, 0),
    Direction.RIGHT: (BLOCK_SIZE, 0),
}


@dataclass(frozen=True)
class Point:
    """A pixel position; both coordinates are single bytes."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Point:
        return Point((self.x + dx) & _BYTE_MASK, (self.y + dy) & _BYTE_MASK)


class SnakeGame:
    """State and rules of one snake game.

    Besides the body the game keeps one extra cell: the place the tail has
    just left. It counts for collisions, so the head may not move straight
    into the cell the tail vacated on the previous step.
    """

    def __init__(self, rng: random.Random | None = None, level: LevelTracker | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.level = level if level is not None else LevelTracker()
        self.reset()

    def reset(self) -> None:
        """Put a three-block snake in the middle, heading right, and place food."""
        self.length = START_LENGTH
        self.direction = Direction.RIGHT
        self.game_over = False
        self._slots = [Point(START_X - i * BLOCK_SIZE, START_Y) for i in range(START_LENGTH)]
        self._slots.append(self._slots[-1])
        self.food = Point(0, 0)
        self.spawn_food()

    @property
    def segments(self) -> tuple[Point, ...]:
        """The body, head first."""
        return tuple(self._slots[: self.length])

    @property
    def head(self) -> Point:
        return self._slots[0]

    def steer(self, direction: Direction) -> Direction:
        """Turn towards ``direction`` unless that means reversing."""
        if direction is not Direction.NONE and _OPPOSITE.get(direction) is not self.direction:
            self.direction = direction
        return self.direction

    def step(self, direction: Direction) -> None:
        """Advance the snake one block, steering by the given input first."""
        if self.game_over:
            return
        self.steer(direction)

        self._slots[1 : self.length + 1] = self._slots[: self.length]
        dx, dy = _OFFSETS.get(self.direction, (0, 0))
        head = self._slots[0].moved(dx, dy)
        self._slots[0] = head

        if head == self.food:
            self.level.increase_score()
            if self.length < SNAKE_MAX_LENGTH:
                self._slots[self.length] = self._slots[self.length - 1]
                self.length += 1
                self._slots.append(self._slots[self.length - 1])
            self.spawn_food()

        if head.x >= BOARD_WIDTH or head.y >= BOARD_HEIGHT:
            self.game_over = True
            return

        if head in self._slots[1 : self.length + 1]:
            self.game_over = True

    def spawn_food(self) -> Point:
        """Place food on a free grid cell and return where it went."""
        body = set(self.segments)
        while True:
            candidate = Point(
                self.rng.randrange(BOARD_WIDTH // BLOCK_SIZE) * BLOCK_SIZE,
                self.rng.randrange(BOARD_HEIGHT // BLOCK_SIZE) * BLOCK_SIZE,
            )
            if candidate not in body:
                self.food = candidate
                return candidate

    def draw(self, display: Canvas) -> None:
        """Draw the frame, the food and the snake, then show it."""
        display.fill(Color.BLACK)
        display.draw_rectangle(0, 0, BOARD_WIDTH - 1, BOARD_HEIGHT - 1, Color.WHITE)
        display.draw_square(self.food.x, self.food.y, BLOCK_SIZE, Color.WHITE)
        for segment in self.segments:
            display.draw_square(segment.x, segment.y, BLOCK_SIZE, Color.WHITE)
        display.update_screen()