"""Menu states and cursor movement through menus."""

from enum import Enum

from miniatari.joystick import Direction


class MenuState(Enum):
    """Screen the console is showing."""

    MAIN = 0
    SELECTED = 1
    LEADERBOARD = 2
    PLAYING = 3
    PAUSED = 4
    GAMEOVER = 5
    SAVE = 6


def _step(direction: Direction, index: int, count: int, back: Direction, forward: Direction) -> int:
    if direction is back and index != 0:
        return index - 1
    if direction is forward and index < count - 1:
        return index + 1
    return index


def _step_loop(direction: Direction, index: int, count: int, back: Direction, forward: Direction) -> int:
    if count < 1:
        raise ValueError("a looping menu needs at least one item")
    if direction is back:
        return (index + count - 1) % count
    if direction is forward:
        return (index + 1) % count
    return index


def navigate_up_down(direction: Direction, index: int, count: int) -> int:
    """Move up or down, stopping at the first and last item."""
    return _step(direction, index, count, Direction.UP, Direction.DOWN)


def navigate_right_left(direction: Direction, index: int, count: int) -> int:
    """Move left or right, stopping at the first and last item."""
    return _step(direction, index, count, Direction.LEFT, Direction.RIGHT)


def navigate_up_down_loop(direction: Direction, index: int, count: int) -> int:
    """Move up or down, wrapping around at either end."""
    return _step_loop(direction, index, count, Direction.UP, Direction.DOWN)


def navigate_right_left_loop(direction: Direction, index: int, count: int) -> int:
    """Move left or right, wrapping around at either end."""
    return _step_loop(direction, index, count, Direction.LEFT, Direction.RIGHT)