"""Analog joystick with a push button."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

JOYSTICK_THRESHOLD_LOW = 1100
JOYSTICK_THRESHOLD_HIGH = 3200
ADC_MAX = 4095
BUTTON_DEBOUNCE_S = 0.1

_WORD_MASK = 0xFFFF


class Direction(Enum):
    """Direction the stick is pushed to."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


@dataclass(frozen=True)
class JoystickReading:
    """Raw 12-bit samples of the two axes."""

    x: int
    y: int


def direction_from_reading(reading: JoystickReading) -> Direction:
    """Turn a raw reading into a direction; the horizontal axis wins."""
    y = (ADC_MAX - reading.y) & _WORD_MASK
    if reading.x > JOYSTICK_THRESHOLD_HIGH:
        return Direction.RIGHT
    if reading.x < JOYSTICK_THRESHOLD_LOW:
        return Direction.LEFT
    if y > JOYSTICK_THRESHOLD_HIGH:
        return Direction.UP
    if y < JOYSTICK_THRESHOLD_LOW:
        return Direction.DOWN
    return Direction.NONE


class Joystick:
    """A joystick read through a converter and an active-low button.

    ``sample`` returns the next conversion: the x axis, then the y axis.
    ``button_level`` returns the logic level of the button line, which is
    low while the button is held down.
    """

    def __init__(
        self,
        sample: Callable[[], int],
        button_level: Callable[[], bool],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._sample = sample
        self._button_level = button_level
        self._sleep = sleep

    def read(self) -> JoystickReading:
        """Convert the x axis, then the y axis."""
        x = self._sample() & _WORD_MASK
        y = self._sample() & _WORD_MASK
        return JoystickReading(x, y)

    def direction(self) -> Direction:
        """Read both axes and report the direction."""
        return direction_from_reading(self.read())

    def is_pressed(self) -> bool:
        """Report a press, waiting out the bounce when there is one."""
        if not self._button_level():
            self._sleep(BUTTON_DEBOUNCE_S)
            return True
        return False