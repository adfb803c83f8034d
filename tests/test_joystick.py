import pytest

from miniatari.joystick import (
    ADC_MAX,
    BUTTON_DEBOUNCE_S,
    JOYSTICK_THRESHOLD_HIGH,
    JOYSTICK_THRESHOLD_LOW,
    Direction,
    Joystick,
    JoystickReading,
    direction_from_reading,
)

CENTER = 2048


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (CENTER, CENTER, Direction.NONE),
        (ADC_MAX, CENTER, Direction.RIGHT),
        (0, CENTER, Direction.LEFT),
        (CENTER, 0, Direction.UP),
        (CENTER, ADC_MAX, Direction.DOWN),
        (ADC_MAX, 0, Direction.RIGHT),
        (0, ADC_MAX, Direction.LEFT),
    ],
)
def test_direction_from_reading(x, y, expected):
    assert direction_from_reading(JoystickReading(x, y)) is expected


def test_horizontal_thresholds_are_strict():
    assert direction_from_reading(JoystickReading(JOYSTICK_THRESHOLD_HIGH, CENTER)) is Direction.NONE
    assert direction_from_reading(JoystickReading(JOYSTICK_THRESHOLD_HIGH + 1, CENTER)) is Direction.RIGHT
    assert direction_from_reading(JoystickReading(JOYSTICK_THRESHOLD_LOW, CENTER)) is Direction.NONE
    assert direction_from_reading(JoystickReading(JOYSTICK_THRESHOLD_LOW - 1, CENTER)) is Direction.LEFT


def test_vertical_axis_is_inverted():
    up_edge = ADC_MAX - JOYSTICK_THRESHOLD_HIGH
    down_edge = ADC_MAX - JOYSTICK_THRESHOLD_LOW
    assert direction_from_reading(JoystickReading(CENTER, up_edge)) is Direction.NONE
    assert direction_from_reading(JoystickReading(CENTER, up_edge - 1)) is Direction.UP
    assert direction_from_reading(JoystickReading(CENTER, down_edge)) is Direction.NONE
    assert direction_from_reading(JoystickReading(CENTER, down_edge + 1)) is Direction.DOWN


def test_read_samples_x_then_y():
    samples = iter([10, 20])
    stick = Joystick(lambda: next(samples), lambda: True, sleep=lambda _: None)
    assert stick.read() == JoystickReading(10, 20)


def test_direction_uses_two_samples():
    samples = iter([CENTER, ADC_MAX, 0, CENTER])
    stick = Joystick(lambda: next(samples), lambda: True, sleep=lambda _: None)
    assert stick.direction() is Direction.DOWN
    assert stick.direction() is Direction.LEFT


def test_pressed_when_line_low_and_debounced():
    waits = []
    stick = Joystick(lambda: CENTER, lambda: False, sleep=waits.append)
    assert stick.is_pressed() is True
    assert waits == [BUTTON_DEBOUNCE_S]


def test_not_pressed_when_line_high():
    waits = []
    stick = Joystick(lambda: CENTER, lambda: True, sleep=waits.append)
    assert stick.is_pressed() is False
    assert waits == []