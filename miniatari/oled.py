"""Centered text and highlighted menus on the screen."""

from collections.abc import Sequence

from miniatari.display import HEIGHT, WIDTH, Canvas, Color, Font

AVOID_HIGHLIGHT = 255
"""Index that matches no menu item, so nothing is highlighted."""


def _u8(value: int) -> int:
    return value & 0xFF


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def draw_centered_string(display: Canvas, text: str, font: Font, color: Color) -> None:
    """Write a string in the middle of the screen."""
    x = _u8(_half(WIDTH - len(text) * font.width))
    y = _u8(_half(HEIGHT - font.height))
    display.set_cursor(x, y)
    display.write_string(text, font, color)


def draw_horizontal_string(display: Canvas, text: str, font: Font, y: int, color: Color) -> None:
    """Write a string centered horizontally on row ``y``."""
    x = _u8(_half(WIDTH - len(text) * font.width))
    display.set_cursor(x, y)
    display.write_string(text, font, color)


def draw_horizontal_menu(
    display: Canvas,
    items: Sequence[str],
    font: Font,
    y: int,
    color: Color,
    current_index: int,
) -> None:
    """Lay items out side by side; the current one is inverted and marked."""
    if not items:
        raise ValueError("a menu needs at least one item")
    section_width = WIDTH // len(items)
    for i, item in enumerate(items):
        word_pixel_width = _u8(_u8(len(item)) * font.width)
        center_x = _u8(i * section_width + section_width // 2)
        word_start_x = _u8(center_x - word_pixel_width // 2)
        if i == current_index:
            display.set_cursor(center_x, _u8(y - font.height - 2))
            display.write_string("V", font, color)
            display.fill_rectangle(
                _u8(word_start_x - 2),
                _u8(y - 1),
                _u8(word_start_x + word_pixel_width + 1),
                _u8(y + font.height),
                Color.WHITE,
            )
            display.set_cursor(word_start_x, y)
            display.write_string(item, font, Color.BLACK)
        else:
            display.set_cursor(word_start_x, y)
            display.write_string(item, font, color)


def draw_vertical_menu(
    display: Canvas,
    items: Sequence[str],
    font: Font,
    start_y: int,
    color: Color,
    current_index: int,
) -> None:
    """Stack centered items; the current one is inverted and bracketed."""
    line_height = font.height + 2
    for i, item in enumerate(items):
        y = _u8(start_y + i * line_height)
        string_pixel_width = _u8(len(item) * font.width)
        x = _u8(_half(WIDTH - string_pixel_width))
        if i == current_index:
            left_highlight_x = _u8(x - 2 * font.width)
            right_highlight_x = _u8(x + string_pixel_width + font.width)
            display.fill_rectangle(
                _u8(x - 2),
                _u8(y - 1),
                _u8(x + string_pixel_width + 1),
                _u8(y + font.height),
                Color.WHITE,
            )
            display.set_cursor(left_highlight_x, y)
            display.write_string(">", font, color)
            display.set_cursor(right_highlight_x, y)
            display.write_string("<", font, color)
            display.set_cursor(x, y)
            display.write_string(item, font, Color.BLACK)
        else:
            display.set_cursor(x, y)
            display.write_string(item, font, color)