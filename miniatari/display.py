"""Monochrome 128x64 frame buffer with text placement records."""

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 128
HEIGHT = 64


class Color(IntEnum):
    """Pixel colour: off or on."""

    BLACK = 0
    WHITE = 1


@dataclass(frozen=True)
class Font:
    """Character cell size of a fixed font."""

    width: int
    height: int


FONT_6X8 = Font(6, 8)
FONT_7X10 = Font(7, 10)
FONT_11X18 = Font(11, 18)
FONT_16X26 = Font(16, 26)
FONT_16X24 = Font(16, 24)
FONT_16X15 = Font(16, 15)


@dataclass(frozen=True)
class TextRecord:
    """A string written at a cursor position."""

    x: int
    y: int
    text: str
    font: Font
    color: Color


class Canvas:
    """Drawing surface for the screen.

    Pixels are kept in a frame buffer; strings are kept as records of where
    and how they were written. ``update_screen`` takes a snapshot of both.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("canvas must be at least one pixel in each direction")
        self.width = width
        self.height = height
        self._pixels = [bytearray(width) for _ in range(height)]
        self.texts: list[TextRecord] = []
        self._cursor = (0, 0)
        self.updates = 0
        self.shown_pixels: tuple[bytes, ...] = tuple(bytes(row) for row in self._pixels)
        self.shown_texts: tuple[TextRecord, ...] = ()

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor

    def fill(self, color: Color) -> None:
        """Paint every pixel with one colour and drop all text."""
        value = Color(color).value
        for row in self._pixels:
            row[:] = bytes([value]) * self.width
        self.texts.clear()

    def set_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def write_string(self, text: str, font: Font, color: Color) -> TextRecord:
        """Place a string at the cursor and move the cursor past it."""
        x, y = self._cursor
        record = TextRecord(x, y, text, font, Color(color))
        self.texts.append(record)
        self._cursor = (x + len(text) * font.width, y)
        return record

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; coordinates off the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y][x] = Color(color).value

    def get_pixel(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"pixel ({x}, {y}) is outside the canvas")
        return Color(self._pixels[y][x])

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Outline a rectangle, corners included."""
        left, right = sorted((x1, x2))
        top, bottom = sorted((y1, y2))
        for x in range(left, right + 1):
            self.draw_pixel(x, top, color)
            self.draw_pixel(x, bottom, color)
        for y in range(top, bottom + 1):
            self.draw_pixel(left, y, color)
            self.draw_pixel(right, y, color)

    def fill_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Fill a rectangle, border included."""
        left, right = sorted((x1, x2))
        top, bottom = sorted((y1, y2))
        value = Color(color).value
        for y in range(max(top, 0), min(bottom, self.height - 1) + 1):
            row = self._pixels[y]
            for x in range(max(left, 0), min(right, self.width - 1) + 1):
                row[x] = value

    def draw_square(self, x: int, y: int, size: int, color: Color) -> None:
        """Fill a size-by-size square whose top left corner is (x, y)."""
        if size > 0:
            self.fill_rectangle(x, y, x + size - 1, y + size - 1, color)

    def update_screen(self) -> None:
        """Show the current contents."""
        self.updates += 1
        self.shown_pixels = tuple(bytes(row) for row in self._pixels)
        self.shown_texts = tuple(self.texts)