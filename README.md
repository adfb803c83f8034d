# miniatari

This package holds the logic of a small handheld game console. The console has
a 128x64 monochrome screen. Its only input is an analogue joystick that can also
be pressed. The package contains a snake game, the menus around it (main menu,
selected game, pause, game over, name entry) and a pixel canvas that every
screen is drawn onto.

Nothing here talks to hardware. You pass in the joystick's readings and its
button level as plain callables. The screen is an in-memory `Canvas` that you
can inspect. So the whole console can be driven and checked from ordinary
Python.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Modules

- `miniatari.level.LevelTracker` keeps `score`, `level` and `delay_ms`.
  - `reset()` sets the score to 0, the level to 1 and the delay to 120 ms.
  - `increase_score()` adds one point. Every fifth point raises the level and
    lowers the delay by 20 ms, never below 40 ms.
  - Score and level are single bytes, so they wrap at 256.
- `miniatari.joystick`:
  - `direction_from_reading(JoystickReading(x, y))` turns raw 12-bit axis
    samples into a `Direction` (`NONE`, `UP`, `DOWN`, `LEFT`, `RIGHT`). The
    horizontal axis takes precedence, and the y axis is inverted.
  - `Joystick(sample, button_level, sleep=time.sleep)` reads the x sample and
    then the y sample from `sample()`.
    - `read()` returns the two samples.
    - `direction()` returns the direction they give.
    - `is_pressed()` is true while `button_level()` is false, since the button
      is active low. It waits 0.1 s to debounce after a press.
- `miniatari.display`:
  - `Canvas` is a frame buffer, 128x64 by default. Its methods are `fill`,
    `set_cursor`, `write_string`, `draw_pixel`, `get_pixel`, `draw_rectangle`,
    `fill_rectangle`, `draw_square` and `update_screen`.
  - Text is not rasterised. Each `write_string` call adds a `TextRecord` (the
    position, text, `Font` and `Color`) to `texts`.
  - `update_screen()` counts calls in `updates`. It also keeps a snapshot of
    the pixels and texts in `shown_pixels` and `shown_texts`.
  - The fonts `FONT_6X8`, `FONT_7X10`, `FONT_11X18`, `FONT_16X26`, `FONT_16X24`
    and `FONT_16X15` give the cell sizes.
- `miniatari.oled` provides `draw_centered_string`, `draw_horizontal_string`,
  `draw_horizontal_menu` and `draw_vertical_menu`.
  - The menu functions invert and mark the item at `current_index`.
  - Pass `AVOID_HIGHLIGHT` to highlight nothing.
- `miniatari.navigation`:
  - `navigate_up_down` and `navigate_right_left` move a menu index and stop at
    either end.
  - `navigate_up_down_loop` and `navigate_right_left_loop` wrap around instead.
  - `MenuState` names the screens the console can be on.
- `miniatari.snake.SnakeGame(rng=None, level=None)` is the snake game.
  - `reset()` places a three-block snake at (64, 32), heading right.
  - `steer(direction)` turns the snake but never reverses it.
  - `step(direction)` moves the snake one 4-pixel block. Eating food scores a
    point and grows the snake, up to 128 blocks. Hitting the wall or the body
    sets `game_over`.
  - `spawn_food()` picks a free grid cell for the food.
  - `draw(display)` renders the game onto a canvas.
- `miniatari.console.Console(display, joystick, sleep=time.sleep, rng=None)`
  ties everything together. Each call to `tick()` handles the current screen
  once:
  - the main menu
  - the selected game
  - game over
  - name entry

  Starting a game runs a countdown and then plays snake to the end. While
  playing, a press opens the pause menu. A new `Console` starts on the
  name-entry screen.

## Example

    import random

    from miniatari.joystick import Direction
    from miniatari.level import LevelTracker
    from miniatari.navigation import navigate_up_down_loop
    from miniatari.snake import SnakeGame

    level = LevelTracker()
    level.reset()
    for _ in range(5):
        level.increase_score()
    print(level.score, level.level, level.delay_ms)   # 5 2 100

    print(navigate_up_down_loop(Direction.UP, 0, 3))  # 2

    game = SnakeGame(rng=random.Random(1))
    game.step(Direction.NONE)
    print(game.head)                                  # Point(x=68, y=32)

To drive the whole console, give it a canvas and a joystick, then call
`tick()` in a loop:

    from miniatari.console import Console
    from miniatari.display import Canvas
    from miniatari.joystick import Joystick

    joystick = Joystick(sample=lambda: 2048, button_level=lambda: True,
                        sleep=lambda seconds: None)
    console = Console(Canvas(), joystick, sleep=lambda seconds: None)
    console.tick()

## What it does not do

- There is no command-line program and no window. The screen exists only as
  the `Canvas` in memory.
- Only the snake game can be played. The other entries in the main menu
  (`Game2` to `Game5`) start nothing.
- The leaderboard is not shown anywhere.
  - The "Leaderboard" item in the selected-game menu does nothing.
  - In the `LEADERBOARD` state, `tick()` does nothing.
- The name typed on the name-entry screen is not stored. "Save" and "Exit"
  both just return to the main menu, and `Console.leaderboard` keeps its
  initial entries.
- Nothing is written to disk.