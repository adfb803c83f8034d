"""The console: menus, game start, pause, game over and name entry."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from miniatari.display import (
    FONT_6X8,
    FONT_7X10,
    FONT_11X18,
    FONT_16X24,
    Canvas,
    Color,
)
from miniatari.joystick import Direction, Joystick
from miniatari.level import LevelTracker
from miniatari.navigation import (
    MenuState,
    navigate_right_left,
    navigate_right_left_loop,
    navigate_up_down,
)
from miniatari.oled import (
    AVOID_HIGHLIGHT,
    draw_horizontal_menu,
    draw_horizontal_string,
    draw_vertical_menu,
)
from miniatari.snake import SnakeGame

COUNTDOWN = 3
MAX_NAME_LENGTH = 11
LEADERBOARD_TOP_COUNT = 3
ALPHABET_COUNT = 26

MENU_REPEAT_S = 0.1
PAUSE_ENTRY_S = 0.5
GAME_END_S = 1.0

MAIN_MENU_ITEMS = ("Snake Game", "Game2", "Game3", "Game4", "Game5")
SELECTED_ITEMS = ("Start Game", "Leaderboard", "Main Menu")
PAUSED_ITEMS = ("Continue", "Exit")
GAMEOVER_ITEMS = ("Play Again", "Main Menu", "Save Score")
SAVE_ITEMS = ("Save", "Bksp", "Exit")

_STATS_HEADER = ">---YOUR STATS---<"


class MainMenuItem(IntEnum):
    SNAKE = 0
    GAME_2 = 1
    GAME_3 = 2
    GAME_4 = 3
    GAME_5 = 4

    @property
    def label(self) -> str:
        return MAIN_MENU_ITEMS[self]


class SelectedAction(IntEnum):
    START = 0
    LEADERBOARD = 1
    BACK = 2


class PausedAction(IntEnum):
    CONTINUE = 0
    EXIT = 1


class GameOverAction(IntEnum):
    PLAY_AGAIN = 0
    MAIN_MENU = 1
    SAVE = 2


class SaveAction(IntEnum):
    SAVE = 0
    BKSP = 1
    EXIT = 2


@dataclass
class LeaderboardEntry:
    name: str
    score: int


def _letter(index: int) -> str:
    return chr(index % ALPHABET_COUNT + ord("A"))


class Console:
    """Runs the menus and games on a display driven by a joystick."""

    def __init__(
        self,
        display: Canvas,
        joystick: Joystick,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.display = display
        self.joystick = joystick
        self._sleep = sleep
        self.rng = rng if rng is not None else random.Random()
        self.level = LevelTracker()
        self.state = MenuState.SAVE
        self.main_item = MainMenuItem.SNAKE
        self.selected_action = SelectedAction.START
        self.paused_action = PausedAction.CONTINUE
        self.gameover_action = GameOverAction.PLAY_AGAIN
        self.save_action = SaveAction.BKSP
        self.save_letter = 0
        self.letter_focused = True
        self.save_name = ""
        self.animation_shown = False
        self.leaderboard = [
            LeaderboardEntry("First", 0),
            LeaderboardEntry("Second", 0),
            LeaderboardEntry("Third", 0),
        ]

    def tick(self) -> None:
        """Run one pass of the screen the console is on."""
        handlers = {
            MenuState.MAIN: self.handle_main,
            MenuState.SELECTED: self.handle_selected,
            MenuState.SAVE: self.handle_save,
            MenuState.GAMEOVER: self.handle_gameover,
        }
        handler = handlers.get(self.state)
        if handler is not None:
            handler()

    def _navigate(self, move: Callable[[Direction, int, int], int], index: int, count: int) -> int:
        new_index = move(self.joystick.direction(), int(index), count)
        if new_index != index:
            self._sleep(MENU_REPEAT_S)
        return new_index

    # main menu

    def _draw_main(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        draw_horizontal_string(d, ">>> GAME MENU <<<", FONT_7X10, 0, Color.WHITE)
        draw_vertical_menu(d, MAIN_MENU_ITEMS, FONT_6X8, 15, Color.WHITE, self.main_item)
        d.update_screen()

    def handle_main(self) -> None:
        """Move through the game list; a press picks the game."""
        self.main_item = MainMenuItem(self._navigate(navigate_up_down, self.main_item, len(MainMenuItem)))
        self._draw_main()
        if self.joystick.is_pressed():
            self.state = MenuState.SELECTED

    # selected game menu

    def _draw_selected(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        draw_horizontal_string(d, f">_> {self.main_item.label} <_<", FONT_7X10, 0, Color.WHITE)
        draw_vertical_menu(d, SELECTED_ITEMS, FONT_7X10, 20, Color.WHITE, self.selected_action)
        d.update_screen()

    def handle_selected(self) -> None:
        """Choose between starting the game, the leaderboard and going back."""
        self.selected_action = SelectedAction(
            self._navigate(navigate_up_down, self.selected_action, len(SelectedAction))
        )
        self._draw_selected()
        if not self.joystick.is_pressed():
            return
        if self.selected_action is SelectedAction.START:
            if self.main_item is MainMenuItem.SNAKE:
                self.state = MenuState.PLAYING
                self.start_game()
        elif self.selected_action is SelectedAction.BACK:
            self.state = MenuState.MAIN
            self.selected_action = SelectedAction.START
            self.main_item = MainMenuItem.SNAKE

    # game start

    def start_game(self) -> None:
        """Reset the score, count down and run the chosen game."""
        self.level.reset()
        self.animation_shown = False
        d = self.display
        d.fill(Color.BLACK)
        d.update_screen()
        self._sleep(0.2)
        for count in range(COUNTDOWN, 0, -1):
            d.set_cursor(54, 24)
            d.write_string(str(count), FONT_16X24, Color.WHITE)
            d.update_screen()
            d.fill(Color.BLACK)
            self._sleep(0.5)
        if self.main_item is MainMenuItem.SNAKE:
            self.play_snake()

    def play_snake(self) -> SnakeGame:
        """Play snake until it ends or is left, then go to game over."""
        game = SnakeGame(rng=self.rng, level=self.level)
        while not game.game_over and self.state is MenuState.PLAYING:
            self._sleep(self.level.delay_ms / 1000)
            if self.joystick.is_pressed():
                self.pause()
            if not game.game_over and self.state is MenuState.PLAYING:
                game.step(self.joystick.direction())
            game.draw(self.display)
        self._sleep(GAME_END_S)
        self.state = MenuState.GAMEOVER
        return game

    # pause menu

    def _draw_paused(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        draw_horizontal_string(d, "PAUSED", FONT_16X24, 5, Color.WHITE)
        draw_horizontal_menu(d, PAUSED_ITEMS, FONT_7X10, 50, Color.WHITE, self.paused_action)
        d.update_screen()

    def handle_paused(self) -> None:
        """Choose between continuing and leaving the game."""
        self.paused_action = PausedAction(
            self._navigate(navigate_right_left, self.paused_action, len(PausedAction))
        )
        self._draw_paused()
        if not self.joystick.is_pressed():
            return
        if self.paused_action is PausedAction.CONTINUE:
            self.state = MenuState.PLAYING
        elif self.paused_action is PausedAction.EXIT:
            self.state = MenuState.GAMEOVER
            self.paused_action = PausedAction.CONTINUE

    def pause(self) -> None:
        """Stay in the pause menu until a choice is made."""
        self._sleep(PAUSE_ENTRY_S)
        self.state = MenuState.PAUSED
        while self.state is MenuState.PAUSED:
            self.handle_paused()

    # game over menu

    def _draw_stats(self) -> None:
        d = self.display
        draw_horizontal_string(d, _STATS_HEADER, FONT_7X10, 0, Color.WHITE)
        d.set_cursor(0, 25)
        d.write_string("SCORE : ", FONT_6X8, Color.WHITE)
        d.set_cursor(42, 25)
        d.write_string(str(self.level.score), FONT_6X8, Color.WHITE)

    def _draw_gameover_animated(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        d.set_cursor(9, 23)
        d.write_string("GAME OVER!", FONT_11X18, Color.WHITE)
        d.update_screen()
        self._sleep(2.0)

        d.fill(Color.BLACK)
        draw_horizontal_string(d, _STATS_HEADER, FONT_7X10, 0, Color.WHITE)
        d.update_screen()
        self._sleep(1.0)

        d.set_cursor(0, 25)
        d.write_string("SCORE : ", FONT_6X8, Color.WHITE)
        d.update_screen()
        self._sleep(1.0)

        d.set_cursor(42, 25)
        d.write_string(str(self.level.score), FONT_6X8, Color.WHITE)
        d.update_screen()
        self._sleep(1.0)

    def _draw_gameover(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        self._draw_stats()
        draw_vertical_menu(d, GAMEOVER_ITEMS, FONT_6X8, 35, Color.WHITE, self.gameover_action)
        d.update_screen()

    def handle_gameover(self) -> None:
        """Show the score and offer to play again, go back or save it."""
        if not self.animation_shown:
            self._draw_gameover_animated()
            self.animation_shown = True
        self.gameover_action = GameOverAction(
            self._navigate(navigate_up_down, self.gameover_action, len(GameOverAction))
        )
        self._draw_gameover()
        if not self.joystick.is_pressed():
            return
        if self.gameover_action is GameOverAction.PLAY_AGAIN:
            self.state = MenuState.PLAYING
            self.start_game()
        elif self.gameover_action is GameOverAction.MAIN_MENU:
            self.state = MenuState.MAIN
            self.main_item = MainMenuItem.SNAKE
            self.selected_action = SelectedAction.START
            self.gameover_action = GameOverAction.PLAY_AGAIN
        elif self.gameover_action is GameOverAction.SAVE:
            self.state = MenuState.SAVE

    # name entry

    def _draw_letter_picker(self) -> None:
        d = self.display
        d.draw_rectangle(14, 0, 114, 18, Color.WHITE)
        draw_horizontal_string(d, self.save_name, FONT_7X10, 5, Color.WHITE)
        left = _letter(self.save_letter + ALPHABET_COUNT - 1)
        right = _letter(self.save_letter + 1)
        draw_horizontal_string(d, f"{left}  <     >  {right}", FONT_6X8, 32, Color.WHITE)
        draw_horizontal_string(d, _letter(self.save_letter), FONT_16X24, 25, Color.WHITE)

    def _draw_save_actions(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        draw_horizontal_menu(d, SAVE_ITEMS, FONT_6X8, 55, Color.WHITE, self.save_action)
        self._draw_letter_picker()
        d.update_screen()

    def _draw_save_alphabet(self) -> None:
        d = self.display
        d.fill(Color.BLACK)
        self._draw_letter_picker()
        draw_horizontal_menu(d, SAVE_ITEMS, FONT_6X8, 55, Color.WHITE, AVOID_HIGHLIGHT)
        d.update_screen()

    def _enter_letter(self) -> None:
        if len(self.save_name) < MAX_NAME_LENGTH - 1:
            self.save_name += _letter(self.save_letter)
            self.display.update_screen()

    def _backspace(self) -> None:
        if self.save_name:
            self.save_name = self.save_name[:-1]
            self.display.update_screen()

    def handle_save(self) -> None:
        """Enter a name letter by letter; up and down switch letters and actions."""
        direction = self.joystick.direction()
        if direction is Direction.UP:
            self.letter_focused = True
        if direction is Direction.DOWN:
            self.letter_focused = False

        if self.letter_focused:
            self.save_letter = self._navigate(navigate_right_left_loop, self.save_letter, ALPHABET_COUNT)
            self._draw_save_alphabet()
            if self.joystick.is_pressed():
                self._enter_letter()
            return

        self.save_action = SaveAction(self._navigate(navigate_right_left, self.save_action, len(SaveAction)))
        self._draw_save_actions()
        if not self.joystick.is_pressed():
            return
        if self.save_action is SaveAction.BKSP:
            self._backspace()
        elif self.save_action in (SaveAction.SAVE, SaveAction.EXIT):
            self.state = MenuState.MAIN