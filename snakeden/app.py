"""The screens of the game: start, login, menu, play, leaderboard and exit."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path

from snakeden.board import board_frame
from snakeden.constants import (
    BOARD_LENGTH,
    BREADTH,
    PASSWORD_SIZE,
    USERNAME_SIZE,
    Player,
    Scene,
    Score,
)
from snakeden.controls import Terminal
from snakeden.game import LevelInfo, SnakeGame
from snakeden.records import LEADERBOARD_SIZE, AuthError, RecordStore, UsernameTaken

_LOGIN_CHOICE = 1
_SIGN_UP_CHOICE = 2

_MENU_PLAY = 1
_MENU_LEADERBOARD = 2
_MENU_EXIT = 3

_OWN_ROW = 27


class App:
    """The whole game session on one terminal with one record store."""

    def __init__(
        self,
        terminal: Terminal | None = None,
        store: RecordStore | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.terminal = terminal if terminal is not None else Terminal()
        self.store = store if store is not None else RecordStore()
        self.rng = rng
        self._sleep = sleep if sleep is not None else time.sleep
        self.player = Player()
        self.score = Score()
        self.running = True

    def _draw_board(self, scene: Scene) -> None:
        self.terminal.clear()
        for y, line in enumerate(board_frame(scene)):
            self.terminal.write(0, y, line)

    def _press_enter(self) -> None:
        self.terminal.write(24, 33, "PRESS ENTER TO CONTINUE")

    def boot(self) -> list[Path]:
        """Make sure the record files exist; return the ones that had to be created."""
        self.terminal.hide_cursor()
        self.terminal.clear()
        created = self.store.ensure_files()
        for row, _ in enumerate(created):
            self.terminal.write(0, row, "Creating Files.....")
            self._sleep(5)
        self.terminal.write(0, len(created), "Game Starting......")
        self._sleep(1)
        return created

    def start(self) -> bool:
        """Offer login or sign-up until one succeeds, then run the menu.

        Returns True once a player logged in and left the menu, False when the
        click chose neither login nor sign-up.
        """
        while True:
            self._draw_board(Scene.START)
            self.terminal.write(30, 13, "Login")
            self.terminal.write(29, 15, "Sign Up")
            choice = self.terminal.read_click()
            if choice == _LOGIN_CHOICE:
                logged_in = self.log_in()
            elif choice == _SIGN_UP_CHOICE:
                logged_in = self.sign_up()
            else:
                self._draw_board(Scene.START)
                return False
            if logged_in:
                while self.running:
                    self.menu()
                return True

    def _credentials_form(self, title_x: int, title: str, label_x: int) -> tuple[str, str]:
        self.terminal.show_cursor()
        self._draw_board(Scene.START)
        self.terminal.write(title_x, 10, title)
        self.terminal.write(label_x, 13, "Username: ")
        self.terminal.write(label_x, 14, "Password: ")
        field_x = label_x + 10
        username = self.terminal.read_line(field_x, 13, USERNAME_SIZE)
        form = (username, self.terminal.read_line(field_x, 14, PASSWORD_SIZE))
        self.terminal.hide_cursor()
        return form

    def log_in(self) -> bool:
        """Ask for credentials and log the player in; False when they are wrong."""
        form = self._credentials_form(30, "Login", 20)
        try:
            player, score = self.store.authenticate(*form)
        except AuthError:
            self.terminal.write(26, 17, "User Not Found")
            self._sleep(2)
            return False
        self.player = player
        self.score = score
        self.terminal.write(28, 16, "Logging In")
        self._sleep(2)
        return True

    def sign_up(self) -> bool:
        """Register a new player and then log in; False when the name is taken."""
        form = self._credentials_form(31, "Sign Up", 17)
        try:
            player = self.store.register(*form)
        except UsernameTaken:
            self.terminal.write(22, 17, "Username Already Taken")
            self._sleep(2)
            return False
        except ValueError:
            self.terminal.write(22, 17, "Invalid Username Or Password")
            self._sleep(2)
            return False
        self.player = player
        self.score = Score(player.uid)
        self.terminal.write(29, 16, "User Created")
        self._sleep(2)
        return self.log_in()

    def menu(self) -> int:
        """Show the main menu, act on the clicked entry and return its number."""
        self._draw_board(Scene.MENU)
        self.terminal.hide_cursor()
        write = self.terminal.write
        write(22, 2, "Welcome To the SNAKE GAME !")
        write(27, BREADTH - 6, "PLAYER INFORMATION ")
        write(2, BREADTH - 4, f"USERNAME: {self.player.username}")
        write(2, BREADTH - 2, f"USER ID: {self.player.uid}")
        write(BOARD_LENGTH - 16, BREADTH - 4, f"HIGHSCORE: {self.score.highscore}")
        position = self.score.position or "NULL"
        write(BOARD_LENGTH - 16, BREADTH - 2, f"POSITION: {position}")
        write(30, 12, "START GAME")
        write(26, 14, "PLAYER LEADERBOARD")
        write(33, 16, "EXIT")

        choice = self.terminal.read_click()
        if choice == _MENU_EXIT:
            self.running = False
        elif choice == _MENU_PLAY:
            self.play_game()
        elif choice == _MENU_LEADERBOARD:
            self.show_leaderboard()
        return choice

    def _draw_snake(self, game: SnakeGame) -> None:
        head, *body = game.snake
        self.terminal.write(head.x, head.y, game.snake.head_symbol())
        for segment in body:
            self.terminal.write(segment.x, segment.y, "0")

    def _show_level(self, level: LevelInfo) -> None:
        write = self.terminal.write
        write(9, 4, " " * 18)
        write(9, 4, level.name)
        write(BOARD_LENGTH - 6, 4, "    ")
        write(BOARD_LENGTH - 6, 4, "; )" if level.to_next is None else str(level.to_next))
        self._sleep(level.delay)

    def play_game(self) -> Score:
        """Play one round, store the result and return the player's updated score."""
        self._draw_board(Scene.START_GAME)
        write = self.terminal.write
        write(2, 2, "SCORE: ")
        write(2, 4, "LEVEL: ")
        write(BOARD_LENGTH - 19, 2, "FRUITS EATEN: ")
        write(BOARD_LENGTH - 19, 4, "TO LEVEL UP: ")

        game = SnakeGame(self.rng, score=self.score.current_score)
        self._draw_snake(game)
        write(*game.food, "8")

        while True:
            write(BOARD_LENGTH - 5, 2, str(game.fruits))
            write(9, 2, str(game.score))
            previous = [(segment.x, segment.y) for segment in game.snake]
            food = game.food
            if not game.tick(self.terminal.pressed_keys()):
                self._draw_snake(game)
                row = BREADTH // 2 + 2 if game.snake.bites_itself() else BREADTH // 2
                write(BOARD_LENGTH // 2 - 5, row, "GAME OVER")
                self._sleep(3)
                break
            if game.food != food:
                write(*game.food, "8")
            for x, y in previous:
                write(x, y, " ")
            self._draw_snake(game)
            self._show_level(game.level)

        self.terminal.wait_key()
        self.score = self.store.record_score(
            self.player, replace(self.score, current_score=game.score)
        )
        self.terminal.wait_key()
        self._press_enter()
        self._sleep(4)
        self.terminal.wait_key()
        return self.score

    def show_leaderboard(self) -> list[tuple[Score, str]]:
        """Show the top scores and the player's own line; return the rows shown."""
        self._draw_board(Scene.LEADERBOARD)
        write = self.terminal.write
        write(1, 2, "Position")
        write(12, 2, "User ID")
        write(31, 2, "User Name")
        write(56, 2, "Highscore")

        entries = self.store.leaderboard(LEADERBOARD_SIZE)
        for rank, (score, name) in enumerate(entries, start=1):
            row = 3 + 2 * rank
            write(5, row, str(rank))
            write(15, row, str(score.uid))
            write(25, row, name)
            write(58, row, str(score.highscore))

        write(5, _OWN_ROW, str(self.score.position))
        write(15, _OWN_ROW, str(self.player.uid))
        write(25, _OWN_ROW, self.player.username)
        write(58, _OWN_ROW, str(self.score.highscore))

        self._sleep(2)
        self._press_enter()
        self.terminal.wait_key()
        return entries

    def exit_program(self) -> None:
        """Say goodbye and give the cursor back."""
        self.terminal.clear()
        self.terminal.write(24, 14, "THANKS FOR PLAYING")
        self._sleep(3)
        self.terminal.show_cursor()

    def run(self) -> None:
        """Boot, play until the player leaves, and say goodbye."""
        with self.terminal:
            self.boot()
            self.start()
            self.exit_program()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in a terminal."""
    parser = argparse.ArgumentParser(prog="snakeden", description="Play the snake game.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the user and score files (default: current directory)",
    )
    args = parser.parse_args(argv)
    App(store=RecordStore(args.data_dir)).run()
    return 0