"""Board geometry, file names, levels and the shared record types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

BOARD_LENGTH = 70
BREADTH = 30
START_X = 34
START_Y = 17

SCORE_FILE = "Scores.txt"
USER_FILE = "Users.txt"

USERNAME_SIZE = 70
PASSWORD_SIZE = 50

FRUIT_POINTS = 20

LEVEL_THRESHOLDS = (0, 100, 200, 320, 460, 620, 800, 1000, 1220, 1460, 1720)


class Direction(enum.IntEnum):
    """Heading of the snake's head."""

    STOPPED = 1
    UP = 2
    DOWN = 3
    RIGHT = 4
    LEFT = 5

    def opposite(self) -> Direction | None:
        """The heading that would reverse this one, or None when stopped."""
        return _OPPOSITES.get(self)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Scene(enum.IntEnum):
    """Which screen layout the board frame is drawn for."""

    START = 1
    MENU = 2
    START_GAME = 3
    LEADERBOARD = 4


@dataclass
class Player:
    """A registered user."""

    username: str = ""
    password: str = ""
    uid: int = 0


@dataclass
class Score:
    """A user's score record; current_score is the running game's score."""

    uid: int = 0
    highscore: int = 0
    position: int = 0
    current_score: int = 0