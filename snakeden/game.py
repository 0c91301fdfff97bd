"""The snake, its food and the rules of one game."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from snakeden.constants import (
    BOARD_LENGTH,
    BREADTH,
    FRUIT_POINTS,
    LEVEL_THRESHOLDS,
    START_X,
    START_Y,
    Direction,
)
from snakeden.controls import next_direction

_LEVELS = (
    ("Tutorial", 0.100),
    ("Beginner", 0.080),
    ("Rookie", 0.060),
    ("Learner", 0.050),
    ("Trainee", 0.040),
    ("Skilled", 0.030),
    ("Expert", 0.020),
    ("Veteran", 0.015),
    ("Master", 0.010),
    ("Elite", 0.005),
)
_TOP_LEVEL = ("Champion", 0.002)

_HEAD_SYMBOLS = {
    Direction.STOPPED: "^",
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.RIGHT: ">",
    Direction.LEFT: "<",
}

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class LevelInfo:
    """A level's name, points still needed for the next one, and the tick delay in seconds."""

    name: str
    to_next: int | None
    delay: float


def level_for(score: int) -> LevelInfo:
    """The level reached with this score."""
    for (name, delay), threshold in zip(_LEVELS, LEVEL_THRESHOLDS[1:]):
        if score < threshold:
            return LevelInfo(name, threshold - score, delay)
    name, delay = _TOP_LEVEL
    return LevelInfo(name, None, delay)


@dataclass
class Segment:
    """One cell of the snake and the heading it last moved with."""

    x: int
    y: int
    direction: Direction = Direction.STOPPED


class Snake:
    """A chain of segments, head first."""

    def __init__(self, segments: Iterable[Segment] | None = None) -> None:
        if segments is None:
            self.segments = [Segment(START_X, START_Y, Direction.STOPPED)]
        else:
            self.segments = list(segments)
        if not self.segments:
            raise ValueError("a snake needs at least one segment")

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def head(self) -> Segment:
        """The leading segment."""
        return self.segments[0]

    def grow(self) -> None:
        """Add a segment on top of the tail; it separates on the next move."""
        tail = self.segments[-1]
        self.segments.append(Segment(tail.x, tail.y, tail.direction))

    def advance(self) -> None:
        """Move the head one cell along its heading; each segment follows the one ahead."""
        head = self.head()
        dx, dy = _STEPS.get(head.direction, (0, 0))
        moved = Segment(head.x + dx, head.y + dy, head.direction)
        followers = [Segment(s.x, s.y, s.direction) for s in self.segments[:-1]]
        self.segments = [moved, *followers]

    def occupies(self, x: int, y: int) -> bool:
        """Whether any segment is on (x, y)."""
        return any(s.x == x and s.y == y for s in self.segments)

    def bites_itself(self) -> bool:
        """Whether the head shares a cell with another segment."""
        head = self.head()
        return any(s.x == head.x and s.y == head.y for s in self.segments[1:])

    def hits_wall(self) -> bool:
        """Whether the head is on the playing field's border."""
        head = self.head()
        return head.x in (1, BOARD_LENGTH - 2) or head.y in (6, BREADTH - 2)

    def head_symbol(self) -> str:
        """The character drawn for the head, pointing along its heading."""
        return _HEAD_SYMBOLS[Direction(self.head().direction)]


def place_food(snake: Snake, rng: random.Random) -> tuple[int, int]:
    """A random cell inside the field that the snake does not occupy."""
    while True:
        x = rng.randrange(BOARD_LENGTH - 4) + 2
        y = rng.randrange(BREADTH - 9) + 7
        if not snake.occupies(x, y):
            return x, y


class SnakeGame:
    """One round: the snake, the food, the fruits eaten and the running score."""

    def __init__(self, rng: random.Random | None = None, score: int = 0) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake()
        self.food = place_food(self.snake, self.rng)
        self.score = score
        self.fruits = 0
        self.over = False

    @property
    def level(self) -> LevelInfo:
        """The level for the current score."""
        return level_for(self.score)

    def tick(self, pressed: Iterable[str]) -> bool:
        """Play one step with the keys pressed; return False once the game is over."""
        if self.over:
            return False
        if self.snake.bites_itself() or self.snake.hits_wall():
            self.over = True
            return False
        head = self.snake.head()
        if (head.x, head.y) == self.food:
            self.snake.grow()
            self.food = place_food(self.snake, self.rng)
            self.fruits += 1
            self.score += FRUIT_POINTS
        head.direction = next_direction(head.direction, pressed)
        self.snake.advance()
        return True