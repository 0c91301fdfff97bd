import random

import pytest

from snakeden.constants import (
    BOARD_LENGTH,
    BREADTH,
    FRUIT_POINTS,
    START_X,
    START_Y,
    Direction,
)
from snakeden.game import (
    LevelInfo,
    Segment,
    Snake,
    SnakeGame,
    level_for,
    place_food,
)


class _ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


def test_level_for_start_is_tutorial():
    assert level_for(0) == LevelInfo("Tutorial", 100, 0.1)


@pytest.mark.parametrize(
    "score,name",
    [
        (99, "Tutorial"),
        (100, "Beginner"),
        (200, "Rookie"),
        (320, "Learner"),
        (460, "Trainee"),
        (620, "Skilled"),
        (800, "Expert"),
        (1000, "Veteran"),
        (1220, "Master"),
        (1460, "Elite"),
        (1720, "Champion"),
    ],
)
def test_level_names_at_thresholds(score, name):
    assert level_for(score).name == name


def test_champion_has_no_next_level():
    info = level_for(5000)
    assert info.to_next is None
    assert info.name == "Champion"


def test_delay_shrinks_with_level():
    delays = [level_for(s).delay for s in (0, 100, 200, 320, 460, 620, 800, 1000, 1220, 1460, 1720)]
    assert delays == sorted(delays, reverse=True)


def test_to_next_counts_down():
    assert level_for(120).to_next == level_for(100).to_next - 20


def test_new_snake_at_start():
    snake = Snake()
    head = snake.head()
    assert (head.x, head.y, head.direction) == (START_X, START_Y, Direction.STOPPED)
    assert len(snake) == 1


def test_empty_snake_rejected():
    with pytest.raises(ValueError):
        Snake([])


def test_stopped_snake_does_not_move():
    snake = Snake()
    snake.advance()
    assert (snake.head().x, snake.head().y) == (START_X, START_Y)


def test_advance_up_and_right():
    snake = Snake()
    snake.head().direction = Direction.UP
    snake.advance()
    assert (snake.head().x, snake.head().y) == (START_X, START_Y - 1)
    snake.head().direction = Direction.RIGHT
    snake.advance()
    assert (snake.head().x, snake.head().y) == (START_X + 1, START_Y - 1)


def test_grow_then_body_follows_head():
    snake = Snake()
    snake.head().direction = Direction.LEFT
    snake.grow()
    assert len(snake) == 2
    assert not snake.bites_itself() or snake.occupies(START_X, START_Y)
    snake.advance()
    body = snake.segments[1]
    assert (body.x, body.y) == (START_X, START_Y)
    assert (snake.head().x, snake.head().y) == (START_X - 1, START_Y)


def test_occupies():
    snake = Snake([Segment(5, 10), Segment(6, 10)])
    assert snake.occupies(6, 10)
    assert not snake.occupies(7, 10)


def test_bites_itself():
    snake = Snake([Segment(5, 10), Segment(6, 10), Segment(5, 10)])
    assert snake.bites_itself()
    assert not Snake([Segment(5, 10), Segment(6, 10)]).bites_itself()


@pytest.mark.parametrize(
    "x,y,hit",
    [
        (1, 15, True),
        (BOARD_LENGTH - 2, 15, True),
        (20, 6, True),
        (20, BREADTH - 2, True),
        (2, 7, False),
        (START_X, START_Y, False),
    ],
)
def test_hits_wall(x, y, hit):
    assert Snake([Segment(x, y)]).hits_wall() is hit


@pytest.mark.parametrize(
    "direction,symbol",
    [
        (Direction.STOPPED, "^"),
        (Direction.UP, "^"),
        (Direction.DOWN, "v"),
        (Direction.RIGHT, ">"),
        (Direction.LEFT, "<"),
    ],
)
def test_head_symbol(direction, symbol):
    assert Snake([Segment(3, 8, direction)]).head_symbol() == symbol


def test_place_food_inside_field_and_off_snake():
    rng = random.Random(7)
    snake = Snake()
    for _ in range(200):
        x, y = place_food(snake, rng)
        assert 2 <= x <= BOARD_LENGTH - 3
        assert 7 <= y <= BREADTH - 3
        assert not snake.occupies(x, y)


def test_place_food_retries_on_snake():
    snake = Snake()
    rng = _ScriptedRng([START_X - 2, START_Y - 7, 0, 0])
    food = place_food(snake, rng)
    assert food == (2, 7)


def test_tick_eats_food():
    game = SnakeGame(random.Random(1))
    head = game.snake.head()
    game.food = (head.x, head.y)
    assert game.tick(set()) is True
    assert game.fruits == 1
    assert game.score == FRUIT_POINTS
    assert len(game.snake) == 2
    assert not game.snake.occupies(*game.food)


def test_tick_applies_keys():
    game = SnakeGame(random.Random(2))
    game.food = (2, 7)
    game.tick({"d"})
    assert game.snake.head().direction is Direction.RIGHT
    assert game.snake.head().x == START_X + 1
    game.tick({"A"})
    assert game.snake.head().direction is Direction.RIGHT


def test_tick_ends_at_wall():
    game = SnakeGame(random.Random(3))
    game.food = (30, 20)
    game.snake = Snake([Segment(2, 15, Direction.LEFT)])
    assert game.tick(set()) is True
    assert game.tick(set()) is False
    assert game.over
    assert game.tick({"D"}) is False
    assert game.snake.head().x == 1


def test_tick_ends_on_self_bite():
    game = SnakeGame(random.Random(4))
    game.food = (2, 7)
    game.snake = Snake([Segment(10, 10), Segment(11, 10), Segment(10, 10)])
    assert game.tick(set()) is False
    assert game.over


def test_starting_score_carries_and_sets_level():
    game = SnakeGame(random.Random(5), score=150)
    assert game.level.name == "Beginner"
    assert game.score == 150