import pytest

from snakeden.constants import Direction, Player, Scene, Score


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, Direction.STOPPED),
        (2, Direction.UP),
        (3, Direction.DOWN),
        (4, Direction.RIGHT),
        (5, Direction.LEFT),
    ],
)
def test_direction_values_follow_the_source_enum(value, expected):
    assert Direction(value) is expected


def test_direction_rejects_unknown_value():
    with pytest.raises(ValueError):
        Direction(0)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite_pairs(direction, expected):
    assert direction.opposite() is expected


@pytest.mark.parametrize(
    "direction",
    [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT],
)
def test_opposite_is_an_involution_for_moves(direction):
    assert direction.opposite().opposite() is direction


def test_stopped_has_no_opposite():
    assert Direction.STOPPED.opposite() is None


def test_scene_values():
    assert Scene(1) is Scene.START
    assert Scene(2) is Scene.MENU
    assert Scene(3) is Scene.START_GAME
    assert Scene(4) is Scene.LEADERBOARD
    with pytest.raises(ValueError):
        Scene(5)


def test_score_defaults_are_zero():
    score = Score(uid=7)
    assert (score.uid, score.highscore, score.position, score.current_score) == (7, 0, 0, 0)


def test_player_fields():
    password = "password"
    player = Player("alice", password, 3)
    assert player == Player(username="alice", password=password, uid=3)