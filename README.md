# snakeden

snakeden is a snake game for the terminal. Players sign up with a username and a password. High scores are kept between runs, and the best players are listed on a leaderboard.

## Installing

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Playing

```
snakeden
```

By default the game keeps its record files, `Users.txt` and `Scores.txt`, in the current directory. To keep them in another directory, use `--data-dir`:

```
snakeden --data-dir ~/games/snake
```

If either file is missing when the game starts, the game creates it. The start screen then asks you to click **Login** or **Sign Up** with the mouse. Your terminal must support mouse reporting for this to work. Next, type a username and a password. A username can be up to 69 bytes long and a password up to 49 bytes. After you sign up, the game asks you to log in with the same details.

The main menu shows your username, user id, highscore and position. It has three entries:

- **START GAME** plays a round.
- **PLAYER LEADERBOARD** lists the first ten entries of the ranked score file, followed by your own line.
- **EXIT** says goodbye and closes the game.

### Controls

- Steer the snake with `W` (up), `A` (left), `S` (down) and `D` (right).
- The snake cannot turn straight back onto itself.
- Each fruit (`8`) is worth 20 points and adds one segment to the snake.
- The round ends when the head reaches the wall of the playing field or runs into the snake's body.
- After a round, your highscore is updated if you beat it, and every player's position is ranked again. Press a key to return to the menu.

The level depends on your score. At each level up, the snake moves faster:

| Level | Score reached |
| --- | --- |
| Tutorial | 0 |
| Beginner | 100 |
| Rookie | 200 |
| Learner | 320 |
| Trainee | 460 |
| Skilled | 620 |
| Expert | 800 |
| Veteran | 1000 |
| Master | 1220 |
| Elite | 1460 |
| Champion | 1720 |

## Using it as a library

You can use the game rules and the record files without a terminal:

```python
import random

from snakeden.game import SnakeGame, level_for
from snakeden.records import RecordStore

print(level_for(120).name)        # Beginner
print(level_for(120).to_next)     # 80

game = SnakeGame(rng=random.Random(1))
game.tick({"D"})                  # one step, turning right
print(game.snake.head(), game.food, game.score)

store = RecordStore("data")
store.ensure_files()
password = "password"
player = store.register("alice", password)
player, score = store.authenticate("alice", password)
print(store.leaderboard())
```

- `snakeden.game` provides `Snake`, `SnakeGame`, `place_food` and `level_for`. `SnakeGame.tick` returns `False` once the game is over.
- `snakeden.records` provides `RecordStore`. It reads and writes the fixed-size binary user and score records. It also provides `encode_player`, `decode_players`, `encode_score`, `decode_scores` and `sort_scores`. Two exceptions report errors: `AuthError` for wrong credentials and `UsernameTaken` for a name that is already registered.
- `snakeden.board` draws the frame for each screen onto a `Canvas`. `board_frame(scene)` returns the rows of a frame.
- `snakeden.controls` provides `Terminal`, which handles ANSI output, line input, mouse clicks and key presses. It also provides `choice_at`, `next_direction` and `parse_mouse_click`.
- `snakeden.app` provides `App`, which ties the screens together, and `main`, which runs the `snakeden` command.

## Limitations

- Passwords are stored in `Users.txt` as plain text, with no hashing.
- The record files are not locked, so two games must not share one data directory at the same time.
- The game needs a terminal that understands ANSI escape sequences and reports mouse clicks. There is no keyboard-only way to choose menu entries.