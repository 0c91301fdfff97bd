"""Drawing the board frame for each scene onto a character canvas."""

from __future__ import annotations

from snakeden.constants import BOARD_LENGTH, BREADTH, Scene


class Canvas:
    """A fixed grid of characters addressed by column x and row y."""

    def __init__(self, width: int = BOARD_LENGTH, height: int = BREADTH) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, text: str) -> None:
        """Write text starting at (x, y); characters outside the grid are dropped."""
        if not 0 <= y < self.height:
            return
        row = self._rows[y]
        for column, char in enumerate(text, start=x):
            if 0 <= column < self.width:
                row[column] = char

    def char_at(self, x: int, y: int) -> str:
        """The character at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return self._rows[y][x]

    def lines(self) -> list[str]:
        """The grid as one string per row."""
        return ["".join(row) for row in self._rows]


def _hline(canvas: Canvas, y: int, xs: range, char: str = "-") -> None:
    for x in xs:
        canvas.put(x, y, char)


def _vline(canvas: Canvas, x: int, ys: range, char: str = "|") -> None:
    for y in ys:
        canvas.put(x, y, char)


def draw_board(canvas: Canvas, scene: Scene | int) -> None:
    """Draw the outer border and the separators that belong to a scene."""
    scene = Scene(scene)
    last_x = BOARD_LENGTH - 1
    last_y = BREADTH - 1

    _hline(canvas, 0, range(BOARD_LENGTH))
    _hline(canvas, last_y, range(BOARD_LENGTH))
    for x in (0, last_x):
        for y in range(BREADTH):
            canvas.put(x, y, "+" if y in (0, last_y) else "|")

    if scene is Scene.MENU:
        for y in (5, BREADTH - 7):
            _hline(canvas, y, range(BOARD_LENGTH))
            canvas.put(0, y, "+")
            canvas.put(last_x, y, "+")

    elif scene is Scene.START_GAME:
        _hline(canvas, 5, range(BOARD_LENGTH))
        inner = range(1, BOARD_LENGTH - 1)
        _hline(canvas, 6, inner)
        _hline(canvas, BREADTH - 2, inner)
        sides = range(6, BREADTH - 1)
        _vline(canvas, 1, sides)
        _vline(canvas, BOARD_LENGTH - 2, sides)
        for x, y in (
            (0, 5),
            (last_x, 5),
            (1, 6),
            (BOARD_LENGTH - 2, 6),
            (1, BREADTH - 2),
            (BOARD_LENGTH - 2, BREADTH - 2),
        ):
            canvas.put(x, y, "+")

    elif scene is Scene.LEADERBOARD:
        separators = (4, BREADTH - 5)
        for y in separators:
            _hline(canvas, y, range(BOARD_LENGTH))
        joints = {0, last_y, *separators}
        for y in range(BREADTH):
            if y in joints:
                for x in (10, 20, 50, 0, last_x):
                    canvas.put(x, y, "+")
            else:
                for x in (10, 20, 50):
                    canvas.put(x, y, "|")
        canvas.put(last_x, 4, "+")


def board_frame(scene: Scene | int) -> list[str]:
    """The rows of a fresh board drawn for a scene."""
    canvas = Canvas()
    draw_board(canvas, scene)
    return canvas.lines()