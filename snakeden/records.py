"""Users and scores kept as fixed-size binary records in two files."""

from __future__ import annotations

import struct
from dataclasses import replace
from pathlib import Path

from snakeden.constants import (
    PASSWORD_SIZE,
    SCORE_FILE,
    USER_FILE,
    USERNAME_SIZE,
    Player,
    Score,
)

_PLAYER = struct.Struct(f"<{USERNAME_SIZE}s{PASSWORD_SIZE}si")
_SCORE = struct.Struct("<4i")

LEADERBOARD_SIZE = 10


class AuthError(Exception):
    """The username is unknown or the password does not match."""


class UsernameTaken(Exception):
    """A user with this name is already registered."""


def _encode_text(text: str, size: int, field: str) -> bytes:
    raw = text.encode("utf-8")
    if b"\0" in raw:
        raise ValueError(f"{field} must not contain NUL characters")
    if len(raw) > size - 1:
        raise ValueError(f"{field} is longer than {size - 1} bytes")
    return raw


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def encode_player(player: Player) -> bytes:
    """The fixed-size record for a player."""
    return _PLAYER.pack(
        _encode_text(player.username, USERNAME_SIZE, "username"),
        _encode_text(player.password, PASSWORD_SIZE, "password"),
        player.uid,
    )


def decode_players(data: bytes) -> list[Player]:
    """All whole player records in data; a trailing partial record is ignored."""
    usable = len(data) - len(data) % _PLAYER.size
    return [
        Player(_decode_text(name), _decode_text(secret), uid)
        for name, secret, uid in _PLAYER.iter_unpack(data[:usable])
    ]


def encode_score(score: Score) -> bytes:
    """The fixed-size record for a score."""
    return _SCORE.pack(score.uid, score.highscore, score.position, score.current_score)


def decode_scores(data: bytes) -> list[Score]:
    """All whole score records in data; a trailing partial record is ignored."""
    usable = len(data) - len(data) % _SCORE.size
    return [Score(*fields) for fields in _SCORE.iter_unpack(data[:usable])]


def sort_scores(scores: list[Score]) -> list[Score]:
    """Scores ranked by highscore, ties by lower uid, with positions from 1."""
    ranked = sorted(scores, key=lambda s: (-s.highscore, s.uid))
    return [replace(s, position=rank) for rank, s in enumerate(ranked, start=1)]


class RecordStore:
    """The user and score files inside one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.user_path = self.directory / USER_FILE
        self.score_path = self.directory / SCORE_FILE

    def ensure_files(self) -> list[Path]:
        """Create whichever record files are missing; return those created."""
        created = []
        for path in (self.user_path, self.score_path):
            if not path.exists():
                path.touch()
                created.append(path)
        return created

    @staticmethod
    def _read(path: Path) -> bytes:
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return b""

    def players(self) -> list[Player]:
        """Every registered player in file order."""
        return decode_players(self._read(self.user_path))

    def scores(self) -> list[Score]:
        """Every score record in file order."""
        return decode_scores(self._read(self.score_path))

    def find_username(self, uid: int) -> str | None:
        """The name of the player with this uid, or None."""
        return next((p.username for p in self.players() if p.uid == uid), None)

    def register(self, username: str, password: str) -> Player:
        """Add a new player with the next uid and an empty score record."""
        players = self.players()
        if any(p.username == username for p in players):
            raise UsernameTaken(f"username {username!r} is already taken")
        player = Player(username, password, len(players) + 1)
        player_record = encode_player(player)
        with self.user_path.open("ab") as users:
            users.write(player_record)
        with self.score_path.open("ab") as scores:
            scores.write(encode_score(Score(player.uid)))
        return player

    def authenticate(self, username: str, password: str) -> tuple[Player, Score]:
        """Check the credentials and return the player with a refreshed score."""
        player = next((p for p in self.players() if p.username == username), None)
        if player is None or player.password != password:
            raise AuthError("user not found")
        stored = next((s for s in self.scores() if s.uid == player.uid), None)
        score = Score(player.uid)
        if stored is not None:
            score = Score(player.uid, stored.highscore, stored.position, 0)
        return player, self.record_score(player, score)

    def record_score(self, player: Player, score: Score) -> Score:
        """Raise the player's highscore if beaten, re-rank the file, return the update."""
        updated = score
        records = []
        for record in self.scores():
            if record.uid == player.uid and record.highscore < score.current_score:
                record = replace(record, highscore=score.current_score)
                updated = replace(updated, highscore=score.current_score)
            records.append(record)
        ranked = sort_scores(records)
        self.score_path.write_bytes(b"".join(encode_score(s) for s in ranked))
        for record in ranked:
            if record.uid == player.uid:
                updated = replace(updated, position=record.position)
        return updated

    def leaderboard(self, limit: int = LEADERBOARD_SIZE) -> list[tuple[Score, str]]:
        """The first limit score records with their players' names."""
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        names = {p.uid: p.username for p in reversed(self.players())}
        return [(s, names.get(s.uid, "")) for s in self.scores()[:limit]]