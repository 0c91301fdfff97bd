"""Terminal snake game with player accounts, stored high scores and a leaderboard."""

__version__ = "1.0.0"
__all__ = ["__version__"]