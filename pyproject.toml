[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "snakeden"
version = "1.0.0"
description = "A terminal snake game with player accounts, high scores and a leaderboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "arcade", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakeden = "snakeden.app:main"

[tool.setuptools.packages.find]
include = ["snakeden*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
