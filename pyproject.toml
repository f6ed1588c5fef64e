[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciigames"
version = "0.1.0"
description = "Small ASCII terminal games: Flappy Dragon variants and a basic dungeon crawler"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "ascii", "terminal", "curses", "flappy", "dungeon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
asciigames-hello = "asciigames.hello:main"
asciigames-flappy-states = "asciigames.flappy_states:main"
asciigames-flappy-player = "asciigames.flappy_player:main"
asciigames-flappy-dragon = "asciigames.flappy_dragon:main"
asciigames-flappy-bonus = "asciigames.flappy_bonus:main"
asciigames-dungeon-map = "asciigames.dungeon_map:main"
asciigames-dungeon-player = "asciigames.dungeon_player:main"

[tool.hatch.build.targets.wheel]
packages = ["asciigames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
