[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corabia"
version = "0.1.0"
description = "A terminal card game: guess colour, higher or lower, inside or outside, and suit to get off the ship."
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "game", "terminal", "party-game", "corabia"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corabia = "corabia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["corabia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
