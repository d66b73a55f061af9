[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seabattle"
version = "0.1.0"
description = "Battleship board game with a computer opponent and a two-player LAN mode"
requires-python = ">=3.10"
keywords = ["battleship", "board game", "pygame", "lan", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seabattle = "seabattle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["seabattle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
