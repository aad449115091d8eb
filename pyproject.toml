[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sigmarpg"
version = "1.0.0"
description = "A small tile-based 2D RPG with a stack of game states, grid movement and sprite-sheet animation"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "rpg", "2d", "pygame", "state-machine", "sprite-animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sigmarpg = "sigmarpg.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sigmarpg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
