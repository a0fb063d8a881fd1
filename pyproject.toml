[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrun"
version = "0.1.0"
description = "Game logic for a top-down dungeon arcade: actors, enemies, power-ups, HUD, menu and Tiled map loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "dungeon", "tiled", "sprites", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
