[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laberinto"
version = "0.1.0"
description = "Block-based maze construction with a builder and director, typed blocks and animated block groups"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "builder", "director", "blocks", "tile map", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laberinto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
