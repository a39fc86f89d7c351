[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labyrinth"
version = "0.1.0"
description = "Generate, save, load and walk through grid mazes in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "puzzle", "terminal", "backtracking", "pathfinding"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labyrinth = "labyrinth.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labyrinth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
