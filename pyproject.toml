[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Advent of Code puzzle solutions (2023 days 18-25, 2024 days 1-6) with a small day-management command"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolutions = "aocsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"
