[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventpuzzles"
version = "0.1.0"
description = "Solutions to daily programming puzzles, usable as a library and from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
adventpuzzles-2023-day01 = "adventpuzzles.y2023_day01:main"
adventpuzzles-2023-day02 = "adventpuzzles.y2023_day02:main"
adventpuzzles-2023-day03 = "adventpuzzles.y2023_day03:main"
adventpuzzles-2023-day04 = "adventpuzzles.y2023_day04:main"
adventpuzzles-2023-day05 = "adventpuzzles.y2023_day05:main"
adventpuzzles-2023-day06 = "adventpuzzles.y2023_day06:main"
adventpuzzles-2023-day07 = "adventpuzzles.y2023_day07:main"
adventpuzzles-2023-day10 = "adventpuzzles.y2023_day10:main"
adventpuzzles-2024-day01 = "adventpuzzles.y2024_day01:main"
adventpuzzles-2024-day02 = "adventpuzzles.y2024_day02:main"
adventpuzzles-2025-day01 = "adventpuzzles.y2025_day01:main"
adventpuzzles-2025-day02 = "adventpuzzles.y2025_day02:main"
adventpuzzles-2025-day03 = "adventpuzzles.y2025_day03:main"

[tool.hatch.build.targets.wheel]
packages = ["adventpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
