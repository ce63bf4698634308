# adventpuzzles

Solutions to a collection of daily programming puzzles from three seasons
(2023, 2024 and 2025). Each puzzle lives in its own module. You can use it
from Python or run it as a command. The package depends on the standard
library only.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Puzzles

| Module | What it solves |
| --- | --- |
| `adventpuzzles.y2023_day01` | Calibration values from the first and last digits, spelled out or not (`part_1`, `part_2`) |
| `adventpuzzles.y2023_day02` | Cube games checked against a bag limit, and the power of the minimal cube sets |
| `adventpuzzles.y2023_day03` | Part numbers and gear ratios in an engine schematic |
| `adventpuzzles.y2023_day04` | Scratchcard points and the total count of won card copies |
| `adventpuzzles.y2023_day05` | Seeds mapped through chained range maps to their lowest location |
| `adventpuzzles.y2023_day06` | Ways to beat the record in boat races |
| `adventpuzzles.y2023_day07` | Camel Cards hands ranked with and without jokers |
| `adventpuzzles.y2023_day10` | Farthest point along a pipe loop, found by breadth-first search |
| `adventpuzzles.y2024_day01` | Distance and similarity score between two lists |
| `adventpuzzles.y2024_day02` | Safe reports, with and without one level removed |
| `adventpuzzles.y2025_day01` | A 100-position dial and how often it points at zero |
| `adventpuzzles.y2025_day02` | Identifiers made of a repeated digit pattern within ranges |
| `adventpuzzles.y2025_day03` | Largest two-digit joltage per battery bank |

Supporting modules:

- `adventpuzzles.y2023_day05_parser` parses the seed almanac
  (`parse_input`, `parse_seeds`, `Map`, `SeedRange`, `ParseError`).
- `adventpuzzles.y2023_day07_cards` holds `Card`, `HandKind`, `HandType`
  and `HandError`.
- `adventpuzzles.queue` provides a small first-in, first-out `Queue`.
  Its `dequeue` and `peek` methods return `None` when the queue is empty.

Malformed input raises `ValueError` or one of its subclasses, such as
`CardParseError`, `ParseError`, `HandError`, `PipeError` or `SurfaceError`.

## Using it from Python

Each module takes the puzzle input as a string:

```python
from adventpuzzles import y2023_day01, y2024_day02

text = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet"""

print(y2023_day01.part_1(text))   # 142

reports = """7 6 4 2 1
1 2 7 8 9"""
print(y2024_day02.part1(reports))  # 1
```

The first part of 2023 day 2 needs a bag limit:

```python
from adventpuzzles.y2023_day02 import CubeSet, part1

games = "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green"
print(part1(games, CubeSet(red=12, green=13, blue=14)))  # 1
```

2023 day 5 offers three ways to compute the second part:

- `part_2_single` uses one thread.
- `part_2_threaded` uses one thread per seed range, sharing a lock.
- `part_2_threaded_queue` uses one thread per seed range, with results sent
  through a queue.

All three give the same answer.

## Using it from the command line

Each puzzle has a command named after its season and day. The command reads
a puzzle input file and prints the answers. The file is given as the only
argument and defaults to `input.txt` in the current directory:

```
adventpuzzles-2023-day01 input.txt
adventpuzzles-2023-day02
adventpuzzles-2023-day03
adventpuzzles-2023-day04
adventpuzzles-2023-day05
adventpuzzles-2023-day06
adventpuzzles-2023-day07 --part 2
adventpuzzles-2023-day10
adventpuzzles-2024-day01
adventpuzzles-2024-day02
adventpuzzles-2025-day01
adventpuzzles-2025-day02
adventpuzzles-2025-day03
```

`adventpuzzles-2023-day07` accepts `--part 1` or `--part 2` to solve only one
part. Pass `--help` to any command for its usage.

## What it does not do

- 2023 day 10 solves only the first part, the farthest point on the loop.
  `solve_parts` always returns `0` as its second value, because the tiles
  enclosed by the loop are not counted. The search runs to the end without
  displaying it.
- 2025 day 3 solves only the first part, two batteries per bank. Its command
  prints only that answer.