"""Boat races: count button hold times that beat the record."""

from __future__ import annotations

import argparse
import math
import re
from dataclasses import dataclass
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Race:
    time: int
    distance: int

    def distance_variants(self) -> list[int]:
        """Distance travelled for every hold time from 0 to the race time."""
        return [(self.time - hold) * hold for hold in range(self.time + 1)]

    def ways_to_beat(self) -> int:
        """Number of hold times that travel further than the record."""
        return sum(1 for d in self.distance_variants() if d > self.distance)


def _strip_prefix(line: str, prefix: str) -> str:
    while line.startswith(prefix):
        line = line[len(prefix):]
    return line


def _parse_unsigned(text: str, message: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(message)
    return int(text)


def _two_lines(text: str) -> tuple[str, str]:
    lines = text.splitlines()[:2]
    if not lines:
        raise ValueError("First line not found")
    if len(lines) < 2:
        raise ValueError("Second line not found")
    return lines[0], lines[1]


def parse_races(text: str) -> list[Race]:
    """Parse the ``Time:`` and ``Distance:`` lines into separate races."""
    time_line, distance_line = _two_lines(text)
    times = [
        _parse_unsigned(word, "expected successful parsing of time")
        for word in _strip_prefix(time_line, "Time: ").split()
    ]
    distances = [
        _parse_unsigned(word, "expected successful parsing of distance")
        for word in _strip_prefix(distance_line, "Distance: ").split()
    ]
    return [Race(t, d) for t, d in zip(times, distances)]


def parse_as_single_race(text: str) -> Race:
    """Parse both lines as one race, ignoring the spaces between digits."""
    time_line, distance_line = _two_lines(text)
    time = _parse_unsigned(
        _strip_prefix(time_line, "Time: ").replace(" ", ""),
        "expected successful parsing of time",
    )
    distance = _parse_unsigned(
        _strip_prefix(distance_line, "Distance: ").replace(" ", ""),
        "expected successful parsing of distance",
    )
    return Race(time, distance)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Boat race records.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    part1 = math.prod(race.ways_to_beat() for race in parse_races(text))
    print(f"Part 1 answer: {part1}")
    print(f"Part 2 answer: {parse_as_single_race(text).ways_to_beat()}")
    return 0