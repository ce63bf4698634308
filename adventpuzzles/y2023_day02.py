"""Cube conundrum: check games of coloured cubes against a bag limit."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, order=True)
class CubeSet:
    """Counts of red, green and blue cubes."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def in_bounds(self, other: CubeSet) -> bool:
        """True when no colour exceeds the matching count in ``other``."""
        return self.red <= other.red and self.green <= other.green and self.blue <= other.blue

    def power(self) -> int:
        return self.red * self.green * self.blue

    def maximum(self, other: CubeSet) -> CubeSet:
        """Colour-wise maximum of two sets."""
        return CubeSet(
            max(self.red, other.red),
            max(self.green, other.green),
            max(self.blue, other.blue),
        )


BAG_LIMIT = CubeSet(red=12, green=13, blue=14)


@dataclass(frozen=True)
class Game:
    id: int
    sets: tuple[CubeSet, ...] = ()
    min_set: CubeSet = field(default_factory=CubeSet)

    def all_sets_in_bounds(self, limit: CubeSet) -> bool:
        return all(cubes.in_bounds(limit) for cubes in self.sets)


def _split_terminator(text: str, separator: str) -> list[str]:
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _parse_set(text: str) -> CubeSet:
    counts = {"red": 0, "green": 0, "blue": 0}
    for cube in _split_terminator(text, ","):
        words = cube.split()
        if len(words) < 2:
            raise ValueError(f"malformed cube entry {cube!r}")
        count = int(words[0])
        colour = words[1]
        if colour not in counts:
            raise ValueError(f"no such type of cube: {colour!r}")
        counts[colour] += count
    return CubeSet(**counts)


def parse_game(line: str) -> Game:
    """Parse a line of the form ``Game N: 3 blue, 4 red; ...``."""
    header, sep, body = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in game line {line!r}")
    fields = header.split()
    if len(fields) < 2:
        raise ValueError(f"missing game id in {header!r}")
    game_id = int(fields[1])

    sets = tuple(_parse_set(part) for part in _split_terminator(body, ";"))
    min_set = CubeSet()
    for cubes in sets:
        min_set = min_set.maximum(cubes)
    return Game(game_id, sets, min_set)


def part1(text: str, bag_limit: CubeSet) -> int:
    """Sum the ids of games possible with the given bag contents."""
    games = [parse_game(line) for line in text.splitlines()]
    return sum(game.id for game in games if game.all_sets_in_bounds(bag_limit))


def part2(text: str) -> int:
    """Sum the powers of the smallest bag each game needs."""
    return sum(parse_game(line).min_set.power() for line in text.splitlines())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cube game checker.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 answer: {part1(text, BAG_LIMIT)}")
    print(f"Part 2 answer: {part2(text)}")
    return 0