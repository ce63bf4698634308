"""Secret entrance: count how often a 100-position dial points at zero."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

DIAL_START = 50
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass
class Dial:
    """A dial numbered 0 to 99; iterating turns it right one click at a time."""

    value: int = DIAL_START
    points_to_zero_times: int = 0

    def right(self) -> int:
        """Turn one click right; this does not count zero hits."""
        self.value = (self.value + 1) % 100
        return self.value

    def right_by(self, steps: int) -> int:
        """Turn right ``steps`` clicks; count a hit if it ends on zero."""
        self.value = (self.value + steps) % 100
        if self.value == 0:
            self.points_to_zero_times += 1
        return self.value

    def left(self) -> int:
        """Turn one click left; count a hit if it ends on zero."""
        self.value = (self.value - 1) % 100
        if self.value == 0:
            self.points_to_zero_times += 1
        return self.value

    def left_by(self, steps: int) -> int:
        """Turn left ``steps`` clicks; count a hit if it ends on zero."""
        self.value = (self.value - steps) % 100
        if self.value == 0:
            self.points_to_zero_times += 1
        return self.value

    def __iter__(self) -> Dial:
        return self

    def __next__(self) -> int:
        return self.right()


def _rotations(text: str):
    for line in text.splitlines():
        if not line:
            raise ValueError("Expected to parse the input")
        direction, steps = line[:1], line[1:]
        if not _UNSIGNED.fullmatch(steps):
            raise ValueError("Expected to parse integer")
        yield direction, int(steps)


def part1(text: str) -> int:
    """Times the dial rests on zero after a rotation."""
    dial = Dial()
    for direction, steps in _rotations(text):
        if direction == "L":
            dial.left_by(steps)
        elif direction == "R":
            dial.right_by(steps)
        else:
            raise ValueError("Expected to parse the input")
    return dial.points_to_zero_times


def part2(text: str) -> int:
    """Times the dial passes or rests on zero during any click."""
    dial = Dial()
    for direction, steps in _rotations(text):
        for _ in range(steps):
            if direction == "L":
                dial.left_by(1)
            elif direction == "R":
                dial.right_by(1)
            else:
                raise ValueError("Expected to parse the input")
    return dial.points_to_zero_times


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dial zero counter.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1: - {part1(text)}")
    print(f"Part 2: - {part2(text)}")
    return 0