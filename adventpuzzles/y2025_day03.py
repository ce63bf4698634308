"""Lobby batteries: pick two batteries per bank for the highest joltage."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Bank:
    """A row of batteries, each rated by a single digit."""

    joltages: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> Bank:
        if any(ch not in _DIGITS for ch in line):
            raise ValueError("expected a digit")
        return cls(tuple(int(ch) for ch in line))

    def max_joltage(self) -> int:
        """Largest two-digit number formed by two batteries kept in order."""
        if not self.joltages:
            raise ValueError("Expected to find the maximum")
        best = max(self.joltages)
        best_index = self.joltages.index(best)
        if best_index == len(self.joltages) - 1:
            rest = self.joltages[:best_index]
            if not rest:
                raise ValueError("expected to find the max")
            first, second = max(rest), best
        else:
            first, second = best, max(self.joltages[best_index + 1:])
        return first * 10 + second


def part1(text: str) -> int:
    """Sum of the highest joltage of every bank."""
    return sum(Bank.parse(line).max_joltage() for line in text.splitlines())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Battery bank joltage.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1: - {part1(text)}")
    return 0