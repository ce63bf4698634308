"""Trebuchet calibration: recover two-digit values from noisy lines."""

from __future__ import annotations

import argparse
from pathlib import Path

_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def part_1(text: str) -> int:
    """Sum the first and last ASCII digit of every line as a two-digit number."""
    total = 0
    for line in text.splitlines():
        digits = [int(ch) for ch in line if ch in "0123456789"]
        if not digits:
            raise ValueError(f"no digit in line {line!r}")
        total += digits[0] * 10 + digits[-1]
    return total


def left_digit(line: str) -> int:
    """Return the first digit of a line, written as a numeral or a word, or 0."""
    for index, ch in enumerate(line):
        if ch in "123456789":
            return int(ch)
        rest = line[index:]
        for value, word in enumerate(_WORDS, start=1):
            if rest.startswith(word):
                return value
    return 0


def right_digit(line: str) -> int:
    """Return the last digit of a line, written as a numeral or a word, or 0."""
    for end in range(len(line), 0, -1):
        ch = line[end - 1]
        if ch in "0123456789":
            return int(ch)
        prefix = line[:end]
        for value, word in enumerate(_WORDS, start=1):
            if prefix.endswith(word):
                return value
    return 0


def part_2(text: str) -> int:
    """Sum calibration values where digits may also be spelled out."""
    return sum(left_digit(line) * 10 + right_digit(line) for line in text.splitlines())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trebuchet calibration values.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 answer: {part_1(text)}")
    print(f"Part 2 answer: {part_2(text)}")
    return 0