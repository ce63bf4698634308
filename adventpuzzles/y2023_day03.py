"""Gear ratios: find part numbers and gears on an engine schematic."""

from __future__ import annotations

import argparse
import re
from collections import defaultdict
from collections.abc import Iterator
from pathlib import Path

_DIGIT_RUN = re.compile(r"[0-9]+")
_OFFSETS = ((1, 0), (1, 1), (1, -1), (0, 1), (0, -1), (-1, 0), (-1, 1), (-1, -1))

Position = tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("should be at least one line in the input")
    return lines


def _neighbours(row: int, col: int) -> Iterator[Position]:
    for d_row, d_col in _OFFSETS:
        n_row, n_col = row + d_row, col + d_col
        if n_row >= 0 and n_col >= 0:
            yield n_row, n_col


def _char_at(lines: list[str], row: int, col: int) -> str:
    if row < len(lines) and col < len(lines[row]):
        return lines[row][col]
    return "."


def _touches_symbol(lines: list[str], row: int, col: int) -> bool:
    return any(
        (ch := _char_at(lines, r, c)) != "." and ch not in "0123456789"
        for r, c in _neighbours(row, col)
    )


def _gear_positions(lines: list[str], row: int, col: int) -> list[Position]:
    return [(r, c) for r, c in _neighbours(row, col) if _char_at(lines, r, c) == "*"]


def _part_numbers(lines: list[str]) -> Iterator[tuple[int, list[Position]]]:
    """Yield each part number with the gears next to its first symbol-adjacent digit."""
    for row, line in enumerate(lines):
        for match in _DIGIT_RUN.finditer(line):
            for col in range(*match.span()):
                if _touches_symbol(lines, row, col):
                    yield int(match.group()), _gear_positions(lines, row, col)
                    break


def part1(text: str) -> int:
    """Sum all numbers adjacent to a symbol."""
    return sum(number for number, _ in _part_numbers(_lines(text)))


def part2(text: str) -> int:
    """Sum the products of number pairs sharing exactly one gear."""
    gears: defaultdict[Position, list[int]] = defaultdict(list)
    for number, positions in _part_numbers(_lines(text)):
        for position in positions:
            gears[position].append(number)
    return sum(nums[0] * nums[1] for nums in gears.values() if len(nums) == 2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Engine schematic analysis.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 answer: {part1(text)}")
    print(f"Part 2 answer: {part2(text)}")
    return 0