"""Historian hysteria: compare two location id lists."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def _columns(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        words = line.split()
        if len(words) < 2:
            raise ValueError(f"expected two numbers in line {line!r}")
        left.append(int(words[0]))
        right.append(int(words[1]))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted left and right lists."""
    left, right = _columns(text)
    return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left id times its count in the right list."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(l * counts[l] for l in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Location id list comparison.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 - {part1(text)}")
    print(f"Part 2 - {part2(text)}")
    return 0