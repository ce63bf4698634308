"""Red-nosed reports: count safe level sequences."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_level(word: str) -> int:
    if not _UNSIGNED.fullmatch(word):
        raise ValueError(f"invalid level {word!r}")
    return int(word)


def _reports(text: str) -> list[list[int]]:
    return [[_parse_level(word) for word in line.split()] for line in text.splitlines()]


def is_report_valid(report: Sequence[int]) -> bool:
    """Strictly monotonic with steps of 1 to 3; needs at least two levels."""
    diffs = [b - a for a, b in pairwise(report)]
    if not diffs:
        return False
    if diffs[0] > 0:
        return all(1 <= d <= 3 for d in diffs)
    return all(-3 <= d <= -1 for d in diffs)


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in _reports(text) if is_report_valid(report))


def _valid_with_dampener(report: list[int]) -> bool:
    return is_report_valid(report) or any(
        is_report_valid(report[:index] + report[index + 1:]) for index in range(len(report))
    )


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(1 for report in _reports(text) if _valid_with_dampener(report))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reactor report safety.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1: - {part1(text)}")
    print(f"Part 2: - {part2(text)}")
    return 0