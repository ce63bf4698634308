"""Gift shop: find product ids made of repeated digit sequences."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_ASCII_WHITESPACE = " \t\n\r\f"


def _parse_id(text: str) -> int:
    text = text.strip(_ASCII_WHITESPACE)
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("Expected number")
    return int(text)


def prepare_ranges(text: str) -> list[range]:
    """Parse comma separated ``low-high`` pairs into inclusive id ranges."""
    ranges = []
    for range_text in text.split(","):
        bounds = range_text.split("-")
        if len(bounds) < 2:
            raise ValueError("Expected to get higher value of the range")
        low = _parse_id(bounds[0])
        high = _parse_id(bounds[1])
        ranges.append(range(low, high + 1))
    return ranges


def is_id_invalid(value: int) -> bool:
    """True when the id is one digit sequence written twice."""
    digits = str(value)
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return digits[:half] == digits[half:]


def is_id_invalid_part2(value: int) -> bool:
    """True when the id is one digit sequence written at least twice."""
    digits = str(value)
    if len(digits) < 2:
        return False
    for size in range(1, len(digits) // 2 + 1):
        chunks = {digits[start:start + size] for start in range(0, len(digits), size)}
        if len(chunks) == 1:
            return True
    return False


def get_invalid_ids(id_range: Iterable[int]) -> list[int]:
    return [value for value in id_range if is_id_invalid(value)]


def get_invalid_ids_part2(id_range: Iterable[int]) -> list[int]:
    return [value for value in id_range if is_id_invalid_part2(value)]


def part1(text: str) -> int:
    """Sum of ids that are a sequence repeated exactly twice."""
    return sum(sum(get_invalid_ids(r)) for r in prepare_ranges(text))


def part2(text: str) -> int:
    """Sum of ids that are a sequence repeated two or more times."""
    return sum(sum(get_invalid_ids_part2(r)) for r in prepare_ranges(text))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Invalid product id finder.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1: - {part1(text)}")
    print(f"Part 2: - {part2(text)}")
    return 0