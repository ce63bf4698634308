"""Seed almanac: follow seeds through maps to the lowest location."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence
from functools import reduce
from pathlib import Path
from queue import SimpleQueue

from adventpuzzles.y2023_day05_parser import Map, parse_input

_U64_MAX = 2**64 - 1


def _location(maps: Sequence[Map], seed: int) -> int:
    return reduce(lambda number, m: m.destination(number), maps, seed)


def seeds_to_ranges(seeds: Sequence[int]) -> list[range]:
    """Read seeds as ``start, length`` pairs; an unpaired last value is ignored."""
    return [
        range(start, start + length)
        for start, length in zip(seeds[0::2], seeds[1::2])
    ]


def part_1(text: str) -> int:
    """Lowest location of any listed seed, or 0 without seeds."""
    parsed = parse_input(text)
    return min((_location(parsed.maps, seed) for seed in parsed.seeds), default=0)


def part_2_single(text: str) -> int:
    """Lowest location over all seed ranges, computed in one thread."""
    parsed = parse_input(text)
    return min(
        (
            _location(parsed.maps, seed)
            for seed_range in seeds_to_ranges(parsed.seeds)
            for seed in seed_range
        ),
        default=_U64_MAX,
    )


def part_2_threaded(text: str) -> int:
    """Lowest location over all seed ranges, one worker thread per range."""
    parsed = parse_input(text)
    lowest = _U64_MAX
    lock = threading.Lock()

    def work(seed_range: range) -> None:
        nonlocal lowest
        local = min((_location(parsed.maps, s) for s in seed_range), default=_U64_MAX)
        with lock:
            lowest = min(lowest, local)

    threads = [
        threading.Thread(target=work, args=(seed_range,))
        for seed_range in seeds_to_ranges(parsed.seeds)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return lowest


def part_2_threaded_queue(text: str) -> int:
    """Lowest location over all seed ranges, workers report through a queue."""
    parsed = parse_input(text)
    results: SimpleQueue[int | None] = SimpleQueue()

    def work(seed_range: range) -> None:
        try:
            for seed in seed_range:
                results.put(_location(parsed.maps, seed))
        finally:
            results.put(None)

    threads = [
        threading.Thread(target=work, args=(seed_range,))
        for seed_range in seeds_to_ranges(parsed.seeds)
    ]
    for thread in threads:
        thread.start()

    lowest = _U64_MAX
    remaining = len(threads)
    while remaining:
        value = results.get()
        if value is None:
            remaining -= 1
        elif value < lowest:
            lowest = value
    for thread in threads:
        thread.join()
    return lowest


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed almanac locations.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(f"Part 1 answer: {part_1(text)}")
    print(f"Part 2 answer: {part_2_threaded(text)}")
    return 0