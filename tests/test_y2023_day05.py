import pytest

from adventpuzzles.y2023_day05 import (
    part_1,
    part_2_single,
    part_2_threaded,
    part_2_threaded_queue,
    seeds_to_ranges,
)
from adventpuzzles.y2023_day05_parser import ParseError

SEEDS = (79, 14, 55, 13)

MAPS = (
    ("seed", "soil", ((50, 98, 2), (52, 50, 48))),
    ("soil", "fertilizer", ((0, 15, 37), (37, 52, 2), (39, 0, 15))),
    ("fertilizer", "water", ((49, 53, 8), (0, 11, 42), (42, 0, 7), (57, 7, 4))),
    ("water", "light", ((88, 18, 7), (18, 25, 70))),
    ("light", "temperature", ((45, 77, 23), (81, 45, 19), (68, 64, 13))),
    ("temperature", "humidity", ((0, 69, 1), (1, 0, 69))),
    ("humidity", "location", ((60, 56, 37), (56, 93, 4))),
)


def _render(seeds, maps):
    blocks = ["seeds: " + " ".join(str(seed) for seed in seeds)]
    for source, destination, triples in maps:
        lines = [f"{source}-to-{destination} map:"]
        lines.extend(" ".join(str(value) for value in triple) for triple in triples)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


INPUT = _render(SEEDS, MAPS)


def test_part_1():
    assert part_1(INPUT) == 35


def test_part_2():
    assert part_2_threaded(INPUT) == 46
    assert part_2_single(INPUT) == 46
    assert part_2_threaded_queue(INPUT) == 46


def test_seeds_to_ranges():
    assert seeds_to_ranges([79, 14, 55, 13]) == [range(79, 93), range(55, 68)]


def test_seeds_to_ranges_ignores_unpaired_seed():
    assert seeds_to_ranges([79, 14, 55]) == [range(79, 93)]


def test_part_1_with_trailing_newline():
    assert part_1(INPUT + "\n") == 35


def test_invalid_input_raises():
    with pytest.raises(ParseError):
        part_1("seeds: 1 2\nnot a map")