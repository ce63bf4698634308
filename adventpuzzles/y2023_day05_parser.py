"""Parser for the seed almanac: seeds followed by a chain of range maps."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field

_U64_MAX = 2**64 - 1

_SEEDS = re.compile(r"seeds: ([0-9]+(?:[ \t]+[0-9]+)*)\r?\n")
_HEADER = re.compile(r"\r?\n([A-Za-z]+)-to-([A-Za-z]+) map:\r?\n")
_RANGE = re.compile(r"([0-9]+)[ \t]+([0-9]+)[ \t]+([0-9]+)(?:\r?\n)?")


class ParseError(ValueError):
    """The almanac text does not follow the expected layout."""

    def __init__(self, remaining: str) -> None:
        super().__init__(f"could not parse almanac at {remaining[:40]!r}")
        self.remaining = remaining


def _u64(text: str, remaining: str) -> int:
    value = int(text)
    if value > _U64_MAX:
        raise ParseError(remaining)
    return value


@dataclass(frozen=True)
class SeedRange:
    """A run of ``length`` source numbers mapped onto consecutive destinations."""

    dest_start: int
    source_start: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source_start + self.length - 1

    @property
    def dest_end(self) -> int:
        return self.dest_start + self.length - 1

    def __contains__(self, number: int) -> bool:
        return self.source_start <= number <= self.source_end

    def destination(self, number: int) -> int | None:
        """Map ``number`` if it lies in the source run, else None."""
        if number in self:
            return self.dest_start + (number - self.source_start)
        return None

    def __str__(self) -> str:
        return (
            f"src: {self.source_start:>11}..={self.source_end:<11}, "
            f"dst: {self.dest_start:>11}..={self.dest_end:<11}"
        )


@dataclass(frozen=True)
class Map:
    """A named source-to-destination map made of sorted ranges."""

    source: str
    destination_name: str
    ranges: tuple[SeedRange, ...]
    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.ranges, key=lambda r: r.source_start))
        object.__setattr__(self, "ranges", ordered)
        object.__setattr__(self, "_starts", tuple(r.source_start for r in ordered))

    def destination(self, number: int) -> int:
        """Map ``number``; numbers outside every range map to themselves."""
        index = bisect_right(self._starts, number) - 1
        if index >= 0:
            mapped = self.ranges[index].destination(number)
            if mapped is not None:
                return mapped
        return number

    def __str__(self) -> str:
        lines = [f"{self.source}-to-{self.destination_name} map:"]
        lines.extend(str(r) for r in self.ranges)
        return "\n".join(lines)


@dataclass(frozen=True)
class ParseResult:
    seeds: list[int]
    maps: list[Map]


def _seeds_at(text: str) -> tuple[list[int], int]:
    match = _SEEDS.match(text)
    if match is None:
        raise ParseError(text)
    seeds = [_u64(word, text) for word in match.group(1).split()]
    return seeds, match.end()


def parse_seeds(text: str) -> tuple[list[int], str]:
    """Parse the ``seeds: ...`` line; return the seeds and the unparsed rest."""
    seeds, end = _seeds_at(text)
    return seeds, text[end:]


def _map_at(text: str, pos: int) -> tuple[Map, int] | None:
    header = _HEADER.match(text, pos)
    if header is None:
        return None
    pos = header.end()
    ranges = []
    while (row := _RANGE.match(text, pos)) is not None:
        rest = text[pos:]
        dest, source, length = (_u64(row.group(i), rest) for i in (1, 2, 3))
        ranges.append(SeedRange(dest, source, length))
        pos = row.end()
    if not ranges:
        return None
    return Map(header.group(1), header.group(2), tuple(ranges)), pos


def parse_input(text: str) -> ParseResult:
    """Parse a whole almanac; the text must be consumed completely."""
    seeds, pos = _seeds_at(text)
    maps = []
    while (parsed := _map_at(text, pos)) is not None:
        almanac_map, pos = parsed
        maps.append(almanac_map)
    if not maps or pos != len(text):
        raise ParseError(text[pos:])
    return ParseResult(seeds, maps)