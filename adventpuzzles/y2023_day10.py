"""Pipe maze: walk the loop from the start tile breadth first."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

from adventpuzzles.queue import Queue

HORIZONTAL = "─"
VERTICAL = "│"
DOWN_RIGHT = "┌"
DOWN_LEFT = "┐"
UP_RIGHT = "└"
UP_LEFT = "┘"

_PIPE_SHAPES = {
    "|": VERTICAL,
    "-": HORIZONTAL,
    "L": UP_RIGHT,
    "J": UP_LEFT,
    "7": DOWN_LEFT,
    "F": DOWN_RIGHT,
}

GROUND = "."
START = "S"


class PipeError(ValueError):
    """A character is not one of the known pipe symbols."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Wrong pipe type: {symbol!r}")
        self.symbol = symbol


class SurfaceError(ValueError):
    """The maze text could not be turned into a surface."""


@dataclass(frozen=True)
class Coords:
    row: int
    col: int

    def __add__(self, other: Coords) -> Coords | None:
        return Coords(self.row + other.row, self.col + other.col)

    def __sub__(self, other: Coords) -> Coords | None:
        row, col = self.row - other.row, self.col - other.col
        if row < 0 or col < 0:
            return None
        return Coords(row, col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Pipe:
    symbol: str

    @classmethod
    def parse(cls, symbol: str) -> Pipe:
        if symbol not in _PIPE_SHAPES:
            raise PipeError(symbol)
        return cls(symbol)

    def __str__(self) -> str:
        return _PIPE_SHAPES[self.symbol]


@dataclass(frozen=True)
class SurfaceType:
    """One tile of the maze: a pipe, ground or the starting position."""

    symbol: str

    @classmethod
    def parse(cls, symbol: str) -> SurfaceType:
        if symbol in (GROUND, START):
            return cls(symbol)
        try:
            Pipe.parse(symbol)
        except PipeError as error:
            raise SurfaceError(str(error)) from error
        return cls(symbol)

    @property
    def pipe(self) -> Pipe | None:
        return Pipe(self.symbol) if self.symbol in _PIPE_SHAPES else None

    @property
    def is_start(self) -> bool:
        return self.symbol == START

    def is_pipe(self) -> bool:
        return self.symbol in _PIPE_SHAPES

    def __str__(self) -> str:
        pipe = self.pipe
        return str(pipe) if pipe is not None else self.symbol


@dataclass
class BfsSearch:
    """State of a breadth-first walk that advances one node per step."""

    initialised: bool = False
    finished: bool = False
    visited: set[Coords] = field(default_factory=set)
    queue: Queue[Coords] = field(default_factory=Queue)
    distances: dict[Coords, int] = field(default_factory=dict)

    def init(self, start: Coords) -> None:
        """Seed the search with the start node, once."""
        if not self.visited and self.queue.is_empty():
            self.visited.add(start)
            self.queue.enqueue(start)
            self.distances[start] = 0
            self.initialised = True

    def longest_route_in_loop(self) -> int:
        return max(self.distances.values(), default=0)


@dataclass
class Surface:
    """The maze grid with its start tile and search state."""

    start_position: Coords
    grid: list[list[SurfaceType]]
    search: BfsSearch = field(default_factory=BfsSearch)

    def __len__(self) -> int:
        return len(self.grid)

    def __getitem__(self, row: int) -> list[SurfaceType]:
        return self.grid[row]

    def __iter__(self):
        return iter(self.grid)

    def _tile(self, position: Coords) -> SurfaceType:
        return self.grid[position.row][position.col]

    def update(self) -> None:
        """Explore one node of the search, or mark the search finished."""
        if not self.search.initialised:
            self.search.init(self.start_position)
        node = self.search.queue.dequeue()
        if node is None:
            self.search.finished = True
            return
        self.search.visited.add(node)
        children = [c for c in self.directions_for(node) if c not in self.search.visited]
        distance = self.search.distances[node]
        for child in children:
            self.search.distances[child] = distance + 1
            self.search.queue.enqueue(child)

    def directions_for(self, position: Coords) -> list[Coords]:
        """Pipe tiles reachable from ``position``."""
        lower = position + Coords(1, 0)
        upper = position - Coords(1, 0)
        right = position + Coords(0, 1)
        left = position - Coords(0, 1)

        tile = self._tile(position)
        if tile.is_pipe():
            candidates = {
                HORIZONTAL: [left, right],
                VERTICAL: [upper, lower],
                DOWN_RIGHT: [right, lower],
                DOWN_LEFT: [lower, left],
                UP_RIGHT: [upper, right],
                UP_LEFT: [left, upper],
            }[str(tile)]
        elif tile.is_start:
            candidates = self._start_candidates(left, upper, right, lower)
        else:
            candidates = []
        return [c for c in candidates if c is not None and self._tile(c).is_pipe()]

    def _start_candidates(
        self,
        left: Coords | None,
        upper: Coords | None,
        right: Coords | None,
        lower: Coords | None,
    ) -> list[Coords | None]:
        result: list[Coords | None] = []
        if left is not None and str(self._tile(left)) in (UP_LEFT, DOWN_LEFT, HORIZONTAL):
            result.append(left)
        if upper is not None and str(self._tile(upper)) in (VERTICAL, DOWN_RIGHT, DOWN_LEFT):
            result.append(upper)
        if right is not None and str(self._tile(right)) in (UP_LEFT, DOWN_LEFT, HORIZONTAL):
            result.append(right)
        if lower is not None:
            below = self._tile(lower)
            if str(below) in (VERTICAL, UP_RIGHT, UP_LEFT):
                result.append(lower)
            if below.is_pipe():
                result.append(left)
        return result


def build_surface(text: str) -> Surface:
    """Parse the maze; the last ``S`` found is the start."""
    start: Coords | None = None
    grid = []
    for row, line in enumerate(text.splitlines()):
        tiles = []
        for col, symbol in enumerate(line):
            tile = SurfaceType.parse(symbol)
            if tile.is_start:
                start = Coords(row, col)
            tiles.append(tile)
        grid.append(tiles)
    if start is None:
        raise SurfaceError("Starting position not found")
    return Surface(start, grid)


def solve_parts(text: str) -> tuple[int, int]:
    """Run the search to the end; the second value is not computed and stays 0."""
    surface = build_surface(text)
    while not surface.search.finished:
        surface.update()
    return surface.search.longest_route_in_loop(), 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pipe maze loop search.")
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    longest, _ = solve_parts(text)
    print(f"Part 1 answer: {longest}")
    return 0