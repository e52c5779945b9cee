"""Loading of FdF height maps: rows of space-separated heights."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from fdfkit.strings import atoi, split

__all__ = ["Point", "HeightMap", "parse_map", "load_map"]


@dataclass(frozen=True)
class Point:
    """A grid position with its height."""

    x: int
    y: int
    z: int


@dataclass
class HeightMap:
    """A grid of points, ``height`` rows of ``width`` points each."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)

    def __iter__(self) -> Iterator[Point]:
        for row in self.points:
            yield from row


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of text.

    The width is the number of values on the first line; every later row
    must hold at least that many values, and any beyond it are ignored.
    """
    rows = [split(line, " ") for line in lines]
    width = len(rows[0]) if rows else 0
    points = []
    for y, values in enumerate(rows):
        if len(values) < width:
            raise ValueError(
                f"row {y} has {len(values)} values, expected at least {width}"
            )
        points.append([Point(x, y, atoi(value)) for x, value in enumerate(values[:width])])
    return HeightMap(width=width, height=len(rows), points=points)


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the height map stored at ``path``."""
    with open(path, encoding="utf-8", newline="\n") as stream:
        return parse_map(stream)