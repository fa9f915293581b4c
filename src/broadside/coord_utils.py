from __future__ import annotations

from enum import IntEnum
from typing import Iterator, NamedTuple


class Point(NamedTuple):
    """Zero-based (row, col) board coordinate."""

    r: int
    c: int


class Direction(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


# Unit steps for the four cardinal directions: right, left, down, up.
CARDINALS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def footprint(origin: Point, length: int, direction: Direction) -> Iterator[Point]:
    """
    Yield the *length* cells a ship occupies when its top/left cell is
    *origin*, extending right (horizontal) or down (vertical).
    """
    r, c = origin
    for i in range(length):
        if direction == Direction.HORIZONTAL:
            yield Point(r, c + i)
        else:
            yield Point(r + i, c)


def format_coord(point: Point) -> str:
    """
    Convert a Point to the "(r,c)" form used in log lines.
    """
    return f"({point.r},{point.c})"
