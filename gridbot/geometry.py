"""
Integer grid geometry: points, coordinate parsing and room bounds.

The room spans [0, size.x) x [0, size.y); y grows downward.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from gridbot.heading import Heading, delta
from gridbot.utils.errors import ParseError

# Leading integer prefix of a token ("1.2" -> 1, "7abc" -> 7)
INT_PREFIX_PATTERN = re.compile(r"^[+-]?[0-9]+")


@dataclass(frozen=True)
class Point:
    """Immutable grid coordinate. Also used as a room size (exclusive upper bound)."""

    x: int
    y: int

    def __add__(self, other: Any) -> Point:
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        if isinstance(other, tuple) and len(other) == 2:
            return Point(self.x + other[0], self.y + other[1])
        return NotImplemented

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"{self.x} {self.y}"


def parse_int_prefix(token: str) -> int | None:
    """Parse the leading integer of a token, or None if there is none."""
    match = INT_PREFIX_PATTERN.match(token)
    return int(match.group(0)) if match else None


def parse_coordinates(text: Any) -> Point:
    """
    Parse the first two whitespace-separated tokens of text as a Point.

    Extra tokens are ignored. Both values must be non-negative integers.

    Raises:
        ParseError: non-string input, fewer than two tokens, or a
            non-numeric/negative value.
    """
    if not isinstance(text, str):
        raise ParseError(f"Coordinates must be text, got {type(text).__name__}")

    tokens = text.split()
    if len(tokens) < 2:
        raise ParseError(f"Two coordinates expected, got {len(tokens)}: {text!r}")

    x = parse_int_prefix(tokens[0])
    y = parse_int_prefix(tokens[1])
    if x is None or y is None:
        raise ParseError(f"Coordinates are not integers: {text!r}")
    if x < 0 or y < 0:
        raise ParseError(f"Coordinates must not be negative: {text!r}")
    return Point(x, y)


def within_bounds(position: Point | None, size: Point | None) -> bool:
    """True iff position lies in [0, size.x) x [0, size.y). Never raises."""
    if position is None or size is None:
        return False
    return 0 <= position.x < size.x and 0 <= position.y < size.y


def step_position(position: Point, heading: Heading | int) -> Point:
    """Return the neighbouring point one step along heading."""
    return position + delta(heading)
