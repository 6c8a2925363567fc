"""
Compass headings and the turn/step semantics attached to them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from gridbot.utils.errors import HeadingFormatError, InvalidCommandError


class Heading(int, Enum):
    """
    Robot facing direction.
    Values follow clockwise order so turning is +/-1 modulo 4.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    @property
    def label(self) -> str:
        return LABELS[self.value]


# Note! Index must correspond to Heading values
LABELS = ("N", "E", "S", "W")

# Step deltas (dx, dy); y grows downward
DELTAS = {
    Heading.NORTH: (0, -1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, 1),
    Heading.WEST: (-1, 0),
}

TURN_OFFSETS = {"L": -1, "R": 1}


def _coerce(heading: Any) -> Heading:
    """Accept a Heading or a plain int in 0..3."""
    if isinstance(heading, Heading):
        return heading
    if isinstance(heading, int) and not isinstance(heading, bool):
        try:
            return Heading(heading)
        except ValueError:
            pass
    raise ValueError(f"Invalid heading: {heading!r}")


def _normalize(token: Any) -> str | None:
    if not isinstance(token, str):
        return None
    return token.strip().upper()


def parse_heading(char: Any) -> Heading:
    """
    Parse a heading letter (N, E, S, W), ignoring case and surrounding whitespace.

    Raises:
        HeadingFormatError: for anything else
    """
    token = _normalize(char)
    if token and token in LABELS:
        return Heading(LABELS.index(token))
    raise HeadingFormatError()


def label(heading: Any) -> str:
    """Return the single-character label of a heading."""
    return LABELS[_coerce(heading).value]


def rotate(heading: Any, command: Any) -> Heading:
    """
    Turn left (L) or right (R) by 90 degrees with wraparound.

    Raises:
        ValueError: heading is not one of the four values
        InvalidCommandError: command is neither L nor R
    """
    current = _coerce(heading)
    offset = TURN_OFFSETS.get(_normalize(command) or "")
    if offset is None:
        raise InvalidCommandError(command)
    return Heading((current.value + offset) % len(Heading))


def delta(heading: Any) -> tuple[int, int]:
    """Return the (dx, dy) of one step along heading."""
    return DELTAS[_coerce(heading)]


def is_forward(command: Any) -> bool:
    """True if command is a forward step (F)."""
    return _normalize(command) == "F"
