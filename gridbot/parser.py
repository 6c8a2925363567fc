"""
Startup parser for gridbot.

Turns the room size line and the start pose line into validated values.
Checks run in a fixed order and stop at the first failure:

1. size          -> SizeFormatError
2. position      -> PositionFormatError
3. bounds        -> StartOutOfBoundsError
4. heading       -> HeadingFormatError
"""

from __future__ import annotations

import logging
from typing import Any

from gridbot.config import TRACE
from gridbot.geometry import Point, parse_coordinates, within_bounds
from gridbot.heading import parse_heading
from gridbot.types import Pose
from gridbot.utils.errors import (
    ParseError,
    PositionFormatError,
    SizeFormatError,
    StartOutOfBoundsError,
)

logger = logging.getLogger(__name__)


def parse_size(text: Any) -> Point:
    """Parse the room size line ("x y")."""
    try:
        size = parse_coordinates(text)
    except ParseError as e:
        logger.log(TRACE, "size rejected: %s", e)
        raise SizeFormatError() from e
    return size


def parse_pose(text: Any) -> tuple[Point, str]:
    """
    Parse the start pose line ("x y direction").

    Returns:
        Tuple of (position, heading_token) where heading_token is the last
        non-whitespace character of the line. The token is not validated here.
    """
    try:
        position = parse_coordinates(text)
    except ParseError as e:
        logger.log(TRACE, "position rejected: %s", e)
        raise PositionFormatError() from e

    stripped = text.rstrip()
    if not stripped:
        raise PositionFormatError()
    return position, stripped[-1]


def parse_start(text: Any, size: Point) -> Pose:
    """Parse the start pose line and validate it against an already parsed size."""
    position, heading_token = parse_pose(text)
    if not within_bounds(position, size):
        raise StartOutOfBoundsError(position, size)
    heading = parse_heading(heading_token)
    return Pose(position, heading)


def parse_setup(size_text: Any, pose_text: Any) -> tuple[Point, Pose]:
    """Parse both startup lines. Returns (size, start_pose)."""
    size = parse_size(size_text)
    return size, parse_start(pose_text, size)
