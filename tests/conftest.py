"""
Pytest configuration and shared fixtures for gridbot tests.
"""

import os
import sys
from collections.abc import Callable

import pytest

# Add the parent directory to Python path so we can import the package without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from gridbot.geometry import Point
from gridbot.heading import Heading
from gridbot.simulation import Simulator
from gridbot.types import Pose, TraceEvent


@pytest.fixture
def room() -> Point:
    """Default 5x5 room."""
    return Point(5, 5)


@pytest.fixture
def make_pose() -> Callable[..., Pose]:
    def _make(x: int, y: int, heading: Heading = Heading.NORTH) -> Pose:
        return Pose(Point(x, y), heading)

    return _make


@pytest.fixture
def events() -> list[TraceEvent]:
    """List collecting trace events; pass events.append as observer."""
    return []


@pytest.fixture
def make_simulator(room, make_pose, events) -> Callable[..., Simulator]:
    """Build a traced simulator in the default room."""

    def _make(x: int = 1, y: int = 1, heading: Heading = Heading.NORTH, size: Point | None = None) -> Simulator:
        return Simulator(size or room, make_pose(x, y, heading), observer=events.append)

    return _make


class LineFeed:
    """Line provider over fixed lines, counting how many were read."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.reads = 0

    def __call__(self) -> str:
        line = self.lines[self.reads]
        self.reads += 1
        return line


@pytest.fixture
def line_feed() -> Callable[..., LineFeed]:
    return LineFeed
