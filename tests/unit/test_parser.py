"""
Unit tests for the startup parser and its validation ordering.
"""

import pytest

from gridbot.geometry import Point
from gridbot.heading import Heading
from gridbot.parser import parse_pose, parse_setup, parse_size, parse_start
from gridbot.types import Pose
from gridbot.utils.errors import (
    HeadingFormatError,
    ParseError,
    PositionFormatError,
    SizeFormatError,
    StartOutOfBoundsError,
)


def test_parse_size():
    assert parse_size("5 5") == Point(5, 5)
    assert parse_size(" 3  8 ") == Point(3, 8)


@pytest.mark.parametrize("text", [None, "", "5", "five 5", "5 -5"])
def test_parse_size_invalid(text):
    with pytest.raises(SizeFormatError) as exc:
        parse_size(text)
    assert str(exc.value) == 'Size could not be interpreted ("x y" expected)'
    # Still a ParseError / ValueError for generic callers
    assert isinstance(exc.value, ParseError)
    assert isinstance(exc.value, ValueError)


def test_parse_pose_returns_last_character():
    assert parse_pose("1 2 N") == (Point(1, 2), "N")
    assert parse_pose("1 2 e   ") == (Point(1, 2), "e")
    # Heading token is not validated here
    assert parse_pose("1 2") == (Point(1, 2), "2")


@pytest.mark.parametrize("text", [None, "", "N", "1 N", "a b N"])
def test_parse_pose_invalid(text):
    with pytest.raises(PositionFormatError):
        parse_pose(text)


def test_parse_start(room):
    assert parse_start("1 2 N", room) == Pose(Point(1, 2), Heading.NORTH)
    assert parse_start("4 4 w", room) == Pose(Point(4, 4), Heading.WEST)


def test_parse_start_out_of_bounds(room):
    with pytest.raises(StartOutOfBoundsError) as exc:
        parse_start("6 6 N", room)
    assert exc.value.position == Point(6, 6)
    assert exc.value.size == room
    assert str(exc.value) == (
        'Starting position is out of boundaries (in-between "0 0" and "5 5" expected)'
    )


def test_parse_start_bad_heading(room):
    with pytest.raises(HeadingFormatError):
        parse_start("1 1 X", room)


def test_bounds_checked_before_heading(room):
    # Both bounds and heading invalid: bounds error wins
    with pytest.raises(StartOutOfBoundsError):
        parse_start("9 9 X", room)


def test_position_checked_before_heading(room):
    with pytest.raises(PositionFormatError):
        parse_start("a 1 X", room)


def test_parse_setup():
    size, pose = parse_setup("5 5", "1 2 N")
    assert size == Point(5, 5)
    assert pose == Pose(Point(1, 2), Heading.NORTH)


def test_parse_setup_size_checked_first():
    with pytest.raises(SizeFormatError):
        parse_setup("bad", "bad")
