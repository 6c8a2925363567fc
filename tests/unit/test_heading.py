"""
Unit tests for heading parsing, labels, rotation and step deltas.
"""

import pytest

from gridbot.heading import Heading, delta, is_forward, label, parse_heading, rotate
from gridbot.utils.errors import HeadingFormatError, InvalidCommandError


def test_canonical_order():
    assert [int(h) for h in Heading] == [0, 1, 2, 3]
    assert [h.label for h in Heading] == ["N", "E", "S", "W"]


@pytest.mark.parametrize(
    "char, expected",
    [("N", Heading.NORTH), ("E", Heading.EAST), ("S", Heading.SOUTH), ("W", Heading.WEST),
     ("n", Heading.NORTH), (" w ", Heading.WEST)],
)
def test_parse_heading(char, expected):
    assert parse_heading(char) is expected


@pytest.mark.parametrize("char", [None, 12, "", " ", "M", "N E", "NE"])
def test_parse_heading_invalid(char):
    with pytest.raises(HeadingFormatError):
        parse_heading(char)


def test_label_round_trip():
    for h in Heading:
        assert parse_heading(label(h)) is h
    # Plain ints in range are accepted
    assert label(2) == "S"


@pytest.mark.parametrize("value", [None, "1", 4, -1, True])
def test_label_invalid(value):
    with pytest.raises(ValueError):
        label(value)


def test_rotate_right_full_circle():
    assert rotate(Heading.NORTH, "R") is Heading.EAST
    assert rotate(Heading.EAST, "R") is Heading.SOUTH
    assert rotate(Heading.SOUTH, " R ") is Heading.WEST
    assert rotate(Heading.WEST, "r") is Heading.NORTH


def test_rotate_left_full_circle():
    assert rotate(Heading.NORTH, "L") is Heading.WEST
    assert rotate(Heading.WEST, "L") is Heading.SOUTH
    assert rotate(Heading.SOUTH, " L ") is Heading.EAST
    assert rotate(Heading.EAST, "l") is Heading.NORTH


@pytest.mark.parametrize("heading", list(Heading))
def test_rotate_is_cyclic_of_order_four(heading):
    h = heading
    for _ in range(4):
        h = rotate(h, "R")
    assert h is heading

    h = heading
    for _ in range(4):
        h = rotate(h, "L")
    assert h is heading

    assert rotate(rotate(heading, "L"), "R") is heading


def test_rotate_invalid_command():
    with pytest.raises(InvalidCommandError):
        rotate(Heading.NORTH, "F")
    with pytest.raises(InvalidCommandError):
        rotate(Heading.NORTH, None)
    with pytest.raises(InvalidCommandError):
        rotate(Heading.NORTH, 1)


def test_rotate_invalid_heading():
    with pytest.raises(ValueError):
        rotate(-1, "R")
    with pytest.raises(ValueError):
        rotate(None, "R")


def test_delta():
    assert delta(Heading.NORTH) == (0, -1)
    assert delta(Heading.EAST) == (1, 0)
    assert delta(Heading.SOUTH) == (0, 1)
    assert delta(Heading.WEST) == (-1, 0)


@pytest.mark.parametrize("value", [None, "1", 4])
def test_delta_invalid(value):
    with pytest.raises(ValueError):
        delta(value)


def test_is_forward():
    assert is_forward("F")
    assert is_forward("f")
    assert not is_forward(None)
    assert not is_forward(12)
    assert not is_forward("")
    assert not is_forward("M")
