"""
Shared helpers for gridbot.
"""

from .errors import (
    GridbotError,
    HeadingFormatError,
    InvalidCommandError,
    MovementOutOfBoundsError,
    OutOfBoundsError,
    ParseError,
    PositionFormatError,
    SizeFormatError,
    StartOutOfBoundsError,
)

__all__ = [
    "GridbotError",
    "ParseError",
    "SizeFormatError",
    "PositionFormatError",
    "HeadingFormatError",
    "OutOfBoundsError",
    "StartOutOfBoundsError",
    "MovementOutOfBoundsError",
    "InvalidCommandError",
]
