"""
Custom exception types for the gridbot parse/simulate pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""

from __future__ import annotations

from typing import Any


class GridbotError(Exception):
    """Base class for every error a run can report to the user."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(message)

    def __str__(self):
        return self.original_message


class ParseError(GridbotError, ValueError):
    """Text could not be interpreted as the expected value."""


class SizeFormatError(ParseError):
    """Room size line failed coordinate parsing."""

    def __init__(self, message: str = 'Size could not be interpreted ("x y" expected)'):
        super().__init__(message)


class PositionFormatError(ParseError):
    """Start pose line failed coordinate parsing."""

    def __init__(
        self,
        message: str = 'Start position could not be interpreted ("x y direction" expected)',
    ):
        super().__init__(message)


class HeadingFormatError(ParseError):
    """Heading character is not one of N, E, S, W."""

    def __init__(
        self,
        message: str = 'Direction could not be interpreted ("x y direction" expected)',
    ):
        super().__init__(message)


class OutOfBoundsError(GridbotError):
    """A position lies outside the room."""

    def __init__(self, message: str, position: Any = None, size: Any = None):
        self.position = position
        self.size = size
        super().__init__(message)


class StartOutOfBoundsError(OutOfBoundsError):
    """Parsed start position is outside the parsed room size."""

    def __init__(self, position: Any, size: Any):
        super().__init__(
            "Starting position is out of boundaries "
            f'(in-between "0 0" and "{size.x} {size.y}" expected)',
            position=position,
            size=size,
        )


class MovementOutOfBoundsError(OutOfBoundsError):
    """A forward step would leave the room; ``position`` is the rejected candidate."""

    def __init__(self, position: Any, size: Any = None):
        super().__init__(
            f"Out of bounds at {position.x} {position.y}",
            position=position,
            size=size,
        )


class InvalidCommandError(GridbotError, ValueError):
    """Command character is none of F, L, R."""

    def __init__(self, command: Any):
        self.command = command
        super().__init__(
            f'Command "{command}" could not be interpreted ("F", "L" or "R" expected)'
        )
