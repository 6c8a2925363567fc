"""
Motion commands: step forward, turn left, turn right.
"""

from __future__ import annotations

from dataclasses import replace

from gridbot.command_registry import register_command
from gridbot.commands.base import CommandBase
from gridbot.geometry import Point, step_position, within_bounds
from gridbot.heading import rotate
from gridbot.types import Pose
from gridbot.utils.errors import MovementOutOfBoundsError


@register_command("F")
class ForwardCommand(CommandBase):
    """Move one cell along the current heading."""
    kind = "move"

    def execute(self, pose: Pose, size: Point) -> Pose:
        candidate = step_position(pose.position, pose.heading)
        if not within_bounds(candidate, size):
            raise MovementOutOfBoundsError(candidate, size)
        return replace(pose, position=candidate)


class TurnCommand(CommandBase):
    """Rotate 90 degrees in place; the position never changes."""
    kind = "turn"

    def execute(self, pose: Pose, size: Point) -> Pose:
        return replace(pose, heading=rotate(pose.heading, self._registered_name))


@register_command("L")
class TurnLeftCommand(TurnCommand):
    """Counter-clockwise turn."""


@register_command("R")
class TurnRightCommand(TurnCommand):
    """Clockwise turn."""
