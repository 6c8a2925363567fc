"""
Command simulator.

Applies a command string to a pose inside a fixed room, strictly left to
right, stopping at the first command that fails. Commands already applied are
kept; nothing is rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from gridbot.command_registry import create_command
from gridbot.commands.base import ExecutionStatus
from gridbot.config import TRACE
from gridbot.geometry import Point, within_bounds
from gridbot.types import Pose, TraceEvent
from gridbot.utils.errors import GridbotError, InvalidCommandError, StartOutOfBoundsError

logger = logging.getLogger(__name__)

TraceObserver = Callable[[TraceEvent], None]


class Simulator:
    """
    Owns the robot pose for one run.

    Args:
        size: Room size (exclusive upper bound)
        pose: Start pose; must lie inside the room
        observer: Optional callable receiving a TraceEvent after every
            successfully applied command
    """

    def __init__(self, size: Point, pose: Pose, observer: TraceObserver | None = None):
        if not within_bounds(pose.position, size):
            raise StartOutOfBoundsError(pose.position, size)
        self.size = size
        self._pose = pose
        self.observer = observer
        self.applied = 0

    @property
    def pose(self) -> Pose:
        return self._pose

    def step(self, command: str) -> Pose:
        """
        Apply a single command character.

        Raises:
            InvalidCommandError: command is none of F, L, R
            MovementOutOfBoundsError: a forward step would leave the room
        """
        cmd = create_command(command)
        if cmd is None:
            raise InvalidCommandError(command)

        self._pose = cmd.apply(self._pose, self.size)
        self.applied += 1
        logger.log(TRACE, "%s %r -> %s", cmd.kind, cmd.letter, self._pose)

        if self.observer is not None:
            self.observer(TraceEvent(cmd.kind, cmd.letter, self._pose))
        return self._pose

    def run(self, commands: str) -> ExecutionStatus:
        """
        Apply every character of commands in order.

        Returns:
            COMPLETED status with the final pose, or FAILED status with the
            first error and the last valid pose.
        """
        for index, command in enumerate(commands):
            try:
                self.step(command)
            except GridbotError as e:
                logger.debug("Command %d (%r) failed: %s", index, command, e)
                return ExecutionStatus.failed(
                    str(e), error=e, pose=self._pose, details={"index": index, "command": command}
                )
        return ExecutionStatus.completed(self._pose, details={"applied": self.applied})


def run_commands(
    size: Point, pose: Pose, commands: str, observer: TraceObserver | None = None
) -> ExecutionStatus:
    """Run a command string from pose in a fresh Simulator."""
    return Simulator(size, pose, observer=observer).run(commands)
