"""
Base abstractions and helpers for robot command implementations.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from gridbot.config import TRACE
from gridbot.geometry import Point
from gridbot.types import Pose, TraceKind

logger = logging.getLogger(__name__)


class ExecutionStatusCode(Enum):
    """Enumeration for run outcome codes."""
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass
class ExecutionStatus:
    """
    Tagged result of a run: either a final pose or the first error.

    On failure ``pose`` holds the last valid pose, or None when the run failed
    before a start pose existed.
    """
    code: ExecutionStatusCode
    message: str
    pose: Optional[Pose] = None
    error: Optional[Exception] = None
    details: Optional[Dict[str, Any]] = None
    error_type: Optional[str] = None

    @classmethod
    def completed(cls, pose: Pose, message: str = "Completed", details: Optional[Dict[str, Any]] = None) -> "ExecutionStatus":
        return cls(ExecutionStatusCode.COMPLETED, message, pose=pose, details=details)

    @classmethod
    def failed(cls, message: str, error: Optional[Exception] = None, pose: Optional[Pose] = None, details: Optional[Dict[str, Any]] = None) -> "ExecutionStatus":
        et = type(error).__name__ if error is not None else None
        return cls(ExecutionStatusCode.FAILED, message, pose=pose, error=error, details=details, error_type=et)

    @property
    def ok(self) -> bool:
        return self.code is ExecutionStatusCode.COMPLETED

    @property
    def report(self) -> Optional[str]:
        """Final "x y H" report for a completed run, None otherwise."""
        return str(self.pose) if self.ok and self.pose is not None else None


class CommandBase(ABC):
    """
    Reusable base for single-letter robot commands.

    Subclasses implement execute() as a pure transition from one pose to the
    next and raise a GridbotError when the transition is not allowed.
    """
    # Set by @register_command decorator
    _registered_name: ClassVar[str] = ""
    # Trace event kind reported after a successful apply()
    kind: ClassVar[TraceKind] = "turn"

    def __init__(self, letter: str = "") -> None:
        self.letter: str = letter or self._registered_name

    @property
    def name(self) -> str:
        return self._registered_name or type(self).__name__

    # Logging helpers (uniform, include command identity)
    def log_trace(self, msg: str, *args: Any) -> None:
        logger.log(TRACE, "[%s] " + msg, self.name, *args)

    def log_debug(self, msg: str, *args: Any) -> None:
        logger.debug("[%s] " + msg, self.name, *args)

    def apply(self, pose: Pose, size: Point) -> Pose:
        """Public wrapper around execute() with TRACE lifecycle logging."""
        self.log_trace("apply from %s", pose)
        try:
            new_pose = self.execute(pose, size)
        except Exception as e:
            self.log_debug("rejected at %s: %s", pose, e)
            raise
        self.log_trace("apply ok -> %s", new_pose)
        return new_pose

    @abstractmethod
    def execute(self, pose: Pose, size: Point) -> Pose:
        """
        Compute the pose after this command.

        Args:
            pose: Current robot pose
            size: Room size (exclusive upper bound)

        Returns:
            The new pose. The input pose is never modified.
        """
        raise NotImplementedError
