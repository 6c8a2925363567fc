"""
gridbot Python Package

Simulates a single robot moving inside a bounded rectangular grid, driven by
F (forward), L (turn left) and R (turn right) commands.

Key components:
- parse_setup: Parse the room size and start pose lines
- Simulator: Apply a command string to a pose inside the room
- Session / run_session: Run the full three-line flow and report one outcome
- ExecutionStatus: Tagged result (final pose or first error)
"""

from ._version import __version__
from .commands.base import ExecutionStatus, ExecutionStatusCode
from .geometry import Point, parse_coordinates, within_bounds
from .heading import Heading, delta, label, parse_heading, rotate
from .parser import parse_pose, parse_setup, parse_size, parse_start
from .session import Session, format_report, run_session
from .simulation import Simulator, run_commands
from .types import Pose, TraceEvent

__all__ = [
    "__version__",
    "ExecutionStatus",
    "ExecutionStatusCode",
    "Heading",
    "Point",
    "Pose",
    "Session",
    "Simulator",
    "TraceEvent",
    "delta",
    "format_report",
    "label",
    "parse_coordinates",
    "parse_heading",
    "parse_pose",
    "parse_setup",
    "parse_size",
    "parse_start",
    "rotate",
    "run_commands",
    "run_session",
    "within_bounds",
]
