"""
Commands package for gridbot.
"""

from .base import CommandBase, ExecutionStatus, ExecutionStatusCode

__all__ = [
    "CommandBase",
    "ExecutionStatus",
    "ExecutionStatusCode",
]
