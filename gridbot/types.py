"""
Value types shared by the parser, simulator and session driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from gridbot.geometry import Point
from gridbot.heading import Heading, label

TraceKind = Literal["move", "turn"]


@dataclass(frozen=True)
class Pose:
    """Robot state: position plus heading. Replaced, never mutated."""

    position: Point
    heading: Heading

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def __str__(self):
        # Report format, e.g. "3 0 E"
        return f"{self.position.x} {self.position.y} {label(self.heading)}"


@dataclass(frozen=True)
class TraceEvent:
    """Observation emitted after a command was applied."""

    kind: TraceKind
    command: str
    pose: Pose

    @property
    def position(self) -> Point:
        return self.pose.position

    @property
    def heading(self) -> Heading:
        return self.pose.heading
