"""Line-based debug drawing, collected per projection mode."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .common import deg_to_rad
from .matrix4 import Matrix4
from .vectors import Vector3

# Maps clip space [-1, 1] into texture space [0, 1].
BIAS_MATRIX = Matrix4(
    (
        0.5, 0.0, 0.0, 0.0,
        0.0, 0.5, 0.0, 0.0,
        0.0, 0.0, 0.5, 0.0,
        0.5, 0.5, 0.5, 1.0,
    )
)

# Projection used for orthographic debug lines when no matrix is given.
DEFAULT_ORTHO = Matrix4.orthographic(-1.0, 1.0, 720.0, 0.0, 0.0, 480.0)

CIRCLE_STEPS = 18


def _white() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


def _copy(v: Vector3) -> Vector3:
    return Vector3(v.x, v.y, v.z)


class DebugDrawMode(Enum):
    """Which projection a debug line is drawn with."""

    ORTHO = 0
    PERSPECTIVE = 1


@dataclass
class DebugDrawData:
    """Line end points and their colours, two entries per line."""

    lines: List[Vector3] = field(default_factory=list)
    colours: List[Vector3] = field(default_factory=list)

    def add_line(
        self,
        start: Vector3,
        end: Vector3,
        start_colour: Optional[Vector3] = None,
        end_colour: Optional[Vector3] = None,
    ) -> None:
        self.lines.append(_copy(start))
        self.lines.append(_copy(end))
        self.colours.append(_copy(start_colour) if start_colour is not None else _white())
        self.colours.append(_copy(end_colour) if end_colour is not None else _white())

    def clear(self) -> None:
        self.lines.clear()
        self.colours.clear()

    def __len__(self) -> int:
        """The number of lines held."""
        return len(self.lines) // 2


class DebugDraw:
    """Collects debug shapes for the orthographic and perspective passes."""

    def __init__(self) -> None:
        self._data: Dict[DebugDrawMode, DebugDrawData] = {
            mode: DebugDrawData() for mode in DebugDrawMode
        }

    def data(self, mode: DebugDrawMode) -> DebugDrawData:
        """The pending lines for ``mode``."""
        return self._data[DebugDrawMode(mode)]

    def line(
        self,
        mode: DebugDrawMode,
        start: Vector3,
        end: Vector3,
        start_colour: Optional[Vector3] = None,
        end_colour: Optional[Vector3] = None,
    ) -> None:
        self.data(mode).add_line(start, end, start_colour, end_colour)

    def box(
        self,
        mode: DebugDrawMode,
        at: Vector3,
        scale: Vector3,
        colour: Optional[Vector3] = None,
    ) -> None:
        """An axis-aligned rectangle in the xy plane centred on ``at``."""
        target = self.data(mode)
        hx, hy = scale.x * 0.5, scale.y * 0.5
        corners = [
            at + Vector3(-hx, hy, 0.0),
            at + Vector3(-hx, -hy, 0.0),
            at + Vector3(hx, -hy, 0.0),
            at + Vector3(hx, hy, 0.0),
        ]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            target.add_line(start, end, colour, colour)

    def cross(
        self,
        mode: DebugDrawMode,
        at: Vector3,
        scale: Vector3,
        colour: Optional[Vector3] = None,
    ) -> None:
        """Two diagonal lines in the xy plane crossing at ``at``."""
        target = self.data(mode)
        hx, hy = scale.x * 0.5, scale.y * 0.5
        target.add_line(
            at + Vector3(-hx, -hy, 0.0), at + Vector3(hx, hy, 0.0), colour, colour
        )
        target.add_line(
            at + Vector3(hx, -hy, 0.0), at + Vector3(-hx, hy, 0.0), colour, colour
        )

    def circle(
        self,
        mode: DebugDrawMode,
        at: Vector3,
        radius: float,
        colour: Optional[Vector3] = None,
    ) -> None:
        """A circle of line segments around ``at`` in the z = 0 plane."""
        target = self.data(mode)
        divisor = 360.0 / CIRCLE_STEPS
        for i in range(CIRCLE_STEPS):
            a0 = deg_to_rad(i * divisor)
            a1 = deg_to_rad((i + 1) * divisor)
            start = Vector3(radius * math.cos(a0) + at.x, radius * math.sin(a0) + at.y, 0.0)
            end = Vector3(radius * math.cos(a1) + at.x, radius * math.sin(a1) + at.y, 0.0)
            target.add_line(start, end, colour, colour)

    def flush(self, mode: DebugDrawMode) -> DebugDrawData:
        """Hand over the pending lines for ``mode`` and start afresh."""
        target = self.data(mode)
        drained = DebugDrawData(list(target.lines), list(target.colours))
        target.clear()
        return drained