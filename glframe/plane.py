"""An infinite plane, used for frustum tests."""

from __future__ import annotations

import math
from typing import Optional

from .vectors import Vector3


class Plane:
    """A plane given by a normal and a distance from the origin."""

    def __init__(
        self,
        normal: Optional[Vector3] = None,
        distance: float = 0.0,
        normalise: bool = False,
    ) -> None:
        normal = Vector3(*normal) if normal is not None else Vector3()
        if normalise:
            length = math.sqrt(Vector3.dot(normal, normal))
            self.normal = normal / length
            self.distance = distance / length
        else:
            self.normal = normal
            self.distance = distance

    def sphere_in_plane(self, position: Vector3, radius: float) -> bool:
        """Whether a sphere lies at least partly on the normal's side."""
        return Vector3.dot(position, self.normal) + self.distance > -radius

    def __repr__(self) -> str:
        return f"Plane(normal={self.normal!r}, distance={self.distance!r})"