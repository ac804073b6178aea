"""Small mutable 2, 3 and 4 component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass
class Vector2:
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    def to_zero(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"Vector2({self.x:g},{self.y:g})"


@dataclass
class Vector3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_zero(self) -> None:
        self.x = self.y = self.z = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalise(self) -> None:
        """Scale to unit length in place; a zero vector is left alone."""
        length = self.length()
        if length != 0.0:
            inv = 1.0 / length
            self.x *= inv
            self.y *= inv
            self.z *= inv

    def invert(self) -> None:
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z

    def inverse(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def distance(a: Vector3, b: Vector3) -> float:
        return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        """Scale by a number, or multiply component-wise by a vector."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector3, float]) -> Vector3:
        """Divide by a number, or component-wise by a vector."""
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"Vector3({self.x:g},{self.y:g},{self.z:g})"


@dataclass
class Vector4:
    """A four component vector; every component defaults to one."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0
    w: float = 1.0

    def to_vector3(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __str__(self) -> str:
        return f"Vector4({self.x:g},{self.y:g},{self.z:g},{self.w:g})"