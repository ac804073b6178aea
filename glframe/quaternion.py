"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .common import deg_to_rad
from .matrix4 import Matrix4
from .vectors import Vector3


@dataclass
class Quaternion:
    """A quaternion (x, y, z, w); the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w

    def normalise(self) -> None:
        """Scale to unit length in place; a zero quaternion is left alone."""
        magnitude = math.sqrt(Quaternion.dot(self, self))
        if magnitude > 0.0:
            t = 1.0 / magnitude
            self.x *= t
            self.y *= t
            self.z *= t
            self.w *= t

    def __mul__(self, other: Union[Quaternion, Vector3]) -> Quaternion:
        x, y, z, w = self.x, self.y, self.z, self.w
        if isinstance(other, Quaternion):
            return Quaternion(
                x * other.w + w * other.x + y * other.z - z * other.y,
                y * other.w + w * other.y + z * other.x - x * other.z,
                z * other.w + w * other.z + x * other.y - y * other.x,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, Vector3):
            return Quaternion(
                w * other.x + y * other.z - z * other.y,
                w * other.y + z * other.x - x * other.z,
                w * other.z + x * other.y - y * other.x,
                -(x * other.x) - y * other.y - z * other.z,
            )
        return NotImplemented

    def to_matrix(self) -> Matrix4:
        """The rotation matrix this quaternion describes."""
        x, y, z, w = self.x, self.y, self.z, self.w
        m = Matrix4()
        v = m.values
        v[0] = 1 - 2 * y * y - 2 * z * z
        v[1] = 2 * x * y + 2 * z * w
        v[2] = 2 * x * z - 2 * y * w
        v[4] = 2 * x * y - 2 * z * w
        v[5] = 1 - 2 * x * x - 2 * z * z
        v[6] = 2 * y * z + 2 * x * w
        v[8] = 2 * x * z + 2 * y * w
        v[9] = 2 * y * z - 2 * x * w
        v[10] = 1 - 2 * x * x - 2 * y * y
        return m

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def generate_w(self) -> None:
        """Rebuild w from x, y and z, as stored in three-component quaternions."""
        w = 1.0 - self.x * self.x - self.y * self.y - self.z * self.z
        self.w = 0.0 if w < 0.0 else -math.sqrt(w)

    @staticmethod
    def euler_angles_to_quaternion(pitch: float, yaw: float, roll: float) -> Quaternion:
        """A quaternion from pitch, yaw and roll in degrees."""
        y2 = deg_to_rad(yaw / 2.0)
        p2 = deg_to_rad(pitch / 2.0)
        r2 = deg_to_rad(roll / 2.0)
        cosy, cosp, cosr = math.cos(y2), math.cos(p2), math.cos(r2)
        siny, sinp, sinr = math.sin(y2), math.sin(p2), math.sin(r2)
        return Quaternion(
            cosr * sinp * cosy + sinr * cosp * siny,
            cosr * cosp * siny - sinr * sinp * cosy,
            sinr * cosp * cosy - cosr * sinp * siny,
            cosr * cosp * cosy + sinr * sinp * siny,
        )

    @staticmethod
    def axis_angle_to_quaternion(vector: Vector3, degrees: float) -> Quaternion:
        """A rotation of ``degrees`` around ``vector`` (expected unit length)."""
        theta = deg_to_rad(degrees)
        s = math.sin(theta / 2.0)
        return Quaternion(vector.x * s, vector.y * s, vector.z * s, math.cos(theta / 2.0))

    @staticmethod
    def from_matrix(m: Matrix4) -> Quaternion:
        v = m.values
        w = math.sqrt(max(0.0, 1.0 + v[0] + v[5] + v[10])) / 2.0
        x = math.sqrt(max(0.0, 1.0 + v[0] - v[5] - v[10])) / 2.0
        y = math.sqrt(max(0.0, 1.0 - v[0] + v[5] - v[10])) / 2.0
        z = math.sqrt(max(0.0, 1.0 - v[0] - v[5] + v[10])) / 2.0
        return Quaternion(
            math.copysign(x, v[9] - v[6]),
            math.copysign(y, v[2] - v[8]),
            math.copysign(z, v[4] - v[1]),
            w,
        )

    def __str__(self) -> str:
        return f"Quat({self.x:g},{self.y:g},{self.z:g},{self.w:g})"