"""A 4x4 column-major matrix in the layout OpenGL expects."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Union

from .common import PI_OVER_360, deg_to_rad
from .vectors import Vector3, Vector4

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Matrix4:
    """Sixteen floats in column-major order; defaults to identity."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Optional[Iterable[float]] = None) -> None:
        if values is None:
            self.values = list(_IDENTITY)
        else:
            self.values = [float(v) for v in values]
            if len(self.values) != 16:
                raise ValueError(
                    f"a 4x4 matrix needs 16 values, got {len(self.values)}"
                )

    def to_zero(self) -> None:
        self.values = [0.0] * 16

    def to_identity(self) -> None:
        self.values = list(_IDENTITY)

    @property
    def position(self) -> Vector3:
        """The translation part (elements 12, 13 and 14)."""
        return Vector3(self.values[12], self.values[13], self.values[14])

    @position.setter
    def position(self, value: Vector3) -> None:
        self.values[12], self.values[13], self.values[14] = value.x, value.y, value.z

    @property
    def scaling(self) -> Vector3:
        """The diagonal scale part (elements 0, 5 and 10)."""
        return Vector3(self.values[0], self.values[5], self.values[10])

    @scaling.setter
    def scaling(self, value: Vector3) -> None:
        self.values[0], self.values[5], self.values[10] = value.x, value.y, value.z

    @staticmethod
    def rotation(degrees: float, axis: Vector3) -> Matrix4:
        """A rotation of ``degrees`` around ``axis``."""
        a = Vector3(*axis)
        a.normalise()
        c = math.cos(deg_to_rad(degrees))
        s = math.sin(deg_to_rad(degrees))
        t = 1.0 - c
        m = Matrix4()
        v = m.values
        v[0] = a.x * a.x * t + c
        v[1] = a.y * a.x * t + a.z * s
        v[2] = a.z * a.x * t - a.y * s
        v[4] = a.x * a.y * t - a.z * s
        v[5] = a.y * a.y * t + c
        v[6] = a.z * a.y * t + a.x * s
        v[8] = a.x * a.z * t + a.y * s
        v[9] = a.y * a.z * t - a.x * s
        v[10] = a.z * a.z * t + c
        return m

    @staticmethod
    def scale(scale: Vector3) -> Matrix4:
        m = Matrix4()
        m.scaling = scale
        return m

    @staticmethod
    def translation(translation: Vector3) -> Matrix4:
        m = Matrix4()
        m.position = translation
        return m

    @staticmethod
    def perspective(znear: float, zfar: float, aspect: float, fov: float) -> Matrix4:
        """A perspective projection with vertical field of view ``fov`` degrees."""
        m = Matrix4()
        h = 1.0 / math.tan(fov * PI_OVER_360)
        neg_depth = znear - zfar
        v = m.values
        v[0] = h / aspect
        v[5] = h
        v[10] = (zfar + znear) / neg_depth
        v[11] = -1.0
        v[14] = 2.0 * (znear * zfar) / neg_depth
        v[15] = 0.0
        return m

    @staticmethod
    def orthographic(
        znear: float, zfar: float, right: float, left: float, top: float, bottom: float
    ) -> Matrix4:
        """An orthographic projection, as glOrtho builds it."""
        m = Matrix4()
        v = m.values
        v[0] = 2.0 / (right - left)
        v[5] = 2.0 / (top - bottom)
        v[10] = -2.0 / (zfar - znear)
        v[12] = -(right + left) / (right - left)
        v[13] = -(top + bottom) / (top - bottom)
        v[14] = -(zfar + znear) / (zfar - znear)
        v[15] = 1.0
        return m

    @staticmethod
    def build_view_matrix(
        from_: Vector3, looking_at: Vector3, up: Optional[Vector3] = None
    ) -> Matrix4:
        """A view matrix with the camera at ``from_`` facing ``looking_at``."""
        if up is None:
            up = Vector3(0.0, 1.0, 0.0)
        r = Matrix4.translation(-from_)

        f = looking_at - from_
        f.normalise()
        s = Vector3.cross(f, up)
        u = Vector3.cross(s, f)
        s.normalise()
        u.normalise()

        m = Matrix4()
        v = m.values
        v[0], v[4], v[8] = s.x, s.y, s.z
        v[1], v[5], v[9] = u.x, u.y, u.z
        v[2], v[6], v[10] = -f.x, -f.y, -f.z
        return m * r

    def transposed_rotation(self) -> Matrix4:
        """The upper 3x3 part transposed, inside an identity matrix."""
        src = self.values
        m = Matrix4()
        v = m.values
        v[0], v[5], v[10] = src[0], src[5], src[10]
        v[1], v[4] = src[4], src[1]
        v[2], v[8] = src[8], src[2]
        v[6], v[9] = src[9], src[6]
        return m

    def __mul__(
        self, other: Union[Matrix4, Vector3, Vector4]
    ) -> Union[Matrix4, Vector3, Vector4]:
        v = self.values
        if isinstance(other, Matrix4):
            o = other.values
            return Matrix4(
                sum(v[c + i * 4] * o[r * 4 + i] for i in range(4))
                for r in range(4)
                for c in range(4)
            )
        if isinstance(other, Vector3):
            x, y, z = other.x, other.y, other.z
            w = x * v[3] + y * v[7] + z * v[11] + v[15]
            return Vector3(
                (x * v[0] + y * v[4] + z * v[8] + v[12]) / w,
                (x * v[1] + y * v[5] + z * v[9] + v[13]) / w,
                (x * v[2] + y * v[6] + z * v[10] + v[14]) / w,
            )
        if isinstance(other, Vector4):
            x, y, z, w = other.x, other.y, other.z, other.w
            return Vector4(
                x * v[0] + y * v[4] + z * v[8] + w * v[12],
                x * v[1] + y * v[5] + z * v[9] + w * v[13],
                x * v[2] + y * v[6] + z * v[10] + w * v[14],
                x * v[3] + y * v[7] + z * v[11] + w * v[15],
            )
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.values == other.values

    def __repr__(self) -> str:
        return f"Matrix4({self.values!r})"

    def __str__(self) -> str:
        rows = [",".join(f"{x:g}" for x in self.values[i:i + 4]) for i in range(0, 16, 4)]
        return (
            f"Mat4(\t{rows[0]}\n"
            f"\t\t{rows[1]}\n"
            f"\t\t{rows[2]}\n"
            f"\t\t{rows[3]} )\n"
        )