"""Row-major 4x4 matrices of floats for 3D transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from scenekit.vector3f import Vector3f

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _product(a: list[float], b: list[float]) -> list[float]:
    return [
        sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))
        for row in range(4)
        for col in range(4)
    ]


def _inverse(x: list[float]) -> list[float]:
    a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p = x

    t0, t1, t2 = k * p - l * o, j * p - l * n, j * o - k * n
    t3, t4, t5 = i * p - l * m, i * o - k * m, i * n - j * m
    t6, t7, t8 = g * p - h * o, f * p - h * n, f * o - g * n
    t9, u0, u1 = g * l - h * k, f * l - h * j, f * k - g * j
    u2, u3, u4 = e * p - h * m, e * o - g * m, e * l - h * i
    u5, u6, u7 = e * k - g * i, e * n - f * m, e * j - f * i

    d0 = f * t0 - g * t1 + h * t2
    d1 = e * t0 - g * t3 + h * t4
    d2 = e * t1 - f * t3 + h * t5
    d3 = e * t2 - f * t4 + g * t5

    determinant = a * d0 - b * d1 + c * d2 - d * d3
    if determinant == 0:
        raise ValueError("matrix is singular and has no inverse")
    det = 1.0 / determinant

    return [
        det * (f * t0 - g * t1 + h * t2), det * -(b * t0 - c * t1 + d * t2),
        det * (b * t6 - c * t7 + d * t8), det * -(b * t9 - c * u0 + d * u1),
        det * -(e * t0 - g * t3 + h * t4), det * (a * t0 - c * t3 + d * t4),
        det * -(a * t6 - c * u2 + d * u3), det * (a * t9 - c * u4 + d * u5),
        det * (e * t1 - f * t3 + h * t5), det * -(a * t1 - b * t3 + d * t5),
        det * (a * t7 - b * u2 + d * u6), det * -(a * u0 - b * u4 + d * u7),
        det * -(e * t2 - f * t4 + g * t5), det * (a * t2 - b * t4 + c * t5),
        det * -(a * t8 - b * u3 + c * u6), det * (a * u1 - b * u5 + c * u7),
    ]


@dataclass
class Matrix4f:
    """A mutable row-major 4x4 matrix. Transforms compose by post-multiplying."""

    values: list[float]

    def __post_init__(self) -> None:
        self.values = [float(v) for v in self.values]
        if len(self.values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(self.values)}")

    @classmethod
    def identity(cls) -> Matrix4f:
        return cls(list(_IDENTITY))

    @classmethod
    def translation(cls, tx: float, ty: float, tz: float) -> Matrix4f:
        return cls([
            1.0, 0.0, 0.0, tx,
            0.0, 1.0, 0.0, ty,
            0.0, 0.0, 1.0, tz,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float) -> Matrix4f:
        return cls([
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def x_rotation(cls, radians: float) -> Matrix4f:
        c, s = math.cos(radians), math.sin(radians)
        return cls([
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def y_rotation(cls, radians: float) -> Matrix4f:
        c, s = math.cos(radians), math.sin(radians)
        return cls([
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def z_rotation(cls, radians: float) -> Matrix4f:
        c, s = math.cos(radians), math.sin(radians)
        return cls([
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def orthographic(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Matrix4f:
        sx = 2.0 / (right - left)
        sy = 2.0 / (top - bottom)
        sz = 2.0 / (near - far)

        tx = (left + right) / (left - right)
        ty = (bottom + top) / (bottom - top)
        tz = (near + far) / (near - far)

        return cls([
            sx, 0.0, 0.0, tx,
            0.0, sy, 0.0, ty,
            0.0, 0.0, sz, tz,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float) -> Matrix4f:
        tangent = math.tan((math.pi - fovy) / 2.0)
        depth_inv = 1.0 / (near - far)

        sx = tangent / aspect
        sy = tangent
        sz = (near + far) * depth_inv
        tz = near * far * depth_inv * 2.0

        return cls([
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, tz,
            0.0, 0.0, -1.0, 0.0,
        ])

    @classmethod
    def look_at(
        cls, camera_position: Vector3f, target: Vector3f, up: Vector3f
    ) -> Matrix4f:
        """A camera transform placed at camera_position and facing target."""
        z_axis = (camera_position - target).normalize()
        x_axis = (up * z_axis).normalize()
        y_axis = (z_axis * x_axis).normalize()

        return cls([
            x_axis.x, y_axis.x, z_axis.x, camera_position.x,
            x_axis.y, y_axis.y, z_axis.y, camera_position.y,
            x_axis.z, y_axis.z, z_axis.z, camera_position.z,
            0.0, 0.0, 0.0, 1.0,
        ])

    def assign_tuple(self, values: Iterable[float]) -> None:
        """Overwrite all sixteen values in place."""
        new_values = [float(v) for v in values]
        if len(new_values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(new_values)}")
        self.values[:] = new_values

    def multiply(self, other: Matrix4f) -> Matrix4f:
        return Matrix4f(_product(self.values, other.values))

    def translate(self, tx: float, ty: float, tz: float) -> Matrix4f:
        return self.multiply(Matrix4f.translation(tx, ty, tz))

    def scale(self, sx: float, sy: float, sz: float) -> Matrix4f:
        return self.multiply(Matrix4f.scaling(sx, sy, sz))

    def x_rotate(self, radians: float) -> Matrix4f:
        return self.multiply(Matrix4f.x_rotation(radians))

    def y_rotate(self, radians: float) -> Matrix4f:
        return self.multiply(Matrix4f.y_rotation(radians))

    def z_rotate(self, radians: float) -> Matrix4f:
        return self.multiply(Matrix4f.z_rotation(radians))

    def inverse(self) -> Matrix4f:
        """The inverse matrix; raises ValueError if the matrix is singular."""
        return Matrix4f(_inverse(self.values))

    def position(self) -> Vector3f:
        """The translation part of the matrix."""
        return Vector3f(self.values[3], self.values[7], self.values[11])

    def __mul__(self, other: object) -> Matrix4f:
        if not isinstance(other, Matrix4f):
            return NotImplemented
        return self.multiply(other)

    def __imul__(self, other: object) -> Matrix4f:
        if not isinstance(other, Matrix4f):
            return NotImplemented
        self.assign_tuple(_product(self.values, other.values))
        return self

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return 16