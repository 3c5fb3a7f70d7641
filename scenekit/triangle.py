"""Triangles in 3D space."""

from __future__ import annotations

from dataclasses import dataclass

from scenekit.vector3f import Vector3f


@dataclass
class Triangle:
    """A triangle given by three points, wound anti-clockwise for outward faces."""

    p1: Vector3f
    p2: Vector3f
    p3: Vector3f

    def area(self) -> float:
        a = self.p2 - self.p1
        b = self.p3 - self.p1
        return (a * b).length() / 2.0

    def surface_normal(self) -> Vector3f:
        """The unnormalised normal of the triangle's face."""
        u = self.p2 - self.p1
        v = self.p3 - self.p1
        return Vector3f(
            u.y * v.z - u.z * v.y,
            u.z * v.x - u.x * v.z,
            u.x * v.y - u.y * v.x,
        )