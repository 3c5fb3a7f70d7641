"""Three-component vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

_NORMALIZE_EPSILON = 0.00001


@dataclass
class Vector3f:
    """A mutable 3D vector. Multiplying two vectors gives their cross product."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_tuple(cls, values: Iterable[float]) -> Vector3f:
        """Build a vector from exactly three values."""
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def assign_tuple(self, values: Iterable[float]) -> None:
        """Overwrite the components in place from exactly three values."""
        self.x, self.y, self.z = (float(v) for v in values)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: Vector3f) -> Vector3f:
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3f) -> Vector3f:
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3f:
        return Vector3f(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: Vector3f) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3f) -> Vector3f:
        return Vector3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vector3f:
        """Return a unit vector, or the zero vector if this one is (nearly) zero."""
        length = self.length()
        if length <= _NORMALIZE_EPSILON:
            return Vector3f()
        return Vector3f(self.x / length, self.y / length, self.z / length)

    def angle(self, other: Vector3f) -> float:
        """Angle in radians between this vector and another."""
        return math.acos(self.dot(other) / (self.length() * other.length()))

    def __add__(self, other: object) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: object) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        self.assign_tuple(self.add(other))
        return self

    def __sub__(self, other: object) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return self.subtract(other)

    def __isub__(self, other: object) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        self.assign_tuple(self.subtract(other))
        return self

    def __mul__(self, other: object) -> Vector3f:
        if isinstance(other, Vector3f):
            return self.cross(other)
        if isinstance(other, Real) and not isinstance(other, bool):
            return self.scale(float(other))
        return NotImplemented

    def __imul__(self, other: object) -> Vector3f:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self.assign_tuple(result)
        return self