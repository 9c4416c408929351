"""
Phosphor Geometry - World-Space Points
======================================

Small immutable 3D vector used to anchor effects in world space.

The waveform surface lives on the XZ plane (Y is height), so most
spatial queries only care about the horizontal distance between points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """A 3D vector for positions and directions in world space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector3":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length <= 0.0:
            return Vector3.ZERO
        return self * (1.0 / length)

    def horizontal_distance(self, x: float, z: float) -> float:
        """Distance to (x, z) on the XZ plane, ignoring height."""
        dx = x - self.x
        dz = z - self.z
        return math.sqrt(dx * dx + dz * dz)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.UP = Vector3(0.0, 1.0, 0.0)


__all__ = ['Vector3']
