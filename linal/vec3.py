"""3D free vectors in cartesian coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ._components import VectorOps, basis_scale, require_nondegenerate


@dataclass(frozen=True)
class Vec3(VectorOps):
    """3D vector (x, y, z)."""

    x: float
    y: float
    z: float

    dim = 3
    _fields = ("x", "y", "z")

    @staticmethod
    def from_spherical(r: float, theta: float, phi: float) -> "Vec3":
        """Vector from spherical coordinates.

        ``theta`` is the polar angle measured from the z axis and ``phi`` the
        azimuth in the xy plane, both in radians.
        """
        return Vec3(
            r * math.sin(theta) * math.cos(phi),
            r * math.sin(theta) * math.sin(phi),
            r * math.cos(theta),
        )

    def to_spherical(self) -> tuple[float, float, float]:
        return (
            self.length(),
            math.atan2(math.hypot(self.x, self.y), self.z),
            math.atan2(self.y, self.x),
        )

    def cross(self, rhs: "Vec3") -> "Vec3":
        if not isinstance(rhs, Vec3):
            raise TypeError(f"Cannot cross Vec3 with {type(rhs).__name__}.")
        return Vec3(
            self.y * rhs.z - self.z * rhs.y,
            self.z * rhs.x - self.x * rhs.z,
            self.x * rhs.y - self.y * rhs.x,
        )

    @staticmethod
    def dual_basis(basis: tuple["Vec3", "Vec3", "Vec3"]) -> tuple["Vec3", "Vec3", "Vec3"]:
        """Reciprocal basis of (a, b, c), normalized by the triple product."""
        scale = basis_scale(basis)
        a, b, c = (v / scale for v in basis)
        volume = require_nondegenerate(triple_product(a, b, c), a.length() * b.length() * c.length())
        return b.cross(c) / volume / scale, c.cross(a) / volume / scale, a.cross(b) / volume / scale


def triple_product(a: Vec3, b: Vec3, c: Vec3) -> float:
    """Signed volume a . (b x c) of the parallelepiped spanned by a, b, c."""
    return a.dot(b.cross(c))
