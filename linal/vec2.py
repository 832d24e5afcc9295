"""2D free vectors in cartesian coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import overload

from ._components import VectorOps, basis_scale, is_scalar, require_nondegenerate


@dataclass(frozen=True)
class Vec2(VectorOps):
    """2D vector (x, y)."""

    x: float
    y: float

    dim = 2
    _fields = ("x", "y")

    @staticmethod
    def from_polar(r: float, theta: float) -> "Vec2":
        """Vector of length ``r`` at angle ``theta`` (radians) from the x axis.

        Negative ``r`` and angles outside [0, 2*pi) are accepted as-is.
        """
        return Vec2(r * math.cos(theta), r * math.sin(theta))

    def to_polar(self) -> tuple[float, float]:
        return self.length(), math.atan2(self.y, self.x)

    @overload
    def cross(self) -> "Vec2": ...

    @overload
    def cross(self, rhs: "Vec2") -> float: ...

    @overload
    def cross(self, rhs: float) -> "Vec2": ...

    def cross(self, rhs=None):
        """Cross product in the plane.

        Without an argument, returns this vector rotated 90 degrees clockwise.
        With a scalar ``k``, returns that rotated vector scaled by ``k``.
        With another Vec2, returns the signed area ``x1*y2 - y1*x2``.
        """
        if rhs is None:
            return Vec2(self.y, -self.x)
        if isinstance(rhs, Vec2):
            return self.x * rhs.y - self.y * rhs.x
        if is_scalar(rhs):
            return Vec2(self.y, -self.x) * rhs
        raise TypeError(f"Cannot cross Vec2 with {type(rhs).__name__}.")

    def area(self, rhs: "Vec2") -> float:
        """Signed area of the parallelogram spanned by this vector and ``rhs``."""
        return self.dot(rhs.cross())

    @staticmethod
    def dual_basis(basis: tuple["Vec2", "Vec2"]) -> tuple["Vec2", "Vec2"]:
        """Dual basis (b1, b2) of (a1, a2), so that a_i . b_j is 1 if i == j else 0.

        Raises DegenerateBasisError when a1 and a2 are parallel.
        """
        # Rescale by a power of two so the area cannot overflow or underflow.
        scale = basis_scale(basis)
        a, b = (v / scale for v in basis)
        area = require_nondegenerate(a.area(b), a.length() * b.length())
        return b.cross() / area / scale, -a.cross() / area / scale
