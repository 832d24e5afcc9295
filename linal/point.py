"""Points on the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import overload

from ._components import Components
from .vec2 import Vec2


@dataclass(frozen=True)
class Point(Components):
    """Absolute position (x, y).

    A point can be translated by a Vec2 and two points differ by a Vec2.
    Adding two points is undefined and raises TypeError.
    """

    x: float
    y: float

    dim = 2
    _fields = ("x", "y")

    @staticmethod
    def from_polar(r: float, theta: float) -> "Point":
        return Point(r * math.cos(theta), r * math.sin(theta))

    @staticmethod
    def from_vec2(v: Vec2) -> "Point":
        return Point(v.x, v.y)

    def position(self) -> Vec2:
        """Radius vector from the origin to this point."""
        return Vec2(self.x, self.y)

    def __add__(self, other: Vec2) -> "Point":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    @overload
    def __sub__(self, other: Vec2) -> "Point": ...

    @overload
    def __sub__(self, other: "Point") -> Vec2: ...

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vec2):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented
