"""Rotations in the plane (angles in radians, counter-clockwise)."""

from __future__ import annotations

import cmath

from .point import Point
from .vec2 import Vec2


def rotate(vec: Vec2, angle_rad: float) -> Vec2:
    """Rotate a free vector about the origin.

    Points are rejected; use :func:`rotate_about` to move a location.
    """
    if not isinstance(vec, Vec2):
        raise TypeError(f"rotate expects a Vec2, got {type(vec).__name__}.")
    turned = complex(vec.x, vec.y) * cmath.rect(1.0, angle_rad)
    return Vec2(turned.real, turned.imag)


def rotate_about(point: Point, origin: Point, angle_rad: float) -> Point:
    offset = rotate(point - origin, angle_rad)
    return origin + offset


def rotate_points(points: tuple[Point, ...], origin: Point, angle_rad: float) -> tuple[Point, ...]:
    return tuple(rotate_about(point, origin, angle_rad) for point in points)
