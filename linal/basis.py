"""Dual (reciprocal) bases in the plane and in space."""

from __future__ import annotations

from typing import Sequence

from .vec2 import Vec2
from .vec3 import Vec3, triple_product


def area(a: Vec2, b: Vec2) -> float:
    return a.area(b)


def dual_basis(basis: Sequence[Vec2] | Sequence[Vec3]) -> tuple[Vec2, ...] | tuple[Vec3, ...]:
    """Return the basis b_j with a_i . b_j equal to 1 if i == j and 0 otherwise.

    Accepts two Vec2 or three Vec3 and raises DegenerateBasisError when the
    input vectors are linearly dependent.
    """
    basis = tuple(basis)
    if len(basis) == 2 and all(isinstance(v, Vec2) for v in basis):
        return Vec2.dual_basis(basis)
    if len(basis) == 3 and all(isinstance(v, Vec3) for v in basis):
        return Vec3.dual_basis(basis)
    raise TypeError("dual_basis expects two Vec2 or three Vec3.")


__all__ = ["area", "dual_basis", "triple_product"]
