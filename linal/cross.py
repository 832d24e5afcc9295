"""Cross products whose result type depends on the right-hand operand.

For Vec2, ``cross(v)`` rotates, ``cross(v, k)`` rotates and scales, and
``cross(v, w)`` is the signed area. For Vec3, ``cross(v, w)`` is the vector
cross product.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

RHS = TypeVar("RHS", contravariant=True)
Out = TypeVar("Out", covariant=True)


@runtime_checkable
class Cross(Protocol[RHS, Out]):
    def cross(self, rhs: RHS) -> Out: ...


def cross(lhs: Cross[Any, Any], rhs: Any = None) -> Any:
    if not isinstance(lhs, Cross):
        raise TypeError(f"{type(lhs).__name__} has no cross product.")
    if rhs is None:
        return lhs.cross()
    return lhs.cross(rhs)
