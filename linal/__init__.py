"""2D/3D vectors and points with arithmetic, metrics and coordinate transforms."""

from .basis import area, dual_basis, triple_product
from .cross import Cross, cross
from .errors import DegenerateBasisError, LinalError, ParseError, ZeroDivisorError
from .point import Point
from .transforms import rotate, rotate_about, rotate_points
from .vec2 import Vec2
from .vec3 import Vec3

__version__ = "0.3.0"

__all__ = [
    "Cross",
    "DegenerateBasisError",
    "LinalError",
    "ParseError",
    "Point",
    "Vec2",
    "Vec3",
    "ZeroDivisorError",
    "area",
    "cross",
    "dual_basis",
    "rotate",
    "rotate_about",
    "rotate_points",
    "triple_product",
]
