"""Component-wise routines shared by the fixed-size value types.

Each value type is a frozen dataclass whose fields are its components in
order. ``dim`` and ``_fields`` describe the layout; everything here loops
over them so that Vec2, Vec3 and Point behave identically.
"""

from __future__ import annotations

import math
import numbers
import operator
import re
from dataclasses import replace
from typing import Callable, Iterable, Iterator, TypeVar

import numpy as np

from . import config
from .errors import DegenerateBasisError, ParseError, ZeroDivisorError
from .log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound="Components")
V = TypeVar("V", bound="VectorOps")

# ASCII decimal floats, plus the inf/nan spellings written by repr(float).
_DECIMAL_TOKEN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


def _as_float(value: object, name: str) -> float:
    if not is_scalar(value):
        raise TypeError(f"Component {name} must be a real number, got {type(value).__name__}.")
    return float(value)


def require_nonzero(divisor: float) -> float:
    if divisor == 0.0:
        logger.debug("Refusing to divide by zero")
        raise ZeroDivisorError("Cannot divide by zero.")
    return divisor


def require_nondegenerate(volume: float, scale: float) -> float:
    """Return ``volume`` unless the basis that produced it is degenerate.

    ``scale`` is the product of the basis vector lengths, so the check does
    not depend on the units of the basis.
    """
    if volume == 0.0 or (math.isfinite(scale) and abs(volume) <= config.DEGENERATE_TOLERANCE * scale):
        logger.debug("Degenerate basis: volume=%r scale=%r", volume, scale)
        raise DegenerateBasisError(volume)
    return volume


def basis_scale(vectors: Iterable[VectorOps]) -> float:
    """Power of two near the largest component magnitude of ``vectors``.

    Dividing by it is exact and keeps areas and triple products of very
    large or very small bases inside the float range.
    """
    largest = max((abs(value) for v in vectors for value in v.components()), default=0.0)
    if largest == 0.0 or not math.isfinite(largest):
        return 1.0
    return math.ldexp(1.0, math.frexp(largest)[1])


class Components:
    """Ordered float components with indexed access and a text form."""

    dim = 0
    _fields: tuple[str, ...] = ()

    # Make numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        for name in self._fields:
            object.__setattr__(self, name, _as_float(getattr(self, name), name))

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(*([0.0] * cls.dim))

    @classmethod
    def from_iterable(cls: type[T], values: Iterable[float]) -> T:
        arr = np.asarray([_as_float(value, str(i)) for i, value in enumerate(values)], dtype=float)
        if arr.shape != (cls.dim,):
            raise ValueError(f"{cls.__name__} needs exactly {cls.dim} values, got shape {arr.shape}.")
        return cls(*(float(v) for v in arr))

    @classmethod
    def from_text(cls: type[T], text: str) -> T:
        """Parse ``dim`` whitespace-separated floats.

        Any other number of tokens is an error, as is a token that is not a
        float.
        """
        tokens = text.split()
        if len(tokens) != cls.dim:
            logger.debug("Cannot parse %s from %r: %d tokens", cls.__name__, text, len(tokens))
            raise ParseError(text, cls.dim)
        values = []
        for index, token in enumerate(tokens):
            if not _DECIMAL_TOKEN.fullmatch(token):
                logger.debug("Cannot parse %s from %r: bad token %d", cls.__name__, text, index)
                raise ParseError(text, cls.dim, index)
            values.append(float(token))
        return cls(*values)

    def components(self) -> tuple[float, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.components(), dtype=float)

    def to_text(self) -> str:
        return config.TEXT_SEPARATOR.join(repr(value) for value in self.components())

    def __str__(self) -> str:
        return self.to_text()

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def _field_name(self, index: int) -> str:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"{type(self).__name__} indices must be integers, not {type(index).__name__}.")
        if not 0 <= index < self.dim:
            raise IndexError(f"{type(self).__name__} index {index} out of range [0, {self.dim - 1}].")
        return self._fields[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._field_name(index))

    def with_component(self: T, index: int, value: float) -> T:
        """Return a copy with component ``index`` replaced by ``value``."""
        return replace(self, **{self._field_name(index): value})

    def _map(self: T, func: Callable[[float], float]) -> T:
        return type(self)(*(func(value) for value in self.components()))

    def __neg__(self: T) -> T:
        return self._map(operator.neg)


class VectorOps(Components):
    """Arithmetic and metric operations of a free vector."""

    def _zip(self: V, other: V, func: Callable[[float, float], float]) -> V:
        return type(self)(*(func(a, b) for a, b in zip(self.components(), other.components())))

    def __add__(self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._zip(other, operator.add)

    def __sub__(self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._zip(other, operator.sub)

    def __mul__(self: V, other: V | float) -> V:
        # Vector * vector is the Hadamard product.
        if isinstance(other, type(self)):
            return self._zip(other, operator.mul)
        if is_scalar(other):
            k = float(other)
            return self._map(lambda value: value * k)
        return NotImplemented

    def __rmul__(self: V, scalar: float) -> V:
        if not is_scalar(scalar):
            return NotImplemented
        return self.__mul__(scalar)

    def __truediv__(self: V, scalar: float) -> V:
        if not is_scalar(scalar):
            return NotImplemented
        k = require_nonzero(float(scalar))
        return self._map(lambda value: value / k)

    def dot(self: V, other: V) -> float:
        if not isinstance(other, type(self)):
            raise TypeError(f"Cannot take the dot product of {type(self).__name__} and {type(other).__name__}.")
        return sum(a * b for a, b in zip(self.components(), other.components()))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def __abs__(self) -> float:
        return self.length()

    def ort(self: V) -> V:
        """Unit vector co-directed with this one."""
        return self / self.length()

    def sqr(self: V) -> V:
        return self * self

    def sqrt(self: V) -> V:
        return self._map(lambda value: math.sqrt(value) if value >= 0.0 else math.nan)
