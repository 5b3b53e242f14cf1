"""Point: a pair of numeric coordinates with componentwise arithmetic."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from .numeric import INT, UINT, FLOAT, cast, divide, resolve_dtype, round_to, work_dtype
from .validation import validate_numeric_dtype


class Point:
    """A 2D point whose coordinates are stored in a numpy element type.

    Arithmetic operators return new points; the in-place forms mutate the
    receiver. Scalar operands are converted to the element type first.
    """

    __slots__ = ("_x", "_y", "_dtype")

    def __init__(self, x: Any, y: Any, dtype: Any = None) -> None:
        self._dtype: np.dtype = resolve_dtype(dtype, x, y)
        self._x = cast(x, self._dtype)
        self._y = cast(y, self._dtype)

    @property
    def x(self) -> int | float:
        return self._x

    @x.setter
    def x(self, value: Any) -> None:
        self._x = cast(value, self._dtype)

    @property
    def y(self) -> int | float:
        return self._y

    @y.setter
    def y(self, value: Any) -> None:
        self._y = cast(value, self._dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _operands(self, other: Any) -> tuple[Any, Any] | None:
        if isinstance(other, Point):
            return other._x, other._y
        if isinstance(other, numbers.Real):
            value = cast(other, self._dtype)
            return value, value
        return None

    def _new(self, x: Any, y: Any) -> Point:
        return Point(x, y, self._dtype)

    # Arithmetic

    def __add__(self, other: Any) -> Point:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(self._x + rhs[0], self._y + rhs[1])

    __radd__ = __add__

    def __sub__(self, other: Any) -> Point:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(self._x - rhs[0], self._y - rhs[1])

    def __mul__(self, other: Any) -> Point:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(self._x * rhs[0], self._y * rhs[1])

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Point:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(
            divide(self._x, rhs[0], self._dtype),
            divide(self._y, rhs[1], self._dtype),
        )

    def __rtruediv__(self, other: Any) -> Point:
        lhs = self._operands(other)
        if lhs is None:
            return NotImplemented
        return self._new(
            divide(lhs[0], self._x, self._dtype),
            divide(lhs[1], self._y, self._dtype),
        )

    def __neg__(self) -> Point:
        return self._new(-self._x, -self._y)

    def __iadd__(self, other: Any) -> Point:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._x, self._y = result._x, result._y
        return self

    def __isub__(self, other: Any) -> Point:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._x, self._y = result._x, result._y
        return self

    def __imul__(self, other: Any) -> Point:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._x, self._y = result._x, result._y
        return self

    def __itruediv__(self, other: Any) -> Point:
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._x, self._y = result._x, result._y
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Point(x={self._x!r}, y={self._y!r}, dtype='{self._dtype}')"

    # Conversions

    def cast(self, dtype: Any) -> Point:
        """Return a copy converted to another element type."""
        return Point(self._x, self._y, validate_numeric_dtype(dtype))

    def round(self, dtype: Any = INT) -> Point:
        """Round a floating point to an integer one, halves away from zero."""
        target = validate_numeric_dtype(dtype)
        return Point(
            round_to(self._x, self._dtype, target),
            round_to(self._y, self._dtype, target),
            target,
        )

    def copy(self) -> Point:
        return self._new(self._x, self._y)

    def to_tuple(self) -> tuple[int | float, int | float]:
        return (self._x, self._y)

    def to_dict(self) -> dict:
        return {"x": self._x, "y": self._y}

    # Geometry

    def manhattan_length(self) -> int | float:
        """Difference between the larger and the smaller coordinate.

        Note this is not ``|x| + |y|``.
        """
        low, high = min(self._x, self._y), max(self._x, self._y)
        return cast(high - low, self._dtype)

    def rotate(self, angle_rad: float) -> Point:
        """Rotate in place by angle_rad around the origin and return self.

        The new y is computed from the already rotated x, not the original one.
        """
        work = work_dtype(self._dtype)
        angle = FLOAT.type(angle_rad)
        c = np.cos(angle)
        s = np.sin(angle)
        self.x = work.type(self._x) * c - work.type(self._y) * s
        self.y = work.type(self._y) * c + work.type(self._x) * s
        return self


def pointi(x: Any, y: Any) -> Point:
    return Point(x, y, INT)


def pointu(x: Any, y: Any) -> Point:
    return Point(x, y, UINT)


def pointf(x: Any, y: Any) -> Point:
    return Point(x, y, FLOAT)
