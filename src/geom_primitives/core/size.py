"""Size: a pair of numeric extents with arithmetic, aspect fitting and rounding."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Sequence

import numpy as np

from .numeric import INT, UINT, FLOAT, cast, divide, resolve_dtype, round_to, work_dtype
from .point import Point
from .validation import validate_numeric_dtype

logger = logging.getLogger(__name__)


class Size:
    """Width and height stored in a numpy element type.

    Extents are non-negative by convention; only an unsigned element type
    enforces it (negative values wrap).
    """

    __slots__ = ("_width", "_height", "_dtype")

    def __init__(self, width: Any, height: Any, dtype: Any = None) -> None:
        self._dtype: np.dtype = resolve_dtype(dtype, width, height)
        self._width = cast(width, self._dtype)
        self._height = cast(height, self._dtype)

    @classmethod
    def from_point(cls, point: Point) -> Size:
        """Reinterpret a point's (x, y) as (width, height)."""
        return cls(point.x, point.y, point.dtype)

    @classmethod
    def from_array(cls, values: Sequence | np.ndarray, dtype: Any = None) -> Size:
        """Create a Size from a two-element sequence or array."""
        arr = np.asarray(values)
        if arr.shape != (2,):
            raise ValueError(
                f"Expected exactly two values (width, height), got shape {arr.shape}."
            )
        if dtype is None:
            dtype = arr.dtype
        return cls(arr[0], arr[1], dtype)

    @property
    def width(self) -> int | float:
        return self._width

    @width.setter
    def width(self, value: Any) -> None:
        self._width = cast(value, self._dtype)

    @property
    def height(self) -> int | float:
        return self._height

    @height.setter
    def height(self, value: Any) -> None:
        self._height = cast(value, self._dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def aspect_ratio(self) -> float:
        """width / height as a float; zero height gives inf or nan."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(np.float64(self._width), np.float64(self._height)))

    def _operands(self, other: Any) -> tuple[Any, Any] | None:
        if isinstance(other, Size):
            return other._width, other._height
        if isinstance(other, numbers.Real):
            value = cast(other, self._dtype)
            return value, value
        return None

    def _new(self, width: Any, height: Any) -> Size:
        return Size(width, height, self._dtype)

    def _assign(self, result: Size) -> Size:
        self._width, self._height = result._width, result._height
        return self

    # Arithmetic

    def __add__(self, other: Any) -> Size:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(self._width + rhs[0], self._height + rhs[1])

    def __sub__(self, other: Any) -> Size:
        rhs = self._operands(other)
        if rhs is None:
            return NotImplemented
        return self._new(self._width - rhs[0], self._height - rhs[1])

    def __mul__(self, mul: Any) -> Size:
        # The multiplier keeps its own type; only the product is converted.
        if not isinstance(mul, numbers.Real):
            return NotImplemented
        return self._new(self._width * mul, self._height * mul)

    __rmul__ = __mul__

    def __truediv__(self, divider: Any) -> Size:
        if not isinstance(divider, numbers.Real):
            return NotImplemented
        divider = cast(divider, self._dtype)
        return self._new(
            divide(self._width, divider, self._dtype),
            divide(self._height, divider, self._dtype),
        )

    def __iadd__(self, other: Any) -> Size:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other: Any) -> Size:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imul__(self, mul: Any) -> Size:
        result = self.__mul__(mul)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __itruediv__(self, divider: Any) -> Size:
        result = self.__truediv__(divider)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self._width == other._width and self._height == other._height

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Size(width={self._width!r}, height={self._height!r}, dtype='{self._dtype}')"

    # Conversions

    def cast(self, dtype: Any) -> Size:
        """Return a copy converted to another element type."""
        return Size(self._width, self._height, validate_numeric_dtype(dtype))

    def round(self, dtype: Any = UINT) -> Size:
        """Round a floating size to an integer one, halves away from zero."""
        target = validate_numeric_dtype(dtype)
        return Size(
            round_to(self._width, self._dtype, target),
            round_to(self._height, self._dtype, target),
            target,
        )

    def to_point(self) -> Point:
        return Point(self._width, self._height, self._dtype)

    def copy(self) -> Size:
        return self._new(self._width, self._height)

    def to_tuple(self) -> tuple[int | float, int | float]:
        return (self._width, self._height)

    def to_dict(self) -> dict:
        return {"width": self._width, "height": self._height}

    # Geometry

    def fitted(self, bounds: Size) -> Size:
        """Largest size with this aspect ratio that fits within bounds.

        Picks the tighter of the two axis scale factors. Zero extents are not
        guarded: the resulting inf/nan factors propagate into the result.
        """
        work = work_dtype(self._dtype)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            zw = FLOAT.type(FLOAT.type(bounds.width) / work.type(self._width))
            zh = FLOAT.type(FLOAT.type(bounds.height) / work.type(self._height))
            if not (np.isfinite(zw) and np.isfinite(zh)):
                logger.debug("Degenerate fit of %r into %r: scale (%s, %s)", self, bounds, zw, zh)
            if zw < zh:
                return self._new(bounds.width, work.type(self._height) * zw)
            return self._new(work.type(self._width) * zh, bounds.height)


def scale_factor(numer: Size, denom: Size) -> Point:
    """Per-axis ratio numer / denom as a float32 point."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return Point(
            FLOAT.type(numer.width) / FLOAT.type(denom.width),
            FLOAT.type(numer.height) / FLOAT.type(denom.height),
            FLOAT,
        )


def sizei(width: Any, height: Any) -> Size:
    return Size(width, height, INT)


def sizeu(width: Any, height: Any) -> Size:
    return Size(width, height, UINT)


def sizef(width: Any, height: Any) -> Size:
    return Size(width, height, FLOAT)
