"""Rectangle: an axis-aligned rectangle stored as origin and terminus corners."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..core.numeric import (
    INT,
    UINT,
    FLOAT,
    cast,
    divide,
    resolve_dtype,
    round_half_away_from_zero,
    work_dtype,
)
from ..core.point import Point
from ..core.size import Size
from ..core.validation import (
    validate_integer_scaling,
    validate_numeric_dtype,
    validate_rect_extent,
)


def _xy(x: Any, y: Any) -> tuple[Any, Any]:
    """Accept either a Point or a separate x, y pair."""
    if isinstance(x, Point):
        if y is not None:
            raise TypeError("Pass either a Point or x and y, not both.")
        return x.x, x.y
    if y is None:
        raise TypeError("Missing y coordinate.")
    return x, y


class Rectangle:
    """Axis-aligned rectangle with corners (x1, y1) and (x2, y2).

    ``dtype`` is the coordinate type and ``size_dtype`` the type reported by
    ``width``/``height`` (defaults to ``dtype``). An unsigned ``size_dtype``
    over signed coordinates gives a normalized rectangle: the position may be
    negative but the size may not.

    Point containment is half-open (right and bottom edges excluded) while
    rectangle containment is closed; they are separate predicates.
    """

    __slots__ = ("_x1", "_y1", "_x2", "_y2", "_dtype", "_size_dtype")

    def __init__(
        self,
        x1: Any,
        y1: Any,
        x2: Any,
        y2: Any,
        dtype: Any = None,
        size_dtype: Any = None,
    ) -> None:
        self._dtype: np.dtype = resolve_dtype(dtype, x1, y1, x2, y2)
        self._size_dtype: np.dtype = (
            self._dtype if size_dtype is None else validate_numeric_dtype(size_dtype)
        )
        self._x1 = cast(x1, self._dtype)
        self._y1 = cast(y1, self._dtype)
        self._x2 = cast(x2, self._dtype)
        self._y2 = cast(y2, self._dtype)
        validate_rect_extent(self._x1, self._y1, self._x2, self._y2, self._size_dtype)

    @classmethod
    def from_origin_size(
        cls, org: Point, size: Size, dtype: Any = None, size_dtype: Any = None
    ) -> Rectangle:
        """Rectangle at org extending by size."""
        dtype = org.dtype if dtype is None else validate_numeric_dtype(dtype)
        size_dtype = size.dtype if size_dtype is None else size_dtype
        return cls(
            org.x,
            org.y,
            org.x + cast(size.width, dtype),
            org.y + cast(size.height, dtype),
            dtype,
            size_dtype,
        )

    @classmethod
    def from_points(
        cls, org: Point, dest: Point, dtype: Any = None, size_dtype: Any = None
    ) -> Rectangle:
        """Rectangle spanning from the org corner to the dest corner."""
        dtype = org.dtype if dtype is None else dtype
        return cls(org.x, org.y, dest.x, dest.y, dtype, size_dtype)

    @classmethod
    def from_size(cls, size: Size, dtype: Any = None, size_dtype: Any = None) -> Rectangle:
        """Rectangle of the given size with its origin at (0, 0)."""
        dtype = size.dtype if dtype is None else validate_numeric_dtype(dtype)
        return cls.from_origin_size(Point(0, 0, dtype), size, dtype, size_dtype)

    @classmethod
    def from_xywh(
        cls, x: Any, y: Any, w: Any, h: Any, dtype: Any = None, size_dtype: Any = None
    ) -> Rectangle:
        """Rectangle from an origin and an extent given as plain values."""
        dtype = resolve_dtype(dtype, x, y, w, h)
        x, y = cast(x, dtype), cast(y, dtype)
        return cls(x, y, x + cast(w, dtype), y + cast(h, dtype), dtype, size_dtype)

    def _new(self, x1: Any, y1: Any, x2: Any, y2: Any) -> Rectangle:
        return Rectangle(x1, y1, x2, y2, self._dtype, self._size_dtype)

    def _t(self, value: Any) -> int | float:
        return cast(value, self._dtype)

    def _extent(self, low: Any, high: Any) -> int | float:
        return cast(self._t(high - low), self._size_dtype)

    # Element types

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def size_dtype(self) -> np.dtype:
        return self._size_dtype

    # Accessors

    @property
    def left(self) -> int | float:
        return self._x1

    @property
    def top(self) -> int | float:
        return self._y1

    @property
    def right(self) -> int | float:
        return self._x2

    @property
    def bottom(self) -> int | float:
        return self._y2

    @property
    def width(self) -> int | float:
        return self._extent(self._x1, self._x2)

    @property
    def height(self) -> int | float:
        return self._extent(self._y1, self._y2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height, self._size_dtype)

    @property
    def org(self) -> Point:
        return self.top_left

    @property
    def dest(self) -> Point:
        return self.bottom_right

    @property
    def top_left(self) -> Point:
        return Point(self._x1, self._y1, self._dtype)

    @property
    def top_right(self) -> Point:
        return Point(self._x2, self._y1, self._dtype)

    @property
    def bottom_left(self) -> Point:
        return Point(self._x1, self._y2, self._dtype)

    @property
    def bottom_right(self) -> Point:
        return Point(self._x2, self._y2, self._dtype)

    @property
    def center(self) -> Point:
        """Midpoint; integer half extents truncate toward the origin."""
        half_w = divide(self._t(self._x2 - self._x1), 2, self._dtype)
        half_h = divide(self._t(self._y2 - self._y1), 2, self._dtype)
        return Point(self._x1 + half_w, self._y1 + half_h, self._dtype)

    @property
    def empty(self) -> bool:
        """True when the width or the height is zero."""
        return self._x2 == self._x1 or self._y2 == self._y1

    # Mutators

    def set_width(self, width: Any) -> None:
        self._x2 = self._t(self._x1 + cast(width, self._size_dtype))

    def set_height(self, height: Any) -> None:
        self._y2 = self._t(self._y1 + cast(height, self._size_dtype))

    def move_left(self, x: Any) -> None:
        x = self._t(x)
        self._x2 = self._t(x + self._t(self._x2 - self._x1))
        self._x1 = x

    def move_top(self, y: Any) -> None:
        y = self._t(y)
        self._y2 = self._t(y + self._t(self._y2 - self._y1))
        self._y1 = y

    def move_right(self, x: Any) -> None:
        x = self._t(x)
        self._x1 = self._t(x - self._t(self._x2 - self._x1))
        self._x2 = x

    def move_bottom(self, y: Any) -> None:
        y = self._t(y)
        self._y1 = self._t(y - self._t(self._y2 - self._y1))
        self._y2 = y

    def move(self, x: Any, y: Any = None) -> None:
        """Move the origin to (x, y) or to a Point, keeping the extent."""
        x, y = _xy(x, y)
        self.move_left(x)
        self.move_top(y)

    def move_center(self, cx: Any, cy: Any = None) -> Rectangle:
        """Move so that the center lands on (cx, cy) and return self."""
        cx, cy = _xy(cx, cy)
        w, h = self.width, self.height
        self._x1 = self._t(self._t(cx) - divide(w, 2, self._size_dtype))
        self._y1 = self._t(self._t(cy) - divide(h, 2, self._size_dtype))
        self._x2 = self._t(self._x1 + w)
        self._y2 = self._t(self._y1 + h)
        return self

    def resize(self, size: Size) -> None:
        """Keep the origin and set the extent to size."""
        self.set_width(size.width)
        self.set_height(size.height)

    def translate(self, dx: Any, dy: Any = None) -> None:
        self._assign(self.translated(dx, dy))

    def adjust(self, dx1: Any, dy1: Any, dx2: Any, dy2: Any) -> None:
        self._assign(self.adjusted(dx1, dy1, dx2, dy2))

    def unite(self, other: Rectangle) -> None:
        self._assign(self.united(other))

    def transpose(self) -> None:
        """Swap the roles of x and y on both corners."""
        self._x1, self._y1 = self._y1, self._x1
        self._x2, self._y2 = self._y2, self._x2

    def scale(self, f: float, center: Point) -> None:
        """Scale each edge's distance from center by f, in place.

        Every scaled distance is rounded half away from zero, so the result
        is integral even for floating coordinates. The pivot stays fixed.
        Distances and the rounded offsets are taken in the coordinate type,
        so unsigned coordinates wrap when the pivot lies outside the edge.
        """
        work = work_dtype(self._dtype)
        f = work.type(f)
        cx, cy = center.x, center.y

        def scaled_distance(distance: Any) -> float:
            distance = self._t(distance)
            return self._t(round_half_away_from_zero(work.type(distance) * f))

        with np.errstate(over="ignore", invalid="ignore"):
            self._x1 = self._t(cx - scaled_distance(cx - self._x1))
            self._x2 = self._t(cx + scaled_distance(self._x2 - cx))
            self._y1 = self._t(cy - scaled_distance(cy - self._y1))
            self._y2 = self._t(cy + scaled_distance(self._y2 - cy))

    def _assign(self, other: Rectangle) -> None:
        self._x1, self._y1, self._x2, self._y2 = other._x1, other._y1, other._x2, other._y2

    # Derived rectangles

    def translated(self, dx: Any, dy: Any = None) -> Rectangle:
        """Copy moved by (dx, dy) or by a Point offset."""
        dx, dy = _xy(dx, dy)
        dx, dy = self._t(dx), self._t(dy)
        return self._new(self._x1 + dx, self._y1 + dy, self._x2 + dx, self._y2 + dy)

    def adjusted(self, dx1: Any, dy1: Any, dx2: Any, dy2: Any) -> Rectangle:
        """Copy with each corner offset independently."""
        return self._new(
            self._x1 + self._t(dx1),
            self._y1 + self._t(dy1),
            self._x2 + self._t(dx2),
            self._y2 + self._t(dy2),
        )

    def expanded(self, d: Any) -> Rectangle:
        """Copy with every edge pushed outward by d."""
        d = self._t(d)
        return self._new(self._x1 - d, self._y1 - d, self._x2 + d, self._y2 + d)

    def shrinked(self, d: Any) -> Rectangle:
        """Copy with every edge pulled inward by d."""
        return self.expanded(-self._t(d))

    def transposed(self) -> Rectangle:
        r = self.copy()
        r.transpose()
        return r

    def intersected(self, other: Rectangle) -> Rectangle | None:
        """Overlap of both rectangles, or None when they do not overlap.

        Rectangles that only touch along an edge do not overlap.
        """
        if (
            other._x1 >= self._x2
            or other._x2 <= self._x1
            or other._y1 >= self._y2
            or other._y2 <= self._y1
        ):
            return None
        return self._new(
            max(self._x1, other._x1),
            max(self._y1, other._y1),
            min(self._x2, other._x2),
            min(self._y2, other._y2),
        )

    def united(self, other: Rectangle) -> Rectangle:
        """Bounding box of both rectangles; an empty operand is ignored."""
        if self.empty:
            return other.copy()
        if other.empty:
            return self.copy()
        return self._new(
            min(self._x1, other._x1),
            min(self._y1, other._y1),
            max(self._x2, other._x2),
            max(self._y2, other._y2),
        )

    def scaled(self, num: int, denom: int) -> Rectangle:
        """Copy with every coordinate multiplied by num / denom.

        Integer coordinates and factors only; the division truncates toward
        zero. The result uses the coordinate type for its size as well.
        """
        validate_integer_scaling(self._dtype, num, denom)

        def apply(coord: int) -> int | float:
            return divide(coord * num, denom, self._dtype)

        return Rectangle(
            apply(self._x1), apply(self._y1), apply(self._x2), apply(self._y2), self._dtype
        )

    def __sub__(self, size: Size) -> Rectangle:
        """Copy with the terminus pulled back by size."""
        if not isinstance(size, Size):
            return NotImplemented
        return self._new(
            self._x1,
            self._y1,
            self._x2 - cast(size.width, self._dtype),
            self._y2 - cast(size.height, self._dtype),
        )

    # Predicates

    def contains(self, x: Any, y: Any) -> bool:
        """Half-open test: x1 <= x < x2 and y1 <= y < y2."""
        x, y = self._t(x), self._t(y)
        return self._x1 <= x < self._x2 and self._y1 <= y < self._y2

    def contains_point(self, point: Point) -> bool:
        """Half-open point test; the right and bottom edges are outside."""
        return self.contains(point.x, point.y)

    def contains_rect(self, inner: Rectangle) -> bool:
        """Closed test: inner lies within this rectangle, shared edges included."""
        return (
            inner._x1 >= self._x1
            and inner._y1 >= self._y1
            and inner._x2 <= self._x2
            and inner._y2 <= self._y2
        )

    # Conversions

    def cast(self, dtype: Any, size_dtype: Any = None) -> Rectangle:
        """Convert every corner to another coordinate type.

        size_dtype defaults to the new coordinate type.
        """
        dtype = validate_numeric_dtype(dtype)
        return Rectangle(self._x1, self._y1, self._x2, self._y2, dtype, size_dtype)

    def copy(self) -> Rectangle:
        return self._new(self._x1, self._y1, self._x2, self._y2)

    def to_tuple(self) -> tuple:
        return (self._x1, self._y1, self._x2, self._y2)

    def to_dict(self) -> dict:
        return {"x1": self._x1, "y1": self._y1, "x2": self._x2, "y2": self._y2}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        dtypes = f"dtype='{self._dtype}'"
        if self._size_dtype != self._dtype:
            dtypes += f", size_dtype='{self._size_dtype}'"
        return (
            f"Rectangle(x1={self._x1!r}, y1={self._y1!r}, "
            f"x2={self._x2!r}, y2={self._y2!r}, {dtypes})"
        )


def recti(x1: Any, y1: Any, x2: Any, y2: Any) -> Rectangle:
    return Rectangle(x1, y1, x2, y2, INT)


def rectu(x1: Any, y1: Any, x2: Any, y2: Any) -> Rectangle:
    return Rectangle(x1, y1, x2, y2, UINT)


def rectf(x1: Any, y1: Any, x2: Any, y2: Any) -> Rectangle:
    return Rectangle(x1, y1, x2, y2, FLOAT)


def rectn(x1: Any, y1: Any, x2: Any, y2: Any) -> Rectangle:
    """Normalized rectangle: signed position, unsigned size."""
    return Rectangle(x1, y1, x2, y2, INT, UINT)
