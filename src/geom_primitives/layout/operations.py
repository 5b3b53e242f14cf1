"""Free functions combining points, sizes and rectangles."""

from __future__ import annotations

from ..core.numeric import cast, divide
from ..core.point import Point
from ..core.size import Size
from .rectangle import Rectangle


def intersect(a: Rectangle | None, b: Rectangle | None) -> Rectangle | None:
    """Intersect an accumulated rectangle with another.

    A missing operand means "no constraint yet", so a copy of the other
    one is returned.
    """
    if a is None:
        return None if b is None else b.copy()
    if b is None:
        return a.copy()
    return a.intersected(b)


def unite(a: Rectangle | None, b: Rectangle) -> Rectangle:
    """Unite an accumulated rectangle (possibly None) with a concrete one."""
    if b is None:
        raise TypeError("unite() needs a concrete rectangle as its second operand.")
    if a is None:
        return b.copy()
    return a.united(b)


def clamp(point: Point, bounds: Rectangle) -> Point:
    """Clamp each coordinate into the closed range of bounds.

    Unlike point containment, the right and bottom edges are reachable.
    """
    x, y = point.x, point.y
    if x < bounds.left:
        x = bounds.left
    if x > bounds.right:
        x = bounds.right
    if y < bounds.top:
        y = bounds.top
    if y > bounds.bottom:
        y = bounds.bottom
    return Point(x, y, point.dtype)


def fit_rect(size: Size, bounds: Rectangle) -> Rectangle:
    """Fit size into bounds keeping its aspect ratio, centered in bounds."""
    fitted = size.fitted(bounds.size)
    dtype = bounds.dtype
    spare_w = cast(bounds.width - fitted.width, bounds.size_dtype)
    spare_h = cast(bounds.height - fitted.height, bounds.size_dtype)
    org = Point(
        bounds.left + divide(cast(spare_w, dtype), 2, dtype),
        bounds.top + divide(cast(spare_h, dtype), 2, dtype),
        dtype,
    )
    return Rectangle.from_origin_size(org, fitted, dtype, bounds.size_dtype)
