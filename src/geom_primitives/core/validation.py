"""Input validation with clear error messages for geometry callers."""

from __future__ import annotations

import logging
import numbers
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

_SUPPORTED_KINDS = "iuf"  # signed int, unsigned int, floating


class InvalidDimensionError(ValueError):
    """A rectangle would need a negative extent in an unsigned size type."""


def validate_numeric_dtype(dtype: Any) -> np.dtype:
    """Validate that dtype names a numpy integer or floating type.

    Returns the resolved ``np.dtype``.
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        raise TypeError(
            f"Unknown element type {dtype!r}. Use a numpy numeric dtype "
            "like 'int32', 'uint32' or 'float32'."
        ) from None
    if resolved.kind not in _SUPPORTED_KINDS:
        raise TypeError(
            f"Element type must be an integer or floating dtype, got '{resolved}'."
        )
    return resolved


def validate_rect_extent(
    x1: Any, y1: Any, x2: Any, y2: Any, size_dtype: np.dtype
) -> None:
    """Reject corners whose extent an unsigned size type cannot hold."""
    if size_dtype.kind != "u":
        return
    if x2 < x1 or y2 < y1:
        logger.debug(
            "Rejected rectangle (%s, %s)-(%s, %s) for size type %s",
            x1, y1, x2, y2, size_dtype,
        )
        raise InvalidDimensionError(
            f"Negative unsigned rect dimension: ({x1}, {y1}) to ({x2}, {y2}) "
            f"needs width {x2 - x1} and height {y2 - y1}, which '{size_dtype}' "
            "cannot represent."
        )


def validate_integer_scaling(dtype: np.dtype, num: Any, denom: Any) -> None:
    """Rational scaling is defined for integer coordinates and factors only."""
    if dtype.kind not in "iu":
        raise TypeError(
            f"Integer required: cannot apply rational scaling to '{dtype}' "
            "coordinates. Use scale() for floating factors."
        )
    for name, value in (("num", num), ("denom", denom)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"Integer required: {name} must be an integer, "
                f"got {type(value).__name__}."
            )


def validate_unsigned_size(dtype: np.dtype, operation: str) -> None:
    """Mip arithmetic works on unsigned integer sizes only."""
    if dtype.kind != "u":
        raise TypeError(
            f"{operation} requires an unsigned integer size, got '{dtype}'. "
            "Convert with size.cast('uint32') first."
        )


def validate_floating_angle(angle: Any) -> None:
    """Angle conversions are defined for floating values only."""
    if isinstance(angle, numbers.Integral):
        raise TypeError(
            f"Angle must be a floating value, got {type(angle).__name__}. "
            "Pass e.g. 90.0 instead of 90."
        )
