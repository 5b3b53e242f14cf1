"""Element types: numpy dtypes that parameterize the geometry value types.

Values are stored as plain Python ``int``/``float`` but always pass through
their dtype first, so they wrap, truncate and lose precision exactly as the
fixed-width type would.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from .validation import validate_numeric_dtype

logger = logging.getLogger(__name__)

# Default element types
INT = np.dtype(np.int32)
UINT = np.dtype(np.uint32)
FLOAT = np.dtype(np.float32)
ROTATION_DTYPE = FLOAT  # precision of sin/cos, fitting and edge scaling


def resolve_dtype(dtype: Any, *values: Any) -> np.dtype:
    """Return the validated dtype, inferring it from values when dtype is None."""
    if dtype is None:
        dtype = np.result_type(*values)
    return validate_numeric_dtype(dtype)


def is_integer(dtype: np.dtype) -> bool:
    return dtype.kind in "iu"


def bit_width(dtype: np.dtype) -> int:
    """Number of bits in one element of dtype."""
    return dtype.itemsize * 8


def work_dtype(dtype: np.dtype) -> np.dtype:
    """Floating type used when dtype values meet a float32 factor.

    Integers are promoted to float32; wider floats keep their precision.
    """
    if is_integer(dtype):
        return ROTATION_DTYPE
    return np.result_type(dtype, ROTATION_DTYPE)


def cast(value: Any, dtype: np.dtype) -> int | float:
    """Convert value to dtype the way a C cast does and return a Python scalar.

    Out-of-range integers wrap, floats stored into integers truncate toward
    zero, and floats narrow to the precision of dtype.
    """
    if is_integer(dtype) and isinstance(value, (int, np.integer)):
        # Reduce modulo 2**bits first; numpy refuses ints wider than 64 bits.
        bits = bit_width(dtype)
        value = int(value) & ((1 << bits) - 1)
        if dtype.kind == "i" and value >> (bits - 1):
            value -= 1 << bits
        return value
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(value).astype(dtype).item()


def divide(numerator: Any, denominator: Any, dtype: np.dtype) -> int | float:
    """Divide in dtype arithmetic.

    Integer division truncates toward zero and raises ``ZeroDivisionError``
    on a zero denominator. Floating division follows IEEE rules, so a zero
    denominator gives ``inf`` or ``nan``.
    """
    if is_integer(dtype):
        quotient = abs(int(numerator)) // abs(int(denominator))
        if (numerator < 0) != (denominator < 0):
            quotient = -quotient
        return cast(quotient, dtype)
    with np.errstate(divide="ignore", invalid="ignore"):
        result = np.divide(dtype.type(numerator), dtype.type(denominator))
    if not np.isfinite(result):
        logger.debug("Non-finite quotient %s / %s in %s", numerator, denominator, dtype)
    return result.item()


def count_leading_zeros(value: int, bits: int) -> int:
    """Count the zero bits above the highest set bit of a bits-wide value."""
    return bits - int(value).bit_length()


def round_half_away_from_zero(value: Any) -> float:
    """Round to the nearest integral value, ties away from zero.

    NaN and infinities pass through unchanged.
    """
    value = float(value)
    truncated = float(np.trunc(value))
    if abs(value - truncated) >= 0.5:
        truncated += 1.0 if value > 0 else -1.0
    return truncated


# (source kind, target kind) -> rounding rule
_ROUNDING: dict[tuple[str, str], Callable[[Any], float]] = {
    ("f", "i"): round_half_away_from_zero,
    ("f", "u"): round_half_away_from_zero,
}


def round_to(value: Any, source: np.dtype, target: np.dtype) -> int:
    """Round a source-typed value into the target integer type.

    Only floating to integer conversions are defined.
    """
    try:
        rule = _ROUNDING[(source.kind, target.kind)]
    except KeyError:
        raise TypeError(
            f"No rounding conversion from '{source}' to '{target}'. "
            "Rounding converts floating values to integer types; use cast() otherwise."
        ) from None
    return cast(rule(value), target)
