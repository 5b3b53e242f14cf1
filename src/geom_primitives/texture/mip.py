"""Mip chain arithmetic for unsigned integer texture sizes."""

from __future__ import annotations

from ..core.numeric import bit_width, count_leading_zeros
from ..core.size import Size
from ..core.validation import validate_unsigned_size


def mip_levels(base_size: Size, trim_levels: int | None = None) -> int:
    """Number of mip levels down from base_size.

    Counts the significant bits of the smaller dimension, so 256x256 has
    9 levels (256 down to 1). With trim_levels, that many of the smallest
    levels are dropped, keeping at least one.
    """
    validate_unsigned_size(base_size.dtype, "mip_levels")
    bits = bit_width(base_size.dtype)
    levels = bits - count_leading_zeros(min(base_size.width, base_size.height), bits)
    if trim_levels is None:
        return levels
    return levels - trim_levels if levels > trim_levels + 1 else 1


def mip_size(base_size: Size, level: int) -> Size:
    """Size of the given mip level: both dimensions halved level times."""
    validate_unsigned_size(base_size.dtype, "mip_size")
    return Size(base_size.width >> level, base_size.height >> level, base_size.dtype)


def nearest_mip_level(base_size: Size, request_size: Size) -> int:
    """Deepest mip level that is still at least as large as request_size.

    Returns 0 when the request meets or exceeds either base dimension.
    A zero request dimension raises ZeroDivisionError.
    """
    validate_unsigned_size(base_size.dtype, "nearest_mip_level")
    validate_unsigned_size(request_size.dtype, "nearest_mip_level")
    if request_size.width >= base_size.width or request_size.height >= base_size.height:
        return 0
    z = min(
        base_size.width // request_size.width,
        base_size.height // request_size.height,
    )
    return z.bit_length() - 1
