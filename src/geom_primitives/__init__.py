"""geom-primitives: generic point, size and rectangle value types."""

from ._version import __version__
from .core.angles import deg2rad, rad2deg
from .core.numeric import INT, UINT, FLOAT
from .core.point import Point, pointi, pointu, pointf
from .core.size import Size, scale_factor, sizei, sizeu, sizef
from .core.validation import InvalidDimensionError
from .layout.operations import clamp, fit_rect, intersect, unite
from .layout.orientation import Orientation, orthogonal
from .layout.rectangle import Rectangle, recti, rectu, rectf, rectn
from .texture.mip import mip_levels, mip_size, nearest_mip_level

__all__ = [
    "__version__",
    "INT",
    "UINT",
    "FLOAT",
    "InvalidDimensionError",
    "Point",
    "Size",
    "Rectangle",
    "Orientation",
    "pointi",
    "pointu",
    "pointf",
    "sizei",
    "sizeu",
    "sizef",
    "recti",
    "rectu",
    "rectf",
    "rectn",
    "scale_factor",
    "intersect",
    "unite",
    "clamp",
    "fit_rect",
    "orthogonal",
    "deg2rad",
    "rad2deg",
    "mip_levels",
    "mip_size",
    "nearest_mip_level",
]
