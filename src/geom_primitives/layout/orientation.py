"""Layout orientation."""

from __future__ import annotations

from enum import Enum


class Orientation(str, Enum):
    """Axis along which a layout runs."""

    VERT = "vert"
    HOR = "hor"


def orthogonal(orientation: Orientation) -> Orientation:
    """The perpendicular orientation."""
    if orientation is Orientation.VERT:
        return Orientation.HOR
    return Orientation.VERT
