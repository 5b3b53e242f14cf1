"""Degree/radian conversion for floating angles."""

from __future__ import annotations

import numpy as np

from .validation import validate_floating_angle


def deg2rad(angle: float) -> float:
    """Degrees to radians, keeping the floating type of angle."""
    validate_floating_angle(angle)
    return np.deg2rad(angle)


def rad2deg(angle: float) -> float:
    """Radians to degrees, keeping the floating type of angle."""
    validate_floating_angle(angle)
    return np.rad2deg(angle)
