"""Shared test fixtures for geom-primitives."""

import pytest

from geom_primitives.core.numeric import INT, UINT, FLOAT
from geom_primitives.core.size import Size
from geom_primitives.layout.rectangle import Rectangle


@pytest.fixture
def square():
    """10x10 int32 rectangle at the origin."""
    return Rectangle(0, 0, 10, 10, INT)


@pytest.fixture
def offset_square():
    """10x10 int32 rectangle overlapping the lower-right quarter of ``square``."""
    return Rectangle(5, 5, 15, 15, INT)


@pytest.fixture
def normalized_rect():
    """Normalized rectangle straddling the origin (int32 position, uint32 size)."""
    return Rectangle(-5, -5, 5, 5, INT, UINT)


@pytest.fixture
def float_rect():
    """float32 rectangle with fractional corners."""
    return Rectangle(0.5, 1.5, 10.5, 20.5, FLOAT)


@pytest.fixture
def texture_size():
    """256x256 unsigned texture size."""
    return Size(256, 256, UINT)
