"""Tests for mip chain arithmetic."""

import numpy as np
import pytest

from geom_primitives.core.numeric import INT, UINT
from geom_primitives.core.size import Size
from geom_primitives.texture.mip import mip_levels, mip_size, nearest_mip_level


class TestMipLevels:
    def test_power_of_two(self, texture_size):
        assert mip_levels(texture_size) == 9

    def test_uses_smaller_dimension(self):
        assert mip_levels(Size(256, 1024, UINT)) == 9

    def test_non_power_of_two(self):
        assert mip_levels(Size(300, 300, UINT)) == 9

    def test_single_pixel(self):
        assert mip_levels(Size(1, 1, UINT)) == 1

    def test_zero_dimension(self):
        assert mip_levels(Size(0, 8, UINT)) == 0

    def test_narrow_unsigned_type(self):
        assert mip_levels(Size(128, 200, np.uint8)) == 8

    def test_trim(self, texture_size):
        assert mip_levels(texture_size, 2) == 7

    def test_trim_keeps_at_least_one_level(self):
        assert mip_levels(Size(4, 4, UINT), 2) == 1
        assert mip_levels(Size(4, 4, UINT), 5) == 1

    def test_trim_zero_on_empty_size(self):
        assert mip_levels(Size(0, 0, UINT), 0) == 1

    def test_rejects_signed(self):
        with pytest.raises(TypeError, match="unsigned"):
            mip_levels(Size(256, 256, INT))


class TestMipSize:
    def test_power_of_two(self, texture_size):
        assert mip_size(texture_size, 2) == Size(64, 64, UINT)

    def test_truncates(self):
        assert mip_size(Size(300, 17, UINT), 3) == Size(37, 2, UINT)

    def test_level_zero_is_base(self, texture_size):
        assert mip_size(texture_size, 0) == texture_size

    def test_keeps_dtype(self, texture_size):
        assert mip_size(texture_size, 1).dtype == UINT

    def test_rejects_float(self):
        with pytest.raises(TypeError, match="unsigned"):
            mip_size(Size(256.0, 256.0, np.float32), 1)


class TestNearestMipLevel:
    def test_exact_level(self, texture_size):
        assert nearest_mip_level(texture_size, Size(64, 64, UINT)) == 2

    def test_rounds_down_to_larger_level(self, texture_size):
        assert nearest_mip_level(texture_size, Size(100, 100, UINT)) == 1

    def test_request_at_least_base(self, texture_size):
        assert nearest_mip_level(texture_size, Size(256, 10, UINT)) == 0
        assert nearest_mip_level(texture_size, Size(10, 300, UINT)) == 0

    def test_uses_tighter_axis(self):
        assert nearest_mip_level(Size(1024, 256, UINT), Size(100, 100, UINT)) == 1

    def test_zero_request_unguarded(self, texture_size):
        with pytest.raises(ZeroDivisionError):
            nearest_mip_level(texture_size, Size(0, 0, UINT))

    def test_rejects_non_unsigned_request(self, texture_size):
        with pytest.raises(TypeError, match="unsigned integer size"):
            nearest_mip_level(texture_size, Size(10.0, 10.0, np.float32))
