"""Tests for the density mapping."""

from __future__ import annotations

import numpy as np
import pytest

from book_pictures.constants import MAX_PIXEL_WEIGHT
from book_pictures.density import (
    identity,
    map_value_by_distribution,
    map_values_by_distribution,
    power_curve,
    square_root,
)
from book_pictures.errors import InvalidConfigError


class TestMapValueByDistribution:
    def test_extremes(self):
        assert map_value_by_distribution(0, identity, MAX_PIXEL_WEIGHT, 9) == 0
        assert map_value_by_distribution(MAX_PIXEL_WEIGHT, identity, MAX_PIXEL_WEIGHT, 9) == 9

    def test_rounds_half_away_from_zero(self):
        assert map_value_by_distribution(1, identity, 2, 9) == 5   # 4.5
        assert map_value_by_distribution(1, identity, 2, 3) == 2   # 1.5
        assert map_value_by_distribution(1, identity, 4, 9) == 2   # 2.25

    def test_value_above_maximum_is_clamped(self):
        assert map_value_by_distribution(3 * MAX_PIXEL_WEIGHT, identity, MAX_PIXEL_WEIGHT, 16) == 16

    def test_negative_curve_is_clamped_to_zero(self):
        assert map_value_by_distribution(100, lambda x: -1.0, 200, 16) == 0

    def test_curve_is_applied(self):
        # sqrt(0.25) = 0.5 -> 8 of 16
        assert map_value_by_distribution(1, square_root, 4, 16) == 8
        # 0.5 ** 2 = 0.25 -> 4 of 16
        assert map_value_by_distribution(1, power_curve(2.0), 2, 16) == 4

    def test_zero_max_input_is_rejected(self):
        with pytest.raises(InvalidConfigError):
            map_value_by_distribution(1, identity, 0, 9)

    def test_output_always_in_range(self):
        curves = [identity, square_root, power_curve(0.05), power_curve(7.5), lambda x: 4 * x - 1]
        for curve in curves:
            for value in range(0, 2 * MAX_PIXEL_WEIGHT, 1571):
                result = map_value_by_distribution(value, curve, MAX_PIXEL_WEIGHT, 25)
                assert 0 <= result <= 25

    def test_monotonic_for_monotonic_curve(self):
        results = [
            map_value_by_distribution(value, power_curve(1.7), MAX_PIXEL_WEIGHT, 16)
            for value in range(0, MAX_PIXEL_WEIGHT + 1, 255)
        ]
        assert results == sorted(results)

    def test_pure(self):
        first = map_value_by_distribution(12345, power_curve(0.8), MAX_PIXEL_WEIGHT, 16)
        map_value_by_distribution(54321, power_curve(3.0), MAX_PIXEL_WEIGHT, 16)
        assert map_value_by_distribution(12345, power_curve(0.8), MAX_PIXEL_WEIGHT, 16) == first


class TestMapValuesByDistribution:
    @pytest.mark.parametrize("curve", [identity, square_root, power_curve(2.2), power_curve(0.3)])
    def test_matches_scalar_version(self, curve):
        values = np.arange(0, MAX_PIXEL_WEIGHT + 1, 97)
        expected = [map_value_by_distribution(int(v), curve, MAX_PIXEL_WEIGHT, 16) for v in values]
        result = map_values_by_distribution(values, curve, MAX_PIXEL_WEIGHT, 16)
        assert result.tolist() == expected

    def test_keeps_shape(self):
        values = np.zeros((3, 5), dtype=np.int64)
        result = map_values_by_distribution(values, identity, MAX_PIXEL_WEIGHT, 4)
        assert result.shape == (3, 5)
        assert result.dtype == np.int64

    def test_clamps(self):
        values = np.array([-MAX_PIXEL_WEIGHT, 0, MAX_PIXEL_WEIGHT, 10 * MAX_PIXEL_WEIGHT])
        result = map_values_by_distribution(values, identity, MAX_PIXEL_WEIGHT, 9)
        assert result.tolist() == [0, 0, 9, 9]

    def test_zero_max_input_is_rejected(self):
        with pytest.raises(InvalidConfigError):
            map_values_by_distribution(np.array([1]), identity, 0, 9)
