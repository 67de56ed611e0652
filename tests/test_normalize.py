"""Tests for fourierland.normalize."""

import numpy as np
import pytest

from fourierland.normalize import normalize_values


class TestNormalizeValues:

    def test_maps_extremes_to_target_range(self):
        out = normalize_values([3.0, 1.0, 2.0], 0.0, 10.0)
        assert np.allclose(out, [10.0, 0.0, 5.0])

    def test_min_and_max_hit_target(self):
        np.random.seed(42)
        values = np.random.randn(200) * 7 + 3
        out = normalize_values(values, -1.5, 4.0)
        assert out.min() == pytest.approx(-1.5)
        assert out.max() == pytest.approx(4.0)

    def test_order_preserved(self):
        np.random.seed(0)
        values = np.random.randn(50)
        out = normalize_values(values, -1.0, 1.0)
        assert np.array_equal(np.argsort(values), np.argsort(out))

    def test_constant_input_gives_midpoint(self):
        out = normalize_values([4.2] * 6, -1.0, 3.0)
        assert len(out) == 6
        assert np.all(out == 1.0)

    def test_single_value_gives_midpoint(self):
        out = normalize_values([7.0], 0.0, 2.0)
        assert list(out) == [1.0]

    def test_empty_input(self):
        out = normalize_values([], 0.0, 1.0)
        assert len(out) == 0

    def test_default_range_is_unit(self):
        out = normalize_values([5.0, 15.0])
        assert np.allclose(out, [0.0, 1.0])

    def test_inverted_target_range(self):
        out = normalize_values([0.0, 1.0, 2.0], 1.0, -1.0)
        assert np.allclose(out, [1.0, 0.0, -1.0])

    def test_input_not_mutated(self):
        values = np.array([1.0, 2.0, 3.0])
        normalize_values(values, 0.0, 100.0)
        assert np.array_equal(values, [1.0, 2.0, 3.0])

    def test_idempotent(self):
        values = [0.3, -2.0, 8.5, 1.1]
        a = normalize_values(values, -1.0, 1.0)
        b = normalize_values(values, -1.0, 1.0)
        assert np.array_equal(a, b)
