"""Tests for percentile computation."""

import numpy as np
import pytest

from benchcmp import InvalidArgument
from benchcmp.stats import percentile, percentiles


class TestPercentile:
    """Tests for percentile function."""

    def test_median_odd_length(self):
        """Test median of an odd-length sample is the middle element."""
        assert percentile([1, 2, 3, 4, 5], 0.5) == 3

    def test_median_even_length_interpolates(self):
        """Test median of an even-length sample interpolates."""
        assert percentile([1, 2, 3, 4], 0.5) == 2.5

    def test_extremes(self):
        """Test p=0 and p=1 return min and max."""
        sample = [3.0, 9.0, 1.0, 7.0]
        assert percentile(sample, 0) == 1.0
        assert percentile(sample, 1) == 9.0

    def test_linear_interpolation(self):
        """Test interpolation at fractional index p * (n - 1)."""
        # index 0.9 * 3 = 2.7 -> 30 + 0.7 * 10
        assert percentile([10, 20, 30, 40], 0.9) == pytest.approx(37.0)

    def test_single_element(self):
        """Test single-element sample returns that element for any p."""
        for p in (0, 0.25, 0.5, 0.99, 1):
            assert percentile([42.0], p) == 42.0

    def test_unsorted_input_not_mutated(self):
        """Test unsorted input is handled without reordering it."""
        sample = [5, 1, 4, 2, 3]
        assert percentile(sample, 0.5) == 3
        assert sample == [5, 1, 4, 2, 3]

    def test_numpy_input_not_mutated(self):
        """Test numpy arrays are not sorted in place."""
        sample = np.array([3.0, 1.0, 2.0])
        percentile(sample, 0.5)
        assert sample.tolist() == [3.0, 1.0, 2.0]

    def test_monotonic_in_p(self):
        """Test percentile is non-decreasing in p."""
        rng = np.random.default_rng(1)
        sample = rng.exponential(10, size=57)
        values = [percentile(sample, p) for p in np.linspace(0, 1, 41)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_empty_sample_raises(self):
        """Test empty sample is rejected."""
        with pytest.raises(InvalidArgument):
            percentile([], 0.5)

    @pytest.mark.parametrize("p", [-0.01, 1.01, 50])
    def test_out_of_range_p_raises(self, p):
        """Test p outside [0, 1] is rejected."""
        with pytest.raises(InvalidArgument):
            percentile([1, 2, 3], p)

    def test_non_finite_raises(self):
        """Test NaN and infinity are rejected."""
        with pytest.raises(InvalidArgument):
            percentile([1.0, float("nan")], 0.5)
        with pytest.raises(InvalidArgument):
            percentile([1.0, float("inf")], 0.5)

    def test_two_dimensional_raises(self):
        """Test nested sequences are rejected."""
        with pytest.raises(InvalidArgument):
            percentile([[1, 2], [3, 4]], 0.5)

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgument can be caught as ValueError."""
        with pytest.raises(ValueError):
            percentile([], 0.5)


class TestPercentiles:
    """Tests for percentiles function."""

    def test_several_at_once(self):
        """Test multiple percentiles match individual calls."""
        sample = [4, 8, 15, 16, 23, 42]
        ps = [0.0, 0.5, 0.9, 1.0]
        assert percentiles(sample, ps) == [percentile(sample, p) for p in ps]

    def test_invalid_p_raises(self):
        """Test any out-of-range p is rejected."""
        with pytest.raises(InvalidArgument):
            percentiles([1, 2, 3], [0.5, 2])
