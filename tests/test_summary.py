"""Tests for sample summarization."""

import math

import numpy as np
import pytest

from benchcmp import InvalidArgument, Stats, summarize


class TestSummarize:
    """Tests for summarize function."""

    def test_known_values(self):
        """Test summary of a small known sample."""
        s = summarize([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0])

        assert isinstance(s, Stats)
        assert s.count == 8
        assert s.sum == 40.0
        assert s.mean == 5.0
        assert s.variance == pytest.approx(32 / 7)
        assert s.std == pytest.approx(math.sqrt(32 / 7))
        assert s.sem == pytest.approx(math.sqrt(32 / 7) / math.sqrt(8))
        assert s.moe == pytest.approx(1.96 * s.sem)
        assert s.rme == pytest.approx(s.moe / 5.0 * 100)
        assert s.min == 2.0
        assert s.max == 9.0
        assert s.p50 == 4.5

    def test_single_measurement(self):
        """Test a single measurement has zero spread."""
        s = summarize([42.0])
        assert s.count == 1
        assert s.variance == 0.0
        assert s.std == 0.0
        assert s.moe == 0.0
        assert s.rme == 0.0
        assert s.min == s.p50 == s.p99 == s.max == 42.0

    def test_count_is_int(self):
        """Test count is the integer number of measurements."""
        s = summarize([1.0, 2.0, 3.0])
        assert isinstance(s.count, int)
        assert s.count == 3

    def test_zero_mean_rme(self):
        """Test relative margin of error is 0 when the mean is 0."""
        assert summarize([-1.0, 1.0]).rme == 0.0

    def test_percentile_ordering(self):
        """Test min <= p50 <= p90 <= p95 <= p99 <= max."""
        rng = np.random.default_rng(3)
        s = summarize(rng.lognormal(2, 0.5, size=200))
        assert s.min <= s.p50 <= s.p90 <= s.p95 <= s.p99 <= s.max

    def test_frozen(self):
        """Test Stats records cannot be modified."""
        s = summarize([1.0, 2.0])
        with pytest.raises(AttributeError):
            s.mean = 10.0  # type: ignore[misc]

    def test_empty_raises(self):
        """Test empty sample is rejected."""
        with pytest.raises(InvalidArgument):
            summarize([])
