"""Tests for stats aggregation."""

from dataclasses import fields

import numpy as np
import pytest

from benchcmp import InvalidArgument, Stats, aggregate, aggregate_by_name, summarize
from benchcmp.stats import median


def make_stats(value: float) -> Stats:
    """Build a Stats record with every field set to value."""
    return Stats(**{f.name: value for f in fields(Stats)})


class TestMedian:
    """Tests for the default median reducer."""

    def test_odd(self):
        """Test middle element for odd length."""
        assert median([3, 1, 2]) == 2

    def test_even(self):
        """Test average of the two middle elements for even length."""
        assert median([1, 2, 3, 10]) == 2.5

    def test_empty_raises(self):
        """Test empty list is rejected."""
        with pytest.raises(InvalidArgument):
            median([])


class TestAggregate:
    """Tests for aggregate function."""

    def test_single_record_is_identity(self):
        """Test aggregating one record returns an equal record."""
        s = summarize([1.0, 5.0, 2.5, 8.0])
        assert aggregate([s]) == s
        assert aggregate([s], reducer=min) == s
        assert aggregate([s], reducer=np.mean) == s

    def test_median_per_field(self):
        """Test default reducer takes the median of each field."""
        result = aggregate([make_stats(1), make_stats(10), make_stats(2)])
        assert result == make_stats(2)

    def test_even_count_averages(self):
        """Test median over an even number of runs averages the middle two."""
        result = aggregate([make_stats(v) for v in (1, 2, 3, 10)])
        assert result == make_stats(2.5)

    def test_count_reduced_like_other_fields(self):
        """Test count has no special handling."""
        result = aggregate([make_stats(1), make_stats(2)])
        assert result.count == 1.5

    def test_order_invariant(self):
        """Test result does not depend on input order for median and mean."""
        records = [summarize([v, v * 2, v * 3]) for v in (1.0, 7.0, 3.0, 5.0)]
        for reducer in (median, np.mean):
            forward = aggregate(records, reducer)
            backward = aggregate(list(reversed(records)), reducer)
            for f in fields(Stats):
                assert getattr(forward, f.name) == pytest.approx(getattr(backward, f.name))

    def test_custom_reducer(self):
        """Test a caller-supplied reducer is applied to every field."""
        result = aggregate([make_stats(v) for v in (4, 9, 1)], reducer=max)
        assert result == make_stats(9)

    def test_inputs_unchanged(self):
        """Test inputs are not modified."""
        records = [make_stats(3), make_stats(1)]
        aggregate(records)
        assert records == [make_stats(3), make_stats(1)]

    def test_empty_raises(self):
        """Test empty list is rejected."""
        with pytest.raises(InvalidArgument):
            aggregate([])

    def test_non_stats_raises(self):
        """Test records of another shape are rejected."""
        with pytest.raises(InvalidArgument):
            aggregate([make_stats(1), {"count": 1}])  # type: ignore[list-item]


class TestAggregateByName:
    """Tests for aggregate_by_name function."""

    def test_groups_by_name(self):
        """Test each name is aggregated over the runs that recorded it."""
        runs = [
            {"parse": make_stats(1), "render": make_stats(5)},
            {"parse": make_stats(3)},
            {"parse": make_stats(2), "render": make_stats(7)},
        ]
        result = aggregate_by_name(runs)

        assert list(result) == ["parse", "render"]
        assert result["parse"] == make_stats(2)
        assert result["render"] == make_stats(6)

    def test_empty_runs(self):
        """Test no runs gives no names."""
        assert aggregate_by_name([]) == {}
