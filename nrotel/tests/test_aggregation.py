"""Aggregation accessor tests."""

from __future__ import annotations

import unittest

from nrotel.aggregation import (
    AggregationKind,
    ExponentialHistogramAggregation,
    LastValueAggregation,
    MinMaxSumCountAggregation,
    SumAggregation,
)
from nrotel.errors import ExtractionError, NoDataError
from nrotel.number import Number


class TestSumAggregation(unittest.TestCase):
    def test_sum(self):
        agg = SumAggregation(42.5)
        assert agg.kind == AggregationKind.SUM
        assert agg.sum() == Number(42.5)

    def test_accepts_number(self):
        assert SumAggregation(Number(3)).sum() == Number(3)

    def test_empty_raises_no_data(self):
        with self.assertRaises(NoDataError) as ctx:
            SumAggregation().sum()
        assert isinstance(ctx.exception, ExtractionError)
        assert ctx.exception.details["accessor"] == "sum"


class TestMinMaxSumCountAggregation(unittest.TestCase):
    def test_accessors(self):
        agg = MinMaxSumCountAggregation(min=1, max=10, sum=20, count=4)
        assert agg.kind == AggregationKind.MIN_MAX_SUM_COUNT
        assert agg.min() == Number(1)
        assert agg.max() == Number(10)
        assert agg.sum() == Number(20)
        assert agg.count() == 4

    def test_from_values(self):
        agg = MinMaxSumCountAggregation.from_values([3, 1, Number(10), 6])
        assert agg.min() == Number(1)
        assert agg.max() == Number(10)
        assert agg.sum() == Number(20)
        assert agg.count() == 4

    def test_empty_accessors_raise(self):
        agg = MinMaxSumCountAggregation.from_values([])
        assert agg.count() == 0
        for accessor in (agg.min, agg.max, agg.sum):
            with self.assertRaises(NoDataError):
                accessor()

    def test_negative_count_rejected(self):
        with self.assertRaises(ValueError):
            MinMaxSumCountAggregation(count=-1)


class TestUnconvertedAggregations(unittest.TestCase):
    def test_last_value(self):
        agg = LastValueAggregation(7)
        assert agg.kind == AggregationKind.LAST_VALUE
        assert agg.last_value() == Number(7)
        with self.assertRaises(NoDataError):
            LastValueAggregation().last_value()

    def test_exponential_histogram(self):
        agg = ExponentialHistogramAggregation(sum=2.5, count=2)
        assert agg.kind == AggregationKind.EXPONENTIAL_HISTOGRAM
        assert agg.sum() == Number(2.5)
        assert agg.count() == 2
        assert "exponential_histogram" in repr(agg)


if __name__ == "__main__":
    unittest.main()
