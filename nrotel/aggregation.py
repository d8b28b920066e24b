"""Aggregation values attached to metric records.

Every aggregation carries an :class:`AggregationKind` tag. Accessors raise
:class:`~nrotel.errors.NoDataError` when the aggregation never observed a
value.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union

from nrotel.errors import NoDataError
from nrotel.number import Number, RawNumber

NumberLike = Union[Number, RawNumber]


class AggregationKind(str, Enum):
    """Tag identifying the concrete shape of an aggregation."""

    SUM = "sum"
    MIN_MAX_SUM_COUNT = "min_max_sum_count"
    LAST_VALUE = "last_value"
    EXPONENTIAL_HISTOGRAM = "exponential_histogram"


def _as_number(value: Optional[NumberLike]) -> Optional[Number]:
    if value is None or isinstance(value, Number):
        return value
    return Number(value)


class Aggregation:
    """Base class for aggregation values."""

    kind: AggregationKind

    def __repr__(self) -> str:
        kind = getattr(self, "kind", None)
        return f"{type(self).__name__}(kind={getattr(kind, 'value', kind)})"


class SumAggregation(Aggregation):
    """Running sum of the measurements for one instrument."""

    kind = AggregationKind.SUM

    def __init__(self, value: Optional[NumberLike] = None) -> None:
        self._sum = _as_number(value)

    def sum(self) -> Number:
        if self._sum is None:
            raise NoDataError("sum aggregation has no data", details={"accessor": "sum"})
        return self._sum


class MinMaxSumCountAggregation(Aggregation):
    """Minimum, maximum, sum and count of the measurements for one instrument."""

    kind = AggregationKind.MIN_MAX_SUM_COUNT

    def __init__(
        self,
        min: Optional[NumberLike] = None,
        max: Optional[NumberLike] = None,
        sum: Optional[NumberLike] = None,
        count: int = 0,
    ) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._min = _as_number(min)
        self._max = _as_number(max)
        self._sum = _as_number(sum)
        self._count = count

    @classmethod
    def from_values(cls, values: Iterable[NumberLike]) -> "MinMaxSumCountAggregation":
        """Build an aggregation from observed measurements."""
        raws = [v.value if isinstance(v, Number) else v for v in values]
        if not raws:
            return cls()
        return cls(min=min(raws), max=max(raws), sum=sum(raws), count=len(raws))

    def _get(self, accessor: str, value: Optional[Number]) -> Number:
        if self._count == 0 or value is None:
            raise NoDataError(
                "min-max-sum-count aggregation has no data",
                details={"accessor": accessor},
            )
        return value

    def min(self) -> Number:
        return self._get("min", self._min)

    def max(self) -> Number:
        return self._get("max", self._max)

    def sum(self) -> Number:
        return self._get("sum", self._sum)

    def count(self) -> int:
        return self._count


class LastValueAggregation(Aggregation):
    """Most recent measurement for one instrument."""

    kind = AggregationKind.LAST_VALUE

    def __init__(self, value: Optional[NumberLike] = None) -> None:
        self._value = _as_number(value)

    def last_value(self) -> Number:
        if self._value is None:
            raise NoDataError("last-value aggregation has no data", details={"accessor": "last_value"})
        return self._value


class ExponentialHistogramAggregation(Aggregation):
    """Exponential bucket histogram; only its totals are retained."""

    kind = AggregationKind.EXPONENTIAL_HISTOGRAM

    def __init__(self, sum: Optional[NumberLike] = None, count: int = 0) -> None:
        self._sum = _as_number(sum)
        self._count = count

    def sum(self) -> Number:
        if self._count == 0 or self._sum is None:
            raise NoDataError("exponential histogram has no data", details={"accessor": "sum"})
        return self._sum

    def count(self) -> int:
        return self._count
