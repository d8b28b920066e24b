"""Conversion of aggregation records into New Relic metrics."""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from nrotel.aggregation import AggregationKind, MinMaxSumCountAggregation, SumAggregation
from nrotel.errors import UnimplementedAggregationError
from nrotel.labels import AttributeValue
from nrotel.number import Number, coerce_to_float
from nrotel.record import Descriptor, Record
from nrotel.telemetry import CountMetric, Metric, SummaryMetric
from nrotel.transform.attributes import KeyValueSource, build_attributes

Attributes = Dict[str, AttributeValue]


def sum_metric(
    descriptor: Descriptor, attributes: Attributes, aggregation: SumAggregation
) -> CountMetric:
    """Transform a sum aggregation into a Count metric."""
    total = aggregation.sum()
    return CountMetric(
        name=descriptor.name,
        attributes=attributes,
        value=coerce_to_float(total, descriptor.number_kind),
    )


def _min_max_sum_count_values(
    aggregation: MinMaxSumCountAggregation,
) -> Tuple[Number, Number, Number, int]:
    # Extraction order is min, max, sum, count; the first failure stops the rest.
    minimum = aggregation.min()
    maximum = aggregation.max()
    total = aggregation.sum()
    count = aggregation.count()
    return minimum, maximum, total, count


def min_max_sum_count_metric(
    descriptor: Descriptor, attributes: Attributes, aggregation: MinMaxSumCountAggregation
) -> SummaryMetric:
    """Transform a min-max-sum-count aggregation into a Summary metric."""
    minimum, maximum, total, count = _min_max_sum_count_values(aggregation)
    kind = descriptor.number_kind
    return SummaryMetric(
        name=descriptor.name,
        attributes=attributes,
        count=float(count),
        sum=coerce_to_float(total, kind),
        min=coerce_to_float(minimum, kind),
        max=coerce_to_float(maximum, kind),
    )


_CONVERTERS: Dict[AggregationKind, Callable[..., Metric]] = {
    AggregationKind.SUM: sum_metric,
    AggregationKind.MIN_MAX_SUM_COUNT: min_max_sum_count_metric,
}


def transform_record(service: str, resource: KeyValueSource, record: Record) -> Metric:
    """
    Transform an aggregation record into a New Relic metric.

    Sum aggregations become Count metrics and min-max-sum-count aggregations
    become Summary metrics.

    Raises:
        UnimplementedAggregationError: the aggregation kind has no converter
        ExtractionError: an aggregation accessor failed; raised unchanged
    """
    descriptor = record.descriptor
    attrs = build_attributes(service, resource, descriptor, record.labels)

    aggregation = record.aggregation
    kind = getattr(aggregation, "kind", None)
    converter = _CONVERTERS.get(kind)
    if converter is None:
        if isinstance(kind, AggregationKind):
            kind = kind.value
        raise UnimplementedAggregationError(
            "unimplemented aggregator",
            details={"kind": kind, "name": descriptor.name},
        )
    return converter(descriptor, attrs, aggregation)
