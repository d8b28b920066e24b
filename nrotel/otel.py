"""Adapter from OpenTelemetry SDK metric data to nrotel records.

The OpenTelemetry SDK hands exporters a ``MetricsData`` tree
(resource -> scope -> metric -> data points). This module flattens it into
``(Resource, Record)`` pairs, one per data point, so each point can be passed
to :func:`nrotel.transform.transform_record`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from opentelemetry.sdk.metrics.export import (
    ExponentialHistogram,
    Gauge,
    Histogram,
    HistogramDataPoint,
    MetricsData,
    NumberDataPoint,
    Sum,
)
from opentelemetry.sdk.resources import Resource as OTelResource

from nrotel.aggregation import (
    Aggregation,
    ExponentialHistogramAggregation,
    LastValueAggregation,
    MinMaxSumCountAggregation,
    SumAggregation,
)
from nrotel.errors import NrOtelError
from nrotel.labels import LabelSet, Resource, is_primitive
from nrotel.number import NumberKind
from nrotel.record import Descriptor, Record
from nrotel.telemetry import Metric
from nrotel.transform import transform_record

logger = logging.getLogger(__name__)


def _primitive_items(attributes: Optional[Mapping[str, Any]]) -> Iterator[Tuple[str, Any]]:
    for key, value in (attributes or {}).items():
        if is_primitive(value):
            yield key, value
        else:
            logger.debug("Dropping non-primitive attribute %r (%s)", key, type(value).__name__)


def resource_from_otel(resource: Optional[OTelResource]) -> Resource:
    """Copy the attributes of an OpenTelemetry resource into a :class:`Resource`."""
    if resource is None:
        return Resource()
    return Resource(_primitive_items(resource.attributes))


def _number_kind(*values: Any) -> NumberKind:
    present = [v for v in values if v is not None]
    if present and all(isinstance(v, int) and not isinstance(v, bool) for v in present):
        return NumberKind.INTEGER
    return NumberKind.FLOATING_POINT


def _histogram_aggregation(point: HistogramDataPoint) -> MinMaxSumCountAggregation:
    if not point.count:
        return MinMaxSumCountAggregation()
    return MinMaxSumCountAggregation(
        min=point.min, max=point.max, sum=point.sum, count=point.count
    )


def _aggregation_for(data: Any, point: Any) -> Tuple[Optional[Aggregation], NumberKind]:
    if isinstance(data, Sum) and isinstance(point, NumberDataPoint):
        return SumAggregation(point.value), _number_kind(point.value)
    if isinstance(data, Histogram) and isinstance(point, HistogramDataPoint):
        return _histogram_aggregation(point), _number_kind(point.min, point.max, point.sum)
    if isinstance(data, Gauge) and isinstance(point, NumberDataPoint):
        return LastValueAggregation(point.value), _number_kind(point.value)
    if isinstance(data, ExponentialHistogram):
        return (
            ExponentialHistogramAggregation(sum=point.sum, count=point.count),
            _number_kind(point.sum),
        )
    return None, NumberKind.FLOATING_POINT


def records_from_metrics_data(
    metrics_data: Optional[MetricsData],
) -> Iterator[Tuple[Resource, Record]]:
    """
    Yield one ``(resource, record)`` pair per data point in ``metrics_data``.

    Sum points become sum aggregations, histogram points become
    min-max-sum-count aggregations. Gauge and exponential histogram points are
    yielded with aggregations the transform does not convert. Data of any
    other type is skipped.
    """
    if metrics_data is None:
        return
    for resource_metrics in metrics_data.resource_metrics:
        resource = resource_from_otel(resource_metrics.resource)
        for scope_metrics in resource_metrics.scope_metrics:
            for metric in scope_metrics.metrics:
                data = metric.data
                for point in data.data_points:
                    aggregation, kind = _aggregation_for(data, point)
                    if aggregation is None:
                        logger.debug(
                            "Skipping %s data point of metric %r", type(data).__name__, metric.name
                        )
                        continue
                    descriptor = Descriptor(
                        name=metric.name,
                        unit=metric.unit or None,
                        description=metric.description or None,
                        number_kind=kind,
                    )
                    labels = LabelSet(_primitive_items(point.attributes))
                    yield resource, Record(
                        descriptor=descriptor, labels=labels, aggregation=aggregation
                    )


def transform_metrics_data(service: str, metrics_data: Optional[MetricsData]) -> List[Metric]:
    """
    Transform every data point in ``metrics_data`` into a New Relic metric.

    Points that cannot be converted (unimplemented aggregation, no data) are
    skipped and logged at debug level.
    """
    metrics: List[Metric] = []
    for resource, record in records_from_metrics_data(metrics_data):
        try:
            metrics.append(transform_record(service, resource, record))
        except NrOtelError as e:
            logger.debug("Skipping metric %r: %s", record.descriptor.name, e)
    return metrics
