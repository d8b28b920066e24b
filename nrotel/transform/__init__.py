"""Transformation of aggregation records into New Relic metrics."""

from nrotel.transform.attributes import (
    COLLECTOR_NAME_ATTR_KEY,
    COLLECTOR_NAME_ATTR_VALUE,
    INSTRUMENTATION_PROVIDER_ATTR_KEY,
    INSTRUMENTATION_PROVIDER_ATTR_VALUE,
    SERVICE_NAME_ATTR_KEY,
    build_attributes,
)
from nrotel.transform.metric import min_max_sum_count_metric, sum_metric, transform_record

__all__ = [
    "COLLECTOR_NAME_ATTR_KEY",
    "COLLECTOR_NAME_ATTR_VALUE",
    "INSTRUMENTATION_PROVIDER_ATTR_KEY",
    "INSTRUMENTATION_PROVIDER_ATTR_VALUE",
    "SERVICE_NAME_ATTR_KEY",
    "build_attributes",
    "min_max_sum_count_metric",
    "sum_metric",
    "transform_record",
]
