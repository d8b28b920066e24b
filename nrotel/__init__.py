"""Transform OpenTelemetry metric aggregations into New Relic metrics."""

import logging
from importlib.metadata import PackageNotFoundError, version

from nrotel.aggregation import (
    Aggregation,
    AggregationKind,
    ExponentialHistogramAggregation,
    LastValueAggregation,
    MinMaxSumCountAggregation,
    SumAggregation,
)
from nrotel.config import NrOtelConfig, configure_logging, load_config
from nrotel.errors import (
    ConfigError,
    ExtractionError,
    NoDataError,
    NrOtelError,
    UnimplementedAggregationError,
)
from nrotel.labels import LabelSet, Resource
from nrotel.number import Number, NumberKind, coerce_to_float
from nrotel.record import Descriptor, Record
from nrotel.telemetry import CountMetric, Metric, SummaryMetric
from nrotel.transform import build_attributes, transform_record

try:
    __version__ = version("nrotel")
except PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback version

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Aggregation",
    "AggregationKind",
    "ConfigError",
    "CountMetric",
    "Descriptor",
    "ExponentialHistogramAggregation",
    "ExtractionError",
    "LabelSet",
    "LastValueAggregation",
    "Metric",
    "MinMaxSumCountAggregation",
    "NoDataError",
    "NrOtelConfig",
    "NrOtelError",
    "Number",
    "NumberKind",
    "Record",
    "Resource",
    "SumAggregation",
    "SummaryMetric",
    "UnimplementedAggregationError",
    "build_attributes",
    "coerce_to_float",
    "configure_logging",
    "load_config",
    "transform_record",
]
