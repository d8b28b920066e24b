"""New Relic metric shapes produced by the transform."""

from __future__ import annotations

from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from nrotel.labels import AttributeValue


class CountMetric(BaseModel):
    """A count of occurrences over the reporting interval."""

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: Dict[str, AttributeValue] = Field(default_factory=dict)
    value: float


class SummaryMetric(BaseModel):
    """Pre-aggregated distribution: count, sum, min and max of the measurements."""

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: Dict[str, AttributeValue] = Field(default_factory=dict)
    count: float
    sum: float
    min: float
    max: float


Metric = Union[CountMetric, SummaryMetric]
