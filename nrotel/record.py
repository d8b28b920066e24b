"""Instrument descriptors and the records handed to the transform."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nrotel.aggregation import Aggregation
from nrotel.labels import LabelSet
from nrotel.number import NumberKind


class Descriptor(BaseModel):
    """Static metadata about an instrument."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Instrument name")
    unit: Optional[str] = Field(default=None, description="Unit of measurement (e.g. ms, By)")
    description: Optional[str] = Field(default=None, description="Human readable description")
    number_kind: NumberKind = Field(description="Numeric representation the instrument reports in")


class Record(BaseModel):
    """
    One aggregated measurement: the instrument descriptor, the point labels and
    the aggregation value accumulated over the reporting interval.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    descriptor: Descriptor
    labels: LabelSet = Field(default_factory=LabelSet)
    aggregation: Aggregation
