"""Attribute merging for transformed metrics."""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from opentelemetry.semconv.resource import ResourceAttributes

from nrotel.labels import AttributeValue, LabelSet
from nrotel.record import Descriptor

# Identifiers below are part of the wire contract; backends filter on them.
SERVICE_NAME_ATTR_KEY = ResourceAttributes.SERVICE_NAME
INSTRUMENTATION_PROVIDER_ATTR_KEY = "instrumentation.provider"
INSTRUMENTATION_PROVIDER_ATTR_VALUE = "opentelemetry"
COLLECTOR_NAME_ATTR_KEY = "collector.name"
COLLECTOR_NAME_ATTR_VALUE = "newrelic-opentelemetry-exporter"

UNIT_ATTR_KEY = "unit"
DESCRIPTION_ATTR_KEY = "description"

KeyValueSource = Union[LabelSet, Mapping[str, AttributeValue], None]


def _pairs(source: KeyValueSource) -> Iterator[Tuple[str, AttributeValue]]:
    if source is None:
        return iter(())
    if isinstance(source, Mapping):
        return iter(source.items())
    return iter(source)


def build_attributes(
    service: str,
    resource: KeyValueSource,
    descriptor: Optional[Descriptor],
    labels: KeyValueSource,
) -> Dict[str, AttributeValue]:
    """
    Merge resource attributes, point labels, descriptor metadata, the service
    name and the provenance attributes into one flat mapping.

    Later sources overwrite earlier ones on key collision, in this order:
    resource, labels, unit/description, service name, provenance. Provenance
    attributes are therefore always present with their fixed values.

    Args:
        service: Service name; empty means no service attribute is added
        resource: Resource attributes of the producing process
        descriptor: Instrument descriptor (unit and description are copied when non-empty)
        labels: Point labels of the record

    Returns:
        A new dictionary; the inputs are not modified or referenced.
    """
    attrs: Dict[str, AttributeValue] = {}

    for key, value in _pairs(resource):
        attrs[key] = value

    # Point labels take precedence over resource attributes.
    for key, value in _pairs(labels):
        attrs[key] = value

    if descriptor is not None:
        if descriptor.unit:
            attrs[UNIT_ATTR_KEY] = descriptor.unit
        if descriptor.description:
            attrs[DESCRIPTION_ATTR_KEY] = descriptor.description

    if service:
        attrs[SERVICE_NAME_ATTR_KEY] = service

    attrs[INSTRUMENTATION_PROVIDER_ATTR_KEY] = INSTRUMENTATION_PROVIDER_ATTR_VALUE
    attrs[COLLECTOR_NAME_ATTR_KEY] = COLLECTOR_NAME_ATTR_VALUE

    return attrs
