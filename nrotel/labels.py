"""Ordered key/value sets used for point labels and resources."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

AttributeValue = Union[str, bool, int, float]

LabelSource = Union[Mapping[str, AttributeValue], Iterable[Tuple[str, AttributeValue]]]

_PRIMITIVES = (str, bool, int, float)


def is_primitive(value: Any) -> bool:
    """Return True if ``value`` can be carried as an attribute value."""
    return isinstance(value, _PRIMITIVES)


class LabelSet:
    """
    Immutable, ordered set of key/value pairs with unique keys.

    The input is copied on construction. Keys keep the order in which they were
    first seen; when a key repeats, the last value wins.
    """

    __slots__ = ("_entries",)

    def __init__(self, labels: Optional[LabelSource] = None) -> None:
        entries: Dict[str, AttributeValue] = {}
        if labels is not None:
            items = labels.items() if isinstance(labels, Mapping) else labels
            for key, value in items:
                if not isinstance(key, str) or not key:
                    raise ValueError(f"Label keys must be non-empty strings, got {key!r}")
                if not is_primitive(value):
                    raise ValueError(
                        f"Label {key!r} has unsupported value type {type(value).__name__}"
                    )
                entries[key] = value
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, AttributeValue]]:
        for key, value in self._entries.items():
            yield key, value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str, default: Optional[AttributeValue] = None) -> Optional[AttributeValue]:
        return self._entries.get(key, default)

    def to_dict(self) -> Dict[str, AttributeValue]:
        return dict(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LabelSet):
            return type(self) is type(other) and self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class Resource(LabelSet):
    """Attributes describing the process or service that produced the measurements."""

    __slots__ = ()
