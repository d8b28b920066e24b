"""Numeric payloads and their coercion to floating point.

Aggregations report raw numbers; how a number is interpreted depends on the
``NumberKind`` declared by the instrument descriptor. Both converters go
through :func:`coerce_to_float` so they share the same rounding behavior.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Union

RawNumber = Union[int, float]


class NumberKind(str, Enum):
    """Numeric representation an instrument reports in."""

    INTEGER = "integer"
    FLOATING_POINT = "floating_point"


class Number:
    """A raw numeric value as reported by an aggregation."""

    __slots__ = ("_value",)

    def __init__(self, value: RawNumber) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Number payload must be int or float, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> RawNumber:
        return self._value

    def coerce_to_float(self, kind: NumberKind) -> float:
        return coerce_to_float(self, kind)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Number):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Number({self._value!r})"


def _widen_integer(value: RawNumber) -> float:
    if isinstance(value, float):
        if not math.isfinite(value):
            return value
        # Integer instruments never carry a fraction; drop it like an int64 cast.
        value = math.trunc(value)
    try:
        # int -> float conversion is correctly rounded (IEEE-754, ties to even).
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _pass_float(value: RawNumber) -> float:
    if isinstance(value, int):
        return _widen_integer(value)
    return value


_COERCIONS: Dict[NumberKind, Callable[[RawNumber], float]] = {
    NumberKind.INTEGER: _widen_integer,
    NumberKind.FLOATING_POINT: _pass_float,
}


def coerce_to_float(number: Union[Number, RawNumber], kind: NumberKind) -> float:
    """Interpret ``number`` according to ``kind`` and return it as a float.

    Integers with a magnitude up to 2**53 convert exactly. Larger integers
    round to the nearest representable double, and integers beyond the double
    range become signed infinity. Floating-point values pass through unchanged.
    """
    raw = number.value if isinstance(number, Number) else number
    return _COERCIONS[NumberKind(kind)](raw)
