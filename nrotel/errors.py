"""Exception hierarchy for the nrotel package."""

from __future__ import annotations

from typing import Any, Dict, Optional


class NrOtelError(Exception):
    """Base class for all nrotel errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class ConfigError(NrOtelError):
    """Configuration could not be loaded or is invalid."""


class UnimplementedAggregationError(NrOtelError):
    """Raised when a record holds an aggregation kind with no converter."""


class ExtractionError(NrOtelError):
    """A kind-specific aggregation accessor failed to produce a value."""


class NoDataError(ExtractionError):
    """The aggregation was never updated with a value."""
