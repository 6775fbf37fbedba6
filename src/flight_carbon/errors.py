"""Exceptions raised by the estimate pipeline stages."""

from __future__ import annotations

from typing import ClassVar

from flight_carbon.results import FailureKind

__all__ = ["EncodingError", "EstimateError", "TransportError"]


class EstimateError(RuntimeError):
    """Base class for failures that abort an estimate run.

    Not raised directly. Each subclass sets ``kind`` to the failure kind it
    is reported as.
    """

    kind: ClassVar[FailureKind]


class TransportError(EstimateError):
    """Raised when the estimates endpoint cannot be reached or times out."""

    kind: ClassVar[FailureKind] = "transport_error"


class EncodingError(EstimateError):
    """Raised when an itinerary cannot be serialized into a request body."""

    kind: ClassVar[FailureKind] = "encoding_error"
