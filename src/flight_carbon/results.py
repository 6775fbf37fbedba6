"""Outcome types produced by an estimate run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, TypedDict

FailureKind = Literal[
    "transport_error",
    "encoding_error",
    "api_error",
    "malformed_response",
]

MISSING_RESPONSE_DATA: Final[str] = "Missing response data"

_FAILURE_PREFIXES: Final[dict[str, str]] = {
    "transport_error": "Network error",
    "encoding_error": "Could not encode request",
    "api_error": "API error",
    "malformed_response": "Unexpected response format",
}


class EstimateDict(TypedDict):
    """JSON-ready representation of an :class:`Estimate`."""

    carbon_g: float
    carbon_lb: float
    carbon_kg: float
    carbon_mt: float
    distance_value: float
    distance_unit: str


@dataclass(frozen=True, slots=True)
class Estimate:
    """Carbon figures computed by the estimation service.

    The four mass fields describe the same quantity in different units and
    are reported exactly as the service returned them.
    """

    grams: float
    pounds: float
    kilograms: float
    metric_tons: float
    distance_value: float
    distance_unit: str

    def to_dict(self) -> EstimateDict:
        """Return the figures keyed by their wire names."""
        return {
            "carbon_g": self.grams,
            "carbon_lb": self.pounds,
            "carbon_kg": self.kilograms,
            "carbon_mt": self.metric_tons,
            "distance_value": self.distance_value,
            "distance_unit": self.distance_unit,
        }


@dataclass(frozen=True, slots=True)
class Failure:
    """A classified, human-readable failure."""

    kind: FailureKind
    message: str

    def describe(self) -> str:
        """Return the single line shown to the operator."""
        return f"{_FAILURE_PREFIXES[self.kind]}: {self.message}"


EstimateResult = Estimate | Failure
