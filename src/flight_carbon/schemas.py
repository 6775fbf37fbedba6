"""Pydantic models describing the estimates API wire format."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from flight_carbon.models import CabinClass, DistanceUnit


class LegPayload(BaseModel):
    """One leg as sent to the estimates endpoint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    departure_airport: str = Field(..., min_length=3, max_length=3)
    destination_airport: str = Field(..., min_length=3, max_length=3)
    cabin_class: CabinClass | None = None


class FlightEstimateRequest(BaseModel):
    """Request body for a flight estimate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["flight"] = "flight"
    passengers: int = Field(..., ge=1)
    legs: tuple[LegPayload, ...]
    distance_unit: DistanceUnit | None = None


class EstimateAttributes(BaseModel):
    """Computed figures inside a successful estimate response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    carbon_g: float
    carbon_lb: float
    carbon_kg: float
    carbon_mt: float
    distance_unit: str
    distance_value: float


class EstimateData(BaseModel):
    """The ``data`` member of a successful response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    attributes: EstimateAttributes


class EstimateEnvelope(BaseModel):
    """Documented response wrapper; either member may be absent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    data: EstimateData | None = None
    message: str | None = None
