"""Mapping between itineraries and the estimates request body."""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from flight_carbon.errors import EncodingError
from flight_carbon.models import Itinerary
from flight_carbon.schemas import FlightEstimateRequest, LegPayload


def build_request(itinerary: Itinerary) -> FlightEstimateRequest:
    """Map ``itinerary`` onto the flight request model.

    Raises:
        EncodingError: If the itinerary cannot be represented on the wire.
    """

    try:
        return FlightEstimateRequest(
            passengers=itinerary.passengers,
            legs=tuple(
                LegPayload(
                    departure_airport=leg.departure_airport,
                    destination_airport=leg.destination_airport,
                    cabin_class=leg.cabin_class,
                )
                for leg in itinerary.legs
            ),
            distance_unit=itinerary.distance_unit,
        )
    except ValidationError as exc:
        raise EncodingError(str(exc)) from exc


def encode_request(request: FlightEstimateRequest) -> str:
    """Serialize ``request`` to JSON, dropping optional fields that are unset.

    Raises:
        EncodingError: If serialization fails.
    """

    try:
        return request.model_dump_json(exclude_none=True)
    except PydanticSerializationError as exc:
        raise EncodingError(str(exc)) from exc


def encode_itinerary(itinerary: Itinerary) -> str:
    """Build and serialize the request body for ``itinerary`` in one step."""

    return encode_request(build_request(itinerary))
