"""Interactive construction of an :class:`~flight_carbon.models.Itinerary`."""

from __future__ import annotations

import logging
from typing import Final, cast

from flight_carbon.models import (
    CABIN_CLASSES,
    DEFAULT_CABIN_CLASS,
    DISTANCE_UNITS,
    CabinClass,
    DistanceUnit,
    Itinerary,
    Leg,
)
from flight_carbon.prompting import (
    FieldPrompter,
    is_airport_code,
    is_non_negative_integer,
    is_positive_integer,
    one_of,
)

LOGGER = logging.getLogger(__name__)

PASSENGERS_PROMPT: Final[str] = "Enter the number of passengers: "
PASSENGERS_ERROR: Final[str] = "Invalid input. Please enter a positive whole number."
LEGS_PROMPT: Final[str] = "Enter the number of legs: "
LEGS_ERROR: Final[str] = "Invalid input. Please enter a valid number."
DISTANCE_UNIT_PROMPT: Final[str] = (
    "Enter the distance unit (km or mi, blank for default): "
)
DISTANCE_UNIT_ERROR: Final[str] = "Invalid input. Distance unit can be 'km' or 'mi'."
DEPARTURE_PROMPT: Final[str] = "Enter the departure airport IATA code: "
DESTINATION_PROMPT: Final[str] = "Enter the destination airport IATA code: "
IATA_ERROR: Final[str] = (
    "Invalid input. IATA codes should be exactly 3 uppercase letters."
)
CABIN_CLASS_PROMPT: Final[str] = (
    "Enter the cabin class (economy or premium, blank for economy): "
)
CABIN_CLASS_ERROR: Final[str] = (
    "Invalid input. Cabin class can be 'economy' or 'premium'."
)


class ItineraryBuilder:
    """Walk the operator through every itinerary field in order.

    Only per-field syntax is enforced here. A leg count of zero is accepted
    and produces an itinerary the estimation service will reject.
    """

    def __init__(self, prompter: FieldPrompter | None = None) -> None:
        self._prompter = prompter or FieldPrompter()

    def build(self) -> Itinerary:
        """Collect passengers, legs and distance unit and return the itinerary."""

        passengers = int(
            self._prompter.collect(
                PASSENGERS_PROMPT, PASSENGERS_ERROR, is_positive_integer
            )
        )
        leg_count = int(
            self._prompter.collect(LEGS_PROMPT, LEGS_ERROR, is_non_negative_integer)
        )
        distance_unit = self._collect_distance_unit()

        legs = tuple(self._collect_leg(index) for index in range(leg_count))
        LOGGER.info(
            "Itinerary collected",
            extra={
                "passengers": passengers,
                "leg_count": leg_count,
                "distance_unit": distance_unit,
            },
        )
        return Itinerary(passengers=passengers, legs=legs, distance_unit=distance_unit)

    def _collect_distance_unit(self) -> DistanceUnit | None:
        value = self._prompter.collect(
            DISTANCE_UNIT_PROMPT,
            DISTANCE_UNIT_ERROR,
            one_of(DISTANCE_UNITS),
            optional=True,
        )
        return cast(DistanceUnit, value) if value else None

    def _collect_leg(self, index: int) -> Leg:
        self._prompter.notify(f"Enter details for leg {index + 1}:")
        departure = self._prompter.collect(
            DEPARTURE_PROMPT, IATA_ERROR, is_airport_code
        )
        destination = self._prompter.collect(
            DESTINATION_PROMPT, IATA_ERROR, is_airport_code
        )
        cabin_class = self._prompter.collect(
            CABIN_CLASS_PROMPT,
            CABIN_CLASS_ERROR,
            one_of(CABIN_CLASSES),
            optional=True,
        )
        return Leg(
            departure_airport=departure,
            destination_airport=destination,
            cabin_class=(
                cast(CabinClass, cabin_class) if cabin_class else DEFAULT_CABIN_CLASS
            ),
        )


def build_itinerary(prompter: FieldPrompter | None = None) -> Itinerary:
    """Collect an itinerary interactively using ``prompter``."""

    return ItineraryBuilder(prompter).build()
