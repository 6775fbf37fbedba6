"""Domain models describing a flight itinerary."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Literal

CabinClass = Literal["economy", "premium"]
DistanceUnit = Literal["km", "mi"]

CABIN_CLASSES: Final[tuple[str, ...]] = ("economy", "premium")
DISTANCE_UNITS: Final[tuple[str, ...]] = ("km", "mi")
DEFAULT_CABIN_CLASS: Final[CabinClass] = "economy"

IATA_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Z]{3}")


def is_iata_code(value: str) -> bool:
    """Return whether ``value`` is exactly three uppercase ASCII letters."""

    return IATA_CODE_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, slots=True)
class Leg:
    """One directed flight segment.

    Departure and destination may be the same airport; the remote service
    decides whether such a leg makes sense.

    Attributes:
        departure_airport: IATA code of the departure airport.
        destination_airport: IATA code of the destination airport.
        cabin_class: Cabin class, or ``None`` to let the service default it.
    """

    departure_airport: str
    destination_airport: str
    cabin_class: CabinClass | None = None

    def __post_init__(self) -> None:
        for label, code in (
            ("departure_airport", self.departure_airport),
            ("destination_airport", self.destination_airport),
        ):
            if not is_iata_code(code):
                raise ValueError(
                    f"{label} must be exactly 3 uppercase letters, got {code!r}"
                )
        if self.cabin_class is not None and self.cabin_class not in CABIN_CLASSES:
            raise ValueError(
                f"cabin_class must be one of {CABIN_CLASSES}, got {self.cabin_class!r}"
            )


@dataclass(frozen=True, slots=True)
class Itinerary:
    """Validated description of passengers and legs for an estimate.

    An itinerary without legs is accepted here; the estimation service is
    the authority that rejects it.
    """

    passengers: int
    legs: tuple[Leg, ...]
    distance_unit: DistanceUnit | None = None

    def __post_init__(self) -> None:
        if isinstance(self.passengers, bool) or self.passengers < 1:
            raise ValueError(
                f"passengers must be a positive integer, got {self.passengers!r}"
            )
        if self.distance_unit is not None and self.distance_unit not in DISTANCE_UNITS:
            raise ValueError(
                f"distance_unit must be one of {DISTANCE_UNITS}, "
                f"got {self.distance_unit!r}"
            )
        object.__setattr__(self, "legs", tuple(self.legs))
