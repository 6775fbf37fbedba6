"""End-to-end estimate request pipeline."""

from __future__ import annotations

import logging

from flight_carbon.codec import encode_itinerary
from flight_carbon.errors import EstimateError
from flight_carbon.interpreter import interpret_response
from flight_carbon.models import Itinerary
from flight_carbon.results import EstimateResult, Failure
from flight_carbon.transport import EstimatesClient

LOGGER = logging.getLogger(__name__)


def request_estimate(
    itinerary: Itinerary,
    credential: str,
    *,
    client: EstimatesClient | None = None,
) -> EstimateResult:
    """Encode, send and interpret a single flight estimate request.

    Args:
        itinerary: The validated itinerary to estimate.
        credential: API key for the estimation service.
        client: Transport to use. Defaults to the public service.

    Returns:
        Exactly one :class:`~flight_carbon.results.Estimate` or
        :class:`~flight_carbon.results.Failure`. Encoding and transport
        errors are folded into failures.
    """

    estimates_client = client or EstimatesClient()
    try:
        body = encode_itinerary(itinerary)
        LOGGER.debug(
            "Sending estimate request",
            extra={"leg_count": len(itinerary.legs), "body_length": len(body)},
        )
        response = estimates_client.send(body, credential)
    except EstimateError as exc:
        LOGGER.warning(
            "Estimate request aborted",
            extra={"kind": exc.kind, "error_type": type(exc).__name__},
        )
        return Failure(kind=exc.kind, message=str(exc))

    return interpret_response(response.body, response.status_code)
