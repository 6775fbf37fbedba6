"""Classification of estimates API responses.

The service answers in one of three shapes: the documented envelope
(``data`` and/or ``message``), an undocumented validation document carrying
an ``errors`` array, or something that is not JSON at all. Decoding runs as
an ordered list of tiers. Each tier either settles the outcome or declines,
recording a parse error when the body did not even parse for it. Only when
every tier failed to parse is the response reported as malformed.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, cast

from pydantic import ValidationError

from flight_carbon.results import (
    MISSING_RESPONSE_DATA,
    Estimate,
    EstimateResult,
    Failure,
)
from flight_carbon.schemas import EstimateEnvelope

LOGGER = logging.getLogger(__name__)

ERROR_DETAIL_SEPARATOR: Final[str] = "; "


@dataclass(frozen=True, slots=True)
class TierAttempt:
    """Result of one decoding tier.

    ``result`` is set when the tier settled the outcome. ``parse_error`` is
    set when the body could not be decoded in this tier's terms. Both unset
    means the body decoded but carried nothing this tier handles.
    """

    result: EstimateResult | None = None
    parse_error: str | None = None


Tier = Callable[[str], TierAttempt]


def decode_envelope(body: str) -> TierAttempt:
    """Decode the documented envelope; ``message`` wins over ``data``."""

    try:
        envelope = EstimateEnvelope.model_validate_json(body)
    except ValidationError as exc:
        return TierAttempt(parse_error=_first_error(exc))
    except RecursionError as exc:
        return TierAttempt(parse_error=str(exc))

    if envelope.message:
        return TierAttempt(result=Failure(kind="api_error", message=envelope.message))

    if envelope.data is not None:
        attributes = envelope.data.attributes
        return TierAttempt(
            result=Estimate(
                grams=attributes.carbon_g,
                pounds=attributes.carbon_lb,
                kilograms=attributes.carbon_kg,
                metric_tons=attributes.carbon_mt,
                distance_value=attributes.distance_value,
                distance_unit=attributes.distance_unit,
            )
        )

    return TierAttempt()


def decode_error_document(body: str) -> TierAttempt:
    """Decode any JSON document and join the ``detail`` of each ``errors`` item."""

    try:
        document: object = json.loads(body)
    except (json.JSONDecodeError, RecursionError) as exc:
        return TierAttempt(parse_error=str(exc))

    details = _error_details(document)
    if details:
        message = ERROR_DETAIL_SEPARATOR.join(details)
    else:
        message = MISSING_RESPONSE_DATA
    return TierAttempt(result=Failure(kind="api_error", message=message))


DECODING_TIERS: Final[tuple[Tier, ...]] = (decode_envelope, decode_error_document)


def interpret_response(body: str, status_code: int | None = None) -> EstimateResult:
    """Turn a raw response body into exactly one estimate or failure.

    Args:
        body: Raw response text.
        status_code: HTTP status, used for diagnostics only. The outcome is
            decided by the body shape.

    Returns:
        An :class:`Estimate` or a classified :class:`Failure`.
    """

    parse_errors: list[str] = []
    for tier in DECODING_TIERS:
        attempt = tier(body)
        if attempt.result is not None:
            _log_outcome(attempt.result, tier, status_code)
            return attempt.result
        if attempt.parse_error is not None:
            parse_errors.append(attempt.parse_error)

    detail = parse_errors[-1] if parse_errors else "no decoder accepted the body"
    LOGGER.warning(
        "Estimates response is not JSON",
        extra={"status_code": status_code, "body_length": len(body)},
    )
    return Failure(kind="malformed_response", message=detail)


def _error_details(document: object) -> list[str]:
    if not isinstance(document, dict):
        return []
    errors = cast(dict[object, object], document).get("errors")
    if not isinstance(errors, list):
        return []
    details: list[str] = []
    for item in cast(list[object], errors):
        if not isinstance(item, dict):
            continue
        detail = cast(dict[object, object], item).get("detail")
        if isinstance(detail, str) and detail:
            details.append(detail)
    return details


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "invalid response"))
    return f"{location}: {message}" if location else message


def _log_outcome(
    result: EstimateResult, tier: Tier, status_code: int | None
) -> None:
    extra: dict[str, object] = {
        "tier": tier.__name__,
        "status_code": status_code,
    }
    if isinstance(result, Failure):
        LOGGER.info("Estimates service reported a failure", extra=extra)
    else:
        LOGGER.info("Estimate decoded", extra=extra)
