"""HTTP transport for the Carbon Interface estimates endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from flight_carbon.config_loader import DEFAULT_BASE_URL
from flight_carbon.errors import TransportError

LOGGER = logging.getLogger(__name__)

ESTIMATES_PATH = "/api/v1/estimates"


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status code and undecoded body text of an estimates call."""

    status_code: int
    body: str


class EstimatesClient:
    """Send a serialized estimate request and return the raw answer.

    Exactly one request is made per :meth:`send` call; failures are not
    retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def url(self) -> str:
        """Return the fully qualified estimates endpoint."""
        return f"{self._base}{ESTIMATES_PATH}"

    def send(self, body: str, credential: str) -> RawResponse:
        """POST ``body`` to the estimates endpoint.

        Args:
            body: JSON request body.
            credential: API key sent as a bearer token. It is never logged.

        Returns:
            The status code and body text, whatever the status.

        Raises:
            TransportError: On connection failure, timeout or any other
                network-layer error.
        """

        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }
        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = client.post(self.url, content=body, headers=headers)
                text = response.text
        except httpx.TimeoutException as exc:
            LOGGER.warning(
                "Estimates request timed out",
                extra={"url": self.url, "timeout_seconds": self._timeout},
                exc_info=exc,
            )
            raise TransportError(f"request timed out after {self._timeout}s") from exc
        except httpx.HTTPError as exc:
            LOGGER.warning(
                "Estimates transport error",
                extra={"url": self.url, "error_type": type(exc).__name__},
                exc_info=exc,
            )
            raise TransportError(str(exc) or type(exc).__name__) from exc
        except httpx.InvalidURL as exc:
            LOGGER.warning(
                "Estimates endpoint URL is invalid",
                extra={"url": self.url},
                exc_info=exc,
            )
            raise TransportError(f"invalid estimates URL {self.url!r}: {exc}") from exc
        except UnicodeEncodeError as exc:
            LOGGER.warning(
                "Estimates request headers could not be encoded",
                extra={"url": self.url, "error_type": type(exc).__name__},
            )
            raise TransportError(
                "API key contains characters that cannot be sent in a header"
            ) from None

        LOGGER.info(
            "Estimates response received",
            extra={"url": self.url, "status_code": response.status_code},
        )
        return RawResponse(status_code=response.status_code, body=text)
