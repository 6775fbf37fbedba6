"""Typed configuration dataclasses for :mod:`flight_carbon.config_loader`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["table", "json"]

DEFAULT_BASE_URL = "https://www.carboninterface.com"


@dataclass(slots=True)
class ApiSettings:
    """Settings describing the remote estimation service.

    Attributes:
        base_url: Scheme and host of the estimation service.
        timeout_seconds: Timeout applied to the single estimate request.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0


@dataclass(slots=True)
class OutputSettings:
    """Controls for how results are rendered."""

    format: OutputFormat = "table"
    log_level: str = "WARNING"


@dataclass(slots=True)
class ClientConfig:
    """Strongly typed configuration container for the estimate client."""

    api: ApiSettings = field(default_factory=ApiSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
