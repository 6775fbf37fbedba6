"""Environment-backed settings primitives for :mod:`flight_carbon`."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["FlightCarbonSettings", "get_settings"]


class FlightCarbonSettings(BaseSettings):
    """Expose environment-derived configuration knobs for Flight Carbon.

    All environment lookups go through this class. Every attribute maps to a
    documented environment variable and defaults to ``None`` when the
    variable is absent, letting :mod:`flight_carbon.config_loader` decide the
    effective value.

    Attributes:
        api_key: Carbon Interface API key. When set the CLI does not prompt
            for the credential.
        api_base_url: Base URL of the estimation service.
        request_timeout: Timeout in seconds for the estimate request.
        config_path: Explicit path to a JSON or YAML configuration file.
        log_level: Logging level name for the structured logger.
    """

    api_key: str | None = Field(default=None, alias="CARBON_INTERFACE_API_KEY")
    api_base_url: str | None = Field(
        default=None, alias="CARBON_INTERFACE_BASE_URL"
    )
    request_timeout: float | None = Field(
        default=None, alias="CARBON_INTERFACE_TIMEOUT"
    )
    config_path: str | None = Field(default=None, alias="FLIGHT_CARBON_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="FLIGHT_CARBON_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _parse_optional_float(cls, value: object) -> float | None:
        """Parse optional float fields while tolerating malformed input.

        Args:
            value: Raw environment value.

        Returns:
            Parsed positive float when conversion succeeds, otherwise ``None``.
        """

        if value is None:
            return None
        if isinstance(value, (int, float)):
            parsed = float(value)
        elif isinstance(value, str):
            try:
                parsed = float(value.strip())
            except ValueError:
                return None
        else:
            return None
        return parsed if parsed > 0 else None

    @field_validator(
        "api_key", "api_base_url", "config_path", "log_level", mode="before"
    )
    @classmethod
    def _blank_as_none(cls, value: object) -> str | None:
        """Treat empty environment values as unset."""

        if value is None:
            return None
        text = str(value).strip()
        return text or None


def get_settings() -> FlightCarbonSettings:
    """Return a :class:`FlightCarbonSettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return FlightCarbonSettings()
