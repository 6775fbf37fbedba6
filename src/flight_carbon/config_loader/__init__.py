"""Public entry points for the :mod:`flight_carbon` configuration loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import cast

from flight_carbon.config_loader.models import (
    DEFAULT_BASE_URL,
    ApiSettings,
    ClientConfig,
    OutputFormat,
    OutputSettings,
)
from flight_carbon.config_loader.sources import (
    load_structured_config,
    normalize_mapping,
)
from flight_carbon.settings import FlightCarbonSettings, get_settings

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiSettings",
    "ClientConfig",
    "OutputFormat",
    "OutputSettings",
    "apply_environment_overrides",
    "apply_structured_overrides",
    "load_config",
]

_OUTPUT_FORMATS: frozenset[str] = frozenset({"table", "json"})


def load_config(
    path: str | None = None, *, settings: FlightCarbonSettings | None = None
) -> ClientConfig:
    """Load configuration from environment and optional file sources.

    File values take precedence over environment values, which take
    precedence over the built-in defaults.

    Args:
        path: Optional explicit path to a configuration file. When omitted the
            loader inspects the environment and default search locations.
        settings: Optional pre-instantiated environment settings. When omitted
            :func:`flight_carbon.settings.get_settings` is used.

    Returns:
        Fully populated :class:`ClientConfig` instance.
    """

    env_settings = settings or get_settings()
    base = apply_environment_overrides(ClientConfig(), env_settings)
    structured = load_structured_config(path, env_settings)
    if structured is None:
        return base
    return apply_structured_overrides(base, structured)


def apply_environment_overrides(
    config: ClientConfig, settings: FlightCarbonSettings
) -> ClientConfig:
    """Apply environment-derived overrides to the configuration."""

    updated = config
    if settings.api_base_url:
        updated = replace(
            updated, api=replace(updated.api, base_url=settings.api_base_url)
        )
    if settings.request_timeout is not None:
        updated = replace(
            updated,
            api=replace(updated.api, timeout_seconds=settings.request_timeout),
        )
    if settings.log_level and _is_level_name(settings.log_level):
        updated = replace(
            updated,
            output=replace(updated.output, log_level=settings.log_level.upper()),
        )
    return updated


def apply_structured_overrides(
    config: ClientConfig, data: Mapping[str, object]
) -> ClientConfig:
    """Apply overrides sourced from structured configuration data.

    Unknown keys and values of the wrong type are ignored.

    Args:
        config: Base configuration instance.
        data: Mapping parsed from a configuration file.

    Returns:
        Configuration updated according to the provided mapping.
    """

    updated = config

    api_section = normalize_mapping(data.get("api"))
    if api_section is not None:
        base_url = api_section.get("base_url")
        if isinstance(base_url, str) and base_url.strip():
            updated = replace(
                updated, api=replace(updated.api, base_url=base_url.strip())
            )
        timeout = _coerce_positive_float(api_section.get("timeout_seconds"))
        if timeout is not None:
            updated = replace(
                updated, api=replace(updated.api, timeout_seconds=timeout)
            )

    output_section = normalize_mapping(data.get("output"))
    if output_section is not None:
        output_format = output_section.get("format")
        if isinstance(output_format, str) and output_format in _OUTPUT_FORMATS:
            updated = replace(
                updated,
                output=replace(
                    updated.output, format=cast(OutputFormat, output_format)
                ),
            )
        log_level = output_section.get("log_level")
        if isinstance(log_level, str) and _is_level_name(log_level):
            updated = replace(
                updated,
                output=replace(updated.output, log_level=log_level.upper()),
            )

    return updated


def _is_level_name(value: str) -> bool:
    return isinstance(logging.getLevelName(value.upper()), int)


def _coerce_positive_float(value: object) -> float | None:
    if isinstance(value, bool):
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
