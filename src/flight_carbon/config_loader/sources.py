"""Configuration source utilities for :mod:`flight_carbon.config_loader`."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import cast

import yaml

from flight_carbon.settings import FlightCarbonSettings

_DEFAULT_CANDIDATES: tuple[Path, ...] = (
    Path("config/flight-carbon.yml"),
    Path("config/flight-carbon.json"),
)


def load_structured_config(
    path: str | None, settings: FlightCarbonSettings
) -> dict[str, object] | None:
    """Load configuration data from disk.

    Args:
        path: Explicit configuration path provided by the caller.
        settings: Environment-derived settings used for fallback discovery.

    Returns:
        A dictionary representation of the configuration file when discovered,
        otherwise ``None``.
    """

    candidates: Iterable[Path]
    if path is not None:
        candidates = (Path(path),)
    elif settings.config_path:
        candidates = (Path(settings.config_path),)
    else:
        candidates = _DEFAULT_CANDIDATES

    for candidate in candidates:
        data = _load_config_file(candidate)
        if data is not None:
            return data
    return None


def _load_config_file(path: Path) -> dict[str, object] | None:
    """Load a configuration file based on its suffix."""

    if not path.exists():
        return None
    suffix = path.suffix.lower()
    if suffix == ".json":
        return _load_json(path)
    if suffix in {".yml", ".yaml"}:
        return _load_yaml(path)
    return None


def _load_json(path: Path) -> dict[str, object] | None:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return normalize_mapping(data)


def _load_yaml(path: Path) -> dict[str, object] | None:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return None
    return normalize_mapping(data)


def normalize_mapping(value: object) -> dict[str, object] | None:
    """Normalize potential mapping values to ``dict[str, object]``.

    Args:
        value: Arbitrary Python object produced by JSON/YAML parsing.

    Returns:
        Mapping restricted to string keys when possible, otherwise ``None``.
    """

    if not isinstance(value, dict):
        return None
    value_dict = cast(dict[object, object], value)
    normalized: dict[str, object] = {}
    for key_obj, item in value_dict.items():
        if not isinstance(key_obj, str):
            continue
        normalized[key_obj] = item
    return normalized
