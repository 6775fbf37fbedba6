"""Command-line entry point for flight carbon estimates."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from collections.abc import Callable

import httpx
from rich.console import Console

from flight_carbon.config_loader import ClientConfig, load_config
from flight_carbon.estimator import request_estimate
from flight_carbon.itinerary import build_itinerary
from flight_carbon.logging_pipeline import configure_logging, shutdown_listeners
from flight_carbon.prompting import FieldPrompter
from flight_carbon.reporting import BANNER, estimate_to_json, render_estimate_table
from flight_carbon.results import Failure
from flight_carbon.settings import FlightCarbonSettings, get_settings
from flight_carbon.transport import EstimatesClient

LOGGER = logging.getLogger(__name__)

API_KEY_PROMPT = "Please enter your API key: "


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not parsed > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value!r}")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-carbon",
        description="Estimate the carbon footprint of a flight itinerary.",
    )
    parser.add_argument("--base-url", help="Estimation service base URL.")
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        help="Request timeout in seconds (must be positive).",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to a JSON or YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Structured log verbosity (logs go to stderr).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the estimate as JSON instead of a table.",
    )
    return parser


def _resolve_credential(
    settings: FlightCarbonSettings, read_secret: Callable[[str], str]
) -> str:
    if settings.api_key:
        return settings.api_key
    return read_secret(API_KEY_PROMPT).strip()


def main(
    argv: list[str] | None = None,
    *,
    ask: Callable[[str], str] = input,
    read_secret: Callable[[str], str] = getpass.getpass,
    settings: FlightCarbonSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run one interactive estimate and return the process exit code."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - controlled via tests
        exit_code = int(exc.code) if isinstance(exc.code, int) else 1
        return 0 if exit_code == 0 else 1

    env_settings = settings or get_settings()
    config: ClientConfig = load_config(args.config, settings=env_settings)
    base_url = args.base_url or config.api.base_url
    timeout = config.api.timeout_seconds
    if args.timeout is not None:
        timeout = args.timeout
    log_level = args.log_level or config.output.log_level
    as_json = args.json or config.output.format == "json"

    package_logger = logging.getLogger("flight_carbon")
    previous_level, previous_propagate = package_logger.level, package_logger.propagate
    listener = configure_logging(
        package_logger, level=logging.getLevelName(log_level)
    )
    try:
        print(BANNER)
        try:
            credential = _resolve_credential(env_settings, read_secret)
            itinerary = build_itinerary(FieldPrompter(ask=ask))
        except (EOFError, KeyboardInterrupt):
            print("\nInput aborted.", file=sys.stderr)
            return 1

        client = EstimatesClient(base_url, timeout_seconds=timeout, transport=transport)
        with Console(stderr=True).status("Estimating..."):
            result = request_estimate(itinerary, credential, client=client)

        if isinstance(result, Failure):
            print(f"Error: {result.describe()}", file=sys.stderr)
            return 1

        if as_json:
            print(estimate_to_json(result))
        else:
            print("\nEstimated carbon emissions for your trip are:\n")
            print(render_estimate_table(result))
        return 0
    finally:
        shutdown_listeners([listener])
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        package_logger.propagate = previous_propagate


if __name__ == "__main__":
    raise SystemExit(main())
