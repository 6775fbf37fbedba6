"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import httpx
import pytest

# Ensure src/ is on sys.path for tests so the src layout is used during test runs
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from flight_carbon.prompting import FieldPrompter  # noqa: E402

SUCCESS_BODY: dict[str, object] = {
    "data": {
        "attributes": {
            "carbon_g": 99911700.0,
            "carbon_lb": 267.6,
            "carbon_kg": 99911.7,
            "carbon_mt": 99.91,
            "distance_unit": "km",
            "distance_value": 5660.34,
        }
    }
}


class ScriptedConsole:
    """Console double replaying canned answers and recording what was shown."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def prompter(self) -> FieldPrompter:
        return FieldPrompter(ask=self.ask, notify=self.notify)


@pytest.fixture(scope="session")
def console_factory() -> Callable[[Iterable[str]], ScriptedConsole]:
    """Return a factory for scripted consoles."""

    return ScriptedConsole


class RecordingHandler:
    """``httpx.MockTransport`` handler that records requests."""

    def __init__(self, status_code: int = 200, body: object = SUCCESS_BODY) -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict[str, object]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recording_handler() -> RecordingHandler:
    """Handler answering every request with the canned success body."""

    return RecordingHandler()


@pytest.fixture(scope="session")
def handler_factory() -> Callable[..., RecordingHandler]:
    """Return a factory for handlers with custom status and body."""

    return RecordingHandler


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Keep developer environment variables and config files out of tests."""

    for name in (
        "CARBON_INTERFACE_API_KEY",
        "CARBON_INTERFACE_BASE_URL",
        "CARBON_INTERFACE_TIMEOUT",
        "FLIGHT_CARBON_CONFIG_PATH",
        "FLIGHT_CARBON_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
