"""Tests for configuration loading from environment and files."""

from __future__ import annotations

from flight_carbon.config_loader import (
    DEFAULT_BASE_URL,
    ClientConfig,
    apply_structured_overrides,
    load_config,
)
from flight_carbon.settings import FlightCarbonSettings, get_settings


def test_defaults_without_sources():
    config = load_config()

    assert config == ClientConfig()
    assert config.api.base_url == DEFAULT_BASE_URL
    assert config.api.timeout_seconds == 10.0
    assert config.output.format == "table"
    assert config.output.log_level == "WARNING"


def test_env_var_override(monkeypatch):
    monkeypatch.setenv("CARBON_INTERFACE_BASE_URL", "https://staging.example")
    monkeypatch.setenv("CARBON_INTERFACE_TIMEOUT", "2.5")
    monkeypatch.setenv("FLIGHT_CARBON_LOG_LEVEL", "debug")

    config = load_config()

    assert config.api.base_url == "https://staging.example"
    assert config.api.timeout_seconds == 2.5
    assert config.output.log_level == "DEBUG"


def test_malformed_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("CARBON_INTERFACE_TIMEOUT", "soon")
    monkeypatch.setenv("FLIGHT_CARBON_LOG_LEVEL", "chatty")

    settings = get_settings()
    config = load_config(settings=settings)

    assert settings.request_timeout is None
    assert config.api.timeout_seconds == 10.0
    assert config.output.log_level == "WARNING"


def test_load_from_json_file(tmp_path):
    cfg_file = tmp_path / "client.json"
    cfg_file.write_text(
        '{"api": {"base_url": "https://json.example", "timeout_seconds": 4},'
        ' "output": {"format": "json"}}',
        encoding="utf-8",
    )

    config = load_config(str(cfg_file))

    assert config.api.base_url == "https://json.example"
    assert config.api.timeout_seconds == 4.0
    assert config.output.format == "json"


def test_load_from_yaml_path_in_environment(tmp_path, monkeypatch):
    cfg_file = tmp_path / "client.yml"
    cfg_file.write_text(
        "api:\n  timeout_seconds: 1.5\noutput:\n  log_level: info\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FLIGHT_CARBON_CONFIG_PATH", str(cfg_file))

    config = load_config()

    assert config.api.timeout_seconds == 1.5
    assert config.output.log_level == "INFO"
    assert config.api.base_url == DEFAULT_BASE_URL


def test_default_search_location(tmp_path):
    """The autouse fixture runs tests from tmp_path, so relative paths land there."""
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "flight-carbon.json").write_text(
        '{"output": {"format": "json"}}', encoding="utf-8"
    )

    assert load_config().output.format == "json"


def test_file_values_override_environment(tmp_path, monkeypatch):
    cfg_file = tmp_path / "client.json"
    cfg_file.write_text('{"api": {"base_url": "https://file.example"}}', encoding="utf-8")
    monkeypatch.setenv("CARBON_INTERFACE_BASE_URL", "https://env.example")

    assert load_config(str(cfg_file)).api.base_url == "https://file.example"


def test_unreadable_files_are_ignored(tmp_path):
    broken_json = tmp_path / "broken.json"
    broken_json.write_text("{", encoding="utf-8")
    broken_yaml = tmp_path / "broken.yaml"
    broken_yaml.write_text("api: [unclosed", encoding="utf-8")

    assert load_config(str(broken_json)) == ClientConfig()
    assert load_config(str(broken_yaml)) == ClientConfig()
    assert load_config(str(tmp_path / "missing.json")) == ClientConfig()
    assert load_config(str(tmp_path / "config.toml")) == ClientConfig()


def test_invalid_structured_values_are_ignored():
    config = apply_structured_overrides(
        ClientConfig(),
        {
            "api": {"base_url": "  ", "timeout_seconds": -1},
            "output": {"format": "xml", "log_level": "loud"},
            "unknown": {"key": "value"},
        },
    )

    assert config == ClientConfig()


def test_settings_treat_blank_values_as_unset(monkeypatch):
    monkeypatch.setenv("CARBON_INTERFACE_API_KEY", "   ")

    assert FlightCarbonSettings().api_key is None
