"""Tests enforcing dependency policy for the distribution."""

from __future__ import annotations

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _project() -> dict[str, object]:
    return tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]


def test_all_dependencies_are_pinned() -> None:
    """Runtime and test dependencies must be pinned to exact versions."""

    project = _project()
    optional = project.get("optional-dependencies", {})

    for requirement in project["dependencies"]:
        assert "==" in requirement, f"Core dependency not pinned: {requirement}"
    for group, requirements in optional.items():
        for requirement in requirements:
            assert "==" in requirement, (
                f"Optional dependency '{group}' not pinned: {requirement}"
            )


def test_runtime_stack_is_declared() -> None:
    """Every third-party import of the package has a declared distribution."""

    names = {
        requirement.split("==")[0].lower()
        for requirement in _project()["dependencies"]
    }

    assert {"httpx", "pydantic", "pydantic-settings", "pyyaml", "rich"} <= names


def test_console_script_points_at_cli() -> None:
    assert _project()["scripts"] == {"flight-carbon": "flight_carbon.cli:main"}
