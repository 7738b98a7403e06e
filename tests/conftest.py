"""Shared fixtures for generator tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import jinja2
import pytest

from gdgen.codegen import create_environment
from gdgen.config import TEMPLATE_DIR
from gdgen.helpers import build_helpers

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def health_description() -> dict:
    return {"paths": {"/v1/health": {"get": {}}}}


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def write_description(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a description to tmp_path/swagger/<identifier>.swagger.json.

    Strings are written verbatim so tests can produce malformed JSON.
    """
    swagger_dir = tmp_path / "swagger"
    swagger_dir.mkdir()

    def _write(identifier: str, description: Any) -> Path:
        path = swagger_dir / f"{identifier}.swagger.json"
        text = description if isinstance(description, str) else json.dumps(description)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def env() -> jinja2.Environment:
    """Environment over the real templates."""
    return create_environment(TEMPLATE_DIR, build_helpers())


@pytest.fixture
def rendered_paths() -> list[str]:
    """Paths seen by echo_env's fragment template, one entry per render."""
    return []


@pytest.fixture
def echo_env(rendered_paths: list[str]) -> jinja2.Environment:
    """Environment whose fragment template records and echoes the path."""

    def _record(path: str) -> str:
        rendered_paths.append(path)
        return ""

    env = create_environment(
        helpers=build_helpers(),
        loader=jinja2.DictLoader({
            "request.gd.j2": "{{ record(path) }}{{ path }}|",
            "template.gd.j2": "{{ header }}\n{{ data }}",
        }),
    )
    env.globals["record"] = _record
    return env


@pytest.fixture
def failing_template_dir(tmp_path: Path) -> Path:
    """Template dir whose fragment template fails on the /b path."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()
    (template_dir / "request.gd.j2").write_text(
        "{{ path }}{% if path == '/b' %}{{ fail() }}{% endif %}\n"
    )
    (template_dir / "template.gd.j2").write_text("{{ header }}\n{{ data }}")
    return template_dir
