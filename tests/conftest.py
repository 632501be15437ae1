"""Pytest fixtures for rawdata tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def json_object_file(tmp_path: Path) -> Path:
    """A JSON file holding an object."""
    path = tmp_path / "service.json"
    path.write_text(json.dumps({"name": "api", "port": 8080}))
    return path


@pytest.fixture
def json_array_file(tmp_path: Path) -> Path:
    """A JSON file holding an array."""
    path = tmp_path / "ports.json"
    path.write_text(json.dumps([80, 443]))
    return path


@pytest.fixture
def yaml_object_file(tmp_path: Path) -> Path:
    """A YAML file holding a mapping (no leading document marker)."""
    path = tmp_path / "service.yaml"
    path.write_text("name: api\nport: 8080\ntags:\n  - web\n")
    return path


@pytest.fixture
def yaml_array_file(tmp_path: Path) -> Path:
    """A YAML file holding a sequence."""
    path = tmp_path / "hosts.yml"
    path.write_text("- alpha\n- beta\n")
    return path
