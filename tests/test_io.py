"""Tests for output encoding."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from pydantic import BaseModel

from rawdata.formats import Format
from rawdata.io import dump_value, write_output
from rawdata.values import ArrayValue, ObjectValue


class Endpoint(BaseModel):
    host: str
    port: int


class TestDumpValue:
    """Tests for dump_value."""

    def test_object_as_json(self) -> None:
        text = dump_value(ObjectValue({"a": 1}))
        assert json.loads(text) == {"a": 1}
        assert text.endswith("\n")

    def test_array_as_yaml(self) -> None:
        text = dump_value(ArrayValue(["a", "b"]), Format.YAML)
        assert text.startswith("---")
        assert yaml.safe_load(text) == ["a", "b"]

    def test_yaml_keeps_key_order(self) -> None:
        text = dump_value(ObjectValue({"z": 1, "a": 2}), Format.YAML)
        assert text.index("z:") < text.index("a:")

    def test_model(self) -> None:
        text = dump_value(Endpoint(host="localhost", port=80))
        assert json.loads(text) == {"host": "localhost", "port": 80}

    def test_list_of_models(self) -> None:
        text = dump_value([Endpoint(host="a", port=1)], Format.YAML)
        assert yaml.safe_load(text) == [{"host": "a", "port": 1}]

    def test_dict_of_models(self) -> None:
        text = dump_value({"primary": Endpoint(host="a", port=1)}, Format.YAML)
        assert yaml.safe_load(text) == {"primary": {"host": "a", "port": 1}}

    def test_plain_data(self) -> None:
        assert json.loads(dump_value({"k": [1, 2]})) == {"k": [1, 2]}

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot encode"):
            dump_value({}, Format.UNKNOWN)


class TestWriteOutput:
    """Tests for write_output."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        dest = tmp_path / "nested" / "out.json"
        write_output(dest, ObjectValue({"ok": True}))
        assert json.loads(dest.read_text()) == {"ok": True}

    def test_writes_yaml(self, tmp_path: Path) -> None:
        dest = tmp_path / "out.yaml"
        write_output(str(dest), ArrayValue([1, 2]), Format.YAML)
        assert yaml.safe_load(dest.read_text()) == [1, 2]
