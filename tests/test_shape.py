"""Tests for shape-mismatch detection.

These run against the exact errors pydantic and PyYAML produce, so a change
in either library's error reporting shows up here first.
"""

from __future__ import annotations

from typing import Any

import pytest
import yaml
from pydantic import TypeAdapter, ValidationError

from rawdata.formats import Format
from rawdata.shape import (
    MAPPING_ERROR_TYPE,
    is_json_sequence_mismatch,
    is_mapping_vs_sequence_mismatch,
    is_yaml_sequence_mismatch,
)

OBJECT = TypeAdapter(dict[str, Any])


def json_error(data: bytes) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        OBJECT.validate_json(data)
    return exc_info.value


def yaml_error(text: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        OBJECT.validate_python(yaml.safe_load(text))
    return exc_info.value


def yaml_syntax_error(text: str) -> yaml.YAMLError:
    with pytest.raises(yaml.YAMLError) as exc_info:
        yaml.safe_load(text)
    return exc_info.value


class TestJsonMismatch:
    """Tests for the JSON predicate."""

    def test_array_document_matches(self) -> None:
        error = json_error(b"[1, 2, 3]")
        assert error.errors()[0]["type"] == MAPPING_ERROR_TYPE
        assert is_json_sequence_mismatch(error)

    def test_empty_array_matches(self) -> None:
        assert is_json_sequence_mismatch(json_error(b"[]"))

    def test_array_of_objects_matches(self) -> None:
        assert is_json_sequence_mismatch(json_error(b'[{"a": 1}, {"b": 2}]'))

    def test_truncated_object_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(json_error(b'{"a": 1'))

    def test_truncated_array_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(json_error(b"[1, 2"))

    def test_scalar_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(json_error(b'"text"'))

    def test_null_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(json_error(b"null"))

    def test_yaml_syntax_error_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(yaml_syntax_error("a: [1"))

    def test_unrelated_exception_does_not_match(self) -> None:
        assert not is_json_sequence_mismatch(ValueError("[1, 2]"))


class TestYamlMismatch:
    """Tests for the YAML predicate."""

    def test_sequence_document_matches(self) -> None:
        error = yaml_error("---\n- a\n- b\n")
        assert error.errors()[0]["msg"].endswith("valid dictionary")
        assert is_yaml_sequence_mismatch(error)

    def test_flow_sequence_matches(self) -> None:
        assert is_yaml_sequence_mismatch(yaml_error("--- [1, 2]"))

    def test_scalar_does_not_match(self) -> None:
        assert not is_yaml_sequence_mismatch(yaml_error("--- 5"))

    def test_non_string_keys_do_not_match(self) -> None:
        assert not is_yaml_sequence_mismatch(yaml_error("---\n1: one\n2: two\n"))

    def test_syntax_error_does_not_match(self) -> None:
        assert not is_yaml_sequence_mismatch(yaml_syntax_error("---\na: [1, 2"))


class TestDispatch:
    """Tests for the per-format dispatch."""

    def test_json(self) -> None:
        assert is_mapping_vs_sequence_mismatch(json_error(b"[1]"), Format.JSON)

    def test_yaml(self) -> None:
        assert is_mapping_vs_sequence_mismatch(yaml_error("- 1"), Format.YAML)

    def test_unknown_format_never_matches(self) -> None:
        assert not is_mapping_vs_sequence_mismatch(json_error(b"[1]"), Format.UNKNOWN)
