"""Output encoding for decoded values."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from rawdata.formats import Format
from rawdata.values import ArrayValue, ObjectValue


def dump_value(value: Any, fmt: Format = Format.JSON) -> str:
    """Encode a value as JSON or YAML text.

    Args:
        value: A decoded value (ObjectValue/ArrayValue), a pydantic model,
            or plain JSON/YAML-serializable data.
        fmt: Output format; Format.UNKNOWN is rejected.

    Returns:
        The encoded text, terminated by a newline.

    Raises:
        ValueError: If fmt is Format.UNKNOWN.
        yaml.representer.RepresenterError: If YAML output holds an
            unsupported object (JSON output falls back to str()).
    """
    data = _plain(value)

    if fmt is Format.JSON:
        # Trailing newline for POSIX compliance
        return json.dumps(data, indent=2, default=str) + "\n"
    if fmt is Format.YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, explicit_start=True)
    raise ValueError(f"Cannot encode to format: {fmt.value}")


def write_output(dest: str | Path, value: Any, fmt: Format = Format.JSON) -> None:
    """Write an encoded value to a file.

    Args:
        dest: Path to write to; parent directories are created.
        value: Value to encode (see dump_value).
        fmt: Output format.
    """
    dest_path = Path(dest)

    # Ensure parent directory exists
    dest_path.parent.mkdir(parents=True, exist_ok=True)

    dest_path.write_text(dump_value(value, fmt), encoding="utf-8")


def _plain(value: Any) -> Any:
    if isinstance(value, (ObjectValue, ArrayValue)):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value
