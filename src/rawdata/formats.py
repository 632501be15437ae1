"""Format tags and the rules used to detect them."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath


class Format(str, Enum):
    """Structured text formats understood by the decoder."""

    UNKNOWN = "unknown"
    JSON = "json"
    YAML = "yaml"


# Lower-case file extensions per format
EXTENSIONS: dict[str, Format] = {
    ".json": Format.JSON,
    ".yaml": Format.YAML,
    ".yml": Format.YAML,
}

YAML_DOCUMENT_MARKER = "---"
JSON_OPENERS = ("{", "[")


def format_from_path(path: str | PurePath) -> Format:
    """Detect the format of a file from its extension.

    Matching is case-insensitive. Returns Format.UNKNOWN for any
    extension other than .json, .yaml and .yml.
    """
    return EXTENSIONS.get(PurePath(path).suffix.lower(), Format.UNKNOWN)


def detect_inline_format(text: str) -> Format:
    """Detect the format of inline content from its leading characters.

    Content must already be trimmed. YAML documents are only recognised
    when they open with an explicit "---" marker; a flow-style YAML
    mapping starting with "{" is reported as JSON.
    """
    if text.startswith(YAML_DOCUMENT_MARKER):
        return Format.YAML
    if text.startswith(JSON_OPENERS):
        return Format.JSON
    return Format.UNKNOWN
