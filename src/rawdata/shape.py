"""Shape-mismatch detection for the discover-mode retry.

The decoder first validates a document against dict[str, Any]. When the
document turns out to be a sequence, pydantic reports a type error at the
document root; that error, and only that error, means "retry as an array".
Syntax errors and any other validation failure must not trigger a retry.

JSON content is parsed and validated in a single pydantic-core pass, so the
mismatch is matched on its structured error code. YAML content is loaded by
PyYAML first and validated afterwards; its report is matched on the message
text of each entry.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from rawdata.formats import Format

# pydantic-core error type for "expected a mapping"
MAPPING_ERROR_TYPE = "dict_type"
# Trailing text of the same error's message ("Input should be a valid dictionary")
MAPPING_ERROR_SUFFIX = "valid dictionary"


def is_mapping_vs_sequence_mismatch(error: BaseException, fmt: Format) -> bool:
    """Check if a failed object decode means the document is a sequence.

    Args:
        error: The exception raised by the object-shaped attempt.
        fmt: Format of the content that was decoded.

    Returns:
        True if the array-shaped attempt should be made.
    """
    if fmt is Format.JSON:
        return is_json_sequence_mismatch(error)
    if fmt is Format.YAML:
        return is_yaml_sequence_mismatch(error)
    return False


def is_json_sequence_mismatch(error: BaseException) -> bool:
    """Match a single root-level dict_type error whose input is a list."""
    if not isinstance(error, ValidationError):
        return False

    details = error.errors(include_url=False)
    if len(details) != 1:
        return False

    detail = details[0]
    return (
        detail["type"] == MAPPING_ERROR_TYPE
        and _is_root(detail)
        and isinstance(detail.get("input"), list)
    )


def is_yaml_sequence_mismatch(error: BaseException) -> bool:
    """Match any root-level "valid dictionary" report entry for a list input."""
    if not isinstance(error, ValidationError):
        return False

    for detail in error.errors(include_url=False):
        if (
            detail["msg"].endswith(MAPPING_ERROR_SUFFIX)
            and _is_root(detail)
            and isinstance(detail.get("input"), list)
        ):
            return True
    return False


def _is_root(detail: Any) -> bool:
    return len(detail["loc"]) == 0
