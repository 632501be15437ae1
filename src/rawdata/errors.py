"""Typed exceptions for rawdata.

All errors raised by the resolver and decoder inherit from RawDataError.
Each carries structured context (path, format, stage) for logging and
debugging without re-running the call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rawdata.formats import Format


class RawDataError(Exception):
    """Base exception for all rawdata errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class NotFoundError(RawDataError, FileNotFoundError):
    """Referenced file does not exist."""

    def __init__(self, message: str, *, path: str):
        super().__init__(message, context={"path": path})
        self.path = path


class InvalidInputError(RawDataError, ValueError):
    """Referenced path is not a regular file."""

    def __init__(self, message: str, *, path: str):
        super().__init__(message, context={"path": path})
        self.path = path


class ReadError(RawDataError, OSError):
    """Referenced file exists but could not be read."""

    def __init__(self, message: str, *, path: str):
        super().__init__(message, context={"path": path})
        self.path = path


class ContentSizeError(ReadError):
    """Referenced file exceeds the configured size limit."""

    def __init__(self, message: str, *, path: str, size_bytes: int, max_bytes: int):
        super().__init__(message, path=path)
        self.context["size_bytes"] = size_bytes
        self.context["max_bytes"] = max_bytes
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class UnsupportedFormatError(RawDataError):
    """File extension does not map to a supported format."""

    def __init__(self, message: str, *, path: str, extension: str):
        super().__init__(message, context={"path": path, "extension": extension})
        self.path = path
        self.extension = extension


class UnrecognizedInputError(RawDataError, ValueError):
    """Inline content matches neither the JSON nor the YAML heuristic."""

    def __init__(self, message: str, *, value: str | None = None):
        context: dict[str, Any] = {}
        if value is not None:
            # Truncate long values for readability
            context["value"] = value[:40] + "..." if len(value) > 40 else value
        super().__init__(message, context=context)
        self.value = value


class DecodeError(RawDataError):
    """The underlying parser rejected the content.

    Attributes:
        format: The detected format of the content.
        stage: Which attempt failed: "object" or "array" in discover mode,
            "bind" when decoding into a typed destination.
    """

    def __init__(self, message: str, *, format: Format, stage: str):
        super().__init__(message, context={"format": format.value, "stage": stage})
        self.format = format
        self.stage = stage


class UnexpectedShapeError(RawDataError):
    """A decoded value does not have the shape the caller asked for."""

    def __init__(self, message: str, *, expected: str, actual: str):
        super().__init__(message, context={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
