"""Reader configuration.

Configuration is passed explicitly to each call; nothing is read from the
environment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FILE_PREFIX = "@"


class ReaderConfig(BaseModel):
    """Options controlling how raw input values are resolved.

    Attributes:
        file_prefix: Marker that turns a value into a file reference.
        max_bytes: Largest file accepted, in bytes (None means unlimited).
    """

    model_config = ConfigDict(frozen=True)

    file_prefix: str = Field(default=DEFAULT_FILE_PREFIX, description="File reference marker")
    max_bytes: int | None = Field(default=None, description="Maximum file size in bytes")

    @field_validator("file_prefix")
    @classmethod
    def _prefix_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("file_prefix must not be empty")
        return v

    @field_validator("max_bytes")
    @classmethod
    def _max_bytes_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_bytes must be positive")
        return v


DEFAULT_CONFIG = ReaderConfig()
