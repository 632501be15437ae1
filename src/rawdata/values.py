"""Decoded value variants.

A document decoded in discover mode is exactly one of:
    ObjectValue   top-level mapping of string keys
    ArrayValue    top-level sequence

The shape is fixed by the document, not chosen by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rawdata.errors import UnexpectedShapeError


class Shape(str, Enum):
    """Top-level shape of a decoded document."""

    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class ObjectValue:
    """A decoded document whose top level is a mapping."""

    data: dict[str, Any] = field(default_factory=dict)

    @property
    def shape(self) -> Shape:
        return Shape.OBJECT

    @property
    def value(self) -> dict[str, Any]:
        return self.data

    def as_object(self) -> dict[str, Any]:
        """Return the mapping."""
        return self.data

    def as_array(self) -> list[Any]:
        """Always fails: an object is not an array.

        Raises:
            UnexpectedShapeError: Always.
        """
        raise _unexpected(Shape.ARRAY, self.shape)


@dataclass(frozen=True)
class ArrayValue:
    """A decoded document whose top level is a sequence."""

    items: list[Any] = field(default_factory=list)

    @property
    def shape(self) -> Shape:
        return Shape.ARRAY

    @property
    def value(self) -> list[Any]:
        return self.items

    def as_object(self) -> dict[str, Any]:
        """Always fails: an array is not an object.

        Raises:
            UnexpectedShapeError: Always.
        """
        raise _unexpected(Shape.OBJECT, self.shape)

    def as_array(self) -> list[Any]:
        """Return the sequence."""
        return self.items


DecodedValue = ObjectValue | ArrayValue


def _unexpected(expected: Shape, actual: Shape) -> UnexpectedShapeError:
    return UnexpectedShapeError(
        f"Expected {expected.value}-shaped document, got {actual.value}",
        expected=expected.value,
        actual=actual.value,
    )
