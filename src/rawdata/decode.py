"""Adaptive decoding of JSON and YAML content.

Two modes:
    bind      decode_into / decode_as: the destination's type drives the parse
    discover  decode_generic: try an object, fall back to an array only when
              the object attempt failed because the document is a sequence

Discover mode state machine:
    object attempt -> ok: ObjectValue
                   -> shape mismatch: array attempt -> ok: ArrayValue
                                                    -> error: DecodeError(stage="array")
                   -> other error: DecodeError(stage="object")
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from rawdata.config import ReaderConfig
from rawdata.content import RawContent, read_content
from rawdata.errors import DecodeError
from rawdata.formats import Format
from rawdata.shape import is_mapping_vs_sequence_mismatch
from rawdata.values import ArrayValue, DecodedValue, ObjectValue

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Errors raised by the parsers; anything else propagates unchanged
PARSE_ERRORS = (ValidationError, yaml.YAMLError)

_OBJECT_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])
_ARRAY_ADAPTER: TypeAdapter[list[Any]] = TypeAdapter(list[Any])

# Scalar mapping keys YAML 1.1 resolves to something other than a string
SCALAR_KEY_TYPES = (bool, int, float, date, type(None))


def decode_generic(value: str, config: ReaderConfig | None = None) -> DecodedValue:
    """Decode a value into an object or an array, whichever the document is.

    Args:
        value: A file reference (e.g. "@data.yaml") or inline JSON/YAML.
        config: Reader options (defaults apply when None).

    Returns:
        ObjectValue for a top-level mapping, ArrayValue for a top-level sequence.

    Raises:
        RawDataError: Any resolution error from read_content.
        DecodeError: If the document cannot be decoded as either shape.
    """
    return decode_content(read_content(value, config))


# Name kept for callers used to the unmarshal/unmarshal-into pairing
unmarshal = decode_generic


def decode_content(content: RawContent) -> DecodedValue:
    """Run the object-then-array decode on already resolved content."""
    fmt = content.format

    try:
        document = _load(content)
        data = _decode_object(fmt, document)
    except PARSE_ERRORS as e:
        if not is_mapping_vs_sequence_mismatch(e, fmt):
            raise DecodeError(
                f"Error decoding {_label(fmt)} object: {e}", format=fmt, stage="object"
            ) from e
        logger.debug(f"{_label(fmt)} document is a sequence, retrying as array")
    else:
        logger.debug(f"Decoded {_label(fmt)} object with {len(data)} keys")
        return ObjectValue(data)

    try:
        items = _decode_array(fmt, document)
    except PARSE_ERRORS as e:
        raise DecodeError(
            f"Error decoding {_label(fmt)} array: {e}", format=fmt, stage="array"
        ) from e

    logger.debug(f"Decoded {_label(fmt)} array with {len(items)} items")
    return ArrayValue(items)


def decode_into(value: str, target: Any, config: ReaderConfig | None = None) -> None:
    """Decode a value in place into a caller-owned destination.

    Supported destinations:
        BaseModel instance   validated with its own model class, then its
                             field values are replaced
        dataclass instance   validated with its own class, then each field
                             is replaced (frozen dataclasses included)
        dict                 cleared and updated with the decoded mapping
        list                 cleared and extended with the decoded sequence

    The destination is only modified once decoding has fully succeeded.

    Raises:
        TypeError: If the destination type is not supported.
        RawDataError: Any resolution error from read_content.
        DecodeError: If the document does not fit the destination.
    """
    if not (isinstance(target, (BaseModel, dict, list)) or _is_dataclass_instance(target)):
        raise TypeError(
            f"Unsupported destination type {type(target).__name__}; "
            "expected a pydantic model or dataclass instance, dict or list"
        )

    content = read_content(value, config)

    if isinstance(target, BaseModel):
        bound = bind_content(content, TypeAdapter(type(target)))
        _replace_fields(target, bound)
    elif _is_dataclass_instance(target):
        bound = bind_content(content, TypeAdapter(type(target)))
        for field in dataclasses.fields(target):
            object.__setattr__(target, field.name, getattr(bound, field.name))
    elif isinstance(target, dict):
        mapping = bind_content(content, _OBJECT_ADAPTER)
        target.clear()
        target.update(mapping)
    else:
        items = bind_content(content, _ARRAY_ADAPTER)
        target[:] = items


def decode_as(value: str, type_: type[T], config: ReaderConfig | None = None) -> T:
    """Decode a value into a new instance of any pydantic-compatible type.

    Args:
        value: A file reference or inline JSON/YAML.
        type_: Target type, e.g. a model class, a dataclass or list[Model].
        config: Reader options (defaults apply when None).

    Returns:
        The validated value.
    """
    return bind_content(read_content(value, config), TypeAdapter(type_))


def bind_content(content: RawContent, adapter: TypeAdapter[T]) -> T:
    """Parse content with its format's parser and validate it with adapter.

    Raises:
        DecodeError: With stage "bind" when parsing or validation fails.
    """
    fmt = content.format
    try:
        if fmt is Format.JSON:
            return adapter.validate_json(content.data)
        return adapter.validate_python(yaml.safe_load(content.data))
    except PARSE_ERRORS as e:
        raise DecodeError(f"Error decoding {_label(fmt)}: {e}", format=fmt, stage="bind") from e


def _load(content: RawContent) -> Any:
    """Return what the adapters validate: raw bytes for JSON, the loaded document for YAML."""
    if content.format is Format.JSON:
        return content.data
    return yaml.safe_load(content.data)


def _decode_object(fmt: Format, document: Any) -> dict[str, Any]:
    if fmt is Format.JSON:
        return _OBJECT_ADAPTER.validate_json(document)
    # An empty YAML document is an empty mapping
    if document is None:
        return {}
    return _OBJECT_ADAPTER.validate_python(_stringify_keys(document))


def _decode_array(fmt: Format, document: Any) -> list[Any]:
    if fmt is Format.JSON:
        return _ARRAY_ADAPTER.validate_json(document)
    return _ARRAY_ADAPTER.validate_python(document)


def _stringify_keys(document: Any) -> Any:
    """Turn top-level scalar keys such as 200, on or null into strings.

    Other keys are left alone so validation still rejects them.
    """
    if not isinstance(document, dict):
        return document
    return {
        (_scalar_key(key) if isinstance(key, SCALAR_KEY_TYPES) else key): value
        for key, value in document.items()
    }


def _scalar_key(key: Any) -> str:
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, date):
        return key.isoformat()
    return str(key)


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _replace_fields(target: BaseModel, source: BaseModel) -> None:
    """Copy validated state from source onto target, bypassing frozen checks."""
    target.__dict__.update(source.__dict__)
    object.__setattr__(target, "__pydantic_fields_set__", set(source.model_fields_set))
    if source.__pydantic_extra__ is not None:
        object.__setattr__(target, "__pydantic_extra__", dict(source.__pydantic_extra__))


def _label(fmt: Format) -> str:
    return fmt.value.upper()
