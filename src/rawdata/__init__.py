"""rawdata: decode inline or @file JSON/YAML values of unknown shape."""

__version__ = "0.1.0"

from rawdata.config import ReaderConfig
from rawdata.content import RawContent, read_content
from rawdata.decode import (
    bind_content,
    decode_as,
    decode_content,
    decode_generic,
    decode_into,
    unmarshal,
)
from rawdata.errors import (
    ContentSizeError,
    DecodeError,
    InvalidInputError,
    NotFoundError,
    RawDataError,
    ReadError,
    UnexpectedShapeError,
    UnrecognizedInputError,
    UnsupportedFormatError,
)
from rawdata.formats import Format, detect_inline_format, format_from_path
from rawdata.io import dump_value, write_output
from rawdata.shape import is_mapping_vs_sequence_mismatch
from rawdata.values import ArrayValue, DecodedValue, ObjectValue, Shape

__all__ = [
    # Resolution
    "Format",
    "RawContent",
    "ReaderConfig",
    "detect_inline_format",
    "format_from_path",
    "read_content",
    # Decoding
    "ArrayValue",
    "DecodedValue",
    "ObjectValue",
    "Shape",
    "bind_content",
    "decode_as",
    "decode_content",
    "decode_generic",
    "decode_into",
    "is_mapping_vs_sequence_mismatch",
    "unmarshal",
    # Encoding
    "dump_value",
    "write_output",
    # Errors
    "ContentSizeError",
    "DecodeError",
    "InvalidInputError",
    "NotFoundError",
    "RawDataError",
    "ReadError",
    "UnexpectedShapeError",
    "UnrecognizedInputError",
    "UnsupportedFormatError",
]
