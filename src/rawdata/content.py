"""Content resolution: file reference vs. inline data, and format detection.

Input values come in two forms:
    @path/to/file.yaml    file reference, format taken from the extension
    {"inline": "json"}    inline content, format taken from the leading characters

Inline YAML must open with a "---" document marker; inline JSON must open
with "{" or "[".
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rawdata.config import DEFAULT_CONFIG, ReaderConfig
from rawdata.errors import (
    ContentSizeError,
    InvalidInputError,
    NotFoundError,
    ReadError,
    UnrecognizedInputError,
    UnsupportedFormatError,
)
from rawdata.formats import Format, detect_inline_format, format_from_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawContent:
    """Loaded, unparsed content with its detected format.

    Attributes:
        format: Detected format; never Format.UNKNOWN.
        data: The raw bytes to parse.
        source: Path of the referenced file, or None for inline content.
    """

    format: Format
    data: bytes
    source: str | None = None

    def __post_init__(self) -> None:
        if self.format is Format.UNKNOWN:
            raise ValueError("RawContent requires a known format")

    @property
    def is_file(self) -> bool:
        """Check if the content was loaded from a file."""
        return self.source is not None


def read_content(value: str, config: ReaderConfig | None = None) -> RawContent:
    """Resolve a raw input value into classified bytes.

    Args:
        value: Either a file reference (prefixed with config.file_prefix)
            or inline JSON/YAML content.
        config: Reader options (defaults apply when None).

    Returns:
        RawContent holding the detected format and the bytes to parse.

    Raises:
        NotFoundError: If the referenced file does not exist.
        InvalidInputError: If the referenced path is a directory.
        ContentSizeError: If the file exceeds config.max_bytes.
        ReadError: If the file cannot be read.
        UnsupportedFormatError: If the file extension is not recognised.
        UnrecognizedInputError: If inline content is neither JSON nor YAML.
    """
    config = config or DEFAULT_CONFIG

    if value.startswith(config.file_prefix):
        return _read_file(value[len(config.file_prefix):], config)
    return _read_inline(value)


def _read_file(filename: str, config: ReaderConfig) -> RawContent:
    """Load a referenced file and detect its format from the extension."""
    path = Path(filename)

    try:
        info = path.stat()
    except FileNotFoundError as e:
        raise NotFoundError(f"File '{filename}' does not exist", path=filename) from e
    except OSError as e:
        raise ReadError(f"Error accessing file '{filename}': {e}", path=filename) from e

    if path.is_dir():
        raise InvalidInputError(f"'{filename}' is a directory, not a file", path=filename)

    if config.max_bytes is not None and info.st_size > config.max_bytes:
        raise ContentSizeError(
            f"File '{filename}' is too large",
            path=filename,
            size_bytes=info.st_size,
            max_bytes=config.max_bytes,
        )

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(f"Error reading file '{filename}': {e}", path=filename) from e

    fmt = format_from_path(path)
    if fmt is Format.UNKNOWN:
        extension = path.suffix
        raise UnsupportedFormatError(
            f"Unsupported data format in file: {extension or '(no extension)'}",
            path=filename,
            extension=extension,
        )

    logger.debug(f"Loaded {len(data)} bytes of {fmt.value} from '{filename}'")
    return RawContent(format=fmt, data=data, source=os.fspath(path))


def _read_inline(value: str) -> RawContent:
    """Classify inline content from its leading characters."""
    text = value.strip()

    fmt = detect_inline_format(text)
    if fmt is Format.UNKNOWN:
        raise UnrecognizedInputError("Unrecognisable input format in inline data", value=text)

    logger.debug(f"Detected inline {fmt.value} content ({len(text)} chars)")
    return RawContent(format=fmt, data=text.encode("utf-8"))
