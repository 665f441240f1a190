"""Detect which of the supported encodings a file path refers to."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .constants import DELIMITED_EXTENSIONS, JSON_EXTENSION, PARQUET_EXTENSION
from .exceptions import MissingExtensionError, UnsupportedEncodingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DelimitedText:
    """CSV/TSV text split on a single delimiter character."""

    delimiter: str


@dataclass(frozen=True)
class StructuredDocument:
    """JSON document holding an array of objects."""


@dataclass(frozen=True)
class ColumnarBinary:
    """Parquet file."""


Encoding = Union[DelimitedText, StructuredDocument, ColumnarBinary]


def detect_encoding(file_path: str, delimiter: Optional[str] = None) -> Encoding:
    """
    Decide the encoding of a file from its extension.

    The delimiter is required for ``.csv``/``.tsv`` and ignored otherwise.
    Detection never touches the filesystem.

    Args:
        file_path: Path of the file to read
        delimiter: Single separator character for delimited text

    Returns:
        The detected Encoding

    Raises:
        MissingExtensionError: If the path has no extension
        UnsupportedEncodingError: If the extension is unknown, or a delimited
            extension has no usable delimiter
    """
    extension = Path(file_path).suffix
    if not extension:
        raise MissingExtensionError(file_path)

    if extension in DELIMITED_EXTENSIONS:
        if delimiter is None:
            raise UnsupportedEncodingError(file_path, extension, "Delimiter required")
        if len(delimiter) != 1:
            raise UnsupportedEncodingError(
                file_path, extension, f"Delimiter must be one character, got {delimiter!r}"
            )
        encoding = DelimitedText(delimiter)
    elif extension == JSON_EXTENSION:
        encoding = StructuredDocument()
    elif extension == PARQUET_EXTENSION:
        encoding = ColumnarBinary()
    else:
        raise UnsupportedEncodingError(file_path, extension)

    logger.debug(f"Detected {encoding} for {file_path}")
    return encoding
