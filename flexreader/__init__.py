"""Uniform headers and string records over CSV/TSV, JSON and Parquet files."""

from .encoding import (
    ColumnarBinary,
    DelimitedText,
    Encoding,
    StructuredDocument,
    detect_encoding,
)
from .exceptions import (
    DecodeError,
    FileReaderError,
    InvalidStructureError,
    MissingExtensionError,
    ReaderIOError,
    StructuralError,
    UnsupportedEncodingError,
)
from .file_reader import FileReader, open_reader
from .records import RecordIterator

__all__ = [
    "ColumnarBinary",
    "DecodeError",
    "DelimitedText",
    "Encoding",
    "FileReader",
    "FileReaderError",
    "InvalidStructureError",
    "MissingExtensionError",
    "ReaderIOError",
    "RecordIterator",
    "StructuralError",
    "StructuredDocument",
    "UnsupportedEncodingError",
    "detect_encoding",
    "open_reader",
]
