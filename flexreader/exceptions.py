"""Flexreader exception hierarchy."""

from __future__ import annotations

import errno


class FileReaderError(Exception):
    """Base exception for all reader errors.

    Errors compare equal by class, plus whatever ``_identity`` adds;
    message text is never part of the comparison.
    """

    def _identity(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileReaderError):
            return NotImplemented
        return type(self) is type(other) and self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self), self._identity()))


class MissingExtensionError(FileReaderError):
    """File path has no extension to detect an encoding from."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Missing extension for file: {file_path}")


class UnsupportedEncodingError(FileReaderError):
    """Extension is not recognised, or a delimited file was given no delimiter."""

    def __init__(self, file_path: str, extension: str, reason: str = "Unknown file format") -> None:
        self.file_path = file_path
        self.extension = extension
        super().__init__(f"{reason}: {file_path}")


class ReaderIOError(FileReaderError):
    """Opening or reading the underlying file failed."""

    def __init__(self, file_path: str, error: OSError) -> None:
        self.file_path = file_path
        self.kind = io_error_kind(error)
        super().__init__(f"IO error for {file_path}: {error}")

    def _identity(self) -> tuple:
        return (self.kind,)


class StructuralError(FileReaderError):
    """File contents could not be turned into headers or records."""


class InvalidStructureError(StructuralError):
    """Well-formed document with an unexpected shape (strict mode only)."""


class DecodeError(StructuralError):
    """The underlying CSV, JSON or Parquet decoder rejected the file."""


def io_error_kind(error: OSError) -> str:
    """Classify an OS error by its errno name, falling back to its type name."""
    if error.errno is not None and error.errno in errno.errorcode:
        return errno.errorcode[error.errno]
    return type(error).__name__
