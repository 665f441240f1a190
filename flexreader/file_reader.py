import csv
import io
import json
import os
import re
import logging
from typing import Any, Iterator, List, Optional, Union

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .constants import TEXT_ENCODING
from .encoding import (
    DelimitedText,
    Encoding,
    StructuredDocument,
    detect_encoding,
)
from .exceptions import DecodeError, ReaderIOError
from .flatten import collect_headers, flatten_records, render_value
from .records import RecordIterator

# Configure logging
logger = logging.getLogger(__name__)

_JSON_WHITESPACE = re.compile(r'[ \t\n\r]*')


def iter_json_documents(text: str) -> Iterator[Any]:
    """
    Decode consecutive top-level JSON values from a string.

    A file normally holds one document, but concatenated documents
    (``[...] [...]``) are read one after the other.

    Raises:
        json.JSONDecodeError: If any document is malformed
    """
    decoder = json.JSONDecoder()
    end = len(text)
    pos = _JSON_WHITESPACE.match(text, 0).end()
    while pos < end:
        document, pos = decoder.raw_decode(text, pos)
        yield document
        pos = _JSON_WHITESPACE.match(text, pos).end()


class FileReader:
    """
    Reads headers and records from a CSV/TSV, JSON or Parquet file.

    The file is opened at construction and held until ``close()``. Every call
    to ``headers()`` or ``records()`` re-reads the file from the start, so the
    two can be called any number of times in any order.

    Examples:
        >>> reader = FileReader("people.csv", ",")
        >>> reader.headers()
        ['Name', 'Age', 'Country']
        >>> list(reader.records())
        [['John', '30', 'USA'], ['Alice', '25', 'UK'], ['Bob', '40', 'Canada']]
    """

    def __init__(self, file_path: Union[str, os.PathLike], delimiter: Optional[str] = None, strict: bool = False):
        """
        Args:
            file_path: Path of a ``.csv``, ``.tsv``, ``.json`` or ``.parquet`` file
            delimiter: Separator character, required for ``.csv``/``.tsv``
            strict: Raise InvalidStructureError for JSON of an unexpected
                shape instead of skipping it

        Raises:
            MissingExtensionError: If the path has no extension
            UnsupportedEncodingError: If the extension is not supported
            ReaderIOError: If the file cannot be opened
        """
        self.file_path = os.fspath(file_path)
        self.encoding: Encoding = detect_encoding(self.file_path, delimiter)
        self.strict = strict
        try:
            self._file = open(self.file_path, 'rb')
        except OSError as e:
            raise ReaderIOError(self.file_path, e) from e

    def __enter__(self) -> "FileReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        self._file.close()

    def headers(self) -> List[str]:
        """
        Return the column names of the file.

        Raises:
            ReaderIOError: If reading the file fails
            DecodeError: If the underlying decoder rejects the file
            InvalidStructureError: In strict mode, for JSON of an unexpected shape
        """
        if isinstance(self.encoding, DelimitedText):
            headers = self._read_delimited_headers(self.encoding.delimiter)
        elif isinstance(self.encoding, StructuredDocument):
            headers = collect_headers(self._read_json_documents(), strict=self.strict)
        else:
            headers = self._read_parquet_headers()

        logger.debug(f"Read {len(headers)} headers from {self.file_path}")
        return headers

    def records(self) -> RecordIterator:
        """
        Return an iterator over the records of the file, each a list of strings.

        Raises:
            ReaderIOError: If reading the file fails
            DecodeError: If the underlying decoder rejects the file
            InvalidStructureError: In strict mode, for JSON of an unexpected shape
        """
        if isinstance(self.encoding, DelimitedText):
            rows = self._read_delimited_records(self.encoding.delimiter)
        elif isinstance(self.encoding, StructuredDocument):
            rows = flatten_records(self._read_json_documents(), strict=self.strict)
        else:
            rows = self._read_parquet_records()

        logger.info(f"Read {len(rows)} records from {self.file_path}")
        return RecordIterator(self.encoding, rows)

    def _rewind(self) -> None:
        try:
            self._file.seek(0)
        except OSError as e:
            raise ReaderIOError(self.file_path, e) from e

    def _read_delimited_frame(self, delimiter: str, **kwargs) -> pd.DataFrame:
        """
        Parse the file with pandas, every field kept as the exact source string.

        The header row is read as an ordinary row (``header=None``) so that
        its width decides which data rows are well formed. The python engine
        leaves the cells missing from a short row empty (NA) instead of
        filling them with ``""``, so short rows stay distinguishable from
        rows with genuinely empty fields.
        """
        content = self._read_all()
        try:
            return pd.read_csv(
                io.BytesIO(content),
                sep=delimiter,
                header=None,
                engine='python',
                dtype=object,
                keep_default_na=False,
                **kwargs
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except (pd.errors.ParserError, csv.Error, UnicodeDecodeError) as e:
            raise DecodeError(f"Error parsing delimited file {self.file_path}: {str(e)}") from e

    def _read_delimited_headers(self, delimiter: str) -> List[str]:
        df = self._read_delimited_frame(delimiter, nrows=1)
        if df.empty:
            return []
        return list(df.iloc[0])

    def _read_delimited_records(self, delimiter: str) -> List[List[str]]:
        # Rows wider than the header row are skipped by the parser
        df = self._read_delimited_frame(delimiter, on_bad_lines='skip')
        if df.empty:
            return []

        # First row is the header
        data = df.iloc[1:]
        short_rows = data.isna().any(axis=1)
        if short_rows.any():
            logger.warning(
                f"Skipped {int(short_rows.sum())} rows narrower than the header row in {self.file_path}"
            )

        return [list(row) for row in data[~short_rows].itertuples(index=False, name=None)]

    def _read_all(self) -> bytes:
        self._rewind()
        try:
            return self._file.read()
        except OSError as e:
            raise ReaderIOError(self.file_path, e) from e

    def _read_json_documents(self) -> List[Any]:
        content = self._read_all()
        try:
            return list(iter_json_documents(content.decode(TEXT_ENCODING)))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Error parsing JSON file {self.file_path}: {str(e)}") from e

    def _open_parquet(self) -> pq.ParquetFile:
        # Parse from an in-memory copy of the file
        content = self._read_all()
        try:
            return pq.ParquetFile(pa.BufferReader(content))
        except pa.ArrowException as e:
            raise DecodeError(f"Error reading Parquet file {self.file_path}: {str(e)}") from e

    def _read_parquet_headers(self) -> List[str]:
        return list(self._open_parquet().schema.names)

    def _read_parquet_records(self) -> List[List[str]]:
        parquet_file = self._open_parquet()
        if parquet_file.num_row_groups == 0:
            return []

        try:
            table = parquet_file.read_row_group(0)
        except pa.ArrowException as e:
            raise DecodeError(f"Error decoding Parquet row group in {self.file_path}: {str(e)}") from e

        columns = [column.to_pylist() for column in table.columns]
        rows = [[render_value(value) for value in row] for row in zip(*columns)]
        return [row for row in rows if row]


def open_reader(file_path: Union[str, os.PathLike], delimiter: Optional[str] = None, strict: bool = False) -> FileReader:
    """Open a file for reading; see ``FileReader``."""
    return FileReader(file_path, delimiter, strict=strict)
