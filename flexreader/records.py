"""Single record iterator shared by every encoding."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .encoding import Encoding


class RecordIterator:
    """
    Finite, single-pass sequence of records.

    ``encoding`` records which Encoding produced the rows. It is an
    informational tag only: every encoding hands over its rows already
    materialized, so iteration itself never dispatches on it. Once exhausted
    the iterator stays exhausted; call ``FileReader.records()`` again for a
    fresh pass.
    """

    def __init__(self, encoding: Encoding, rows: Iterable[List[str]]) -> None:
        self.encoding = encoding
        self._rows: Iterator[List[str]] = iter(rows)

    def __iter__(self) -> RecordIterator:
        return self

    def __next__(self) -> List[str]:
        return next(self._rows)

    def __repr__(self) -> str:
        return f"RecordIterator(encoding={self.encoding!r})"
