"""
Data line decoding for the three tblout record layouts.

A data line is split on runs of whitespace. The first tokens map one-to-one
onto the layout's fixed columns and are coerced according to each column's
kind; whatever tokens remain are joined by single spaces into the
description. Repeated spaces inside a description therefore collapse to one.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from typing import NamedTuple

from hmmtblout.core.exceptions import (
    InvalidStrandError,
    MalformedFieldError,
    MissingFieldsError,
    RecordError,
)
from hmmtblout.models.program import RecordSchema, Strand
from hmmtblout.models.records import (
    INT32_MAX,
    INT32_MIN,
    RECORD_TYPES,
    Column,
    ColumnKind,
    ModelRecord,
    ProfileRecord,
    SequenceRecord,
    to_float32,
)

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class DecodeResult(NamedTuple):
    """
    Outcome of decoding one data line: exactly one of record or error is set.

    Attributes:
        line_number: 1-based line number in the input
        record: Decoded record, or None on failure
        error: Decoding error, or None on success
    """

    line_number: int
    record: SequenceRecord | ProfileRecord | ModelRecord | None
    error: RecordError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SequenceRecord | ProfileRecord | ModelRecord:
        """Return the record, or raise the decoding error."""
        if self.error is not None:
            raise self.error
        assert self.record is not None
        return self.record


def _parse_int(column: Column, token: str, line_number: int | None) -> int:
    if not _INTEGER_PATTERN.fullmatch(token):
        raise MalformedFieldError(column.field, token, "a 32-bit integer", line_number)
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedFieldError(
            column.field, token, "a 32-bit integer", line_number, reason="out of range"
        )
    return value


def _parse_float(column: Column, token: str, line_number: int | None) -> float:
    expected = "a floating point number"
    if "_" in token or not token.isascii():
        raise MalformedFieldError(column.field, token, expected, line_number)
    try:
        value = float(token)
    except ValueError:
        raise MalformedFieldError(column.field, token, expected, line_number) from None
    return to_float32(value)


def _parse_strand(column: Column, token: str, line_number: int | None) -> Strand:
    try:
        return Strand.parse(token)
    except InvalidStrandError as e:
        raise MalformedFieldError(
            column.field, token, "a strand ('+' or '-')", line_number
        ) from e


def _parse_flag(column: Column, token: str, line_number: int | None) -> str:
    if len(token) != 1:
        raise MalformedFieldError(column.field, token, "a single character", line_number)
    return token


def _parse_text(column: Column, token: str, line_number: int | None) -> str:
    return token


_COERCERS: dict[ColumnKind, Callable[[Column, str, int | None], object]] = {
    ColumnKind.TEXT: _parse_text,
    ColumnKind.INT: _parse_int,
    ColumnKind.STRAND: _parse_strand,
    ColumnKind.EVALUE: _parse_float,
    ColumnKind.DECIMAL1: _parse_float,
    ColumnKind.DECIMAL2: _parse_float,
    ColumnKind.FLAG: _parse_flag,
}


def decode_line(
    schema: RecordSchema,
    line: str,
    column_widths: tuple[int, ...] = (),
    line_number: int | None = None,
) -> SequenceRecord | ProfileRecord | ModelRecord:
    """
    Decode one data line into a record of the given layout.

    Args:
        schema: Record layout of the report.
        line: The data line (not a comment).
        column_widths: Widths to store on the record for re-serialisation.
        line_number: Line number used in error messages.

    Returns:
        The decoded record.

    Raises:
        MissingFieldsError: If the line has fewer tokens than fixed columns.
        MalformedFieldError: If a token cannot be coerced to its column type.
    """
    record_type = RECORD_TYPES[schema]
    columns = record_type.COLUMNS
    tokens = line.split()

    if len(tokens) < len(columns):
        raise MissingFieldsError(len(columns), len(tokens), line_number)

    values = {
        column.field: _COERCERS[column.kind](column, token, line_number)
        for column, token in zip(columns, tokens)
    }
    values["description"] = " ".join(tokens[len(columns):])

    return record_type(**values, column_widths=column_widths)


class RecordDecoder:
    """
    Decoder bound to one record layout and one set of column widths.

    Comment lines are skipped transparently by :meth:`iter_results`.
    """

    def __init__(self, schema: RecordSchema, column_widths: tuple[int, ...] = ()) -> None:
        self.schema = schema
        self.column_widths = column_widths

        expected = len(RECORD_TYPES[schema].COLUMNS) + 1
        if column_widths and len(column_widths) != expected:
            logger.warning(
                "Header has %d columns but %s records have %d; "
                "re-serialised lines may not align",
                len(column_widths),
                schema.value,
                expected,
            )

    def decode(
        self, line: str, line_number: int | None = None
    ) -> SequenceRecord | ProfileRecord | ModelRecord:
        """Decode a single data line. See :func:`decode_line`."""
        return decode_line(self.schema, line, self.column_widths, line_number)

    def iter_results(self, lines: Iterable[str], start: int = 1) -> Iterator[DecodeResult]:
        """
        Decode every data line of an iterable of lines.

        Args:
            lines: Text lines; comment and blank lines are skipped.
            start: Line number of the first line.

        Yields:
            DecodeResult per data line, in input order.
        """
        for line_number, line in enumerate(lines, start=start):
            if line.startswith("#") or not line.strip():
                continue
            try:
                record = self.decode(line, line_number)
            except RecordError as e:
                logger.debug("Line %d failed to decode: %s", line_number, e.message)
                yield DecodeResult(line_number, None, e)
            else:
                yield DecodeResult(line_number, record, None)
