"""
Re-serialisation of tblout records, headers and metadata.

Records are written back using the column widths stored on them, so a report
read and written again keeps its original alignment. Justification is fixed
per column kind: text left, numbers right, strand centred.

When a record carries fewer widths than it has columns (the header had no
dash line), the missing widths count as zero and fields are separated by a
single space with no padding. Content wider than its column is never
truncated; it pushes the rest of the line to the right.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Self, TextIO

import numpy as np

from hmmtblout.models.meta import META_LABELS, Header, Meta
from hmmtblout.models.program import Program
from hmmtblout.models.records import (
    ColumnKind,
    ModelRecord,
    ProfileRecord,
    SequenceRecord,
)

logger = logging.getLogger(__name__)

META_LABEL_WIDTH = 17
META_TERMINATOR = "# [ok]"


def format_evalue(value: float) -> str:
    """
    Format an E-value in lower-case scientific notation.

    Uses the shortest mantissa that reads back to the same float32 value.

    Example:
        >>> format_evalue(1.2e-15)
        '1.2e-15'
    """
    return np.format_float_scientific(
        np.float32(value), unique=True, trim="-", exp_digits=2
    )


def _format_field(kind: ColumnKind, value: object, width: int) -> str:
    if kind is ColumnKind.TEXT or kind is ColumnKind.FLAG:
        return str(value).ljust(width)
    if kind is ColumnKind.INT:
        return str(value).rjust(width)
    if kind is ColumnKind.STRAND:
        return str(value).center(width)
    if kind is ColumnKind.EVALUE:
        return format_evalue(value).rjust(width)
    if kind is ColumnKind.DECIMAL1:
        return f"{value:.1f}".rjust(width)
    if kind is ColumnKind.DECIMAL2:
        return f"{value:.2f}".rjust(width)
    msg = f"Unknown column kind: {kind}"
    raise ValueError(msg)


def format_record(record: SequenceRecord | ProfileRecord | ModelRecord) -> str:
    """
    Render a record as one aligned line, without a line terminator.

    Args:
        record: Any of the three record layouts.

    Returns:
        The rendered line. An empty description is omitted entirely.
    """
    if not isinstance(record, (SequenceRecord, ProfileRecord, ModelRecord)):
        msg = f"Expected a tblout record, got {type(record).__name__}"
        raise TypeError(msg)

    widths = record.column_widths
    fields = [
        _format_field(column.kind, getattr(record, column.field), _width_at(widths, i))
        for i, column in enumerate(record.COLUMNS)
    ]
    if record.description:
        fields.append(record.description)
    return " ".join(fields)


def _width_at(widths: tuple[int, ...], index: int) -> int:
    return widths[index] if index < len(widths) else 0


def format_header(header: Header) -> str:
    """Render the header lines that are present, joined by newlines."""
    lines = [line for line in (header.banner, header.columns, header.dashes) if line is not None]
    return "\n".join(lines)


def format_meta(meta: Meta) -> str:
    """
    Render the run metadata block in the tools' own trailer layout.

    An undeclared program is left out, so the block reads back unchanged.

    Example output:
        #
        # Program:         nhmmer
        # Version:         3.3.2 (Nov 2020)
        ...
        # [ok]
    """
    lines = ["#"]
    for field, label in META_LABELS.items():
        value = getattr(meta, field)
        if value is Program.UNKNOWN:
            continue
        text = str(value)
        lines.append(f"# {(label + ':').ljust(META_LABEL_WIDTH)}{text}".rstrip())
    lines.append(META_TERMINATOR)
    return "\n".join(lines)


class TbloutWriter:
    """
    Writer for tblout reports.

    The tools write the header first, then the data lines, then the metadata
    block; writing in that order produces a file TbloutReader reads back
    unchanged.

    Examples:
        >>> with TbloutWriter.to_path("out.tbl") as writer:
        ...     writer.write_header(reader.header)
        ...     writer.write_records(reader.records())
        ...     writer.write_meta(reader.meta)
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink: TextIO | None = sink

    @classmethod
    def to_path(cls, path: Path | str) -> Self:
        """Open a file for writing; '.gz' paths are gzip-compressed."""
        path = Path(path)
        if path.suffix == ".gz":
            return cls(gzip.open(path, "wt", encoding="utf-8"))
        return cls(path.open("w", encoding="utf-8"))

    @property
    def sink(self) -> TextIO:
        if self._sink is None:
            msg = "Writer has been detached from its sink"
            raise ValueError(msg)
        return self._sink

    def write_meta(self, meta: Meta) -> None:
        """Write the metadata block."""
        self.sink.write(format_meta(meta) + "\n")

    def write_header(self, header: Header) -> None:
        """Write the header lines; nothing is written for an empty header."""
        text = format_header(header)
        if text:
            self.sink.write(text + "\n")

    def write_record(self, record: SequenceRecord | ProfileRecord | ModelRecord) -> None:
        """Write one record as an aligned line."""
        self.sink.write(format_record(record) + "\n")

    def write_records(
        self, records: Iterable[SequenceRecord | ProfileRecord | ModelRecord]
    ) -> int:
        """
        Write every record of an iterable.

        Returns:
            Number of records written.
        """
        count = 0
        for record in records:
            self.write_record(record)
            count += 1
        logger.debug("Wrote %d records", count)
        return count

    def flush(self) -> None:
        self.sink.flush()

    def into_inner(self) -> TextIO:
        """Flush and return the underlying sink; the writer can no longer be used."""
        sink = self.sink
        sink.flush()
        self._sink = None
        return sink

    def close(self) -> None:
        if self._sink is not None:
            self._sink.close()
            self._sink = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
