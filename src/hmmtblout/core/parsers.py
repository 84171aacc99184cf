"""
Streaming reader for HMMER and Infernal tabular (--tblout) reports.

A report is read in three independent passes over the same source: one for
the header, one for the run metadata, and one for the data lines. The first
two run eagerly when the reader is built; the third is lazy and forward-only,
decoding one data line each time the caller asks for the next record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Self, TextIO

from hmmtblout.core.decoder import DecodeResult, RecordDecoder
from hmmtblout.core.scanners import HeaderScanner, MetaScanner
from hmmtblout.core.sources import PathSource, TextBufferSource, TextSource, as_source
from hmmtblout.models.config import ReaderConfig
from hmmtblout.models.meta import Header, Meta
from hmmtblout.models.program import Program, RecordSchema
from hmmtblout.models.records import ModelRecord, ProfileRecord, SequenceRecord

logger = logging.getLogger(__name__)


class TbloutReader:
    """
    Reader over the records of a tblout report.

    The record layout is chosen once from the program named in the
    metadata; a report holds a single layout throughout.

    Examples:
        >>> with TbloutReader.from_path("hits.tbl") as reader:
        ...     print(reader.meta.program, reader.column_widths)
        ...     for record in reader:
        ...         print(record.target_name, record.e_value)
    """

    def __init__(
        self,
        source: TextSource,
        config: ReaderConfig | None = None,
    ) -> None:
        """
        Scan the header and metadata of a source.

        Args:
            source: Source that can be opened once per pass.
            config: Scanner and error-handling settings (defaults if None).

        Raises:
            UnsupportedProgramError: If the metadata names an unknown program.
            OSError: If the source cannot be read.
        """
        self.source = source
        self.config = config or ReaderConfig()

        with source.open() as stream:
            self._header = HeaderScanner(self.config.header_miss_tolerance).scan(stream)

        with source.open() as stream:
            self._meta = MetaScanner(
                skip_lines=self.config.meta_skip_lines,
                bounded=self.config.bounded_meta_scan,
            ).scan(stream)

        self._column_widths = self._header.column_widths
        self._stream: TextIO | None = None
        self._closed = False
        self._line_number = 0

        logger.debug(
            "Read header of %s: program=%s, %d columns",
            source,
            self._meta.program.value,
            len(self._column_widths),
        )

    @classmethod
    def from_path(cls, path: Path | str, config: ReaderConfig | None = None) -> Self:
        """Open a report by path; the file is reopened for each pass."""
        path = Path(path)
        if not path.exists():
            msg = f"Tblout file not found: {path}"
            raise FileNotFoundError(msg)
        return cls(PathSource(path), config)

    @classmethod
    def from_source(
        cls, source: TextSource | Path | str, config: ReaderConfig | None = None
    ) -> Self:
        """
        Open a report from any source that can reopen itself from the start.

        Paths and strings are opened as files; use from_text for in-memory text.
        """
        return cls(as_source(source), config)

    @classmethod
    def from_text(cls, text: str | bytes, config: ReaderConfig | None = None) -> Self:
        """Open a report held in memory."""
        return cls(TextBufferSource(text), config)

    @property
    def meta(self) -> Meta:
        """Run metadata from the metadata pass."""
        return self._meta

    @property
    def header(self) -> Header:
        """Header lines from the header pass."""
        return self._header

    @property
    def column_widths(self) -> tuple[int, ...]:
        """Column widths derived from the header's dash line."""
        return self._column_widths

    @property
    def program(self) -> Program:
        return self._meta.program

    @property
    def schema(self) -> RecordSchema:
        """
        Record layout of this report.

        Raises:
            UnknownProgramError: If the metadata never declared a program.
        """
        return self._meta.program.schema

    def iter_results(self) -> Iterator[DecodeResult]:
        """
        Iterate over decode results, one per data line.

        A malformed line yields a result carrying its error and iteration
        carries on with the next line. Calling this again continues from
        where the previous iterator stopped.

        Returns:
            Iterator of DecodeResult in input order.

        Raises:
            UnknownProgramError: Immediately, if no program was declared.
        """
        decoder = RecordDecoder(self.schema, self._column_widths)
        return self._iter_results(decoder)

    def _iter_results(self, decoder: RecordDecoder) -> Iterator[DecodeResult]:
        for line in self._data_lines():
            yield from decoder.iter_results((line,), start=self._line_number)

    def _data_lines(self) -> Iterator[str]:
        if self._closed:
            msg = "I/O operation on a closed TbloutReader"
            raise ValueError(msg)
        if self._stream is None:
            self._stream = self.source.open()
        while True:
            line = self._stream.readline()
            if not line:
                return
            self._line_number += 1
            yield line

    def records(self) -> Iterator[SequenceRecord | ProfileRecord | ModelRecord]:
        """
        Iterate over decoded records.

        With ``on_error="raise"`` (the default) the first malformed line
        raises its RecordError; with ``on_error="skip"`` it is logged and
        skipped.

        Raises:
            UnknownProgramError: Immediately, if no program was declared.
        """
        results = self.iter_results()
        return self._records(results)

    def _records(
        self, results: Iterator[DecodeResult]
    ) -> Iterator[SequenceRecord | ProfileRecord | ModelRecord]:
        skipped = 0
        for result in results:
            if result.error is None:
                yield result.record
            elif self.config.on_error == "skip":
                skipped += 1
                logger.warning("Skipping line %d: %s", result.line_number, result.error.message)
            else:
                raise result.error
        if skipped:
            logger.info("Skipped %d malformed lines", skipped)

    def __iter__(self) -> Iterator[SequenceRecord | ProfileRecord | ModelRecord]:
        return self.records()

    def close(self) -> None:
        """Close the data stream, if one is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        self._closed = True

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TbloutReader({self.source!r}, program={self._meta.program.value})"
