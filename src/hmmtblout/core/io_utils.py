"""
I/O utilities for tabular export of tblout records.

Converts decoded records into typed Polars DataFrames and provides
consistent handling of output formats (CSV/TSV/Parquet).
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Literal

import polars as pl

from hmmtblout.models.program import RecordSchema
from hmmtblout.models.records import (
    RECORD_TYPES,
    ColumnKind,
    ModelRecord,
    ProfileRecord,
    SequenceRecord,
)

OutputFormat = Literal["csv", "tsv", "parquet"]

POLARS_TYPES: dict[ColumnKind, pl.DataType] = {
    ColumnKind.TEXT: pl.Utf8,
    ColumnKind.INT: pl.Int32,
    ColumnKind.STRAND: pl.Utf8,
    ColumnKind.EVALUE: pl.Float32,
    ColumnKind.DECIMAL1: pl.Float32,
    ColumnKind.DECIMAL2: pl.Float32,
    ColumnKind.FLAG: pl.Utf8,
}


def dataframe_schema(schema: RecordSchema) -> dict[str, pl.DataType]:
    """
    Polars schema for a record layout, in file column order.

    Args:
        schema: Record layout.

    Returns:
        Mapping of column name to Polars dtype, description last.
    """
    columns = RECORD_TYPES[schema].COLUMNS
    types = {column.field: POLARS_TYPES[column.kind] for column in columns}
    types["description"] = pl.Utf8
    return types


def records_to_dataframe(
    records: Iterable[SequenceRecord | ProfileRecord | ModelRecord],
    schema: RecordSchema,
) -> pl.DataFrame:
    """
    Collect records of one layout into a typed DataFrame.

    Strand values become their '+'/'-' glyphs. Column widths are not exported.

    Args:
        records: Records, all of the given layout.
        schema: Record layout of the records.

    Returns:
        DataFrame with one row per record.

    Raises:
        TypeError: If a record does not match the layout.

    Example:
        >>> with TbloutReader.from_path(Path("hits.tbl")) as reader:
        ...     df = records_to_dataframe(reader.records(), reader.schema)
    """
    record_type = RECORD_TYPES[schema]
    types = dataframe_schema(schema)
    columns: dict[str, list] = {name: [] for name in record_type.field_names()}

    for record in records:
        if not isinstance(record, record_type):
            msg = (
                f"Expected {record_type.__name__} for {schema.value} layout, "
                f"got {type(record).__name__}"
            )
            raise TypeError(msg)
        for name, values in columns.items():
            value = getattr(record, name)
            values.append(value.value if name == "strand" else value)

    return pl.DataFrame(columns, schema=types)


def write_dataframe(
    df: pl.DataFrame,
    path: Path,
    output_format: OutputFormat = "csv",
) -> None:
    """
    Write DataFrame to file in specified format.

    For Parquet output, uses zstd compression for optimal size/speed tradeoff.

    Args:
        df: Polars DataFrame to write.
        path: Output file path.
        output_format: Output format - 'csv', 'tsv' or 'parquet'.
    """
    if output_format == "parquet":
        df.write_parquet(path, compression="zstd")
    elif output_format == "tsv":
        df.write_csv(path, separator="\t")
    else:
        df.write_csv(path)


def infer_output_format(path: Path) -> OutputFormat:
    """
    Infer the output format from a file extension.

    Raises:
        ValueError: If file extension is not recognized.
    """
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return "parquet"
    if suffix == ".csv":
        return "csv"
    if suffix in (".tsv", ".tab"):
        return "tsv"
    msg = f"Unrecognized output format: {path}"
    raise ValueError(msg)
