"""
Core reading and writing machinery for tblout reports.

This module contains the comment-block scanners, the column width
calculator, the record decoder and the writer.
"""

from hmmtblout.core.parsers import TbloutReader
from hmmtblout.core.widths import column_widths
from hmmtblout.core.writer import TbloutWriter, format_record

__all__ = [
    "TbloutReader",
    "TbloutWriter",
    "column_widths",
    "format_record",
]
