"""
hmmtblout: typed records from HMMER and Infernal tabular (--tblout) reports.

Reads the column-aligned, comment-annotated reports written by nhmmer,
nhmmscan, jackhmmer, hmmscan, hmmsearch, phmmer, cmsearch and cmscan into
typed records, and writes them back with the original column alignment.
"""

__version__ = "0.1.0"

from hmmtblout.core.exceptions import (
    MalformedFieldError,
    TbloutError,
    UnknownProgramError,
    UnsupportedProgramError,
)
from hmmtblout.core.parsers import TbloutReader
from hmmtblout.core.writer import TbloutWriter
from hmmtblout.models.meta import Header, Meta
from hmmtblout.models.program import Program, RecordSchema, Strand
from hmmtblout.models.records import ModelRecord, ProfileRecord, Record, SequenceRecord

__all__ = [
    "Header",
    "MalformedFieldError",
    "Meta",
    "ModelRecord",
    "ProfileRecord",
    "Program",
    "Record",
    "RecordSchema",
    "SequenceRecord",
    "Strand",
    "TbloutError",
    "TbloutReader",
    "TbloutWriter",
    "UnknownProgramError",
    "UnsupportedProgramError",
    "__version__",
]
