"""
Pydantic data models for hmmtblout.

Provides type-safe models for run metadata, header lines, the three record
layouts and reader configuration.
"""

from hmmtblout.models.config import ReaderConfig
from hmmtblout.models.meta import Header, Meta
from hmmtblout.models.program import Program, RecordSchema, Strand
from hmmtblout.models.records import (
    ModelRecord,
    ProfileRecord,
    Record,
    SequenceRecord,
)

__all__ = [
    "Header",
    "Meta",
    "ModelRecord",
    "ProfileRecord",
    "Program",
    "ReaderConfig",
    "Record",
    "RecordSchema",
    "SequenceRecord",
    "Strand",
]
