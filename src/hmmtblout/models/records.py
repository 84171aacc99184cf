"""
Pydantic models for tblout data rows.

A report holds exactly one of three row layouts, chosen by the program that
wrote it. Each layout is a frozen model tagged by ``kind``; ``Record`` is the
closed union of the three. The ``COLUMNS`` table of each model lists its
fixed columns in file order together with how each one is read and written;
every remaining token on a line belongs to the free-text description.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, NamedTuple

import numpy as np
from pydantic import AfterValidator, BaseModel, Field

from hmmtblout.models.program import RecordSchema, Strand

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def to_float32(value: float) -> float:
    """Round a value to the nearest IEEE-754 single-precision float."""
    with np.errstate(over="ignore"):
        return float(np.float32(value))


Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Float32 = Annotated[float, AfterValidator(to_float32)]


class ColumnKind(str, Enum):
    """
    How a column is coerced on read and justified on write.

    Categories:
        TEXT: free string, left-justified
        INT: 32-bit signed integer, right-justified
        STRAND: '+' or '-', centred
        EVALUE: float32, right-justified scientific notation
        DECIMAL1: float32, right-justified with one decimal place
        DECIMAL2: float32, right-justified with two decimal places
        FLAG: exactly one character, left-justified
    """

    TEXT = "text"
    INT = "int"
    STRAND = "strand"
    EVALUE = "evalue"
    DECIMAL1 = "decimal1"
    DECIMAL2 = "decimal2"
    FLAG = "flag"


class Column(NamedTuple):
    """One fixed column of a record layout."""

    field: str
    kind: ColumnKind


_T = ColumnKind.TEXT
_I = ColumnKind.INT

_NAME_COLUMNS: tuple[Column, ...] = (
    Column("target_name", _T),
    Column("target_accession", _T),
    Column("query_name", _T),
    Column("query_accession", _T),
)


class _RecordBase(BaseModel):
    """Identifier and description fields shared by all layouts."""

    target_name: str = Field(description="Name of the target sequence or model")
    target_accession: str = Field(description="Target accession, '-' if none")
    query_name: str = Field(description="Name of the query sequence or model")
    query_accession: str = Field(description="Query accession, '-' if none")
    description: str = Field(default="", description="Free-text target description")
    column_widths: tuple[int, ...] = Field(
        default=(),
        repr=False,
        description="Column widths of the report this record was read from",
    )

    COLUMNS: ClassVar[tuple[Column, ...]] = ()

    @classmethod
    def field_names(cls) -> list[str]:
        """Column field names in file order, description last."""
        return [column.field for column in cls.COLUMNS] + ["description"]

    model_config = {"frozen": True}


class SequenceRecord(_RecordBase):
    """
    Hit from a nucleotide search (nhmmer, nhmmscan).

    Attributes:
        hmm_from, hmm_to: Hit coordinates on the query profile
        ali_from, ali_to: Alignment coordinates on the target sequence
        env_from, env_to: Envelope coordinates on the target sequence
        sq_len: Target sequence length
        strand: Strand of the hit on the target
        e_value, score, bias: Hit statistics
    """

    kind: Literal["sequence"] = "sequence"
    hmm_from: Int32
    hmm_to: Int32
    ali_from: Int32
    ali_to: Int32
    env_from: Int32
    env_to: Int32
    sq_len: Int32
    strand: Strand
    e_value: Float32
    score: Float32
    bias: Float32

    COLUMNS: ClassVar[tuple[Column, ...]] = _NAME_COLUMNS + (
        Column("hmm_from", _I),
        Column("hmm_to", _I),
        Column("ali_from", _I),
        Column("ali_to", _I),
        Column("env_from", _I),
        Column("env_to", _I),
        Column("sq_len", _I),
        Column("strand", ColumnKind.STRAND),
        Column("e_value", ColumnKind.EVALUE),
        Column("score", ColumnKind.DECIMAL1),
        Column("bias", ColumnKind.DECIMAL1),
    )


class ProfileRecord(_RecordBase):
    """
    Per-sequence hit from a protein search (jackhmmer, hmmscan, hmmsearch, phmmer).

    The "full" statistics score the whole sequence; the "best" statistics
    score its single best domain. The remaining counters are the domain
    number estimation columns.
    """

    kind: Literal["profile"] = "profile"
    e_value_full: Float32
    score_full: Float32
    bias_full: Float32
    e_value_best: Float32
    score_best: Float32
    bias_best: Float32
    exp: Float32 = Field(description="Expected number of domains")
    reg: Int32 = Field(description="Number of discrete regions")
    clu: Int32 = Field(description="Regions split into multiple domains")
    ov: Int32 = Field(description="Overlapping envelopes")
    env: Int32 = Field(description="Number of envelopes")
    dom: Int32 = Field(description="Number of domains defined")
    rep: Int32 = Field(description="Domains satisfying reporting thresholds")
    inc: Int32 = Field(description="Domains satisfying inclusion thresholds")

    COLUMNS: ClassVar[tuple[Column, ...]] = _NAME_COLUMNS + (
        Column("e_value_full", ColumnKind.EVALUE),
        Column("score_full", ColumnKind.DECIMAL1),
        Column("bias_full", ColumnKind.DECIMAL1),
        Column("e_value_best", ColumnKind.EVALUE),
        Column("score_best", ColumnKind.DECIMAL1),
        Column("bias_best", ColumnKind.DECIMAL1),
        Column("exp", ColumnKind.DECIMAL1),
        Column("reg", _I),
        Column("clu", _I),
        Column("ov", _I),
        Column("env", _I),
        Column("dom", _I),
        Column("rep", _I),
        Column("inc", _I),
    )


class ModelRecord(_RecordBase):
    """
    Hit from a covariance model search (cmsearch, cmscan).

    Attributes:
        mdl: Model type, "cm" or "hmm"
        mdl_from, mdl_to: Hit coordinates on the model
        seq_from, seq_to: Hit coordinates on the target sequence
        strand: Strand of the hit on the target
        trunc: Truncation status ("no", "5'", "3'", "5'&3'")
        pass_number: Pipeline pass that found the hit
        gc: GC fraction of the hit
        bias, score, e_value: Hit statistics
        inc: Inclusion flag, '!' or '?'
    """

    kind: Literal["model"] = "model"
    mdl: str
    mdl_from: Int32
    mdl_to: Int32
    seq_from: Int32
    seq_to: Int32
    strand: Strand
    trunc: str
    pass_number: Int32
    gc: Float32
    bias: Float32
    score: Float32
    e_value: Float32
    inc: str = Field(min_length=1, max_length=1)

    COLUMNS: ClassVar[tuple[Column, ...]] = _NAME_COLUMNS + (
        Column("mdl", _T),
        Column("mdl_from", _I),
        Column("mdl_to", _I),
        Column("seq_from", _I),
        Column("seq_to", _I),
        Column("strand", ColumnKind.STRAND),
        Column("trunc", _T),
        Column("pass_number", _I),
        Column("gc", ColumnKind.DECIMAL2),
        Column("bias", ColumnKind.DECIMAL1),
        Column("score", ColumnKind.DECIMAL1),
        Column("e_value", ColumnKind.EVALUE),
        Column("inc", ColumnKind.FLAG),
    )


Record = Annotated[
    SequenceRecord | ProfileRecord | ModelRecord,
    Field(discriminator="kind"),
]

RECORD_TYPES: dict[RecordSchema, type[SequenceRecord | ProfileRecord | ModelRecord]] = {
    RecordSchema.SEQUENCE: SequenceRecord,
    RecordSchema.PROFILE: ProfileRecord,
    RecordSchema.MODEL: ModelRecord,
}
