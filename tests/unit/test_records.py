"""
Unit tests for the record models.

Covers field validation, float32 narrowing, the discriminated union and the
column tables that drive decoding and rendering.
"""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import TypeAdapter, ValidationError

from hmmtblout.models.program import RecordSchema, Strand
from hmmtblout.models.records import (
    INT32_MAX,
    RECORD_TYPES,
    ColumnKind,
    ModelRecord,
    ProfileRecord,
    Record,
    SequenceRecord,
)


def make_sequence_record(**overrides) -> SequenceRecord:
    values = {
        "target_name": "seq1",
        "target_accession": "-",
        "query_name": "MADE1",
        "query_accession": "DF0000629",
        "hmm_from": 1,
        "hmm_to": 80,
        "ali_from": 101,
        "ali_to": 180,
        "env_from": 99,
        "env_to": 182,
        "sq_len": 500,
        "strand": Strand.POSITIVE,
        "e_value": 1.2e-15,
        "score": 55.3,
        "bias": 0.1,
    }
    values.update(overrides)
    return SequenceRecord(**values)


class TestSequenceRecord:
    """Tests for SequenceRecord."""

    def test_defaults(self):
        record = make_sequence_record()
        assert record.kind == "sequence"
        assert record.description == ""
        assert record.column_widths == ()

    def test_floats_are_narrowed_to_float32(self):
        record = make_sequence_record(score=55.3)
        assert record.score == float(np.float32(55.3))
        assert record.score != 55.3

    def test_integer_range_is_32_bit(self):
        assert make_sequence_record(sq_len=INT32_MAX).sq_len == INT32_MAX
        with pytest.raises(ValidationError):
            make_sequence_record(sq_len=INT32_MAX + 1)

    def test_strand_accepts_glyph(self):
        assert make_sequence_record(strand="-").strand is Strand.NEGATIVE

    def test_is_frozen(self):
        record = make_sequence_record()
        with pytest.raises(ValidationError):
            record.score = 1.0

    def test_column_widths_not_in_repr(self):
        record = make_sequence_record(column_widths=(20, 10))
        assert "column_widths" not in repr(record)


class TestModelRecord:
    """Tests for ModelRecord."""

    def test_inc_must_be_single_character(self):
        values = {
            "target_name": "chr1",
            "target_accession": "-",
            "query_name": "tRNA",
            "query_accession": "RF00005",
            "mdl": "cm",
            "mdl_from": 1,
            "mdl_to": 71,
            "seq_from": 1000,
            "seq_to": 1071,
            "strand": "+",
            "trunc": "no",
            "pass_number": 1,
            "gc": 0.45,
            "bias": 0.0,
            "score": 55.2,
            "e_value": 1.3e-12,
        }
        assert ModelRecord(**values, inc="!").inc == "!"
        with pytest.raises(ValidationError):
            ModelRecord(**values, inc="!!")
        with pytest.raises(ValidationError):
            ModelRecord(**values, inc="")


class TestColumnTables:
    """Tests for the per-layout column tables."""

    @pytest.mark.parametrize(
        "record_type,count",
        [(SequenceRecord, 15), (ProfileRecord, 18), (ModelRecord, 17)],
    )
    def test_fixed_column_counts(self, record_type, count):
        assert len(record_type.COLUMNS) == count
        assert len(record_type.field_names()) == count + 1
        assert record_type.field_names()[-1] == "description"

    @pytest.mark.parametrize("record_type", [SequenceRecord, ProfileRecord, ModelRecord])
    def test_columns_name_model_fields(self, record_type):
        for column in record_type.COLUMNS:
            assert column.field in record_type.model_fields

    def test_gc_renders_with_two_decimals(self):
        kinds = {column.field: column.kind for column in ModelRecord.COLUMNS}
        assert kinds["gc"] is ColumnKind.DECIMAL2
        assert kinds["inc"] is ColumnKind.FLAG

    def test_record_types_cover_every_schema(self):
        assert set(RECORD_TYPES) == set(RecordSchema)


class TestRecordUnion:
    """Tests for the discriminated Record union."""

    def test_validates_by_kind(self):
        adapter = TypeAdapter(Record)
        data = make_sequence_record().model_dump()
        record = adapter.validate_python(data)
        assert isinstance(record, SequenceRecord)

    def test_dump_round_trip_through_json(self):
        adapter = TypeAdapter(Record)
        record = make_sequence_record(description="a hit")
        restored = adapter.validate_json(record.model_dump_json())
        assert restored == record
