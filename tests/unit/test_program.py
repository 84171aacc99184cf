"""Unit tests for the strand and program codecs."""

from __future__ import annotations

import pytest

from hmmtblout.core.exceptions import (
    InvalidStrandError,
    UnknownProgramError,
    UnsupportedProgramError,
)
from hmmtblout.models.program import PROGRAM_SCHEMAS, Program, RecordSchema, Strand


class TestStrand:
    """Tests for Strand parsing and rendering."""

    def test_parse_positive(self):
        assert Strand.parse("+") is Strand.POSITIVE

    def test_parse_negative(self):
        assert Strand.parse("-") is Strand.NEGATIVE

    @pytest.mark.parametrize("text", ["", "++", " +", "plus", "*", "."])
    def test_parse_rejects_anything_else(self, text):
        """Only the exact glyphs are accepted."""
        with pytest.raises(InvalidStrandError) as exc_info:
            Strand.parse(text)
        assert exc_info.value.value == text

    def test_str_is_glyph(self):
        assert str(Strand.POSITIVE) == "+"
        assert str(Strand.NEGATIVE) == "-"

    def test_parse_of_str_is_identity(self):
        for strand in Strand:
            assert Strand.parse(str(strand)) is strand


class TestProgram:
    """Tests for Program parsing and schema selection."""

    @pytest.mark.parametrize(
        "name,schema",
        [
            ("nhmmer", RecordSchema.SEQUENCE),
            ("nhmmscan", RecordSchema.SEQUENCE),
            ("jackhmmer", RecordSchema.PROFILE),
            ("hmmscan", RecordSchema.PROFILE),
            ("hmmsearch", RecordSchema.PROFILE),
            ("phmmer", RecordSchema.PROFILE),
            ("cmsearch", RecordSchema.MODEL),
            ("cmscan", RecordSchema.MODEL),
        ],
    )
    def test_parse_known_programs(self, name, schema):
        """Each tool maps to its record layout."""
        program = Program.parse(name)
        assert program.value == name
        assert str(program) == name
        assert program.schema is schema

    def test_parse_is_case_sensitive(self):
        with pytest.raises(UnsupportedProgramError):
            Program.parse("NHMMER")

    def test_parse_rejects_unknown_literal(self):
        """UNKNOWN is never produced by parsing."""
        with pytest.raises(UnsupportedProgramError):
            Program.parse("unknown")

    def test_parse_error_carries_line_number(self):
        with pytest.raises(UnsupportedProgramError) as exc_info:
            Program.parse("blastn", line_number=12)
        assert exc_info.value.value == "blastn"
        assert exc_info.value.line_number == 12
        assert "line 12" in exc_info.value.message

    def test_unknown_has_no_schema(self):
        with pytest.raises(UnknownProgramError):
            _ = Program.UNKNOWN.schema

    def test_schema_table_covers_every_known_program(self):
        assert set(PROGRAM_SCHEMAS) == set(Program) - {Program.UNKNOWN}
