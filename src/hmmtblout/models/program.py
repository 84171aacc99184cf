"""
Closed-set codecs for the strand and program columns.

Both parse case-sensitively and never fall back to a default: anything
outside the known set raises.
"""

from __future__ import annotations

from enum import Enum

from hmmtblout.core.exceptions import (
    InvalidStrandError,
    UnknownProgramError,
    UnsupportedProgramError,
)


class Strand(str, Enum):
    """Orientation of a hit on a nucleotide sequence."""

    POSITIVE = "+"
    NEGATIVE = "-"

    @classmethod
    def parse(cls, text: str) -> Strand:
        """
        Parse a strand token.

        Raises:
            InvalidStrandError: If text is not exactly '+' or '-'.
        """
        if text == "+":
            return cls.POSITIVE
        if text == "-":
            return cls.NEGATIVE
        raise InvalidStrandError(text)

    def __str__(self) -> str:
        return self.value


class RecordSchema(str, Enum):
    """
    Record layouts written by the supported tools.

    Categories:
        SEQUENCE: nucleotide searches (nhmmer, nhmmscan)
        PROFILE: per-sequence protein searches (jackhmmer, hmmscan, hmmsearch, phmmer)
        MODEL: covariance model searches (cmsearch, cmscan)
    """

    SEQUENCE = "sequence"
    PROFILE = "profile"
    MODEL = "model"


class Program(str, Enum):
    """
    Search tool that produced a tblout report.

    UNKNOWN marks a report whose metadata has not declared a program. It is
    never produced by :meth:`parse` and has no record schema.
    """

    UNKNOWN = "unknown"
    NHMMER = "nhmmer"
    NHMMSCAN = "nhmmscan"
    JACKHMMER = "jackhmmer"
    HMMSCAN = "hmmscan"
    HMMSEARCH = "hmmsearch"
    PHMMER = "phmmer"
    CMSEARCH = "cmsearch"
    CMSCAN = "cmscan"

    @classmethod
    def parse(cls, text: str, line_number: int | None = None) -> Program:
        """
        Parse a program name as written on the '# Program:' line.

        Raises:
            UnsupportedProgramError: If text is not one of the eight tool names.
        """
        program = _KNOWN_PROGRAMS.get(text)
        if program is None:
            raise UnsupportedProgramError(text, line_number)
        return program

    @property
    def schema(self) -> RecordSchema:
        """
        Record schema written by this program.

        Raises:
            UnknownProgramError: For Program.UNKNOWN.
        """
        if self is Program.UNKNOWN:
            raise UnknownProgramError()
        return PROGRAM_SCHEMAS[self]

    def __str__(self) -> str:
        return self.value


PROGRAM_SCHEMAS: dict[Program, RecordSchema] = {
    Program.NHMMER: RecordSchema.SEQUENCE,
    Program.NHMMSCAN: RecordSchema.SEQUENCE,
    Program.JACKHMMER: RecordSchema.PROFILE,
    Program.HMMSCAN: RecordSchema.PROFILE,
    Program.HMMSEARCH: RecordSchema.PROFILE,
    Program.PHMMER: RecordSchema.PROFILE,
    Program.CMSEARCH: RecordSchema.MODEL,
    Program.CMSCAN: RecordSchema.MODEL,
}

_KNOWN_PROGRAMS: dict[str, Program] = {p.value: p for p in PROGRAM_SCHEMAS}
