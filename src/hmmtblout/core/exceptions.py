"""
Custom exceptions with actionable guidance.

Every failure the tblout reader can report is one of these types, each
carrying a suggestion for resolution. I/O failures are not wrapped: the
underlying ``OSError`` propagates unchanged.
"""

from __future__ import annotations


class TbloutError(Exception):
    """Base exception for hmmtblout errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class MetaError(TbloutError):
    """Base class for errors in the run metadata block."""



class UnsupportedProgramError(MetaError):
    """Raised when the '# Program:' value is not a known search tool."""

    def __init__(self, value: str, line_number: int | None = None):
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(
            message=f"The program \"{value}\" is not supported{location}",
            suggestion=(
                "Supported programs are: nhmmer, nhmmscan, jackhmmer, hmmscan, "
                "hmmsearch, phmmer, cmsearch, cmscan. Names are case-sensitive. "
                "Check that the file is a --tblout report from HMMER or Infernal."
            ),
        )
        self.value = value
        self.line_number = line_number


class RecordError(TbloutError):
    """Base class for errors decoding a data line."""



class InvalidStrandError(RecordError):
    """Raised when a strand token is neither '+' nor '-'."""

    def __init__(self, value: str):
        super().__init__(
            message=f"The input \"{value}\" was neither `-` nor `+`",
            suggestion="Strand columns must contain exactly '+' or '-'.",
        )
        self.value = value


class MalformedFieldError(RecordError):
    """Raised when a token cannot be coerced to its column's type."""

    def __init__(
        self,
        field: str,
        value: str,
        expected: str,
        line_number: int | None = None,
        reason: str | None = None,
    ):
        location = f"line {line_number}, " if line_number is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(
            message=(
                f"Malformed field at {location}column '{field}': "
                f"cannot read \"{value}\" as {expected}{detail}"
            ),
            suggestion=(
                "Check that the file was not truncated or edited by hand and "
                "that the '# Program:' line matches the tool that wrote the table."
            ),
        )
        self.field = field
        self.value = value
        self.expected = expected
        self.line_number = line_number


class MissingFieldsError(RecordError):
    """Raised when a data line has fewer tokens than the schema requires."""

    def __init__(self, expected: int, actual: int, line_number: int | None = None):
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(
            message=(
                f"Data line{location} has {actual} fields, "
                f"expected at least {expected}"
            ),
            suggestion=(
                "The line may be truncated, or the report was written by a "
                "different program than the one declared in its metadata."
            ),
        )
        self.expected = expected
        self.actual = actual
        self.line_number = line_number


class ConfigurationError(TbloutError):
    """Raised when reader configuration is invalid."""



class UnknownProgramError(ConfigurationError):
    """Raised when records are requested but no program was declared."""

    def __init__(self) -> None:
        super().__init__(
            message="Cannot select a record schema: the program is unknown",
            suggestion=(
                "The metadata block ('# Program: ...') was not found. Tblout "
                "files written by HMMER and Infernal end with this block; make "
                "sure the file is complete."
            ),
        )


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration file cannot be used."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Invalid configuration file '{path}': {reason}",
            suggestion=(
                "The configuration must be a YAML mapping, e.g.:\n"
                "  header:\n"
                "    miss_tolerance: 3\n"
                "  meta:\n"
                "    skip_lines: 3\n"
                "    bounded_scan: false\n"
                "  records:\n"
                "    on_error: raise"
            ),
        )
        self.path = path
