"""
Pydantic models for the comment blocks of a tblout report.

Meta holds the run metadata the tools append as '# Key: value' lines.
Header holds the raw column-label lines; only its dash line is ever
reinterpreted, to recover the column widths.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from hmmtblout.models.program import Program

# Label written before each Meta field, in output order
META_LABELS: dict[str, str] = {
    "program": "Program",
    "version": "Version",
    "pipeline_mode": "Pipeline mode",
    "query_file": "Query file",
    "target_file": "Target file",
    "options": "Option settings",
    "current_dir": "Current dir",
    "date": "Date",
}


class Meta(BaseModel):
    """
    Run metadata from the '# Key: value' block of a report.

    Attributes:
        program: Tool that wrote the report (UNKNOWN if never declared)
        version: Tool version string, e.g. "3.3.2 (Nov 2020)"
        pipeline_mode: "SEARCH" or "SCAN"
        query_file: Query file exactly as the tool printed it
        target_file: Target file exactly as the tool printed it
        options: Full command line ("Option settings")
        current_dir: Working directory of the run, as printed
        date: Date string of the run
    """

    program: Program = Field(default=Program.UNKNOWN, description="Search tool")
    version: str = Field(default="", description="Tool version")
    pipeline_mode: str = Field(default="", description="Pipeline mode")
    query_file: str = Field(default="", description="Query file path")
    target_file: str = Field(default="", description="Target file path")
    options: str = Field(default="", description="Option settings")
    current_dir: str = Field(default="", description="Working directory")
    date: str = Field(default="", description="Run date")

    @property
    def query_path(self) -> Path | None:
        """Query file as a Path, or None if the report gave none."""
        return Path(self.query_file) if self.query_file else None

    @property
    def target_path(self) -> Path | None:
        return Path(self.target_file) if self.target_file else None

    @property
    def current_dir_path(self) -> Path | None:
        return Path(self.current_dir) if self.current_dir else None

    model_config = {"frozen": True}


class Header(BaseModel):
    """
    Column-label lines of a report, stored verbatim without line terminators.

    Attributes:
        banner: Two-tier group label line ("--- full sequence ---"), profile
            reports only
        columns: Column-label line ("# target name ...")
        dashes: Dash underline beneath the column labels
    """

    banner: str | None = Field(default=None, description="Group label line")
    columns: str | None = Field(default=None, description="Column-label line")
    dashes: str | None = Field(default=None, description="Dash underline")

    @property
    def column_widths(self) -> tuple[int, ...]:
        """Column widths recovered from the dash line (empty if absent)."""
        from hmmtblout.core.widths import column_widths

        return column_widths(self.dashes or "")

    model_config = {"frozen": True}
