"""Shared conftest for integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def malformed_tblout(tmp_path: Path, sequence_report: str) -> Path:
    """nhmmer report whose first data line has a non-numeric coordinate."""
    lines = sequence_report.splitlines(keepends=True)
    lines[2] = lines[2].replace(" 101 ", " 1O1 ")
    path = tmp_path / "malformed.tbl"
    path.write_text("".join(lines))
    return path


@pytest.fixture
def skip_config(tmp_path: Path) -> Path:
    """YAML configuration that skips malformed data lines."""
    path = tmp_path / "skip.yaml"
    path.write_text("records:\n  on_error: skip\n")
    return path
