"""
Shared pytest fixtures for hmmtblout tests.

Provides tblout reports for each record layout, laid out the way HMMER and
Infernal write them: header lines, aligned data lines, then the metadata
block.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# =============================================================================
# Report Layout Helpers
# =============================================================================

SEQUENCE_WIDTHS = (20, 10, 20, 10, 7, 7, 7, 7, 7, 7, 7, 6, 9, 6, 5, 21)
PROFILE_WIDTHS = (20, 10, 20, 10, 9, 6, 5, 9, 6, 5, 5, 3, 3, 3, 3, 3, 3, 3, 21)
MODEL_WIDTHS = (20, 9, 20, 9, 3, 8, 8, 8, 8, 6, 5, 4, 4, 5, 6, 9, 3, 21)

# L = left-justified, R = right-justified, C = centred; description excluded
SEQUENCE_ALIGN = "LLLL" + "R" * 7 + "C" + "RRR"
PROFILE_ALIGN = "LLLL" + "R" * 14
MODEL_ALIGN = "LLLLL" + "RRRR" + "C" + "L" + "R" + "RRRR" + "L"


def dash_line(widths: tuple[int, ...]) -> str:
    """Dash underline for the given widths, '#' taking the first position."""
    return "#" + " ".join("-" * w for w in widths)[1:]


def layout_row(widths: tuple[int, ...], align: str, cells: list[object]) -> str:
    """Lay out one data line; the last cell is the unpadded description."""
    justify = {"L": str.ljust, "R": str.rjust, "C": str.center}
    padded = [
        justify[a](str(cell), width)
        for cell, a, width in zip(cells[:-1], align, widths)
    ]
    return " ".join(padded + [str(cells[-1])])


def meta_block(program: str, command: str) -> str:
    """Metadata trailer as the tools write it."""
    return "\n".join([
        "#",
        f"# Program:         {program}",
        "# Version:         3.3.2 (Nov 2020)",
        "# Pipeline mode:   SEARCH",
        "# Query file:      query.hmm",
        "# Target file:     target.fa",
        f"# Option settings: {command}",
        "# Current dir:     /home/user/work",
        "# Date:            Mon Jan  1 00:00:00 2024",
        "# [ok]",
    ])


SEQUENCE_COLUMNS = (
    "# target name        accession  query name           accession  hmmfrom hmm to "
    "alifrom  ali to envfrom  env to  sq len strand   E-value  score  bias  description of target"
)
PROFILE_BANNER = (
    "#                                                               --- full sequence ---- "
    "--- best 1 domain ---- --- domain number estimation ----"
)
PROFILE_COLUMNS = (
    "# target name        accession  query name           accession    E-value  score  bias "
    "  E-value  score  bias   exp reg clu  ov env dom rep inc description of target"
)
MODEL_COLUMNS = (
    "#target name         accession query name           accession mdl mdl from   mdl to "
    "seq from   seq to strand trunc pass   gc  bias  score   E-value inc description of target"
)

SEQUENCE_ROWS = [
    ["seq1", "-", "MADE1", "DF0000629", 1, 80, 101, 180, 99, 182, 500, "+",
     "1.2e-15", "55.3", "0.1", "Human chromosome 1 fragment"],
    ["seq2", "-", "MADE1", "DF0000629", 3, 78, 400, 325, 402, 323, 500, "-",
     "3.4e-10", "38.1", "0.5", "-"],
]
PROFILE_ROWS = [
    ["sp|P12345|ABC_HUMAN", "-", "ABC_tran", "PF00005.30", "1.1e-30", "105.2", "0.3",
     "2.5e-30", "104.1", "0.3", "1.0", 1, 1, 0, 1, 1, 1, 1, "ABC transporter"],
    ["sp|Q67890|XYZ_MOUSE", "-", "ABC_tran", "PF00005.30", "4.7e-08", "32.6", "1.2",
     "9.8e-08", "31.5", "1.2", "1.4", 1, 1, 0, 1, 1, 1, 1, "Putative ATP-binding protein"],
]
MODEL_ROWS = [
    ["chr1", "-", "tRNA", "RF00005", "cm", 1, 71, 1000, 1071, "+", "no", 1,
     "0.45", "0.0", "55.2", "1.3e-12", "!", "-"],
    ["chr2", "-", "tRNA", "RF00005", "cm", 1, 71, 5071, 5000, "-", "no", 1,
     "0.52", "0.1", "48.7", "2.1e-10", "!", "tRNA gene"],
]


def build_report(
    header: list[str],
    widths: tuple[int, ...],
    align: str,
    rows: list[list[object]],
    program: str,
) -> str:
    lines = list(header)
    lines.append(dash_line(widths))
    lines.extend(layout_row(widths, align, row) for row in rows)
    lines.append(meta_block(program, f"{program} --tblout hits.tbl query.hmm target.fa"))
    return "\n".join(lines) + "\n"


# =============================================================================
# Report Text Fixtures
# =============================================================================


@pytest.fixture
def sequence_report() -> str:
    """nhmmer report with two hits, one on each strand."""
    return build_report([SEQUENCE_COLUMNS], SEQUENCE_WIDTHS, SEQUENCE_ALIGN, SEQUENCE_ROWS, "nhmmer")


@pytest.fixture
def profile_report() -> str:
    """hmmsearch report with the two-tier banner line."""
    return build_report(
        [PROFILE_BANNER, PROFILE_COLUMNS], PROFILE_WIDTHS, PROFILE_ALIGN, PROFILE_ROWS, "hmmsearch"
    )


@pytest.fixture
def model_report() -> str:
    """cmsearch report with two hits."""
    return build_report([MODEL_COLUMNS], MODEL_WIDTHS, MODEL_ALIGN, MODEL_ROWS, "cmsearch")


@pytest.fixture
def sequence_line() -> str:
    """First data line of the nhmmer report."""
    return layout_row(SEQUENCE_WIDTHS, SEQUENCE_ALIGN, SEQUENCE_ROWS[0])


@pytest.fixture
def profile_line() -> str:
    """First data line of the hmmsearch report."""
    return layout_row(PROFILE_WIDTHS, PROFILE_ALIGN, PROFILE_ROWS[0])


@pytest.fixture
def model_line() -> str:
    """Second data line of the cmsearch report (minus strand, with description)."""
    return layout_row(MODEL_WIDTHS, MODEL_ALIGN, MODEL_ROWS[1])


# =============================================================================
# Report File Fixtures
# =============================================================================


@pytest.fixture
def sequence_tblout(tmp_path: Path, sequence_report: str) -> Path:
    path = tmp_path / "nhmmer.tbl"
    path.write_text(sequence_report)
    return path


@pytest.fixture
def profile_tblout(tmp_path: Path, profile_report: str) -> Path:
    path = tmp_path / "hmmsearch.tbl"
    path.write_text(profile_report)
    return path


@pytest.fixture
def model_tblout(tmp_path: Path, model_report: str) -> Path:
    path = tmp_path / "cmsearch.tbl"
    path.write_text(model_report)
    return path
