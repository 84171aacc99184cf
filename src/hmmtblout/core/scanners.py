"""
Comment-block scanners for tblout reports.

The header and the run metadata are both found in '#' comment lines, but
neither follows a fixed grammar. Each scanner makes its own forward pass over
a stream and recognises its lines heuristically, tuned to the banner shape
the HMMER and Infernal tools emit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar

from hmmtblout.models.meta import META_LABELS, Header, Meta
from hmmtblout.models.program import Program

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"


def strip_line_ending(line: str) -> str:
    """Remove a trailing '\\n', '\\r\\n' or '\\r'."""
    return line.rstrip("\r\n")


def _is_single_repeated_character(text: str) -> bool:
    return bool(text) and text.count(text[0]) == len(text)


class HeaderScanner:
    """
    Extract the banner, column-label and dash lines from the leading comments.

    Scanning stops at the first data line, or once more than
    ``miss_tolerance`` comment lines matched none of the three shapes.
    """

    BANNER_MARKER: ClassVar[str] = "full sequence"
    COLUMNS_MARKER: ClassVar[str] = "target name"

    def __init__(self, miss_tolerance: int = 3) -> None:
        self.miss_tolerance = miss_tolerance

    def scan(self, lines: Iterable[str]) -> Header:
        """
        Scan lines for the header.

        Args:
            lines: Text lines, with or without line terminators.

        Returns:
            Header with whichever of the three lines were found.
        """
        banner: str | None = None
        columns: str | None = None
        dashes: str | None = None
        misses = 0

        for line_number, raw in enumerate(lines, start=1):
            if not raw.startswith(COMMENT_MARKER):
                logger.debug("Header scan reached data at line %d", line_number)
                break

            line = strip_line_ending(raw)
            if self.BANNER_MARKER in line:
                banner = line
                continue
            if self.COLUMNS_MARKER in line:
                columns = line
                continue

            body = "".join(line[len(COMMENT_MARKER):].split())
            if _is_single_repeated_character(body):
                dashes = line
                continue

            misses += 1
            if misses > self.miss_tolerance:
                logger.debug(
                    "Header scan stopped at line %d after %d unrecognised comment lines",
                    line_number,
                    misses,
                )
                break

        if dashes is None:
            logger.warning("No dash line found in header; column widths will be empty")

        return Header(banner=banner, columns=columns, dashes=dashes)


class MetaScanner:
    """
    Extract run metadata from '# Key: value' comment lines.

    The first ``skip_lines`` comment lines are the column header and are not
    inspected. Every later comment line is split at its first ':' and matched
    against the eight known labels; other keys are ignored. By default the
    whole input is read, since the tools write the metadata block after the
    data. With ``bounded=True`` the scan stops once all eight keys were seen.
    """

    KEYS: ClassVar[dict[str, str]] = {
        f"{COMMENT_MARKER} {label}": field for field, label in META_LABELS.items()
    }

    def __init__(self, skip_lines: int = 3, bounded: bool = False) -> None:
        self.skip_lines = skip_lines
        self.bounded = bounded

    def scan(self, lines: Iterable[str]) -> Meta:
        """
        Scan lines for metadata.

        Args:
            lines: Text lines, with or without line terminators.

        Returns:
            Meta with every recognised field found; others keep defaults.

        Raises:
            UnsupportedProgramError: If the program value is not a known tool.
        """
        values: dict[str, object] = {}
        comments_seen = 0

        for line_number, raw in enumerate(lines, start=1):
            if not raw.startswith(COMMENT_MARKER):
                continue

            comments_seen += 1
            if comments_seen <= self.skip_lines:
                continue

            key, _, value = strip_line_ending(raw).partition(":")
            field = self.KEYS.get(key.strip())
            if field is None:
                continue

            value = value.strip()
            if field == "program":
                values[field] = Program.parse(value, line_number)
            else:
                values[field] = value
            logger.debug("Found metadata %s at line %d", field, line_number)

            if self.bounded and len(values) == len(self.KEYS):
                logger.debug("All metadata found; stopping scan at line %d", line_number)
                break

        if "program" not in values:
            logger.warning("No '# Program:' line found; record schema is unknown")

        return Meta(**values)
