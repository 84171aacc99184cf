"""Unit tests for column width recovery from dash lines."""

from __future__ import annotations

import pytest

from hmmtblout.core.widths import column_widths


class TestColumnWidths:
    """Tests for column_widths."""

    def test_single_space_separators(self):
        """Leading '#' counts towards the first column."""
        assert column_widths("#---- --- ----------") == (5, 3, 10)

    def test_extra_spaces_go_to_next_column(self):
        assert column_widths("#--- ---   ---") == (4, 3, 5)

    def test_empty_line(self):
        assert column_widths("") == ()

    def test_comment_marker_only(self):
        assert column_widths("#") == (1,)

    def test_trailing_spaces_ignored(self):
        assert column_widths("#-- ---   ") == (3, 3)

    def test_line_without_dashes(self):
        assert column_widths("# target name") == (1,)

    def test_other_characters_end_a_run(self):
        assert column_widths("#--x---") == (3, 3)

    @pytest.mark.parametrize(
        "widths",
        [
            (20, 10, 20, 10, 7, 7, 7, 7, 7, 7, 7, 6, 9, 6, 5, 21),
            (20, 9, 20, 9, 3, 8, 8, 8, 8, 6, 5, 4, 4, 5, 6, 9, 3, 21),
        ],
    )
    def test_widths_of_tool_written_dash_lines(self, widths):
        """A dash line written for given widths yields those widths back."""
        dashes = "#" + " ".join("-" * w for w in widths)[1:]
        assert column_widths(dashes) == widths

    def test_widths_sum_matches_line_length(self):
        """Widths plus one separator per gap cover the dash line."""
        line = "#--- ---   -----  --"
        widths = column_widths(line)
        assert sum(widths) + len(widths) - 1 == len(line)
