"""
Column width recovery from a tblout dash line.

The tools underline each column label with a run of dashes and separate the
runs with a single space, so the run lengths are the column widths. The
leading comment marker counts as part of the first run. Where two runs are
separated by more than one space, the extra spaces are padding that belongs
to the following column.

Example:
    >>> column_widths("#---- --- ----------")
    (5, 3, 10)
    >>> column_widths("#--- ---   ---")
    (4, 3, 5)
"""

from __future__ import annotations

FILL_CHARACTERS = frozenset("-#")


def column_widths(dashes: str) -> tuple[int, ...]:
    """
    Compute one width per dash run of a dash line.

    Args:
        dashes: The raw dash line, including its leading '#'.

    Returns:
        Widths in left-to-right order. Empty if the line holds no dash runs.
    """
    widths: list[int] = []
    current_length = 0
    space_count = 0
    in_dash_run = False

    for char in dashes:
        if char in FILL_CHARACTERS:
            if space_count > 1:
                current_length += space_count - 1
            space_count = 0
            current_length += 1
            in_dash_run = True
        elif char == " ":
            if in_dash_run:
                if space_count == 0:
                    widths.append(current_length)
                    current_length = 0
                space_count += 1
        else:
            if current_length > 0:
                widths.append(current_length)
                current_length = 0
            space_count = 0
            in_dash_run = False

    if current_length > 0:
        widths.append(current_length)

    return tuple(widths)
