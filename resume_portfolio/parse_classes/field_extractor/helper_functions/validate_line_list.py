"""validate_line_list.py
Check that a list of resume lines is valid
"""
from typing import List


def validate_line_list(lines: List[str]) -> None:
    """
    Validate that `lines` is a list of strings (as produced by
    `normalize_lines` or held in a SectionMap).

    An empty list is valid: a resume may simply have no lines for a section.

    Args:
        lines (List[str]): Resume lines contained in a list.

    Raises:
        TypeError: If lines is not a list or contains non-string items.
    """
    if not isinstance(lines, list):
        raise TypeError(
            f"lines must be a list of strings, got {type(lines).__name__}."
        )

    for idx, line in enumerate(lines):
        if not isinstance(line, str):
            raise TypeError(
                f"lines[{idx}] is not a string (got {type(line).__name__})."
            )
