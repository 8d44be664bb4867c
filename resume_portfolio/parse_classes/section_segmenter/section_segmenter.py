"""section_segmenter.py
Buckets normalized resume lines into canonical sections.
"""
from typing import List

from resume_portfolio.models import SectionMap
from resume_portfolio.parse_classes.field_extractor.helper_functions.validate_line_list import (
    validate_line_list
)
from resume_portfolio.parse_classes.section_segmenter.helpers.heading_aliases import (
    normalize_heading
)


class SectionSegmenter:
    """
    Splits the lines of a resume into a SectionMap.

    A single "current section" is tracked, starting at ``summary`` so that any
    unclassified leading lines (name, contact block, intro paragraph) land
    there. A line that matches a heading alias switches the current section
    and is not emitted itself. Blank lines are kept as ``""`` markers so the
    field extractors can split sections into chunks.

    Args:
        lines (List[str]): Lines produced by ``normalize_lines``.

    Example:
        >>> SectionSegmenter(["Jane Doe", "Skills", "SQL"]).segment()
        {'summary': ['Jane Doe'], 'skills': ['SQL']}
    """
    DEFAULT_SECTION = "summary"

    def __init__(self, lines: List[str]):
        validate_line_list(lines)
        self.lines = lines

    def segment(self) -> SectionMap:
        """
        Walk the lines once and return the accumulated SectionMap.

        Sections appear in first-seen order. A heading that recurs (e.g. two
        "Education" headings) keeps appending to the same section.
        """
        current_section = self.DEFAULT_SECTION
        sections: SectionMap = {current_section: []}

        for raw_line in self.lines:
            trimmed = (raw_line or "").strip()

            if not trimmed:
                sections.setdefault(current_section, []).append("")
                continue

            heading = normalize_heading(trimmed)
            if heading:
                current_section = heading
                sections.setdefault(current_section, [])
                continue

            sections.setdefault(current_section, []).append(trimmed)

        return sections
