"""project_extractor.py
Extracts project entries from the "projects" section.
"""
import re
from typing import List

from resume_portfolio.models import ProjectEntry
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor


class ProjectExtractor(FieldExtractor):
    """
    Extracts the candidate's projects from the projects section lines.

    Supports:
        - 'rule': One entry per blank-line separated chunk. The first line is
            the project name; the remaining lines are the details and, joined
            with spaces, the description.
    """

    FIELD_NAME = "projects"
    SOURCE_SECTION = "projects"

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    BARE_GLYPH_REGEX = re.compile(r"^[-•●◦]$")

    def extract(self) -> List[ProjectEntry]:
        if self.extraction_method == "rule":
            return self._rule_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for ProjectExtractor."
        )

    def _rule_extract(self) -> List[ProjectEntry]:
        # Bare bullet glyphs are dropped; blank lines still separate projects
        lines = [line for line in self.lines if not self.BARE_GLYPH_REGEX.match(line.strip())]

        entries = []
        for chunk in self._chunk_lines(lines):
            name = self._strip_bullet(chunk[0]) or None
            details = [detail for detail in map(self._strip_bullet, chunk[1:]) if detail]
            description = " ".join(details).strip() or None

            if name or details:
                entries.append(ProjectEntry(name=name, description=description, details=details))
        return entries
