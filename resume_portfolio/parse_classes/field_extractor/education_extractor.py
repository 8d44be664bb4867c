"""education_extractor.py
Extracts education entries from the "education" section.
"""
from typing import List

from resume_portfolio.models import EducationEntry
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor


class EducationExtractor(FieldExtractor):
    """
    Extracts the candidate's education from the education section lines.

    Supports:
        - 'rule': One entry per blank-line separated chunk. The first line is
            the institution heading, the remaining lines are details.
    """

    FIELD_NAME = "education"
    SOURCE_SECTION = "education"

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    def extract(self) -> List[EducationEntry]:
        if self.extraction_method == "rule":
            return self._rule_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for EducationExtractor."
        )

    def _rule_extract(self) -> List[EducationEntry]:
        entries = []
        for chunk in self._chunk_lines():
            cleaned = [line for line in map(self._strip_bullet, chunk) if line]
            if not cleaned:
                continue
            entries.append(EducationEntry(heading=cleaned[0], details=cleaned[1:]))
        return entries
