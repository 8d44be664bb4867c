"""skills_extractor.py
Extracts skills from the "skills" section.
"""
import re
from typing import List

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.field_extractor.helper_functions.dedupe import (
    dedupe_case_insensitive
)


class SkillsExtractor(FieldExtractor):
    """
    Extracts the candidate's skills from the skills section lines.

    Supports:
        - 'rule': Splits every line on list separators (bullets, commas,
            semicolons, pipes), drops "Category:" prefixes and deduplicates
            case-insensitively (first-seen spelling and order kept).
    """

    FIELD_NAME = "skills"
    SOURCE_SECTION = "skills"

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    SEPARATOR_REGEX = re.compile(r"[•·,;|]")
    CATEGORY_PREFIX_REGEX = re.compile(r"^[A-Za-z\s]+:\s*")

    def extract(self) -> List[str]:
        """
        Extract the skills using the chosen extraction method.

        Returns:
            List[str]: Skills in first-seen order. Empty list if none were found.

        Example:
            >>> SkillsExtractor(lines=["SQL, sql, Figma"]).extract()
            ['SQL', 'Figma']
        """
        if self.extraction_method == "rule":
            return self._rule_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for SkillsExtractor."
        )

    def _rule_extract(self) -> List[str]:
        return dedupe_case_insensitive(
            self.CATEGORY_PREFIX_REGEX.sub("", self._strip_bullet(item), count=1)
            for line in self.lines
            for item in self.SEPARATOR_REGEX.split(line)
        )
