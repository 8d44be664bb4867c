"""achievements_extractor.py
Extracts achievements / awards from the "achievements" section.
"""
import re
from typing import List

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor


class AchievementsExtractor(FieldExtractor):
    """
    Extracts the candidate's achievements, one per non-blank line.

    Supports:
        - 'rule': Strips bullet glyphs and trailing colons/semicolons.
    """

    FIELD_NAME = "achievements"
    SOURCE_SECTION = "achievements"

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    TRAILING_PUNCTUATION_REGEX = re.compile(r"[:;]+$")

    def extract(self) -> List[str]:
        if self.extraction_method == "rule":
            return self._rule_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for AchievementsExtractor."
        )

    def _rule_extract(self) -> List[str]:
        achievements = []
        for line in self.lines:
            item = self.TRAILING_PUNCTUATION_REGEX.sub("", self._strip_bullet(line)).strip()
            if item:
                achievements.append(item)
        return achievements
