"""experience_extractor.py
Extracts work experience entries from the "experience" section.
"""
import re
from typing import List, Optional

from resume_portfolio.models import ExperienceEntry
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor


class ExperienceExtractor(FieldExtractor):
    """
    Extracts the candidate's work experience from the experience section lines.

    Supports:
        - 'rule': Splits the section into one chunk per role (inserting breaks
            ahead of heading-like lines) and reads each chunk as a heading plus
            bullets.
    """

    FIELD_NAME = "experience"
    SOURCE_SECTION = "experience"

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    MONTH_REGEX = re.compile(
        r"\b(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
        r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\b",
        re.IGNORECASE,
    )
    YEAR_REGEX = re.compile(r"\d{4}")
    # "Tech stack: ..." style lines belong to the current role
    DESCRIPTOR_REGEX = re.compile(r"^[A-Za-z][A-Za-z\s]{0,20}:")
    MAX_HEADING_WORDS = 8

    def extract(self) -> List[ExperienceEntry]:
        """
        Extract experience entries using the chosen extraction method.

        Returns:
            List[ExperienceEntry]: One entry per detected role, in document order.
                Empty list if the section is empty.
        """
        if self.extraction_method == "rule":
            return self._rule_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for ExperienceExtractor."
        )

    def _rule_extract(self) -> List[ExperienceEntry]:
        entries = []
        for chunk in self._chunk_lines(self._inject_entry_breaks(self.lines)):
            heading = self._normalize_heading(self._strip_bullet(chunk[0]))
            bullets = [bullet for bullet in map(self._strip_bullet, chunk[1:]) if bullet]

            if not heading and bullets:
                # Bare glyph where the role should be: promote the first bullet
                heading = self._normalize_heading(bullets[0])
                bullets = bullets[1:]

            if heading or bullets:
                entries.append(ExperienceEntry(heading=heading, bullets=bullets))
        return entries

    def _looks_like_heading(self, line: str) -> bool:
        """
        A heading is not a bullet, not a "Label:" descriptor, and mentions a
        month or a year or is a short line starting with a capital letter.
        """
        if self._is_bullet(line):
            return False

        cleaned = self._strip_bullet(line)
        if not cleaned or self.DESCRIPTOR_REGEX.match(cleaned):
            return False

        return bool(
            self.MONTH_REGEX.search(cleaned)
            or self.YEAR_REGEX.search(cleaned)
            or (len(cleaned.split()) <= self.MAX_HEADING_WORDS and cleaned[0].isupper())
        )

    def _inject_entry_breaks(self, lines: List[str]) -> List[str]:
        """
        Insert a blank line ahead of every heading-like line that directly
        follows non-bullet content, so each role becomes its own chunk.
        Repeated blank lines collapse to one.

        Example:
            >>> extractor._inject_entry_breaks(["Acme, 2019", "Engineer", "- Built x", "Globex, 2017"])
            ['Acme, 2019', '', 'Engineer', '- Built x', 'Globex, 2017']
        """
        result: List[str] = []
        previous_was_break = True
        last_content_was_bullet = False

        for line in lines:
            trimmed = (line or "").strip()
            if not trimmed:
                if not previous_was_break:
                    result.append("")
                previous_was_break = True
                continue

            if (
                not previous_was_break
                and not last_content_was_bullet
                and self._looks_like_heading(trimmed)
            ):
                result.append("")

            result.append(trimmed)
            previous_was_break = False
            last_content_was_bullet = self._is_bullet(trimmed)

        return result

    @staticmethod
    def _normalize_heading(value: Optional[str]) -> Optional[str]:
        """Expand camel-case boundaries ("SeniorEngineer" -> "Senior Engineer") and collapse spaces."""
        if not value:
            return None
        expanded = re.sub(r"([a-z])([A-Z])", r"\1 \2", value)
        return re.sub(r"\s+", " ", expanded).strip() or None
