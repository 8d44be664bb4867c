"""name_extractor.py
Utilizes abstract FieldExtractor to parse a name out of the top of a resume.
"""
import math
import re
from typing import Optional, List

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.exceptions import FieldExtractionError

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.section_segmenter.helpers.heading_aliases import (
    HEADING_KEYWORDS
)


class NameExtractor(FieldExtractor):
    """
    Extracts the candidate's name from the first lines of a resume.

    Supports:
        - 'rule': The first header line that reads like a personal name
            (2-6 name-like words, mostly capitalized, no contact details).
        - 'caps': The first ALL-CAPS line that is not a section heading
            (fallback for resumes that shout their name).
    """

    FIELD_NAME = "name"
    SOURCE_SECTION = None

    SUPPORTED_EXTRACTION_METHODS = ["rule", "caps"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    # A contact keyword ends the name portion of a line ("Jane Doe Email: ...")
    CONTACT_TOKEN_REGEX = re.compile(
        r"\b(?:e-mail|email|mail|phone|mobile|contact|linkedin|github|portfolio|website|www|https?|tel)\b",
        re.IGNORECASE,
    )
    SEPARATOR_REGEX = re.compile(r"[|•·]")
    NAME_WORD_REGEX = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ'`.-]+$")
    ALL_CAPS_REGEX = re.compile(r"^[A-Z'`\-\s]+$")

    MIN_NAME_WORDS = 2
    MAX_NAME_WORDS = 6

    def __init__(self, *args, scan_line_limit: int = PARSER_DEFAULTS.HEADER_SCAN_LINES, **kwargs):
        super().__init__(*args, **kwargs)
        self.scan_line_limit = scan_line_limit

    def extract(self) -> str:
        """
        Extract the name from the header lines using the chosen extraction method.

        Returns:
            str: The detected name.

        Raises:
            NotImplementedError: If extraction method is unsupported.
            FieldExtractionError: If no name could be extracted.
        """
        if self.extraction_method == "rule":
            name = self._rule_extract()
        elif self.extraction_method == "caps":
            name = self._caps_extract()
        else:
            raise NotImplementedError(
                f"Extraction method '{self.extraction_method}' is not implemented for NameExtractor."
            )

        if not name:
            raise FieldExtractionError(
                field_name="name",
                message=(
                    f"Could not extract a name from the resume using the "
                    f"`{self.extraction_method}` extraction method."
                ),
                lines=self._header_lines(),
            )
        return name

    def _header_lines(self) -> List[str]:
        return self.lines[:self.scan_line_limit]

    # -------------------
    # Rule extraction
    # -------------------
    def _rule_extract(self) -> Optional[str]:
        """
        Return the first header line that passes `_clean_name_candidate`.

        Section headings are skipped. When a line carries contact details after
        the name (e.g. "Jane Doe | Email: jane@x.com"), only the text before the
        first contact keyword is considered.
        """
        for line in self._header_lines():
            trimmed = (line or "").strip()
            if not trimmed or trimmed.lower() in HEADING_KEYWORDS:
                continue

            candidate = self._clean_name_candidate(trimmed)
            if candidate:
                return candidate

        return None

    def _clean_name_candidate(self, line: str) -> Optional[str]:
        """
        Turn a header line into a name, or None if it does not read like one.

        Example:
            >>> extractor._clean_name_candidate("Jane Doe · Email: jane@x.com")
            'Jane Doe'
        """
        working = line
        match = self.CONTACT_TOKEN_REGEX.search(working)
        if match and match.start() > 0:
            working = working[:match.start()]

        working = self.SEPARATOR_REGEX.sub(" ", working)
        working = re.sub(r"\s+", " ", working).strip()
        if not working:
            return None

        if "@" in working or re.search(self.COMMON_REGEX["url"], working, re.IGNORECASE):
            return None

        words = working.split(" ")
        if not self.MIN_NAME_WORDS <= len(words) <= self.MAX_NAME_WORDS:
            return None

        cleaned_words = [re.sub(r"[.,]", "", word) for word in words]
        if not all(word and self.NAME_WORD_REGEX.match(word) for word in cleaned_words):
            return None

        capitalized = sum(1 for word in cleaned_words if word[0] == word[0].upper())
        if capitalized < math.ceil(len(cleaned_words) / 2):
            return None

        return " ".join(cleaned_words)

    # -------------------
    # Caps extraction
    # -------------------
    def _caps_extract(self) -> Optional[str]:
        """Return the first ALL-CAPS header line (verbatim, trimmed) that is not a heading."""
        for line in self._header_lines():
            trimmed = (line or "").strip()
            if not trimmed or not re.search(r"[A-Z]", trimmed):
                continue
            if trimmed.lower() in HEADING_KEYWORDS:
                continue
            if self.ALL_CAPS_REGEX.match(trimmed):
                return trimmed
        return None
