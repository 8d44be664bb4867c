"""contact_extractor.py
Extracts email, phone, location and profile links from the resume header.
"""
import re
from typing import Optional, List

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.models import Contact

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.field_extractor.helper_functions.social_links import (
    SocialLinkCollector
)


class ContactExtractor(FieldExtractor):
    """
    Extracts the candidate's contact details from the first lines of a resume.

    Supports:
        - 'regex': Pattern-based extraction using COMMON_REGEX and SOCIAL_PATTERNS.

    Never raises for missing values: every field of the returned Contact is
    optional and `links` may be empty.
    """

    FIELD_NAME = "contact"
    SOURCE_SECTION = None

    SUPPORTED_EXTRACTION_METHODS = ["regex"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    # "Jane Doe Email: x Phone: y" -> ["Jane Doe ", "Email: x ", "Phone: y"]
    SEGMENT_KEYWORD_REGEX = re.compile(
        r"\b(E-mail|Email|Phone|Mobile|LinkedIn|Github|Portfolio|Website|Contact|www|http|tel)\b",
        re.IGNORECASE,
    )
    LEADING_KEYWORD_REGEX = re.compile(
        r"^(e-mail|email|phone|mobile|contact|linkedin|github|portfolio|website|www|http|tel)[:\s-]*",
        re.IGNORECASE,
    )
    LOCATION_LABEL_REGEX = re.compile(r"^location\s*[:\-]?\s*", re.IGNORECASE)
    BASED_IN_MARKER = " based in "

    def __init__(self, *args, scan_line_limit: int = PARSER_DEFAULTS.HEADER_SCAN_LINES, **kwargs):
        super().__init__(*args, **kwargs)
        self.scan_line_limit = scan_line_limit

    def extract(self) -> Contact:
        """
        Extract contact details from the header lines.

        Returns:
            Contact: Contact details (fields are None when not found).

        Raises:
            NotImplementedError: If extraction method is unsupported.
        """
        if self.extraction_method == "regex":
            return self._regex_extract()
        raise NotImplementedError(
            f"Extraction method '{self.extraction_method}' is not implemented for ContactExtractor."
        )

    def _regex_extract(self) -> Contact:
        """
        Scan each header line once. The first email / phone / location found
        wins; links are accumulated (unique by normalized URL) from both the
        individual contact segments and the whole line.
        """
        email: Optional[str] = None
        phone: Optional[str] = None
        location: Optional[str] = None
        collector = SocialLinkCollector()

        for line in self.lines[:self.scan_line_limit]:
            cleaned = re.sub(r"\s+", " ", line or "").strip()
            if not cleaned:
                continue

            if email is None:
                match = re.search(self.COMMON_REGEX["email_address"], cleaned, re.IGNORECASE)
                if match:
                    email = match.group(0)

            if phone is None:
                match = re.search(self.COMMON_REGEX["phone_number"], cleaned)
                if match:
                    phone = match.group(0).strip()

            for segment in self.split_contact_segments(cleaned):
                if location is None:
                    location = self._match_location(segment)
                collector.collect(self.LEADING_KEYWORD_REGEX.sub("", segment, count=1), first_only=True)

            collector.collect(cleaned)

        return Contact(
            email=email,
            phone=phone,
            location=location,
            website=collector.website,
            linkedin=collector.linkedin,
            github=collector.github,
            links=collector.other_links(),
        )

    @classmethod
    def split_contact_segments(cls, line: str) -> List[str]:
        """
        Split a header line into segments, starting a new segment at every
        contact keyword.

        Example:
            >>> ContactExtractor.split_contact_segments("Jane Doe Email: jane@x.com Phone: 555")
            ['Jane Doe', 'Email: jane@x.com', 'Phone: 555']
        """
        marked = cls.SEGMENT_KEYWORD_REGEX.sub(lambda m: f"|{m.group(0)}", line)
        return [segment.strip() for segment in marked.split("|") if segment.strip()]

    def _match_location(self, segment: str) -> Optional[str]:
        """Return the location held by a "Location: ..." / "... based in ..." segment."""
        lower = segment.lower()
        if lower.startswith("location"):
            value = self.LOCATION_LABEL_REGEX.sub("", segment, count=1)
        elif self.BASED_IN_MARKER in lower:
            value = segment[lower.index(self.BASED_IN_MARKER) + len(self.BASED_IN_MARKER):]
        else:
            return None
        return value.strip(" ,;:-") or None
