"""likelihood_scorer.py
Deterministic "does this look like a resume?" check.
"""
import re
from typing import List, Optional

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.models import ResumeHeuristics, SectionMap
from resume_portfolio.parse_classes.field_extractor.field_extractor import COMMON_REGEX


class ResumeLikelihoodScorer:
    """
    Scores raw resume text without any external service.

    score = 0.4 * (matched keywords / 7)
          + 0.2 * min(bullet lines / 6, 1)
          + 0.4 * min(non-summary sections with content / 3, 1)
          + 0.2 if an email address is present
          + 0.1 if a phone number is present
          + 0.1 if a name was extracted

    The weights can add up to more than 1.0; the score is rounded to three
    decimals and never clamped.

    A document is a likely resume when the score reaches the threshold, or at
    least 3 keywords match, or at least 2 sections have content.

    Attributes:
        text (str): Raw document text.
        sections (SectionMap): Output of the SectionSegmenter.
        name (Optional[str]): Name extracted from the document (if any).
        threshold (float): Score needed to count as a resume.
    """

    RESUME_KEYWORDS = [
        "experience",
        "education",
        "skills",
        "summary",
        "employment",
        "professional",
        "portfolio",
    ]
    BULLET_LINE_REGEX = re.compile(r"\n[•*\-]")

    KEYWORD_WEIGHT = 0.4
    BULLET_WEIGHT = 0.2
    SECTION_WEIGHT = 0.4
    EMAIL_WEIGHT = 0.2
    PHONE_WEIGHT = 0.1
    NAME_WEIGHT = 0.1

    BULLET_SATURATION = 6
    SECTION_SATURATION = 3
    MIN_KEYWORD_MATCHES = 3
    MIN_SECTION_HITS = 2

    def __init__(
        self,
        text: Optional[str],
        sections: SectionMap,
        name: Optional[str] = None,
        threshold: float = PARSER_DEFAULTS.LIKELIHOOD_THRESHOLD,
    ):
        self.text = text or ""
        self.sections = sections or {}
        self.name = name
        self.threshold = threshold

    def score(self) -> ResumeHeuristics:
        """
        Compute the heuristic verdict.

        Returns:
            ResumeHeuristics: Verdict, score, matched keywords, sections with
                content and a human-readable reason.
        """
        lower_text = self.text.lower()
        matched_keywords = [keyword for keyword in self.RESUME_KEYWORDS if keyword in lower_text]
        section_hits = self._section_hits()
        bullet_count = len(self.BULLET_LINE_REGEX.findall(self.text))

        has_email = bool(re.search(COMMON_REGEX["email_address"], self.text, re.IGNORECASE))
        has_phone = bool(re.search(COMMON_REGEX["phone_number"], self.text))

        score = (
            len(matched_keywords) / len(self.RESUME_KEYWORDS) * self.KEYWORD_WEIGHT
            + min(bullet_count / self.BULLET_SATURATION, 1) * self.BULLET_WEIGHT
            + min(len(section_hits) / self.SECTION_SATURATION, 1) * self.SECTION_WEIGHT
            + (self.EMAIL_WEIGHT if has_email else 0)
            + (self.PHONE_WEIGHT if has_phone else 0)
            + (self.NAME_WEIGHT if self.name else 0)
        )
        score = round(score, 3)

        is_likely = (
            score >= self.threshold
            or len(matched_keywords) >= self.MIN_KEYWORD_MATCHES
            or len(section_hits) >= self.MIN_SECTION_HITS
        )

        return ResumeHeuristics(
            is_likely=is_likely,
            score=score,
            matched_keywords=matched_keywords,
            section_hits=section_hits,
            reason=self._build_reason(is_likely, matched_keywords, section_hits),
        )

    def _section_hits(self) -> List[str]:
        """Non-summary sections holding at least one non-blank line (section map order)."""
        return [
            section
            for section, lines in self.sections.items()
            if section != "summary" and any(line.strip() for line in lines)
        ]

    @staticmethod
    def _build_reason(is_likely: bool, matched_keywords: List[str], section_hits: List[str]) -> str:
        if is_likely:
            return f"Detected resume-like structure with sections: {', '.join(section_hits) or 'n/a'}"
        return f"Could not find enough resume clues (keywords: {', '.join(matched_keywords) or 'none'})."
