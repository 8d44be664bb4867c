"""summary_extractor.py
Extracts the summary paragraph from the "summary" section.
"""
from typing import Optional

from resume_portfolio.exceptions import FieldExtractionError
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.field_extractor.helper_functions.summary_filter import (
    clean_summary_lines
)


class SummaryExtractor(FieldExtractor):
    """
    Extracts the candidate's summary.

    Everything before the first recognized heading lands in the summary
    section, which usually includes the name and contact lines. Those are
    filtered out using the previously extracted `contact` and `name`.

    Supports:
        - 'rule': Filter contact lines, join the rest with single spaces.
    """

    FIELD_NAME = "summary"
    SOURCE_SECTION = "summary"
    REQUIRED_CONTEXT = ["contact", "name"]

    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    def extract(self) -> str:
        """
        Returns:
            str: The summary paragraph.

        Raises:
            FieldExtractionError: If nothing but contact lines remain.
        """
        if self.extraction_method == "rule":
            summary = self._rule_extract()
        else:
            raise NotImplementedError(
                f"Extraction method '{self.extraction_method}' is not implemented for SummaryExtractor."
            )

        if not summary:
            raise FieldExtractionError(
                field_name="summary",
                message="No summary text left after removing contact lines",
                lines=self.lines,
            )
        return summary

    def _rule_extract(self) -> Optional[str]:
        kept = clean_summary_lines(
            self.lines,
            contact=self.context.get("contact"),
            name=self.context.get("name"),
        )
        return " ".join(kept) or None
