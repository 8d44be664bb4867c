"""resume_extractor.py
Utilizes FieldExtractor subclasses to extract Portfolio fields from the
normalized lines (and sections) of a resume.
"""
import copy
from typing import Any, List, Dict, Optional

from resume_portfolio.logging import LoggerFactory, running_under_pytest
from resume_portfolio.models import Portfolio, SectionMap

from resume_portfolio.parse_classes.field_extractor.helper_functions.validate_line_list import (
    validate_line_list
)
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor

from resume_portfolio.parse_classes.resume_extractor.helpers.extractor_map import (
    build_default_extractor_map,
)

# Load field extraction specific logger
logger_factory = LoggerFactory()
extractor_failure_logger = logger_factory.get_logger(
    name="extractor_failures",
    logger_type="extractor"
)

class ResumeExtractor:
    """
    Orchestrates extraction of resume fields using configurable field extractors.

    The extractor_map allows multiple "backup" extractors per field. If one
    extractor raises an exception or fails, the next in the list is attempted.

    Fields are extracted sequentially in extractor_map order. Each extractor
    receives either every line of the document or the lines of its
    `SOURCE_SECTION`, plus the already extracted values named in its
    `REQUIRED_CONTEXT`. The configured extractor instances are never mutated
    (each attempt runs on a shallow copy), so one extractor_map can be shared by
    concurrent parses.

    Attributes:
        lines (List[str]): Normalized lines of the whole document.
        sections (SectionMap): Output of the SectionSegmenter.
        extractor_map (Dict[str, List[FieldExtractor]]):
            Maps field names to extract to a list of extractor instances to try in order
            if the subsequent instance fails.
    """
    def __init__(
        self,
        lines: List[str],
        sections: Optional[SectionMap] = None,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
    ):
        """
        Args:
            lines (List[str]): Normalized resume lines (see `normalize_lines`).
            sections (Optional[SectionMap]): Sections of the resume. An empty
                map means every section-based extractor receives no lines.
            extractor_map (Optional[Dict[str, List[FieldExtractor]]]):
                Map of field names to lists of extractor instances. Each list represents
                fallback extractors to try if the previous one fails. If None, default
                instances of each extractor are created.

                Example:
                    {
                        "name": [NameExtractor(extraction_method="rule"), NameExtractor(extraction_method="caps")],
                        "skills": [SkillsExtractor()]
                    }
        """
        validate_line_list(lines)
        self.lines = lines
        self.sections = sections or {}

        if extractor_map is None:
            # Use default extractors if none provided
            extractor_map = build_default_extractor_map()

        # ExtractorMap should've been verified in ResumeParserFramework
        self.extractor_map = extractor_map

    def _lines_for(self, extractor: FieldExtractor) -> List[str]:
        """Return the lines an extractor works on (whole document or one section)."""
        if extractor.SOURCE_SECTION is None:
            return self.lines
        return list(self.sections.get(extractor.SOURCE_SECTION, []))

    def _extract_field_with_fallback(
        self,
        field_name: str,
        extracted: Dict[str, Any],
    ) -> Any:
        """
        Attempt to extract a single field using all configured extractors.

        Extraction is attempted in the order defined in self.extractor_map[field_name].
        - If an extractor succeeds, its value is returned immediately.
        - If all extractors fail, returns the default value from Portfolio.

        Logs extractor failures to the extractor-specific logger, unless running under pytest.

        Args:
            field_name (str): The field to extract (e.g., "name").
            extracted (Dict[str, Any]): Fields extracted so far (context source).

        Returns:
            Any: Extracted value, or default from Portfolio if all extractors fail.
        """
        extractors = self.extractor_map.get(field_name, [])

        for extractor in extractors:
            try:
                worker = copy.copy(extractor)
                worker.lines = self._lines_for(extractor)
                worker.context = {
                    key: extracted.get(key) for key in extractor.REQUIRED_CONTEXT
                }
                return worker.extract()
            except Exception as e:
                if not running_under_pytest():
                    extractor_failure_logger.warning(
                        f"Field '{field_name}' failed in extractor '{type(extractor).__name__}' "
                        f"({extractor.extraction_method}): {str(e)}"
                    )
                # Continue to next extractor

        # If all extraction attempts failed for this field then return Portfolio() default
        return getattr(Portfolio(), field_name)

    def extract(self) -> Portfolio:
        """
        Extract all fields outlined in self.extractor_map and return a Portfolio
        instance (without metadata).

        Returns:
            Portfolio: Object containing extracted fields.
        """
        extracted: Dict[str, Any] = {}
        for extraction_field in self.extractor_map:
            extracted[extraction_field] = self._extract_field_with_fallback(
                field_name=extraction_field,
                extracted=extracted,
            )

        return Portfolio(**extracted)
