"""field_extractor.py
Holds abstract FieldExtractor class inherited by field-specific extractors.
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Literal, Dict, Any

from resume_portfolio.parse_classes.field_extractor.helper_functions.validate_line_list import (
    validate_line_list
)
from resume_portfolio.parse_classes.file_parser.helpers.chunk_text import chunk_by_blank_lines

# Define allowed extraction methods (if implemented)
EXTRACTION_METHODS = Literal[
    "regex",
    "rule",
    "caps",
]

# Define common regex queries that might be used in different extractors (and
# by the likelihood scorer / merge reconciler). Match with re.IGNORECASE.
COMMON_REGEX: Dict[str, str] = {
    # Email address: local@domain.tld
    "email_address": r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}",
    # Phone Number: Covers common phone formats:
    # -> `+1 123-456-7890`, `(123) 456-7890`, `123 456 7890`, `12345 67890`
    "phone_number": (
        r"(?:\+?\d{1,3}[\s-]?)?"                  # Optional country code
        r"(?:\(?\d{3}\)?[\s-]?\d{3}[\s-]?\d{4}"   # Grouped 10 digit number
        r"|\d{5}[\s-]?\d{5})"                     # 5+5 grouping
    ),
    # Any web address
    "url": r"(?:https?://|www\.)",
    # Leading bullet glyphs (and the whitespace around them)
    "bullet_prefix": r"^[-•●◦\s]+",
    # A line that starts with a bullet glyph
    "bullet_start": r"^[-•●◦]",
}


class FieldExtractor(ABC):
    """
    Abstract base class for extracting a specific field from a resume.
    Concrete extractors must implement the `extract` method.

    Every extractor works on an ordered list of lines. Which lines it gets is
    declared by `SOURCE_SECTION`:
        - None: every normalized line of the document (name, contact).
        - "<section>": the lines the SectionSegmenter put in that section.

    Extraction Methods:
        - regex: Uses regular expressions to identify patterns in text.
        - rule: Uses simple rule-based logic, keyword matching, or heuristics.
        - caps: Uses capitalization alone (fallback for names).
    """
    # Name of the Portfolio field this extractor fills (define in each child)
    FIELD_NAME: Optional[str] = None

    # Section whose lines are handed to the extractor (None = whole document)
    SOURCE_SECTION: Optional[str] = None

    # Previously extracted fields this extractor needs (filled into self.context)
    REQUIRED_CONTEXT: List[str] = []

    # Define supported methods and a default method in each subclass (define in each child)
    SUPPORTED_EXTRACTION_METHODS: List[str] = []
    DEFAULT_EXTRACTION_METHOD = None

    COMMON_REGEX: Dict[str, str] = COMMON_REGEX

    def __init__(
        self,
        lines: Optional[List[str]] = None,
        extraction_method: Optional[EXTRACTION_METHODS] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            lines (Optional[List[str]]): Lines to extract from.
            extraction_method (EXTRACTION_METHODS | None): Which extraction strategy to use.
                Defaults to the subclass's default method.
            context (Optional[Dict[str, Any]]): Values of previously extracted
                fields listed in `REQUIRED_CONTEXT` (e.g. {"contact": Contact(...)}).
        """
        self.lines: List[str] = lines if lines is not None else []
        self.extraction_method = extraction_method
        self.context: Dict[str, Any] = context or {}

        # Check that the current extraction method is valid (for subclass)
        self._validate_extraction_method()

    @staticmethod
    def _requires_valid_lines(func):
        """Decorator to ensure `self.lines` is a valid list of strings before execution."""
        def wrapper(self, *args, **kwargs):
            validate_line_list(self.lines)
            return func(self, *args, **kwargs)
        return wrapper

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "extract" in cls.__dict__:
            cls.extract = cls._requires_valid_lines(cls.extract)

    def _validate_extraction_method(self) -> None:
        """
        Validate and set the extraction method for the FieldExtractor instance.

        If no method is provided, it defaults to the class's
        `DEFAULT_EXTRACTION_METHOD`.

        Raises:
            NotImplementedError: If `extraction_method` is not in
                `SUPPORTED_EXTRACTION_METHODS`.
            ValueError: If no `SUPPORTED_EXTRACTION_METHODS` are defined in the
                subclass.
        """
        if self.extraction_method:
            if self.extraction_method not in self.SUPPORTED_EXTRACTION_METHODS:
                raise NotImplementedError(
                    f"Unsupported extraction_method '{self.extraction_method}' for {self.__class__.__name__}"
                )
        else:
            if not self.SUPPORTED_EXTRACTION_METHODS:
                raise ValueError(f"{self.__class__.__name__} must define SUPPORTED_EXTRACTION_METHODS")
            self.extraction_method = self.DEFAULT_EXTRACTION_METHOD

    @abstractmethod
    def extract(self) -> Any:
        """
        Extract the field from `self.lines` using the chosen `extraction_method`.

        List-valued fields return an empty list when nothing is found.
        Scalar fields raise FieldExtractionError so that the ResumeExtractor
        can fall back to the next extractor configured for the field.

        Returns:
            Any: The extracted field value.

        Raises:
            NotImplementedError: If the extraction method is not implemented.
            FieldExtractionError: If extraction fails (e.g., no value found).
            TypeError: If `self.lines` is not a list of strings.
        """
        pass

    # ----------------------
    # SHARED LINE HELPERS
    # ----------------------
    def _strip_bullet(self, line: str) -> str:
        """Remove leading bullet glyphs/whitespace and trailing whitespace."""
        return re.sub(self.COMMON_REGEX["bullet_prefix"], "", line or "").strip()

    def _is_bullet(self, line: str) -> bool:
        return bool(re.match(self.COMMON_REGEX["bullet_start"], (line or "").strip()))

    def _chunk_lines(self, lines: Optional[List[str]] = None) -> List[List[str]]:
        """Split `lines` (default `self.lines`) into blank-line separated chunks."""
        return chunk_by_blank_lines(self.lines if lines is None else lines)

    def _regex_search_first(
        self,
        pattern: str,
        lines: Optional[List[str]] = None,
        ignore_case: bool = True,
    ) -> Optional[str]:
        """
        Return the first match of `pattern` across `lines` (default `self.lines`),
        scanning line by line, or None if nothing matches.
        """
        flags = re.IGNORECASE if ignore_case else 0
        for line in self.lines if lines is None else lines:
            match = re.search(pattern, line or "", flags)
            if match:
                return match.group(0)
        return None
