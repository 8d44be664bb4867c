"""resume_parse_framework.py
Holds framework to orchestrate operation of FileParser(), SectionSegmenter(),
ResumeExtractor(), ResumeLikelihoodScorer() and ExternalAnalyzer() and
return a Portfolio.
"""
from dataclasses import replace
from typing import Optional, Dict, List

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.exceptions import ResumeValidationError
from resume_portfolio.logging import LoggerFactory
from resume_portfolio.models import AnalysisRecord, Portfolio, PortfolioMetadata

from resume_portfolio.parse_classes.file_parser.helpers.check_mime_type import check_mime_type
from resume_portfolio.parse_classes.file_parser.helpers.chunk_text import normalize_lines
from resume_portfolio.parse_classes.file_parser.pdf_parser import PDFParser
from resume_portfolio.parse_classes.file_parser.word_document_parser import WordDocumentParser
from resume_portfolio.parse_classes.file_parser.text_parser import PlainTextParser

from resume_portfolio.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.resume_extractor.helpers.extractor_map import (
    verify_extractor_map,
    build_default_extractor_map,
)
from resume_portfolio.parse_classes.resume_extractor.resume_extractor import ResumeExtractor
from resume_portfolio.parse_classes.likelihood_scorer.likelihood_scorer import ResumeLikelihoodScorer
from resume_portfolio.parse_classes.external_analyzer.external_analyzer import ExternalAnalyzer
from resume_portfolio.parse_classes.merge_reconciler.merge_reconciler import merge_structured_data

logger_factory = LoggerFactory()
logger = logger_factory.get_logger(name="resume_parse_framework", console=False)

NOT_A_RESUME_MESSAGE = (
    "We couldn't detect typical resume details. Please upload a resume in PDF, DOC, or DOCX format."
)
ANALYZER_REJECTED_MESSAGE = "The external analyzer determined that this document is not a resume."


class ResumeParserFramework:
    """
    Orchestrates the complete resume parsing process, from raw bytes to a Portfolio.

    Pipeline:
        1. ``FileParser`` (:class:`PDFParser`, :class:`WordDocumentParser`,
           :class:`PlainTextParser`) turns the bytes into text.
        2. ``normalize_lines`` + :class:`SectionSegmenter` split the text into sections.
        3. :class:`ResumeExtractor` runs the field extractors (base result).
        4. :class:`ResumeLikelihoodScorer` decides whether the text looks like a resume.
        5. :class:`ExternalAnalyzer` (optional) gives a verdict and a candidate.
        6. ``merge_structured_data`` overlays the candidate on the base result.

    The framework holds no per-parse state, so one instance can serve
    concurrent parses of independent documents.

    Parameters
    ----------
    external_analyzer : ExternalAnalyzer, optional
        Analyzer used for a second opinion. When None (or not configured),
        parsing is heuristics only and unlikely documents are rejected.
    max_file_size_mb : float, optional
        The maximum file size (in megabytes) allowed for parsing.
        Defaults to ``PARSER_DEFAULTS.MAX_FILE_SIZE_MB``.
    extractor_map : dict[str, list[FieldExtractor]], optional
        A mapping of field names to lists of extractor instances used by the
        :class:`ResumeExtractor`. Enables multiple strategies for each field.

    Example
    -------
    >>> framework = ResumeParserFramework()
    >>> with open("resume.pdf", "rb") as f:
    ...     portfolio = framework.parse_resume(f.read(), "application/pdf")
    """

    MIME_TYPE_PARSER_MAP = {
        "application/pdf": PDFParser,
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document": WordDocumentParser,
        "application/msword": WordDocumentParser,
        "text/*": PlainTextParser,
    }

    def __init__(
        self,
        external_analyzer: Optional[ExternalAnalyzer] = None,
        max_file_size_mb: Optional[float] = PARSER_DEFAULTS.MAX_FILE_SIZE_MB,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
    ):
        """
        Initialize the ResumeParserFramework.

        Args:
            external_analyzer (ExternalAnalyzer | None): Optional analyzer.
            max_file_size_mb (float | None): Maximum allowed file size in MB.
            extractor_map (dict[str, list[FieldExtractor]] | None): Optional map of
                field names to extractor instances.
        """
        if external_analyzer is not None and not isinstance(external_analyzer, ExternalAnalyzer):
            raise TypeError("Provided external_analyzer must be an instance of ExternalAnalyzer.")
        self.external_analyzer = external_analyzer
        self.max_file_size_mb = max_file_size_mb

        if extractor_map is not None:
            # Verify that passed extractor_map is valid
            verify_extractor_map(extractor_map)
        else:
            extractor_map = build_default_extractor_map()
        self.extractor_map = extractor_map

    @property
    def analyzer_configured(self) -> bool:
        return self.external_analyzer is not None and self.external_analyzer.is_configured

    def parse_resume(self, file_bytes: bytes, mime_type: str) -> Portfolio:
        """
        Full pipeline: decode bytes → extract structured data → return ``Portfolio``.

        Args:
            file_bytes (bytes): Raw document bytes.
            mime_type (str): Declared MIME type (PDF, Word or any ``text/*``).

        Returns:
            Portfolio: Structured data with metadata (raw text, heuristics,
                analyzer record).

        Raises:
            UnsupportedFormatError: If no FileParser supports `mime_type`.
            FileParserError: If the document is too large or cannot be opened.
            ResumeValidationError: If the document does not look like a resume.
        """
        text = self._extract_text(file_bytes, mime_type)
        return self.parse_text(text, mime_type=mime_type)

    def parse_text(self, text: str, mime_type: Optional[str] = "text/plain") -> Portfolio:
        """
        Run the pipeline on already extracted text.

        Raises:
            ResumeValidationError: If heuristics say "not likely" and no analyzer
                is configured, or the analyzer explicitly says "not a resume".
        """
        text = text or ""
        lines = normalize_lines(text)
        sections = SectionSegmenter(lines).segment()

        base = ResumeExtractor(
            lines=lines,
            sections=sections,
            extractor_map=self.extractor_map,
        ).extract()

        heuristics = ResumeLikelihoodScorer(text=text, sections=sections, name=base.name).score()

        if not heuristics.is_likely and not self.analyzer_configured:
            logger.info(f"Rejected document ({mime_type}): {heuristics.reason}")
            raise ResumeValidationError(NOT_A_RESUME_MESSAGE, {"heuristics": heuristics})

        analysis = self.external_analyzer.analyze(text) if self.analyzer_configured else None

        if analysis is not None and analysis.is_resume is False:
            logger.info(f"External analyzer rejected document ({mime_type}): {analysis.reason}")
            raise ResumeValidationError(
                analysis.reason or ANALYZER_REJECTED_MESSAGE,
                {"heuristics": heuristics, "analysis": analysis},
            )

        portfolio = merge_structured_data(base, analysis.candidate if analysis else None)

        if analysis is not None:
            llm_record = AnalysisRecord(
                used=True,
                model=self.external_analyzer.model,
                confidence=analysis.confidence,
                reason=analysis.reason,
            )
        else:
            llm_record = AnalysisRecord(used=False, reason=heuristics.reason)

        return replace(
            portfolio,
            metadata=PortfolioMetadata(
                raw_text=text,
                mime_type=mime_type,
                heuristics=heuristics,
                llm=llm_record,
            ),
        )

    def _extract_text(self, file_bytes: bytes, mime_type: str) -> str:
        """
        Internal helper that selects and executes the appropriate ``FileParser`` subclass.

        Raises:
            UnsupportedFormatError: From check_mime_type if `mime_type` is not in
                self.MIME_TYPE_PARSER_MAP
        """
        matched_mime_type = check_mime_type(
            mime_type=mime_type,
            supported_mime_types=self.MIME_TYPE_PARSER_MAP.keys(),
        )
        parser_class = self.MIME_TYPE_PARSER_MAP[matched_mime_type]

        parser = parser_class(
            file_bytes=file_bytes,
            mime_type=mime_type,
            max_file_size_mb=self.max_file_size_mb,
        )
        return parser.parse()
