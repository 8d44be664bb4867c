"""test_resume_parse_framework.py
Run tests on ResumeParserFramework
"""
import pytest

from resume_portfolio.exceptions import (
    FileOpenError,
    FileTooLargeError,
    ResumeValidationError,
    UnsupportedFormatError,
)
from resume_portfolio.models import AnalysisRecord, ExperienceEntry, Portfolio
from resume_portfolio.parse_classes.field_extractor.name_extractor import NameExtractor
from resume_portfolio.parse_classes.resume_parse_framework import (
    NOT_A_RESUME_MESSAGE,
    ResumeParserFramework,
)
from resume_portfolio.parse_classes.merge_reconciler.helpers.candidate_schema import (
    AnalyzerResponse
)
from resume_portfolio.test_helpers.dummy_variables.dummy_resumes import (
    BROCHURE_TEXT,
    JANE_DOE_RESUME_TEXT,
    MOCK_RESUME_GENERATOR_1,
)
from resume_portfolio.test_helpers.file_parsing import (
    DOCX_MIME_TYPE,
    assert_text_is_readable,
    build_docx_bytes,
    build_pdf_bytes,
)

# Base-14 PDF fonts only cover Latin-1
JANE_DOE_PDF_TEXT = JANE_DOE_RESUME_TEXT.replace("—", "-")


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "<REPLACE_ME>")


@pytest.fixture
def framework() -> ResumeParserFramework:
    return ResumeParserFramework()


# ---------------------------------------------------------------------
# HEURISTICS ONLY
# ---------------------------------------------------------------------
class TestHeuristicsOnly:

    def test_jane_doe_text(self, framework):
        portfolio = framework.parse_resume(JANE_DOE_RESUME_TEXT.encode("utf-8"), "text/plain")

        assert isinstance(portfolio, Portfolio)
        assert portfolio.name == "Jane Doe"
        assert portfolio.contact.email == "jane.doe@example.com"
        assert portfolio.contact.phone == "555-123-4567"
        assert portfolio.summary == "Product manager with 8 years of experience."
        assert portfolio.experience == [
            ExperienceEntry(
                heading="Acme Corp — Senior Product Manager (2019-2024)",
                bullets=["Led a team of 8"],
            )
        ]
        assert portfolio.skills == ["Product Strategy", "Figma", "SQL"]

        metadata = portfolio.metadata
        assert metadata.raw_text == JANE_DOE_RESUME_TEXT
        assert metadata.mime_type == "text/plain"
        assert metadata.heuristics.is_likely is True
        assert metadata.heuristics.section_hits == ["experience", "skills"]
        assert metadata.llm == AnalysisRecord(used=False, reason=metadata.heuristics.reason)

    def test_text_subtype_is_accepted(self, framework):
        portfolio = framework.parse_resume(JANE_DOE_RESUME_TEXT.encode("utf-8"), "text/markdown")
        assert portfolio.name == "Jane Doe"
        assert portfolio.metadata.mime_type == "text/markdown"

    def test_brochure_is_rejected(self, framework):
        with pytest.raises(ResumeValidationError) as e:
            framework.parse_resume(BROCHURE_TEXT.encode("utf-8"), "text/plain")

        assert e.value.message == NOT_A_RESUME_MESSAGE
        assert e.value.heuristics.is_likely is False
        assert e.value.heuristics.reason == "Could not find enough resume clues (keywords: none)."
        assert "analysis" not in e.value.details

    @pytest.mark.parametrize("text", ["", "   \n\n"])
    def test_empty_document_is_rejected(self, framework, text):
        with pytest.raises(ResumeValidationError):
            framework.parse_text(text)

    def test_unsupported_mime_type(self, framework):
        with pytest.raises(UnsupportedFormatError) as e:
            framework.parse_resume(b"PK\x03\x04", "application/zip")
        assert "Unsupported file type" in str(e.value)

    def test_file_too_large(self):
        framework = ResumeParserFramework(max_file_size_mb=0.001)
        with pytest.raises(FileTooLargeError):
            framework.parse_resume(b"a" * 2048, "text/plain")

    def test_corrupt_pdf(self, framework):
        with pytest.raises(FileOpenError):
            framework.parse_resume(b"definitely not a pdf document", "application/pdf")

    def test_parsing_is_pure(self, framework):
        data = JANE_DOE_RESUME_TEXT.encode("utf-8")
        assert framework.parse_resume(data, "text/plain") == framework.parse_resume(data, "text/plain")

    def test_independent_documents_do_not_leak(self, framework):
        carlos = framework.parse_text(MOCK_RESUME_GENERATOR_1.generate())
        jane = framework.parse_text(JANE_DOE_RESUME_TEXT)
        assert carlos.name == "Carlos Mendez"
        assert jane.name == "Jane Doe"
        assert jane.contact.website is None

    def test_pdf_document(self, framework):
        portfolio = framework.parse_resume(build_pdf_bytes([JANE_DOE_PDF_TEXT]), "application/pdf")

        assert_text_is_readable(portfolio.metadata.raw_text)
        assert portfolio.name == "Jane Doe"
        assert portfolio.contact.email == "jane.doe@example.com"
        assert portfolio.skills == ["Product Strategy", "Figma", "SQL"]
        assert portfolio.metadata.mime_type == "application/pdf"

    def test_docx_document(self, framework):
        paragraphs = JANE_DOE_RESUME_TEXT.strip().split("\n")
        portfolio = framework.parse_resume(build_docx_bytes(paragraphs), DOCX_MIME_TYPE)

        assert_text_is_readable(portfolio.metadata.raw_text)
        assert portfolio.name == "Jane Doe"
        assert portfolio.contact.phone == "555-123-4567"
        assert portfolio.summary == "Product manager with 8 years of experience."
        assert portfolio.skills == ["Product Strategy", "Figma", "SQL"]

    def test_custom_extractor_map(self):
        framework = ResumeParserFramework(extractor_map={"name": [NameExtractor()]})
        portfolio = framework.parse_text(JANE_DOE_RESUME_TEXT)
        assert portfolio.name == "Jane Doe"
        assert portfolio.skills == []

    def test_invalid_extractor_map(self):
        with pytest.raises(TypeError):
            ResumeParserFramework(extractor_map={"name": ["not an extractor"]})

    def test_invalid_analyzer(self):
        with pytest.raises(TypeError):
            ResumeParserFramework(external_analyzer="not-an-analyzer")


# ---------------------------------------------------------------------
# WITH EXTERNAL ANALYZER (mock LLM responses)
# ---------------------------------------------------------------------
@pytest.mark.usefixtures("no_api_key")
class TestWithExternalAnalyzer:

    def test_success_is_merged(self, mock_analyzer_factory):
        analyzer = mock_analyzer_factory("success")
        portfolio = ResumeParserFramework(external_analyzer=analyzer).parse_text(JANE_DOE_RESUME_TEXT)

        assert portfolio.contact.website == "https://janedoe.dev"
        assert portfolio.contact.linkedin == "https://linkedin.com/in/janedoe"
        assert portfolio.contact.location == "Austin, TX"
        assert portfolio.summary == "Product manager with 8 years of experience."
        assert portfolio.experience[0].heading == "Senior Product Manager · Acme Corp · 2019 – 2024"
        assert portfolio.education[0].heading == "State University · B.S. Computer Science"
        assert portfolio.achievements == ["Product of the Year 2022", "Speaker at PMConf"]

        assert portfolio.metadata.llm == AnalysisRecord(
            used=True,
            model=analyzer.llm_client.model,
            confidence=0.92,
            reason="Contains work history, education and a skills list.",
        )
        assert portfolio.metadata.heuristics.is_likely is True

    def test_analyzer_rejection(self, mock_analyzer_factory):
        framework = ResumeParserFramework(external_analyzer=mock_analyzer_factory("not_resume"))

        with pytest.raises(ResumeValidationError) as e:
            framework.parse_text(JANE_DOE_RESUME_TEXT)

        assert e.value.message == "The document is a product brochure."
        assert isinstance(e.value.details["analysis"], AnalyzerResponse)
        assert e.value.heuristics.is_likely is True

    def test_analyzer_overrides_unlikely_heuristics(self, mock_analyzer_factory):
        framework = ResumeParserFramework(external_analyzer=mock_analyzer_factory("success"))
        portfolio = framework.parse_text(BROCHURE_TEXT)

        assert portfolio.metadata.heuristics.is_likely is False
        assert portfolio.name == "Jane Doe"
        assert portfolio.metadata.llm.used is True

    def test_failed_analysis_falls_back_to_heuristics(self, mock_analyzer_factory):
        framework = ResumeParserFramework(external_analyzer=mock_analyzer_factory("not_json"))
        with pytest.warns(UserWarning):
            portfolio = framework.parse_text(JANE_DOE_RESUME_TEXT)

        assert portfolio.name == "Jane Doe"
        assert portfolio.contact.website is None
        assert portfolio.metadata.llm.used is False

    def test_failed_analysis_of_brochure_is_not_rejected(self, mock_analyzer_factory):
        framework = ResumeParserFramework(external_analyzer=mock_analyzer_factory("not_json"))
        with pytest.warns(UserWarning):
            portfolio = framework.parse_text(BROCHURE_TEXT)
        assert portfolio.metadata.heuristics.is_likely is False
        assert portfolio.metadata.llm.used is False

    def test_unexpected_json_keeps_base(self, mock_analyzer_factory):
        framework = ResumeParserFramework(external_analyzer=mock_analyzer_factory("unexpected_json"))
        portfolio = framework.parse_text(JANE_DOE_RESUME_TEXT)

        assert portfolio.name == "Jane Doe"
        assert portfolio.skills == ["Product Strategy", "Figma", "SQL"]
        assert portfolio.metadata.llm.used is True
        assert portfolio.metadata.llm.confidence is None
