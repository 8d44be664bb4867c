"""test_resume_extractor.py
Test ResumeExtractor orchestration (fallbacks, context, section routing).
"""
import pytest

from resume_portfolio.models import Contact, ExperienceEntry, Portfolio
from resume_portfolio.parse_classes.file_parser.helpers.chunk_text import normalize_lines
from resume_portfolio.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_portfolio.parse_classes.field_extractor.name_extractor import NameExtractor
from resume_portfolio.parse_classes.field_extractor.skills_extractor import SkillsExtractor
from resume_portfolio.parse_classes.resume_extractor.resume_extractor import ResumeExtractor

from resume_portfolio.test_helpers.dummy_classes import (
    ContextEchoExtractor,
    DummyExtractor,
    FailingExtractor,
)
from resume_portfolio.test_helpers.dummy_variables.dummy_resumes import (
    JANE_DOE_RESUME_TEXT,
    MOCK_RESUME_GENERATOR_0,
)


def build_extractor(text: str, extractor_map=None) -> ResumeExtractor:
    lines = normalize_lines(text)
    sections = SectionSegmenter(lines).segment()
    return ResumeExtractor(lines=lines, sections=sections, extractor_map=extractor_map)


class TestResumeExtractor:

    def test_default_map_on_jane_doe(self):
        portfolio = build_extractor(JANE_DOE_RESUME_TEXT).extract()

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
        assert portfolio.education == []
        assert portfolio.projects == []
        assert portfolio.achievements == []
        assert portfolio.metadata is None

    def test_invalid_lines_raise(self):
        with pytest.raises(TypeError):
            ResumeExtractor(lines="Jane Doe")

    def test_fallback_to_next_extractor(self):
        extractor_map = {
            "name": [FailingExtractor(), NameExtractor(extraction_method="rule")],
        }
        portfolio = build_extractor(JANE_DOE_RESUME_TEXT, extractor_map).extract()
        assert portfolio.name == "Jane Doe"

    def test_all_extractors_fail_gives_default(self):
        extractor_map = {"name": [FailingExtractor()], "skills": [SkillsExtractor()]}
        portfolio = build_extractor("Just one line", extractor_map).extract()
        assert portfolio.name is None
        assert portfolio.skills == []
        assert portfolio.contact == Contact()

    def test_context_is_passed_in_order(self):
        extractor_map = {
            "name": [NameExtractor(extraction_method="rule")],
            "summary": [ContextEchoExtractor()],
        }
        portfolio = build_extractor(JANE_DOE_RESUME_TEXT, extractor_map).extract()
        assert portfolio.summary == "name=Jane Doe"

    def test_missing_context_is_none(self):
        portfolio = build_extractor(JANE_DOE_RESUME_TEXT, {"summary": [ContextEchoExtractor()]}).extract()
        assert portfolio.summary == "name=None"

    def test_section_lines_are_routed(self):
        extractor = build_extractor(JANE_DOE_RESUME_TEXT)
        assert extractor._lines_for(DummyExtractor()) == ["Product Strategy, Figma, SQL", ""]
        assert extractor._lines_for(NameExtractor()) == extractor.lines

    def test_missing_section_gives_no_lines(self):
        extractor = ResumeExtractor(lines=["Jane Doe"], sections={})
        assert extractor._lines_for(SkillsExtractor()) == []
        assert extractor.extract().skills == []

    def test_extractor_map_is_not_mutated(self):
        name_extractor = NameExtractor(extraction_method="rule")
        skills_extractor = SkillsExtractor()
        extractor_map = {"name": [name_extractor], "skills": [skills_extractor]}

        build_extractor(JANE_DOE_RESUME_TEXT, extractor_map).extract()
        build_extractor(MOCK_RESUME_GENERATOR_0.generate(), extractor_map).extract()

        assert extractor_map == {"name": [name_extractor], "skills": [skills_extractor]}
        assert name_extractor.lines == []
        assert skills_extractor.lines == []
        assert name_extractor.context == {}

    def test_shared_map_gives_independent_results(self):
        extractor_map = {"name": [NameExtractor(extraction_method="rule")]}
        first = build_extractor(JANE_DOE_RESUME_TEXT, extractor_map).extract()
        second = build_extractor(MOCK_RESUME_GENERATOR_0.generate(), extractor_map).extract()
        assert (first.name, second.name) == ("Jane Doe", "John Doe")

    def test_returns_portfolio(self):
        assert isinstance(build_extractor(JANE_DOE_RESUME_TEXT, {}).extract(), Portfolio)
