"""test_section_extractors.py
Run tests on the section based extractors (experience, education, projects,
achievements and summary).
"""
import pytest

from resume_portfolio.exceptions import FieldExtractionError
from resume_portfolio.models import (
    Contact,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    SocialLink,
)
from resume_portfolio.parse_classes.file_parser.helpers.chunk_text import normalize_lines
from resume_portfolio.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_portfolio.parse_classes.field_extractor.experience_extractor import ExperienceExtractor
from resume_portfolio.parse_classes.field_extractor.education_extractor import EducationExtractor
from resume_portfolio.parse_classes.field_extractor.project_extractor import ProjectExtractor
from resume_portfolio.parse_classes.field_extractor.achievements_extractor import (
    AchievementsExtractor
)
from resume_portfolio.parse_classes.field_extractor.summary_extractor import SummaryExtractor

from resume_portfolio.test_helpers.dummy_variables.dummy_resumes import (
    JANE_DOE_RESUME_TEXT,
    MOCK_RESUME_GENERATOR_0,
    MOCK_RESUME_GENERATOR_1,
    MOCK_RESUME_GENERATOR_2,
)


def sections_of(generator):
    return SectionSegmenter(normalize_lines(generator.generate())).segment()


SECTIONS_0 = sections_of(MOCK_RESUME_GENERATOR_0)
SECTIONS_1 = sections_of(MOCK_RESUME_GENERATOR_1)
SECTIONS_2 = sections_of(MOCK_RESUME_GENERATOR_2)


@pytest.mark.parametrize("extractor_class", [
    ExperienceExtractor,
    EducationExtractor,
    ProjectExtractor,
    AchievementsExtractor,
])
def test_list_extractors_return_empty_list_for_empty_section(extractor_class):
    assert extractor_class(lines=[]).extract() == []
    assert extractor_class(lines=["", ""]).extract() == []


@pytest.mark.parametrize("extractor_class", [
    ExperienceExtractor,
    EducationExtractor,
    ProjectExtractor,
    AchievementsExtractor,
    SummaryExtractor,
])
def test_section_extractors_only_support_rule(extractor_class):
    assert extractor_class().extraction_method == "rule"
    with pytest.raises(NotImplementedError):
        extractor_class(extraction_method="regex")


class TestExperienceExtractor:

    def test_jane_doe(self):
        sections = SectionSegmenter(normalize_lines(JANE_DOE_RESUME_TEXT)).segment()
        assert ExperienceExtractor(lines=sections["experience"]).extract() == [
            ExperienceEntry(
                heading="Acme Corp — Senior Product Manager (2019-2024)",
                bullets=["Led a team of 8"],
            )
        ]

    def test_resume_0_has_one_entry_per_role(self):
        entries = ExperienceExtractor(lines=SECTIONS_0["experience"]).extract()
        assert [entry.heading for entry in entries] == [
            "Data Scientist | Comcast | March 2021 - Present",
            "Analyst | Globex | June 2018 - February 2021",
        ]
        assert len(entries[0].bullets) == 2
        assert entries[1].bullets == ["Automated weekly reporting."]

    def test_heading_after_bullets_stays_in_the_same_chunk(self):
        entries = ExperienceExtractor(lines=SECTIONS_1["experience"]).extract()
        assert len(entries) == 1
        assert entries[0].heading == "Director of Product Management, Initrode, 2018 - 2024"
        assert entries[0].bullets[-1] == "Answered 60 tickets a day."

    def test_descriptor_lines_and_camel_case(self):
        entries = ExperienceExtractor(lines=SECTIONS_2["experience"]).extract()
        assert entries == [
            ExperienceEntry(
                heading="Senior Engineer at Hooli",
                bullets=["Tech stack: Python, Go", "Scaled the billing service"],
            )
        ]

    def test_date_line_after_title_starts_a_new_chunk(self):
        lines = ["Globex", "Jan 2017 - Dec 2018", "- Shipped v2"]
        entries = ExperienceExtractor(lines=lines).extract()
        assert entries == [
            ExperienceEntry(heading="Globex", bullets=[]),
            ExperienceEntry(heading="Jan 2017 - Dec 2018", bullets=["Shipped v2"]),
        ]

    def test_month_words_only_match_whole_words(self):
        extractor = ExperienceExtractor()
        assert extractor._looks_like_heading("march 2021") is True
        assert extractor._looks_like_heading("a summary of marketing outcomes in many regions worldwide") is False

    def test_bare_glyph_heading_promotes_first_bullet(self):
        entries = ExperienceExtractor(lines=["•", "• Acme Corp", "• Built x"]).extract()
        assert entries == [ExperienceEntry(heading="Acme Corp", bullets=["Built x"])]

    def test_inject_entry_breaks(self):
        extractor = ExperienceExtractor()
        assert extractor._inject_entry_breaks(["Acme, 2019", "Engineer", "- Built x", "Globex, 2017"]) == [
            "Acme, 2019", "", "Engineer", "- Built x", "Globex, 2017"
        ]
        assert extractor._inject_entry_breaks(["A", "", "", "B"]) == ["A", "", "B"]


class TestEducationExtractor:

    def test_resume_0(self):
        assert EducationExtractor(lines=SECTIONS_0["education"]).extract() == [
            EducationEntry(
                heading="San Diego State University",
                details=["M.S. Computer Science", "2016 - 2018"],
            )
        ]

    def test_resume_1_bullets_and_chunks(self):
        assert EducationExtractor(lines=SECTIONS_1["education"]).extract() == [
            EducationEntry(heading="The Collegiate School", details=["High school diploma"]),
            EducationEntry(heading="Richmond Community College", details=[]),
        ]


class TestProjectExtractor:

    def test_resume_0(self):
        projects = ProjectExtractor(lines=SECTIONS_0["projects"]).extract()
        assert projects == [
            ProjectEntry(
                name="h2oFiltration",
                description="Designed a water filtration system for rural schools",
                details=["Designed a water filtration system for rural schools"],
            ),
            ProjectEntry(
                name="ResumeBot",
                description="Parses resumes into portfolios Ships as a CLI",
                details=["Parses resumes into portfolios", "Ships as a CLI"],
            ),
        ]

    def test_name_only_project(self):
        assert ProjectExtractor(lines=SECTIONS_1["projects"]).extract() == [
            ProjectEntry(name="Community Garden App", description=None, details=[])
        ]

    def test_bullet_name_is_stripped(self):
        assert ProjectExtractor(lines=SECTIONS_2["projects"]).extract() == [
            ProjectEntry(name="Editor / Cultural Studies / San Antonio, TX", description=None, details=[])
        ]


class TestAchievementsExtractor:

    @pytest.mark.parametrize("sections,expected", [
        (SECTIONS_0, ["Grew annual revenue by 11%", "Speaker at PyData 2022"]),
        (SECTIONS_1, ["Employee of the Year"]),
        (SECTIONS_2, ["Dean's List"]),
    ])
    def test_generated_resumes(self, sections, expected):
        assert AchievementsExtractor(lines=sections["achievements"]).extract() == expected


class TestSummaryExtractor:

    def test_jane_doe(self):
        lines = normalize_lines(JANE_DOE_RESUME_TEXT)
        sections = SectionSegmenter(lines).segment()
        extractor = SummaryExtractor(
            lines=sections["summary"],
            context={
                "name": "Jane Doe",
                "contact": Contact(email="jane.doe@example.com", phone="555-123-4567"),
            },
        )
        assert extractor.extract() == "Product manager with 8 years of experience."

    def test_website_and_links_are_removed(self):
        contact = Contact(
            website="https://www.carlosmendez.io",
            links=[SocialLink(url="https://dribbble.com/carlos", label="Dribbble")],
        )
        extractor = SummaryExtractor(
            lines=[
                "Website: https://www.carlosmendez.io",
                "Shots at https://dribbble.com/carlos",
                "Customer support lead.",
                "Focused on resolutions.",
            ],
            context={"contact": contact, "name": None},
        )
        assert extractor.extract() == "Customer support lead. Focused on resolutions."

    def test_only_contact_lines_raises(self):
        extractor = SummaryExtractor(
            lines=["Jane Doe", "jane@example.com", "linkedin.com/in/jane"],
            context={"name": "Jane Doe"},
        )
        with pytest.raises(FieldExtractionError):
            extractor.extract()

    def test_works_without_context(self):
        assert SummaryExtractor(lines=["Curious engineer."]).extract() == "Curious engineer."
