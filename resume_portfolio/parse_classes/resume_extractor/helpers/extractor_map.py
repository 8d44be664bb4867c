"""extractor_map.py
Builds the "extractor_map" dictionary utilized by ResumeExtractor
to determine which extraction steps are run.
"""
from dataclasses import fields
from typing import List, Dict, Optional

from resume_portfolio.exceptions import ExtractorMapConfigError
from resume_portfolio.models import Portfolio

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.field_extractor.name_extractor import NameExtractor
from resume_portfolio.parse_classes.field_extractor.contact_extractor import ContactExtractor
from resume_portfolio.parse_classes.field_extractor.summary_extractor import SummaryExtractor
from resume_portfolio.parse_classes.field_extractor.experience_extractor import ExperienceExtractor
from resume_portfolio.parse_classes.field_extractor.education_extractor import EducationExtractor
from resume_portfolio.parse_classes.field_extractor.skills_extractor import SkillsExtractor
from resume_portfolio.parse_classes.field_extractor.project_extractor import ProjectExtractor
from resume_portfolio.parse_classes.field_extractor.achievements_extractor import (
    AchievementsExtractor
)

# Portfolio fields an extractor can fill (metadata is added by the framework)
EXTRACTABLE_FIELDS = [f.name for f in fields(Portfolio) if f.name != "metadata"]


def build_default_extractor_map(lines: Optional[List[str]] = None) -> Dict[str, List[FieldExtractor]]:
    """
    Builds the default extractor map used by the resume parsing pipeline
    (i.e. ResumeExtractor).

    This map defines which extractor classes should handle each field type.
    Each field can have multiple extractors (tried in order), and each
    extractor entry can specify an `extraction_method` override.

    Fields are listed in extraction order: `summary` needs the `name` and
    `contact` values extracted before it.

    Args:
        lines (Optional[List[str]], default=None):
            Lines to pre-load into every extractor. ResumeExtractor replaces
            them with the proper document/section lines at extraction time.

    Returns:
        dict:
            Mapping of field names -> list of extractor instances.

    Example:
        {
            "name": [
                NameExtractor(extraction_method="rule"),
                NameExtractor(extraction_method="caps")
            ],
            "contact": [ContactExtractor()],
            ...
        }
    """
    default_extractor_classes_map = {
        "name": [
            {"model": NameExtractor, "extraction_method": "rule"},
            {"model": NameExtractor, "extraction_method": "caps"},
        ],
        "contact": [
            {"model": ContactExtractor, "extraction_method": None}
        ],
        "summary": [
            {"model": SummaryExtractor, "extraction_method": None}
        ],
        "experience": [
            {"model": ExperienceExtractor, "extraction_method": None}
        ],
        "education": [
            {"model": EducationExtractor, "extraction_method": None}
        ],
        "skills": [
            {"model": SkillsExtractor, "extraction_method": None}
        ],
        "projects": [
            {"model": ProjectExtractor, "extraction_method": None}
        ],
        "achievements": [
            {"model": AchievementsExtractor, "extraction_method": None}
        ],
    }

    # Instantiate extractors
    extractor_map = {}
    for field, entries in default_extractor_classes_map.items():
        extractor_map[field] = []
        for entry in entries:
            model_cls = entry["model"]
            extraction_method = entry.get("extraction_method") or model_cls.DEFAULT_EXTRACTION_METHOD
            extractor_map[field].append(model_cls(lines=lines, extraction_method=extraction_method))

    # Verify
    verify_extractor_map(extractor_map)

    return extractor_map


def verify_extractor_map(
    extractor_map: Optional[Dict[str, List[FieldExtractor]]]
):
    """
    Verifies the format and content of the extractor map.

    Args:
        extractor_map (Dict[str, List[FieldExtractor]]):
            Maps field names to extract to a list of extractor instances to try in order
            if the subsequent instance fails.

    This method performs validation checks on the extractor_map dictionary to ensure:
    1. The extractor_map is a dictionary
    2. All keys (fields) are strings naming an extractable Portfolio field
    3. All values are lists
    4. All items in the lists are FieldExtractor instances

    Raises:
        TypeError: If any of the following conditions are not met:
            - extractor_map is not a dictionary
            - field names are not strings
            - values are not lists
            - items in lists are not FieldExtractor instances
        ExtractorMapConfigError: If a field name is not an extractable Portfolio field.
    """
    # Verification step: check format of extractor_map
    if not isinstance(extractor_map, dict):
        raise TypeError(
            f"extractor_map must be a dictionary, got {type(extractor_map).__name__}"
        )
    for field, extractors in extractor_map.items():
        if not isinstance(field, str):
            raise TypeError(
                f"Field names in extractor_map must be strings, got {type(field).__name__}"
            )
        if field not in EXTRACTABLE_FIELDS:
            raise ExtractorMapConfigError(
                f"Unknown field '{field}'. Choices are: {EXTRACTABLE_FIELDS}"
            )
        if not isinstance(extractors, list):
            raise TypeError(
                f"Value for field '{field}' must be a list, got {type(extractors).__name__}"
            )
        for extractor in extractors:
            if not isinstance(extractor, FieldExtractor):
                raise TypeError(
                    f"All items in extractor list for field '{field}' must be "
                    f"FieldExtractor instances, got {type(extractor).__name__}"
                )
