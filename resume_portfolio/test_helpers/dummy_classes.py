"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from typing import List

from resume_portfolio.parse_classes.field_extractor.field_extractor import FieldExtractor
from resume_portfolio.parse_classes.file_parser.file_parser import FileParser


# Dummy subclass for testing where needed
class DummyExtractor(FieldExtractor):
    """A dummy FieldExtractor subclass for testing."""
    FIELD_NAME = "skills"
    SOURCE_SECTION = "skills"
    SUPPORTED_EXTRACTION_METHODS = ["regex", "rule"]
    DEFAULT_EXTRACTION_METHOD = "regex"

    def extract(self) -> List[str]:
        # Minimal implementation for testing
        return ["dummy"]


class FailingExtractor(FieldExtractor):
    """Always raises, to exercise ResumeExtractor fallbacks."""
    FIELD_NAME = "name"
    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    def extract(self):
        raise RuntimeError("extraction blew up")


class ContextEchoExtractor(FieldExtractor):
    """Returns whatever context it was handed (REQUIRED_CONTEXT plumbing)."""
    FIELD_NAME = "summary"
    SOURCE_SECTION = "summary"
    REQUIRED_CONTEXT = ["name"]
    SUPPORTED_EXTRACTION_METHODS = ["rule"]
    DEFAULT_EXTRACTION_METHOD = "rule"

    def extract(self) -> str:
        return f"name={self.context.get('name')}"


# DummyTxtParser to test FileParser validation with
class DummyTxtParser(FileParser):
    """Simple subclass of FileParser to test _validate_file logic."""
    SUPPORTED_MIME_TYPES = ["text/plain"]

    def parse(self) -> str:
        return ""
