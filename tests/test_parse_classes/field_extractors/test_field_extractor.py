"""test_field_extractor.py
Test the abstract FieldExtractor class
"""

import pytest

from resume_portfolio.parse_classes.field_extractor.field_extractor import (
    FieldExtractor,
    COMMON_REGEX,
)

from resume_portfolio.test_helpers.dummy_classes import DummyExtractor


class TestFieldExtractorInit:
    """Comprehensive tests for FieldExtractor base class and its error handling."""
    # ----------------------
    # Initialization & config tests
    # ----------------------
    def test_cannot_instantiate_directly(self):
        """Ensure abstract FieldExtractor cannot be instantiated directly."""
        with pytest.raises(TypeError):
            FieldExtractor([])

    def test_default_extraction_method_is_used(self):
        """Default extraction_method should be 'regex' when not specified."""
        extractor = DummyExtractor(["text"])
        assert extractor.extraction_method == "regex"

    def test_valid_extraction_method(self):
        """Ensure that a valid extraction method is accepted and set correctly."""
        extractor = DummyExtractor(extraction_method="rule")
        assert extractor.extraction_method == "rule"

    def test_unsupported_extraction_method_raises(self):
        """Providing an unsupported extraction method raises NotImplementedError."""
        with pytest.raises(NotImplementedError):
            DummyExtractor(extraction_method="caps")

    def test_missing_supported_methods_raises(self, monkeypatch):
        """A subclass with no SUPPORTED_EXTRACTION_METHODS defined raises ValueError."""
        monkeypatch.setattr(DummyExtractor, "SUPPORTED_EXTRACTION_METHODS", [])
        with pytest.raises(ValueError):
            DummyExtractor()

    def test_defaults(self):
        extractor = DummyExtractor()
        assert extractor.lines == []
        assert extractor.context == {}
        assert extractor.FIELD_NAME == "skills"
        assert extractor.SOURCE_SECTION == "skills"


class TestFieldExtractorLineValidation:
    """`extract` is wrapped so invalid lines fail before any work is done."""

    def test_valid_lines_extract(self):
        assert DummyExtractor(["Python"]).extract() == ["dummy"]

    def test_empty_lines_are_valid(self):
        assert DummyExtractor([]).extract() == ["dummy"]

    def test_lines_not_a_list_raises(self):
        extractor = DummyExtractor()
        extractor.lines = "Python, SQL"
        with pytest.raises(TypeError):
            extractor.extract()

    def test_non_string_line_raises(self):
        with pytest.raises(TypeError):
            DummyExtractor(["Python", None]).extract()


class TestFieldExtractorHelpers:

    @pytest.mark.parametrize("line,expected", [
        ("• Led a team", "Led a team"),
        ("  - - Built x  ", "Built x"),
        ("◦", ""),
        ("Plain line", "Plain line"),
        (None, ""),
    ])
    def test_strip_bullet(self, line, expected):
        assert DummyExtractor()._strip_bullet(line) == expected

    @pytest.mark.parametrize("line,expected", [
        ("• Led a team", True),
        ("  - Built x", True),
        ("●", True),
        ("Acme Corp", False),
        ("", False),
    ])
    def test_is_bullet(self, line, expected):
        assert DummyExtractor()._is_bullet(line) is expected

    def test_chunk_lines_defaults_to_self_lines(self):
        extractor = DummyExtractor(["A", "", "B", "C"])
        assert extractor._chunk_lines() == [["A"], ["B", "C"]]
        assert extractor._chunk_lines(["X"]) == [["X"]]

    def test_regex_search_first(self):
        extractor = DummyExtractor(["no email here", "Reach me: JANE@EXAMPLE.COM", "x@y.io"])
        assert extractor._regex_search_first(COMMON_REGEX["email_address"]) == "JANE@EXAMPLE.COM"
        assert extractor._regex_search_first(r"\d{3}") is None


@pytest.mark.parametrize("text", [
    "+1 123-456-7890",
    "(123) 456-7890",
    "123 456 7890",
    "12345 67890",
])
def test_common_phone_regex(text):
    import re
    assert re.search(COMMON_REGEX["phone_number"], f"Phone: {text}").group(0).strip() == text
