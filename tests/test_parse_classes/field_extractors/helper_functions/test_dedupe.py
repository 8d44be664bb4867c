"""test_dedupe.py
Test dedupe_case_insensitive.
"""
import pytest

from resume_portfolio.parse_classes.field_extractor.helper_functions.dedupe import (
    dedupe_case_insensitive
)


@pytest.mark.parametrize("items,expected", [
    (["SQL", "sql", "Figma"], ["SQL", "Figma"]),
    ([" Go ", "go", "", "  ", "Rust"], ["Go", "Rust"]),
    ([], []),
    (iter(["a", "A", "b"]), ["a", "b"]),
])
def test_dedupe_case_insensitive(items, expected):
    assert dedupe_case_insensitive(items) == expected
