"""test_validate_line_list.py
Test validate_line_list.
"""

import pytest

from resume_portfolio.parse_classes.field_extractor.helper_functions.validate_line_list import (
    validate_line_list
)


def test_valid_lists_pass():
    validate_line_list([])
    validate_line_list(["Jane Doe", ""])


@pytest.mark.parametrize("value", [None, "Jane Doe", ("a", "b"), {"a": 1}])
def test_non_list_raises(value):
    with pytest.raises(TypeError):
        validate_line_list(value)


def test_non_string_item_raises_with_index():
    with pytest.raises(TypeError, match=r"lines\[1\]"):
        validate_line_list(["ok", 3])
