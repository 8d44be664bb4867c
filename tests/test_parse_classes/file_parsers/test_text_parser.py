"""test_text_parser.py
Test suite for PlainTextParser.
"""

import pytest

from resume_portfolio.exceptions import UnsupportedFormatError
from resume_portfolio.parse_classes.file_parser.text_parser import PlainTextParser


class TestPlainTextParser:

    @pytest.mark.parametrize("mime_type", ["text/plain", "text/markdown", "TEXT/PLAIN; charset=utf-8"])
    def test_any_text_subtype_is_accepted(self, mime_type):
        assert PlainTextParser(b"Jane Doe", mime_type).parse() == "Jane Doe"

    def test_utf8_and_bom(self):
        raw = "\ufeffSøren Kierkegaard\nCopenhagen".encode("utf-8")
        assert PlainTextParser(raw, "text/plain").parse() == "Søren Kierkegaard\nCopenhagen"

    def test_invalid_bytes_are_replaced(self):
        text = PlainTextParser(b"Jane \xff Doe", "text/plain").parse()
        assert text == "Jane \ufffd Doe"

    def test_non_text_type_rejected(self):
        with pytest.raises(UnsupportedFormatError):
            PlainTextParser(b"Jane Doe", "application/json")
