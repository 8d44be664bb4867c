"""text_parser.py

Holds PlainTextParser class.
"""
from resume_portfolio.parse_classes.file_parser.file_parser import FileParser


class PlainTextParser(FileParser):
    """
    Concrete parser for any ``text/*`` document.

    Bytes are decoded as UTF-8 (a leading byte order mark is dropped);
    undecodable bytes are replaced rather than rejected.
    """

    SUPPORTED_MIME_TYPES = ["text/*"]

    def parse(self) -> str:
        return bytes(self.file_bytes).decode("utf-8-sig", errors="replace")
