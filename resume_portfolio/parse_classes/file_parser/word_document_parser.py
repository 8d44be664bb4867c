"""word_document_parser.py

Holds WordDocumentParser class using docx2txt for text extraction.
"""
import io

import docx2txt

from resume_portfolio.exceptions import FileOpenError
from resume_portfolio.parse_classes.file_parser.file_parser import FileParser


class WordDocumentParser(FileParser):
    """
    Concrete parser for Microsoft Word documents.

    This class extends the abstract ``FileParser`` and uses ``docx2txt`` to
    extract textual content (including from textboxes) from an in-memory
    document.

    Notes:
        Legacy ``application/msword`` uploads are accepted and routed here as
        well. Only Word-XML content can actually be decoded; a true binary
        ``.doc`` file raises ``FileOpenError``.

    Attributes:
        SUPPORTED_MIME_TYPES (List[str]): MIME types supported by this parser.
    """

    SUPPORTED_MIME_TYPES = [
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/msword",
    ]

    def parse(self) -> str:
        """
        Extracts all text content of the Word document.

        Returns:
            str: The raw extracted text.

        Raises:
            FileOpenError: If the Word document cannot be opened or read.
        """
        try:
            full_text = docx2txt.process(io.BytesIO(bytes(self.file_bytes)))
        except Exception as e:
            raise FileOpenError(self.mime_type, str(e))

        return (full_text or "").strip()
