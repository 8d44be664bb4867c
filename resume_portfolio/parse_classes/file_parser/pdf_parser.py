"""pdf_parser.py

Holds PDFParser class.
"""
import pymupdf

from resume_portfolio.exceptions import FileOpenError

from resume_portfolio.parse_classes.file_parser.file_parser import FileParser

class PDFParser(FileParser):
    """
    Concrete parser for PDF documents.

    This class extends the abstract ``FileParser`` and uses PyMuPDF to extract
    textual content from an in-memory PDF, page by page.

    Attributes:
        SUPPORTED_MIME_TYPES (List[str]): MIME types supported by this parser
            (only ``application/pdf``).
    """
    SUPPORTED_MIME_TYPES = ["application/pdf"]

    def parse(self) -> str:
        """
        Opens the PDF using PyMuPDF, combines all pages, and returns the text.

        Returns:
            str: Full text inside the pdf (pages separated by newlines).

        Raises:
            FileOpenError: If the PDF cannot be opened by PyMuPDF.
        """
        try:
            doc = pymupdf.open(stream=bytes(self.file_bytes), filetype="pdf")
        except Exception as e:
            raise FileOpenError(self.mime_type, str(e))

        full_text = ""
        for page_number in range(doc.page_count):
            page = doc.load_page(page_number)
            full_text += page.get_text("text") + "\n"

        doc.close()

        return full_text
