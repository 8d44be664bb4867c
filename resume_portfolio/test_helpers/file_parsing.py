"""file_parsing.py
Helper functions to build in-memory documents for FileParser tests.
"""
import io
import zipfile
from typing import List
from xml.sax.saxutils import escape

import pymupdf

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def build_pdf_bytes(pages: List[str]) -> bytes:
    """
    Build a PDF in memory with one page per entry of `pages`.
    Stick to Latin-1 text (base-14 fonts).
    """
    doc = pymupdf.open()
    for page_text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), page_text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def build_docx_bytes(paragraphs: List[str]) -> bytes:
    """Build a minimal Word-XML (.docx) document in memory, one paragraph per entry."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{escape(paragraph)}</w:t></w:r></w:p>'
        for paragraph in paragraphs
    )
    document_xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{WORD_NAMESPACE}"><w:body>{body}</w:body></w:document>'
    )

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("word/document.xml", document_xml)
    return buffer.getvalue()


# Function to check readability of final text
def assert_text_is_readable(
    text: str,
    min_letter_ratio: float = 0.5,
    extra_allowed: str = "–—•◦·"  # add extra symbols commonly found in resumes
):
    """
    Assert that parsed text is readable.

    Checks performed:
        1. All characters are printable or whitespace (includes common resume symbols).
        2. At least a certain proportion of characters are alphabetic.

    Raises:
        AssertionError: If any of the checks fail, including a snippet of the offending text.
    """
    # 1. Printable characters (Unicode-aware)
    non_printable = [
        c for c in text
        if not (c.isprintable() or c.isspace() or c in extra_allowed)
    ]
    if non_printable:
        snippet = "".join(non_printable[:50])
        raise AssertionError(f"Parsed text contains unreadable characters: {snippet!r}")

    # 2. Sufficient letters
    letters = sum(c.isalpha() for c in text)
    total_chars = len(text) if len(text) > 0 else 1
    ratio = letters / total_chars
    if ratio < min_letter_ratio:
        snippet = text[:100]
        raise AssertionError(
            f"Parsed text seems gibberish (letter ratio {ratio:.2f} < {min_letter_ratio}): {snippet!r}"
        )
