"""chunk_text.py
Used to turn the continuous text output of a FileParser into ordered lines,
and ordered lines into blank-line separated chunks.
"""
import re
from typing import List, Optional

LINE_BREAK_REGEX = re.compile(r"\r?\n")


def normalize_lines(text: Optional[str]) -> List[str]:
    """
    Split raw document text into an ordered list of lines.

    Each line is right-trimmed. A line that repeats the previously kept line
    (case-insensitive exact match) is dropped, which removes the doubled
    lines PDF/OCR extraction sometimes produces. Non-consecutive repeats are
    kept. Blank lines are kept as empty strings because they separate chunks
    further down the pipeline.

    Args:
        text (str | None): Raw text produced by a FileParser.

    Returns:
        List[str]: Normalized lines. Empty input returns an empty list.
    """
    if not text:
        return []

    lines: List[str] = []
    previous: Optional[str] = None

    for raw_line in LINE_BREAK_REGEX.split(text):
        line = raw_line.rstrip()
        if previous is not None and line.lower() == previous.lower():
            continue
        lines.append(line)
        previous = line

    return lines


def chunk_by_blank_lines(lines: Optional[List[str]]) -> List[List[str]]:
    """
    Split lines into maximal runs of non-blank lines.

    Blank (or whitespace-only) lines only ever act as chunk boundaries; they
    never appear inside a chunk. Lines inside a chunk are stripped.

    Example:
        >>> chunk_by_blank_lines(["Acme", "- Led team", "", "", "Globex"])
        [['Acme', '- Led team'], ['Globex']]
    """
    chunks: List[List[str]] = []
    buffer: List[str] = []

    for line in lines or []:
        trimmed = (line or "").strip()
        if not trimmed:
            if buffer:
                chunks.append(buffer)
                buffer = []
            continue
        buffer.append(trimmed)

    if buffer:
        chunks.append(buffer)

    return chunks
