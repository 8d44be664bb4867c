"""dedupe.py
Case-insensitive, order preserving deduplication of string lists.
"""
from typing import Iterable, List


def dedupe_case_insensitive(items: Iterable[str]) -> List[str]:
    """
    Drop blank items and later case-insensitive repeats; the first-seen
    spelling and order are kept.

    Example:
        >>> dedupe_case_insensitive(["SQL", "sql", " Figma ", ""])
        ['SQL', 'Figma']
    """
    kept: List[str] = []
    seen = set()
    for item in items:
        value = (item or "").strip()
        if not value or value.lower() in seen:
            continue
        seen.add(value.lower())
        kept.append(value)
    return kept
