"""summary_filter.py
Removes contact lines (email, phone, profile links...) from summary text.
"""
import re
from typing import List, Optional

from resume_portfolio.models import Contact
from resume_portfolio.parse_classes.field_extractor.field_extractor import COMMON_REGEX


def clean_summary_lines(
    lines: Optional[List[str]],
    contact: Optional[Contact] = None,
    name: Optional[str] = None,
) -> List[str]:
    """
    Drop every line that is contact information rather than summary prose.

    A line is dropped when it is blank, contains an email address or phone
    number, equals the email/phone/website/name, contains the website or a
    known link URL, or mentions linkedin.com / github.com.

    Args:
        lines (List[str] | None): Candidate summary lines.
        contact (Contact | None): Contact details to filter against.
        name (str | None): Candidate name to filter against.

    Returns:
        List[str]: Remaining lines, stripped, in their original order.
    """
    if not lines:
        return []

    contact = contact or Contact()
    blocked_values = {
        value.lower()
        for value in [contact.email, contact.phone, contact.website, name]
        if value
    }
    link_phrases = [
        url.lower() for url in [contact.website, *(link.url for link in contact.links)] if url
    ]

    kept = []
    for line in lines:
        trimmed = (line or "").strip()
        if not trimmed:
            continue
        lower = trimmed.lower()

        if (
            re.search(COMMON_REGEX["email_address"], trimmed, re.IGNORECASE)
            or re.search(COMMON_REGEX["phone_number"], trimmed)
        ):
            continue
        if lower in blocked_values:
            continue
        if any(phrase in lower for phrase in link_phrases):
            continue
        if "linkedin.com" in lower or "github.com" in lower:
            continue

        kept.append(trimmed)

    return kept
