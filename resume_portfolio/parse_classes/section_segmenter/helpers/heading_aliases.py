"""heading_aliases.py
Declarative lookup tables used to recognize resume section headings.
"""
import re
from typing import Dict, List, Optional

# Canonical section name -> headings that introduce it (lower-case)
HEADING_ALIASES: Dict[str, List[str]] = {
    "summary": [
        "summary",
        "objective",
        "about",
        "professional summary",
        "profile",
        "career summary",
    ],
    "experience": [
        "experience",
        "work experience",
        "professional experience",
        "employment history",
        "career history",
        "work history",
        "professional background",
    ],
    "education": [
        "education",
        "academic background",
        "academics",
        "education & certifications",
    ],
    "skills": [
        "skills",
        "technical skills",
        "core competencies",
        "skills summary",
        "key skills",
        "skills & tools",
        "technical proficiencies",
    ],
    "projects": [
        "projects",
        "selected projects",
        "portfolio",
        "project highlights",
        "highlighted projects",
        "project experience",
        "project",
    ],
    "achievements": [
        "achievements",
        "accomplishments",
        "awards",
        "recognition",
        "distinctions",
        "achievement",
    ],
}

HEADING_LOOKUP: Dict[str, str] = {
    alias.lower(): canonical
    for canonical, aliases in HEADING_ALIASES.items()
    for alias in aliases
}

# Lines that are headings rather than content (never a candidate's name)
HEADING_KEYWORDS = frozenset(
    word.lower()
    for word in [
        *HEADING_ALIASES.keys(),
        *HEADING_LOOKUP.keys(),
        "contact",
    ]
)

# Leading bullet/arrow/dash glyphs and trailing colons/periods around a heading
HEADING_PREFIX_REGEX = re.compile(r"^[\s|·•●◦▶■□▪▫➤➔⮕⮞⮟\-–—]+")
HEADING_SUFFIX_REGEX = re.compile(r"[:.\s]+$")


def normalize_heading(line: Optional[str]) -> Optional[str]:
    """
    Return the canonical section name a heading line introduces, or None.

    Examples:
        >>> normalize_heading("  • Work Experience:")
        'experience'
        >>> normalize_heading("Recognitions")  # trailing "s" is also tried
        'achievements'
        >>> normalize_heading("Led a team of 8") is None
        True
    """
    if not line:
        return None

    sanitized = HEADING_SUFFIX_REGEX.sub("", HEADING_PREFIX_REGEX.sub("", line)).strip().lower()
    if not sanitized:
        return None

    if sanitized in HEADING_LOOKUP:
        return HEADING_LOOKUP[sanitized]

    if sanitized.endswith("s"):
        singular = sanitized[:-1]
        if singular in HEADING_LOOKUP:
            return HEADING_LOOKUP[singular]

    return None
