"""social_links.py
Pattern table and helpers for discovering profile links (LinkedIn, GitHub,
personal websites) in resume text.
"""
import re
from typing import Dict, List, Optional
from urllib.parse import urlparse

from resume_portfolio.models import SocialLink

# Checked in this order. The first LinkedIn/GitHub/Portfolio link found fills
# contact.linkedin / contact.github / contact.website respectively.
SOCIAL_PATTERNS = [
    {
        "type": "LinkedIn",
        "pattern": re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[A-Za-z0-9_/\-]+", re.IGNORECASE),
    },
    {
        "type": "GitHub",
        "pattern": re.compile(r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_/\-]+", re.IGNORECASE),
    },
    {
        "type": "Portfolio",
        "pattern": re.compile(r"(?:https?://|www\.)[A-Za-z0-9._~:/?#@!$&'()*+,;=-]+", re.IGNORECASE),
    },
]

SCHEME_REGEX = re.compile(r"^https?://", re.IGNORECASE)
# Words the URL patterns tend to swallow from "…/jane-doe Mobile: …" style lines
TRAILING_CONTACT_WORD_REGEX = re.compile(r"/?(?:mobile|phone|email)$", re.IGNORECASE)
TRAILING_PUNCTUATION_REGEX = re.compile(r"[.,;:!?]+$")

CONTACT_FIELD_BY_TYPE = {
    "LinkedIn": "linkedin",
    "GitHub": "github",
    "Portfolio": "website",
}


def normalize_social_url(url: Optional[str]) -> Optional[str]:
    """
    Normalize a discovered URL.

    - Surrounding whitespace and trailing punctuation are removed.
    - `https://` is prefixed when the URL has no scheme.
    - A trailing "mobile", "phone" or "email" word is stripped.

    Returns:
        Optional[str]: The normalized URL, or None for empty input.

    Example:
        >>> normalize_social_url("linkedin.com/in/jane-doe/mobile")
        'https://linkedin.com/in/jane-doe'
    """
    if not url:
        return None

    trimmed = TRAILING_PUNCTUATION_REGEX.sub("", url.strip())
    if not trimmed:
        return None

    if not SCHEME_REGEX.match(trimmed):
        trimmed = f"https://{trimmed}"

    return TRAILING_CONTACT_WORD_REGEX.sub("", trimmed) or None


def label_for_social_link(link_type: str, url: Optional[str]) -> str:
    """
    Build a display label for a link.

    Portfolio links are labelled with their host name (without `www.`);
    every other link is labelled with its type (e.g. "LinkedIn").
    """
    if not url or link_type != "Portfolio":
        return link_type

    hostname = urlparse(url).hostname
    if not hostname:
        return link_type
    return re.sub(r"^www\.", "", hostname)


class SocialLinkCollector:
    """
    Accumulates links in first-seen order, unique by normalized URL.

    Attributes:
        links (Dict[str, SocialLink]): Normalized URL -> SocialLink.
        website (Optional[str]): First Portfolio link found.
        linkedin (Optional[str]): First LinkedIn link found.
        github (Optional[str]): First GitHub link found.
    """

    def __init__(self):
        self.links: Dict[str, SocialLink] = {}
        self.website: Optional[str] = None
        self.linkedin: Optional[str] = None
        self.github: Optional[str] = None

    def collect(self, text: Optional[str], first_only: bool = False) -> None:
        """
        Run every pattern in SOCIAL_PATTERNS over `text`.

        Args:
            text (str | None): Text to search.
            first_only (bool): Only use the first match of each pattern
                (used for short contact segments).
        """
        if not text:
            return

        for entry in SOCIAL_PATTERNS:
            pattern = entry["pattern"]
            if first_only:
                match = pattern.search(text)
                matches = [match] if match else []
            else:
                matches = pattern.finditer(text)

            for match in matches:
                self.add(match.group(0), entry["type"])

    def add(self, raw_url: str, link_type: str) -> None:
        """Normalize `raw_url` and record it unless it was already seen."""
        normalized_url = normalize_social_url(raw_url)
        if not normalized_url or normalized_url in self.links:
            return

        self.links[normalized_url] = SocialLink(
            url=normalized_url,
            label=label_for_social_link(link_type, normalized_url),
            type=link_type,
        )

        contact_field = CONTACT_FIELD_BY_TYPE.get(link_type)
        if contact_field and getattr(self, contact_field) is None:
            setattr(self, contact_field, normalized_url)

    def other_links(self) -> List[SocialLink]:
        """Every collected link except the one used as the website."""
        return [link for url, link in self.links.items() if url != self.website]
