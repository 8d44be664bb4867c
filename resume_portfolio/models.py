"""models.py
Holds standardized data models used across various functions.

Every model is a frozen dataclass: a Portfolio is built once per parse call
and is never mutated afterwards. Use `dataclasses.replace()` to derive a
modified copy.
"""
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field, asdict

# Maps canonical section name -> ordered lines ("" marks a blank line)
SectionMap = Dict[str, List[str]]


@dataclass(frozen=True)
class SocialLink:
    """
    A profile or website link discovered in (or supplied for) the contact block.

    Attributes:
        url (str): Normalized URL (always carries a scheme).
        label (str): Display label, e.g. "LinkedIn" or "janedoe.dev".
        type (Optional[str]): Pattern family that produced the link
            ("LinkedIn", "GitHub", "Portfolio" or "Link").
    """
    url: str
    label: str
    type: Optional[str] = None


@dataclass(frozen=True)
class Contact:
    """
    Contact details for the resume's owner.

    `links` holds every discovered link except the one chosen as `website`.
    """
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    links: List[SocialLink] = field(default_factory=list)


@dataclass(frozen=True)
class ExperienceEntry:
    heading: Optional[str] = None
    bullets: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class EducationEntry:
    heading: Optional[str] = None
    details: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProjectEntry:
    name: Optional[str] = None
    description: Optional[str] = None
    details: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ResumeHeuristics:
    """
    Result of the deterministic "is this a resume?" check.

    Attributes:
        is_likely (bool): Final verdict.
        score (float): Weighted score rounded to 3 decimals. Can exceed 1.0.
        matched_keywords (List[str]): Resume keywords found in the text, in
            keyword-list order.
        section_hits (List[str]): Non-summary sections that received content.
        reason (str): Human-readable explanation of the verdict.
    """
    is_likely: bool
    score: float
    matched_keywords: List[str] = field(default_factory=list)
    section_hits: List[str] = field(default_factory=list)
    reason: str = ""


@dataclass(frozen=True)
class AnalysisRecord:
    """Records whether (and how) the external analyzer contributed to a Portfolio."""
    used: bool = False
    model: Optional[str] = None
    confidence: Optional[float] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class PortfolioMetadata:
    raw_text: str = ""
    mime_type: Optional[str] = None
    heuristics: Optional[ResumeHeuristics] = None
    llm: AnalysisRecord = field(default_factory=AnalysisRecord)


@dataclass(frozen=True)
class Portfolio:
    """
    Stores structured information extracted from a resume.

    Attributes:
        name (Optional[str]): Full name of the individual represented by the resume.
        contact (Contact): Email, phone, location and links.
        summary (Optional[str]): Summary paragraph with contact lines removed.
        experience (List[ExperienceEntry]): One entry per role.
        education (List[EducationEntry]): One entry per institution.
        skills (List[str]): Skills, deduplicated case-insensitively.
        projects (List[ProjectEntry]): One entry per project.
        achievements (List[str]): Awards and accomplishments.
        metadata (Optional[PortfolioMetadata]): Raw text, heuristics and
            analysis record. Filled in by ResumeParserFramework.
    """
    name: Optional[str] = None
    contact: Contact = field(default_factory=Contact)
    summary: Optional[str] = None
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)
    metadata: Optional[PortfolioMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the Portfolio as plain (JSON serializable) python types."""
        return asdict(self)
