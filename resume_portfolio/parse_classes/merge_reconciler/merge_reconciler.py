"""merge_reconciler.py
Reconciles the deterministic extraction result with a candidate proposed by
the external analyzer.
"""
import copy
import re
from dataclasses import replace
from typing import Any, Dict, List, Optional, Union

from resume_portfolio.models import (
    Contact,
    EducationEntry,
    ExperienceEntry,
    Portfolio,
    ProjectEntry,
    SocialLink,
)
from resume_portfolio.parse_classes.field_extractor.helper_functions.dedupe import (
    dedupe_case_insensitive
)
from resume_portfolio.parse_classes.field_extractor.helper_functions.social_links import (
    label_for_social_link,
    normalize_social_url,
)
from resume_portfolio.parse_classes.field_extractor.helper_functions.summary_filter import (
    clean_summary_lines
)
from resume_portfolio.parse_classes.merge_reconciler.helpers.candidate_schema import (
    CandidateContact,
    CandidateEducation,
    CandidateExperience,
    CandidateProject,
    ResumeCandidate,
)

HEADING_SEPARATOR = " · "
PERIOD_SEPARATOR = " – "


def merge_structured_data(
    base: Portfolio,
    candidate: Optional[Union[ResumeCandidate, Dict[str, Any]]],
) -> Portfolio:
    """
    Overlay the external analyzer's candidate on top of the base Portfolio.

    For every field the candidate's value wins only if it coerces to a
    non-empty value; otherwise the base value is kept. Structured lists
    (experience, education, projects) are replaced wholesale, never merged
    element by element.

    Args:
        base (Portfolio): Deterministic extraction result.
        candidate (ResumeCandidate | dict | None): Candidate from the analyzer.
            Raw dicts are validated (and coerced) into a ResumeCandidate.

    Returns:
        Portfolio: A new Portfolio that shares no list with `base`. `base`
            itself is returned when there is no candidate.
    """
    if candidate is None:
        return base
    if not isinstance(candidate, ResumeCandidate):
        candidate = ResumeCandidate.model_validate(candidate)

    base = copy.deepcopy(base)
    name = candidate.name or base.name
    contact = merge_contact(base.contact, candidate.contact)

    return replace(
        base,
        name=name,
        contact=contact,
        summary=_merge_summary(base.summary, candidate.summary, contact, name),
        experience=normalize_experience(candidate.experience) or base.experience,
        education=normalize_education(candidate.education) or base.education,
        skills=dedupe_case_insensitive(candidate.skills) or base.skills,
        projects=normalize_projects(candidate.projects) or base.projects,
        achievements=list(candidate.achievements) or base.achievements,
    )


def merge_contact(base: Contact, candidate: Optional[CandidateContact]) -> Contact:
    """
    Field-by-field contact override. URLs are normalized the same way as
    links found in the document; candidate links replace the base links only
    when there is at least one usable link.
    """
    if candidate is None:
        return base

    website = normalize_social_url(candidate.website) or base.website
    links = _normalize_links(candidate) or base.links

    return Contact(
        email=candidate.email or base.email,
        phone=candidate.phone or base.phone,
        location=candidate.location or base.location,
        website=website,
        linkedin=normalize_social_url(candidate.linkedin) or base.linkedin,
        github=normalize_social_url(candidate.github) or base.github,
        links=[link for link in links if link.url != website],
    )


def _normalize_links(candidate: CandidateContact) -> List[SocialLink]:
    links: List[SocialLink] = []
    seen = set()
    for link in candidate.links:
        url = normalize_social_url(link.url)
        if not url or url in seen:
            continue
        seen.add(url)
        links.append(SocialLink(
            url=url,
            label=link.label or label_for_social_link(link.type or "Link", url),
            type=link.type or "Link",
        ))
    return links


def normalize_experience(entries: List[CandidateExperience]) -> List[ExperienceEntry]:
    """
    `{role, company, start, end, highlights}` -> `{heading, bullets}`.

    Example:
        role="PM", company="Acme", start="2019", end="2024"
        -> heading "PM · Acme · 2019 – 2024"
    """
    normalized = []
    for entry in entries:
        period = PERIOD_SEPARATOR.join(part for part in [entry.start, entry.end] if part)
        heading = HEADING_SEPARATOR.join(
            part for part in [entry.role, entry.company, period] if part
        ) or None

        if heading or entry.highlights:
            normalized.append(ExperienceEntry(heading=heading, bullets=list(entry.highlights)))
    return normalized


def normalize_education(entries: List[CandidateEducation]) -> List[EducationEntry]:
    """`{institution, degree, years, details}` -> `{heading, details}` (years first in details)."""
    normalized = []
    for entry in entries:
        heading = HEADING_SEPARATOR.join(
            part for part in [entry.institution, entry.degree] if part
        ) or None
        details = [detail for detail in [entry.years, *entry.details] if detail]

        if heading or details:
            normalized.append(EducationEntry(heading=heading, details=details))
    return normalized


def normalize_projects(entries: List[CandidateProject]) -> List[ProjectEntry]:
    """Projects keep their shape; a missing description falls back to the joined details."""
    normalized = []
    for entry in entries:
        details = list(entry.details)
        description = entry.description or (" ".join(details) if details else None)

        if entry.name or description or details:
            normalized.append(ProjectEntry(name=entry.name, description=description, details=details))
    return normalized


def _merge_summary(
    base_summary: Optional[str],
    candidate_summary: Optional[str],
    contact: Contact,
    name: Optional[str] = None,
) -> Optional[str]:
    """
    Adopt the candidate summary after stripping any contact (or name) lines
    it echoed back. Uses the same filter as SummaryExtractor.
    """
    if not candidate_summary:
        return base_summary

    kept = clean_summary_lines(re.split(r"\n+", candidate_summary), contact, name)
    return " ".join(kept) or candidate_summary
