"""candidate_schema.py
Pydantic models for the (untrusted) response of the external resume analyzer.

Every field is coerced before validation, so a malformed field degrades to
"absent" instead of failing the whole response.
"""
from typing import Annotated, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from resume_portfolio.parse_classes.merge_reconciler.helpers.coercion import (
    coerce_bool,
    coerce_dict,
    coerce_dict_list,
    coerce_link_list,
    coerce_number,
    coerce_string,
    coerce_string_list,
)

LooseString = Annotated[Optional[str], BeforeValidator(coerce_string)]
LooseStringList = Annotated[List[str], BeforeValidator(coerce_string_list)]


class CandidateModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class CandidateLink(CandidateModel):
    url: str
    label: LooseString = None
    type: LooseString = None


class CandidateContact(CandidateModel):
    email: LooseString = None
    phone: LooseString = None
    location: LooseString = None
    website: LooseString = None
    linkedin: LooseString = None
    github: LooseString = None
    links: Annotated[List[CandidateLink], BeforeValidator(coerce_link_list)] = Field(default_factory=list)


class CandidateExperience(CandidateModel):
    role: LooseString = None
    company: LooseString = None
    start: LooseString = None
    end: LooseString = None
    highlights: LooseStringList = Field(default_factory=list)


class CandidateEducation(CandidateModel):
    institution: LooseString = None
    degree: LooseString = None
    years: LooseString = None
    details: LooseStringList = Field(default_factory=list)


class CandidateProject(CandidateModel):
    name: LooseString = None
    description: LooseString = None
    details: LooseStringList = Field(default_factory=list)


class ResumeCandidate(CandidateModel):
    """Portfolio-shaped extraction proposed by the external analyzer."""
    name: LooseString = None
    contact: Annotated[Optional[CandidateContact], BeforeValidator(coerce_dict)] = None
    summary: LooseString = None
    experience: Annotated[List[CandidateExperience], BeforeValidator(coerce_dict_list)] = Field(default_factory=list)
    education: Annotated[List[CandidateEducation], BeforeValidator(coerce_dict_list)] = Field(default_factory=list)
    skills: LooseStringList = Field(default_factory=list)
    projects: Annotated[List[CandidateProject], BeforeValidator(coerce_dict_list)] = Field(default_factory=list)
    achievements: LooseStringList = Field(default_factory=list)


class AnalyzerResponse(CandidateModel):
    """
    Verdict and optional candidate returned by the external analyzer.

    `is_resume` is None unless the analyzer sent an actual boolean; only an
    explicit False rejects a document.
    """
    is_resume: Annotated[Optional[bool], BeforeValidator(coerce_bool)] = None
    confidence: Annotated[Optional[float], BeforeValidator(coerce_number)] = None
    reason: LooseString = None
    candidate: Annotated[Optional[ResumeCandidate], BeforeValidator(coerce_dict)] = None
