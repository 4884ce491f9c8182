"""Parser output: the canonical candidate profile."""

from typing import Literal

from pydantic import BaseModel

SkillCategory = Literal["technical", "soft", "language", "tool"]
Proficiency = Literal["beginner", "intermediate", "advanced", "expert"]


class Education(BaseModel):
    """A single education entry."""
    degree: str = "Unknown"  # free text, e.g. "Bachelor of Science in Physics"
    institution: str = "Unknown"
    graduation_year: int | None = None
    field: str | None = None
    gpa: float | None = None


class WorkExperience(BaseModel):
    """A single work experience entry."""
    title: str = "Unknown"
    company: str = "Unknown"
    start_date: str = ""  # year as a string, e.g. "2021"
    end_date: str | None = None  # None for a current position
    duration: int = 0  # months
    description: str | None = None
    technologies: list[str] = []


class Skill(BaseModel):
    name: str
    category: SkillCategory = "technical"
    proficiency: Proficiency = "intermediate"
    years_of_experience: float | None = None


class Certification(BaseModel):
    name: str
    issuing_organization: str = "Unknown"
    issue_date: str | None = None
    expiry_date: str | None = None
    credential_id: str | None = None


class CandidateProfile(BaseModel):
    """Normalized candidate representation, independent of input format.

    Every required field carries a default so downstream stages never see
    missing values, only empty ones.
    """
    full_name: str = "Unknown"
    email: str = ""
    phone: str = ""
    education: list[Education] = []
    work_experience: list[WorkExperience] = []
    skills: list[Skill] = []
    certifications: list[Certification] = []
    raw_text: str | None = None  # original text for the raw-text path
