"""Caller-supplied job requirements."""

from typing import Literal

from pydantic import BaseModel, Field

DegreeLevel = Literal["high_school", "associate", "bachelor", "master", "phd"]

# Ordinal rank used for every education comparison
EDUCATION_RANK: dict[str, int] = {
    "high_school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "phd": 5,
}


class RequiredEducation(BaseModel):
    minimum_degree: DegreeLevel = "bachelor"
    preferred_fields: list[str] = []

    model_config = {"frozen": True}


class JobRequirements(BaseModel):
    """Requirements a candidate is screened against. Immutable per evaluation."""
    minimum_years_of_experience: float = Field(0, ge=0)
    required_skills: list[str] = Field(..., min_length=1)
    preferred_skills: list[str] = []
    required_education: RequiredEducation = RequiredEducation()
    required_certifications: list[str] | None = None
    soft_skills: list[str] | None = None

    model_config = {"frozen": True}


class JobPosting(BaseModel):
    """A job to screen against in a batch run."""
    id: str
    title: str
    company: str = ""
    requirements: JobRequirements

    model_config = {"frozen": True}


DEFAULT_JOB_REQUIREMENTS = JobRequirements(
    minimum_years_of_experience=3,
    required_skills=["JavaScript", "React", "Node.js", "SQL"],
    preferred_skills=["TypeScript", "AWS", "Docker", "MongoDB"],
    required_education=RequiredEducation(
        minimum_degree="bachelor",
        preferred_fields=["Computer Science", "Software Engineering"],
    ),
    required_certifications=[],
    soft_skills=["Communication", "Teamwork", "Problem Solving"],
)
