"""Feature extractor output: generic signals derived from a profile."""

from typing import Literal

from pydantic import BaseModel

from resume_screener.models.schemas.job_requirements import DegreeLevel


class ExtractedFeatures(BaseModel):
    """Job-independent signals.

    The boolean checks use fixed reference lists and hard-coded defaults
    (3 years, bachelor), not the requirements of any specific job.
    """
    has_required_skills: bool = False
    has_preferred_skills: bool = False
    meets_experience_requirement: bool = False
    meets_education_requirement: bool = False
    has_required_certifications: bool = True
    total_years_experience: int = 0
    skill_match_percentage: int = 0  # 0-100, breadth against a fixed vocabulary
    education_level: DegreeLevel = "high_school"


class ExperienceBreakdown(BaseModel):
    total_years: int = 0
    average_duration: float = 0.0  # years per job
    job_count: int = 0
    has_recent_experience: bool = False  # ended within the last 2 years
    career_progression: Literal["progressive", "lateral", "insufficient_data"] = "insufficient_data"


class EducationBreakdown(BaseModel):
    degree_count: int = 0
    highest_degree: DegreeLevel = "high_school"
    has_relevant_field: bool = False
    graduation_years: list[int] = []


class DetailedFeatures(BaseModel):
    """Extended profile analysis used by the detailed report."""
    has_valid_email: bool = False
    has_valid_phone: bool = False
    experience_breakdown: ExperienceBreakdown = ExperienceBreakdown()
    technical_skills: list[str] = []
    soft_skills: list[str] = []
    education_breakdown: EducationBreakdown = EducationBreakdown()
    certification_count: int = 0
    completeness_score: int = 0  # 0-100
