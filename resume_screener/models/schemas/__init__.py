"""Pydantic contracts passed between pipeline stages."""

from resume_screener.models.schemas.candidate_profile import (
    CandidateProfile,
    Certification,
    Education,
    Skill,
    WorkExperience,
)
from resume_screener.models.schemas.features import DetailedFeatures, ExtractedFeatures
from resume_screener.models.schemas.job_requirements import (
    DEFAULT_JOB_REQUIREMENTS,
    EDUCATION_RANK,
    JobPosting,
    JobRequirements,
    RequiredEducation,
)
from resume_screener.models.schemas.resume_input import (
    RawResumeInput,
    ResumeInput,
    StructuredResumeInput,
)

__all__ = [
    "CandidateProfile",
    "Certification",
    "Education",
    "Skill",
    "WorkExperience",
    "DetailedFeatures",
    "ExtractedFeatures",
    "DEFAULT_JOB_REQUIREMENTS",
    "EDUCATION_RANK",
    "JobPosting",
    "JobRequirements",
    "RequiredEducation",
    "RawResumeInput",
    "ResumeInput",
    "StructuredResumeInput",
]
