from pydantic import BaseModel, Field

from resume_screener.models.schemas.job_requirements import JobPosting, JobRequirements
from resume_screener.models.schemas.resume_input import ResumeInput


class ScreenRequest(BaseModel):
    resume: ResumeInput = Field(..., description="Raw text or structured resume")
    requirements: JobRequirements | None = Field(
        None, description="Job requirements; the default set is used when omitted"
    )


class BatchScreenRequest(BaseModel):
    resume: ResumeInput = Field(..., description="Raw text or structured resume")
    jobs: list[JobPosting] = Field(..., min_length=1, max_length=100)
