from typing import Literal

from pydantic import BaseModel

from resume_screener.models.schemas.candidate_profile import CandidateProfile
from resume_screener.models.schemas.features import DetailedFeatures, ExtractedFeatures
from resume_screener.models.schemas.job_requirements import JobPosting


class ScreeningResult(BaseModel):
    """Outcome of one screening call. Never mutated after construction.

    A non-empty error_messages means the pipeline could not process the
    input; otherwise a fail is a genuine evaluation outcome.
    """
    candidate_profile: CandidateProfile = CandidateProfile()
    screening_result: Literal["pass", "fail"] = "fail"
    match_reasons: list[str] = []
    confidence_score: float = 0.0  # 0.0-1.0
    missing_requirements: list[str] = []
    error_messages: list[str] = []

    model_config = {"frozen": True}


class JobScreening(BaseModel):
    job: JobPosting
    result: ScreeningResult


class BestMatch(BaseModel):
    job: JobPosting
    score: float
    reasons: list[str] = []


class BatchSummary(BaseModel):
    total_jobs: int = 0
    passed_jobs: int = 0
    failed_jobs: int = 0
    best_matches: list[BestMatch] = []  # top 3 passing jobs by confidence


class BatchScreeningResult(BaseModel):
    candidate_profile: CandidateProfile = CandidateProfile()
    screening_results: list[JobScreening] = []
    summary: BatchSummary = BatchSummary()
    error_messages: list[str] = []


class CandidateSummary(BaseModel):
    name: str = "Unknown"
    email: str = ""
    phone: str = ""
    total_experience: int = 0
    education_level: str = "high_school"
    skill_count: int = 0
    certification_count: int = 0


class EvaluationSummary(BaseModel):
    result: Literal["PASS", "FAIL"] = "FAIL"
    confidence: int = 0  # percent
    score: int = 0  # points out of 100
    reasons: list[str] = []
    missing: list[str] = []


class RequirementsSummary(BaseModel):
    minimum_experience: float = 0
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    minimum_education: str = "bachelor"
    required_certifications: list[str] = []


class DetailedReport(BaseModel):
    """Evaluator-side report: who, how they scored, and against what."""
    candidate: CandidateSummary = CandidateSummary()
    evaluation: EvaluationSummary = EvaluationSummary()
    requirements: RequirementsSummary = RequirementsSummary()
    features: ExtractedFeatures = ExtractedFeatures()


class DetailedScreeningReport(BaseModel):
    screening_result: ScreeningResult
    detailed_report: DetailedReport
    detailed_features: DetailedFeatures
