"""Pipeline orchestrator: wires the screening stages together.

Flow:
    resume_input + requirements
      ├─ ParseStage.run(resume_input)          → CandidateProfile
      ├─ ExtractStage.run(profile)             → ExtractedFeatures
      └─ EvaluateStage.run(profile, reqs)      → ScreeningResult

screen_resume never raises: a failing stage yields an error-bearing
ScreeningResult. generate_detailed_report lets the stage error propagate.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from resume_screener import __version__
from resume_screener.exceptions import ScreeningError
from resume_screener.models.responses import (
    BatchScreeningResult,
    BatchSummary,
    BestMatch,
    DetailedScreeningReport,
    JobScreening,
    ScreeningResult,
)
from resume_screener.models.schemas.candidate_profile import CandidateProfile
from resume_screener.models.schemas.job_requirements import (
    DEFAULT_JOB_REQUIREMENTS,
    EDUCATION_RANK,
    JobPosting,
    JobRequirements,
)
from resume_screener.services.pipeline.stages import EvaluateStage, ExtractStage, ParseStage

logger = logging.getLogger(__name__)

AGENT_NAME = "Resume Screening Agent"
BEST_MATCH_LIMIT = 3

# Stateless; safe to share across concurrent calls
_parse = ParseStage()
_extract = ExtractStage()
_evaluate = EvaluateStage()


def error_result(message: str) -> ScreeningResult:
    """Sentinel result for a screening the pipeline could not complete."""
    return ScreeningResult(
        candidate_profile=CandidateProfile(),
        screening_result="fail",
        match_reasons=["Processing error occurred"],
        confidence_score=0.0,
        missing_requirements=[],
        error_messages=[message],
    )


async def screen_resume(
    resume_input: Any,
    requirements: JobRequirements | Mapping | None = None,
    current_year: int | None = None,
) -> ScreeningResult:
    """Parse, extract and evaluate one resume. Failures come back as data."""
    if requirements is None:
        requirements = DEFAULT_JOB_REQUIREMENTS

    try:
        profile: CandidateProfile = _parse.run(resume_input=resume_input, current_year=current_year)
        _extract.run(profile=profile)
        result: ScreeningResult = _evaluate.run(profile=profile, requirements=requirements)
    except ScreeningError as exc:
        logger.error("Screening failed at %s stage: %s", exc.stage, exc.message)
        return error_result(exc.message)

    logger.info(
        "Screened %s: %s (confidence %.2f)",
        result.candidate_profile.full_name,
        result.screening_result,
        result.confidence_score,
    )
    return result


async def screen_against_jobs(
    resume_input: Any,
    jobs: list[JobPosting],
    current_year: int | None = None,
) -> BatchScreeningResult:
    """Screen one resume against many jobs, parsing it only once.

    A job whose evaluation fails is logged and left out of the results.
    """
    logger.info("Screening resume against %d job(s)", len(jobs))
    try:
        profile: CandidateProfile = _parse.run(resume_input=resume_input, current_year=current_year)
    except ScreeningError as exc:
        logger.error("Batch screening failed at %s stage: %s", exc.stage, exc.message)
        return BatchScreeningResult(
            summary=BatchSummary(total_jobs=len(jobs)),
            error_messages=[exc.message],
        )

    screenings: list[JobScreening] = []
    errors: list[str] = []
    for job in jobs:
        try:
            result: ScreeningResult = _evaluate.run(profile=profile, requirements=job.requirements)
        except ScreeningError as exc:
            logger.error("Error screening against %s: %s", job.title, exc.message)
            errors.append(f"{job.id}: {exc.message}")
            continue
        logger.info("Screened against %s at %s: %s", job.title, job.company, result.screening_result)
        screenings.append(JobScreening(job=job, result=result))

    passed = [s for s in screenings if s.result.screening_result == "pass"]
    ranked = sorted(passed, key=lambda s: s.result.confidence_score, reverse=True)

    return BatchScreeningResult(
        candidate_profile=profile,
        screening_results=screenings,
        summary=BatchSummary(
            total_jobs=len(jobs),
            passed_jobs=len(passed),
            failed_jobs=len(screenings) - len(passed),
            best_matches=[
                BestMatch(job=s.job, score=s.result.confidence_score, reasons=s.result.match_reasons)
                for s in ranked[:BEST_MATCH_LIMIT]
            ],
        ),
        error_messages=errors,
    )


async def generate_detailed_report(
    resume_input: Any,
    requirements: JobRequirements | Mapping | None = None,
    current_year: int | None = None,
) -> DetailedScreeningReport:
    """Screening result plus the evaluator report and detailed features.

    Raises the failing stage's ScreeningError.
    """
    if requirements is None:
        requirements = DEFAULT_JOB_REQUIREMENTS

    profile: CandidateProfile = _parse.run(resume_input=resume_input, current_year=current_year)
    detailed_features = _extract.run(profile=profile, detailed=True, current_year=current_year)
    result: ScreeningResult = _evaluate.run(profile=profile, requirements=requirements)
    report = _evaluate.run(profile=profile, requirements=requirements, detailed=True, result=result)

    return DetailedScreeningReport(
        screening_result=result,
        detailed_report=report,
        detailed_features=detailed_features,
    )


def validate_job_requirements(data: Any) -> list[str]:
    """Human-readable problems with a requirements object; empty when valid."""
    if isinstance(data, JobRequirements):
        data = data.model_dump()
    if not isinstance(data, Mapping):
        return ["Job requirements must be an object"]

    errors: list[str] = []

    years = data.get("minimum_years_of_experience")
    if isinstance(years, bool) or not isinstance(years, (int, float)) or years < 0:
        errors.append("Invalid minimum years of experience")

    skills = data.get("required_skills")
    if not isinstance(skills, list) or not skills:
        errors.append("No required skills specified")

    education = data.get("required_education")
    degree = education.get("minimum_degree") if isinstance(education, Mapping) else None
    if not degree:
        errors.append("No education requirements specified")
    elif degree not in EDUCATION_RANK:
        errors.append(f"Unknown minimum degree: {degree}")

    if errors:
        logger.warning("Job requirements validation errors: %s", errors)
    return errors


def agent_status() -> dict:
    return {
        "agent": AGENT_NAME,
        "version": __version__,
        "status": "active",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
