"""Weighted scoring of a CandidateProfile against JobRequirements.

Four categories, 100 points total:

    experience      30  (20 minimum years + 10 relevant-role bonus)
    skills          40  (25 mainstream skill + 15 breadth >= 50%)
    education       20  (15 minimum degree + 5 relevant field)
    certifications  10  (full marks when the job requires none)

confidence = points / 100, and the candidate passes iff confidence >= 0.70.
No category failure vetoes the result on its own.
"""

import logging

from resume_screener.models.responses import (
    CandidateSummary,
    DetailedReport,
    EvaluationSummary,
    RequirementsSummary,
    ScreeningResult,
)
from resume_screener.models.schemas.candidate_profile import CandidateProfile
from resume_screener.models.schemas.job_requirements import EDUCATION_RANK, JobRequirements
from resume_screener.services.feature_extractor import (
    determine_education_level,
    extract_features,
    has_any_skill,
    has_relevant_experience,
    has_relevant_field,
    skill_match_percentage,
    total_years_experience,
)
from resume_screener.services.vocabulary import CORE_TECH_SKILLS, REFERENCE_REQUIRED_SKILLS

logger = logging.getLogger(__name__)

PASS_THRESHOLD = 0.70
BREADTH_THRESHOLD = 50  # percent of CORE_TECH_SKILLS


class _Scorecard:
    """Per-call accumulator for points and report strings."""

    def __init__(self) -> None:
        self.points = 0
        self.reasons: list[str] = []
        self.missing: list[str] = []


def _score_experience(card: _Scorecard, profile: CandidateProfile, req: JobRequirements) -> None:
    years = total_years_experience(profile.work_experience)
    if years >= req.minimum_years_of_experience:
        card.points += 20
        card.reasons.append(f"✓ {years} years of experience")
    else:
        card.missing.append(f"Requires {req.minimum_years_of_experience:g}+ years experience")

    # Awarded even when the minimum is not met
    if has_relevant_experience(profile.work_experience):
        card.points += 10


def _score_skills(card: _Scorecard, profile: CandidateProfile, req: JobRequirements) -> None:
    if has_any_skill(profile.skills, REFERENCE_REQUIRED_SKILLS):
        card.points += 25
        card.reasons.append("✓ Has required technical skills")
    else:
        have = {skill.name.lower() for skill in profile.skills}
        absent = [s for s in req.required_skills if s.lower() not in have]
        card.missing.append(f"Missing required skills: {', '.join(absent)}")

    if skill_match_percentage(profile.skills, CORE_TECH_SKILLS) >= BREADTH_THRESHOLD:
        card.points += 15


def _score_education(card: _Scorecard, profile: CandidateProfile, req: JobRequirements) -> None:
    level = determine_education_level(profile.education)
    minimum = req.required_education.minimum_degree
    if EDUCATION_RANK[level] >= EDUCATION_RANK[minimum]:
        card.points += 15
        card.reasons.append("✓ Meets education requirements")
    else:
        card.missing.append(f"Requires {minimum} degree")

    if has_relevant_field(profile.education):
        card.points += 5


def _score_certifications(card: _Scorecard, profile: CandidateProfile, req: JobRequirements) -> None:
    if not req.required_certifications:
        card.points += 10
        return

    # Any certification counts; names are not matched against the required list
    if profile.certifications:
        card.points += 10
        card.reasons.append("✓ Has relevant certifications")
    else:
        card.missing.append("Missing required certifications")


def evaluate(profile: CandidateProfile, requirements: JobRequirements) -> ScreeningResult:
    """Score a profile and decide pass/fail. Deterministic for a given input."""
    card = _Scorecard()
    _score_experience(card, profile, requirements)
    _score_skills(card, profile, requirements)
    _score_education(card, profile, requirements)
    _score_certifications(card, profile, requirements)

    confidence = card.points / 100
    logger.debug("Scored %s: %d/100", profile.full_name, card.points)

    return ScreeningResult(
        candidate_profile=profile,
        screening_result="pass" if confidence >= PASS_THRESHOLD else "fail",
        match_reasons=card.reasons,
        confidence_score=confidence,
        missing_requirements=card.missing,
    )


def build_detailed_report(
    profile: CandidateProfile,
    requirements: JobRequirements,
    result: ScreeningResult | None = None,
) -> DetailedReport:
    """Summarize the candidate, the evaluation and the requirements in one view."""
    if result is None:
        result = evaluate(profile, requirements)
    features = extract_features(profile)

    return DetailedReport(
        candidate=CandidateSummary(
            name=profile.full_name,
            email=profile.email,
            phone=profile.phone,
            total_experience=features.total_years_experience,
            education_level=features.education_level,
            skill_count=len(profile.skills),
            certification_count=len(profile.certifications),
        ),
        evaluation=EvaluationSummary(
            result="PASS" if result.screening_result == "pass" else "FAIL",
            confidence=round(result.confidence_score * 100),
            score=round(result.confidence_score * 100),
            reasons=result.match_reasons,
            missing=result.missing_requirements,
        ),
        requirements=RequirementsSummary(
            minimum_experience=requirements.minimum_years_of_experience,
            required_skills=requirements.required_skills,
            preferred_skills=requirements.preferred_skills,
            minimum_education=requirements.required_education.minimum_degree,
            required_certifications=requirements.required_certifications or [],
        ),
        features=features,
    )
