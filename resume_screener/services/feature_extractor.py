"""Feature extraction: generic, job-independent signals from a CandidateProfile.

All checks here run against the fixed reference lists in vocabulary.py and
hard-coded defaults (3 years, bachelor). Job-specific comparisons live in
the evaluator. Missing data yields falsy/zero features, never an error.
"""

import math
import re
from collections.abc import Iterable
from datetime import date

from resume_screener.models.schemas.candidate_profile import (
    CandidateProfile,
    Certification,
    Education,
    Skill,
    WorkExperience,
)
from resume_screener.models.schemas.features import (
    DetailedFeatures,
    EducationBreakdown,
    ExperienceBreakdown,
    ExtractedFeatures,
)
from resume_screener.models.schemas.job_requirements import EDUCATION_RANK
from resume_screener.services.field_extractors import parse_year
from resume_screener.services.vocabulary import (
    BREADTH_SKILL_VOCABULARY,
    REFERENCE_PREFERRED_SKILLS,
    REFERENCE_REQUIRED_SKILLS,
    RELEVANT_EDUCATION_FIELDS,
    RELEVANT_EXPERIENCE_KEYWORDS,
    WELL_KNOWN_CERTIFICATIONS,
)

DEFAULT_MINIMUM_EXPERIENCE_MONTHS = 36
DEFAULT_MINIMUM_DEGREE = "bachelor"

# Order matters: check highest first
_DEGREE_LEVEL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("phd", re.compile(r"\b(?:ph\.?d|doctorate)\b", re.IGNORECASE)),
    ("master", re.compile(r"\b(?:masters?|m\.?\s?sc?|m\.?a)\b", re.IGNORECASE)),
    ("bachelor", re.compile(r"\b(?:bachelors?|b\.?\s?sc?|b\.?a)\b", re.IGNORECASE)),
    ("associate", re.compile(r"\b(?:associates?|a\.?a|a\.?s)\b", re.IGNORECASE)),
)

_EMAIL_SHAPE_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PROGRESSION_KEYWORDS = ("senior", "lead", "principal")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3)."""
    return math.floor(value + 0.5)


def _skill_names(skills: Iterable[Skill]) -> set[str]:
    return {skill.name.lower() for skill in skills}


def has_any_skill(skills: Iterable[Skill], reference: Iterable[str]) -> bool:
    names = _skill_names(skills)
    return any(ref.lower() in names for ref in reference)


def skill_match_percentage(skills: Iterable[Skill], vocabulary: tuple[str, ...]) -> int:
    """Share of `vocabulary` covered by the candidate's skills, 0-100."""
    if not vocabulary:
        return 0
    names = _skill_names(skills)
    matched = sum(1 for term in vocabulary if term.lower() in names)
    return round_half_up(matched / len(vocabulary) * 100)


def total_experience_months(work_experience: Iterable[WorkExperience]) -> int:
    return sum(exp.duration for exp in work_experience)


def total_years_experience(work_experience: Iterable[WorkExperience]) -> int:
    return round_half_up(total_experience_months(work_experience) / 12)


def has_relevant_experience(work_experience: Iterable[WorkExperience]) -> bool:
    """Any title or description mentions a software-relevant keyword."""
    for exp in work_experience:
        text = f"{exp.title} {exp.description or ''}".lower()
        if any(keyword in text for keyword in RELEVANT_EXPERIENCE_KEYWORDS):
            return True
    return False


def has_relevant_field(education: Iterable[Education]) -> bool:
    for edu in education:
        field = (edu.field or "").lower()
        if any(relevant in field for relevant in RELEVANT_EDUCATION_FIELDS):
            return True
    return False


def has_well_known_certification(certifications: list[Certification]) -> bool:
    """Vacuously true for a candidate with no certifications."""
    if not certifications:
        return True
    names = [cert.name.lower() for cert in certifications]
    return any(known.lower() in name for known in WELL_KNOWN_CERTIFICATIONS for name in names)


def degree_level(degree: str) -> str | None:
    for level, pattern in _DEGREE_LEVEL_PATTERNS:
        if pattern.search(degree):
            return level
    return None


def determine_education_level(education: Iterable[Education]) -> str:
    """Highest degree level found; 'high_school' when nothing matches."""
    highest = "high_school"
    for edu in education:
        level = degree_level(edu.degree)
        if level and EDUCATION_RANK[level] > EDUCATION_RANK[highest]:
            highest = level
    return highest


def extract_features(profile: CandidateProfile) -> ExtractedFeatures:
    education_level = determine_education_level(profile.education)
    return ExtractedFeatures(
        has_required_skills=has_any_skill(profile.skills, REFERENCE_REQUIRED_SKILLS),
        has_preferred_skills=has_any_skill(profile.skills, REFERENCE_PREFERRED_SKILLS),
        meets_experience_requirement=(
            total_experience_months(profile.work_experience) >= DEFAULT_MINIMUM_EXPERIENCE_MONTHS
        ),
        meets_education_requirement=(
            EDUCATION_RANK[education_level] >= EDUCATION_RANK[DEFAULT_MINIMUM_DEGREE]
        ),
        has_required_certifications=has_well_known_certification(profile.certifications),
        total_years_experience=total_years_experience(profile.work_experience),
        skill_match_percentage=skill_match_percentage(profile.skills, BREADTH_SKILL_VOCABULARY),
        education_level=education_level,
    )


# ---------------------------------------------------------------------------
# Detailed analysis
# ---------------------------------------------------------------------------

def _has_recent_experience(work_experience: list[WorkExperience], current_year: int) -> bool:
    """Any role ended (or is ongoing) within the last two years."""
    for exp in work_experience:
        end_year = parse_year(exp.end_date) or current_year
        if current_year - end_year <= 2:
            return True
    return False


def _career_progression(work_experience: list[WorkExperience]) -> str:
    if len(work_experience) < 2:
        return "insufficient_data"
    titles = [exp.title.lower() for exp in work_experience]
    if any(keyword in title for title in titles for keyword in _PROGRESSION_KEYWORDS):
        return "progressive"
    return "lateral"


def completeness_score(profile: CandidateProfile) -> int:
    """0-100 score for how many profile areas are filled in."""
    score = 0
    if profile.full_name != "Unknown":
        score += 10
    if profile.email:
        score += 5
    if profile.phone:
        score += 5
    if profile.work_experience:
        score += 30
    if profile.education:
        score += 20
    if profile.skills:
        score += 20
    if profile.certifications:
        score += 10
    return min(score, 100)


def extract_detailed_features(
    profile: CandidateProfile,
    current_year: int | None = None,
) -> DetailedFeatures:
    current_year = current_year or date.today().year
    work = profile.work_experience
    total_years = total_years_experience(work)

    return DetailedFeatures(
        has_valid_email=bool(_EMAIL_SHAPE_RE.match(profile.email)),
        has_valid_phone=sum(ch.isdigit() for ch in profile.phone) >= 10,
        experience_breakdown=ExperienceBreakdown(
            total_years=total_years,
            average_duration=round(total_years / len(work), 2) if work else 0.0,
            job_count=len(work),
            has_recent_experience=_has_recent_experience(work, current_year),
            career_progression=_career_progression(work),
        ),
        technical_skills=[s.name for s in profile.skills if s.category == "technical"],
        soft_skills=[s.name for s in profile.skills if s.category == "soft"],
        education_breakdown=EducationBreakdown(
            degree_count=len(profile.education),
            highest_degree=determine_education_level(profile.education),
            has_relevant_field=has_relevant_field(profile.education),
            graduation_years=[e.graduation_year for e in profile.education if e.graduation_year],
        ),
        certification_count=len(profile.certifications),
        completeness_score=completeness_score(profile),
    )
