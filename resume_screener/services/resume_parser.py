"""Resume parsing: raw text or structured objects into one CandidateProfile.

Raw text goes through normalization, section segmentation and the regex
field extractors. Structured objects are mapped field by field, probing an
ordered list of alternate key names per canonical field (first present
value wins).
"""

import logging
from collections.abc import Mapping
from typing import Any

from resume_screener.config import settings
from resume_screener.exceptions import ParsingError
from resume_screener.models.schemas.candidate_profile import (
    CandidateProfile,
    Certification,
    Education,
    Skill,
    WorkExperience,
)
from resume_screener.models.schemas.resume_input import RawResumeInput, StructuredResumeInput
from resume_screener.services.field_extractors import (
    calculate_duration,
    extract_certifications,
    extract_education,
    extract_email,
    extract_full_name,
    extract_phone,
    extract_skills,
    extract_work_experience,
    parse_year,
)
from resume_screener.services.section_parser import normalize_text, parse_sections

logger = logging.getLogger(__name__)

# Alternate source keys per canonical field, in priority order
PROFILE_KEYS: dict[str, tuple[str, ...]] = {
    "full_name": ("name", "fullName", "full_name"),
    "email": ("email",),
    "phone": ("phone", "phoneNumber", "phone_number"),
    "education": ("education",),
    "work_experience": ("experience", "workExperience", "work_experience"),
    "skills": ("skills",),
    "certifications": ("certifications",),
}

EDUCATION_KEYS: dict[str, tuple[str, ...]] = {
    "degree": ("degree", "name"),
    "institution": ("institution", "school", "university"),
    "graduation_year": ("graduationYear", "graduation_year", "year", "graduationDate"),
    "field": ("field", "major", "study"),
    "gpa": ("gpa",),
}

EXPERIENCE_KEYS: dict[str, tuple[str, ...]] = {
    "title": ("title", "jobTitle", "position"),
    "company": ("company", "employer", "organization"),
    "start_date": ("startDate", "start_date", "start", "from"),
    "end_date": ("endDate", "end_date", "end", "to"),
    "duration": ("duration",),
    "description": ("description", "summary"),
    "technologies": ("technologies", "tech", "skills"),
}

SKILL_KEYS: dict[str, tuple[str, ...]] = {
    "name": ("name", "skill"),
    "category": ("category",),
    "proficiency": ("proficiency",),
    "years_of_experience": ("yearsOfExperience", "years_of_experience", "years"),
}

CERTIFICATION_KEYS: dict[str, tuple[str, ...]] = {
    "name": ("name", "certification"),
    "issuing_organization": ("issuingOrganization", "issuing_organization", "issuer", "organization"),
    "issue_date": ("issueDate", "issue_date", "issued", "date"),
    "expiry_date": ("expiryDate", "expiry_date", "expires", "expiration"),
    "credential_id": ("credentialId", "credential_id", "id", "credential"),
}

_SKILL_CATEGORIES = {"technical", "soft", "language", "tool"}
_PROFICIENCIES = {"beginner", "intermediate", "advanced", "expert"}


def parse_resume(
    source: Any,
    scoped: bool | None = None,
    current_year: int | None = None,
) -> CandidateProfile:
    """Parse a resume from any supported input shape.

    Accepts RawResumeInput / StructuredResumeInput, or their bare payloads
    (a string or a mapping). Raises ParsingError for anything else.
    """
    if scoped is None:
        scoped = settings.entry_scoped_extraction

    if isinstance(source, RawResumeInput):
        return parse_raw_resume(source.text, scoped=scoped, current_year=current_year)
    if isinstance(source, StructuredResumeInput):
        return parse_structured_resume(source.data, current_year=current_year)
    if isinstance(source, str):
        return parse_raw_resume(source, scoped=scoped, current_year=current_year)
    if isinstance(source, Mapping):
        return parse_structured_resume(source, current_year=current_year)

    raise ParsingError(
        "Invalid input format. Expected string or object.",
        details={"input_type": type(source).__name__},
    )


# ---------------------------------------------------------------------------
# Raw text
# ---------------------------------------------------------------------------

def parse_raw_resume(
    raw_text: str,
    scoped: bool = False,
    current_year: int | None = None,
) -> CandidateProfile:
    text = normalize_text(raw_text)
    sections = parse_sections(text)
    logger.debug("Detected resume sections: %s", sorted(sections))

    return CandidateProfile(
        full_name=extract_full_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        education=extract_education(sections.get("education"), scoped=scoped),
        work_experience=extract_work_experience(
            sections.get("experience"), scoped=scoped, current_year=current_year
        ),
        skills=extract_skills(sections.get("skills")),
        certifications=extract_certifications(sections.get("certifications")),
        raw_text=raw_text,
    )


# ---------------------------------------------------------------------------
# Structured objects
# ---------------------------------------------------------------------------

def _probe(data: Mapping, keys: tuple[str, ...], default: Any = None) -> Any:
    """First value under any of `keys` that is neither None nor empty string."""
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return default


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _as_float(value: Any) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_string_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(v) for v in _as_list(value) if v is not None and v != ""]


def parse_structured_resume(
    data: Mapping,
    current_year: int | None = None,
) -> CandidateProfile:
    return CandidateProfile(
        full_name=str(_probe(data, PROFILE_KEYS["full_name"], "Unknown")),
        email=str(_probe(data, PROFILE_KEYS["email"], "")),
        phone=str(_probe(data, PROFILE_KEYS["phone"], "")),
        education=[
            _normalize_education(item)
            for item in _as_list(_probe(data, PROFILE_KEYS["education"]))
        ],
        work_experience=[
            _normalize_experience(item, current_year)
            for item in _as_list(_probe(data, PROFILE_KEYS["work_experience"]))
        ],
        skills=[
            _normalize_skill(item)
            for item in _as_list(_probe(data, PROFILE_KEYS["skills"]))
        ],
        certifications=[
            _normalize_certification(item)
            for item in _as_list(_probe(data, PROFILE_KEYS["certifications"]))
        ],
    )


def _normalize_education(item: Any) -> Education:
    if not isinstance(item, Mapping):
        return Education(degree=str(item))
    return Education(
        degree=str(_probe(item, EDUCATION_KEYS["degree"], "Unknown")),
        institution=str(_probe(item, EDUCATION_KEYS["institution"], "Unknown")),
        graduation_year=parse_year(_probe(item, EDUCATION_KEYS["graduation_year"])),
        field=_as_str(_probe(item, EDUCATION_KEYS["field"])),
        gpa=_as_float(_probe(item, EDUCATION_KEYS["gpa"])),
    )


def _normalize_experience(item: Any, current_year: int | None) -> WorkExperience:
    if not isinstance(item, Mapping):
        return WorkExperience(title=str(item))

    start = _as_str(_probe(item, EXPERIENCE_KEYS["start_date"])) or ""
    end = _as_str(_probe(item, EXPERIENCE_KEYS["end_date"]))
    duration = _probe(item, EXPERIENCE_KEYS["duration"])
    try:
        months = int(duration)
    except (TypeError, ValueError):
        months = calculate_duration(start, end, current_year)

    return WorkExperience(
        title=str(_probe(item, EXPERIENCE_KEYS["title"], "Unknown")),
        company=str(_probe(item, EXPERIENCE_KEYS["company"], "Unknown")),
        start_date=start,
        end_date=end,
        duration=months,
        description=_as_str(_probe(item, EXPERIENCE_KEYS["description"])),
        technologies=_as_string_list(_probe(item, EXPERIENCE_KEYS["technologies"])),
    )


def _normalize_skill(item: Any) -> Skill:
    if not isinstance(item, Mapping):
        return Skill(name=str(item))

    category = str(_probe(item, SKILL_KEYS["category"], "technical")).lower()
    proficiency = str(_probe(item, SKILL_KEYS["proficiency"], "intermediate")).lower()
    return Skill(
        name=str(_probe(item, SKILL_KEYS["name"], "Unknown")),
        category=category if category in _SKILL_CATEGORIES else "technical",
        proficiency=proficiency if proficiency in _PROFICIENCIES else "intermediate",
        years_of_experience=_as_float(_probe(item, SKILL_KEYS["years_of_experience"])),
    )


def _normalize_certification(item: Any) -> Certification:
    if not isinstance(item, Mapping):
        return Certification(name=str(item))
    return Certification(
        name=str(_probe(item, CERTIFICATION_KEYS["name"], "Unknown")),
        issuing_organization=str(_probe(item, CERTIFICATION_KEYS["issuing_organization"], "Unknown")),
        issue_date=_as_str(_probe(item, CERTIFICATION_KEYS["issue_date"])),
        expiry_date=_as_str(_probe(item, CERTIFICATION_KEYS["expiry_date"])),
        credential_id=_as_str(_probe(item, CERTIFICATION_KEYS["credential_id"])),
    )
