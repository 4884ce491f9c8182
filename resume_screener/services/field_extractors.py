"""Regex/keyword heuristics that turn normalized resume text into typed records.

Contact fields are searched in the whole document; list fields only inside
their section (see section_parser.extract_section). Every extractor returns
an empty value rather than failing when nothing matches.
"""

import re
from datetime import date

from resume_screener.models.schemas.candidate_profile import (
    Certification,
    Education,
    Skill,
    WorkExperience,
)
from resume_screener.services.vocabulary import CORE_TECH_SKILLS, JOB_TITLE_KEYWORDS

# ---------------------------------------------------------------------------
# Contact information
# ---------------------------------------------------------------------------

_NAME_WORDS = r"(?!Resume\b)[A-Z][a-z]+(?:[ \t]+(?!Resume\b)[A-Z][a-z]+){1,3}"

# Tried in order, first hit wins
NAME_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"^({_NAME_WORDS})"),  # document start
    re.compile(rf"(?i:\bname)[ \t]*:[ \t]*({_NAME_WORDS})"),
    re.compile(rf"({_NAME_WORDS})[ \t]+(?i:resume)\b"),
)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

PHONE_PATTERNS: tuple[re.Pattern, ...] = (
    # North American: optional +1, area code, exchange, subscriber
    re.compile(r"(?<!\d)(?:\+?1[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}(?!\d)"),
    # Generic international digit groups
    re.compile(r"(?<!\d)(?:\+?\d{1,3}[-. ]?)?\d{3,4}[-. ]?\d{3,4}[-. ]?\d{3,4}(?!\d)"),
)
_PHONE_SEPARATORS_RE = re.compile(r"[-. ()]")


def extract_full_name(text: str) -> str:
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return "Unknown"


def extract_email(text: str) -> str:
    match = EMAIL_RE.search(text)
    return match.group() if match else ""


def extract_phone(text: str) -> str:
    """First phone-shaped token with separators removed, e.g. '5551234567'."""
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return _PHONE_SEPARATORS_RE.sub("", match.group())
    return ""


# ---------------------------------------------------------------------------
# Years and durations
# ---------------------------------------------------------------------------

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_ANY_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")


def parse_year(value) -> int | None:
    """Pull a 4-digit year out of an int or a date-like string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = _ANY_YEAR_RE.search(str(value))
    return int(match.group()) if match else None


def calculate_duration(
    start: str | int | None,
    end: str | int | None = None,
    current_year: int | None = None,
) -> int:
    """Whole-year span in months; an open end counts up to the current year.

    Returns 0 without a parseable start year. Negative spans clamp to 0.
    """
    start_year = parse_year(start)
    if start_year is None:
        return 0
    end_year = parse_year(end)
    if end_year is None:
        end_year = current_year or date.today().year
    return max(0, (end_year - start_year) * 12)


def _entry_blocks(section: str, matches: list[re.Match], scoped: bool) -> list[str]:
    """Text each entry resolves shared attributes from.

    Unscoped, every entry sees the whole section (first match wins for all
    of them). Scoped, an entry sees only the text from its own match up to
    the next entry's match.
    """
    if not scoped:
        return [section] * len(matches)
    bounds = [m.start() for m in matches] + [len(section)]
    return [section[bounds[i]:bounds[i + 1]] for i in range(len(matches))]


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

DEGREE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?i:bachelor|master|ph\.?d\.?|associate|high school|diploma)(?:'s|’s|s)?"
        r"(?:[ \t]+(?:of|in|and|[A-Z][\w&.+-]*))*"
    ),
    re.compile(r"\b[A-Z][a-z]+[ \t]+(?:Degree|Diploma|Certificate)\b"),
)

INSTITUTION_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?i:University|College|Institute|School)[ \t]+(?i:of)[ \t]+[A-Z][A-Za-z]*"
        r"(?:[ \t]+(?:(?i:of|and)|[A-Z][A-Za-z]*))*"
    ),
    re.compile(
        r"\b[A-Z][\w&.'-]*(?:[ \t]+[A-Z][\w&.'-]*)*[ \t]+(?i:University|College|Institute)\b"
    ),
)

_FIELD_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\bin[ \t]+([A-Z][A-Za-z&]*(?:[ \t]+(?:and[ \t]+)?[A-Z][A-Za-z&]*)*)"),
    re.compile(r"\bof[ \t]+([A-Z][A-Za-z&]*(?:[ \t]+(?:and[ \t]+)?[A-Z][A-Za-z&]*)*)"),
)

_TRAILING_CONNECTORS_RE = re.compile(r"(?:[ \t]+(?:of|in|and))+$")


def _clean_phrase(phrase: str) -> str:
    return _TRAILING_CONNECTORS_RE.sub("", phrase.strip())


def _find_degrees(section: str) -> list[re.Match]:
    """Degree matches in document order; secondary hits may not overlap primary ones."""
    found: list[re.Match] = []
    for pattern in DEGREE_PATTERNS:
        for match in pattern.finditer(section):
            if any(match.start() < f.end() and f.start() < match.end() for f in found):
                continue
            found.append(match)
    return sorted(found, key=lambda m: m.start())


def find_institution(text: str) -> str | None:
    for pattern in INSTITUTION_PATTERNS:
        match = pattern.search(text)
        if match:
            return _clean_phrase(match.group())
    return None


def extract_field_of_study(degree: str) -> str | None:
    """'Bachelor of Science in Computer Science' -> 'Computer Science'."""
    for pattern in _FIELD_PATTERNS:
        match = pattern.search(degree)
        if match:
            return match.group(1)
    return None


def extract_education(section: str | None, scoped: bool = False) -> list[Education]:
    if not section:
        return []

    matches = _find_degrees(section)
    education: list[Education] = []
    for match, block in zip(matches, _entry_blocks(section, matches, scoped)):
        degree = _clean_phrase(match.group())
        year = YEAR_RE.search(block)
        education.append(Education(
            degree=degree,
            institution=find_institution(block) or "Unknown Institution",
            graduation_year=int(year.group()) if year else None,
            field=extract_field_of_study(degree),
        ))
    return education


# ---------------------------------------------------------------------------
# Work experience
# ---------------------------------------------------------------------------

# Words that never start or extend a title ("I was a lead engineer" -> "lead engineer")
_TITLE_STOPWORDS = r"at|with|for|as|a|an|the|and|of|in|to|was|is|i"

# Up to three leading words of any case, then a title keyword (case-insensitive)
TITLE_RE = re.compile(
    rf"\b(?:(?!(?i:{_TITLE_STOPWORDS})\b)[A-Za-z][\w/&+.-]*[ \t]+){{0,3}}"
    r"(?i:" + "|".join(JOB_TITLE_KEYWORDS) + r")\b"
)

COMPANY_RE = re.compile(
    r"\b(?i:at|with|for)[ \t]+"
    r"([A-Z][\w&.'-]*(?:[ \t]+[A-Z&][\w&.'-]*)*[ \t]+(?i:Inc|LLC|Corp|Company|Ltd))\b"
)


def extract_work_experience(
    section: str | None,
    scoped: bool = False,
    current_year: int | None = None,
) -> list[WorkExperience]:
    if not section:
        return []

    matches = list(TITLE_RE.finditer(section))
    experience: list[WorkExperience] = []
    for match, block in zip(matches, _entry_blocks(section, matches, scoped)):
        company = COMPANY_RE.search(block)
        years = YEAR_RE.findall(block)
        start = years[0] if years else ""
        end = years[1] if len(years) > 1 else None
        experience.append(WorkExperience(
            title=match.group().strip(),
            company=company.group(1) if company else "Unknown Company",
            start_date=start,
            end_date=end,
            duration=calculate_duration(start, end, current_year),
        ))
    return experience


# ---------------------------------------------------------------------------
# Skills and certifications
# ---------------------------------------------------------------------------

def _skill_pattern(skill: str) -> re.Pattern:
    # Boundaries keep "java" out of "javascript" and "sql" out of "mysql"
    return re.compile(rf"(?<![a-z0-9.#+]){re.escape(skill.lower())}(?![a-z0-9+#])")


_SKILL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = tuple(
    (skill, _skill_pattern(skill)) for skill in CORE_TECH_SKILLS
)


def extract_skills(section: str | None) -> list[Skill]:
    """Distinct vocabulary hits, in order of first appearance, canonical spelling."""
    if not section:
        return []

    lower = section.lower()
    hits: list[tuple[int, str]] = []
    for skill, pattern in _SKILL_PATTERNS:
        match = pattern.search(lower)
        if match:
            hits.append((match.start(), skill))
    return [Skill(name=name) for _, name in sorted(hits)]


CERTIFICATION_RE = re.compile(
    r"\b(?:[A-Z][\w+&/.-]*[ \t]+){1,5}(?i:Certification|Certificate|Certified)\b"
    r"|\b(?i:Certified)(?:[ \t]+[A-Z][\w+&/.-]*){1,4}"
)


def extract_certifications(section: str | None) -> list[Certification]:
    if not section:
        return []
    return [
        Certification(name=match.group().strip())
        for match in CERTIFICATION_RE.finditer(section)
    ]
