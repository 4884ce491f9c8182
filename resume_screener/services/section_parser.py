"""Resume text normalization and keyword-driven section segmentation."""

import re

# Keywords that open each recognized section (matched as lowercase substrings)
SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "education": ("education", "academic", "degree"),
    "experience": ("experience", "work", "employment"),
    "skills": ("skills", "technical skills", "competencies"),
    "certifications": ("certifications", "certificates", "credentials"),
}

# Any line containing one of these ends the section being collected
SECTION_BOUNDARY_KEYWORDS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "certifications",
    "certificates",
)

_INLINE_WS_RE = re.compile(r"[ \t\r\f\v]+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs inside lines, strip lines, drop blank lines."""
    lines = (_INLINE_WS_RE.sub(" ", line).strip() for line in text.split("\n"))
    return "\n".join(line for line in lines if line)


def _inline_content(heading: str) -> list[str]:
    """Text after the first colon of a heading line, e.g. 'Skills: Python'."""
    if ":" not in heading:
        return []
    after = heading.split(":", 1)[1].strip()
    return [after] if after else []


def extract_section(text: str, section: str) -> str | None:
    """Return the content lines of a section joined by newlines.

    The first line containing one of the section's keywords opens it; the
    next line mentioning any section name closes it. A repeated heading of
    the same section before any content re-opens instead of closing, so
    "SKILLS" followed by "Technical Skills: ..." keeps the inline list.

    Returns None when the section is never opened or has no content.
    """
    openers = SECTION_KEYWORDS[section]
    in_section = False
    content: list[str] = []

    for line in text.split("\n"):
        lower = line.lower()

        if not in_section:
            if any(keyword in lower for keyword in openers):
                in_section = True
                content.extend(_inline_content(line))
            continue

        if any(keyword in lower for keyword in SECTION_BOUNDARY_KEYWORDS):
            if not content and any(keyword in lower for keyword in openers):
                content.extend(_inline_content(line))
                continue
            break

        content.append(line)

    return "\n".join(content) if content else None


def parse_sections(text: str) -> dict[str, str]:
    """Extract every recognized section present in normalized text."""
    sections: dict[str, str] = {}
    for name in SECTION_KEYWORDS:
        content = extract_section(text, name)
        if content is not None:
            sections[name] = content
    return sections
