from resume_screener.services.section_parser import (
    extract_section,
    normalize_text,
    parse_sections,
)


def test_normalize_collapses_whitespace_and_blank_lines():
    text = "  John   Smith \n\n\n  Skills:\tPython,  Go  \r\n"
    assert normalize_text(text) == "John Smith\nSkills: Python, Go"


def test_normalize_empty():
    assert normalize_text("") == ""
    assert normalize_text("   \n \t \n") == ""


def test_parse_sections_detects_all(sample_resume_text):
    sections = parse_sections(normalize_text(sample_resume_text))
    assert set(sections) == {"experience", "education", "skills"}


def test_parse_sections_content(sample_resume_text):
    sections = parse_sections(normalize_text(sample_resume_text))
    assert "Backend Developer" in sections["experience"]
    assert "Computer Science" in sections["education"]
    assert sections["skills"] == "JavaScript, React, Node.js, SQL"


def test_parse_sections_empty():
    assert parse_sections("") == {}


def test_section_stops_at_next_heading():
    text = "Experience\nDeveloper at Foo Inc\nEducation\nBachelor of Arts"
    assert extract_section(text, "experience") == "Developer at Foo Inc"
    assert extract_section(text, "education") == "Bachelor of Arts"


def test_inline_heading_content():
    text = "Skills: Python, Docker\nEducation\nBachelor of Science"
    assert extract_section(text, "skills") == "Python, Docker"


def test_repeated_heading_reopens_section():
    text = "SKILLS\nTechnical Skills: Python, Docker\nEducation\nBachelor of Science"
    assert extract_section(text, "skills") == "Python, Docker"


def test_heading_without_content_is_absent():
    text = "Skills\nEducation\nBachelor of Science"
    assert extract_section(text, "skills") is None


def test_missing_section_is_none():
    assert extract_section("John Smith\njohn@example.com", "certifications") is None


def test_certifications_section():
    text = "Certifications\nPMP Certification\nSkills\nPython"
    assert extract_section(text, "certifications") == "PMP Certification"
