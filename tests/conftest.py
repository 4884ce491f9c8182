"""Shared test configuration, pytest markers and sample data."""

import pytest

from resume_screener.models.schemas.job_requirements import JobRequirements, RequiredEducation


SAMPLE_RESUME = """John Smith
john.smith@email.com
(555) 123-4567

Experience
Backend Developer at Acme Software Inc
2020 - 2023
Built REST services with Node.js and SQL

Education
Bachelor of Science in Computer Science
State University 2020

Skills
JavaScript, React, Node.js, SQL
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end screening scenario with fixed inputs"
    )


@pytest.fixture
def sample_resume_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def web_requirements() -> JobRequirements:
    """3 years, JavaScript/React/Node.js, bachelor in Computer Science."""
    return JobRequirements(
        minimum_years_of_experience=3,
        required_skills=["JavaScript", "React", "Node.js"],
        required_education=RequiredEducation(
            minimum_degree="bachelor",
            preferred_fields=["Computer Science"],
        ),
    )
